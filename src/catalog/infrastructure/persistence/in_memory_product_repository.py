"""In-memory implementation of ProductRepository.

Keeps everything in a dict keyed by product ID. No file I/O, no side
effects; used by the tests and anywhere a throwaway catalog is enough.
"""

from __future__ import annotations

import logging
import threading
from uuid import UUID

from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class InMemoryProductRepository(ProductRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[UUID, Product] = {}
        self._lock = threading.Lock()
        for p in products or []:
            self._store[p.id] = p

    def list_all(self) -> list[Product]:
        with self._lock:
            return list(self._store.values())

    def get_by_id(self, product_id: UUID) -> Product | None:
        with self._lock:
            return self._store.get(product_id)

    def add(self, product: Product) -> None:
        with self._lock:
            self._store[product.id] = product
        logger.debug("Stored product %s", product.id)

    def update(self, product: Product) -> None:
        with self._lock:
            if product.id not in self._store:
                return
            self._store[product.id] = product
        logger.debug("Updated product %s", product.id)

    def delete(self, product_id: UUID) -> None:
        with self._lock:
            removed = self._store.pop(product_id, None)
        if removed is not None:
            logger.debug("Deleted product %s", product_id)
