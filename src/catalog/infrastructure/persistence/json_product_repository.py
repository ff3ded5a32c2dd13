"""JSON-file-backed implementation of ProductRepository.

The whole catalog lives in one JSON array. Every mutation rewrites the
file through a sibling temp file and ``os.replace``, so a reader never
sees a half-written catalog.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from decimal import Decimal, InvalidOperation
from pathlib import Path
from uuid import UUID

from catalog.domain.exceptions import StorageError, ValidationError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.Lock()
        if not file_path.exists():
            file_path.parent.mkdir(parents=True, exist_ok=True)
            self._write({})

    # --- ProductRepository interface ------------------------------------------

    def list_all(self) -> list[Product]:
        with self._lock:
            return list(self._read().values())

    def get_by_id(self, product_id: UUID) -> Product | None:
        with self._lock:
            return self._read().get(product_id)

    def add(self, product: Product) -> None:
        with self._lock:
            catalog = self._read()
            catalog[product.id] = product
            self._write(catalog)
        logger.debug("Stored product %s in %s", product.id, self._file_path)

    def update(self, product: Product) -> None:
        with self._lock:
            catalog = self._read()
            if product.id not in catalog:
                return
            catalog[product.id] = product
            self._write(catalog)
        logger.debug("Updated product %s in %s", product.id, self._file_path)

    def delete(self, product_id: UUID) -> None:
        with self._lock:
            catalog = self._read()
            if catalog.pop(product_id, None) is None:
                return
            self._write(catalog)
        logger.debug("Deleted product %s from %s", product_id, self._file_path)

    # --- File format ----------------------------------------------------------

    def _read(self) -> dict[UUID, Product]:
        text = self._file_path.read_text(encoding="utf-8")
        if not text.strip():
            return {}
        try:
            rows = json.loads(text)
            products = [self._from_row(row) for row in rows]
        except (ValueError, KeyError, TypeError, InvalidOperation, ValidationError) as exc:
            raise StorageError(
                f"Cannot read product catalog {self._file_path}: {exc}"
            ) from exc
        return {p.id: p for p in products}

    def _write(self, catalog: dict[UUID, Product]) -> None:
        payload = json.dumps([self._to_row(p) for p in catalog.values()], indent=2) + "\n"
        fd, tmp_name = tempfile.mkstemp(
            dir=self._file_path.parent, prefix=".products-", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
            os.replace(tmp_name, self._file_path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    @staticmethod
    def _from_row(row: dict) -> Product:
        return Product(
            id=UUID(row["id"]),
            name=row["name"],
            price=Money(Decimal(row["price"]), row.get("currency", "USD")),
        )

    @staticmethod
    def _to_row(product: Product) -> dict[str, str]:
        return {
            "id": str(product.id),
            "name": product.name,
            "price": str(product.price.amount),
            "currency": product.price.currency,
        }
