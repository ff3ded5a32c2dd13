"""Application service: Get Product use case (query)."""

from __future__ import annotations

import logging
from uuid import UUID

from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class GetProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: UUID) -> Product:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            logger.info("Product %s not found", product_id)
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return product
