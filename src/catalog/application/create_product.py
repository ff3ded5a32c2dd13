"""Application service: Create Product use case."""

from __future__ import annotations

import logging
from collections.abc import Callable
from decimal import Decimal
from uuid import UUID, uuid4

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class CreateProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        id_factory: Callable[[], UUID] = uuid4,
    ) -> None:
        self._product_repo = product_repo
        self._id_factory = id_factory

    def handle(self, name: str, price: str | int | float | Decimal) -> UUID:
        """Add a new product to the catalog and return its ID."""
        if not isinstance(name, str):
            raise ValidationError(
                f"Product name must be a string, got {type(name).__name__}"
            )
        if not name.strip():
            raise ValidationError("Product name is required")

        product = Product.create(
            name=name.strip(),
            price=Money.of(price),
            id_factory=self._id_factory,
        )
        self._product_repo.add(product)
        logger.info("Created product %s '%s' at %s", product.id, product.name, product.price)
        return product.id
