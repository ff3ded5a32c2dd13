"""Abstract repository for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (in-memory, JSON)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from uuid import UUID

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every stored product, in insertion order."""

    @abstractmethod
    def get_by_id(self, product_id: UUID) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def add(self, product: Product) -> None:
        """Store a product, overwriting any entry with the same ID."""

    @abstractmethod
    def update(self, product: Product) -> None:
        """Replace the stored product with the same ID; ignore unknown IDs."""

    @abstractmethod
    def delete(self, product_id: UUID) -> None:
        """Remove the product with this ID if present."""
