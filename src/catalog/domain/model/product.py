"""Product entity.

A product is created once and never changes afterwards. Its identity
is fixed at construction time; the only way to get a product with a
given id is to build it with that id.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from uuid import UUID, uuid4

from catalog.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:
    """A catalog item: identity, display name and price."""

    id: UUID
    name: str
    price: Money

    @classmethod
    def create(
        cls,
        name: str,
        price: Money,
        id_factory: Callable[[], UUID] = uuid4,
    ) -> Product:
        """Build a new product with a freshly generated identifier."""
        return cls(id=id_factory(), name=name, price=price)
