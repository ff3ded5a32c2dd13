"""Unit tests for the Product entity."""

import dataclasses
from uuid import UUID

import pytest

from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from tests.fakes import SequentialIdFactory


class TestProductCreate:

    def test_assigns_generated_id(self):
        product = Product.create("Widget", Money.of("15.00"))
        assert isinstance(product.id, UUID)
        assert product.name == "Widget"
        assert product.price == Money.of("15.00")

    def test_ids_are_unique(self):
        first = Product.create("Widget", Money.of("1"))
        second = Product.create("Widget", Money.of("1"))
        assert first.id != second.id

    def test_uses_injected_id_factory(self):
        ids = SequentialIdFactory()
        product = Product.create("Widget", Money.of("1"), id_factory=ids)
        assert product.id == UUID(int=1)


class TestProductImmutability:

    def test_id_cannot_be_reassigned(self):
        product = Product.create("Widget", Money.of("1"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            product.id = UUID(int=42)  # type: ignore[misc]

    def test_price_cannot_be_reassigned(self):
        product = Product.create("Widget", Money.of("1"))
        with pytest.raises(dataclasses.FrozenInstanceError):
            product.price = Money.of("2")  # type: ignore[misc]
