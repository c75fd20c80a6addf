"""Unit tests for the pricing snapshot builder."""

import pytest

from storefront.domain.exceptions import EntityNotFoundError, InvalidStateError, ValidationError
from storefront.domain.model.product import Product
from storefront.domain.model.value_objects import Money
from storefront.domain.service.pricing_snapshot_service import (
    PricingSnapshotBuilder,
    RequestedItem,
)
from tests.fakes import FakeProductRepository


def _builder() -> tuple[PricingSnapshotBuilder, FakeProductRepository]:
    repo = FakeProductRepository([
        Product.create("1", "Margherita", "Cheese and tomato", "pizza", "12.99"),
        Product.create("2", "Coca Cola", "330ml can", "drink", "1.99"),
        Product.create("3", "Old Special", "Gone for now", "deal", "9.99", available=False),
    ])
    return PricingSnapshotBuilder(repo), repo


class TestPricingSnapshot:

    def test_builds_items_and_total(self):
        builder, _ = _builder()
        items, total = builder.build_line_items(
            [RequestedItem("1", 2), RequestedItem("2", 1)]
        )
        assert [i.product_name for i in items] == ["Margherita", "Coca Cola"]
        assert total == Money.of("27.97")

    def test_snapshot_survives_catalog_edit(self):
        builder, repo = _builder()
        items, _ = builder.build_line_items([RequestedItem("1", 1)])

        repo.get_by_id("1").update(name="Margherita XL", price="20.00")

        assert items[0].product_name == "Margherita"
        assert items[0].unit_price == Money.of("12.99")

    def test_unknown_product(self):
        builder, _ = _builder()
        with pytest.raises(EntityNotFoundError, match="Product not found: 42"):
            builder.build_line_items([RequestedItem("42", 1)])

    def test_unavailable_product(self):
        builder, _ = _builder()
        with pytest.raises(InvalidStateError, match="Old Special is not available"):
            builder.build_line_items([RequestedItem("3", 1)])

    def test_non_positive_quantity(self):
        builder, _ = _builder()
        with pytest.raises(ValidationError, match="must be positive"):
            builder.build_line_items([RequestedItem("1", 0)])
