"""Domain service: Pricing Snapshot Builder.

Resolves requested items against the catalog and freezes each product's
name and price into a line item. It only reads from the catalog, and
fails fast on the first bad item, so a rejected request leaves nothing
behind.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import EntityNotFoundError, InvalidStateError
from storefront.domain.model.order import OrderLineItem
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.product_repository import ProductRepository


@dataclass(frozen=True)
class RequestedItem:
    product_id: str
    quantity: int


class PricingSnapshotBuilder:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def build_line_items(
        self, requested: list[RequestedItem]
    ) -> tuple[list[OrderLineItem], Money]:
        """Return the frozen line items and their running total."""
        line_items: list[OrderLineItem] = []
        total = Money.zero()

        for entry in requested:
            product = self._product_repo.get_by_id(entry.product_id)
            if product is None:
                raise EntityNotFoundError(f"Product not found: {entry.product_id}")
            if not product.available:
                raise InvalidStateError(f"{product.name} is not available")

            item = OrderLineItem(
                product_id=product.id,
                product_name=product.name,
                unit_price=product.price,  # <-- price snapshot
                quantity=Quantity(entry.quantity),
            )
            line_items.append(item)
            total = total + item.line_total

        return line_items, total
