"""Application service: Create Order use case.

Orchestrates the flow between repositories and the domain model.
This is the only place that coordinates multiple aggregates (Product
lookup + Order creation).
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO, OrderItemSpec
from storefront.application.order_view import OrderViewBuilder
from storefront.domain.exceptions import ValidationError
from storefront.domain.model.order import Order
from storefront.domain.model.requester import Requester
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.pricing_snapshot_service import (
    PricingSnapshotBuilder,
    RequestedItem,
)

logger = structlog.get_logger(__name__)


class CreateOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        user_repo: UserRepository,
    ) -> None:
        self._order_repo = order_repo
        self._product_repo = product_repo
        self._view = OrderViewBuilder(product_repo, user_repo)

    def handle(
        self,
        requester: Requester,
        item_specs: list[OrderItemSpec],
        payment_method: str,
        delivery_address: str,
        notes: str | None = None,
    ) -> OrderDTO:
        """Place a new order for the requester.

        Steps:
        1. Reject an empty basket before touching the catalog.
        2. Snapshot each product's *current* name and price.
        3. Let the Order aggregate validate the rest and fix the priced total.
        4. Persist (the only write) and return the resolved view.
        """
        if not item_specs:
            raise ValidationError("No items in order")

        builder = PricingSnapshotBuilder(self._product_repo)
        line_items, total_amount = builder.build_line_items(
            [RequestedItem(spec.product_id, spec.quantity) for spec in item_specs]
        )

        order = Order.create(
            user_id=requester.user_id,
            items=line_items,
            payment_method=payment_method,
            delivery_address=delivery_address,
            notes=notes,
            total_amount=total_amount,
        )
        self._order_repo.save(order)

        logger.info(
            "Order created",
            order_id=order.id,
            user_id=order.user_id,
            item_count=len(order.items),
            total_amount=str(order.total_amount.amount),
            payment_status=order.payment_status.value,
        )
        return self._view.build(order)
