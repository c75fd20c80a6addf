"""Application service: Cancel Order use case.

Only the customer who placed the order may cancel it, and only while it
is still pending. Cancelled orders stay in the store for reporting.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO
from storefront.application.order_view import OrderViewBuilder
from storefront.domain.exceptions import EntityNotFoundError, ForbiddenError
from storefront.domain.model.requester import Requester
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository

logger = structlog.get_logger(__name__)


class CancelOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        user_repo: UserRepository,
    ) -> None:
        self._order_repo = order_repo
        self._view = OrderViewBuilder(product_repo, user_repo)

    def handle(self, order_id: int, requester: Requester) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order not found")

        if not order.is_owned_by(requester.user_id):
            raise ForbiddenError("Not authorized to cancel this order")

        order.cancel()
        self._order_repo.save(order)

        logger.info("Order cancelled", order_id=order.id, user_id=order.user_id)
        return self._view.build(order)
