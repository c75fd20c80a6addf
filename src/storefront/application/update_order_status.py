"""Application service: Update Order Status use case.

Admin and staff may set any of the five statuses directly; there is no
requirement to pass through intermediate states.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import OrderDTO
from storefront.application.order_view import OrderViewBuilder
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.requester import Requester
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.authorization import STAFF_ROLES, require_role

logger = structlog.get_logger(__name__)


class UpdateOrderStatusHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        user_repo: UserRepository,
    ) -> None:
        self._order_repo = order_repo
        self._view = OrderViewBuilder(product_repo, user_repo)

    def handle(self, order_id: int, new_status: str, requester: Requester) -> OrderDTO:
        require_role(requester, STAFF_ROLES)
        status = OrderStatus.parse(new_status)

        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order not found")

        previous = order.status
        order.change_status(status)
        self._order_repo.save(order)

        logger.info(
            "Order status changed",
            order_id=order.id,
            from_status=previous.value,
            to_status=status.value,
            changed_by=requester.user_id,
        )
        return self._view.build(order)
