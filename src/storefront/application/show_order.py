"""Application service: Show Order use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.application.order_view import OrderViewBuilder
from storefront.domain.exceptions import EntityNotFoundError, ForbiddenError
from storefront.domain.model.requester import Requester
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.authorization import can_access_order


class ShowOrderHandler:

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
        if not can_access_order(requester, order):
            raise ForbiddenError("Not authorized to view this order")
        return self._view.build(order)
