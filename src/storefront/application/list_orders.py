"""Application services: order listings (queries).

Customers list their own orders; admin and staff browse every order with
optional status and creation-date filters. Both are newest first.
"""

from __future__ import annotations

from storefront.application.dto import OrderDTO
from storefront.application.order_view import OrderViewBuilder
from storefront.domain.model.order import OrderStatus
from storefront.domain.model.requester import Requester
from storefront.domain.model.value_objects import DateRange
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.product_repository import ProductRepository
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.authorization import STAFF_ROLES, require_role


class ListMyOrdersHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        user_repo: UserRepository,
    ) -> None:
        self._order_repo = order_repo
        self._view = OrderViewBuilder(product_repo, user_repo)

    def handle(self, requester: Requester) -> list[OrderDTO]:
        orders = self._order_repo.find(user_id=requester.user_id)
        return self._view.build_many(orders)


class ListOrdersHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        product_repo: ProductRepository,
        user_repo: UserRepository,
    ) -> None:
        self._order_repo = order_repo
        self._view = OrderViewBuilder(product_repo, user_repo)

    def handle(
        self,
        requester: Requester,
        status: str | None = None,
        date_range: DateRange | None = None,
    ) -> list[OrderDTO]:
        require_role(requester, STAFF_ROLES)

        status_filter = OrderStatus.parse(status) if status else None
        orders = self._order_repo.find(status=status_filter, date_range=date_range)
        return self._view.build_many(orders)
