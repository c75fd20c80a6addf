"""Integration tests for showing and listing orders."""

from datetime import datetime, timezone

import pytest

from storefront.application.list_orders import ListMyOrdersHandler, ListOrdersHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.domain.exceptions import EntityNotFoundError, ForbiddenError, ValidationError
from storefront.domain.model.order import Order, OrderLineItem, OrderStatus
from storefront.domain.model.product import Product
from storefront.domain.model.requester import Requester, Role
from storefront.domain.model.value_objects import DateRange, Money, Quantity
from tests.fakes import FakeOrderRepository, FakeProductRepository, FakeUserRepository


def _order(order_id: int, user_id: str, day: int, status=OrderStatus.PENDING) -> Order:
    created = datetime(2024, 5, day, 12, tzinfo=timezone.utc)
    item = OrderLineItem("1", "Margherita", Money.of("12.99"), Quantity(1))
    order = Order.create(user_id, [item], "card", "12 High Street")
    order.id = order_id
    order.status = status
    order.created_at = order.updated_at = created
    return order


def _repos():
    orders = FakeOrderRepository([
        _order(1, "alice", 1),
        _order(2, "bob", 2, OrderStatus.DELIVERED),
        _order(3, "alice", 3, OrderStatus.CANCELLED),
    ])
    products = FakeProductRepository([
        Product.create("1", "Margherita", "Cheese and tomato", "pizza", "12.99"),
    ])
    return orders, products, FakeUserRepository()


class TestShowOrder:

    def test_owner_sees_order(self):
        handler = ShowOrderHandler(*_repos())
        assert handler.handle(1, Requester("alice")).id == 1

    def test_staff_sees_any_order(self):
        handler = ShowOrderHandler(*_repos())
        assert handler.handle(2, Requester("kitchen", Role.STAFF)).user_id == "bob"

    def test_other_customer_forbidden(self):
        handler = ShowOrderHandler(*_repos())
        with pytest.raises(ForbiddenError, match="Not authorized to view this order"):
            handler.handle(2, Requester("alice"))

    def test_missing_order(self):
        handler = ShowOrderHandler(*_repos())
        with pytest.raises(EntityNotFoundError, match="Order not found"):
            handler.handle(42, Requester("alice"))

    def test_deleted_product_loses_live_fields_only(self):
        orders, products, users = _repos()
        products.delete("1")
        dto = ShowOrderHandler(orders, products, users).handle(1, Requester("alice"))
        assert dto.items[0].product is None
        assert dto.items[0].name == "Margherita"
        assert dto.user is None


class TestListMyOrders:

    def test_only_own_orders_newest_first(self):
        dtos = ListMyOrdersHandler(*_repos()).handle(Requester("alice"))
        assert [d.id for d in dtos] == [3, 1]

    def test_no_orders(self):
        assert ListMyOrdersHandler(*_repos()).handle(Requester("carol")) == []


class TestListOrders:

    def test_all_orders_newest_first(self):
        dtos = ListOrdersHandler(*_repos()).handle(Requester("boss", Role.ADMIN))
        assert [d.id for d in dtos] == [3, 2, 1]

    def test_status_filter(self):
        dtos = ListOrdersHandler(*_repos()).handle(
            Requester("kitchen", Role.STAFF), status="delivered"
        )
        assert [d.id for d in dtos] == [2]

    def test_date_filter_is_inclusive(self):
        window = DateRange(
            datetime(2024, 5, 2, 12, tzinfo=timezone.utc),
            datetime(2024, 5, 3, 12, tzinfo=timezone.utc),
        )
        dtos = ListOrdersHandler(*_repos()).handle(
            Requester("boss", Role.ADMIN), date_range=window
        )
        assert [d.id for d in dtos] == [3, 2]

    def test_customers_forbidden(self):
        with pytest.raises(ForbiddenError):
            ListOrdersHandler(*_repos()).handle(Requester("alice"))

    def test_bad_status_filter(self):
        with pytest.raises(ValidationError, match="Invalid status"):
            ListOrdersHandler(*_repos()).handle(Requester("boss", Role.ADMIN), status="lost")
