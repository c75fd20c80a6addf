"""Tests for the sales report and its sub-aggregates."""

from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from storefront.application.order_stats import OrderStatsHandler
from storefront.application.sales_aggregation import SalesAggregationService
from storefront.domain.exceptions import ForbiddenError
from storefront.domain.model.order import Order, OrderLineItem, OrderStatus
from storefront.domain.model.requester import Requester, Role
from storefront.domain.model.value_objects import DateRange, Money, Quantity
from tests.fakes import FakeOrderRepository

NOW = datetime(2024, 6, 15, 12, tzinfo=timezone.utc)


def _item(product_id: str, name: str, price: str, qty: int) -> OrderLineItem:
    return OrderLineItem(product_id, name, Money.of(price), Quantity(qty))


def _order(created_at: datetime, items: list[OrderLineItem], status=OrderStatus.PENDING) -> Order:
    order = Order.create("u1", items, "card", "12 High Street")
    order.status = status
    order.created_at = order.updated_at = created_at
    return order


class TestTotalSales:

    def test_cancelled_orders_do_not_count(self):
        repo = FakeOrderRepository([
            _order(NOW, [_item("1", "Margherita", "10.00", 1)]),
            _order(NOW, [_item("1", "Margherita", "20.00", 1)], OrderStatus.DELIVERED),
            _order(NOW, [_item("1", "Margherita", "5.00", 1)], OrderStatus.CANCELLED),
        ])
        total = SalesAggregationService(repo).total_sales()
        assert total.total == Decimal("30.00")
        assert total.count == 2

    def test_empty_store_gives_zeroes(self):
        report = SalesAggregationService(FakeOrderRepository()).compute_stats(now=NOW)
        assert report.total_sales.total == Decimal("0")
        assert report.total_sales.count == 0
        assert report.orders_by_status == []
        assert report.daily_sales == []
        assert report.monthly_sales == []
        assert report.top_products == []

    def test_date_filter(self):
        repo = FakeOrderRepository([
            _order(datetime(2024, 5, 1, tzinfo=timezone.utc), [_item("1", "A", "10.00", 1)]),
            _order(datetime(2024, 6, 1, tzinfo=timezone.utc), [_item("1", "A", "7.00", 1)]),
        ])
        total = SalesAggregationService(repo).total_sales(DateRange.parse("2024-06-01", None))
        assert total.total == Decimal("7.00")
        assert total.count == 1


class TestOrdersByStatus:

    def test_counts_every_status_including_cancelled(self):
        repo = FakeOrderRepository([
            _order(NOW, [_item("1", "A", "1.00", 1)]),
            _order(NOW, [_item("1", "A", "1.00", 1)]),
            _order(NOW, [_item("1", "A", "1.00", 1)], OrderStatus.CANCELLED),
        ])
        rows = SalesAggregationService(repo).orders_by_status()
        assert [(r.status, r.count) for r in rows] == [("cancelled", 1), ("pending", 2)]


class TestDailySales:

    def test_trailing_window_ascending(self):
        repo = FakeOrderRepository([
            _order(NOW - timedelta(days=40), [_item("1", "A", "99.00", 1)]),
            _order(NOW - timedelta(days=2), [_item("1", "A", "4.00", 1)]),
            _order(NOW - timedelta(days=2, hours=1), [_item("1", "A", "6.00", 1)]),
            _order(NOW - timedelta(days=1), [_item("1", "A", "3.00", 1)]),
            _order(NOW, [_item("1", "A", "8.00", 1)], OrderStatus.CANCELLED),
        ])
        days = SalesAggregationService(repo).daily_sales(NOW)
        assert [(d.period, d.total, d.count) for d in days] == [
            ("2024-06-13", Decimal("10.00"), 2),
            ("2024-06-14", Decimal("3.00"), 1),
        ]

    def test_buckets_by_utc_day(self):
        late_evening_elsewhere = datetime(2024, 6, 14, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
        repo = FakeOrderRepository([_order(late_evening_elsewhere, [_item("1", "A", "2.00", 1)])])
        days = SalesAggregationService(repo).daily_sales(NOW)
        assert [d.period for d in days] == ["2024-06-15"]


class TestMonthlySales:

    def test_descending_and_capped_at_twelve(self):
        orders = [
            _order(datetime(2023 + (m - 1) // 12, (m - 1) % 12 + 1, 10, tzinfo=timezone.utc),
                   [_item("1", "A", "1.00", 1)])
            for m in range(1, 15)
        ]
        months = SalesAggregationService(FakeOrderRepository(orders)).monthly_sales()
        assert len(months) == 12
        assert months[0].period == "2024-02"
        assert months[-1].period == "2023-03"

    def test_ignores_date_filter(self):
        repo = FakeOrderRepository([
            _order(datetime(2023, 1, 5, tzinfo=timezone.utc), [_item("1", "A", "5.00", 1)]),
        ])
        report = SalesAggregationService(repo).compute_stats(
            DateRange.parse("2024-01-01", None), now=NOW
        )
        assert report.total_sales.count == 0
        assert [m.period for m in report.monthly_sales] == ["2023-01"]


class TestTopProducts:

    def test_ranked_by_revenue(self):
        repo = FakeOrderRepository([
            _order(NOW, [_item("1", "Margherita", "12.99", 2), _item("2", "Cola", "1.99", 10)]),
            _order(NOW, [_item("3", "BBQ", "16.99", 1)]),
        ])
        top = SalesAggregationService(repo).top_products()
        assert [(t.product_id, t.total_quantity, t.total_revenue) for t in top] == [
            ("1", 2, Decimal("25.98")),
            ("2", 10, Decimal("19.90")),
            ("3", 1, Decimal("16.99")),
        ]

    def test_cancelled_orders_still_count(self):
        repo = FakeOrderRepository([
            _order(NOW, [_item("1", "Margherita", "12.99", 1)], OrderStatus.CANCELLED),
        ])
        top = SalesAggregationService(repo).top_products()
        assert top[0].total_revenue == Decimal("12.99")

    def test_keeps_earliest_snapshot_name(self):
        repo = FakeOrderRepository([
            _order(NOW - timedelta(days=3), [_item("1", "Margherita", "12.99", 1)]),
            _order(NOW, [_item("1", "Margherita Classic", "13.49", 1)]),
        ])
        top = SalesAggregationService(repo).top_products()
        assert top[0].name == "Margherita"
        assert top[0].total_revenue == Decimal("26.48")

    def test_capped_at_ten(self):
        items = [_item(str(i), f"P{i}", f"{i}.00", 1) for i in range(1, 13)]
        repo = FakeOrderRepository([_order(NOW, items)])
        top = SalesAggregationService(repo).top_products()
        assert len(top) == 10
        assert top[0].product_id == "12"


class TestOrderStatsHandler:

    def test_admin_only(self):
        with pytest.raises(ForbiddenError):
            OrderStatsHandler(FakeOrderRepository()).handle(Requester("k", Role.STAFF))

    def test_report_serialises_to_plain_json(self):
        repo = FakeOrderRepository([_order(NOW, [_item("1", "A", "2.50", 2)])])
        report = OrderStatsHandler(repo).handle(Requester("boss", Role.ADMIN), now=NOW)
        data = report.to_dict()
        assert data["total_sales"] == {"total": 5.0, "count": 1}
        assert data["daily_sales"] == [{"period": "2024-06-15", "total": 5.0, "count": 1}]


class TestReportScenario:

    def test_cancelled_and_delivered_orders(self):
        repo = FakeOrderRepository([
            _order(NOW, [_item("1", "A", "20.00", 1)], OrderStatus.CANCELLED),
            _order(NOW, [_item("2", "B", "30.00", 1)], OrderStatus.DELIVERED),
        ])
        report = SalesAggregationService(repo).compute_stats(now=NOW)
        assert (report.total_sales.total, report.total_sales.count) == (Decimal("30.00"), 1)
        assert [(r.status, r.count) for r in report.orders_by_status] == [
            ("cancelled", 1),
            ("delivered", 1),
        ]
