"""Sales Aggregation Engine.

Summarises historical orders for the admin dashboard. Each sub-aggregate
queries the order store on its own and shares no intermediate state with
the others:

- ``total_sales``       non-cancelled orders in the date filter
- ``orders_by_status``  every order in the date filter, counted per status
- ``daily_sales``       non-cancelled orders of the trailing 30 days, per day
- ``monthly_sales``     non-cancelled orders of all time, per month (latest 12)
- ``top_products``      line items in the date filter, by revenue (top 10)

Calendar buckets are taken in UTC.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from storefront.application.dto import (
    PeriodSalesDTO,
    SalesTotalDTO,
    StatsReportDTO,
    StatusCountDTO,
    TopProductDTO,
)
from storefront.domain.model.order import Order
from storefront.domain.model.value_objects import DateRange
from storefront.domain.repository.order_repository import OrderRepository

DAILY_WINDOW_DAYS = 30
MONTHLY_LIMIT = 12
TOP_PRODUCTS_LIMIT = 10


class SalesAggregationService:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def compute_stats(
        self,
        date_range: DateRange | None = None,
        now: datetime | None = None,
    ) -> StatsReportDTO:
        now = now or datetime.now(timezone.utc)
        return StatsReportDTO(
            total_sales=self.total_sales(date_range),
            orders_by_status=self.orders_by_status(date_range),
            daily_sales=self.daily_sales(now),
            monthly_sales=self.monthly_sales(),
            top_products=self.top_products(date_range),
        )

    # --- Sub-aggregates -------------------------------------------------------

    def total_sales(self, date_range: DateRange | None = None) -> SalesTotalDTO:
        sales = [o for o in self._order_repo.find(date_range=date_range) if o.counts_as_sale]
        if not sales:
            return SalesTotalDTO()
        return SalesTotalDTO(
            total=sum((o.total_amount.amount for o in sales), Decimal("0")),
            count=len(sales),
        )

    def orders_by_status(self, date_range: DateRange | None = None) -> list[StatusCountDTO]:
        counts = Counter(o.status.value for o in self._order_repo.find(date_range=date_range))
        return [StatusCountDTO(status=s, count=counts[s]) for s in sorted(counts)]

    def daily_sales(self, now: datetime) -> list[PeriodSalesDTO]:
        window = DateRange(start=now - timedelta(days=DAILY_WINDOW_DAYS))
        buckets = self._bucket(
            self._order_repo.find(date_range=window),
            lambda moment: moment.date().isoformat(),
        )
        return [buckets[key] for key in sorted(buckets)]

    def monthly_sales(self) -> list[PeriodSalesDTO]:
        buckets = self._bucket(
            self._order_repo.find(),
            lambda moment: moment.strftime("%Y-%m"),
        )
        return [buckets[key] for key in sorted(buckets, reverse=True)[:MONTHLY_LIMIT]]

    def top_products(self, date_range: DateRange | None = None) -> list[TopProductDTO]:
        names: dict[str, str] = {}
        quantities: Counter[str] = Counter()
        revenue: dict[str, Decimal] = {}

        # Oldest first, so the recorded name is the earliest snapshot seen.
        for order in reversed(self._order_repo.find(date_range=date_range)):
            for item in order.items:
                names.setdefault(item.product_id, item.product_name)
                quantities[item.product_id] += item.quantity.value
                revenue[item.product_id] = (
                    revenue.get(item.product_id, Decimal("0")) + item.line_total.amount
                )

        ranked = sorted(names, key=lambda pid: revenue[pid], reverse=True)
        return [
            TopProductDTO(
                product_id=pid,
                name=names[pid],
                total_quantity=quantities[pid],
                total_revenue=revenue[pid],
            )
            for pid in ranked[:TOP_PRODUCTS_LIMIT]
        ]

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _bucket(
        orders: list[Order], key_for: Callable[[datetime], str]
    ) -> dict[str, PeriodSalesDTO]:
        totals: dict[str, Decimal] = {}
        counts: Counter[str] = Counter()
        for order in orders:
            if not order.counts_as_sale:
                continue
            key = key_for(order.created_at.astimezone(timezone.utc))
            totals[key] = totals.get(key, Decimal("0")) + order.total_amount.amount
            counts[key] += 1
        return {
            key: PeriodSalesDTO(period=key, total=totals[key], count=counts[key])
            for key in totals
        }
