"""Application service: Sales Statistics use case (admin query)."""

from __future__ import annotations

from datetime import datetime

from storefront.application.dto import StatsReportDTO
from storefront.application.sales_aggregation import SalesAggregationService
from storefront.domain.model.requester import Requester, Role
from storefront.domain.model.value_objects import DateRange
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.authorization import require_role


class OrderStatsHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._service = SalesAggregationService(order_repo)

    def handle(
        self,
        requester: Requester,
        date_range: DateRange | None = None,
        now: datetime | None = None,
    ) -> StatsReportDTO:
        require_role(requester, {Role.ADMIN})
        return self._service.compute_stats(date_range, now=now)
