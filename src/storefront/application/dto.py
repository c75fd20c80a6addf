"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI/HTTP and application layers without
exposing domain internals to the outside world. ``to_dict`` gives the
JSON shape used by the HTTP API.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from decimal import Decimal
from typing import Any


def _jsonable(value: Any) -> Any:
    if isinstance(value, Decimal):
        return float(value)
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_jsonable(v) for v in value]
    return value


class _Serializable:

    def to_dict(self) -> dict[str, Any]:
        return _jsonable(asdict(self))  # type: ignore[call-overload]


# --- Input -------------------------------------------------------------------


@dataclass(frozen=True)
class OrderItemSpec:
    """Input: what the customer asked for (product id + quantity)."""

    product_id: str
    quantity: int


# --- Catalog output ----------------------------------------------------------


@dataclass(frozen=True)
class ProductDTO(_Serializable):
    id: str
    name: str
    description: str
    category: str
    price: Decimal
    image: str
    available: bool
    created_at: str


@dataclass(frozen=True)
class ProductSummaryDTO(_Serializable):
    """Current catalog display fields attached to an order's line item."""

    name: str
    description: str
    image: str
    price: Decimal


# --- Order output ------------------------------------------------------------


@dataclass(frozen=True)
class UserContactDTO(_Serializable):
    id: str
    name: str
    email: str
    phone: str | None


@dataclass(frozen=True)
class OrderLineItemDTO(_Serializable):
    """A single line item; ``name`` and ``price`` are the order-time snapshot."""

    product_id: str
    name: str
    price: Decimal
    quantity: int
    line_total: Decimal
    product: ProductSummaryDTO | None = None


@dataclass(frozen=True)
class OrderDTO(_Serializable):
    id: int
    user_id: str
    items: list[OrderLineItemDTO]
    total_amount: Decimal
    payment_method: str
    payment_status: str
    delivery_address: str
    notes: str | None
    status: str
    created_at: str
    updated_at: str
    user: UserContactDTO | None = None


# --- Reporting output ----------------------------------------------------------


@dataclass(frozen=True)
class SalesTotalDTO(_Serializable):
    total: Decimal = Decimal("0")
    count: int = 0


@dataclass(frozen=True)
class StatusCountDTO(_Serializable):
    status: str
    count: int


@dataclass(frozen=True)
class PeriodSalesDTO(_Serializable):
    """Sales for one calendar bucket: ``2024-05-01`` (day) or ``2024-05`` (month)."""

    period: str
    total: Decimal
    count: int


@dataclass(frozen=True)
class TopProductDTO(_Serializable):
    product_id: str
    name: str
    total_quantity: int
    total_revenue: Decimal


@dataclass(frozen=True)
class StatsReportDTO(_Serializable):
    total_sales: SalesTotalDTO
    orders_by_status: list[StatusCountDTO] = field(default_factory=list)
    daily_sales: list[PeriodSalesDTO] = field(default_factory=list)
    monthly_sales: list[PeriodSalesDTO] = field(default_factory=list)
    top_products: list[TopProductDTO] = field(default_factory=list)
