"""Order aggregate, the core of the domain.

The Order is an aggregate root that owns its line items.
All business invariants are enforced here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import InvalidStateError, ValidationError
from storefront.domain.model.value_objects import Money, Quantity


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderStatus(Enum):
    PENDING = "pending"
    PREPARING = "preparing"
    READY = "ready"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)

    @staticmethod
    def parse(value: object) -> OrderStatus:
        if isinstance(value, OrderStatus):
            return value
        try:
            return OrderStatus(value)
        except ValueError:
            raise ValidationError("Invalid status") from None


class PaymentStatus(Enum):
    PENDING = "pending"
    PAID = "paid"

    @staticmethod
    def for_method(payment_method: str) -> PaymentStatus:
        """Cash is collected on delivery; every other method is paid up front."""
        if payment_method == "cash":
            return PaymentStatus.PENDING
        return PaymentStatus.PAID


@dataclass(frozen=True)
class OrderLineItem:
    """Captures the product's name and price at order-creation time.

    Frozen: later catalog edits never reach an existing order.
    """

    product_id: str
    product_name: str
    unit_price: Money
    quantity: Quantity

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for customer orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules.  The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: int | None
    user_id: str
    items: list[OrderLineItem]
    total_amount: Money
    payment_method: str
    payment_status: PaymentStatus
    delivery_address: str
    notes: str | None = None
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        user_id: str,
        items: list[OrderLineItem],
        payment_method: str,
        delivery_address: str,
        notes: str | None = None,
        total_amount: Money | None = None,
    ) -> Order:
        """Create a new pending order, enforcing all invariants.

        ``total_amount`` is the total priced alongside the line items (see
        ``PricingSnapshotBuilder``); it must equal the sum of their line
        totals. Without it the total is summed here. Either way it is fixed
        now and never recomputed afterwards.
        """
        if not items:
            raise ValidationError("No items in order")

        errors: list[str] = []
        if not user_id or not user_id.strip():
            errors.append("Order must belong to a user")
        if not payment_method or not payment_method.strip():
            errors.append("Please provide a payment method")
        if not delivery_address or not delivery_address.strip():
            errors.append("Please provide a delivery address")
        if errors:
            raise ValidationError("; ".join(errors), errors=errors)

        items_total = Money.zero()
        for item in items:
            items_total = items_total + item.line_total
        if total_amount is not None and total_amount != items_total:
            raise ValidationError(
                f"Order total {total_amount} does not match its items ({items_total})"
            )

        method = payment_method.strip().lower()
        now = _utcnow()
        return Order(
            id=None,
            user_id=user_id,
            items=list(items),
            total_amount=total_amount if total_amount is not None else items_total,
            payment_method=method,
            payment_status=PaymentStatus.for_method(method),
            delivery_address=delivery_address.strip(),
            notes=notes.strip() if notes and notes.strip() else None,
            created_at=now,
            updated_at=now,
        )

    # --- State transitions ----------------------------------------------------

    def change_status(self, new_status: OrderStatus) -> None:
        """Set any valid status directly.

        Staff may move an order to any status (e.g. pending -> ready);
        no adjacency between states is required.
        """
        self.status = new_status
        self.updated_at = _utcnow()

    def cancel(self) -> None:
        """Transition PENDING -> CANCELLED. Orders are never deleted."""
        if self.status != OrderStatus.PENDING:
            raise InvalidStateError("Can only cancel pending orders")
        self.status = OrderStatus.CANCELLED
        self.updated_at = _utcnow()

    # --- Queries --------------------------------------------------------------

    def is_owned_by(self, user_id: str) -> bool:
        return self.user_id == user_id

    @property
    def counts_as_sale(self) -> bool:
        return self.status != OrderStatus.CANCELLED
