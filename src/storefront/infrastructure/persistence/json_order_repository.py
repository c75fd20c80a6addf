"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.order import (
    Order,
    OrderLineItem,
    OrderStatus,
    PaymentStatus,
)
from storefront.domain.model.value_objects import DateRange, Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        orders = self._file.read()
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._file.read():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def find(
        self,
        user_id: str | None = None,
        status: OrderStatus | None = None,
        date_range: DateRange | None = None,
    ) -> list[Order]:
        matches = []
        for order in (self._to_domain(raw) for raw in self._file.read()):
            if user_id is not None and order.user_id != user_id:
                continue
            if status is not None and order.status != status:
                continue
            if date_range is not None and not date_range.contains(order.created_at):
                continue
            matches.append(order)
        return sorted(matches, key=lambda o: (o.created_at, o.id), reverse=True)

    def save(self, order: Order) -> None:
        with self._file.lock:
            orders = self._file.read()

            if order.id is None:
                order.id = max((o["id"] for o in orders), default=0) + 1

            # Upsert: replace if exists, otherwise append
            replaced = False
            for i, raw in enumerate(orders):
                if raw["id"] == order.id:
                    orders[i] = self._to_raw(order)
                    replaced = True
                    break
            if not replaced:
                orders.append(self._to_raw(order))

            self._file.write(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "user_id": order.user_id,
            "items": [
                {
                    "product_id": item.product_id,
                    "name": item.product_name,
                    "price": str(item.unit_price.amount),
                    "currency": item.unit_price.currency,
                    "quantity": item.quantity.value,
                }
                for item in order.items
            ],
            "total_amount": str(order.total_amount.amount),
            "currency": order.total_amount.currency,
            "payment_method": order.payment_method,
            "payment_status": order.payment_status.value,
            "delivery_address": order.delivery_address,
            "notes": order.notes,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "updated_at": order.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        items = [
            OrderLineItem(
                product_id=i["product_id"],
                product_name=i["name"],
                unit_price=Money(Decimal(i["price"]), i.get("currency", "GBP")),
                quantity=Quantity(i["quantity"]),
            )
            for i in raw["items"]
        ]
        return Order(
            id=raw["id"],
            user_id=raw["user_id"],
            items=items,
            total_amount=Money(Decimal(raw["total_amount"]), raw.get("currency", "GBP")),
            payment_method=raw["payment_method"],
            payment_status=PaymentStatus(raw["payment_status"]),
            delivery_address=raw["delivery_address"],
            notes=raw.get("notes"),
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )

