"""Pydantic request schemas for the HTTP API.

These are external contracts, kept separate from the application DTOs.
Business rules (empty baskets, unknown statuses, field limits) are left
to the domain so every entry point reports them the same way.
"""

from __future__ import annotations

from decimal import Decimal

from pydantic import BaseModel, Field


class OrderItemRequest(BaseModel):
    product: str
    quantity: int = 1


class CreateOrderRequest(BaseModel):
    items: list[OrderItemRequest] = Field(default_factory=list)
    payment_method: str = ""
    delivery_address: str = ""
    notes: str | None = None

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "items": [{"product": "1", "quantity": 2}],
                    "payment_method": "card",
                    "delivery_address": "12 High Street, Leeds",
                    "notes": "Ring the bell twice",
                }
            ]
        }
    }


class UpdateStatusRequest(BaseModel):
    status: str = ""


class CreateProductRequest(BaseModel):
    name: str | None = None
    description: str | None = None
    category: str | None = None
    price: Decimal | None = None
    image: str | None = None
    available: bool = True


class UpdateProductRequest(BaseModel):
    """Partial update; only the keys present in the body are applied."""

    name: str | None = None
    description: str | None = None
    category: str | None = None
    price: Decimal | None = None
    image: str | None = None
    available: bool | None = None
