"""FastAPI routes for orders and sales statistics."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.application.dto import OrderItemSpec
from storefront.application.list_orders import ListMyOrdersHandler, ListOrdersHandler
from storefront.application.order_stats import OrderStatsHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.model.requester import Requester, Role
from storefront.domain.model.value_objects import DateRange
from storefront.infrastructure.api.dependencies import (
    get_requester,
    get_store,
    requester_with_role,
)
from storefront.infrastructure.api.responses import envelope
from storefront.infrastructure.api.schemas import CreateOrderRequest, UpdateStatusRequest
from storefront.infrastructure.bootstrap import Store

order_router = APIRouter(prefix="/api/orders", tags=["orders"])


@order_router.post("", status_code=201)
def create_order(
    body: CreateOrderRequest,
    requester: Requester = Depends(get_requester),
    store: Store = Depends(get_store),
) -> JSONResponse:
    handler = CreateOrderHandler(store.orders, store.products, store.users)
    dto = handler.handle(
        requester,
        [OrderItemSpec(product_id=i.product, quantity=i.quantity) for i in body.items],
        payment_method=body.payment_method,
        delivery_address=body.delivery_address,
        notes=body.notes,
    )
    return envelope(dto.to_dict(), status_code=201)


@order_router.get("/myorders")
def my_orders(
    requester: Requester = Depends(requester_with_role(Role.CUSTOMER)),
    store: Store = Depends(get_store),
) -> JSONResponse:
    orders = ListMyOrdersHandler(store.orders, store.products, store.users).handle(requester)
    return envelope([o.to_dict() for o in orders], count=len(orders))


@order_router.get("/stats/all")
def order_stats(
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    requester: Requester = Depends(requester_with_role(Role.ADMIN)),
    store: Store = Depends(get_store),
) -> JSONResponse:
    report = OrderStatsHandler(store.orders).handle(
        requester, DateRange.parse(start_date, end_date)
    )
    return envelope(report.to_dict())


@order_router.get("/{order_id}")
def get_order(
    order_id: int,
    requester: Requester = Depends(get_requester),
    store: Store = Depends(get_store),
) -> JSONResponse:
    dto = ShowOrderHandler(store.orders, store.products, store.users).handle(order_id, requester)
    return envelope(dto.to_dict())


@order_router.get("")
def list_orders(
    status: str | None = None,
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
    requester: Requester = Depends(requester_with_role(Role.ADMIN, Role.STAFF)),
    store: Store = Depends(get_store),
) -> JSONResponse:
    handler = ListOrdersHandler(store.orders, store.products, store.users)
    orders = handler.handle(
        requester, status=status, date_range=DateRange.parse(start_date, end_date)
    )
    return envelope([o.to_dict() for o in orders], count=len(orders))


@order_router.put("/{order_id}/status")
def update_order_status(
    order_id: int,
    body: UpdateStatusRequest,
    requester: Requester = Depends(requester_with_role(Role.ADMIN, Role.STAFF)),
    store: Store = Depends(get_store),
) -> JSONResponse:
    handler = UpdateOrderStatusHandler(store.orders, store.products, store.users)
    dto = handler.handle(order_id, body.status, requester)
    return envelope(dto.to_dict())


@order_router.put("/{order_id}/cancel")
def cancel_order(
    order_id: int,
    requester: Requester = Depends(requester_with_role(Role.CUSTOMER)),
    store: Store = Depends(get_store),
) -> JSONResponse:
    handler = CancelOrderHandler(store.orders, store.products, store.users)
    dto = handler.handle(order_id, requester)
    return envelope(dto.to_dict())
