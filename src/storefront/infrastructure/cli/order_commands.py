"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.cancel_order import CancelOrderHandler
from storefront.application.create_order import CreateOrderHandler
from storefront.application.dto import OrderDTO, OrderItemSpec, StatsReportDTO
from storefront.application.list_orders import ListMyOrdersHandler, ListOrdersHandler
from storefront.application.order_stats import OrderStatsHandler
from storefront.application.show_order import ShowOrderHandler
from storefront.application.update_order_status import UpdateOrderStatusHandler
from storefront.domain.exceptions import DomainException
from storefront.domain.model.value_objects import DateRange
from storefront.infrastructure.cli.context import CliContext, pass_cli_context


def _parse_items(raw: str) -> list[OrderItemSpec]:
    """Parse '3:2,8:1' (product id : quantity) into OrderItemSpec list."""
    specs: list[OrderItemSpec] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if not pair:
            continue
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        product_id, qty_str = pair.rsplit(":", 1)
        try:
            qty = int(qty_str)
        except ValueError:
            raise click.BadParameter(
                f"Invalid quantity '{qty_str}' for product '{product_id}'."
            )
        specs.append(OrderItemSpec(product_id=product_id.strip(), quantity=qty))
    return specs


def _money(amount) -> str:
    return f"£{amount:.2f}"


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (status={dto.status}, payment={dto.payment_status})")
    if dto.user is not None:
        click.echo(f"Customer: {dto.user.name} <{dto.user.email}>")
    else:
        click.echo(f"Customer: {dto.user_id}")
    click.echo(f"Deliver:  {dto.delivery_address}")
    if dto.notes:
        click.echo(f"Notes:    {dto.notes}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo()
    click.echo(f"  {'Product':<24} {'Qty':>5} {'Price':>10} {'Total':>10}")
    click.echo(f"  {'-'*51}")
    for item in dto.items:
        click.echo(
            f"  {item.name:<24} {item.quantity:>5} "
            f"{_money(item.price):>10} {_money(item.line_total):>10}"
        )
    click.echo(f"  {'-'*51}")
    click.echo(f"  {'Order Total':<31} {_money(dto.total_amount):>20}")


def _display_summary(orders: list[OrderDTO]) -> None:
    if not orders:
        click.echo("No orders found.")
        return
    click.echo(f"{'ID':<6} {'Status':<10} {'Customer':<16} {'Total':>10}  Created")
    click.echo("-" * 70)
    for dto in orders:
        click.echo(
            f"{dto.id:<6} {dto.status:<10} {dto.user_id:<16} "
            f"{_money(dto.total_amount):>10}  {dto.created_at}"
        )
    click.echo(f"\n{len(orders)} order(s)")


@click.command("create")
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--payment", "payment_method", required=True, help="Payment method, e.g. cash or card.")
@click.option("--address", "delivery_address", required=True, help="Delivery address.")
@click.option("--notes", default=None, help="Optional notes for the kitchen or driver.")
@pass_cli_context
def order_create(
    ctx: CliContext,
    items: str,
    payment_method: str,
    delivery_address: str,
    notes: str | None,
) -> None:
    """Place a new order as the acting user."""
    specs = _parse_items(items)
    store = ctx.store
    handler = CreateOrderHandler(store.orders, store.products, store.users)

    try:
        dto = handler.handle(
            ctx.requester(),
            specs,
            payment_method=payment_method,
            delivery_address=delivery_address,
            notes=notes,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Order created.")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@pass_cli_context
def order_show(ctx: CliContext, order_id: int) -> None:
    """Show details of an existing order."""
    store = ctx.store
    handler = ShowOrderHandler(store.orders, store.products, store.users)

    try:
        dto = handler.handle(order_id, ctx.requester())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_order(dto)


@click.command("mine")
@pass_cli_context
def order_mine(ctx: CliContext) -> None:
    """List the acting user's orders, newest first."""
    store = ctx.store
    handler = ListMyOrdersHandler(store.orders, store.products, store.users)
    _display_summary(handler.handle(ctx.requester()))


@click.command("list")
@click.option("--status", default=None, help="Only orders in this status.")
@click.option("--from", "start", default=None, help="Created on/after (ISO date).")
@click.option("--to", "end", default=None, help="Created on/before (ISO date).")
@pass_cli_context
def order_list(ctx: CliContext, status: str | None, start: str | None, end: str | None) -> None:
    """List all orders (admin/staff)."""
    store = ctx.store
    handler = ListOrdersHandler(store.orders, store.products, store.users)

    try:
        orders = handler.handle(
            ctx.requester(), status=status, date_range=DateRange.parse(start, end)
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_summary(orders)


@click.command("status")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to update.")
@click.option("--set", "new_status", required=True, help="New status.")
@pass_cli_context
def order_status(ctx: CliContext, order_id: int, new_status: str) -> None:
    """Set an order's status (admin/staff)."""
    store = ctx.store
    handler = UpdateOrderStatusHandler(store.orders, store.products, store.users)

    try:
        dto = handler.handle(order_id, new_status, ctx.requester())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{dto.id} is now {dto.status}.")


@click.command("cancel")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to cancel.")
@pass_cli_context
def order_cancel(ctx: CliContext, order_id: int) -> None:
    """Cancel one of your own pending orders."""
    store = ctx.store
    handler = CancelOrderHandler(store.orders, store.products, store.users)

    try:
        handler.handle(order_id, ctx.requester())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Order #{order_id} cancelled.")


def _display_stats(report: StatsReportDTO) -> None:
    click.echo(
        f"Total sales: {_money(report.total_sales.total)} "
        f"across {report.total_sales.count} order(s)"
    )

    click.echo("\nOrders by status:")
    for row in report.orders_by_status:
        click.echo(f"  {row.status:<12} {row.count:>6}")

    click.echo("\nDaily sales (last 30 days):")
    for day in report.daily_sales:
        click.echo(f"  {day.period:<12} {_money(day.total):>12} {day.count:>6}")

    click.echo("\nMonthly sales:")
    for month in report.monthly_sales:
        click.echo(f"  {month.period:<12} {_money(month.total):>12} {month.count:>6}")

    click.echo("\nTop products:")
    for top in report.top_products:
        click.echo(
            f"  {top.name:<24} {top.total_quantity:>6} {_money(top.total_revenue):>12}"
        )


@click.command("stats")
@click.option("--from", "start", default=None, help="Created on/after (ISO date).")
@click.option("--to", "end", default=None, help="Created on/before (ISO date).")
@pass_cli_context
def order_stats(ctx: CliContext, start: str | None, end: str | None) -> None:
    """Show the sales report (admin)."""
    handler = OrderStatsHandler(ctx.store.orders)

    try:
        report = handler.handle(ctx.requester(), DateRange.parse(start, end))
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_stats(report)
