from __future__ import annotations

import click

from storefront.infrastructure.bootstrap import open_store
from storefront.infrastructure.cli.context import CliContext
from storefront.infrastructure.cli.order_commands import (
    order_cancel,
    order_create,
    order_list,
    order_mine,
    order_show,
    order_stats,
    order_status,
)
from storefront.infrastructure.cli.product_commands import (
    product_add,
    product_categories,
    product_delete,
    product_list,
    product_seed,
    product_show,
    product_update,
)
from storefront.infrastructure.cli.user_commands import user_add
from storefront.infrastructure.config import Settings
from storefront.infrastructure.logging import configure_logging


@click.group()
@click.option("--user", "user_id", envvar="STOREFRONT_USER", default=None,
              help="Acting user id (as issued by the auth service).")
@click.option("--role", envvar="STOREFRONT_ROLE", default="customer", show_default=True,
              type=click.Choice(["customer", "staff", "admin"]), help="Acting user's role.")
@click.pass_context
def cli(ctx: click.Context, user_id: str | None, role: str) -> None:
    """Storefront: menu, orders and sales reports."""
    settings = Settings.from_env()
    configure_logging(settings)
    ctx.obj = CliContext(store=open_store(settings), user_id=user_id, role=role)


@cli.group()
def order() -> None:
    """Manage orders."""


@cli.group()
def product() -> None:
    """Manage the catalog."""


@cli.group()
def user() -> None:
    """Manage user contact details."""


# Register subcommands
order.add_command(order_cancel)
order.add_command(order_create)
order.add_command(order_list)
order.add_command(order_mine)
order.add_command(order_show)
order.add_command(order_stats)
order.add_command(order_status)
product.add_command(product_add)
product.add_command(product_categories)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_seed)
product.add_command(product_show)
product.add_command(product_update)
user.add_command(user_add)
