"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from storefront.application.add_product import AddProductHandler
from storefront.application.browse_catalog import (
    ListCategoriesHandler,
    ListProductsHandler,
    ShowProductHandler,
)
from storefront.application.delete_product import DeleteProductHandler
from storefront.application.seed_products import SeedProductsHandler
from storefront.application.update_product import UpdateProductHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.cli.context import CliContext, pass_cli_context


@click.command("list")
@click.option("--category", default=None, help="Only this category.")
@click.option("--search", default=None, help="Name contains (case-insensitive).")
@click.option("--available", type=bool, default=None, help="Filter by availability (true/false).")
@pass_cli_context
def product_list(
    ctx: CliContext,
    category: str | None,
    search: str | None,
    available: bool | None,
) -> None:
    """List products in the catalog, newest first."""
    handler = ListProductsHandler(ctx.store.products)

    try:
        products = handler.handle(category=category, search=search, available=available)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<24} {'Category':<10} {'Price':>10}  Available")
    click.echo("-" * 64)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<24} {p.category:<10} {f'£{p.price:.2f}':>10}  "
            f"{'yes' if p.available else 'no'}"
        )


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
@pass_cli_context
def product_show(ctx: CliContext, product_id: str) -> None:
    """Show one product."""
    handler = ShowProductHandler(ctx.store.products)

    try:
        p = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{p.id} '{p.name}' ({p.category}) £{p.price:.2f}")
    click.echo(p.description)
    click.echo(f"Image: {p.image}")
    click.echo(f"Available: {'yes' if p.available else 'no'}")


@click.command("categories")
@pass_cli_context
def product_categories(ctx: CliContext) -> None:
    """List the categories currently in use."""
    for category in ListCategoriesHandler(ctx.store.products).handle():
        click.echo(category)


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--description", required=True, help="Short description.")
@click.option("--category", required=True, help="pizza, burger, drink, deal, side or dessert.")
@click.option("--price", required=True, help="Price (e.g. 12.99).")
@click.option("--image", default=None, help="Image URL.")
@click.option("--unavailable", is_flag=True, default=False, help="Add as unavailable.")
@pass_cli_context
def product_add(
    ctx: CliContext,
    name: str,
    description: str,
    category: str,
    price: str,
    image: str | None,
    unavailable: bool,
) -> None:
    """Add a new product to the catalog (admin)."""
    handler = AddProductHandler(ctx.store.products)

    try:
        product = handler.handle(
            ctx.requester(),
            name=name,
            description=description,
            category=category,
            price=price,
            image=image,
            available=not unavailable,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added at £{product.price:.2f}")


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--description", default=None, help="New description.")
@click.option("--category", default=None, help="New category.")
@click.option("--price", default=None, help="New price (e.g. 13.49).")
@click.option("--image", default=None, help="New image URL.")
@click.option("--available", type=bool, default=None, help="Set availability (true/false).")
@pass_cli_context
def product_update(ctx: CliContext, product_id: str, **fields) -> None:
    """Update a product (admin). Only the given fields change."""
    changes = {key: value for key, value in fields.items() if value is not None}
    if not changes:
        raise click.UsageError("Nothing to update")

    handler = UpdateProductHandler(ctx.store.products)

    try:
        product = handler.handle(ctx.requester(), product_id, **changes)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} updated ({', '.join(sorted(changes))}).")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@pass_cli_context
def product_delete(ctx: CliContext, product_id: str) -> None:
    """Delete a product (admin). Past orders keep their snapshot."""
    handler = DeleteProductHandler(ctx.store.products)

    try:
        handler.handle(ctx.requester(), product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Product deleted successfully")


@click.command("seed")
@pass_cli_context
def product_seed(ctx: CliContext) -> None:
    """Replace the catalog with the demo menu (admin)."""
    handler = SeedProductsHandler(ctx.store.products)

    try:
        products = handler.handle(ctx.requester())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Products seeded successfully ({len(products)} items)")
