"""CLI commands for the user contact directory."""

from __future__ import annotations

import click

from storefront.application.save_user_contact import SaveUserContactHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.cli.context import CliContext, pass_cli_context


@click.command("add")
@click.option("--id", "user_id", required=True, help="User id issued by the auth service.")
@click.option("--name", required=True, help="Display name.")
@click.option("--email", required=True, help="Email address.")
@click.option("--phone", default=None, help="Phone number.")
@pass_cli_context
def user_add(ctx: CliContext, user_id: str, name: str, email: str, phone: str | None) -> None:
    """Record (or replace) a user's contact details (admin)."""
    handler = SaveUserContactHandler(ctx.store.users)

    try:
        contact = handler.handle(
            ctx.requester(), user_id=user_id, name=name, email=email, phone=phone
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User '{contact.user_id}' saved ({contact.email})")
