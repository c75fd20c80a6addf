"""State shared by every CLI command of one invocation."""

from __future__ import annotations

from dataclasses import dataclass

import click

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.requester import Requester, Role
from storefront.infrastructure.bootstrap import Store


@dataclass
class CliContext:
    store: Store
    user_id: str | None
    role: str

    def requester(self) -> Requester:
        """The acting identity; commands on private data cannot run without one."""
        if not self.user_id:
            raise click.UsageError("This command requires --user")
        try:
            return Requester(user_id=self.user_id, role=Role.parse(self.role))
        except ValidationError as exc:
            raise click.UsageError(str(exc))


pass_cli_context = click.make_pass_decorator(CliContext)
