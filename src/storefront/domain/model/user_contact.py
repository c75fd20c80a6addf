"""Contact details of a storefront user, shown alongside their orders."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UserContact:
    user_id: str
    name: str
    email: str
    phone: str | None = None
