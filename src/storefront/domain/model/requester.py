"""The authenticated caller of an operation.

Authentication happens outside this system; the storefront only receives
the resulting identity and role.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.domain.exceptions import ValidationError


class Role(Enum):
    CUSTOMER = "customer"
    STAFF = "staff"
    ADMIN = "admin"

    @staticmethod
    def parse(value: str) -> Role:
        try:
            return Role(str(value).strip().lower())
        except ValueError:
            raise ValidationError(f"Unknown role '{value}'") from None


@dataclass(frozen=True)
class Requester:
    user_id: str
    role: Role = Role.CUSTOMER

    def __post_init__(self) -> None:
        if not self.user_id or not self.user_id.strip():
            raise ValidationError("Requester user id is required")
