"""Domain service: role and ownership checks.

Every order use case asks the same two questions ("does the caller hold
one of these roles?" and "may the caller see this order?"), so they are
answered here once.
"""

from __future__ import annotations

from collections.abc import Iterable

from storefront.domain.exceptions import ForbiddenError
from storefront.domain.model.order import Order
from storefront.domain.model.requester import Requester, Role

STAFF_ROLES = frozenset({Role.ADMIN, Role.STAFF})


def has_role(requester: Requester, allowed: Iterable[Role]) -> bool:
    return requester.role in set(allowed)


def can_access_order(requester: Requester, order: Order) -> bool:
    """Owners see their own orders; admin and staff see every order."""
    return order.is_owned_by(requester.user_id) or has_role(requester, STAFF_ROLES)


def require_role(requester: Requester, allowed: Iterable[Role]) -> None:
    if not has_role(requester, allowed):
        raise ForbiddenError(
            f"User role '{requester.role.value}' is not authorized to access this route"
        )
