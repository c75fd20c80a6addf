"""FastAPI dependencies: the store handle and the calling identity.

Authentication is done upstream (gateway or auth service), which forwards
the verified identity in the ``X-User-Id`` and ``X-User-Role`` headers.
"""

from __future__ import annotations

from collections.abc import Callable

from fastapi import Depends, Header, HTTPException, Request

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.requester import Requester, Role
from storefront.domain.service.authorization import require_role
from storefront.infrastructure.bootstrap import Store, open_store


def get_store(request: Request) -> Store:
    return open_store(request.app.state.settings)


def get_requester(
    x_user_id: str | None = Header(default=None),
    x_user_role: str | None = Header(default=None),
) -> Requester:
    if not x_user_id or not x_user_id.strip():
        raise HTTPException(status_code=401, detail="Not authorized, no identity")
    try:
        role = Role.parse(x_user_role) if x_user_role else Role.CUSTOMER
    except ValidationError:
        raise HTTPException(status_code=401, detail="Not authorized, unknown role")
    return Requester(user_id=x_user_id.strip(), role=role)


def requester_with_role(*roles: Role) -> Callable[..., Requester]:
    """Dependency that admits only callers holding one of ``roles``."""

    def dependency(requester: Requester = Depends(get_requester)) -> Requester:
        require_role(requester, roles)
        return requester

    return dependency
