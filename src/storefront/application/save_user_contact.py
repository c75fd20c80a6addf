"""Application service: record a user's contact details for order views.

The contact directory is admin-maintained, like the catalog.
"""

from __future__ import annotations

from storefront.domain.exceptions import ValidationError
from storefront.domain.model.requester import Requester, Role
from storefront.domain.model.user_contact import UserContact
from storefront.domain.repository.user_repository import UserRepository
from storefront.domain.service.authorization import require_role


class SaveUserContactHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(
        self,
        requester: Requester,
        user_id: str,
        name: str,
        email: str,
        phone: str | None = None,
    ) -> UserContact:
        require_role(requester, {Role.ADMIN})

        errors: list[str] = []
        if not user_id or not user_id.strip():
            errors.append("User id is required")
        if not name or not name.strip():
            errors.append("Please provide a name")
        if not email or "@" not in email:
            errors.append("Please provide a valid email")
        if errors:
            raise ValidationError("; ".join(errors), errors=errors)

        contact = UserContact(
            user_id=user_id.strip(),
            name=name.strip(),
            email=email.strip().lower(),
            phone=phone.strip() if phone else None,
        )
        self._user_repo.save(contact)
        return contact
