"""Abstract lookup for user contact details."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.user_contact import UserContact


class UserRepository(ABC):

    @abstractmethod
    def get_by_id(self, user_id: str) -> UserContact | None:
        """Return a user's contact details, or None if unknown."""

    @abstractmethod
    def save(self, contact: UserContact) -> None:
        """Persist new or updated contact details."""
