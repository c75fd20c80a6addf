"""JSON-file-backed implementation of UserRepository."""

from __future__ import annotations

from pathlib import Path

from storefront.domain.model.user_contact import UserContact
from storefront.domain.repository.user_repository import UserRepository
from storefront.infrastructure.persistence.json_file import JsonFile


class JsonUserRepository(UserRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def get_by_id(self, user_id: str) -> UserContact | None:
        for raw in self._file.read():
            if raw["id"] == user_id:
                return UserContact(
                    user_id=raw["id"],
                    name=raw["name"],
                    email=raw["email"],
                    phone=raw.get("phone"),
                )
        return None

    def save(self, contact: UserContact) -> None:
        with self._file.lock:
            records = [r for r in self._file.read() if r["id"] != contact.user_id]
            records.append(
                {
                    "id": contact.user_id,
                    "name": contact.name,
                    "email": contact.email,
                    "phone": contact.phone,
                }
            )
            self._file.write(records)
