"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and HTTP layers can catch them uniformly and translate them into
user-facing messages and status codes.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input is malformed or violates a field constraint.

    ``errors`` lists every violated constraint when more than one field
    was checked at once.
    """

    def __init__(self, message: str, errors: list[str] | None = None) -> None:
        super().__init__(message)
        self.errors: list[str] = list(errors or [])


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class ForbiddenError(DomainException):
    """The requester is known but not allowed to perform the operation."""


class InvalidStateError(DomainException):
    """The operation is not allowed in the entity's current state."""
