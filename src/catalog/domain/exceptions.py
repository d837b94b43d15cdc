"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the API and CLI layers can catch them uniformly and display
user-friendly messages.
"""

from __future__ import annotations


class DomainException(Exception):
    """Base class for all domain errors."""


class EntityNotFoundError(DomainException):
    """A requested product does not exist."""


class DuplicateIdentifierError(DomainException):
    """A product with the same identifier already exists."""


class ValidationError(DomainException):
    """One or more fields failed validation.

    ``errors`` maps field name to a human-readable message.
    """

    def __init__(self, errors: dict[str, str]) -> None:
        self.errors = dict(errors)
        super().__init__(
            "; ".join(f"{field}: {msg}" for field, msg in self.errors.items())
        )


class RemoteFailureError(DomainException):
    """A repository call over the network failed for an unclassified reason."""
