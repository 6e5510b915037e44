from __future__ import annotations

from typing import Mapping


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules.

    ``errors`` maps a field name to the message shown next to that field.
    """

    def __init__(self, message: str, errors: Mapping[str, str] | None = None):
        super().__init__(message)
        self.errors = dict(errors or {})


class NotFoundError(DomainError):
    """Raised when no record has the requested id."""

    def __init__(self, entity: str, record_id: object):
        super().__init__(f"{entity} {record_id} not found")
        self.entity = entity
        self.record_id = record_id


class ConflictError(DomainError):
    """Raised when a write would break a natural-key uniqueness rule."""


class TransportError(DomainError):
    """Raised when the storage backend is unreachable or rejects the request."""
