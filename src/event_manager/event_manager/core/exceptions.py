from __future__ import annotations

from typing import Any, Optional


class DomainError(Exception):
    """Base exception for business rule violations.

    ``status_code`` is the HTTP status the API layer answers with and
    ``payload`` holds extra keys merged into the error body.
    """

    status_code = 400

    def __init__(self, message: str, *, payload: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.payload = payload or {}


class ValidationError(DomainError):
    """Raised when input data is missing, malformed or violates domain rules."""


class ConflictError(DomainError):
    """Raised when creating a resource that already exists."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""

    status_code = 401


class AuthorizationError(DomainError):
    """Raised when an account is not allowed to proceed."""

    status_code = 403


class NotFoundError(DomainError):
    status_code = 404


class AccountNotFoundError(NotFoundError):
    """Login with an email nobody registered."""

    status_code = 401


class InvalidReferenceError(DomainError):
    """Raised when a payload points at an entity that does not exist."""


class InvalidTokenError(DomainError):
    """Raised when a QR token cannot be decoded."""


class EventMismatchError(DomainError):
    """Raised when a QR token belongs to another event."""


class AlreadyAttendedError(DomainError):
    """Attendance was already recorded for this attendee."""

    status_code = 409


class InternalError(DomainError):
    status_code = 500


class StorageError(InternalError):
    """Raised when a collection cannot be persisted."""
