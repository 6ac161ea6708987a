from __future__ import annotations


class DomainError(Exception):
    """Base exception for business rule violations."""

    default_message = "Business rule violated"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    default_message = "Invalid input"


class UserNotFoundError(DomainError):
    """Raised when a user id does not resolve to a stored record."""

    default_message = "User not found"


class UserAlreadyExistsError(DomainError):
    """Raised when creating a user whose id is already taken."""

    default_message = "User already exists"


class AccessDeniedError(DomainError):
    """Raised when a non-administrator asks for administrator-only data."""

    default_message = "Only Administrators may view report data"


class ShiftInProgressError(DomainError):
    default_message = "Work shift is in progress"


class ShiftNotStartedError(DomainError):
    default_message = "Work shift has not started"


class BreakInProgressError(DomainError):
    default_message = "Break is in progress"


class BreakNotStartedError(DomainError):
    default_message = "Break has not started"


class StorageUnavailableError(Exception):
    """Raised when the user database cannot be read or written.

    Not a DomainError: the caller cannot fix it by changing the request.
    """
