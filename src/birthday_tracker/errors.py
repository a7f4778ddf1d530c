"""Exceptions resolved into re-rendered pages or redirects by main.py."""

from typing import Any


class BirthdayTrackerError(Exception):
    """Base exception for user-facing application errors."""


class ValidationError(BirthdayTrackerError):
    """Raised when submitted form data breaks one or more rules.

    All violated rules are carried together and shown as one comma-joined
    message on the re-rendered page.
    """

    def __init__(
        self,
        messages: list[str],
        page: str,
        status_code: int = 200,
        context: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(", ".join(messages))
        self.messages = messages
        self.page = page
        self.status_code = status_code
        self.context = context or {}


class AuthorizationError(BirthdayTrackerError):
    """Raised when the session user does not own the requested resource."""

    def __init__(self, username: str, requested_path: str) -> None:
        super().__init__(f"You must be logged in as {username} to do that.")
        self.username = username
        self.requested_path = requested_path


class NotFoundError(BirthdayTrackerError):
    """Raised when a requested record does not exist."""

    def __init__(self, message: str, redirect_to: str) -> None:
        super().__init__(message)
        self.redirect_to = redirect_to


class ConstraintViolation(BirthdayTrackerError):
    """Raised by storage when an insert would break a uniqueness constraint."""
