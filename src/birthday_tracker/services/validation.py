"""Validation rules for account and birthday input.

Everything here is pure: callers look up whatever state a rule needs (taken
usernames, existing names) and pass it in.
"""

from collections.abc import Iterable
from datetime import date, datetime

from birthday_tracker.utils.calendar import display_name

MAX_LENGTH = 100

INTEREST_ERROR = "Interest must be between 1 and 100 characters and cannot be only white space."


def is_valid_username(username: str) -> bool:
    """Check a username is 1-100 characters with no spaces and not only dots."""
    if " " in username or _only_dots(username):
        return False
    return 1 <= len(username) <= MAX_LENGTH


def is_valid_birthday_name(name: str) -> bool:
    """Check a trimmed name is 1-100 characters without slashes.

    Names end up in URL paths, so neither ``/`` nor ``\\`` is allowed, and
    neither is a name of only dots, which clients treat as ``.`` or ``..``.
    """
    stripped = name.strip()
    return (
        1 <= len(stripped) <= MAX_LENGTH
        and not _has_slash(stripped)
        and not _only_dots(stripped)
    )


def is_valid_interest(interest: str) -> bool:
    """Check a trimmed interest is 1-100 characters."""
    return 1 <= len(interest.strip()) <= MAX_LENGTH


def is_duplicate_birthday_person(name: str, existing_names: Iterable[str]) -> bool:
    """Check whether ``name`` matches any existing name, ignoring case."""
    lowered = name.lower()
    return any(existing.lower() == lowered for existing in existing_names)


def parse_birth_date(value: str) -> date | None:
    """Parse a ``YYYY-MM-DD`` date, returning None for any other shape."""
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except ValueError:
        return None


def sign_up_errors(
    username: str,
    password: str,
    confirm_password: str,
    *,
    username_taken: bool,
) -> list[str]:
    """Collect every sign-up rule the input breaks, in display order."""
    errors = []
    if not username:
        errors.append("Name is required")
    if _only_dots(username):
        errors.append("Username cannot consist only of dots")
    elif not is_valid_username(username):
        errors.append("Username must be between 1 and 100 characters and no spaces")
    if password != confirm_password:
        errors.append("Passwords must match")
    if username_taken:
        errors.append(f"{username} already exists - please try a different name")
    if not password or not confirm_password:
        errors.append("Password cannot be empty")
    return errors


def add_birthday_errors(
    name: str,
    birth_date: str,
    interests: list[str],
    *,
    existing_names: Iterable[str],
) -> list[str]:
    """Collect every add-birthday rule the input breaks, in display order."""
    errors = []
    stripped_name = name.strip()
    if not stripped_name:
        errors.append("Name is required")
    elif len(stripped_name) > MAX_LENGTH:
        errors.append("Name must be between 1 and 100 characters")

    if not birth_date.strip():
        errors.append("Date is required")
    elif parse_birth_date(birth_date) is None:
        errors.append("Date must be a valid date (YYYY-MM-DD)")

    if _has_slash(name):
        errors.append("Name cannot contain / or \\")
    if _only_dots(stripped_name):
        errors.append("Name cannot consist only of dots")
    if not all(is_valid_interest(interest) for interest in interests):
        errors.append(INTEREST_ERROR)
    if stripped_name and is_duplicate_birthday_person(stripped_name, existing_names):
        errors.append(f"{display_name(stripped_name)} already exists.")
    return errors


def join_errors(errors: list[str]) -> str:
    """Join messages the way they are shown to the user."""
    return ", ".join(errors)


def _has_slash(value: str) -> bool:
    return "/" in value or "\\" in value


def _only_dots(value: str) -> bool:
    return bool(value) and set(value) == {"."}
