"""Request-scoped view over the signed session cookie."""

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any

from fastapi import Request

USERNAME_KEY = "username"
USER_ID_KEY = "user_id"
FLASH_KEY = "message"
REQUESTED_PATH_KEY = "requested_path"
MONTH_KEY = "month"
YEAR_KEY = "year"
INVALID_INTEREST_KEY = "invalid_interest"


@dataclass(frozen=True)
class AuthenticatedUser:
    """The user a session is signed in as."""

    username: str
    user_id: int


class RequestContext:
    """Session state for one request.

    Handlers receive this object instead of touching ``request.session``
    directly. Writes go straight through to the session mapping, so they are
    saved with the response cookie even when a handler redirects.
    """

    def __init__(self, session: MutableMapping[str, Any]) -> None:
        self._session = session

    @property
    def user(self) -> AuthenticatedUser | None:
        """The signed-in user, or None for an anonymous session."""
        username = self._session.get(USERNAME_KEY)
        user_id = self._session.get(USER_ID_KEY)
        if username is None or user_id is None:
            return None
        return AuthenticatedUser(username=username, user_id=user_id)

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def sign_in(self, username: str, user_id: int) -> None:
        self._session[USERNAME_KEY] = username
        self._session[USER_ID_KEY] = user_id

    def sign_out(self) -> AuthenticatedUser | None:
        """Forget the signed-in user and return who it was."""
        user = self.user
        self._session.pop(USERNAME_KEY, None)
        self._session.pop(USER_ID_KEY, None)
        return user

    # Flash message

    def set_flash(self, message: str) -> None:
        self._session[FLASH_KEY] = message

    def pop_flash(self) -> str | None:
        """Return the flash message and clear it; it is shown only once."""
        return self._session.pop(FLASH_KEY, None)

    # Redirect after sign-in

    def remember_requested_path(self, path: str) -> None:
        self._session[REQUESTED_PATH_KEY] = path

    def pop_pending_redirect(self) -> str | None:
        return self._session.pop(REQUESTED_PATH_KEY, None)

    # Last calendar month looked at from a profile page

    @property
    def last_viewed(self) -> tuple[str, int] | None:
        month = self._session.get(MONTH_KEY)
        year = self._session.get(YEAR_KEY)
        if month is None or year is None:
            return None
        return month, year

    def remember_last_viewed(self, month: str, year: int) -> None:
        self._session[MONTH_KEY] = month
        self._session[YEAR_KEY] = year

    # Rejected interest input, offered back on the profile form

    def remember_invalid_interest(self, interest: str) -> None:
        self._session[INVALID_INTEREST_KEY] = interest

    def pop_invalid_interest(self) -> str | None:
        return self._session.pop(INVALID_INTEREST_KEY, None)


def get_context(request: Request) -> RequestContext:
    """Dependency that provides the request's session context."""
    return RequestContext(request.session)
