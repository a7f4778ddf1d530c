"""Password hashing and the ownership guard for user-scoped routes."""

import logging
from typing import Annotated
from urllib.parse import quote

import bcrypt
from fastapi import Depends, Request

from birthday_tracker.config import get_settings
from birthday_tracker.errors import AuthorizationError
from birthday_tracker.utils.session import RequestContext, get_context

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash a plain text password using bcrypt."""
    password_bytes = password.encode("utf-8")
    salt = bcrypt.gensalt(rounds=get_settings().bcrypt_rounds)
    hashed = bcrypt.hashpw(password_bytes, salt)
    return hashed.decode("utf-8")


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain text password against a hashed password.

    A wrong password returns False. A stored digest that bcrypt cannot parse
    is logged and the ValueError is re-raised.
    """
    password_bytes = plain_password.encode("utf-8")
    hashed_bytes = hashed_password.encode("utf-8")
    try:
        return bcrypt.checkpw(password_bytes, hashed_bytes)
    except ValueError:
        logger.error("Stored password digest is malformed")
        raise


def requested_url(request: Request) -> str:
    """Rebuild the request's path and query in percent-encoded form.

    ``scope["path"]`` is already decoded, so a name holding ``?`` or ``#``
    has to be quoted again before it can serve as a redirect target.
    """
    path = quote(request.scope["path"], safe="/")
    query = request.scope.get("query_string", b"").decode("latin-1")
    return f"{path}?{query}" if query else path


def require_owner(
    username: str,
    request: Request,
    context: Annotated[RequestContext, Depends(get_context)],
) -> RequestContext:
    """Allow the request only when the session user owns the path.

    This is a FastAPI dependency for routes under ``/{username}/...``. The
    comparison is an exact match against the username held in the session.

    Raises:
        AuthorizationError: If nobody is signed in or a different user is
    """
    user = context.user
    if user is None or user.username != username:
        requested_path = requested_url(request)
        logger.warning(
            "Rejected %s for %s (session user: %s)",
            requested_path,
            username,
            user.username if user else None,
        )
        raise AuthorizationError(username, requested_path=requested_path)
    return context


# Type aliases for use in route dependencies
Context = Annotated[RequestContext, Depends(get_context)]
OwnerContext = Annotated[RequestContext, Depends(require_owner)]
