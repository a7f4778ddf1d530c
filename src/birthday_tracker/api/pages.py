"""Page and redirect responses shared by the route handlers.

Pages are JSON documents naming the view plus the data it shows; any
templating happens in the client.
"""

from typing import Any
from urllib.parse import quote

from fastapi import status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse, RedirectResponse

from birthday_tracker.utils.session import RequestContext


def render_page(
    context: RequestContext,
    page: str,
    status_code: int = status.HTTP_200_OK,
    message: str | None = None,
    **data: Any,
) -> JSONResponse:
    """Render ``page``, consuming the pending flash message.

    An explicit ``message`` takes the place of the flash message, which is
    still cleared.
    """
    flash = context.pop_flash()
    user = context.user
    content = {
        "page": page,
        "message": message if message is not None else flash,
        "username": user.username if user else None,
        **data,
    }
    return JSONResponse(status_code=status_code, content=jsonable_encoder(content))


def redirect_to(url: str) -> RedirectResponse:
    """Redirect with 303 so the browser follows up with a GET."""
    return RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)


def path_for(*segments: str | int) -> str:
    """Join path segments, percent-encoding each one.

    Usernames and names may hold characters such as ``#``, ``?`` or ``%``
    that would otherwise end or change the path.
    """
    return "/" + "/".join(quote(str(segment), safe="") for segment in segments)


def home_path(username: str) -> str:
    return path_for(username, "home")
