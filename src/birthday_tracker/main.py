"""FastAPI application entry point."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, RedirectResponse
from starlette.middleware.sessions import SessionMiddleware

from birthday_tracker import __version__
from birthday_tracker.api import api_router
from birthday_tracker.api.pages import redirect_to, render_page
from birthday_tracker.config import get_settings
from birthday_tracker.database import create_tables
from birthday_tracker.errors import AuthorizationError, NotFoundError, ValidationError
from birthday_tracker.services.validation import join_errors
from birthday_tracker.utils.session import RequestContext

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

settings = get_settings()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan - runs on startup and shutdown."""
    # Startup
    logger.info("Starting %s v%s", settings.app_name, __version__)
    logger.info("Debug mode: %s", settings.debug)
    logger.info("Database: %s", settings.database_url.split("///")[-1])  # Hide path details

    # Validate and log warnings
    warnings = settings.validate_runtime_config()
    if warnings:
        logger.warning("Configuration warnings:")
        for warning in warnings:
            logger.warning("  - %s", warning)
    else:
        logger.info("Configuration validation passed - no warnings")

    if settings.create_tables_on_startup:
        await create_tables()
        logger.info("Database tables ready")

    logger.info("Application startup complete")

    yield

    # Shutdown
    logger.info("Application shutting down")


app = FastAPI(
    title=settings.app_name,
    version=__version__,
    debug=settings.debug,
    lifespan=lifespan,
)

app.add_middleware(
    SessionMiddleware,
    secret_key=settings.secret_key,
    session_cookie=settings.session_cookie,
    max_age=settings.session_max_age,
    same_site="lax",
)


@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Re-render the submitted form with every broken rule."""
    return render_page(
        RequestContext(request.session),
        exc.page,
        status_code=exc.status_code,
        message=join_errors(exc.messages),
        errors=exc.messages,
        **exc.context,
    )


@app.exception_handler(AuthorizationError)
async def authorization_error_handler(
    request: Request, exc: AuthorizationError
) -> RedirectResponse:
    """Send the user to sign in, coming back to the requested page afterwards."""
    context = RequestContext(request.session)
    context.remember_requested_path(exc.requested_path)
    context.set_flash(str(exc))
    return redirect_to("/sign_in")


@app.exception_handler(NotFoundError)
async def not_found_error_handler(request: Request, exc: NotFoundError) -> RedirectResponse:
    """Redirect to a fallback page explaining what was missing."""
    RequestContext(request.session).set_flash(str(exc))
    return redirect_to(exc.redirect_to)


@app.get("/health")
async def health_check() -> dict[str, str]:
    """Health check endpoint to verify the app is running."""
    return {"status": "healthy", "version": __version__}


# Include routes after /health so the /{username} catch-all cannot shadow it
app.include_router(api_router)
