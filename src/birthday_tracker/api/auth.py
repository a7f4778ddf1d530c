"""Account endpoints: landing page, sign in/out, sign up and account deletion."""

import logging
from typing import Annotated

from fastapi import APIRouter, Form
from fastapi.responses import Response

from birthday_tracker.api.pages import home_path, redirect_to, render_page
from birthday_tracker.errors import ConstraintViolation, ValidationError
from birthday_tracker.schemas.user import SignInForm, SignUpForm
from birthday_tracker.services.storage import Storage
from birthday_tracker.services.validation import sign_up_errors
from birthday_tracker.utils.calendar import display_name
from birthday_tracker.utils.security import Context, OwnerContext, hash_password, verify_password

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])


@router.get("/")
async def index(context: Context) -> Response:
    """Send signed-in users home, everyone else to the landing page."""
    if context.is_authenticated:
        return redirect_to(home_path(context.user.username))
    return render_page(context, "index")


@router.get("/sign_in")
async def sign_in_form(context: Context) -> Response:
    return render_page(context, "sign_in")


@router.post("/sign_in")
async def sign_in(
    context: Context,
    storage: Storage,
    form: Annotated[SignInForm, Form()],
) -> Response:
    """Check credentials and start an authenticated session.

    After a successful sign-in the user goes to the page they were turned
    away from, if any, otherwise to their home page.
    """
    credentials = await storage.find_user_credentials(form.username)
    if credentials is None or not verify_password(form.password, credentials.password_hash):
        logger.info("Failed sign-in for %s", form.username)
        return render_page(
            context,
            "sign_in",
            message="Invalid username or password. Please try again.",
            form={"username": form.username},
        )

    context.sign_in(credentials.username, credentials.id)
    context.set_flash(f"Welcome, {display_name(credentials.username)}!")

    pending = context.pop_pending_redirect()
    return redirect_to(pending or home_path(credentials.username))


@router.post("/sign_out")
async def sign_out(context: Context) -> Response:
    context.sign_out()
    return redirect_to("/")


@router.get("/sign_up")
async def sign_up_form(context: Context) -> Response:
    return render_page(context, "sign_up")


@router.post("/sign_up")
async def sign_up(
    context: Context,
    storage: Storage,
    form: Annotated[SignUpForm, Form()],
) -> Response:
    """Register a new user and sign them in.

    Every broken rule is reported at once on the re-rendered form.

    Raises:
        ValidationError: If any sign-up rule is broken
    """
    errors = sign_up_errors(
        form.username,
        form.password,
        form.confirm_password,
        username_taken=await storage.username_exists(form.username),
    )
    if errors:
        raise ValidationError(errors, page="sign_up", context={"form": {"username": form.username}})

    try:
        await storage.create_user(form.username, hash_password(form.password))
    except ConstraintViolation as exc:
        raise ValidationError(
            [str(exc)], page="sign_up", context={"form": {"username": form.username}}
        ) from exc

    user_id = await storage.user_id_by_username(form.username)
    context.sign_in(form.username, user_id)
    logger.info("Registered user %s", form.username)

    return redirect_to(home_path(form.username))


@router.post("/{username}/delete_account")
async def delete_account(username: str, context: OwnerContext, storage: Storage) -> Response:
    """Delete the signed-in user's account with all their birthdays."""
    await storage.delete_user(username)
    user = context.sign_out()
    context.pop_pending_redirect()
    context.set_flash(f"{user.username} has been deleted.")
    return redirect_to("/")
