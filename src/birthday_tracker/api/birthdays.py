"""Birthday endpoints: home, add, listing, calendar, profile and interests."""

from datetime import date
from typing import Annotated
from fastapi import APIRouter, Depends, Form
from fastapi.responses import Response

from birthday_tracker.api.pages import home_path, path_for, redirect_to, render_page
from birthday_tracker.config import Settings, get_settings
from birthday_tracker.errors import NotFoundError, ValidationError
from birthday_tracker.schemas.birthday import (
    AddBirthdayForm,
    AddInterestForm,
    BirthdayListing,
    DeleteInterestForm,
    normalize_birthday_name,
)
from birthday_tracker.services.storage import Storage
from birthday_tracker.services.validation import (
    INTEREST_ERROR,
    add_birthday_errors,
    is_valid_interest,
    parse_birth_date,
)
from birthday_tracker.utils.calendar import (
    birthday_sort_key,
    days_in_month,
    display_name,
    first_weekday,
    month_grid,
    month_name,
    month_number,
    page_count,
    paginate,
)
from birthday_tracker.utils.security import Context, OwnerContext

router = APIRouter(tags=["birthdays"])


def profile_path(username: str, name: str) -> str:
    return path_for(username, name)


def not_found(username: str, name: str) -> NotFoundError:
    return NotFoundError(
        f"{display_name(name)} does not exist. Please try adding them!",
        redirect_to=home_path(username),
    )


def parse_int(value: str) -> int:
    """Parse a path or query number, treating anything else as 0."""
    try:
        return int(value)
    except ValueError:
        return 0


@router.get("/{username}/home")
async def home(username: str, context: OwnerContext) -> Response:
    """Render the user's dashboard, pointing at this month's calendar."""
    today = date.today()
    current_month = month_name(today.month)

    # Month of the last profile visited, for a shortcut back to its calendar
    last_viewed_path = None
    if context.last_viewed:
        viewed_month, viewed_year = context.last_viewed
        last_viewed_path = path_for(username, viewed_month, viewed_year, "calendar")

    return render_page(
        context,
        "home",
        current_month=current_month,
        current_year=today.year,
        calendar_path=path_for(username, current_month, today.year, "calendar"),
        last_viewed_calendar_path=last_viewed_path,
    )


@router.get("/redirect_to_selected_calendar")
async def redirect_to_selected_calendar(
    context: Context,
    month: str = "",
    year: str = "",
) -> Response:
    """Turn the month/year picker's query string into a calendar path."""
    if context.user is None:
        return redirect_to("/sign_in")

    username = context.user.username
    selected_year = parse_int(year)
    if selected_year > 0 and month_number(month):
        return redirect_to(path_for(username, month, selected_year, "calendar"))

    if selected_year <= 0:
        context.set_flash("Please enter a valid year.")
    else:
        context.set_flash("Please choose a month.")
    return redirect_to(home_path(username))


@router.get("/{username}/add_birthday")
async def add_birthday_form(context: OwnerContext) -> Response:
    return render_page(context, "add_birthday")


@router.post("/{username}/add_birthday")
async def add_birthday(
    username: str,
    context: OwnerContext,
    storage: Storage,
    form: Annotated[AddBirthdayForm, Form()],
) -> Response:
    """Create a birthday person with up to three interests.

    Raises:
        ValidationError: With status 422 if any rule is broken
    """
    user_id = context.user.user_id
    existing = await storage.all_birthdays_for_user(user_id)
    interests = form.interests

    errors = add_birthday_errors(
        form.birthday_name,
        form.birthday_date,
        interests,
        existing_names=[person.name for person in existing],
    )
    if errors:
        raise ValidationError(
            errors,
            page="add_birthday",
            status_code=422,
            context={"form": form.model_dump()},
        )

    name = form.birthday_name
    await storage.create_birthday_person(
        name,
        parse_birth_date(form.birthday_date),
        [interest.strip() for interest in interests],
        user_id,
    )
    context.set_flash(f"You successfully added {display_name(name)}!")
    return redirect_to(profile_path(username, name))


@router.get("/{username}/all_birthdays")
async def all_birthdays_first_page(
    username: str,
    context: OwnerContext,  # noqa: ARG001 - Required for owner enforcement
) -> Response:
    return redirect_to(path_for(username, "all_birthdays", 1))


@router.get("/{username}/all_birthdays/{page}")
async def all_birthdays(
    username: str,
    page: str,
    context: OwnerContext,
    storage: Storage,
    settings: Annotated[Settings, Depends(get_settings)],
) -> Response:
    """List every tracked birthday in calendar order, a page at a time."""
    birthdays = await storage.all_birthdays_for_user(context.user.user_id)
    if not birthdays:
        context.set_flash("You are not keeping track of any birthdays! Please add some first.")
        return redirect_to(home_path(username))

    ordered = sorted(birthdays, key=lambda p: birthday_sort_key(p.name, p.birth_date))
    pages = paginate(ordered, settings.birthdays_per_page)
    highest_page = page_count(len(ordered), settings.birthdays_per_page)

    current_page = parse_int(page)
    if not 1 <= current_page <= highest_page:
        context.set_flash(
            f"{page} is not a valid page. "
            f"Please choose a page between 1 and {highest_page}."
        )
        return redirect_to(path_for(username, "all_birthdays"))

    listing = [
        BirthdayListing(
            id=person.id,
            name=person.name,
            display_name=display_name(person.name),
            birth_date=person.birth_date,
            month=month_name(person.birth_date.month),
        )
        for person in pages[current_page - 1]
    ]
    return render_page(
        context,
        "all_birthdays",
        birthdays=[entry.model_dump() for entry in listing],
        current_page=current_page,
        previous_page=current_page - 1 if current_page > 1 else None,
        next_page=current_page + 1 if current_page < highest_page else None,
        pages=list(range(1, highest_page + 1)),
        highest_page=highest_page,
    )


@router.get("/{username}/{month}/{year}/calendar")
async def month_calendar(
    username: str,
    month: str,
    year: str,
    context: OwnerContext,
    storage: Storage,
) -> Response:
    """Render one month with each day's birthdays."""
    number = month_number(month)
    selected_year = parse_int(year)
    if number is None or not 1 <= selected_year <= 9999:
        raise NotFoundError(
            f"{month} {year} is not a valid month and year.",
            redirect_to=home_path(username),
        )

    birthdays = await storage.birthdays_for_month(context.user.user_id, number)
    return render_page(
        context,
        "calendar",
        month=month_name(number),
        year=selected_year,
        days_in_month=days_in_month(selected_year, number),
        first_weekday=first_weekday(selected_year, number),
        birthdays=birthdays,
        weeks=month_grid(selected_year, number, birthdays),
    )


@router.get("/{username}/{birthday_person}")
async def birthday_profile(
    username: str,
    birthday_person: str,
    context: OwnerContext,
    storage: Storage,
) -> Response:
    """Show one person's birthday and interests."""
    name = normalize_birthday_name(birthday_person)
    person = await storage.get_birthday_person(name, context.user.user_id)
    if person is None:
        raise not_found(username, name)

    interests = await storage.interests_for_birthday_person(person.id)
    birth_month = month_name(person.birth_date.month)
    this_year = date.today().year
    context.remember_last_viewed(birth_month, this_year)

    return render_page(
        context,
        "birthday_profile",
        name=person.name,
        display_name=display_name(person.name),
        birth_date=person.birth_date,
        interests=sorted(interests, key=str.lower),
        invalid_interest=context.pop_invalid_interest(),
        calendar_path=path_for(username, birth_month, this_year, "calendar"),
    )


@router.post("/{username}/{birthday_person}/delete")
async def delete_birthday_person(
    username: str,
    birthday_person: str,
    context: OwnerContext,
    storage: Storage,
) -> Response:
    name = normalize_birthday_name(birthday_person)
    if not await storage.delete_birthday_person(name, context.user.user_id):
        raise not_found(username, name)

    context.set_flash(f"{display_name(name)} has been deleted.")
    return redirect_to(home_path(username))


@router.post("/{username}/{birthday_person}/add_interest")
async def add_interest(
    username: str,
    birthday_person: str,
    context: OwnerContext,
    storage: Storage,
    form: Annotated[AddInterestForm, Form()],
) -> Response:
    """Attach an interest, or hand the rejected input back to the profile form."""
    name = normalize_birthday_name(birthday_person)
    user_id = context.user.user_id

    if not is_valid_interest(form.new_interest):
        if not await storage.birthday_person_exists(name, user_id):
            raise not_found(username, name)
        context.set_flash(INTEREST_ERROR)
        context.remember_invalid_interest(form.new_interest)
        return redirect_to(profile_path(username, name))

    if await storage.create_interest(name, form.new_interest.strip(), user_id) is None:
        raise not_found(username, name)

    context.set_flash(f"Successfully added an interest to {display_name(name)}.")
    return redirect_to(profile_path(username, name))


@router.post("/{username}/{birthday_person}/delete_interest")
async def delete_interest(
    username: str,
    birthday_person: str,
    context: OwnerContext,
    storage: Storage,
    form: Annotated[DeleteInterestForm, Form()],
) -> Response:
    name = normalize_birthday_name(birthday_person)
    birthday_id = await storage.birthday_id_by_name(name, context.user.user_id)
    if birthday_id is None:
        raise not_found(username, name)

    removed = await storage.delete_interest(birthday_id, form.delete_interest)
    if removed:
        context.set_flash(f"Removed {form.delete_interest} from {display_name(name)}.")
    else:
        context.set_flash(
            f"{form.delete_interest} is not one of {display_name(name)}'s interests."
        )
    return redirect_to(profile_path(username, name))


# Registered last so it never shadows the single-segment routes above
fallback_router = APIRouter(tags=["birthdays"])


@fallback_router.get("/{username}")
async def user_root(username: str) -> Response:
    """Send ``/<username>`` to that user's home page."""
    return redirect_to(home_path(username))
