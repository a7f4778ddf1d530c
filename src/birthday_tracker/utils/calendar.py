"""Calendar, display and pagination helpers for birthday pages."""

import calendar
import math
from collections.abc import Sequence
from datetime import date
from typing import TypeVar

T = TypeVar("T")

MONTH_NUMBERS: dict[str, int] = {calendar.month_name[n]: n for n in range(1, 13)}

# Calendar pages start their weeks on Sunday
_SUNDAY_FIRST = calendar.Calendar(firstweekday=calendar.SUNDAY)


def display_name(name: str) -> str:
    """Capitalize each word of a stored (lowercase) name for display."""
    return " ".join(word.capitalize() for word in name.split())


def month_number(month: str) -> int | None:
    """Resolve a month name such as ``"may"`` or ``"May"`` to 1-12."""
    return MONTH_NUMBERS.get(month.strip().capitalize())


def month_name(month: int) -> str:
    return calendar.month_name[month]


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def first_weekday(year: int, month: int) -> int:
    """Weekday of the 1st of the month, counting Sunday as 0."""
    # calendar.weekday counts Monday as 0
    return (calendar.weekday(year, month, 1) + 1) % 7


def month_grid(year: int, month: int, birthdays: dict[str, int]) -> list[list[dict | None]]:
    """Build Sunday-first weeks of day cells, each listing that day's names.

    Cells outside the month are None.
    """
    names_by_day: dict[int, list[str]] = {}
    for name, day in birthdays.items():
        names_by_day.setdefault(day, []).append(name)

    weeks = []
    for week in _SUNDAY_FIRST.monthdayscalendar(year, month):
        weeks.append(
            [
                {"day": day, "birthdays": sorted(names_by_day.get(day, []))} if day else None
                for day in week
            ]
        )
    return weeks


def birthday_sort_key(name: str, birth_date: date) -> tuple[int, int, str]:
    """Order birthdays through the calendar year, then alphabetically."""
    return (birth_date.month, birth_date.day, name)


def page_count(total: int, per_page: int) -> int:
    return math.ceil(total / per_page)


def paginate(items: Sequence[T], per_page: int) -> list[list[T]]:
    """Split items into consecutive pages of at most ``per_page`` items."""
    return [list(items[start : start + per_page]) for start in range(0, len(items), per_page)]
