"""Tests for calendar, display and pagination helpers."""

from datetime import date

import pytest

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


def test_display_name() -> None:
    assert display_name("mary ann") == "Mary Ann"
    assert display_name("bob") == "Bob"


@pytest.mark.parametrize(("name", "number"), [("January", 1), ("may", 5), ("DECEMBER", 12)])
def test_month_number(name: str, number: int) -> None:
    assert month_number(name) == number


def test_unknown_month() -> None:
    assert month_number("Smarch") is None
    assert month_number("") is None


def test_month_name() -> None:
    assert month_name(5) == "May"


def test_days_in_month_handles_leap_years() -> None:
    assert days_in_month(2024, 2) == 29
    assert days_in_month(2023, 2) == 28
    assert days_in_month(2024, 4) == 30


def test_first_weekday_counts_from_sunday() -> None:
    # 1 September 2024 was a Sunday, 1 June 2024 a Saturday
    assert first_weekday(2024, 9) == 0
    assert first_weekday(2024, 6) == 6


def test_month_grid() -> None:
    weeks = month_grid(2024, 9, {"bob": 1, "cat": 30, "amy": 1})

    assert all(len(week) == 7 for week in weeks)
    assert weeks[0][0] == {"day": 1, "birthdays": ["amy", "bob"]}
    last_week = weeks[-1]
    assert last_week[1] == {"day": 30, "birthdays": ["cat"]}
    assert last_week[2:] == [None] * 5


def test_birthday_sort_key_ignores_year() -> None:
    people = [
        ("cat", date(1980, 12, 1)),
        ("bob", date(2001, 3, 2)),
        ("amy", date(1999, 3, 2)),
    ]

    ordered = sorted(people, key=lambda p: birthday_sort_key(*p))

    assert [name for name, _ in ordered] == ["amy", "bob", "cat"]


@pytest.mark.parametrize(("count", "pages"), [(0, 0), (1, 1), (5, 1), (6, 2), (11, 3)])
def test_pagination_yields_ceil_pages(count: int, pages: int) -> None:
    items = list(range(count))

    paged = paginate(items, 5)

    assert len(paged) == pages == page_count(count, 5)
    assert [item for page in paged for item in page] == items
    assert all(len(page) <= 5 for page in paged)
