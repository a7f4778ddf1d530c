"""Pydantic schemas for request parsing and storage records."""

from birthday_tracker.schemas.birthday import (
    AddBirthdayForm,
    AddInterestForm,
    BirthdayListing,
    BirthdayPersonRecord,
    DeleteInterestForm,
    InterestRecord,
    normalize_birthday_name,
)
from birthday_tracker.schemas.user import SignInForm, SignUpForm, UserCredentials

__all__ = [
    # Account schemas
    "SignInForm",
    "SignUpForm",
    "UserCredentials",
    # Birthday schemas
    "AddBirthdayForm",
    "AddInterestForm",
    "DeleteInterestForm",
    "BirthdayPersonRecord",
    "InterestRecord",
    "BirthdayListing",
    "normalize_birthday_name",
]
