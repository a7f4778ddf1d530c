"""SQLAlchemy ORM models."""

from birthday_tracker.models.birthday import BirthdayPerson, Interest
from birthday_tracker.models.user import User

__all__ = [
    "BirthdayPerson",
    "Interest",
    "User",
]
