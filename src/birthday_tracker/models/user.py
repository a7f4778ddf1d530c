"""User ORM model."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from birthday_tracker.database import Base

if TYPE_CHECKING:
    from birthday_tracker.models.birthday import BirthdayPerson


class User(Base):
    """User account owning a private set of birthday people."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(primary_key=True)
    # Always stored lowercase so the unique index is case-insensitive in effect
    username: Mapped[str] = mapped_column("user_name", String(100), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column("password", String(255))

    # Relationships
    birthdays: Mapped[list[BirthdayPerson]] = relationship(
        back_populates="user", cascade="all, delete-orphan"
    )
