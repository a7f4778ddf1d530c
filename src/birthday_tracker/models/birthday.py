"""Birthday person and interest ORM models."""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from sqlalchemy import Date, ForeignKey, String, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from birthday_tracker.database import Base

if TYPE_CHECKING:
    from birthday_tracker.models.user import User


class BirthdayPerson(Base):
    """A tracked person with a birth date, owned by one user."""

    __tablename__ = "birthdays"
    __table_args__ = (UniqueConstraint("user_id", "birthday_name", name="uq_user_birthday_name"),)

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str] = mapped_column("birthday_name", String(100))  # lowercase
    birth_date: Mapped[date] = mapped_column(Date)
    user_id: Mapped[int] = mapped_column(ForeignKey("users.id", ondelete="CASCADE"), index=True)

    # Relationships
    user: Mapped[User] = relationship(back_populates="birthdays")
    interests: Mapped[list[Interest]] = relationship(
        back_populates="birthday_person", cascade="all, delete-orphan"
    )


class Interest(Base):
    """Free-text interest attached to a birthday person."""

    __tablename__ = "interests"

    id: Mapped[int] = mapped_column(primary_key=True)
    birthday_id: Mapped[int] = mapped_column(
        ForeignKey("birthdays.id", ondelete="CASCADE"), index=True
    )
    text: Mapped[str] = mapped_column("interest", String(100))

    # Relationships
    birthday_person: Mapped[BirthdayPerson] = relationship(back_populates="interests")
