"""Persistence for users, birthday people and their interests."""

import logging
from datetime import date
from typing import Annotated

from fastapi import Depends
from sqlalchemy import delete, extract, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from birthday_tracker.database import get_db
from birthday_tracker.errors import ConstraintViolation
from birthday_tracker.models.birthday import BirthdayPerson, Interest
from birthday_tracker.models.user import User
from birthday_tracker.schemas.birthday import BirthdayPersonRecord, InterestRecord
from birthday_tracker.schemas.user import UserCredentials

logger = logging.getLogger(__name__)


class BirthdayStorage:
    """Named queries over the ``users``, ``birthdays`` and ``interests`` tables.

    Lookups that find nothing return None, False or an empty collection;
    callers decide what a miss means. Operations touching a birthday person
    by name are always scoped to the owning user.

    Nothing here commits. The session's owner (``get_db`` for requests)
    commits or rolls back the whole unit of work.
    """

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    # Users

    async def find_user_credentials(self, username: str) -> UserCredentials | None:
        logger.info("Looking up credentials for %s", username)
        result = await self.db.execute(select(User).where(User.username == username))
        user = result.scalar_one_or_none()
        if user is None:
            return None
        return UserCredentials.model_validate(user)

    async def create_user(self, username: str, password_hash: str) -> None:
        """Insert a user.

        Raises:
            ConstraintViolation: If the username is already taken
        """
        logger.info("Creating user %s", username)
        self.db.add(User(username=username, password_hash=password_hash))
        try:
            await self.db.flush()
        except IntegrityError as exc:
            raise ConstraintViolation(
                f"{username} already exists - please try a different name"
            ) from exc

    async def user_id_by_username(self, username: str) -> int | None:
        logger.info("Looking up id for user %s", username)
        result = await self.db.execute(select(User.id).where(User.username == username))
        return result.scalar_one_or_none()

    async def delete_user(self, username: str) -> None:
        """Delete a user along with their birthday people and interests."""
        logger.info("Deleting user %s", username)
        result = await self.db.execute(select(User).where(User.username == username))
        user = result.scalar_one_or_none()
        if user is None:
            return
        await self.db.delete(user)
        await self.db.flush()

    async def username_exists(self, username: str) -> bool:
        """Check for a username, ignoring case."""
        query = select(User.id).where(func.lower(User.username) == username.lower())
        result = await self.db.execute(query)
        return result.first() is not None

    # Birthday people

    async def birthdays_for_month(self, user_id: int, month: int) -> dict[str, int]:
        """Map each of the user's people born in ``month`` to their day of birth."""
        logger.info("Fetching month %s birthdays for user %s", month, user_id)
        query = select(BirthdayPerson.name, BirthdayPerson.birth_date).where(
            BirthdayPerson.user_id == user_id,
            extract("month", BirthdayPerson.birth_date) == month,
        )
        result = await self.db.execute(query)
        return {name: birth_date.day for name, birth_date in result.all()}

    async def create_birthday_person(
        self,
        name: str,
        birth_date: date,
        interests: list[str],
        user_id: int,
    ) -> BirthdayPersonRecord:
        """Insert a person and their initial interests.

        The person is flushed first to obtain its generated id; the interests
        then go into the same transaction, so either all rows land or none do.
        """
        logger.info("Creating birthday person %s for user %s", name, user_id)
        person = BirthdayPerson(name=name, birth_date=birth_date, user_id=user_id)
        self.db.add(person)
        await self.db.flush()
        await self.db.refresh(person)

        for interest in interests:
            self.db.add(Interest(birthday_id=person.id, text=interest))
        await self.db.flush()

        return BirthdayPersonRecord.model_validate(person)

    async def all_birthdays_for_user(self, user_id: int) -> list[BirthdayPersonRecord]:
        logger.info("Fetching all birthdays for user %s", user_id)
        query = select(BirthdayPerson).where(BirthdayPerson.user_id == user_id)
        result = await self.db.execute(query)
        return [BirthdayPersonRecord.model_validate(p) for p in result.scalars().all()]

    async def birthday_person_exists(self, name: str, user_id: int) -> bool:
        return await self.birthday_id_by_name(name, user_id) is not None

    async def get_birthday_person(self, name: str, user_id: int) -> BirthdayPersonRecord | None:
        logger.info("Fetching birthday person %s for user %s", name, user_id)
        result = await self.db.execute(self._person_query(name, user_id))
        person = result.scalar_one_or_none()
        if person is None:
            return None
        return BirthdayPersonRecord.model_validate(person)

    async def birthday_id_by_name(self, name: str, user_id: int) -> int | None:
        query = select(BirthdayPerson.id).where(
            BirthdayPerson.name == name,
            BirthdayPerson.user_id == user_id,
        )
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def delete_birthday_person(self, name: str, user_id: int) -> bool:
        """Delete one of the user's people and their interests.

        Returns:
            True if a person was deleted, False if the user has nobody by that name
        """
        logger.info("Deleting birthday person %s for user %s", name, user_id)
        result = await self.db.execute(self._person_query(name, user_id))
        person = result.scalar_one_or_none()
        if person is None:
            return False
        await self.db.delete(person)
        await self.db.flush()
        return True

    # Interests

    async def interests_for_birthday_person(self, birthday_id: int) -> list[str]:
        query = select(Interest.text).where(Interest.birthday_id == birthday_id)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def create_interest(self, name: str, text: str, user_id: int) -> InterestRecord | None:
        """Attach an interest to one of the user's people.

        Returns:
            The new interest, or None if the user has nobody by that name
        """
        logger.info("Adding interest to %s for user %s", name, user_id)
        birthday_id = await self.birthday_id_by_name(name, user_id)
        if birthday_id is None:
            return None
        interest = Interest(birthday_id=birthday_id, text=text)
        self.db.add(interest)
        await self.db.flush()
        await self.db.refresh(interest)
        return InterestRecord.model_validate(interest)

    async def delete_interest(self, birthday_id: int, text: str) -> int:
        """Remove every interest with this exact text from a person.

        Returns:
            Number of interests removed
        """
        logger.info("Deleting interest %r from birthday %s", text, birthday_id)
        statement = delete(Interest).where(
            Interest.birthday_id == birthday_id,
            Interest.text == text,
        )
        result = await self.db.execute(statement)
        return result.rowcount

    @staticmethod
    def _person_query(name: str, user_id: int):
        return select(BirthdayPerson).where(
            BirthdayPerson.name == name,
            BirthdayPerson.user_id == user_id,
        )


def get_storage(db: AsyncSession = Depends(get_db)) -> BirthdayStorage:
    """Dependency that provides storage bound to the request's session."""
    return BirthdayStorage(db)


Storage = Annotated[BirthdayStorage, Depends(get_storage)]
