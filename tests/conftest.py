"""Pytest fixtures and configuration."""

import os
from collections.abc import AsyncGenerator, Awaitable, Callable

import pytest
from httpx import ASGITransport, AsyncClient, Response
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

# Set test environment variables before importing the app
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-testing-at-least-32-characters-long")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import birthday_tracker.models  # noqa: E402, F401
from birthday_tracker.database import Base, get_db  # noqa: E402
from birthday_tracker.main import app  # noqa: E402
from birthday_tracker.services.storage import BirthdayStorage  # noqa: E402


@pytest.fixture
async def db_engine() -> AsyncGenerator[AsyncEngine]:
    """Fresh in-memory SQLite database shared by every connection of one test."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(db_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def storage(db_session: AsyncSession) -> BirthdayStorage:
    return BirthdayStorage(db_session)


@pytest.fixture
async def client(
    session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client for testing the app against the test database.

    The client keeps cookies between requests, so the session survives a
    sign-in just as it would in a browser.
    """

    async def override_get_db() -> AsyncGenerator[AsyncSession]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()



@pytest.fixture
def sign_up(client: AsyncClient) -> Callable[..., Awaitable[Response]]:
    """Register through the sign-up form, leaving the client signed in."""

    async def submit(username: str, password: str = "pw123") -> Response:
        return await client.post(
            "/sign_up",
            data={"username": username, "password": password, "confirm_password": password},
        )

    return submit


@pytest.fixture
def add_birthday(client: AsyncClient) -> Callable[..., Awaitable[Response]]:
    """Submit the add-birthday form with up to three interests."""

    async def submit(username: str, name: str, birth_date: str, *interests: str) -> Response:
        data = {"birthday_name": name, "birthday_date": birth_date}
        for index, interest in enumerate(interests, start=1):
            data[f"interest{index}"] = interest
        return await client.post(f"/{username}/add_birthday", data=data)

    return submit
