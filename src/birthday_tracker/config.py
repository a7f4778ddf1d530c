"""Application configuration using Pydantic Settings."""

from datetime import timedelta
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # App settings
    app_name: str = "Birthday Tracker"
    debug: bool = False
    secret_key: str  # Required, no default

    # Database
    database_url: str = "sqlite+aiosqlite:///./birthdays.db"
    create_tables_on_startup: bool = True

    # Session cookie
    session_cookie: str = "birthday_session"
    session_max_age: int = int(timedelta(days=14).total_seconds())

    # Password hashing
    bcrypt_rounds: int = 12

    # Listing
    birthdays_per_page: int = 5

    @field_validator("secret_key")
    @classmethod
    def validate_secret_key(cls, v: str, info) -> str:
        """Validate that secret_key is secure."""
        if not v:
            raise ValueError("SECRET_KEY is required")

        # In production mode, ensure secret key is strong
        debug = info.data.get("debug", False)
        if not debug:
            if len(v) < 32:
                raise ValueError("SECRET_KEY must be at least 32 characters in production mode")
            if v in ("change-me-in-production", "secret", "password", "changeme"):
                raise ValueError("SECRET_KEY must not be a common weak value")

        return v

    @field_validator("bcrypt_rounds")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        """bcrypt only accepts work factors between 4 and 31."""
        if not 4 <= v <= 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31")
        return v

    @field_validator("birthdays_per_page")
    @classmethod
    def validate_birthdays_per_page(cls, v: int) -> int:
        if v < 1:
            raise ValueError("BIRTHDAYS_PER_PAGE must be at least 1")
        return v

    def validate_runtime_config(self) -> list[str]:
        """Validate runtime configuration and return warnings."""
        warnings = []

        if self.bcrypt_rounds < 10:
            warnings.append(
                f"BCRYPT_ROUNDS is {self.bcrypt_rounds} - use at least 10 outside of tests"
            )

        if self.database_url.startswith("sqlite") and ":memory:" in self.database_url:
            warnings.append("DATABASE_URL points at an in-memory database - data will not persist")

        # Warn about debug mode in production
        if self.debug:
            warnings.append("DEBUG mode is enabled - should be disabled in production")

        return warnings


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
