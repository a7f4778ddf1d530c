"""Pydantic schemas for account forms and user records."""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class SignUpForm(BaseModel):
    """Form body for account registration.

    Fields default to empty strings so that missing input is reported through
    the aggregated sign-up messages instead of a framework 422.
    """

    username: str = Field(default="", description="Desired username (1-100 characters, no spaces)")
    password: str = Field(default="", description="Password")
    confirm_password: str = Field(default="", description="Password confirmation")

    @field_validator("username")
    @classmethod
    def lowercase_username(cls, v: str) -> str:
        """Usernames are case-insensitive and stored lowercase."""
        return v.lower()


class SignInForm(BaseModel):
    """Form body for signing in."""

    username: str = Field(default="", description="Username")
    password: str = Field(default="", description="Password")

    @field_validator("username")
    @classmethod
    def lowercase_username(cls, v: str) -> str:
        return v.lower()


class UserCredentials(BaseModel):
    """Stored credentials for a user, as returned by the storage layer."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="User ID")
    username: str = Field(description="Username (lowercase)")
    password_hash: str = Field(description="bcrypt digest")
