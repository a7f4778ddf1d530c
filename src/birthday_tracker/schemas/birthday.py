"""Pydantic schemas for birthday people, interests and their forms."""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field, field_validator


def normalize_birthday_name(name: str) -> str:
    """Lowercase a name and collapse runs of whitespace to single spaces."""
    return " ".join(name.lower().split())


class AddBirthdayForm(BaseModel):
    """Form body for adding a birthday person with up to three interests."""

    birthday_name: str = Field(default="", description="Person's name")
    birthday_date: str = Field(default="", description="Birth date (YYYY-MM-DD)")
    interest1: str = Field(default="", description="First interest")
    interest2: str = Field(default="", description="Second interest")
    interest3: str = Field(default="", description="Third interest")

    @field_validator("birthday_name")
    @classmethod
    def normalize_name(cls, v: str) -> str:
        return normalize_birthday_name(v)

    @property
    def interests(self) -> list[str]:
        """Submitted interests, skipping fields left empty."""
        return [
            interest
            for interest in (self.interest1, self.interest2, self.interest3)
            if interest != ""
        ]


class AddInterestForm(BaseModel):
    """Form body for adding one interest to a birthday person."""

    new_interest: str = Field(default="", description="Interest to add")


class DeleteInterestForm(BaseModel):
    """Form body for removing one interest from a birthday person."""

    delete_interest: str = Field(default="", description="Interest to remove")


class BirthdayPersonRecord(BaseModel):
    """A birthday person as returned by the storage layer."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Birthday person ID")
    name: str = Field(description="Name (lowercase)")
    birth_date: date = Field(description="Birth date")
    user_id: int = Field(description="Owning user ID")


class InterestRecord(BaseModel):
    """An interest as returned by the storage layer."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="Interest ID")
    birthday_id: int = Field(description="Birthday person ID")
    text: str = Field(description="Interest text")


class BirthdayListing(BaseModel):
    """One row of the all-birthdays listing."""

    id: int
    name: str
    display_name: str
    birth_date: date
    month: str = Field(description="Month name used to group the listing")
