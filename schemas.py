"""Request payload models for the JSON API."""

from __future__ import annotations

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, StrictBool, field_validator
from pydantic import ValidationError as PydanticValidationError

from errors import ValidationError, structure_errors


class Frequency(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    WEEKDAYS = "weekdays"
    WEEKENDS = "weekends"


class HabitCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=200)
    category: str = Field(min_length=1, max_length=100)
    frequency: Frequency = Frequency.DAILY


class HabitUpdate(BaseModel):
    """Partial habit update. Omitted fields are left alone; explicit nulls are rejected."""

    model_config = ConfigDict(str_strip_whitespace=True)

    name: Optional[str] = Field(default=None, min_length=1, max_length=200)
    category: Optional[str] = Field(default=None, min_length=1, max_length=100)
    frequency: Optional[Frequency] = None

    @field_validator("name", "category", "frequency", mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("Field may not be null")
        return value

    def changes(self) -> dict:
        data = self.model_dump(exclude_unset=True)
        if "frequency" in data:
            data["frequency"] = data["frequency"].value
        return data


class ToggleCompletion(BaseModel):
    date: str = Field(min_length=1)
    completed: StrictBool


class SignupRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    username: str = Field(min_length=3, max_length=150)
    password: str = Field(min_length=6)
    email: Optional[str] = Field(default=None, max_length=255)
    first_name: Optional[str] = Field(default=None, alias="firstName", max_length=100)
    last_name: Optional[str] = Field(default=None, alias="lastName", max_length=100)


class LoginRequest(BaseModel):
    username: str
    password: str


def parse_payload(model, payload, message="Invalid request data"):
    """Validate ``payload`` against ``model``, raising the API ValidationError on failure."""

    if not isinstance(payload, dict):
        raise ValidationError(message, errors={"__root__": ["Expected a JSON object"]})
    try:
        return model.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError(message, errors=structure_errors(exc))


__all__ = [
    "Frequency",
    "HabitCreate",
    "HabitUpdate",
    "LoginRequest",
    "SignupRequest",
    "ToggleCompletion",
    "parse_payload",
]
