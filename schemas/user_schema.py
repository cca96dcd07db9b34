"""Schemas for registration, login and profile requests and responses."""

from datetime import datetime
from typing import ClassVar, FrozenSet, Literal, Optional

from pydantic import Field, field_validator

from .base import CamelModel, PartialUpdate

Gender = Literal["male", "female", "other"]
Goal = Literal["weight_loss", "weight_gain", "muscle_gain", "maintenance", "endurance"]
ActivityLevel = Literal["sedentary", "light", "moderate", "active", "very_active"]
Role = Literal["user", "admin"]

EMAIL_PATTERN = r"^\S+@\S+\.\S+$"


def _normalize_email(value):
    if isinstance(value, str):
        return value.strip().lower()
    return value


class BodyMetrics(CamelModel):
    """Profile fields shared by registration and updates."""

    age: Optional[int] = Field(None, ge=10, le=120, examples=[30], description="Age in years (10-120)")
    gender: Optional[Gender] = Field(None, examples=["male"])
    height: Optional[float] = Field(None, ge=50, le=300, examples=[175.0], description="Height in centimeters (50-300)")
    weight: Optional[float] = Field(None, ge=20, le=500, examples=[75.0], description="Weight in kilograms (20-500)")


class UserRegisterRequest(BodyMetrics):
    """Request payload for creating an account."""

    email: str = Field(..., pattern=EMAIL_PATTERN, examples=["jane@example.com"])
    password: str = Field(..., min_length=6)
    name: str = Field(..., min_length=1, examples=["Jane Smith"])
    goal: Goal = "maintenance"
    activity_level: ActivityLevel = "moderate"

    normalize_email = field_validator("email", mode="before")(_normalize_email)


class LoginRequest(CamelModel):
    email: str
    password: str

    normalize_email = field_validator("email", mode="before")(_normalize_email)


class ProfileUpdateRequest(PartialUpdate):
    """Partial profile update sent by the account owner."""

    clearable: ClassVar[FrozenSet[str]] = frozenset({"age", "gender", "height", "weight"})

    name: Optional[str] = Field(None, min_length=1)
    email: Optional[str] = Field(None, pattern=EMAIL_PATTERN)
    age: Optional[int] = Field(None, ge=10, le=120)
    gender: Optional[Gender] = None
    height: Optional[float] = Field(None, ge=50, le=300)
    weight: Optional[float] = Field(None, ge=20, le=500)
    goal: Optional[Goal] = None
    activity_level: Optional[ActivityLevel] = None
    password: Optional[str] = Field(None, min_length=6)

    normalize_email = field_validator("email", mode="before")(_normalize_email)


class AdminUserUpdateRequest(ProfileUpdateRequest):
    """Partial update an administrator may apply to any account."""

    role: Optional[Role] = None


class UserResponse(CamelModel):
    """Public view of a user profile. The credential is never included."""

    id: int
    email: str
    role: Role
    name: str
    age: Optional[int] = None
    gender: Optional[Gender] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    goal: Goal
    activity_level: ActivityLevel
    bmi: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AuthResponse(UserResponse):
    """Profile plus a bearer token, returned by register and login."""

    token: str
