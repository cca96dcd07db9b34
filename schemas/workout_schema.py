"""Schemas for workout log entries."""

from datetime import datetime
from typing import ClassVar, FrozenSet, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from .base import CamelModel, PartialUpdate, naive_utc
from .meal_schema import OwnerSummary

WorkoutType = Literal["cardio", "strength", "flexibility", "sports", "other"]
Intensity = Literal["low", "moderate", "high"]


class WorkoutCreateRequest(CamelModel):
    """Payload for logging a workout session."""

    name: str = Field(..., min_length=1, examples=["Morning Run"])
    workout_type: WorkoutType = Field(..., alias="type", examples=["cardio"])
    date: Optional[datetime] = Field(None, description="When the workout happened; defaults to now")
    duration: float = Field(..., ge=1, description="minutes", examples=[30])
    intensity: Intensity = "moderate"
    calories_burned: float = Field(..., ge=0, examples=[300])
    description: Optional[str] = None
    sets: Optional[int] = Field(None, ge=0)
    reps: Optional[int] = Field(None, ge=0)
    distance: Optional[float] = Field(None, ge=0, description="kilometers")

    to_naive_utc = field_validator("date")(naive_utc)


class WorkoutUpdateRequest(PartialUpdate):
    clearable: ClassVar[FrozenSet[str]] = frozenset({"description", "sets", "reps", "distance"})

    name: Optional[str] = Field(None, min_length=1)
    workout_type: Optional[WorkoutType] = Field(None, alias="type")
    date: Optional[datetime] = None
    duration: Optional[float] = Field(None, ge=1)
    intensity: Optional[Intensity] = None
    calories_burned: Optional[float] = Field(None, ge=0)
    description: Optional[str] = None
    sets: Optional[int] = Field(None, ge=0)
    reps: Optional[int] = Field(None, ge=0)
    distance: Optional[float] = Field(None, ge=0)

    to_naive_utc = field_validator("date")(naive_utc)


class WorkoutResponse(CamelModel):
    id: int
    user_id: int
    name: str
    workout_type: WorkoutType = Field(..., alias="type")
    date: datetime
    duration: float
    intensity: Intensity
    calories_burned: float
    description: Optional[str] = None
    sets: Optional[int] = None
    reps: Optional[int] = None
    distance: Optional[float] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class AdminWorkoutResponse(WorkoutResponse):
    """Workout as listed to administrators, with its owner."""

    user: Optional[OwnerSummary] = None


class WorkoutSummaryResponse(CamelModel):
    total_workouts: int
    total_duration: float
    total_calories_burned: float
    total_distance: float


class WorkoutSuggestion(CamelModel):
    """Catalog workout suggested for a goal."""

    name: str
    workout_type: WorkoutType = Field(..., alias="type")
    duration: float
    calories_burned: float
    intensity: Intensity
    description: Optional[str] = None
    sets: Optional[int] = None
    reps: Optional[int] = None
    distance: Optional[float] = None


class WorkoutRecommendationsResponse(BaseModel):
    goal: str
    recommendations: List[WorkoutSuggestion]
    message: str
