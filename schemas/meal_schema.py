"""Schemas for meal log entries."""

from datetime import datetime
from typing import ClassVar, FrozenSet, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator

from .base import CamelModel, PartialUpdate, naive_utc

MealType = Literal["breakfast", "lunch", "dinner", "snack"]


class MealCreateRequest(CamelModel):
    """Payload for logging a meal."""

    name: str = Field(..., min_length=1, examples=["Oatmeal with Berries"])
    meal_type: MealType = Field(..., examples=["breakfast"])
    date: Optional[datetime] = Field(None, description="When the meal was eaten; defaults to now")
    calories: float = Field(..., ge=0, examples=[350])
    protein: float = Field(0, ge=0, description="grams")
    carbs: float = Field(0, ge=0, description="grams")
    fats: float = Field(0, ge=0, description="grams")
    description: Optional[str] = None
    portion: str = "1 serving"

    to_naive_utc = field_validator("date")(naive_utc)


class MealUpdateRequest(PartialUpdate):
    clearable: ClassVar[FrozenSet[str]] = frozenset({"description"})

    name: Optional[str] = Field(None, min_length=1)
    meal_type: Optional[MealType] = None
    date: Optional[datetime] = None
    calories: Optional[float] = Field(None, ge=0)
    protein: Optional[float] = Field(None, ge=0)
    carbs: Optional[float] = Field(None, ge=0)
    fats: Optional[float] = Field(None, ge=0)
    description: Optional[str] = None
    portion: Optional[str] = None

    to_naive_utc = field_validator("date")(naive_utc)


class MealResponse(CamelModel):
    id: int
    user_id: int
    name: str
    meal_type: MealType
    date: datetime
    calories: float
    protein: float
    carbs: float
    fats: float
    description: Optional[str] = None
    portion: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class OwnerSummary(CamelModel):
    id: int
    name: str
    email: str


class AdminMealResponse(MealResponse):
    """Meal as listed to administrators, with its owner."""

    user: Optional[OwnerSummary] = None


class MealSummaryResponse(CamelModel):
    total_meals: int
    total_calories: float
    total_protein: float
    total_carbs: float
    total_fats: float


class MealSuggestion(CamelModel):
    """Catalog meal suggested for a goal."""

    name: str
    meal_type: MealType
    calories: float
    protein: float
    carbs: float
    fats: float
    description: Optional[str] = None


class MealRecommendationsResponse(BaseModel):
    goal: str
    recommendations: List[MealSuggestion]
    message: str
