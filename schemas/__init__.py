"""Pydantic schema package for request and response models."""

from .base import MessageResponse
from .user_schema import (
    UserRegisterRequest,
    LoginRequest,
    ProfileUpdateRequest,
    AdminUserUpdateRequest,
    UserResponse,
    AuthResponse,
)
from .meal_schema import (
    MealCreateRequest,
    MealUpdateRequest,
    MealResponse,
    AdminMealResponse,
    MealSummaryResponse,
    MealRecommendationsResponse,
)
from .workout_schema import (
    WorkoutCreateRequest,
    WorkoutUpdateRequest,
    WorkoutResponse,
    AdminWorkoutResponse,
    WorkoutSummaryResponse,
    WorkoutRecommendationsResponse,
)
from .recommendation_schema import DailyTargetsResponse, PlatformStatsResponse

__all__ = [
    "MessageResponse",
    "UserRegisterRequest",
    "LoginRequest",
    "ProfileUpdateRequest",
    "AdminUserUpdateRequest",
    "UserResponse",
    "AuthResponse",
    "MealCreateRequest",
    "MealUpdateRequest",
    "MealResponse",
    "AdminMealResponse",
    "MealSummaryResponse",
    "MealRecommendationsResponse",
    "WorkoutCreateRequest",
    "WorkoutUpdateRequest",
    "WorkoutResponse",
    "AdminWorkoutResponse",
    "WorkoutSummaryResponse",
    "WorkoutRecommendationsResponse",
    "DailyTargetsResponse",
    "PlatformStatsResponse",
]
