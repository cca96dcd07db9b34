"""Recommendation-related endpoints.

Goal-based workout and meal suggestions from the static catalog, and the
daily calorie/macro targets computed from the caller's body metrics.
"""

from fastapi import APIRouter, Depends

from api.deps import get_current_user
from core.logger import get_logger
from database import models
from schemas import (
    DailyTargetsResponse,
    MealRecommendationsResponse,
    WorkoutRecommendationsResponse,
)
from services.nutrition_calculator import nutrition_calculator, resolve_goal
from services.recommendation_catalog import describe_goal, meals_for, workouts_for

logger = get_logger("api.recommendations")
router = APIRouter(prefix="/api/recommendations", tags=["recommendations"])


@router.get("/workouts", response_model=WorkoutRecommendationsResponse)
def recommended_workouts(current_user: models.User = Depends(get_current_user)):
    """Suggested workouts for the user's goal (maintenance when unset)."""
    goal = resolve_goal(current_user.goal)
    return WorkoutRecommendationsResponse(
        goal=goal,
        recommendations=workouts_for(goal),
        message=f"Workout recommendations based on your {describe_goal(goal)} goal",
    )


@router.get("/meals", response_model=MealRecommendationsResponse)
def recommended_meals(current_user: models.User = Depends(get_current_user)):
    """Suggested meals for the user's goal (maintenance when unset)."""
    goal = resolve_goal(current_user.goal)
    return MealRecommendationsResponse(
        goal=goal,
        recommendations=meals_for(goal),
        message=f"Meal recommendations based on your {describe_goal(goal)} goal",
    )


@router.get("/daily-targets", response_model=DailyTargetsResponse)
def daily_targets(current_user: models.User = Depends(get_current_user)):
    """Compute BMR, TDEE, calorie target and macro grams for the signed-in user.

    Raises:
        PreconditionFailure: If the profile lacks weight, height, age or gender.
    """
    target = nutrition_calculator.targets_for_profile(current_user)
    logger.info("Daily targets for user %s: %s kcal", current_user.id, target.target_calories)
    return DailyTargetsResponse.from_target(target)
