"""Admin API router.

Every route requires the admin role. Administrators can inspect, edit and
delete any account, list every log entry together with its owner, and read
platform-wide counts.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session, joinedload

from api.auth import apply_profile_changes
from api.deps import require_admin
from core.exceptions import NotFoundError
from core.logger import get_logger
from core.repository import BaseRepository, UserRepository
from database import models
from database.deps import get_db_read, get_db_write
from schemas import (
    AdminMealResponse,
    AdminUserUpdateRequest,
    AdminWorkoutResponse,
    MessageResponse,
    PlatformStatsResponse,
    UserResponse,
)

logger = get_logger("api.admin")
router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


def _get_user_or_404(db: Session, user_id: int) -> models.User:
    user = db.get(models.User, user_id)
    if user is None:
        raise NotFoundError("User", user_id)
    return user


def _delete_entry(db: Session, model, entry_id: int) -> None:
    repo = BaseRepository(model, db)
    entry = repo.get_by_id(entry_id)
    if entry is None:
        raise NotFoundError(model.__name__, entry_id)
    repo.delete(entry)


@router.get("/users", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db_read)):
    """All accounts, newest first."""
    return UserRepository(db).newest_first()


@router.get("/users/{user_id}", response_model=UserResponse)
def get_user(user_id: int, db: Session = Depends(get_db_read)):
    return _get_user_or_404(db, user_id)


@router.put("/users/{user_id}", response_model=UserResponse)
def update_user(user_id: int, payload: AdminUserUpdateRequest, db: Session = Depends(get_db_write)):
    """Partially update any account, including its role."""
    user = _get_user_or_404(db, user_id)
    user = apply_profile_changes(UserRepository(db), user, payload.changes())
    logger.info("Admin updated user id=%s", user_id)
    return user


@router.delete("/users/{user_id}", response_model=MessageResponse)
def delete_user(user_id: int, db: Session = Depends(get_db_write)):
    """Delete an account together with all of its meals and workouts."""
    user = _get_user_or_404(db, user_id)
    UserRepository(db).delete(user)
    logger.info("Admin deleted user id=%s and associated data", user_id)
    return MessageResponse(message="User and associated data deleted successfully")


@router.get("/meals", response_model=List[AdminMealResponse])
def list_all_meals(db: Session = Depends(get_db_read)):
    return (
        db.query(models.Meal)
        .options(joinedload(models.Meal.user))
        .order_by(models.Meal.date.desc(), models.Meal.id.desc())
        .all()
    )


@router.delete("/meals/{meal_id}", response_model=MessageResponse)
def delete_any_meal(meal_id: int, db: Session = Depends(get_db_write)):
    _delete_entry(db, models.Meal, meal_id)
    logger.info("Admin deleted meal id=%s", meal_id)
    return MessageResponse(message="Meal deleted successfully")


@router.get("/workouts", response_model=List[AdminWorkoutResponse])
def list_all_workouts(db: Session = Depends(get_db_read)):
    return (
        db.query(models.Workout)
        .options(joinedload(models.Workout.user))
        .order_by(models.Workout.date.desc(), models.Workout.id.desc())
        .all()
    )


@router.delete("/workouts/{workout_id}", response_model=MessageResponse)
def delete_any_workout(workout_id: int, db: Session = Depends(get_db_write)):
    _delete_entry(db, models.Workout, workout_id)
    logger.info("Admin deleted workout id=%s", workout_id)
    return MessageResponse(message="Workout deleted successfully")


@router.get("/stats", response_model=PlatformStatsResponse)
def platform_stats(db: Session = Depends(get_db_read)):
    """Counts of regular users, meals and workouts."""
    return PlatformStatsResponse(
        total_users=UserRepository(db).count(role="user"),
        total_meals=BaseRepository(models.Meal, db).count(),
        total_workouts=BaseRepository(models.Workout, db).count(),
    )
