"""Meals API router.

CRUD over the signed-in user's meal log plus a range-filtered summary.
Single-entry routes go through `get_owned_entry`, so owners and
administrators are the only callers that can see or change an entry.
"""

from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from api.deps import get_current_user, get_owned_entry
from core.logger import get_logger
from core.repository import EntryRepository, save
from database import models
from database.deps import get_db_read, get_db_write
from schemas import (
    MealCreateRequest,
    MealResponse,
    MealSummaryResponse,
    MealUpdateRequest,
    MessageResponse,
)
from schemas.meal_schema import MealType
from services.activity_summary import summarize_meals

logger = get_logger("api.meals")
router = APIRouter(prefix="/api/meals", tags=["meals"])


@router.post("", response_model=MealResponse, status_code=201)
def create_meal(
    payload: MealCreateRequest,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_write),
):
    """Log a meal for the signed-in user."""
    data = payload.model_dump(exclude_none=True)
    meal = save(db, models.Meal(user_id=current_user.id, **data))
    logger.info("Meal %s logged by user %s", meal.id, current_user.id)
    return meal


@router.get("", response_model=List[MealResponse])
def list_meals(
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    meal_type: Optional[MealType] = Query(None, alias="mealType"),
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_read),
):
    """Return the user's meals, newest first, optionally filtered by date range and type."""
    return EntryRepository(models.Meal, db).list_for_owner(
        current_user.id, start_date, end_date, meal_type=meal_type
    )


@router.get("/stats/summary", response_model=MealSummaryResponse)
def meal_summary(
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_read),
):
    """Count and total calories/macros of the user's meals in a date range."""
    meals = EntryRepository(models.Meal, db).list_for_owner(current_user.id, start_date, end_date)
    return summarize_meals(meals).to_dict()


@router.get("/{meal_id}", response_model=MealResponse)
def get_meal(
    meal_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_read),
):
    return get_owned_entry(db, models.Meal, meal_id, current_user)


@router.put("/{meal_id}", response_model=MealResponse)
def update_meal(
    meal_id: int,
    payload: MealUpdateRequest,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_write),
):
    """Apply a partial update to a meal. The owner never changes."""
    meal = get_owned_entry(db, models.Meal, meal_id, current_user)
    return EntryRepository(models.Meal, db).update(meal, payload.changes())


@router.delete("/{meal_id}", response_model=MessageResponse)
def delete_meal(
    meal_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_write),
):
    meal = get_owned_entry(db, models.Meal, meal_id, current_user)
    EntryRepository(models.Meal, db).delete(meal)
    logger.info("Meal %s deleted by user %s", meal_id, current_user.id)
    return MessageResponse(message="Meal deleted successfully")
