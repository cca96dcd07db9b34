"""Workouts API router.

Mirrors the meals router: CRUD over the signed-in user's workouts and a
summary of duration, calories burned and distance.
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
    MessageResponse,
    WorkoutCreateRequest,
    WorkoutResponse,
    WorkoutSummaryResponse,
    WorkoutUpdateRequest,
)
from schemas.workout_schema import WorkoutType
from services.activity_summary import summarize_workouts

logger = get_logger("api.workouts")
router = APIRouter(prefix="/api/workouts", tags=["workouts"])


@router.post("", response_model=WorkoutResponse, status_code=201)
def create_workout(
    payload: WorkoutCreateRequest,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_write),
):
    """Log a workout for the signed-in user."""
    data = payload.model_dump(exclude_none=True)
    workout = save(db, models.Workout(user_id=current_user.id, **data))
    logger.info("Workout %s logged by user %s", workout.id, current_user.id)
    return workout


@router.get("", response_model=List[WorkoutResponse])
def list_workouts(
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    workout_type: Optional[WorkoutType] = Query(None, alias="type"),
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_read),
):
    """Return the user's workouts, newest first, optionally filtered by date range and type."""
    return EntryRepository(models.Workout, db).list_for_owner(
        current_user.id, start_date, end_date, workout_type=workout_type
    )


@router.get("/stats/summary", response_model=WorkoutSummaryResponse)
def workout_summary(
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_read),
):
    workouts = EntryRepository(models.Workout, db).list_for_owner(current_user.id, start_date, end_date)
    return summarize_workouts(workouts).to_dict()


@router.get("/{workout_id}", response_model=WorkoutResponse)
def get_workout(
    workout_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_read),
):
    return get_owned_entry(db, models.Workout, workout_id, current_user)


@router.put("/{workout_id}", response_model=WorkoutResponse)
def update_workout(
    workout_id: int,
    payload: WorkoutUpdateRequest,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_write),
):
    workout = get_owned_entry(db, models.Workout, workout_id, current_user)
    return EntryRepository(models.Workout, db).update(workout, payload.changes())


@router.delete("/{workout_id}", response_model=MessageResponse)
def delete_workout(
    workout_id: int,
    current_user: models.User = Depends(get_current_user),
    db: Session = Depends(get_db_write),
):
    workout = get_owned_entry(db, models.Workout, workout_id, current_user)
    EntryRepository(models.Workout, db).delete(workout)
    logger.info("Workout %s deleted by user %s", workout_id, current_user.id)
    return MessageResponse(message="Workout deleted successfully")
