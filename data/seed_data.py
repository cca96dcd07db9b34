"""Load demo accounts, meals and workouts from the CSV fixtures.

This module provides:
- parse_users_csv / parse_meals_csv / parse_workouts_csv: read a fixture into
  a list of normalized dicts
- seed_from_fixtures(fixtures_dir, session): idempotently seed the database

Users are matched by email and never duplicated. Meal and workout fixtures
are templates: every newly created non-admin user gets one copy of each,
dated `days_ago` days before now.
"""
from __future__ import annotations

from datetime import timedelta
from pathlib import Path
from typing import Dict, List, Optional
import logging
import math

import pandas as pd

from core.repository import UserRepository
from core.security import hash_password
from database.database import WriteSessionLocal
from database import models

logger = logging.getLogger("data.seed_data")

FIXTURES_DIR = Path(__file__).resolve().parent / "fixtures"


def _clean(value):
    """Turn pandas NaN cells into None and strip strings."""
    if value is None:
        return None
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return value


def _as_int(value) -> Optional[int]:
    value = _clean(value)
    return int(value) if value is not None else None


def _as_float(value, default: Optional[float] = None) -> Optional[float]:
    value = _clean(value)
    return float(value) if value is not None else default


def _read(csv_path) -> pd.DataFrame:
    logger.info("Parsing fixture CSV: %s", csv_path)
    df = pd.read_csv(csv_path, encoding="utf-8")
    return df.rename(columns=lambda s: s.strip())


def parse_users_csv(csv_path) -> List[Dict]:
    """Parse the users fixture into dicts ready for `models.User` (password still plain)."""
    users = []
    for _, row in _read(csv_path).iterrows():
        email = _clean(row.get("email"))
        if not email:
            continue
        users.append({
            "email": email.lower(),
            "password": str(_clean(row.get("password"))),
            "name": _clean(row.get("name")) or email,
            "role": _clean(row.get("role")) or "user",
            "age": _as_int(row.get("age")),
            "gender": _clean(row.get("gender")),
            "height": _as_float(row.get("height")),
            "weight": _as_float(row.get("weight")),
            "goal": _clean(row.get("goal")) or "maintenance",
            "activity_level": _clean(row.get("activity_level")) or "moderate",
        })
    logger.info("Parsed %s users", len(users))
    return users


def parse_meals_csv(csv_path) -> List[Dict]:
    """Parse the meal template fixture."""
    meals = []
    for _, row in _read(csv_path).iterrows():
        name = _clean(row.get("name"))
        if not name:
            continue
        meals.append({
            "name": name,
            "meal_type": _clean(row.get("meal_type")) or "snack",
            "calories": _as_float(row.get("calories"), 0.0),
            "protein": _as_float(row.get("protein"), 0.0),
            "carbs": _as_float(row.get("carbs"), 0.0),
            "fats": _as_float(row.get("fats"), 0.0),
            "description": _clean(row.get("description")),
            "days_ago": _as_int(row.get("days_ago")) or 0,
        })
    logger.info("Parsed %s meal templates", len(meals))
    return meals


def parse_workouts_csv(csv_path) -> List[Dict]:
    """Parse the workout template fixture."""
    workouts = []
    for _, row in _read(csv_path).iterrows():
        name = _clean(row.get("name"))
        if not name:
            continue
        workouts.append({
            "name": name,
            "workout_type": _clean(row.get("type")) or "other",
            "duration": _as_float(row.get("duration"), 1.0),
            "intensity": _clean(row.get("intensity")) or "moderate",
            "calories_burned": _as_float(row.get("calories_burned"), 0.0),
            "sets": _as_int(row.get("sets")),
            "reps": _as_int(row.get("reps")),
            "distance": _as_float(row.get("distance")),
            "description": _clean(row.get("description")),
            "days_ago": _as_int(row.get("days_ago")) or 0,
        })
    logger.info("Parsed %s workout templates", len(workouts))
    return workouts


def _entries_for(user: models.User, templates: List[Dict], model):
    now = models.utcnow()
    for item in templates:
        fields = dict(item)
        days_ago = fields.pop("days_ago")
        yield model(user_id=user.id, date=now - timedelta(days=days_ago), **fields)


def seed_from_fixtures(fixtures_dir=FIXTURES_DIR, session=None) -> Dict[str, int]:
    """Idempotently seed users and their sample entries.

    If `session` is not supplied, a `WriteSessionLocal` session is used.

    Args:
        fixtures_dir: Directory holding users.csv, meals.csv and workouts.csv.
        session: Optional SQLAlchemy session. If None, creates a new one.

    Returns:
        Counts of created users, meals and workouts.
    """
    fixtures_dir = Path(fixtures_dir)
    close_session = False
    if session is None:
        session = WriteSessionLocal()
        close_session = True
    try:
        users = parse_users_csv(fixtures_dir / "users.csv")
        meals = parse_meals_csv(fixtures_dir / "meals.csv")
        workouts = parse_workouts_csv(fixtures_dir / "workouts.csv")

        repo = UserRepository(session)
        counts = {"users": 0, "meals": 0, "workouts": 0}
        for item in users:
            if repo.get_by_email(item["email"]) is not None:
                continue
            data = dict(item)
            password = data.pop("password")
            user = models.User(**data, hashed_password=hash_password(password))
            session.add(user)
            session.flush()
            counts["users"] += 1
            if user.role == "admin":
                continue
            for entry in _entries_for(user, meals, models.Meal):
                session.add(entry)
                counts["meals"] += 1
            for entry in _entries_for(user, workouts, models.Workout):
                session.add(entry)
                counts["workouts"] += 1
        session.commit()
        logger.info(
            "Seeded %s users, %s meals, %s workouts",
            counts["users"], counts["meals"], counts["workouts"],
        )
        return counts
    except Exception:
        session.rollback()
        logger.exception("Seeding failed; rolled back")
        raise
    finally:
        if close_session:
            session.close()


if __name__ == "__main__":
    import argparse

    from database import init_db

    p = argparse.ArgumentParser("Seed demo users, meals and workouts into the DB")
    p.add_argument("fixtures_dir", nargs="?", default=str(FIXTURES_DIR))
    args = p.parse_args()
    init_db()
    print(seed_from_fixtures(args.fixtures_dir))
