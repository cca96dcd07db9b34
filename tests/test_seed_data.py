"""Tests for the CSV fixture loader in `data/seed_data.py`."""
import pytest

from data.seed_data import (
    FIXTURES_DIR,
    parse_meals_csv,
    parse_users_csv,
    parse_workouts_csv,
    seed_from_fixtures,
)
from core.security import verify_password
from database import models


def test_parse_users_csv_has_expected_keys():
    rows = parse_users_csv(FIXTURES_DIR / "users.csv")
    assert len(rows) == 4
    admin = rows[0]
    assert admin["email"] == "admin@fitsync.com"
    assert admin["role"] == "admin"
    assert admin["activity_level"] == "moderate"
    assert isinstance(admin["age"], int)


def test_parse_workouts_blank_cells_become_none():
    rows = parse_workouts_csv(FIXTURES_DIR / "workouts.csv")
    run = rows[0]
    assert run["workout_type"] == "cardio"
    assert run["sets"] is None and run["reps"] is None
    assert run["distance"] == 5.0
    assert parse_meals_csv(FIXTURES_DIR / "meals.csv")[0]["meal_type"] == "breakfast"


def test_seed_is_idempotent(db):
    counts = seed_from_fixtures(session=db)
    assert counts == {"users": 4, "meals": 12, "workouts": 9}

    again = seed_from_fixtures(session=db)
    assert again == {"users": 0, "meals": 0, "workouts": 0}
    assert db.query(models.User).count() == 4


def test_seeded_admin_has_no_entries_and_can_log_in(db):
    seed_from_fixtures(session=db)
    admin = db.query(models.User).filter_by(email="admin@fitsync.com").one()
    assert admin.meals == [] and admin.workouts == []
    assert verify_password("admin123", admin.hashed_password)

    john = db.query(models.User).filter_by(email="john@example.com").one()
    assert len(john.meals) == 4
    assert john.bmi == 26.23


def test_failed_seed_rolls_back(db, monkeypatch):
    import data.seed_data as seed_data

    def failing_hash(password):
        if password == "password123":
            raise RuntimeError("hashing backend unavailable")
        return "hashed"

    monkeypatch.setattr(seed_data, "hash_password", failing_hash)
    with pytest.raises(RuntimeError):
        seed_from_fixtures(session=db)
    # the admin row flushed before the failure must not linger
    assert db.query(models.User).count() == 0
