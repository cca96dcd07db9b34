"""Tests for the ORM hooks and ownership rules on the stored models."""
from datetime import datetime

from core.security import can_modify, owns
from database import models


def test_bmi_computed_on_insert(make_user):
    user = make_user(height=175.0, weight=75.0)
    assert user.bmi == 24.49


def test_bmi_recomputed_when_weight_changes(db, make_user):
    user = make_user(height=180.0, weight=81.0)
    assert user.bmi == 25.0
    user.weight = 90.0
    db.commit()
    db.refresh(user)
    assert user.bmi == 27.78


def test_bmi_absent_without_height(db, make_user):
    user = make_user(height=None)
    assert user.bmi is None
    user.height = 160.0
    db.commit()
    db.refresh(user)
    assert user.bmi == 29.3


def test_deleting_user_removes_entries(db, make_user):
    user = make_user()
    db.add(models.Meal(user_id=user.id, name="Toast", meal_type="breakfast", calories=200))
    db.add(models.Workout(user_id=user.id, name="Run", workout_type="cardio", duration=20, calories_burned=180))
    db.commit()

    db.delete(user)
    db.commit()
    assert db.query(models.Meal).count() == 0
    assert db.query(models.Workout).count() == 0


def test_entry_defaults(db, make_user):
    user = make_user()
    meal = models.Meal(user_id=user.id, name="Apple", meal_type="snack", calories=95)
    db.add(meal)
    db.commit()
    db.refresh(meal)
    assert meal.protein == 0 and meal.carbs == 0 and meal.fats == 0
    assert meal.portion == "1 serving"
    assert isinstance(meal.date, datetime)


def test_ownership_predicates(db, make_user):
    owner = make_user()
    other = make_user()
    admin = make_user(role="admin")
    meal = models.Meal(user_id=owner.id, name="Soup", meal_type="lunch", calories=250)
    db.add(meal)
    db.commit()

    assert owns(owner, meal)
    assert not owns(other, meal)
    assert not owns(admin, meal)
    assert can_modify(owner, meal)
    assert can_modify(admin, meal)
    assert not can_modify(other, meal)
