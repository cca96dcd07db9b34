"""Tests for the static workout/meal recommendation catalog."""
import pytest

from services.nutrition_calculator import GOALS
from services.recommendation_catalog import (
    MEAL_RECOMMENDATIONS,
    WORKOUT_RECOMMENDATIONS,
    meals_for,
    workouts_for,
)


@pytest.mark.parametrize("goal", GOALS)
def test_every_goal_has_five_workouts_and_meals(goal):
    assert len(workouts_for(goal)) == 5
    assert len(meals_for(goal)) == 5


def test_unknown_goal_uses_maintenance_catalog():
    assert workouts_for("unknown") == workouts_for("maintenance")
    assert meals_for(None) == meals_for("maintenance")


def test_returned_entries_are_copies():
    entries = workouts_for("endurance")
    entries[0]["name"] = "Changed"
    assert workouts_for("endurance")[0]["name"] == "Long Distance Running"


def test_catalog_is_read_only():
    with pytest.raises(TypeError):
        WORKOUT_RECOMMENDATIONS["weight_loss"] = ()
    with pytest.raises(TypeError):
        MEAL_RECOMMENDATIONS["weight_loss"][0]["calories"] = 0
