"""Aggregate totals over meal and workout entries.

The callers pass entries already filtered by owner and date range. Entries
can be ORM rows or plain mappings; missing numeric fields count as zero.
"""

import math
from dataclasses import dataclass, asdict
from typing import Any, Iterable


def _field(entry: Any, name: str) -> float:
    if isinstance(entry, dict):
        value = entry.get(name)
    else:
        value = getattr(entry, name, None)
    return value or 0


@dataclass(frozen=True)
class MealSummary:
    total_meals: int = 0
    total_calories: float = 0
    total_protein: float = 0
    total_carbs: float = 0
    total_fats: float = 0

    def to_dict(self):
        return asdict(self)


@dataclass(frozen=True)
class WorkoutSummary:
    total_workouts: int = 0
    total_duration: float = 0
    total_calories_burned: float = 0
    total_distance: float = 0

    def to_dict(self):
        return asdict(self)


def _total(entries, name: str) -> float:
    """Exact sum of one field; the result does not depend on entry order."""
    return math.fsum(_field(entry, name) for entry in entries)


def summarize_meals(meals: Iterable[Any]) -> MealSummary:
    """Count meals and sum their calories and macros."""
    meals = list(meals)
    return MealSummary(
        total_meals=len(meals),
        total_calories=_total(meals, "calories"),
        total_protein=_total(meals, "protein"),
        total_carbs=_total(meals, "carbs"),
        total_fats=_total(meals, "fats"),
    )


def summarize_workouts(workouts: Iterable[Any]) -> WorkoutSummary:
    """Count workouts and sum duration, calories burned and distance."""
    workouts = list(workouts)
    return WorkoutSummary(
        total_workouts=len(workouts),
        total_duration=_total(workouts, "duration"),
        total_calories_burned=_total(workouts, "calories_burned"),
        total_distance=_total(workouts, "distance"),
    )
