"""Schemas for daily targets and platform statistics."""

from .base import CamelModel


class MacroGrams(CamelModel):
    protein: int
    carbs: int
    fats: int


class DailyTargetsResponse(CamelModel):
    """Daily energy and macro targets derived from the caller's profile."""

    bmr: int
    tdee: int
    target_calories: int
    macros: MacroGrams
    goal: str
    activity_level: str

    @classmethod
    def from_target(cls, target) -> "DailyTargetsResponse":
        return cls(
            bmr=target.bmr,
            tdee=target.tdee,
            target_calories=target.target_calories,
            macros=MacroGrams(
                protein=target.macros.protein_g,
                carbs=target.macros.carbs_g,
                fats=target.macros.fats_g,
            ),
            goal=target.goal,
            activity_level=target.activity_level,
        )


class PlatformStatsResponse(CamelModel):
    total_users: int
    total_meals: int
    total_workouts: int
