"""Daily nutrition target calculation.

Turns a snapshot of body metrics into basal metabolic rate (Mifflin-St Jeor),
total daily energy expenditure, a goal-adjusted calorie target and macro
grams. Everything here is pure: no I/O, no shared mutable state.

Rounding happens once, when the `NutritionTarget` is built, and always rounds
halves away from zero.
"""

import math
from dataclasses import dataclass, asdict
from decimal import Decimal, ROUND_HALF_UP
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from core.exceptions import PreconditionFailure
from core.logger import get_logger

logger = get_logger("services.nutrition_calculator")

SEXES = ("male", "female", "other")
ACTIVITY_LEVELS = ("sedentary", "light", "moderate", "active", "very_active")
GOALS = ("weight_loss", "weight_gain", "muscle_gain", "maintenance", "endurance")

DEFAULT_ACTIVITY_LEVEL = "moderate"
DEFAULT_GOAL = "maintenance"

# kcal per gram
PROTEIN_KCAL_PER_G = 4
CARBS_KCAL_PER_G = 4
FATS_KCAL_PER_G = 9

# Sex constant of the Mifflin-St Jeor equation. "other" uses the mean of the two.
BMR_SEX_OFFSETS: Mapping[str, float] = MappingProxyType({
    "male": 5.0,
    "female": -161.0,
    "other": -78.0,
})

ACTIVITY_MULTIPLIERS: Mapping[str, float] = MappingProxyType({
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very_active": 1.9,
})

GOAL_CALORIE_OFFSETS: Mapping[str, int] = MappingProxyType({
    "weight_loss": -500,
    "weight_gain": 500,
    "muscle_gain": 300,
    "endurance": 200,
    "maintenance": 0,
})

# (protein, carbs, fats) share of the calorie target
MACRO_RATIOS: Mapping[str, Tuple[float, float, float]] = MappingProxyType({
    "weight_loss": (0.35, 0.35, 0.30),
    "weight_gain": (0.30, 0.45, 0.25),
    "muscle_gain": (0.40, 0.35, 0.25),
    "endurance": (0.25, 0.55, 0.20),
    "maintenance": (0.30, 0.40, 0.30),
})


def round_half_away(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(Decimal(repr(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def resolve_activity_level(activity_level: Optional[str]) -> str:
    """Map an activity level onto the known set, defaulting to moderate."""
    if activity_level in ACTIVITY_MULTIPLIERS:
        return activity_level
    return DEFAULT_ACTIVITY_LEVEL


def resolve_goal(goal: Optional[str]) -> str:
    """Map a goal onto the known set, defaulting to maintenance."""
    if goal in GOAL_CALORIE_OFFSETS:
        return goal
    return DEFAULT_GOAL


def _is_positive_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and value > 0


@dataclass(frozen=True)
class MacroTargets:
    protein_g: int
    carbs_g: int
    fats_g: int


@dataclass(frozen=True)
class NutritionTarget:
    """Rounded daily targets for one profile snapshot."""

    bmr: int
    tdee: int
    target_calories: int
    macros: MacroTargets
    goal: str
    activity_level: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class NutritionCalculator:
    """Class-based nutrition calculator used across the app."""

    def calculate_bmi(self, height_cm: Optional[float], weight_kg: Optional[float]) -> Optional[float]:
        """Calculate BMI from height in cm and weight in kg, rounded to 2 decimals.

        Returns None when either value is missing or height is not positive.
        """
        if height_cm is None or weight_kg is None or height_cm <= 0:
            return None
        h_m = height_cm / 100.0
        return round(weight_kg / (h_m * h_m), 2)

    def calculate_bmr(self, age: float, height_cm: float, weight_kg: float, sex: str) -> float:
        """Calculate BMR using the Mifflin-St Jeor equation (unrounded)."""
        return 10 * weight_kg + 6.25 * height_cm - 5 * age + BMR_SEX_OFFSETS[sex]

    def calculate_tdee(self, bmr: float, activity_level: Optional[str]) -> float:
        """Estimate TDEE from BMR and the activity multiplier (unrounded)."""
        return bmr * ACTIVITY_MULTIPLIERS[resolve_activity_level(activity_level)]

    def calculate_target_calories(self, tdee: float, goal: Optional[str]) -> float:
        """Apply the goal's calorie offset to TDEE (unrounded)."""
        return tdee + GOAL_CALORIE_OFFSETS[resolve_goal(goal)]

    def macro_ratios(self, goal: Optional[str]) -> Tuple[float, float, float]:
        return MACRO_RATIOS[resolve_goal(goal)]

    def calculate_macros(self, target_calories: float, goal: Optional[str]) -> MacroTargets:
        """Allocate macro grams from an unrounded calorie target."""
        protein, carbs, fats = self.macro_ratios(goal)
        return MacroTargets(
            protein_g=round_half_away(target_calories * protein / PROTEIN_KCAL_PER_G),
            carbs_g=round_half_away(target_calories * carbs / CARBS_KCAL_PER_G),
            fats_g=round_half_away(target_calories * fats / FATS_KCAL_PER_G),
        )

    def validate_metrics(self, weight_kg: Any, height_cm: Any, age: Any, sex: Any) -> None:
        """Raise PreconditionFailure naming every missing or invalid metric."""
        invalid = [
            name for name, value in (("weight", weight_kg), ("height", height_cm), ("age", age))
            if not _is_positive_number(value)
        ]
        if sex not in BMR_SEX_OFFSETS:
            invalid.append("gender")
        if invalid:
            raise PreconditionFailure(invalid)

    def calculate_daily_targets(
        self,
        weight_kg: float,
        height_cm: float,
        age: float,
        sex: str,
        activity_level: Optional[str] = None,
        goal: Optional[str] = None,
    ) -> NutritionTarget:
        """Compute BMR, TDEE, calorie target and macros for one set of metrics.

        Args:
            weight_kg: Body weight in kilograms.
            height_cm: Height in centimeters.
            age: Age in years.
            sex: One of ``male``, ``female`` or ``other``.
            activity_level: Activity level; unknown or missing means moderate.
            goal: Fitness goal; unknown or missing means maintenance.

        Returns:
            A `NutritionTarget` with integer values and the resolved goal and
            activity level.

        Raises:
            PreconditionFailure: If weight, height or age is missing, not a
                number or not positive, sex is not a known category, or the
                metrics are too large to give a finite estimate.
        """
        self.validate_metrics(weight_kg, height_cm, age, sex)
        activity_level = resolve_activity_level(activity_level)
        goal = resolve_goal(goal)

        bmr = self.calculate_bmr(age, height_cm, weight_kg, sex)
        tdee = self.calculate_tdee(bmr, activity_level)
        target_calories = self.calculate_target_calories(tdee, goal)
        if not all(math.isfinite(value) for value in (bmr, tdee, target_calories)):
            raise PreconditionFailure(
                ("weight", "height", "age"), message="Body metrics are out of range for a calorie estimate"
            )
        macros = self.calculate_macros(target_calories, goal)
        logger.debug("Targets: bmr=%s tdee=%s target=%s goal=%s", bmr, tdee, target_calories, goal)

        return NutritionTarget(
            bmr=round_half_away(bmr),
            tdee=round_half_away(tdee),
            target_calories=round_half_away(target_calories),
            macros=macros,
            goal=goal,
            activity_level=activity_level,
        )

    def targets_for_profile(self, user) -> NutritionTarget:
        """Compute targets from a stored user profile."""
        return self.calculate_daily_targets(
            weight_kg=user.weight,
            height_cm=user.height,
            age=user.age,
            sex=user.gender,
            activity_level=user.activity_level,
            goal=user.goal,
        )


# export singleton
nutrition_calculator = NutritionCalculator()
__all__ = [
    "NutritionCalculator",
    "NutritionTarget",
    "MacroTargets",
    "nutrition_calculator",
    "round_half_away",
    "ACTIVITY_MULTIPLIERS",
    "GOAL_CALORIE_OFFSETS",
    "MACRO_RATIOS",
]
