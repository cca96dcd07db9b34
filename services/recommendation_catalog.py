"""Static goal-keyed catalog of suggested workouts and meals.

The catalog is a lookup, not a computation: each goal maps to five workouts
and five meals. Unknown or missing goals get the maintenance entries.
"""

from types import MappingProxyType
from typing import Dict, List, Optional

from services.nutrition_calculator import resolve_goal


def _freeze(entries):
    return tuple(MappingProxyType(dict(e)) for e in entries)


WORKOUT_RECOMMENDATIONS = MappingProxyType({
    "weight_loss": _freeze([
        {"name": "Running", "type": "cardio", "duration": 30, "calories_burned": 300, "intensity": "moderate", "description": "Great for burning calories and improving cardiovascular health"},
        {"name": "Cycling", "type": "cardio", "duration": 45, "calories_burned": 400, "intensity": "moderate", "description": "Low impact cardio that burns fat effectively"},
        {"name": "Swimming", "type": "cardio", "duration": 30, "calories_burned": 350, "intensity": "moderate", "description": "Full body workout with minimal joint stress"},
        {"name": "HIIT Training", "type": "cardio", "duration": 20, "calories_burned": 300, "intensity": "high", "description": "High intensity intervals for maximum calorie burn"},
        {"name": "Jump Rope", "type": "cardio", "duration": 15, "calories_burned": 200, "intensity": "high", "description": "Effective cardio that can be done anywhere"},
    ]),
    "weight_gain": _freeze([
        {"name": "Bench Press", "type": "strength", "duration": 45, "calories_burned": 200, "intensity": "high", "description": "Build upper body mass and strength", "sets": 4, "reps": 8},
        {"name": "Squats", "type": "strength", "duration": 45, "calories_burned": 250, "intensity": "high", "description": "Essential for building leg mass", "sets": 4, "reps": 10},
        {"name": "Deadlifts", "type": "strength", "duration": 45, "calories_burned": 300, "intensity": "high", "description": "Full body compound movement for mass", "sets": 3, "reps": 8},
        {"name": "Pull-ups", "type": "strength", "duration": 30, "calories_burned": 150, "intensity": "moderate", "description": "Build back and arm strength", "sets": 4, "reps": 10},
        {"name": "Shoulder Press", "type": "strength", "duration": 30, "calories_burned": 150, "intensity": "moderate", "description": "Develop shoulder mass and strength", "sets": 4, "reps": 10},
    ]),
    "muscle_gain": _freeze([
        {"name": "Weight Training", "type": "strength", "duration": 60, "calories_burned": 250, "intensity": "high", "description": "Progressive overload for muscle growth", "sets": 4, "reps": 8},
        {"name": "Compound Lifts", "type": "strength", "duration": 60, "calories_burned": 300, "intensity": "high", "description": "Multiple muscle groups for maximum growth", "sets": 5, "reps": 5},
        {"name": "Hypertrophy Training", "type": "strength", "duration": 50, "calories_burned": 200, "intensity": "moderate", "description": "Moderate weight, high volume for size", "sets": 4, "reps": 12},
        {"name": "Push-Pull Split", "type": "strength", "duration": 55, "calories_burned": 250, "intensity": "high", "description": "Balanced training for all muscle groups", "sets": 4, "reps": 10},
        {"name": "Leg Day", "type": "strength", "duration": 60, "calories_burned": 300, "intensity": "high", "description": "Focus on lower body development", "sets": 4, "reps": 10},
    ]),
    "maintenance": _freeze([
        {"name": "Jogging", "type": "cardio", "duration": 30, "calories_burned": 250, "intensity": "moderate", "description": "Maintain cardiovascular fitness"},
        {"name": "Bodyweight Circuit", "type": "strength", "duration": 30, "calories_burned": 200, "intensity": "moderate", "description": "Full body maintenance routine"},
        {"name": "Yoga", "type": "flexibility", "duration": 45, "calories_burned": 150, "intensity": "low", "description": "Improve flexibility and mindfulness"},
        {"name": "Walking", "type": "cardio", "duration": 45, "calories_burned": 150, "intensity": "low", "description": "Low impact daily activity"},
        {"name": "Light Resistance Training", "type": "strength", "duration": 40, "calories_burned": 180, "intensity": "moderate", "description": "Maintain muscle tone", "sets": 3, "reps": 12},
    ]),
    "endurance": _freeze([
        {"name": "Long Distance Running", "type": "cardio", "duration": 60, "calories_burned": 600, "intensity": "moderate", "description": "Build cardiovascular endurance", "distance": 10},
        {"name": "Cycling", "type": "cardio", "duration": 90, "calories_burned": 700, "intensity": "moderate", "description": "Low impact endurance training", "distance": 30},
        {"name": "Swimming Laps", "type": "cardio", "duration": 45, "calories_burned": 400, "intensity": "moderate", "description": "Full body endurance workout"},
        {"name": "Rowing", "type": "cardio", "duration": 40, "calories_burned": 400, "intensity": "moderate", "description": "Full body cardiovascular endurance"},
        {"name": "Trail Running", "type": "cardio", "duration": 50, "calories_burned": 500, "intensity": "moderate", "description": "Varied terrain for endurance", "distance": 8},
    ]),
})

MEAL_RECOMMENDATIONS = MappingProxyType({
    "weight_loss": _freeze([
        {"name": "Grilled Chicken Salad", "meal_type": "lunch", "calories": 350, "protein": 40, "carbs": 20, "fats": 10, "description": "High protein, low calorie meal"},
        {"name": "Greek Yogurt with Berries", "meal_type": "breakfast", "calories": 200, "protein": 15, "carbs": 25, "fats": 5, "description": "Light, protein-rich breakfast"},
        {"name": "Vegetable Stir-fry", "meal_type": "dinner", "calories": 300, "protein": 15, "carbs": 35, "fats": 12, "description": "Low calorie, nutrient dense"},
        {"name": "Protein Smoothie", "meal_type": "snack", "calories": 180, "protein": 20, "carbs": 15, "fats": 5, "description": "Quick protein boost"},
        {"name": "Baked Salmon with Veggies", "meal_type": "dinner", "calories": 400, "protein": 35, "carbs": 20, "fats": 18, "description": "Omega-3 rich, filling meal"},
    ]),
    "weight_gain": _freeze([
        {"name": "Protein Pancakes", "meal_type": "breakfast", "calories": 550, "protein": 35, "carbs": 60, "fats": 15, "description": "High calorie breakfast for gains"},
        {"name": "Beef and Rice Bowl", "meal_type": "lunch", "calories": 700, "protein": 45, "carbs": 80, "fats": 20, "description": "Mass building meal"},
        {"name": "Pasta with Meat Sauce", "meal_type": "dinner", "calories": 800, "protein": 40, "carbs": 95, "fats": 25, "description": "Calorie dense dinner"},
        {"name": "Peanut Butter Sandwich", "meal_type": "snack", "calories": 400, "protein": 15, "carbs": 40, "fats": 18, "description": "Quick calorie boost"},
        {"name": "Mass Gainer Shake", "meal_type": "snack", "calories": 600, "protein": 50, "carbs": 75, "fats": 10, "description": "High calorie protein shake"},
    ]),
    "muscle_gain": _freeze([
        {"name": "Egg White Omelette", "meal_type": "breakfast", "calories": 300, "protein": 35, "carbs": 15, "fats": 8, "description": "Lean protein breakfast"},
        {"name": "Chicken and Sweet Potato", "meal_type": "lunch", "calories": 500, "protein": 45, "carbs": 50, "fats": 10, "description": "Balanced muscle building meal"},
        {"name": "Steak with Quinoa", "meal_type": "dinner", "calories": 650, "protein": 50, "carbs": 45, "fats": 25, "description": "High protein dinner"},
        {"name": "Cottage Cheese Bowl", "meal_type": "snack", "calories": 200, "protein": 25, "carbs": 10, "fats": 5, "description": "Casein protein snack"},
        {"name": "Tuna Salad", "meal_type": "lunch", "calories": 350, "protein": 40, "carbs": 20, "fats": 12, "description": "Lean protein source"},
    ]),
    "maintenance": _freeze([
        {"name": "Balanced Breakfast Bowl", "meal_type": "breakfast", "calories": 400, "protein": 20, "carbs": 50, "fats": 12, "description": "Well-rounded breakfast"},
        {"name": "Turkey Sandwich", "meal_type": "lunch", "calories": 450, "protein": 30, "carbs": 45, "fats": 15, "description": "Balanced midday meal"},
        {"name": "Grilled Fish with Rice", "meal_type": "dinner", "calories": 500, "protein": 35, "carbs": 55, "fats": 15, "description": "Healthy dinner option"},
        {"name": "Mixed Nuts", "meal_type": "snack", "calories": 200, "protein": 8, "carbs": 12, "fats": 16, "description": "Nutrient dense snack"},
        {"name": "Vegetable Soup", "meal_type": "lunch", "calories": 250, "protein": 10, "carbs": 35, "fats": 8, "description": "Light, nutritious meal"},
    ]),
    "endurance": _freeze([
        {"name": "Oatmeal with Banana", "meal_type": "breakfast", "calories": 350, "protein": 12, "carbs": 65, "fats": 6, "description": "Slow-release energy"},
        {"name": "Whole Grain Pasta", "meal_type": "lunch", "calories": 550, "protein": 20, "carbs": 85, "fats": 12, "description": "Carb-loading meal"},
        {"name": "Energy Bar", "meal_type": "snack", "calories": 250, "protein": 10, "carbs": 40, "fats": 7, "description": "Quick energy boost"},
        {"name": "Rice and Beans", "meal_type": "dinner", "calories": 450, "protein": 18, "carbs": 75, "fats": 8, "description": "Complex carbs for endurance"},
        {"name": "Sports Drink Smoothie", "meal_type": "snack", "calories": 200, "protein": 8, "carbs": 38, "fats": 3, "description": "Electrolyte and energy replenishment"},
    ]),
})


def workouts_for(goal: Optional[str]) -> List[Dict]:
    """Return copies of the suggested workouts for a goal."""
    return [dict(entry) for entry in WORKOUT_RECOMMENDATIONS[resolve_goal(goal)]]


def meals_for(goal: Optional[str]) -> List[Dict]:
    """Return copies of the suggested meals for a goal."""
    return [dict(entry) for entry in MEAL_RECOMMENDATIONS[resolve_goal(goal)]]


def describe_goal(goal: Optional[str]) -> str:
    return resolve_goal(goal).replace("_", " ")
