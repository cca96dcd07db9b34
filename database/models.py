"""SQLAlchemy ORM models for the fitness tracking service.

Defines User (profile + credential), Meal and Workout. Meals and workouts
belong to exactly one user and are removed with it. The user's BMI is kept
in step with height and weight by insert/update hooks at the bottom of this
module.
"""

from datetime import datetime, timezone

from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, Text, event
from sqlalchemy.orm import declarative_base, relationship

Base = declarative_base()


def utcnow() -> datetime:
    """Naive UTC timestamp, the form stored in every DateTime column."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class User(Base):
    """ORM model representing an application user and their body metrics."""

    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, nullable=False, unique=True, index=True)
    hashed_password = Column(String, nullable=False)
    role = Column(String, nullable=False, default="user")
    name = Column(String, nullable=False)
    age = Column(Integer, nullable=True)
    gender = Column(String, nullable=True)
    height = Column(Float, nullable=True)  # cm
    weight = Column(Float, nullable=True)  # kg
    goal = Column(String, nullable=False, default="maintenance")
    activity_level = Column(String, nullable=False, default="moderate")
    bmi = Column(Float, nullable=True)
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    meals = relationship("Meal", back_populates="user", cascade="all, delete-orphan")
    workouts = relationship("Workout", back_populates="user", cascade="all, delete-orphan")

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    def recompute_bmi(self) -> None:
        from services.nutrition_calculator import nutrition_calculator

        self.bmi = nutrition_calculator.calculate_bmi(self.height, self.weight)


class Meal(Base):
    """ORM model representing a logged meal."""

    __tablename__ = "meals"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    meal_type = Column(String, nullable=False)
    date = Column(DateTime, nullable=False, default=utcnow, index=True)
    calories = Column(Float, nullable=False)
    protein = Column(Float, nullable=False, default=0)
    carbs = Column(Float, nullable=False, default=0)
    fats = Column(Float, nullable=False, default=0)
    description = Column(Text, nullable=True)
    portion = Column(String, nullable=True, default="1 serving")
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="meals")


class Workout(Base):
    """ORM model representing a logged workout session."""

    __tablename__ = "workouts"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    name = Column(String, nullable=False)
    workout_type = Column("type", String, nullable=False)
    date = Column(DateTime, nullable=False, default=utcnow, index=True)
    duration = Column(Float, nullable=False)  # minutes
    intensity = Column(String, nullable=False, default="moderate")
    calories_burned = Column(Float, nullable=False)
    description = Column(Text, nullable=True)
    sets = Column(Integer, nullable=True)
    reps = Column(Integer, nullable=True)
    distance = Column(Float, nullable=True)  # km
    created_at = Column(DateTime, default=utcnow)
    updated_at = Column(DateTime, default=utcnow, onupdate=utcnow)

    user = relationship("User", back_populates="workouts")


@event.listens_for(User, "before_insert")
@event.listens_for(User, "before_update")
def _sync_bmi(mapper, connection, target):
    target.recompute_bmi()
