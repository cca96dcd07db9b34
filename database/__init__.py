"""Persistence layer for FitSync: users, meals and workouts.

Import `models` for the ORM classes and the `get_db_*` dependencies for
request-scoped sessions.
"""

from . import models
from .database import (
    ReadSessionLocal,
    WriteSessionLocal,
    init_db,
    read_engine,
    write_engine,
)
from .deps import get_db_read, get_db_write
from .models import Base, Meal, User, Workout

__all__ = [
    "models",
    "Base",
    "User",
    "Meal",
    "Workout",
    "write_engine",
    "read_engine",
    "WriteSessionLocal",
    "ReadSessionLocal",
    "init_db",
    "get_db_read",
    "get_db_write",
]
