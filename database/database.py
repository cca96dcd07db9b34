"""Database helpers: engines, session factories and DB initialization.

Provides read/write session factories and an `init_db` helper that creates
tables and optionally seeds demo data.
"""

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker

from core.config import get_settings
from .models import Base

settings = get_settings()

# Read/Write partitioning pattern
# Set DATABASE_URL and READ_DATABASE_URL to different instances to route reads to a replica.
WRITE_DATABASE_URL = settings.database_url
READ_DATABASE_URL = settings.effective_read_database_url


def _engine_for(url: str) -> Engine:
    if url.startswith("sqlite"):
        return create_engine(url, connect_args={"check_same_thread": False})
    return create_engine(url, pool_pre_ping=True)


# Engines
write_engine = _engine_for(WRITE_DATABASE_URL)
read_engine = write_engine if READ_DATABASE_URL == WRITE_DATABASE_URL else _engine_for(READ_DATABASE_URL)

# Session factories
WriteSessionLocal = sessionmaker(bind=write_engine)
ReadSessionLocal = sessionmaker(bind=read_engine)


@event.listens_for(Engine, "connect")
def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
    """SQLite only enforces ON DELETE CASCADE with this pragma on."""
    if type(dbapi_connection).__module__.startswith("sqlite3"):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def init_db(seed: bool = False):
    """Initialize database schema.

    Creates all tables using SQLAlchemy models and, when `seed` is set,
    loads the demo users, meals and workouts from the CSV fixtures.
    """
    Base.metadata.create_all(bind=write_engine)
    if seed:
        from data.seed_data import seed_from_fixtures

        seed_from_fixtures()


# Convenience generators for dependency injection
def get_write_session():
    """Yield a write-enabled SQLAlchemy session for the request scope."""
    db = WriteSessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_read_session():
    """Yield a read-only SQLAlchemy session for the request scope.

    Used for read endpoints where routing reads to a replica may be desired.
    """
    db = ReadSessionLocal()
    try:
        yield db
    finally:
        db.close()
