"""Shared pytest fixtures.

The environment is pointed at a throwaway SQLite file before any
application module is imported, so engines and settings pick it up.
"""
import os
import tempfile

_TMP_DIR = tempfile.mkdtemp(prefix="fitsync-tests-")
os.environ["DATABASE_URL"] = "sqlite:///" + os.path.join(_TMP_DIR, "test.db")
os.environ.pop("READ_DATABASE_URL", None)
os.environ["LOG_DIR"] = _TMP_DIR
os.environ["SEED_ON_STARTUP"] = "false"

import pytest
from fastapi.testclient import TestClient

from core.security import create_access_token, hash_password
from database import WriteSessionLocal, models, write_engine
from database.models import Base


@pytest.fixture
def db():
    """Fresh schema and a write session for each test."""
    Base.metadata.drop_all(bind=write_engine)
    Base.metadata.create_all(bind=write_engine)
    session = WriteSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_user(db):
    """Factory creating a stored user with password 'secret123'."""
    counter = {"n": 0}

    def _make(role="user", **fields):
        counter["n"] += 1
        data = {
            "email": f"user{counter['n']}@example.com",
            "name": f"User {counter['n']}",
            "age": 30,
            "gender": "male",
            "height": 175.0,
            "weight": 75.0,
            "goal": "maintenance",
            "activity_level": "moderate",
        }
        data.update(fields)
        user = models.User(role=role, hashed_password=hash_password("secret123"), **data)
        db.add(user)
        db.commit()
        db.refresh(user)
        return user

    return _make


@pytest.fixture
def auth_headers():
    def _headers(user):
        return {"Authorization": f"Bearer {create_access_token(user.id)}"}

    return _headers


@pytest.fixture
def client(db):
    from main import app

    return TestClient(app)
