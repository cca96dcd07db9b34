"""Tests for registration, login and profile endpoints."""
import pytest

from api.auth import get_profile, login, register, update_profile
from core.exceptions import AuthenticationError, ConflictError
from core.security import decode_access_token, verify_password
from schemas import LoginRequest, ProfileUpdateRequest, UserRegisterRequest


def registration(**overrides):
    data = {
        "email": "Jane@Example.com",
        "password": "password123",
        "name": "Jane Smith",
        "age": 25,
        "gender": "female",
        "height": 165,
        "weight": 60,
        "goal": "muscle_gain",
        "activityLevel": "very_active",
    }
    data.update(overrides)
    return data


def test_register_returns_profile_and_token(db):
    res = register(UserRegisterRequest(**registration()), db=db)
    assert res.email == "jane@example.com"
    assert res.role == "user"
    assert res.activity_level == "very_active"
    assert res.bmi == 22.04
    assert decode_access_token(res.token) == res.id


def test_register_duplicate_email_conflicts(db):
    register(UserRegisterRequest(**registration()), db=db)
    with pytest.raises(ConflictError) as exc_info:
        register(UserRegisterRequest(**registration(email="jane@example.com ")), db=db)
    assert exc_info.value.status_code == 409


def test_login_with_wrong_password_fails(db, make_user):
    user = make_user()
    with pytest.raises(AuthenticationError):
        login(LoginRequest(email=user.email, password="nope-nope"), db=db)
    with pytest.raises(AuthenticationError):
        login(LoginRequest(email="missing@example.com", password="secret123"), db=db)


def test_login_returns_token(db, make_user):
    user = make_user()
    res = login(LoginRequest(email=user.email.upper(), password="secret123"), db=db)
    assert res.id == user.id
    assert decode_access_token(res.token) == user.id


def test_profile_update_recomputes_bmi_and_hashes_password(db, make_user):
    user = make_user(height=175.0, weight=75.0)
    payload = ProfileUpdateRequest(weight=80, password="new-secret", goal="weight_loss")
    res = update_profile(payload, current_user=user, db=db)
    assert res.weight == 80
    assert res.bmi == 26.12
    assert res.goal == "weight_loss"
    assert verify_password("new-secret", user.hashed_password)
    assert get_profile(current_user=user).name == user.name


def test_profile_update_ignores_null_for_required_fields(db, make_user):
    user = make_user()
    res = update_profile(ProfileUpdateRequest(name=None, goal=None), current_user=user, db=db)
    assert res.name == user.name
    assert res.goal == "maintenance"


def test_profile_email_taken_by_other_account(db, make_user):
    first = make_user()
    second = make_user()
    with pytest.raises(ConflictError):
        update_profile(ProfileUpdateRequest(email=first.email), current_user=second, db=db)


def test_register_and_fetch_profile_over_http(client):
    res = client.post("/api/auth/register", json=registration())
    assert res.status_code == 201
    body = res.json()
    assert "hashedPassword" not in body and "password" not in body
    assert body["activityLevel"] == "very_active"

    profile = client.get("/api/auth/profile", headers={"Authorization": f"Bearer {body['token']}"})
    assert profile.status_code == 200
    assert profile.json()["email"] == "jane@example.com"


def test_short_password_rejected(client):
    res = client.post("/api/auth/register", json=registration(password="123"))
    assert res.status_code == 422
    assert res.json()["error"]["message"] == "Validation error"


def test_profile_requires_token(client):
    res = client.get("/api/auth/profile")
    assert res.status_code == 401
    assert res.json()["error"]["status_code"] == 401


def test_profile_rejects_garbage_token(client):
    res = client.get("/api/auth/profile", headers={"Authorization": "Bearer not-a-token"})
    assert res.status_code == 401


def test_token_for_deleted_user_rejected(client, db, make_user, auth_headers):
    user = make_user()
    headers = auth_headers(user)
    db.delete(user)
    db.commit()
    res = client.get("/api/auth/profile", headers=headers)
    assert res.status_code == 401


def test_body_metrics_have_upper_bounds(client, make_user, auth_headers):
    res = client.post("/api/auth/register", json=registration(weight=1e308))
    assert res.status_code == 422

    headers = auth_headers(make_user())
    assert client.put("/api/auth/profile", json={"height": 301}, headers=headers).status_code == 422
    assert client.put("/api/auth/profile", json={"weight": 500}, headers=headers).status_code == 200
