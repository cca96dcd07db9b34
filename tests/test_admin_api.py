"""Tests for the admin-only endpoints."""
from database import models


def _log_entries(db, user):
    db.add(models.Meal(user_id=user.id, name="Toast", meal_type="breakfast", calories=200))
    db.add(models.Workout(user_id=user.id, name="Run", workout_type="cardio", duration=20, calories_burned=180))
    db.commit()


def test_regular_user_is_forbidden(client, make_user, auth_headers):
    headers = auth_headers(make_user())
    for path in ("/api/admin/users", "/api/admin/meals", "/api/admin/stats"):
        res = client.get(path, headers=headers)
        assert res.status_code == 403
        assert res.json()["error"]["message"] == "Not authorized as an admin"


def test_admin_requires_token(client):
    assert client.get("/api/admin/users").status_code == 401


def test_list_and_get_users(client, make_user, auth_headers):
    admin = make_user(role="admin")
    first = make_user()
    second = make_user()
    headers = auth_headers(admin)

    users = client.get("/api/admin/users", headers=headers).json()
    assert {u["id"] for u in users} == {admin.id, first.id, second.id}
    assert all("hashedPassword" not in u for u in users)

    res = client.get(f"/api/admin/users/{first.id}", headers=headers)
    assert res.json()["email"] == first.email
    assert client.get("/api/admin/users/9999", headers=headers).status_code == 404


def test_admin_can_promote_user(client, db, make_user, auth_headers):
    admin = make_user(role="admin")
    user = make_user()
    res = client.put(f"/api/admin/users/{user.id}", json={"role": "admin", "weight": 90}, headers=auth_headers(admin))
    assert res.status_code == 200
    assert res.json()["role"] == "admin"
    assert res.json()["bmi"] == 29.39

    res = client.put(f"/api/admin/users/{user.id}", json={"role": "superuser"}, headers=auth_headers(admin))
    assert res.status_code == 422


def test_delete_user_cascades(client, db, make_user, auth_headers):
    admin = make_user(role="admin")
    user = make_user()
    _log_entries(db, user)
    user_id = user.id
    headers = auth_headers(admin)

    res = client.delete(f"/api/admin/users/{user_id}", headers=headers)
    assert res.json() == {"message": "User and associated data deleted successfully"}
    db.expunge_all()
    assert db.get(models.User, user_id) is None
    assert db.query(models.Meal).count() == 0
    assert db.query(models.Workout).count() == 0


def test_entry_listings_include_owner(client, db, make_user, auth_headers):
    admin = make_user(role="admin")
    user = make_user(name="Jane Smith")
    _log_entries(db, user)
    headers = auth_headers(admin)

    meals = client.get("/api/admin/meals", headers=headers).json()
    assert meals[0]["user"] == {"id": user.id, "name": "Jane Smith", "email": user.email}
    workouts = client.get("/api/admin/workouts", headers=headers).json()
    assert workouts[0]["type"] == "cardio"
    assert workouts[0]["user"]["id"] == user.id


def test_admin_deletes_any_entry(client, db, make_user, auth_headers):
    admin = make_user(role="admin")
    user = make_user()
    _log_entries(db, user)
    meal_id = db.query(models.Meal).one().id
    workout_id = db.query(models.Workout).one().id
    headers = auth_headers(admin)

    assert client.delete(f"/api/admin/meals/{meal_id}", headers=headers).json() == {"message": "Meal deleted successfully"}
    assert client.delete(f"/api/admin/workouts/{workout_id}", headers=headers).status_code == 200
    assert client.delete(f"/api/admin/meals/{meal_id}", headers=headers).status_code == 404


def test_stats_count_only_regular_users(client, db, make_user, auth_headers):
    admin = make_user(role="admin")
    _log_entries(db, make_user())
    make_user()
    stats = client.get("/api/admin/stats", headers=auth_headers(admin)).json()
    assert stats == {"totalUsers": 2, "totalMeals": 1, "totalWorkouts": 1}
