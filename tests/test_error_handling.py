"""Test error handling functionality.

Verifies that custom exceptions carry the right status codes and that every
failure reaches the client in the same error envelope.
"""
from core.exceptions import (
    AuthenticationError,
    ConflictError,
    DatabaseError,
    NotFoundError,
    PermissionDenied,
    PreconditionFailure,
    ValidationError,
)


def test_exception_classes_have_proper_attributes():
    exc = NotFoundError("Meal", 123)
    assert exc.status_code == 404
    assert "Meal" in exc.message
    assert "123" in exc.message

    exc = ValidationError("Invalid input", field="age")
    assert exc.status_code == 400
    assert exc.details == {"field": "age"}

    exc = PreconditionFailure(["weight", "age"])
    assert exc.status_code == 400
    assert exc.fields == ["age", "weight"]
    assert exc.details == {"fields": ["age", "weight"]}

    assert AuthenticationError().status_code == 401
    assert PermissionDenied().message == "Not authorized"
    assert ConflictError("Email already registered", field="email").status_code == 409
    assert DatabaseError("boom", operation="health_check").details == {"operation": "health_check"}


def test_not_found_envelope(client, make_user, auth_headers):
    res = client.get("/api/meals/424242", headers=auth_headers(make_user()))
    assert res.status_code == 404
    error = res.json()["error"]
    assert error["status_code"] == 404
    assert error["details"] == {"resource": "Meal", "id": 424242}


def test_request_validation_envelope(client):
    res = client.post("/api/auth/login", json={"email": "not-an-email"})
    assert res.status_code == 422
    error = res.json()["error"]
    assert error["message"] == "Validation error"
    assert error["details"]["validation_errors"]


def test_unknown_route_uses_envelope(client):
    res = client.get("/api/nothing-here")
    assert res.status_code == 404
    assert res.json()["error"]["status_code"] == 404


def test_unauthenticated_response_has_challenge_header(client):
    res = client.get("/api/meals")
    assert res.status_code == 401
    assert res.headers.get("www-authenticate") == "Bearer"


def test_root_and_health(client):
    assert "message" in client.get("/").json()
    res = client.get("/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


def test_cors_preflight_only_allows_routed_methods(client):
    headers = {"Origin": "http://localhost:3000", "Access-Control-Request-Method": "PUT"}
    assert client.options("/api/meals/1", headers=headers).status_code == 200
    headers["Access-Control-Request-Method"] = "PATCH"
    assert client.options("/api/meals/1", headers=headers).status_code == 400
