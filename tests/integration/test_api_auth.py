"""
Integration tests for auth API endpoints.
Uses TestClient with mocked use cases (no real DB).
Note: Runs full app lifespan (slower). Use: pytest tests/unit/ for fast unit-only runs.
"""
import pytest

from device_inventory.application.dto.auth_dto import AuthResponse
from device_inventory.application.dto.user_dto import UserResponse
from device_inventory.application.use_cases.auth import (
    GetCurrentUserUseCase,
    LoginUserUseCase,
    RegisterUserUseCase,
)
from device_inventory.core.exceptions import ConflictError, InvalidTokenError, TokenExpiredError, UnauthorizedError

pytestmark = pytest.mark.integration


def auth_response(user_id="usr-1", username="alice"):
    return AuthResponse(
        token="jwt.token.here",
        user=UserResponse(user_id=user_id, username=username, role="user"),
    )


class TestRegister:
    """Tests for POST /api/auth/register"""

    def test_register_success(self, client, use_cases):
        use_cases[RegisterUserUseCase].execute.return_value = auth_response(user_id="usr-new")

        response = client.post(
            "/api/auth/register",
            json={"username": "alice", "password": "password123"},
        )

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["data"]["token"] == "jwt.token.here"
        assert body["data"]["user"]["userId"] == "usr-new"

    def test_register_duplicate_returns_409(self, client, use_cases):
        use_cases[RegisterUserUseCase].execute.side_effect = ConflictError("Username already exists")

        response = client.post(
            "/api/auth/register",
            json={"username": "alice", "password": "password123"},
        )

        assert response.status_code == 409
        assert response.json() == {
            "success": False,
            "message": "Username already exists",
            "code": "CONFLICT",
        }

    def test_register_short_password_returns_400(self, client, use_cases):
        response = client.post(
            "/api/auth/register",
            json={"username": "alice", "password": "123"},
        )

        assert response.status_code == 400
        body = response.json()
        assert body["success"] is False
        assert body["code"] == "VALIDATION_ERROR"
        assert any(detail["field"] == "password" for detail in body["details"])
        use_cases[RegisterUserUseCase].execute.assert_not_called()

    def test_register_password_over_72_bytes_returns_400(self, client, use_cases):
        response = client.post(
            "/api/auth/register",
            json={"username": "alice", "password": "p" * 100},
        )

        assert response.status_code == 400
        assert response.json()["code"] == "VALIDATION_ERROR"
        use_cases[RegisterUserUseCase].execute.assert_not_called()


class TestLogin:
    """Tests for POST /api/auth/login"""

    def test_login_success(self, client, use_cases):
        use_cases[LoginUserUseCase].execute.return_value = auth_response()

        response = client.post("/api/auth/login", json={"username": "alice", "password": "validpass123"})

        assert response.status_code == 200
        assert response.json()["data"]["token"] == "jwt.token.here"

    def test_login_invalid_returns_401(self, client, use_cases):
        use_cases[LoginUserUseCase].execute.side_effect = UnauthorizedError("Invalid username or password")

        response = client.post("/api/auth/login", json={"username": "alice", "password": "wrongpass"})

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid username or password"

    def test_login_missing_field_returns_400(self, client):
        response = client.post("/api/auth/login", json={"username": "alice"})
        assert response.status_code == 400


class TestMe:
    """Tests for GET /api/auth/me and bearer token handling"""

    def test_me_returns_current_user(self, client, use_cases, auth_headers):
        response = client.get("/api/auth/me", headers=auth_headers)

        assert response.status_code == 200
        assert response.json()["data"] == {"userId": "usr-1", "username": "alice", "role": "user"}
        use_cases[GetCurrentUserUseCase].execute.assert_awaited_once_with("valid.jwt.token")

    def test_missing_header_returns_401(self, client, use_cases):
        response = client.get("/api/auth/me")

        assert response.status_code == 401
        assert response.json()["success"] is False
        use_cases[GetCurrentUserUseCase].execute.assert_not_called()

    def test_wrong_scheme_returns_401(self, client):
        response = client.get("/api/auth/me", headers={"Authorization": "Basic abc"})
        assert response.status_code == 401

    @pytest.mark.parametrize("error", [TokenExpiredError("Token has expired"), InvalidTokenError("Invalid token")])
    def test_expired_and_invalid_look_the_same(self, client, use_cases, auth_headers, error):
        use_cases[GetCurrentUserUseCase].execute.side_effect = error

        response = client.get("/api/auth/me", headers=auth_headers)

        assert response.status_code == 401
        assert response.json()["message"] == "Invalid or expired token"
        assert response.json()["code"] == "UNAUTHORIZED"
