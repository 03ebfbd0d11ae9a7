from __future__ import annotations

from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient

from app.api.deps import (
    get_login_user_use_case,
    get_refresh_session_use_case,
    get_register_user_use_case,
    get_revoke_session_use_case,
    get_update_credentials_use_case,
)
from app.application.dto.auth import AccessTokenOutput, AuthTokensOutput, AuthUserOutput
from app.domain.exceptions import (
    EmailAlreadyExistsError,
    InvalidTokenError,
    PasswordHashingError,
    PasswordMismatchError,
    RefreshTokenInvalidError,
    RefreshTokenNotFoundError,
    UserNotFoundError,
)
from app.main import app


USER = AuthUserOutput(
    id="6f1c5f3e-1d0b-4c7e-9d0f-2a0a3b9c8e11",
    email="walt@breakingbad.com",
    is_chirpy_red=False,
    created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
    updated_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
)


class FakeUseCase:
    def __init__(self, result=None, error: Exception | None = None):
        self.result = result
        self.error = error
        self.commands = []

    def execute(self, command):
        self.commands.append(command)
        if self.error is not None:
            raise self.error
        return self.result


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def _override(dependency, use_case: FakeUseCase) -> FakeUseCase:
    app.dependency_overrides[dependency] = lambda: use_case
    return use_case


def test_healthz(client):
    response = client.get("/api/healthz")

    assert response.status_code == 200
    assert response.text == "OK"


def test_register_returns_201(client):
    use_case = _override(get_register_user_use_case, FakeUseCase(result=USER))

    response = client.post("/api/users", json={"email": "walt@breakingbad.com", "password": "04234"})

    assert response.status_code == 201
    assert response.json()["id"] == USER.id
    assert "password" not in response.json()
    assert use_case.commands[0].password == "04234"


def test_register_duplicate_email_returns_409(client):
    _override(get_register_user_use_case, FakeUseCase(error=EmailAlreadyExistsError("Email already in use.")))

    response = client.post("/api/users", json={"email": "walt@breakingbad.com", "password": "04234"})

    assert response.status_code == 409


def test_register_hashing_failure_returns_500(client):
    _override(get_register_user_use_case, FakeUseCase(error=PasswordHashingError("Failed to hash password.")))

    response = client.post("/api/users", json={"email": "walt@breakingbad.com", "password": "04234"})

    assert response.status_code == 500


def test_login_returns_user_and_tokens(client):
    _override(
        get_login_user_use_case,
        FakeUseCase(
            result=AuthTokensOutput(
                user=USER,
                access_token="access",
                refresh_token="refresh",
            )
        ),
    )

    response = client.post("/api/login", json={"email": "walt@breakingbad.com", "password": "04234"})

    assert response.status_code == 200
    payload = response.json()
    assert payload["id"] == USER.id
    assert payload["email"] == USER.email
    assert payload["is_chirpy_red"] is False
    assert payload["token"] == "access"
    assert payload["refresh_token"] == "refresh"


def test_login_malformed_body_returns_400(client):
    _override(get_login_user_use_case, FakeUseCase())

    response = client.post("/api/login", content=b"{not json", headers={"content-type": "application/json"})

    assert response.status_code == 400


def test_login_unknown_email_returns_404(client):
    _override(get_login_user_use_case, FakeUseCase(error=UserNotFoundError("User not found.")))

    response = client.post("/api/login", json={"email": "jesse@breakingbad.com", "password": "04234"})

    assert response.status_code == 404


def test_login_wrong_password_returns_401(client):
    _override(get_login_user_use_case, FakeUseCase(error=PasswordMismatchError("Invalid credentials.")))

    response = client.post("/api/login", json={"email": "walt@breakingbad.com", "password": "nope"})

    assert response.status_code == 401


def test_refresh_uses_bearer_token(client):
    use_case = _override(get_refresh_session_use_case, FakeUseCase(result=AccessTokenOutput(access_token="new")))

    response = client.post("/api/refresh", headers={"Authorization": "Bearer abc123"})

    assert response.status_code == 200
    assert response.json() == {"token": "new"}
    assert use_case.commands[0].refresh_token == "abc123"


@pytest.mark.parametrize("headers", [{}, {"Authorization": "Basic xyz"}, {"Authorization": "Bearer "}])
def test_refresh_without_bearer_returns_401(client, headers):
    use_case = _override(get_refresh_session_use_case, FakeUseCase())

    response = client.post("/api/refresh", headers=headers)

    assert response.status_code == 401
    assert use_case.commands == []


def test_refresh_invalid_token_returns_401(client):
    _override(get_refresh_session_use_case, FakeUseCase(error=RefreshTokenInvalidError("Invalid refresh token.")))

    response = client.post("/api/refresh", headers={"Authorization": "Bearer abc123"})

    assert response.status_code == 401
    assert response.json()["detail"] == "Invalid refresh token."


def test_revoke_returns_204(client):
    use_case = _override(get_revoke_session_use_case, FakeUseCase())

    response = client.post("/api/revoke", headers={"Authorization": "Bearer abc123"})

    assert response.status_code == 204
    assert response.content == b""
    assert use_case.commands[0].refresh_token == "abc123"


def test_revoke_without_header_returns_401(client):
    _override(get_revoke_session_use_case, FakeUseCase())

    response = client.post("/api/revoke")

    assert response.status_code == 401


def test_revoke_unknown_token_returns_404(client):
    _override(get_revoke_session_use_case, FakeUseCase(error=RefreshTokenNotFoundError("Refresh token not found.")))

    response = client.post("/api/revoke", headers={"Authorization": "Bearer abc123"})

    assert response.status_code == 404


def test_update_user_passes_access_token(client):
    use_case = _override(get_update_credentials_use_case, FakeUseCase(result=USER))

    response = client.put(
        "/api/users",
        json={"email": "walt@breakingbad.com", "password": "blue"},
        headers={"Authorization": "Bearer access"},
    )

    assert response.status_code == 200
    assert response.json()["email"] == USER.email
    assert use_case.commands[0].access_token == "access"


def test_update_user_invalid_token_returns_401(client):
    _override(get_update_credentials_use_case, FakeUseCase(error=InvalidTokenError("Invalid token.")))

    response = client.put(
        "/api/users",
        json={"email": "walt@breakingbad.com", "password": "blue"},
        headers={"Authorization": "Bearer access"},
    )

    assert response.status_code == 401


def test_update_user_gone_returns_404(client):
    _override(get_update_credentials_use_case, FakeUseCase(error=UserNotFoundError("User not found.")))

    response = client.put(
        "/api/users",
        json={"email": "walt@breakingbad.com", "password": "blue"},
        headers={"Authorization": "Bearer access"},
    )

    assert response.status_code == 404


def test_update_user_without_header_returns_401(client):
    _override(get_update_credentials_use_case, FakeUseCase(result=USER))

    response = client.put("/api/users", json={"email": "walt@breakingbad.com", "password": "blue"})

    assert response.status_code == 401
