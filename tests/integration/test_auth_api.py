"""Integration tests for /api/v1/auth endpoints."""

import pytest
from httpx import AsyncClient


class TestLogin:

    async def test_login_success(self, client: AsyncClient, test_password):
        response = await client.post(
            "/api/v1/auth/login",
            json={"email": "archivist@museum.gov.bd", "password": test_password},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["token_type"] == "bearer"
        assert data["expires_in"] == 30 * 60
        assert data["user"] == {
            "id": "2",
            "email": "archivist@museum.gov.bd",
            "name": "Fatima Khan",
            "role": "archivist",
            "avatar": None,
        }

    @pytest.mark.parametrize("email,password", [
        ("archivist@museum.gov.bd", "wrong-password"),
        ("nobody@museum.gov.bd", "password123"),
    ])
    async def test_login_failure_is_generic(self, client: AsyncClient, email, password):
        response = await client.post("/api/v1/auth/login", json={"email": email, "password": password})

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid email or password"

    async def test_login_rejects_malformed_email(self, client: AsyncClient):
        response = await client.post("/api/v1/auth/login", json={"email": "not-an-email", "password": "x"})

        assert response.status_code == 422
        assert response.json()["detail"] == "Validation error"

    async def test_failed_login_keeps_session(self, client: AsyncClient, login_as):
        headers = await login_as("curator@museum.gov.bd")

        await client.post("/api/v1/auth/login", json={"email": "admin@museum.gov.bd", "password": "bad"})

        response = await client.get("/api/v1/auth/me", headers=headers)
        assert response.status_code == 200
        assert response.json()["id"] == "3"


class TestSession:

    async def test_me_requires_login(self, client: AsyncClient):
        response = await client.get("/api/v1/auth/me")

        assert response.status_code == 401
        detail = response.json()["detail"]
        assert detail["redirect_to"] == "/login"
        assert detail["return_to"] == "/api/v1/auth/me"

    async def test_session_state(self, client: AsyncClient, login_as):
        anonymous = await client.get("/api/v1/auth/session")
        assert anonymous.json() == {"authenticated": False, "is_loading": False, "user": None}

        headers = await login_as("researcher@museum.gov.bd")
        response = await client.get("/api/v1/auth/session", headers=headers)
        assert response.json()["authenticated"] is True
        assert response.json()["user"]["role"] == "researcher"

    async def test_new_login_replaces_old_token(self, client: AsyncClient, login_as):
        old = await login_as("curator@museum.gov.bd")
        new = await login_as("admin@museum.gov.bd")

        assert (await client.get("/api/v1/auth/me", headers=old)).status_code == 401
        me = await client.get("/api/v1/auth/me", headers=new)
        assert me.json()["role"] == "super_admin"

    async def test_garbage_token(self, client: AsyncClient):
        response = await client.get("/api/v1/auth/me", headers={"Authorization": "Bearer nonsense"})
        assert response.status_code == 401


class TestLogout:

    async def test_logout_ends_session(self, client: AsyncClient, login_as):
        headers = await login_as("curator@museum.gov.bd")

        response = await client.post("/api/v1/auth/logout", headers=headers)

        assert response.status_code == 200
        assert (await client.get("/api/v1/auth/me", headers=headers)).status_code == 401

    async def test_logout_is_idempotent(self, client: AsyncClient):
        assert (await client.post("/api/v1/auth/logout")).status_code == 200
        assert (await client.post("/api/v1/auth/logout")).status_code == 200

    async def test_logout_needs_session_token(self, client: AsyncClient, login_as):
        headers = await login_as("curator@museum.gov.bd")

        response = await client.post("/api/v1/auth/logout")

        assert response.status_code == 401
        assert (await client.get("/api/v1/auth/me", headers=headers)).status_code == 200


class TestGuardEndpoint:

    async def test_anonymous_is_sent_to_login(self, client: AsyncClient):
        response = await client.get(
            "/api/v1/auth/guard",
            params={"required_role": "archivist", "location": "/admin/artifacts"},
        )

        decision = response.json()["decision"]
        assert decision["outcome"] == "redirect_login"
        assert decision["redirect_to"] == "/login"
        assert decision["return_to"] == "/admin/artifacts"

    async def test_role_below_requirement_is_denied(self, client: AsyncClient, login_as):
        headers = await login_as("curator@museum.gov.bd")

        response = await client.get("/api/v1/auth/guard", params={"required_role": "archivist"}, headers=headers)

        decision = response.json()["decision"]
        assert decision["outcome"] == "access_denied"
        assert decision["redirect_to"] == "/"

    async def test_default_requirement_is_researcher(self, client: AsyncClient, login_as):
        headers = await login_as("researcher@museum.gov.bd")

        response = await client.get("/api/v1/auth/guard", headers=headers)

        assert response.json()["required_role"] == "researcher"
        assert response.json()["decision"]["outcome"] == "allow"

    async def test_unknown_role_is_rejected(self, client: AsyncClient):
        response = await client.get("/api/v1/auth/guard", params={"required_role": "janitor"})
        assert response.status_code == 422
