"""Tests for the /api proxy routes."""
from tests.conftest import USER, body

MEMBER = {"name": "Ana", "email": "ana@club.es", "clubId": "c1"}


class TestAuthRoutes:
    def test_login_requires_fields(self, client, fake_backend):
        response = client.post("/api/auth/login", json={"email": "ana@club.es"})
        assert response.status_code == 400
        assert response.json() == {"message": "Email y contraseña son requeridos"}
        assert fake_backend.requests == []

    def test_login_passthrough(self, client, fake_backend):
        answer = {"accessToken": "a", "refreshToken": "r", "expiresIn": 900, "user": USER}
        fake_backend.add("POST", "/auth/login", json=answer)

        response = client.post("/api/auth/login", json={"email": "ana@club.es", "password": "secreto"})
        assert response.status_code == 200
        assert response.json() == answer

    def test_login_rejected_default_message(self, client, fake_backend):
        fake_backend.add("POST", "/auth/login", status=401, json={})
        response = client.post("/api/auth/login", json={"email": "ana@club.es", "password": "x"})
        assert response.status_code == 401
        assert response.json() == {"message": "Credenciales inválidas"}

    def test_register_validates_email(self, client):
        response = client.post(
            "/api/auth/register", json={"name": "Ana", "email": "ana@club", "password": "secreto"}
        )
        assert response.status_code == 400
        assert response.json()["message"] == "Formato de email inválido"

    def test_register_validates_password(self, client):
        response = client.post(
            "/api/auth/register", json={"name": "Ana", "email": "ana@club.es", "password": "123"}
        )
        assert response.status_code == 400
        assert "6 caracteres" in response.json()["message"]

    def test_register_forwards_club_name(self, client, fake_backend):
        fake_backend.add("POST", "/auth/register", status=201, json={"user": USER})
        response = client.post(
            "/api/auth/register",
            json={"name": "Ana", "email": "ana@club.es", "password": "secreto", "clubName": "CD Norte"},
        )
        assert response.status_code == 201
        assert body(fake_backend.requests[0])["clubName"] == "CD Norte"

    def test_refresh_requires_token(self, client):
        response = client.post("/api/auth/refresh", json={})
        assert response.status_code == 400
        assert response.json() == {"message": "Refresh token es requerido"}

    def test_refresh_returns_only_tokens(self, client, fake_backend):
        fake_backend.add(
            "POST",
            "/auth/refresh",
            json={"accessToken": "a2", "refreshToken": "r2", "expiresIn": 900, "user": USER},
        )
        response = client.post("/api/auth/refresh", json={"refreshToken": "r1"})
        assert response.json() == {"accessToken": "a2", "refreshToken": "r2", "expiresIn": 900}
        assert body(fake_backend.requests[0]) == {"refreshToken": "r1"}

    def test_me_requires_bearer(self, client):
        response = client.get("/api/auth/me", headers={"Authorization": "Basic abc"})
        assert response.status_code == 401
        assert response.json() == {"message": "Token de autorización requerido"}

    def test_me_forwards_token(self, client, fake_backend, auth_headers):
        fake_backend.add("GET", "/auth/profile", json=USER)
        assert client.get("/api/auth/me", headers=auth_headers).json() == USER
        assert fake_backend.requests[0].headers["Authorization"] == "Bearer access-1"


class TestResourceRoutes:
    def test_requires_authorization(self, client, fake_backend):
        response = client.get("/api/members")
        assert response.status_code == 401
        assert response.json() == {"message": "Token de autorización requerido"}
        assert fake_backend.requests == []

    def test_list(self, client, fake_backend, auth_headers):
        fake_backend.add("GET", "/members", json=[{"id": "m1", **MEMBER}])
        response = client.get("/api/members", headers=auth_headers)
        assert response.status_code == 200
        assert response.json() == [{"id": "m1", **MEMBER}]

    def test_create(self, client, fake_backend, auth_headers):
        fake_backend.add("POST", "/members", status=201, json={"id": "m1", **MEMBER})
        response = client.post("/api/members", json=MEMBER, headers=auth_headers)
        assert response.status_code == 201
        assert body(fake_backend.requests[0]) == MEMBER

    def test_create_invalid_body(self, client, fake_backend, auth_headers):
        response = client.post("/api/members", json={"name": "Ana"}, headers=auth_headers)
        assert response.status_code == 400
        assert "email" in response.json()["message"]
        assert fake_backend.requests == []

    def test_update_forwards_only_sent_fields(self, client, fake_backend, auth_headers):
        fake_backend.add("PATCH", "/payments/p1", json={"id": "p1", "amount": 20})
        response = client.patch("/api/payments/p1", json={"amount": 20}, headers=auth_headers)
        assert response.status_code == 200
        assert body(fake_backend.requests[0]) == {"amount": 20.0}

    def test_backend_message_passthrough(self, client, fake_backend, auth_headers):
        fake_backend.add("GET", "/sponsors/s9", status=404, json={"message": "Sponsor no encontrado"})
        response = client.get("/api/sponsors/s9", headers=auth_headers)
        assert response.status_code == 404
        assert response.json() == {"message": "Sponsor no encontrado"}

    def test_backend_default_message(self, client, fake_backend, auth_headers):
        fake_backend.add("DELETE", "/activities/a1", status=500)
        response = client.delete("/api/activities/a1", headers=auth_headers)
        assert response.status_code == 500
        assert response.json() == {"message": "Error al eliminar actividad"}

    def test_backend_unreachable(self, client, fake_backend, auth_headers):
        fake_backend.fail("GET", "/properties")
        response = client.get("/api/properties", headers=auth_headers)
        assert response.status_code == 500
        assert response.json() == {"message": "Error de conexión con el servidor"}


class TestRoleRoutes:
    def test_my_club_not_shadowed(self, client, fake_backend, auth_headers):
        fake_backend.add("GET", "/roles/my-club", json=[{"id": "r1", "name": "Admin"}])
        response = client.get("/api/roles/my-club", headers=auth_headers)
        assert response.json() == [{"id": "r1", "name": "Admin"}]

    def test_assign_user(self, client, fake_backend, auth_headers):
        fake_backend.add("POST", "/roles/assign-user", status=201, json={"success": True})
        payload = {"userId": "u2", "clubId": "c1", "roleId": "r1"}
        response = client.post("/api/roles/assign-user", json=payload, headers=auth_headers)
        assert response.status_code == 201
        assert body(fake_backend.requests[0]) == payload


class TestMisc:
    def test_config(self, client):
        data = client.get("/api/config").json()
        assert set(data) == {"defaultClubId", "defaultRoleId", "roles"}

    def test_health(self, client):
        data = client.get("/health").json()
        assert data["status"] == "healthy"
        assert "monitor_running" in data
