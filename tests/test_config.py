"""Tests for configuration helpers."""
from app.core.config import (
    API_ENDPOINTS,
    AUTH_ENDPOINTS,
    build_api_url,
    build_auth_url,
    build_backend_url,
    settings,
    system_config,
)


class TestUrls:
    def test_backend_url(self):
        assert build_backend_url("/members") == f"{settings.BACKEND_URL.rstrip('/')}/members"

    def test_auth_url(self):
        assert build_auth_url("PROFILE").endswith("/auth/profile")

    def test_api_url(self):
        assert build_api_url("ROLES").endswith("/roles")

    def test_every_auth_endpoint_is_absolute_path(self):
        assert all(path.startswith("/auth/") for path in AUTH_ENDPOINTS.values())

    def test_every_entity_has_endpoint(self):
        for key in ("USERS", "MEMBERS", "SPONSORS", "PAYMENTS", "CLUBS", "ROLES", "PERMISSIONS", "PROPERTIES", "ACTIVITIES"):
            assert API_ENDPOINTS[key] == f"/{key.lower()}"


class TestSystemConfig:
    def test_shape(self):
        config = system_config()
        assert config["defaultClubId"] == settings.DEFAULT_CLUB_ID
        assert config["defaultRoleId"] == settings.DEFAULT_ROLE_ID
        assert set(config["roles"]) == {"admin", "manager", "member"}

    def test_default_role_is_member(self):
        config = system_config()
        assert config["roles"]["member"] == config["defaultRoleId"]
