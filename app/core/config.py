"""Application configuration."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # API
    API_HOST: str = "0.0.0.0"
    API_PORT: int = 3000
    DEBUG: bool = True
    LOG_LEVEL: str = "INFO"

    # Backend service
    BACKEND_URL: str = "http://localhost:3001"
    FRONTEND_URL: str = "http://localhost:3000"
    BACKEND_TIMEOUT_SECONDS: float = 30.0

    # Health checks
    HEALTH_CHECK_TIMEOUT_SECONDS: float = 5.0
    HEALTH_CHECK_INTERVAL_MINUTES: int = 5
    HEALTH_MONITOR_ENABLED: bool = True

    # Session
    VERIFICATION_COOLDOWN_SECONDS: float = 5.0
    COOKIE_SECURE: bool = False

    # Presentation
    DEFAULT_LOCALE: str = "es"
    DISPLAY_TIMEZONE: str = "Europe/Madrid"

    # System defaults
    DEFAULT_CLUB_ID: str = "club-example-id"
    DEFAULT_ROLE_ID: str = "c8376e07-d335-4b0f-a3e2-70a6c6dcf575"
    ROLE_ADMIN_ID: str = "07ca500a-1ba4-4cd9-87d2-53e18db78b8a"
    ROLE_MANAGER_ID: str = "dccdd76e-cdc4-4508-b3cb-0397a2c2ce5e"
    ROLE_MEMBER_ID: str = "c8376e07-d335-4b0f-a3e2-70a6c6dcf575"

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()


AUTH_ENDPOINTS = {
    "LOGIN": "/auth/login",
    "REGISTER": "/auth/register",
    "REFRESH": "/auth/refresh",
    "PROFILE": "/auth/profile",
    "LOGOUT": "/auth/logout",
}

API_ENDPOINTS = {
    "USERS": "/users",
    "MEMBERS": "/members",
    "SPONSORS": "/sponsors",
    "PAYMENTS": "/payments",
    "CLUBS": "/clubs",
    "ROLES": "/roles",
    "PERMISSIONS": "/permissions",
    "PROPERTIES": "/properties",
    "ACTIVITIES": "/activities",
    "CONFIG": "/config",
}

FRONTEND_ROUTES = {
    "HOME": "/home",
    "LOGIN": "/login",
    "REGISTER": "/register",
    "MEMBERS": "/members",
    "USERS": "/users",
    "SPONSORS": "/sponsors",
    "PAYMENTS": "/payments",
    "ROLES": "/roles",
    "PERMISSIONS": "/permissions",
    "PROPERTIES": "/properties",
    "ACTIVITIES": "/activities",
}


def build_backend_url(endpoint: str) -> str:
    """Join an endpoint path onto the configured backend base URL."""
    return f"{settings.BACKEND_URL.rstrip('/')}{endpoint}"


def build_auth_url(key: str) -> str:
    """Build the backend URL of an auth endpoint (``LOGIN``, ``REFRESH``...)."""
    return build_backend_url(AUTH_ENDPOINTS[key])


def build_api_url(key: str) -> str:
    """Build the backend URL of an entity endpoint (``MEMBERS``, ``ROLES``...)."""
    return build_backend_url(API_ENDPOINTS[key])


def system_config() -> dict:
    """System configuration exposed to the dashboard."""
    return {
        "defaultClubId": settings.DEFAULT_CLUB_ID,
        "defaultRoleId": settings.DEFAULT_ROLE_ID,
        "roles": {
            "admin": settings.ROLE_ADMIN_ID,
            "manager": settings.ROLE_MANAGER_ID,
            "member": settings.ROLE_MEMBER_ID,
        },
    }
