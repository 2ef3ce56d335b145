"""Authentication schemas."""
from pydantic import ConfigDict
from typing import List, Optional

from app.schemas.base import CamelModel


class LoginRequest(CamelModel):
    """Login form. Fields are checked by the route so it can answer 400."""

    email: Optional[str] = None
    password: Optional[str] = None


class RegisterRequest(CamelModel):
    """Registration form, optionally creating a club for the new user."""

    name: Optional[str] = None
    email: Optional[str] = None
    password: Optional[str] = None
    club_name: Optional[str] = None


class RefreshRequest(CamelModel):
    refresh_token: Optional[str] = None


class TokenPair(CamelModel):
    """Access/refresh token pair issued by the backend."""

    access_token: str
    refresh_token: str
    expires_in: Optional[int] = None


class AuthUser(CamelModel):
    """The authenticated user as reported by ``/auth/profile``."""

    model_config = ConfigDict(extra="allow")

    id: str
    name: Optional[str] = None
    email: str
    role: Optional[str] = None
    club_id: Optional[str] = None
    permissions: List[str] = []
