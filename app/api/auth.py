"""Authentication endpoints."""
import re

from fastapi import APIRouter, Depends, HTTPException

from app.api.deps import require_bearer
from app.core.config import AUTH_ENDPOINTS
from app.schemas.auth import LoginRequest, RefreshRequest, RegisterRequest
from app.services.backend_client import BackendClient, get_backend_client

router = APIRouter(prefix="/api/auth", tags=["auth"])

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6


@router.post("/login")
async def login(
    credentials: LoginRequest,
    backend: BackendClient = Depends(get_backend_client),
):
    """
    Log a user in.

    Returns the backend answer unchanged: ``accessToken``, ``refreshToken``,
    ``expiresIn`` and the ``user`` profile.
    """
    if not credentials.email or not credentials.password:
        raise HTTPException(status_code=400, detail="Email y contraseña son requeridos")

    return await backend.post(
        AUTH_ENDPOINTS["LOGIN"],
        "Credenciales inválidas",
        json_data={"email": credentials.email, "password": credentials.password},
    )


@router.post("/register", status_code=201)
async def register(
    registration: RegisterRequest,
    backend: BackendClient = Depends(get_backend_client),
):
    """
    Register a new user account.

    The optional ``clubName`` lets the backend create the user's club in
    the same call.
    """
    if not registration.name or not registration.email or not registration.password:
        raise HTTPException(
            status_code=400,
            detail="Nombre, email y contraseña son requeridos",
        )

    if not EMAIL_PATTERN.match(registration.email):
        raise HTTPException(status_code=400, detail="Formato de email inválido")

    if len(registration.password) < MIN_PASSWORD_LENGTH:
        raise HTTPException(
            status_code=400,
            detail=f"La contraseña debe tener al menos {MIN_PASSWORD_LENGTH} caracteres",
        )

    payload = {
        "name": registration.name,
        "email": registration.email,
        "password": registration.password,
    }
    if registration.club_name:
        payload["clubName"] = registration.club_name

    return await backend.post(
        AUTH_ENDPOINTS["REGISTER"],
        "Error al registrar usuario",
        json_data=payload,
    )


@router.post("/refresh")
async def refresh(
    body: RefreshRequest,
    backend: BackendClient = Depends(get_backend_client),
):
    """Exchange a refresh token for a new token pair."""
    if not body.refresh_token:
        raise HTTPException(status_code=400, detail="Refresh token es requerido")

    data = await backend.post(
        AUTH_ENDPOINTS["REFRESH"],
        "Error al renovar el token",
        json_data={"refreshToken": body.refresh_token},
    )
    if not isinstance(data, dict):
        data = {}

    return {
        "accessToken": data.get("accessToken"),
        "refreshToken": data.get("refreshToken"),
        "expiresIn": data.get("expiresIn"),
    }


@router.get("/me")
async def me(
    authorization: str = Depends(require_bearer),
    backend: BackendClient = Depends(get_backend_client),
):
    """Profile of the user owning the bearer token."""
    return await backend.get(
        AUTH_ENDPOINTS["PROFILE"],
        "Error al obtener el perfil",
        authorization=authorization,
    )


@router.post("/logout")
async def logout(
    authorization: str = Depends(require_bearer),
    backend: BackendClient = Depends(get_backend_client),
):
    return await backend.post(
        AUTH_ENDPOINTS["LOGOUT"],
        "Error al cerrar sesión",
        authorization=authorization,
    )
