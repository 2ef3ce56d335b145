"""Authentication session.

``AuthSession`` is the dashboard's view of who is logged in. It logs users
in and out through this application's ``/api/auth`` routes, persists the
result in a ``TokenStorage`` and re-validates restored sessions against the
backend, refreshing the token pair when the bearer token has expired.
"""
import logging
import time
from datetime import datetime, timezone
from typing import Awaitable, Callable, Optional

import httpx
from pydantic import BaseModel, Field, ValidationError

from app.client.interceptor import AuthInterceptor
from app.client.storage import AUTH_TOKEN_KEY, TokenStorage
from app.core.config import settings
from app.core.errors import (
    CONNECTION_ERROR_MESSAGE,
    AuthError,
    ClubManagerError,
    NoAuthTokenError,
    extract_message,
)
from app.schemas.auth import AuthUser
from app.services.health_check import check_backend_health, log_health_status
from app.utils import parse_json

logger = logging.getLogger(__name__)


class AuthErrorState(BaseModel):
    """Last authentication problem, shown to the user."""

    message: str
    code: Optional[str] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


def _is_valid_user(data) -> bool:
    try:
        user = AuthUser.model_validate(data)
    except ValidationError:
        return False
    return bool(user.id) and bool(user.email)


def _as_dict(data) -> dict:
    return data if isinstance(data, dict) else {}


class AuthSession:
    """Login state backed by persistent storage."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        storage: TokenStorage,
        interceptor: Optional[AuthInterceptor] = None,
        health_url: Optional[str] = None,
        cooldown_seconds: Optional[float] = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        self.http = http
        self.storage = storage
        self.interceptor = interceptor or AuthInterceptor(http, storage)
        self.health_url = health_url
        self.cooldown_seconds = (
            cooldown_seconds if cooldown_seconds is not None else settings.VERIFICATION_COOLDOWN_SECONDS
        )
        self._clock = clock

        self.user: Optional[dict] = None
        self.is_loading = True
        self.is_initialized = False
        self.error: Optional[AuthErrorState] = None

        self._is_verifying = False
        self._last_verification: Optional[float] = None

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

    def initialize(self) -> Optional[dict]:
        """Restore the persisted user, if any."""
        self.user, _ = self.storage.load_initial_state()
        self.is_loading = False
        self.is_initialized = True
        return self.user

    # Errors

    def set_error(self, message: str, code: Optional[str] = None) -> AuthErrorState:
        self.error = AuthErrorState(message=message, code=code)
        logger.error(f"Auth error [{code}]: {message}")
        return self.error

    def clear_error(self) -> None:
        self.error = None

    def handle_api_error(self, response: httpx.Response, default: str = "Error de autenticación") -> str:
        """Record the error carried by a failed response and return its message."""
        data = parse_json(response)
        if isinstance(data, dict) and (data.get("message") or data.get("error")):
            message = extract_message(data, default)
        else:
            message = f"{default} ({response.status_code})"
        self.set_error(message, str(response.status_code))
        return message

    # Login / registration

    async def _post_public(self, path: str, payload: dict) -> httpx.Response:
        try:
            return await self.http.post(path, json=payload, headers={"Content-Type": "application/json"})
        except httpx.HTTPError as e:
            raise AuthError(CONNECTION_ERROR_MESSAGE) from e

    async def login(self, email: str, password: str) -> dict:
        """
        Log in and persist the session.

        Raises:
            AuthError: On rejected credentials or an incomplete answer
        """
        self.is_loading = True
        self.clear_error()
        try:
            response = await self._post_public("/api/auth/login", {"email": email, "password": password})
            data = _as_dict(parse_json(response))

            if not response.is_success:
                fallback = (
                    "Credenciales inválidas"
                    if response.status_code == 401
                    else f"Error {response.status_code}: {response.reason_phrase}"
                )
                raise AuthError(extract_message(data, fallback), code=str(response.status_code))

            if not data.get("accessToken") or not data.get("user"):
                raise AuthError("La respuesta del servidor no contiene los datos esperados")

            self.storage.save_auth_state(data["user"], data["accessToken"], data.get("refreshToken"))
            self.user = data["user"]
            logger.info(f"User {email} logged in")
            return self.user

        except AuthError as e:
            logger.error(f"Login failed: {e.message}")
            raise
        finally:
            self.is_loading = False

    async def register(self, name: str, email: str, password: str, club_name: Optional[str] = None) -> dict:
        """
        Register a new account and persist the session.

        Raises:
            AuthError: On rejected registration or an incomplete answer
        """
        self.is_loading = True
        self.clear_error()
        payload = {"name": name, "email": email, "password": password}
        if club_name:
            payload["clubName"] = club_name

        try:
            response = await self._post_public("/api/auth/register", payload)
            data = _as_dict(parse_json(response))

            if not response.is_success:
                raise AuthError(
                    extract_message(data, "Error al registrar usuario"),
                    code=str(response.status_code),
                )

            if not data.get("accessToken") or not data.get("refreshToken") or not data.get("user"):
                raise AuthError("Respuesta del servidor incompleta")

            self.storage.save_auth_state(data["user"], data["accessToken"], data["refreshToken"])
            self.user = data["user"]
            logger.info(f"User {email} registered")
            return self.user

        except AuthError as e:
            logger.error(f"Registration failed: {e.message}")
            raise
        finally:
            self.is_loading = False

    async def logout(self) -> None:
        """Tell the backend, then forget the session whatever it answers."""
        token = self.storage.get(AUTH_TOKEN_KEY)
        if token:
            try:
                await self.http.post("/api/auth/logout", headers={"Authorization": f"Bearer {token}"})
            except httpx.HTTPError as e:
                logger.warning(f"Backend logout failed: {e}")

        self.storage.clear_auth_state()
        self.user = None
        self.clear_error()

    # Validation

    async def refresh(self) -> dict:
        """
        Rotate the token pair and reload the user profile.

        Raises:
            AuthError: If the refresh or the profile reload fails
        """
        await self.interceptor.refresh_token()

        response = await self.interceptor.fetch_with_auth("GET", "/api/auth/me")
        if not response.is_success:
            raise AuthError("Failed to get user data after refresh", code=str(response.status_code))

        user = parse_json(response)
        if not _is_valid_user(user):
            raise AuthError("Invalid user data after refresh")

        self.storage.update_user(user)
        self.user = user
        return user

    async def check_auth(self) -> bool:
        """
        Validate the restored session against the backend.

        Returns:
            True if the session is (still) valid
        """
        if not self.user:
            return False

        try:
            health = log_health_status(await check_backend_health(self.http, self.health_url))

            if not health.is_healthy:
                self.set_error(
                    f"Backend no disponible: {health.error or 'Error de conexión'}",
                    "BACKEND_UNREACHABLE",
                )
                return False

            response = await self.interceptor.fetch_with_auth("GET", "/api/auth/me")

            if response.is_success:
                user = parse_json(response)
                if not _is_valid_user(user):
                    raise AuthError("Datos de usuario inválidos")
                if user != self.user:
                    self.storage.update_user(user)
                    self.user = user
                return True

            if response.status_code == 401:
                await self.refresh()
                return True

            raise AuthError(f"Error {response.status_code}: {response.reason_phrase}")

        except NoAuthTokenError:
            self.storage.clear_auth_state()
            self.user = None
            return False
        except (ClubManagerError, httpx.HTTPError) as e:
            logger.error(f"Error en verificación de autenticación: {e}")
            self.set_error("Error de verificación de autenticación", "AUTH_CHECK_FAILED")
            return False

    async def verify(
        self,
        check: Optional[Callable[[], Awaitable[bool]]] = None,
        on_success: Optional[Callable[[], None]] = None,
        on_error: Optional[Callable[[Exception], None]] = None,
    ) -> bool:
        """
        Run ``check`` unless a verification is running or ran recently.

        Defaults to ``check_auth``. Skipped verifications return False.
        """
        check = check or self.check_auth

        if self._is_verifying:
            return False

        now = self._clock()
        if self._last_verification is not None and now - self._last_verification < self.cooldown_seconds:
            return False

        self._is_verifying = True
        self._last_verification = now
        try:
            result = await check()
            if result and on_success:
                on_success()
            return result
        except Exception as e:
            logger.error(f"Auth verification failed: {e}")
            if on_error:
                on_error(e)
            return False
        finally:
            self._is_verifying = False

    async def force_verify(self, check=None, on_success=None, on_error=None) -> bool:
        """Verify now, ignoring the cooldown."""
        self._last_verification = None
        return await self.verify(check, on_success, on_error)
