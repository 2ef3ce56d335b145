"""Exceptions and FastAPI exception handlers."""
import logging
from typing import Any, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

logger = logging.getLogger(__name__)

CONNECTION_ERROR_MESSAGE = "Error de conexión con el servidor"
AUTH_HEADER_REQUIRED_MESSAGE = "Token de autorización requerido"
UNKNOWN_ERROR_MESSAGE = "Error desconocido"


class ClubManagerError(Exception):
    """Base class for all application errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class BackendError(ClubManagerError):
    """The backend service answered with a non-2xx status."""

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(message)


class BackendUnavailableError(ClubManagerError):
    """The backend service could not be reached."""

    def __init__(self, message: str = CONNECTION_ERROR_MESSAGE):
        super().__init__(message)


class AuthError(ClubManagerError):
    """Authentication failed on the client side."""

    def __init__(self, message: str, code: Optional[str] = None):
        self.code = code
        super().__init__(message)


class NoAuthTokenError(AuthError):
    def __init__(self, message: str = "No auth token available"):
        super().__init__(message, code="NO_AUTH_TOKEN")


class NoRefreshTokenError(AuthError):
    def __init__(self, message: str = "No refresh token available"):
        super().__init__(message, code="NO_REFRESH_TOKEN")


class TokenRefreshError(AuthError):
    def __init__(self, message: str = "Failed to refresh token"):
        super().__init__(message, code="REFRESH_FAILED")


class ApiError(ClubManagerError):
    """A proxied API call made by the client failed."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


def extract_message(data: Any, default: str) -> str:
    """
    Pull a human readable message out of an error payload.

    Looks at ``message`` first (validation errors send a list of them),
    then ``error``, and falls back to ``default``.
    """
    if not isinstance(data, dict):
        return default

    message = data.get("message")
    if isinstance(message, list):
        message = "; ".join(str(item) for item in message if item)
    if message:
        return str(message)

    error = data.get("error")
    if isinstance(error, str) and error:
        return error

    return default


def _format_validation_errors(exc: RequestValidationError) -> str:
    parts = []
    for error in exc.errors():
        location = ".".join(str(item) for item in error.get("loc", ()) if item != "body")
        parts.append(f"{location}: {error.get('msg')}" if location else str(error.get("msg")))
    return "; ".join(parts) or "Datos inválidos"


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


async def backend_error_handler(request: Request, exc: BackendError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


async def backend_unavailable_handler(
    request: Request, exc: BackendUnavailableError
) -> JSONResponse:
    logger.error(f"Backend unreachable while serving {request.url.path}: {exc.message}")
    return JSONResponse(status_code=500, content={"message": CONNECTION_ERROR_MESSAGE})


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(status_code=400, content={"message": _format_validation_errors(exc)})


def register_exception_handlers(app: FastAPI) -> None:
    """Render application errors as ``{"message": ...}`` JSON bodies."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(BackendError, backend_error_handler)
    app.add_exception_handler(BackendUnavailableError, backend_unavailable_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
