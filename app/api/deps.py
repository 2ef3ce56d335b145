"""Shared route dependencies."""
from typing import Optional

from fastapi import Header, HTTPException

from app.core.errors import AUTH_HEADER_REQUIRED_MESSAGE


def require_authorization(authorization: Optional[str] = Header(default=None)) -> str:
    """Return the raw ``Authorization`` header, answering 401 when absent."""
    if not authorization:
        raise HTTPException(status_code=401, detail=AUTH_HEADER_REQUIRED_MESSAGE)
    return authorization


def require_bearer(authorization: Optional[str] = Header(default=None)) -> str:
    """Like ``require_authorization`` but also insists on the ``Bearer`` scheme."""
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail=AUTH_HEADER_REQUIRED_MESSAGE)
    return authorization
