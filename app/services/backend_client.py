"""Backend service client.

Every ``/api`` route of this application is a thin proxy in front of the
club backend. This module owns the HTTP side of that: it forwards the
caller's ``Authorization`` header, decodes the JSON answer and turns
failures into ``BackendError`` / ``BackendUnavailableError`` so the
routes only have to describe *what* they forward.
"""
import logging
from typing import Any, Dict, Optional

import httpx

from app.core.config import settings
from app.core.errors import BackendError, BackendUnavailableError, extract_message
from app.utils import parse_json

logger = logging.getLogger(__name__)


class BackendClient:
    """Client for the club backend REST API."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the backend client."""
        self.base_url = (base_url or settings.BACKEND_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.BACKEND_TIMEOUT_SECONDS
        self._transport = transport

    async def request(
        self,
        method: str,
        path: str,
        default_error: str,
        authorization: Optional[str] = None,
        json_data: Optional[Any] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> Any:
        """
        Forward a request to the backend.

        Args:
            method: HTTP method (GET, POST, PATCH, DELETE)
            path: Backend path, e.g. ``/members``
            default_error: Message used when the backend sends none
            authorization: Raw ``Authorization`` header to forward
            json_data: JSON body
            params: Query parameters

        Returns:
            Decoded JSON payload

        Raises:
            BackendError: If the backend answers with a non-2xx status
            BackendUnavailableError: If the backend cannot be reached
        """
        headers = {"Content-Type": "application/json"}
        if authorization:
            headers["Authorization"] = authorization

        url = f"{self.base_url}{path}"
        logger.debug(f"Forwarding {method} {url}")

        try:
            async with httpx.AsyncClient(timeout=self.timeout, transport=self._transport) as client:
                response = await client.request(
                    method=method,
                    url=url,
                    params=params,
                    json=json_data,
                    headers=headers,
                )
        except httpx.HTTPError as e:
            logger.error(f"Backend request {method} {url} failed: {e}")
            raise BackendUnavailableError() from e

        data = parse_json(response)

        if not response.is_success:
            message = extract_message(data, default_error)
            logger.warning(f"Backend answered {response.status_code} for {method} {url}: {message}")
            raise BackendError(response.status_code, message)

        return data

    async def get(self, path: str, default_error: str, authorization: Optional[str] = None) -> Any:
        return await self.request("GET", path, default_error, authorization=authorization)

    async def post(
        self,
        path: str,
        default_error: str,
        json_data: Optional[Any] = None,
        authorization: Optional[str] = None,
    ) -> Any:
        return await self.request("POST", path, default_error, authorization=authorization, json_data=json_data)

    async def patch(
        self,
        path: str,
        default_error: str,
        json_data: Optional[Any] = None,
        authorization: Optional[str] = None,
    ) -> Any:
        return await self.request("PATCH", path, default_error, authorization=authorization, json_data=json_data)

    async def delete(self, path: str, default_error: str, authorization: Optional[str] = None) -> Any:
        return await self.request("DELETE", path, default_error, authorization=authorization)


# Singleton instance
backend_client = BackendClient()


def get_backend_client() -> BackendClient:
    """FastAPI dependency returning the shared backend client."""
    return backend_client
