"""Bearer-token interceptor with single-flight refresh.

``AuthInterceptor.fetch_with_auth`` sends a request with the stored bearer
token. When the answer is 401 it refreshes the token pair once and replays
the request with the new token. Requests that hit a 401 while a refresh
is already running do not start another one: they wait in a FIFO queue
and are released with the new token (or the refresh error) when the
running refresh settles.
"""
import asyncio
import logging
from typing import List, Optional

import httpx
from pydantic import ValidationError

from app.client.storage import AUTH_TOKEN_KEY, REFRESH_TOKEN_KEY, TokenStorage
from app.core.errors import (
    CONNECTION_ERROR_MESSAGE,
    NoAuthTokenError,
    NoRefreshTokenError,
    TokenRefreshError,
    extract_message,
)
from app.schemas.auth import TokenPair
from app.utils import parse_json

logger = logging.getLogger(__name__)

REFRESH_PATH = "/api/auth/refresh"


class AuthInterceptor:
    """Attaches the bearer token to requests and refreshes it on 401."""

    def __init__(
        self,
        http: httpx.AsyncClient,
        storage: TokenStorage,
        refresh_path: str = REFRESH_PATH,
    ):
        self.http = http
        self.storage = storage
        self.refresh_path = refresh_path
        self.is_refreshing = False
        self._failed_queue: List[asyncio.Future] = []

    @property
    def pending(self) -> int:
        """Number of requests waiting for the running refresh."""
        return len(self._failed_queue)

    def _process_queue(self, error: Optional[BaseException], token: Optional[str] = None) -> None:
        queue, self._failed_queue = self._failed_queue, []
        for waiter in queue:
            if waiter.done():
                continue
            if error is not None:
                waiter.set_exception(error)
            else:
                waiter.set_result(token)

    async def refresh_token(self) -> str:
        """
        Exchange the stored refresh token for a new pair.

        Both tokens are rotated in storage on success. Any failure after
        the refresh token was found clears both tokens before re-raising.

        Raises:
            NoRefreshTokenError: If no refresh token is stored
            TokenRefreshError: If the refresh endpoint rejects the token
        """
        refresh_token = self.storage.get(REFRESH_TOKEN_KEY)
        if not refresh_token:
            raise NoRefreshTokenError()

        try:
            try:
                response = await self.http.post(
                    self.refresh_path,
                    json={"refreshToken": refresh_token},
                    headers={"Content-Type": "application/json"},
                )
            except httpx.HTTPError as e:
                raise TokenRefreshError(CONNECTION_ERROR_MESSAGE) from e

            data = parse_json(response)
            if not response.is_success:
                raise TokenRefreshError(extract_message(data, "Failed to refresh token"))

            try:
                pair = TokenPair.model_validate(data)
            except ValidationError as e:
                raise TokenRefreshError("Invalid refresh response") from e
            if not pair.access_token or not pair.refresh_token:
                raise TokenRefreshError("Invalid refresh response")

            self.storage.update_tokens(pair.access_token, pair.refresh_token)
            return pair.access_token

        except Exception as e:
            logger.error(f"Token refresh failed: {e}")
            self.storage.clear_tokens()
            raise

    async def _send(self, method: str, url: str, token: str, headers=None, **kwargs) -> httpx.Response:
        merged = dict(headers or {})
        merged["Authorization"] = f"Bearer {token}"
        return await self.http.request(method, url, headers=merged, **kwargs)

    async def fetch_with_auth(self, method: str, url: str, headers=None, **kwargs) -> httpx.Response:
        """
        Send an authenticated request, refreshing the token once on 401.

        Args:
            method: HTTP method
            url: URL, relative to the client's base URL
            headers: Extra headers; ``Authorization`` is always overridden
            **kwargs: Passed through to ``httpx.AsyncClient.request``

        Returns:
            The response; a replayed request is returned whatever its status

        Raises:
            NoAuthTokenError: If no bearer token is stored
            NoRefreshTokenError / TokenRefreshError: If the refresh fails
        """
        token = self.storage.get(AUTH_TOKEN_KEY)
        if not token:
            raise NoAuthTokenError()

        response = await self._send(method, url, token, headers, **kwargs)
        if response.status_code != 401:
            return response

        if self.is_refreshing:
            waiter = asyncio.get_running_loop().create_future()
            self._failed_queue.append(waiter)
            new_token = await waiter
            return await self._send(method, url, new_token, headers, **kwargs)

        current = self.storage.get(AUTH_TOKEN_KEY)
        if current and current != token:
            # A refresh completed while this request was in flight
            return await self._send(method, url, current, headers, **kwargs)

        self.is_refreshing = True
        try:
            new_token = await self.refresh_token()
            self._process_queue(None, new_token)
        except Exception as e:
            self._process_queue(e)
            raise
        finally:
            self.is_refreshing = False
            if self._failed_queue:
                self._process_queue(TokenRefreshError("Token refresh was cancelled"))

        return await self._send(method, url, new_token, headers, **kwargs)
