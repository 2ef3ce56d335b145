"""Tests for the bearer-token interceptor and its single-flight refresh."""
import asyncio

import httpx
import pytest

from app.client.interceptor import AuthInterceptor
from app.client.storage import AUTH_TOKEN_KEY, REFRESH_TOKEN_KEY, MemoryTokenStorage
from app.core.errors import NoAuthTokenError, NoRefreshTokenError, TokenRefreshError


class TokenServer:
    """Protected ``/api/members`` that only accepts ``valid_token``."""

    def __init__(self, valid_token="access-2", refresh_status=200, refresh_delay=0.01):
        self.valid_token = valid_token
        self.refresh_status = refresh_status
        self.refresh_delay = refresh_delay
        self.refresh_calls = 0
        self.seen_tokens = []
        self.on_rejected = None

    async def __call__(self, request: httpx.Request) -> httpx.Response:
        if request.url.path == "/api/auth/refresh":
            self.refresh_calls += 1
            await asyncio.sleep(self.refresh_delay)
            if self.refresh_status != 200:
                return httpx.Response(self.refresh_status, json={"message": "Refresh token expirado"})
            return httpx.Response(
                200, json={"accessToken": "access-2", "refreshToken": "refresh-2", "expiresIn": 900}
            )

        await asyncio.sleep(0)
        token = request.headers.get("Authorization", "").removeprefix("Bearer ")
        self.seen_tokens.append(token)
        if token != self.valid_token:
            if self.on_rejected:
                self.on_rejected()
            return httpx.Response(401, json={"message": "Token expirado"})
        return httpx.Response(200, json=[{"id": "m1"}])


def make_storage(**extra):
    data = {AUTH_TOKEN_KEY: "access-1", REFRESH_TOKEN_KEY: "refresh-1"}
    data.update(extra)
    return MemoryTokenStorage(data)


def run(server, storage, scenario):
    async def main():
        async with httpx.AsyncClient(transport=httpx.MockTransport(server), base_url="http://app.test") as http:
            return await scenario(AuthInterceptor(http, storage))

    return asyncio.run(main())


class TestFetchWithAuth:
    def test_sends_bearer(self):
        server = TokenServer(valid_token="access-1")
        response = run(server, make_storage(), lambda i: i.fetch_with_auth("GET", "/api/members"))
        assert response.status_code == 200
        assert server.seen_tokens == ["access-1"]
        assert server.refresh_calls == 0

    def test_without_token(self):
        with pytest.raises(NoAuthTokenError):
            run(TokenServer(), MemoryTokenStorage(), lambda i: i.fetch_with_auth("GET", "/api/members"))

    def test_refreshes_and_replays(self):
        storage = make_storage()
        server = TokenServer()
        response = run(server, storage, lambda i: i.fetch_with_auth("GET", "/api/members"))

        assert response.status_code == 200
        assert server.seen_tokens == ["access-1", "access-2"]
        assert storage.get(AUTH_TOKEN_KEY) == "access-2"
        assert storage.get(REFRESH_TOKEN_KEY) == "refresh-2"

    def test_replays_only_once(self):
        server = TokenServer(valid_token="never")
        response = run(server, make_storage(), lambda i: i.fetch_with_auth("GET", "/api/members"))
        assert response.status_code == 401
        assert server.refresh_calls == 1
        assert len(server.seen_tokens) == 2

    def test_no_refresh_token(self):
        storage = MemoryTokenStorage({AUTH_TOKEN_KEY: "access-1"})
        with pytest.raises(NoRefreshTokenError):
            run(TokenServer(), storage, lambda i: i.fetch_with_auth("GET", "/api/members"))

    def test_uses_token_rotated_while_in_flight(self):
        storage = make_storage()
        server = TokenServer()
        server.on_rejected = lambda: storage.set(AUTH_TOKEN_KEY, "access-2")

        response = run(server, storage, lambda i: i.fetch_with_auth("GET", "/api/members"))
        assert response.status_code == 200
        assert server.refresh_calls == 0


class TestSingleFlight:
    def test_concurrent_401s_share_one_refresh(self):
        server = TokenServer()

        async def scenario(interceptor):
            responses = await asyncio.gather(
                *(interceptor.fetch_with_auth("GET", "/api/members") for _ in range(3))
            )
            return responses, interceptor

        responses, interceptor = run(server, make_storage(), scenario)

        assert [r.status_code for r in responses] == [200, 200, 200]
        assert server.refresh_calls == 1
        assert server.seen_tokens.count("access-2") == 3
        assert interceptor.pending == 0
        assert interceptor.is_refreshing is False

    def test_failed_refresh_rejects_every_waiter(self):
        storage = make_storage()
        server = TokenServer(refresh_status=401)

        async def scenario(interceptor):
            results = await asyncio.gather(
                *(interceptor.fetch_with_auth("GET", "/api/members") for _ in range(3)),
                return_exceptions=True,
            )
            return results, interceptor

        results, interceptor = run(server, storage, scenario)

        assert all(isinstance(r, TokenRefreshError) for r in results)
        assert results[0].message == "Refresh token expirado"
        assert server.refresh_calls == 1
        assert storage.get(AUTH_TOKEN_KEY) is None
        assert storage.get(REFRESH_TOKEN_KEY) is None
        assert interceptor.pending == 0


class TestRefreshToken:
    def test_invalid_response(self):
        storage = make_storage()

        def handler(request):
            return httpx.Response(200, json={"accessToken": "only-access"})

        with pytest.raises(TokenRefreshError, match="Invalid refresh response"):
            run(handler, storage, lambda i: i.refresh_token())
        assert storage.get(AUTH_TOKEN_KEY) is None

    def test_connection_error(self):
        storage = make_storage()

        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        with pytest.raises(TokenRefreshError, match="Error de conexión"):
            run(handler, storage, lambda i: i.refresh_token())
        assert storage.get(REFRESH_TOKEN_KEY) is None
