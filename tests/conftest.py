"""Shared fixtures: a scripted backend behind ``httpx.MockTransport``."""
import json
from typing import Callable, Dict, List, Tuple

import httpx
import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.services.backend_client import BackendClient, get_backend_client

BACKEND_URL = "http://backend.test"

USER = {"id": "u1", "email": "ana@club.es", "name": "Ana", "clubId": "c1"}


class FakeBackend:
    """Answers requests from a ``(method, path) -> handler`` table and records them."""

    def __init__(self):
        self.routes: Dict[Tuple[str, str], Callable[[httpx.Request], httpx.Response]] = {}
        self.requests: List[httpx.Request] = []

    def add(self, method: str, path: str, status: int = 200, json=None, handler=None):
        self.routes[(method, path)] = handler or (lambda request: httpx.Response(status, json=json))

    def fail(self, method: str, path: str):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        self.routes[(method, path)] = handler

    def calls(self, method: str, path: str) -> List[httpx.Request]:
        return [r for r in self.requests if r.method == method and r.url.path == path]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        handler = self.routes.get((request.method, request.url.path))
        if handler is None:
            return httpx.Response(404, json={"message": "Not Found"})
        return handler(request)


def body(request: httpx.Request):
    return json.loads(request.content) if request.content else None


@pytest.fixture
def fake_backend():
    return FakeBackend()


@pytest.fixture
def backend(fake_backend):
    return BackendClient(base_url=BACKEND_URL, transport=httpx.MockTransport(fake_backend))


@pytest.fixture
def client(backend):
    app.dependency_overrides[get_backend_client] = lambda: backend
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"Authorization": "Bearer access-1"}


@pytest.fixture
def logged_in(client):
    """Client carrying the cookies of a logged-in dashboard user."""
    client.cookies.set("authToken", "access-1")
    client.cookies.set("refreshToken", "refresh-1")
    client.cookies.set("userData", json.dumps(USER, separators=(",", ":")))
    return client
