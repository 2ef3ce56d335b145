"""Tests for the client-side CRUD stores."""
import asyncio
import json

import httpx
import pytest
from pydantic import ValidationError

from app.client.resources import ClubStore, ResourceStore, RoleStore
from app.client.session import AuthSession
from app.client.storage import AUTH_TOKEN_KEY, REFRESH_TOKEN_KEY, USER_DATA_KEY, MemoryTokenStorage
from app.core.errors import ApiError
from tests.conftest import USER, body

MEMBERS = [
    {"id": "m1", "name": "Ana", "email": "ana@club.es", "clubId": "c1"},
    {"id": "m2", "name": "Luis", "email": "luis@club.es", "clubId": "c1"},
]


def run_store(backend, scenario, user=USER):
    storage = MemoryTokenStorage(
        {AUTH_TOKEN_KEY: "access-1", REFRESH_TOKEN_KEY: "refresh-1", USER_DATA_KEY: json.dumps(user)}
    )

    async def main():
        async with httpx.AsyncClient(transport=httpx.MockTransport(backend), base_url="http://app.test") as http:
            session = AuthSession(http, storage)
            session.initialize()
            return await scenario(session)

    return asyncio.run(main())


class TestResourceStore:
    def test_fetch_all_unwraps_envelope(self, fake_backend):
        fake_backend.add("GET", "/api/members", json={"success": True, "data": MEMBERS})

        async def scenario(session):
            store = ResourceStore(session, "members")
            await store.fetch_all()
            return store

        store = run_store(fake_backend, scenario)
        assert store.items == MEMBERS
        assert store.loading is False
        assert fake_backend.requests[0].headers["Authorization"] == "Bearer access-1"

    def test_create_fills_club_and_appends(self, fake_backend):
        created = {"id": "m3", "name": "Eva", "email": "eva@club.es", "clubId": "c1"}
        fake_backend.add("GET", "/api/members", json=MEMBERS)
        fake_backend.add("POST", "/api/members", status=201, json=created)

        async def scenario(session):
            store = ResourceStore(session, "members")
            await store.fetch_all()
            await store.create({"name": "Eva", "email": "eva@club.es"})
            return store

        store = run_store(fake_backend, scenario)
        assert [item["id"] for item in store.items] == ["m1", "m2", "m3"]
        assert body(fake_backend.calls("POST", "/api/members")[0]) == {
            "name": "Eva",
            "email": "eva@club.es",
            "clubId": "c1",
        }

    def test_create_rejects_invalid_input(self, fake_backend):
        async def scenario(session):
            await ResourceStore(session, "members").create({"name": "Eva", "email": "nope"})

        with pytest.raises(ValidationError):
            run_store(fake_backend, scenario)
        assert fake_backend.requests == []

    def test_update_replaces_item(self, fake_backend):
        fake_backend.add("GET", "/api/members", json=MEMBERS)
        fake_backend.add("PATCH", "/api/members/m2", json={**MEMBERS[1], "name": "Luis G."})

        async def scenario(session):
            store = ResourceStore(session, "members")
            await store.fetch_all()
            await store.update("m2", {"name": "Luis G."})
            return store

        store = run_store(fake_backend, scenario)
        assert store.items[1]["name"] == "Luis G."
        assert body(fake_backend.calls("PATCH", "/api/members/m2")[0]) == {"name": "Luis G."}

    def test_delete_drops_item(self, fake_backend):
        fake_backend.add("GET", "/api/members", json=MEMBERS)
        fake_backend.add("DELETE", "/api/members/m1", json={"success": True})

        async def scenario(session):
            store = ResourceStore(session, "members")
            await store.fetch_all()
            await store.delete("m1")
            return store

        store = run_store(fake_backend, scenario)
        assert [item["id"] for item in store.items] == ["m2"]

    def test_backend_error_sets_error(self, fake_backend):
        fake_backend.add("GET", "/api/sponsors", status=500, json={})
        stores = []

        async def scenario(session):
            store = ResourceStore(session, "sponsors")
            stores.append(store)
            await store.fetch_all()

        with pytest.raises(ApiError) as exc_info:
            run_store(fake_backend, scenario)
        assert exc_info.value.status_code == 500
        assert stores[0].error == "Error al obtener sponsors"

    def test_failed_refresh_becomes_401(self, fake_backend):
        fake_backend.add("GET", "/api/members", status=401)
        fake_backend.add("POST", "/api/auth/refresh", status=401)

        async def scenario(session):
            await ResourceStore(session, "members").fetch_all()

        with pytest.raises(ApiError) as exc_info:
            run_store(fake_backend, scenario)
        assert exc_info.value.status_code == 401


class TestRoleStore:
    def test_my_club(self, fake_backend):
        fake_backend.add("GET", "/api/roles/my-club", json=[{"id": "r1", "name": "Admin"}])

        async def scenario(session):
            store = RoleStore(session)
            return await store.fetch_my_club()

        assert run_store(fake_backend, scenario) == [{"id": "r1", "name": "Admin"}]

    def test_assign_user_defaults_to_own_club(self, fake_backend):
        fake_backend.add("POST", "/api/roles/assign-user", status=201, json={"success": True})

        run_store(fake_backend, lambda session: RoleStore(session).assign_user("u2", "r1"))
        assert body(fake_backend.requests[0]) == {"userId": "u2", "roleId": "r1", "clubId": "c1"}


class TestClubStore:
    def test_fetch_own_club(self, fake_backend):
        fake_backend.add("GET", "/api/clubs/c1", json={"id": "c1", "name": "CD Norte"})

        async def scenario(session):
            store = ClubStore(session)
            await store.fetch()
            return store

        assert run_store(fake_backend, scenario).club["name"] == "CD Norte"

    def test_user_without_club(self, fake_backend):
        user = {key: value for key, value in USER.items() if key != "clubId"}

        with pytest.raises(ApiError, match="No se encontró el ID del club"):
            run_store(fake_backend, lambda session: ClubStore(session).fetch(), user=user)
        assert fake_backend.requests == []

    def test_update_own_club(self, fake_backend):
        fake_backend.add("PATCH", "/api/clubs/c1", json={"id": "c1", "name": "CD Norte", "location": "Bilbao"})

        async def scenario(session):
            store = ClubStore(session)
            await store.update({"location": "Bilbao"})
            return store

        assert run_store(fake_backend, scenario).club["location"] == "Bilbao"
        assert body(fake_backend.requests[0]) == {"location": "Bilbao"}
