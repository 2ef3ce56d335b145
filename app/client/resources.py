"""Client-side CRUD stores.

A ``ResourceStore`` keeps the local list of one entity in step with the
backend: it is loaded with ``fetch_all`` and then patched in place after
each successful create, update or delete, so the dashboard never has to
reload the whole collection after a change.
"""
import logging
from typing import Any, List, Optional, Union

import httpx

from app.client.session import AuthSession
from app.core.errors import CONNECTION_ERROR_MESSAGE, ApiError, AuthError, extract_message
from app.schemas.base import CamelModel
from app.schemas.registry import ResourceSpec, get_resource
from app.utils import parse_json, unwrap_payload

logger = logging.getLogger(__name__)

Payload = Union[dict, CamelModel]


class ResourceStore:
    """Local list of one entity plus its CRUD operations."""

    def __init__(self, session: AuthSession, spec: Union[ResourceSpec, str]):
        self.session = session
        self.spec = get_resource(spec) if isinstance(spec, str) else spec
        self.items: List[dict] = []
        self.loading = False
        self.error: Optional[str] = None

    async def _call(self, method: str, path: str, default_error: str, json: Optional[Any] = None) -> Any:
        try:
            response = await self.session.interceptor.fetch_with_auth(method, path, json=json)
        except AuthError as e:
            raise ApiError(e.message, 401) from e
        except httpx.HTTPError as e:
            raise ApiError(CONNECTION_ERROR_MESSAGE) from e

        data = parse_json(response)
        if not response.is_success:
            raise ApiError(extract_message(data, default_error), response.status_code)

        return unwrap_payload(data)

    def _fail(self, action: str, error: ApiError) -> None:
        self.error = error.message
        logger.error(f"Error {action} {self.spec.name}: {error.message}")

    def _record_path(self, record_id: str) -> str:
        return f"{self.spec.api_path}/{record_id}"

    def _prepare_create(self, data: Payload) -> dict:
        payload = data.to_backend() if isinstance(data, CamelModel) else dict(data)
        if self.spec.club_scoped and not (payload.get("clubId") or payload.get("club_id")):
            club_id = (self.session.user or {}).get("clubId")
            if club_id:
                payload["clubId"] = club_id
        # Raises pydantic.ValidationError for invalid form input
        return self.spec.create_model.model_validate(payload).to_backend()

    def _prepare_update(self, data: Payload) -> dict:
        if isinstance(data, CamelModel):
            return data.to_backend(exclude_unset=True)
        return self.spec.update_model.model_validate(data).to_backend(exclude_unset=True)

    async def fetch_all(self) -> List[dict]:
        """Load the whole collection into ``items``."""
        self.loading = True
        self.error = None
        try:
            data = await self._call("GET", self.spec.api_path, self.spec.fetch_error())
            self.items = list(data) if isinstance(data, list) else []
            return self.items
        except ApiError as e:
            self._fail("fetching", e)
            raise
        finally:
            self.loading = False

    async def get(self, record_id: str) -> dict:
        self.error = None
        try:
            return await self._call("GET", self._record_path(record_id), self.spec.get_error())
        except ApiError as e:
            self._fail("fetching", e)
            raise

    async def create(self, data: Payload) -> dict:
        """
        Create a record and append it to ``items``.

        Club-scoped resources get the user's ``clubId`` when the caller
        leaves it out.
        """
        self.error = None
        payload = self._prepare_create(data)
        try:
            record = await self._call("POST", self.spec.api_path, self.spec.create_error(), json=payload)
        except ApiError as e:
            self._fail("creating", e)
            raise

        self.items.append(record)
        return record

    async def update(self, record_id: str, data: Payload) -> dict:
        """Update a record and replace it in ``items``."""
        self.error = None
        payload = self._prepare_update(data)
        try:
            record = await self._call(
                "PATCH", self._record_path(record_id), self.spec.update_error(), json=payload
            )
        except ApiError as e:
            self._fail("updating", e)
            raise

        self.items = [record if item.get("id") == record_id else item for item in self.items]
        return record

    async def delete(self, record_id: str) -> None:
        """Delete a record and drop it from ``items``."""
        self.error = None
        try:
            await self._call("DELETE", self._record_path(record_id), self.spec.delete_error())
        except ApiError as e:
            self._fail("deleting", e)
            raise

        self.items = [item for item in self.items if item.get("id") != record_id]


class RoleStore(ResourceStore):
    """Roles, with the club-scoped listing and user assignment."""

    def __init__(self, session: AuthSession):
        super().__init__(session, "roles")

    async def fetch_my_club(self) -> List[dict]:
        """Load only the roles of the user's club into ``items``."""
        self.loading = True
        self.error = None
        try:
            data = await self._call("GET", f"{self.spec.api_path}/my-club", "Error al obtener roles del club")
            self.items = list(data) if isinstance(data, list) else []
            return self.items
        except ApiError as e:
            self._fail("fetching", e)
            raise
        finally:
            self.loading = False

    async def assign_user(self, user_id: str, role_id: str, club_id: Optional[str] = None) -> dict:
        club_id = club_id or (self.session.user or {}).get("clubId")
        payload = {"userId": user_id, "roleId": role_id, "clubId": club_id}
        try:
            return await self._call("POST", f"{self.spec.api_path}/assign-user", "Error al asignar rol", json=payload)
        except ApiError as e:
            self._fail("assigning", e)
            raise


class ClubStore:
    """The authenticated user's own club."""

    def __init__(self, session: AuthSession):
        self.session = session
        self._clubs = ResourceStore(session, "clubs")
        self.club: Optional[dict] = None
        self.loading = False
        self.error: Optional[str] = None

    def _club_id(self) -> str:
        club_id = (self.session.user or {}).get("clubId")
        if not club_id:
            raise ApiError("No se encontró el ID del club")
        return club_id

    async def fetch(self) -> dict:
        self.loading = True
        self.error = None
        try:
            self.club = await self._clubs.get(self._club_id())
            return self.club
        except ApiError as e:
            self.error = e.message
            raise
        finally:
            self.loading = False

    async def update(self, data: Payload) -> dict:
        self.error = None
        try:
            self.club = await self._clubs.update(self._club_id(), data)
            return self.club
        except ApiError as e:
            self.error = e.message
            raise
