"""CRUD proxy endpoints for the club entities."""
from typing import List

from fastapi import APIRouter, Depends

from app.api.deps import require_authorization, require_bearer
from app.schemas.registry import RESOURCES, ResourceSpec
from app.schemas.role import AssignUserRole
from app.services.backend_client import BackendClient, get_backend_client


def build_resource_router(spec: ResourceSpec) -> APIRouter:
    """
    Build the ``/api/<entity>`` router for one resource.

    Every route requires an ``Authorization`` header, which is forwarded
    untouched. Create and update bodies are validated against the
    resource's schemas before they reach the backend.
    """
    router = APIRouter(prefix=spec.api_path, tags=[spec.name])
    create_model = spec.create_model
    update_model = spec.update_model

    @router.get("", name=f"list_{spec.name}")
    async def list_records(
        authorization: str = Depends(require_authorization),
        backend: BackendClient = Depends(get_backend_client),
    ):
        return await backend.get(spec.endpoint, spec.fetch_error(), authorization)

    @router.post("", name=f"create_{spec.name}", status_code=201)
    async def create_record(
        payload: create_model,
        authorization: str = Depends(require_authorization),
        backend: BackendClient = Depends(get_backend_client),
    ):
        return await backend.post(
            spec.endpoint,
            spec.create_error(),
            json_data=payload.to_backend(),
            authorization=authorization,
        )

    @router.get("/{record_id}", name=f"get_{spec.name}")
    async def get_record(
        record_id: str,
        authorization: str = Depends(require_authorization),
        backend: BackendClient = Depends(get_backend_client),
    ):
        return await backend.get(f"{spec.endpoint}/{record_id}", spec.get_error(), authorization)

    @router.patch("/{record_id}", name=f"update_{spec.name}")
    async def update_record(
        record_id: str,
        payload: update_model,
        authorization: str = Depends(require_authorization),
        backend: BackendClient = Depends(get_backend_client),
    ):
        # Only forward the fields the caller actually sent
        return await backend.patch(
            f"{spec.endpoint}/{record_id}",
            spec.update_error(),
            json_data=payload.to_backend(exclude_unset=True),
            authorization=authorization,
        )

    @router.delete("/{record_id}", name=f"delete_{spec.name}")
    async def delete_record(
        record_id: str,
        authorization: str = Depends(require_authorization),
        backend: BackendClient = Depends(get_backend_client),
    ):
        return await backend.delete(f"{spec.endpoint}/{record_id}", spec.delete_error(), authorization)

    return router


# Role routes that would otherwise be shadowed by ``/api/roles/{record_id}``
roles_router = APIRouter(prefix="/api/roles", tags=["roles"])


@roles_router.get("/my-club")
async def my_club_roles(
    authorization: str = Depends(require_bearer),
    backend: BackendClient = Depends(get_backend_client),
):
    """Roles of the club the authenticated user belongs to."""
    return await backend.get(
        f"{RESOURCES['roles'].endpoint}/my-club",
        "Error al obtener roles del club",
        authorization,
    )


@roles_router.post("/assign-user", status_code=201)
async def assign_user_role(
    assignment: AssignUserRole,
    authorization: str = Depends(require_authorization),
    backend: BackendClient = Depends(get_backend_client),
):
    """Give a user a role inside a club."""
    return await backend.post(
        f"{RESOURCES['roles'].endpoint}/assign-user",
        "Error al asignar rol",
        json_data=assignment.to_backend(),
        authorization=authorization,
    )


def resource_routers() -> List[APIRouter]:
    """Routers for every registered resource, role extras first."""
    return [roles_router] + [build_resource_router(spec) for spec in RESOURCES.values()]
