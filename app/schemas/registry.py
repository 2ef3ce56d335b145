"""Descriptors of the CRUD resources exposed by the backend.

Every entity of the club model is managed the same way: list, create,
read, update and delete against ``/<entity>``. A ``ResourceSpec`` carries
everything that differs between them, so the proxy routers, the client
stores and the dashboard sections are all built from this table.
"""
from dataclasses import dataclass
from typing import Dict, List, Tuple, Type

from app.core.config import API_ENDPOINTS
from app.schemas.activity import ActivityCreate, ActivityInDB, ActivityUpdate
from app.schemas.base import CamelModel, RecordInDB
from app.schemas.club import ClubCreate, ClubInDB, ClubUpdate
from app.schemas.member import MemberCreate, MemberInDB, MemberUpdate
from app.schemas.payment import PaymentCreate, PaymentInDB, PaymentType, PaymentUpdate
from app.schemas.property import PropertyCreate, PropertyInDB, PropertyUpdate
from app.schemas.role import (
    PermissionCreate,
    PermissionInDB,
    PermissionUpdate,
    RoleCreate,
    RoleInDB,
    RoleUpdate,
)
from app.schemas.sponsor import SponsorCreate, SponsorInDB, SponsorUpdate
from app.schemas.user import UserCreate, UserInDB, UserUpdate


@dataclass(frozen=True)
class FormField:
    """An input of a dashboard create form."""

    name: str
    kind: str = "text"  # text, email, password, number, datetime-local, select, list, textarea
    required: bool = False
    choices: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ResourceSpec:
    """Everything needed to proxy, store and render one entity."""

    name: str
    singular: str
    plural: str
    create_model: Type[CamelModel]
    update_model: Type[CamelModel]
    read_model: Type[RecordInDB]
    columns: Tuple[str, ...]
    form_fields: Tuple[FormField, ...]
    club_scoped: bool = False

    @property
    def endpoint(self) -> str:
        return API_ENDPOINTS[self.name.upper()]

    @property
    def api_path(self) -> str:
        """Path of the collection on this application's proxy."""
        return f"/api/{self.name}"

    def fetch_error(self) -> str:
        return f"Error al obtener {self.plural}"

    def get_error(self) -> str:
        return f"Error al obtener {self.singular}"

    def create_error(self) -> str:
        return f"Error al crear {self.singular}"

    def update_error(self) -> str:
        return f"Error al actualizar {self.singular}"

    def delete_error(self) -> str:
        return f"Error al eliminar {self.singular}"


RESOURCES: Dict[str, ResourceSpec] = {
    spec.name: spec
    for spec in [
        ResourceSpec(
            name="users",
            singular="usuario",
            plural="usuarios",
            create_model=UserCreate,
            update_model=UserUpdate,
            read_model=UserInDB,
            columns=("name", "email", "createdAt", "updatedAt"),
            form_fields=(
                FormField("name", required=True),
                FormField("email", "email", required=True),
                FormField("password", "password", required=True),
            ),
        ),
        ResourceSpec(
            name="members",
            singular="miembro",
            plural="miembros",
            create_model=MemberCreate,
            update_model=MemberUpdate,
            read_model=MemberInDB,
            columns=("name", "email", "createdAt"),
            form_fields=(
                FormField("name", required=True),
                FormField("email", "email", required=True),
            ),
            club_scoped=True,
        ),
        ResourceSpec(
            name="sponsors",
            singular="sponsor",
            plural="sponsors",
            create_model=SponsorCreate,
            update_model=SponsorUpdate,
            read_model=SponsorInDB,
            columns=("name", "email", "createdAt"),
            form_fields=(
                FormField("name", required=True),
                FormField("email", "email", required=True),
            ),
            club_scoped=True,
        ),
        ResourceSpec(
            name="payments",
            singular="pago",
            plural="pagos",
            create_model=PaymentCreate,
            update_model=PaymentUpdate,
            read_model=PaymentInDB,
            columns=("amount", "type", "category", "description", "date"),
            form_fields=(
                FormField("amount", "number", required=True),
                FormField("type", "select", required=True, choices=tuple(t.value for t in PaymentType)),
                FormField("category"),
                FormField("description", "textarea"),
                FormField("date", "datetime-local", required=True),
            ),
            club_scoped=True,
        ),
        ResourceSpec(
            name="clubs",
            singular="club",
            plural="clubes",
            create_model=ClubCreate,
            update_model=ClubUpdate,
            read_model=ClubInDB,
            columns=("name", "alias", "location", "foundationDate"),
            form_fields=(
                FormField("name", required=True),
                FormField("alias"),
                FormField("location"),
                FormField("description", "textarea"),
            ),
        ),
        ResourceSpec(
            name="roles",
            singular="rol",
            plural="roles",
            create_model=RoleCreate,
            update_model=RoleUpdate,
            read_model=RoleInDB,
            columns=("name",),
            form_fields=(
                FormField("name", required=True),
                FormField("permission_ids", "list"),
            ),
            club_scoped=True,
        ),
        ResourceSpec(
            name="permissions",
            singular="permiso",
            plural="permisos",
            create_model=PermissionCreate,
            update_model=PermissionUpdate,
            read_model=PermissionInDB,
            columns=("name", "description"),
            form_fields=(
                FormField("name", required=True),
                FormField("description", "textarea"),
            ),
        ),
        ResourceSpec(
            name="properties",
            singular="propiedad",
            plural="propiedades",
            create_model=PropertyCreate,
            update_model=PropertyUpdate,
            read_model=PropertyInDB,
            columns=("name", "location", "characteristics"),
            form_fields=(
                FormField("name", required=True),
                FormField("location", required=True),
                FormField("characteristics", "list"),
            ),
        ),
        ResourceSpec(
            name="activities",
            singular="actividad",
            plural="actividades",
            create_model=ActivityCreate,
            update_model=ActivityUpdate,
            read_model=ActivityInDB,
            columns=("name", "description"),
            form_fields=(
                FormField("name", required=True),
                FormField("description", "textarea"),
            ),
        ),
    ]
}


def get_resource(name: str) -> ResourceSpec:
    """Look up a resource by its collection name, e.g. ``"members"``."""
    return RESOURCES[name]


def resource_names() -> List[str]:
    return list(RESOURCES)
