"""Role and permission schemas."""
from pydantic import Field
from typing import List, Optional

from app.schemas.base import CamelModel, RecordInDB


class RoleCreate(CamelModel):
    """Schema for creating a role inside a club."""

    name: str = Field(..., min_length=1)
    club_id: str = Field(..., min_length=1)
    permission_ids: Optional[List[str]] = None


class RoleUpdate(CamelModel):
    """Schema for updating a role."""

    name: Optional[str] = Field(default=None, min_length=1)
    club_id: Optional[str] = Field(default=None, min_length=1)
    permission_ids: Optional[List[str]] = None


class RoleInDB(RecordInDB):
    name: str
    club_id: Optional[str] = None


class AssignUserRole(CamelModel):
    """Assign a user a role inside a club."""

    user_id: str = Field(..., min_length=1)
    club_id: str = Field(..., min_length=1)
    role_id: str = Field(..., min_length=1)


class PermissionCreate(CamelModel):
    """Schema for creating a permission, e.g. ``users.create``."""

    name: str = Field(..., min_length=1)
    description: Optional[str] = None


class PermissionUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None


class PermissionInDB(RecordInDB):
    name: str
    description: Optional[str] = None
