"""Member schemas."""
from pydantic import EmailStr, Field
from typing import Optional
from datetime import datetime

from app.schemas.base import CamelModel, RecordInDB


class MemberBase(CamelModel):
    """Base member schema."""

    name: str = Field(..., min_length=1)
    email: EmailStr
    club_id: str = Field(..., min_length=1)


class MemberCreate(MemberBase):
    """Schema for creating a member."""

    pass


class MemberUpdate(CamelModel):
    """Schema for updating a member."""

    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    club_id: Optional[str] = Field(default=None, min_length=1)


class MemberInDB(RecordInDB):
    """Schema for a member returned by the backend."""

    name: str
    email: str
    club_id: Optional[str] = None
    created_at: Optional[datetime] = None
