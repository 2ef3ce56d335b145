"""User schemas."""
from pydantic import EmailStr, Field
from typing import Optional
from datetime import datetime

from app.schemas.base import CamelModel, RecordInDB


class UserCreate(CamelModel):
    """Schema for creating a user account."""

    email: EmailStr
    password: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    club_id: Optional[str] = Field(default=None, min_length=1)
    role_id: Optional[str] = Field(default=None, min_length=1)


class UserUpdate(CamelModel):
    """Schema for updating a user account."""

    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = Field(default=None, min_length=1)


class UserInDB(RecordInDB):
    """User as returned by the backend, never with a password."""

    email: str
    name: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
