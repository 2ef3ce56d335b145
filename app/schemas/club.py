"""Club schemas."""
from pydantic import Field
from typing import Optional
from datetime import datetime

from app.schemas.base import CamelModel, RecordInDB


class ClubBase(CamelModel):
    """Base club schema."""

    name: str = Field(..., min_length=1)
    alias: Optional[str] = None
    logo: Optional[str] = None
    location: Optional[str] = None
    foundation_date: Optional[datetime] = None
    description: Optional[str] = None


class ClubCreate(ClubBase):
    """Schema for creating a club."""

    pass


class ClubUpdate(CamelModel):
    """Schema for updating a club."""

    name: Optional[str] = Field(default=None, min_length=1)
    alias: Optional[str] = None
    logo: Optional[str] = None
    location: Optional[str] = None
    foundation_date: Optional[datetime] = None
    description: Optional[str] = None


class ClubInDB(RecordInDB):
    """Schema for a club returned by the backend."""

    name: str
    alias: Optional[str] = None
    logo: Optional[str] = None
    location: Optional[str] = None
    foundation_date: Optional[datetime] = None
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
