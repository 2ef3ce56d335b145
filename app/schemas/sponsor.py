"""Sponsor schemas."""
from pydantic import EmailStr, Field
from typing import Optional
from datetime import datetime

from app.schemas.base import CamelModel, RecordInDB


class SponsorCreate(CamelModel):
    """Schema for creating a sponsor."""

    name: str = Field(..., min_length=1)
    email: EmailStr
    club_id: str = Field(..., min_length=1)


class SponsorUpdate(CamelModel):
    """Schema for updating a sponsor."""

    name: Optional[str] = Field(default=None, min_length=1)
    email: Optional[EmailStr] = None
    club_id: Optional[str] = Field(default=None, min_length=1)


class SponsorInDB(RecordInDB):
    name: str
    email: str
    club_id: Optional[str] = None
    created_at: Optional[datetime] = None
