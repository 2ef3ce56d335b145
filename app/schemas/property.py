"""Property schemas."""
from pydantic import Field
from typing import List, Optional
from datetime import datetime

from app.schemas.base import CamelModel, RecordInDB


class PropertyCreate(CamelModel):
    """Schema for creating a club property (field, clubhouse...)."""

    name: str = Field(..., min_length=1)
    location: str = Field(..., min_length=1)
    characteristics: List[str] = []


class PropertyUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    location: Optional[str] = Field(default=None, min_length=1)
    characteristics: Optional[List[str]] = None


class PropertyInDB(RecordInDB):
    name: str
    location: Optional[str] = None
    characteristics: List[str] = []
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
