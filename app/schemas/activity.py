"""Activity schemas."""
from pydantic import Field
from typing import Optional
from datetime import datetime

from app.schemas.base import CamelModel, RecordInDB


class ActivityCreate(CamelModel):
    name: str = Field(..., min_length=1)
    description: Optional[str] = None


class ActivityUpdate(CamelModel):
    name: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = None


class ActivityInDB(RecordInDB):
    name: str
    description: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
