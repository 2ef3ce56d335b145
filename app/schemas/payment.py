"""Payment schemas."""
from enum import Enum
from pydantic import Field
from typing import Optional
from datetime import datetime

from app.schemas.base import CamelModel, RecordInDB


class PaymentType(str, Enum):
    INCOME = "INCOME"
    EXPENSE = "EXPENSE"


class PaymentBase(CamelModel):
    """Base payment schema."""

    amount: float
    type: PaymentType
    category: Optional[str] = None
    description: Optional[str] = None
    date: datetime
    member_id: Optional[str] = None  # Set for member fees
    sponsor_id: Optional[str] = None  # Set for sponsor contributions
    club_id: str = Field(..., min_length=1)
    is_active: bool = True


class PaymentCreate(PaymentBase):
    """Schema for creating a payment."""

    pass


class PaymentUpdate(CamelModel):
    """Schema for updating a payment."""

    amount: Optional[float] = None
    type: Optional[PaymentType] = None
    category: Optional[str] = None
    description: Optional[str] = None
    date: Optional[datetime] = None
    member_id: Optional[str] = None
    sponsor_id: Optional[str] = None
    club_id: Optional[str] = Field(default=None, min_length=1)
    is_active: Optional[bool] = None


class PaymentInDB(RecordInDB):
    """Schema for a payment returned by the backend."""

    amount: float
    type: Optional[PaymentType] = None
    category: Optional[str] = None
    description: Optional[str] = None
    date: Optional[datetime] = None
    member_id: Optional[str] = None
    sponsor_id: Optional[str] = None
    club_id: Optional[str] = None
    is_active: bool = True
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
