"""API schemas."""
from app.schemas.activity import ActivityCreate, ActivityInDB, ActivityUpdate
from app.schemas.auth import (
    AuthUser,
    LoginRequest,
    RefreshRequest,
    RegisterRequest,
    TokenPair,
)
from app.schemas.club import ClubCreate, ClubInDB, ClubUpdate
from app.schemas.health import HealthCheckResult
from app.schemas.member import MemberCreate, MemberInDB, MemberUpdate
from app.schemas.payment import PaymentCreate, PaymentInDB, PaymentType, PaymentUpdate
from app.schemas.property import PropertyCreate, PropertyInDB, PropertyUpdate
from app.schemas.role import (
    AssignUserRole,
    PermissionCreate,
    PermissionInDB,
    PermissionUpdate,
    RoleCreate,
    RoleInDB,
    RoleUpdate,
)
from app.schemas.sponsor import SponsorCreate, SponsorInDB, SponsorUpdate
from app.schemas.user import UserCreate, UserInDB, UserUpdate

__all__ = [
    "ActivityCreate",
    "ActivityInDB",
    "ActivityUpdate",
    "AssignUserRole",
    "AuthUser",
    "ClubCreate",
    "ClubInDB",
    "ClubUpdate",
    "HealthCheckResult",
    "LoginRequest",
    "MemberCreate",
    "MemberInDB",
    "MemberUpdate",
    "PaymentCreate",
    "PaymentInDB",
    "PaymentType",
    "PaymentUpdate",
    "PermissionCreate",
    "PermissionInDB",
    "PermissionUpdate",
    "PropertyCreate",
    "PropertyInDB",
    "PropertyUpdate",
    "RefreshRequest",
    "RegisterRequest",
    "RoleCreate",
    "RoleInDB",
    "RoleUpdate",
    "SponsorCreate",
    "SponsorInDB",
    "SponsorUpdate",
    "TokenPair",
    "UserCreate",
    "UserInDB",
    "UserUpdate",
]
