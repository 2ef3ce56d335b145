"""Client-side session layer: credential storage, token refresh and CRUD stores."""
from app.client.interceptor import AuthInterceptor
from app.client.resources import ClubStore, ResourceStore, RoleStore
from app.client.session import AuthErrorState, AuthSession
from app.client.storage import FileTokenStorage, MemoryTokenStorage, TokenStorage

__all__ = [
    "AuthErrorState",
    "AuthInterceptor",
    "AuthSession",
    "ClubStore",
    "FileTokenStorage",
    "MemoryTokenStorage",
    "ResourceStore",
    "RoleStore",
    "TokenStorage",
]
