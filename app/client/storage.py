"""Persistent client-side credential storage.

The dashboard keeps its credentials the way a browser keeps them in local
storage: a handful of string keys. ``FileTokenStorage`` persists them to a
JSON file for scripts and long-lived clients; ``MemoryTokenStorage`` backs tests and
the per-request cookie jar of the server-rendered dashboard.
"""
import json
import logging
from pathlib import Path
from typing import Dict, Optional, Tuple, Union

logger = logging.getLogger(__name__)

AUTH_TOKEN_KEY = "authToken"
REFRESH_TOKEN_KEY = "refreshToken"
USER_DATA_KEY = "userData"
LOCALE_KEY = "locale"

AUTH_KEYS = (AUTH_TOKEN_KEY, REFRESH_TOKEN_KEY, USER_DATA_KEY)


class TokenStorage:
    """String key/value storage with auth-state helpers on top."""

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError

    def remove(self, key: str) -> None:
        raise NotImplementedError

    def load_initial_state(self) -> Tuple[Optional[dict], Optional[str]]:
        """
        Read the persisted user and bearer token.

        Both must be present for the session to count as restored. A
        corrupt user record wipes every auth key.
        """
        token = self.get(AUTH_TOKEN_KEY)
        user_data = self.get(USER_DATA_KEY)

        if not token or not user_data:
            return None, None

        try:
            user = json.loads(user_data)
        except ValueError:
            logger.error("Error loading initial auth state: corrupt user data")
            self.clear_auth_state()
            return None, None

        if not isinstance(user, dict):
            self.clear_auth_state()
            return None, None

        return user, token

    def save_auth_state(self, user: dict, token: str, refresh_token: Optional[str]) -> None:
        self.set(AUTH_TOKEN_KEY, token)
        if refresh_token:
            self.set(REFRESH_TOKEN_KEY, refresh_token)
        else:
            self.remove(REFRESH_TOKEN_KEY)
        self.set(USER_DATA_KEY, json.dumps(user))

    def clear_auth_state(self) -> None:
        for key in AUTH_KEYS:
            self.remove(key)

    def update_user(self, user: dict) -> None:
        self.set(USER_DATA_KEY, json.dumps(user))

    def update_tokens(self, token: str, refresh_token: str) -> None:
        self.set(AUTH_TOKEN_KEY, token)
        self.set(REFRESH_TOKEN_KEY, refresh_token)

    def clear_tokens(self) -> None:
        self.remove(AUTH_TOKEN_KEY)
        self.remove(REFRESH_TOKEN_KEY)


class MemoryTokenStorage(TokenStorage):
    """Storage living in a plain dict."""

    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = {k: v for k, v in (initial or {}).items() if v is not None}

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def snapshot(self) -> Dict[str, str]:
        return dict(self._data)


class FileTokenStorage(TokenStorage):
    """Storage persisted to a JSON file, rewritten on every change."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._data: Dict[str, str] = self._load()

    def _load(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable token file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            return {}
        return {str(k): str(v) for k, v in data.items()}

    def _flush(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._data, indent=2), encoding="utf-8")

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value
        self._flush()

    def remove(self, key: str) -> None:
        if self._data.pop(key, None) is not None:
            self._flush()
