"""Small helpers shared by the API, the client and the dashboard."""
import logging
from datetime import datetime
from typing import Any, Optional, Union

import httpx
import pytz

from app.core.config import settings

logger = logging.getLogger(__name__)


def parse_json(response: httpx.Response) -> Any:
    """Decode a response body, treating empty or non-JSON bodies as ``{}``."""
    if not response.content:
        return {}
    try:
        return response.json()
    except ValueError:
        logger.warning(f"Non-JSON response from {response.request.url} ({response.status_code})")
        return {}


def unwrap_payload(data: Any) -> Any:
    """Strip the backend's ``{"success": true, "data": ...}`` envelope if present."""
    if isinstance(data, dict) and data.get("success") and "data" in data:
        return data["data"]
    return data


def format_date(value: Union[datetime, str, None], timezone: Optional[str] = None) -> str:
    """
    Format a timestamp as ``dd/mm/YYYY`` in the display timezone.

    Naive datetimes are taken as UTC. Strings that are not ISO timestamps
    are returned unchanged.
    """
    if value is None or value == "":
        return ""

    if isinstance(value, str):
        try:
            value = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return value

    if value.tzinfo is None:
        value = pytz.UTC.localize(value)

    local = value.astimezone(pytz.timezone(timezone or settings.DISPLAY_TIMEZONE))
    return local.strftime("%d/%m/%Y")
