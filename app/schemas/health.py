"""Health check schemas."""
from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime, timezone


class HealthCheckResult(BaseModel):
    """Outcome of a single backend health probe."""

    is_healthy: bool
    backend_url: str
    status: int
    response_time_ms: int
    error: Optional[str] = None
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
