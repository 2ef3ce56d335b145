"""Backend health probes."""
import logging
import time
from typing import Optional

import httpx

from app.core.config import API_ENDPOINTS, build_auth_url, settings
from app.core.errors import UNKNOWN_ERROR_MESSAGE
from app.schemas.health import HealthCheckResult

logger = logging.getLogger(__name__)


def _elapsed_ms(start: float) -> int:
    return int((time.monotonic() - start) * 1000)


async def check_backend_health(
    http: httpx.AsyncClient,
    backend_url: Optional[str] = None,
    timeout: Optional[float] = None,
) -> HealthCheckResult:
    """
    Probe the backend profile endpoint.

    The probe is sent without credentials, so a 401 answer still means the
    backend is up and is counted as healthy.

    Args:
        http: Client used to send the probe
        backend_url: URL to probe, defaults to the backend profile endpoint
        timeout: Seconds before giving up

    Returns:
        HealthCheckResult describing the probe
    """
    url = backend_url or build_auth_url("PROFILE")
    timeout = timeout if timeout is not None else settings.HEALTH_CHECK_TIMEOUT_SECONDS
    start = time.monotonic()

    try:
        response = await http.get(
            url,
            headers={"Content-Type": "application/json"},
            timeout=timeout,
        )
    except httpx.HTTPError as e:
        return HealthCheckResult(
            is_healthy=False,
            backend_url=url,
            status=0,
            response_time_ms=_elapsed_ms(start),
            error=str(e) or UNKNOWN_ERROR_MESSAGE,
        )

    return HealthCheckResult(
        is_healthy=response.is_success or response.status_code == 401,
        backend_url=url,
        status=response.status_code,
        response_time_ms=_elapsed_ms(start),
    )


async def check_database_connection(http: httpx.AsyncClient) -> bool:
    """Check that this application's own ``/api/config`` answers."""
    try:
        response = await http.get(f"/api{API_ENDPOINTS['CONFIG']}")
    except httpx.HTTPError:
        return False
    return response.is_success


def log_health_status(result: HealthCheckResult) -> HealthCheckResult:
    """Log a health probe result and hand it back."""
    message = (
        f"Backend Health Check - Status: {result.status}, "
        f"Time: {result.response_time_ms}ms, URL: {result.backend_url}"
    )

    if result.is_healthy:
        logger.info(message)
    else:
        logger.error(f"{message} - {result.error}")

    return result
