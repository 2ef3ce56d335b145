"""Background scheduler probing backend health."""
import logging
from typing import Optional

import httpx
from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.interval import IntervalTrigger

from app.core.config import settings
from app.schemas.health import HealthCheckResult
from app.services.health_check import check_backend_health, log_health_status

logger = logging.getLogger(__name__)


class HealthMonitor:
    """Periodically probes the backend and keeps the last result."""

    def __init__(self, interval_minutes: Optional[int] = None):
        """Initialize the scheduler."""
        self.scheduler = AsyncIOScheduler()
        self.interval_minutes = interval_minutes or settings.HEALTH_CHECK_INTERVAL_MINUTES
        self.running = False
        self.last_result: Optional[HealthCheckResult] = None

    async def start(self):
        """Start the scheduler."""
        if self.running:
            logger.warning("Health monitor is already running")
            return

        logger.info("Starting health monitor")

        self.scheduler.add_job(
            self.check_now,
            IntervalTrigger(minutes=self.interval_minutes),
            id="backend_health_job",
            name="Probe backend health",
            replace_existing=True,
        )

        self.scheduler.start()
        self.running = True
        logger.info(f"Health monitor started (every {self.interval_minutes} min)")

    async def stop(self):
        """Stop the scheduler."""
        if not self.running:
            return

        logger.info("Stopping health monitor")
        self.scheduler.shutdown(wait=False)
        self.running = False
        logger.info("Health monitor stopped")

    async def check_now(self) -> HealthCheckResult:
        """Run one probe and remember its result."""
        async with httpx.AsyncClient() as http:
            result = await check_backend_health(http)

        self.last_result = log_health_status(result)
        return result


# Singleton instance
health_monitor = HealthMonitor()
