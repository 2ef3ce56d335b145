"""Main FastAPI application."""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.api import auth, config
from app.api.resources import resource_routers
from app.core.config import settings
from app.core.errors import register_exception_handlers
from app.services.health_monitor import health_monitor
from app.web import views

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan manager."""
    # Startup
    logger.info("Starting Club Manager")
    logger.info(f"Debug mode: {settings.DEBUG}")
    logger.info(f"Backend URL: {settings.BACKEND_URL}")

    if settings.HEALTH_MONITOR_ENABLED:
        await health_monitor.start()
        await health_monitor.check_now()

    yield

    # Shutdown
    logger.info("Shutting down Club Manager")
    await health_monitor.stop()


# Create FastAPI app
app = FastAPI(
    title="Club Manager",
    description="Dashboard and API gateway for managing sports clubs",
    version="1.0.0",
    lifespan=lifespan,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_URL],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Include routers
app.include_router(auth.router)
app.include_router(config.router)
for router in resource_routers():
    app.include_router(router)

# Mount static files
app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")


@app.get("/health")
async def health():
    """Health check endpoint."""
    last = health_monitor.last_result
    return {
        "status": "healthy",
        "monitor_running": health_monitor.running,
        "backend": last.model_dump(mode="json") if last else None,
    }


# The dashboard catches single-segment paths, so it goes last
app.include_router(views.router)
