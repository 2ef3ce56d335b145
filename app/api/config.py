"""System configuration endpoint."""
from fastapi import APIRouter

from app.core.config import system_config

router = APIRouter(prefix="/api/config", tags=["config"])


@router.get("")
async def get_config():
    """Default club and role identifiers used by the dashboard forms."""
    return system_config()
