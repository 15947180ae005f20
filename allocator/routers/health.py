"""Health check endpoint."""

from fastapi import APIRouter
from datetime import datetime
from typing import Dict, Any

from .. import __version__

router = APIRouter(prefix="/health", tags=["health"])


@router.get("/")
async def health_check() -> Dict[str, Any]:
    """Basic health check endpoint."""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": __version__,
    }
