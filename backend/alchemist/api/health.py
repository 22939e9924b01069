"""Health check endpoint."""

import time
from fastapi import APIRouter

from alchemist import __version__
from alchemist.models.responses import HealthResponse
from alchemist.validators import validation_engine

router = APIRouter()

_start_time = time.time()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Service health with the registered validator chain."""
    status = "healthy" if validation_engine.validators else "degraded"

    return HealthResponse(
        status=status,
        version=__version__,
        uptime_seconds=round(time.time() - _start_time, 2),
        validators=validation_engine.validator_names,
    )
