"""Validation API — run the engine over a roster snapshot, map uploaded rows."""

import asyncio
import time

from fastapi import APIRouter, HTTPException

import structlog

from alchemist.config import get_settings
from alchemist.ingestion.column_mapper import MappingResult, map_rows
from alchemist.models.requests import IngestRequest, ValidateRequest
from alchemist.models.responses import ValidateResponse
from alchemist.validators import validation_engine
from alchemist.validators.reference_data import COLUMN_ALIASES

logger = structlog.get_logger()

router = APIRouter()


@router.post("/validate", response_model=ValidateResponse)
async def validate_roster(request: ValidateRequest):
    """Run every check over the submitted collections.

    The engine has no cancellation hook, so the timeout is enforced here: a
    pass that runs too long is abandoned and reported as ``timed_out``.
    The engine is pure, so an abandoned pass leaves nothing half-updated.
    """
    settings = get_settings()

    if request.largest_collection() > settings.MAX_ROWS_PER_ENTITY:
        raise ValueError(
            f"Each collection is limited to {settings.MAX_ROWS_PER_ENTITY} rows"
        )

    context = request.to_context()
    start = time.perf_counter()

    try:
        report = await asyncio.wait_for(
            asyncio.get_running_loop().run_in_executor(None, validation_engine.validate, context),
            timeout=settings.VALIDATION_TIMEOUT_SECONDS,
        )
    except asyncio.TimeoutError:
        duration = (time.perf_counter() - start) * 1000
        logger.warning(
            "validation_timed_out",
            timeout_seconds=settings.VALIDATION_TIMEOUT_SECONDS,
            duration_ms=round(duration, 2),
        )
        return ValidateResponse(status="timed_out", duration_ms=round(duration, 2))

    duration = (time.perf_counter() - start) * 1000
    return ValidateResponse(status="complete", report=report, duration_ms=round(duration, 2))


@router.post("/ingest/{entity}", response_model=MappingResult)
async def ingest_rows(entity: str, request: IngestRequest):
    """Map raw uploaded rows for one collection onto canonical columns."""
    if entity not in COLUMN_ALIASES:
        raise HTTPException(
            status_code=404,
            detail=f"Unknown entity '{entity}'. Use one of: {', '.join(COLUMN_ALIASES)}",
        )

    settings = get_settings()
    if len(request.rows) > settings.MAX_ROWS_PER_ENTITY:
        raise ValueError(f"Upload is limited to {settings.MAX_ROWS_PER_ENTITY} rows")

    return map_rows(request.rows, entity)
