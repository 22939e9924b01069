"""API response models."""

from typing import Literal, Optional

from pydantic import BaseModel

from alchemist.validators.models import ValidationReport


class ValidateResponse(BaseModel):
    """Outcome of one validation pass.

    A pass that exceeds the configured timeout is abandoned: status is
    ``timed_out`` and no report is returned.
    """

    status: Literal["complete", "timed_out"]
    report: Optional[ValidationReport] = None
    duration_ms: float


class HealthResponse(BaseModel):
    """System health check response."""

    status: Literal["healthy", "unhealthy", "degraded"]
    version: str
    uptime_seconds: float
    validators: list[str]
