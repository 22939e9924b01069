"""Roster Validator — deterministic validation layer for client/worker/task uploads.

Usage:
    from alchemist.validators import validation_engine

    report = validation_engine.validate(context)
    if not report.passed:
        # Block export until report.errors are fixed
"""

from alchemist.validators.engine import ValidationEngine, validation_engine, run_all
from alchemist.validators.models import (
    ValidationReport,
    Finding,
    Severity,
    Category,
    Entity,
)

__all__ = [
    "ValidationEngine",
    "validation_engine",
    "run_all",
    "ValidationReport",
    "Finding",
    "Severity",
    "Category",
    "Entity",
]
