"""Validation models — severity levels, categories, findings and report structure.

All validation is deterministic: same input → same output, no randomness, no I/O.
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class Severity(str, Enum):
    """Validation finding severity levels."""

    ERROR = "error"      # Must be fixed before export
    WARNING = "warning"  # Advisory, does not block export


class Entity(str, Enum):
    """Which collection a finding concerns."""

    CLIENTS = "clients"
    WORKERS = "workers"
    TASKS = "tasks"


class Category(str, Enum):
    """Display grouping — one label per check."""

    REQUIRED_COLUMNS = "Required Columns"
    DUPLICATE_IDS = "Duplicate IDs"
    MALFORMED_LISTS = "Malformed Lists"
    OUT_OF_RANGE = "Out of Range Values"
    BROKEN_JSON = "Broken JSON"
    UNKNOWN_REFERENCES = "Unknown References"
    CIRCULAR_CO_RUNS = "Circular Co-Runs"
    OVERLOADED_WORKERS = "Overloaded Workers"
    PHASE_SLOT_SATURATION = "Phase Slot Saturation"
    SKILL_COVERAGE = "Skill Coverage"
    MAX_CONCURRENCY = "Max Concurrency Feasibility"
    CONFLICTING_RULES = "Conflicting Rules"


class Finding(BaseModel):
    """A single validation finding."""

    id: str                                # Stable key for dedup / UI dismissal
    severity: Severity
    category: Category
    message: str
    entity: Entity
    row_index: Optional[int] = Field(default=None, alias="rowIndex")
    column: Optional[str] = None           # Canonical column name implicated
    suggestion: Optional[str] = None       # How to fix it
    evidence: Optional[str] = None         # What data triggered the finding

    model_config = {"use_enum_values": True, "populate_by_name": True, "frozen": True}


class ValidationReport(BaseModel):
    """Complete validation report — the output of the validation engine."""

    passed: bool = Field(description="True if there are no error-severity findings; gates export")
    summary: dict = Field(
        description="Count of findings by severity",
        default_factory=lambda: {"error": 0, "warning": 0},
    )
    findings: list[Finding] = Field(default_factory=list)
    skipped_checks: list[str] = Field(
        default_factory=list,
        description="Rule-aware checks that did not run because no rule data was supplied",
    )
    verdict: str = Field(default="", description="Human-readable verdict")

    @classmethod
    def build(
        cls, findings: list[Finding], skipped_checks: Optional[list[str]] = None
    ) -> "ValidationReport":
        """Build a report from findings, keeping the engine's output order."""
        summary = {"error": 0, "warning": 0}
        for finding in findings:
            summary[finding.severity] += 1

        passed = summary["error"] == 0

        if passed and summary["warning"] == 0:
            verdict = "PASS — No issues found. Ready for export."
        elif passed:
            verdict = f"PASS — Ready for export with {summary['warning']} warning(s) to review."
        else:
            verdict = (
                f"FAIL — {summary['error']} error(s) must be fixed before export "
                f"({summary['warning']} warning(s))."
            )

        skipped = list(skipped_checks or [])
        if skipped:
            verdict += f" Skipped without rule data: {', '.join(skipped)}."

        return cls(
            passed=passed,
            summary=summary,
            findings=list(findings),
            skipped_checks=skipped,
            verdict=verdict,
        )

    def by_category(self) -> dict[str, list[Finding]]:
        """Group findings by category, preserving first-seen category order."""
        grouped: dict[str, list[Finding]] = {}
        for finding in self.findings:
            grouped.setdefault(finding.category, []).append(finding)
        return grouped

    @property
    def errors(self) -> list[Finding]:
        return [f for f in self.findings if f.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[Finding]:
        return [f for f in self.findings if f.severity == Severity.WARNING]
