"""Basic roster search — keyword patterns over clients, workers or tasks.

A plain-language query picks one collection and narrows it with a fixed set
of recognised phrases. No model or external service is involved; phrases that
are not recognised simply leave the collection unfiltered.

Recognised phrases:
    "worker" / "employee", "task" / "job", "client"  → collection
    "high priority" / "low priority"                → PriorityLevel >= 4 / <= 2
    "programming", "java", "python"                 → worker Skills mention one of them
    "available in phase N"                          → N in AvailableSlots
    "duration ... more than N"                      → Duration > N
    "multiple skills"                               → more than one RequiredSkill
    "task X" (client searches)                      → X in RequestedTaskIDs
"""

import re
from typing import Any, Callable

import structlog
from pydantic import BaseModel, Field

from alchemist.models.entities import ValidationContext

logger = structlog.get_logger()

MAX_RESULTS = 50

HIGH_PRIORITY_MIN = 4
LOW_PRIORITY_MAX = 2
PROGRAMMING_TERMS = ("java", "python", "programming")

_PHASE = re.compile(r"phase (\d+)")
_MORE_THAN = re.compile(r"more than (\d+)")
_TASK_ID = re.compile(r"task ([a-z0-9]+)")


class SearchResult(BaseModel):
    """Rows matched by one query, in collection order."""

    entity: str
    results: list[dict[str, Any]] = Field(default_factory=list)
    total_matches: int = 0
    explanation: str = ""


def detect_entity(query: str) -> str:
    """Collection a query is about; clients unless workers or tasks are named."""
    q = query.lower()
    if "client" in q:
        return "clients"
    if "worker" in q or "employee" in q:
        return "workers"
    if "task" in q or "job" in q:
        return "tasks"
    return "clients"


def search(query: str, context: ValidationContext) -> SearchResult:
    """Run a basic keyword query against one collection of the snapshot.

    Filters stack: "high priority clients requesting task T7" applies both
    the priority and the requested-task filter. Rows lacking the filtered
    attribute never match.
    At most ``MAX_RESULTS`` rows are returned; ``total_matches`` counts all.
    """
    q = query.lower()
    entity = detect_entity(q)
    rows = list(getattr(context, entity))
    applied: list[str] = []

    def narrow(label: str, keep: Callable[[Any], bool]) -> None:
        nonlocal rows
        rows = [row for row in rows if keep(row)]
        applied.append(label)

    if "high priority" in q:
        narrow("high priority", lambda r: _has_priority(r) and r.priority_level >= HIGH_PRIORITY_MIN)
    elif "low priority" in q:
        narrow("low priority", lambda r: _has_priority(r) and r.priority_level <= LOW_PRIORITY_MAX)

    if any(term in q for term in PROGRAMMING_TERMS):
        narrow("programming skills", _has_programming_skill)

    if "available in phase" in q:
        match = _PHASE.search(q)
        if match:
            phase = int(match.group(1))
            narrow(f"available in phase {phase}", lambda r: phase in _attr(r, "available_slots", []))

    if "duration" in q and "more than" in q:
        match = _MORE_THAN.search(q)
        if match:
            minimum = int(match.group(1))
            narrow(f"duration > {minimum}", lambda r: _attr(r, "duration", 0) > minimum)

    if "multiple skills" in q:
        narrow("multiple required skills", lambda r: len(_attr(r, "required_skills", [])) > 1)

    match = _TASK_ID.search(q)
    if match and entity == "clients":
        task_id = match.group(1).upper()
        narrow(f"requests {task_id}", lambda r: task_id in _attr(r, "requested_task_ids", []))

    explanation = f"Searched {entity}"
    if applied:
        explanation += f" filtered by {', '.join(applied)}"

    logger.info(
        "search_complete",
        entity=entity,
        filters=applied,
        matches=len(rows),
    )

    return SearchResult(
        entity=entity,
        results=[row.model_dump(by_alias=True) for row in rows[:MAX_RESULTS]],
        total_matches=len(rows),
        explanation=explanation,
    )


def _attr(row: Any, name: str, default: Any) -> Any:
    value = getattr(row, name, None)
    return default if value is None else value


def _has_programming_skill(row: Any) -> bool:
    return any(
        term in str(skill).lower()
        for skill in _attr(row, "skills", [])
        for term in PROGRAMMING_TERMS
    )


def _has_priority(row: Any) -> bool:
    # Only clients carry a PriorityLevel
    return getattr(row, "priority_level", None) is not None
