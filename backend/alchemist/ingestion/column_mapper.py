"""Column mapper — normalises raw uploaded rows into canonical roster entities.

Headers are matched through an alias table, delimiter-separated cells become
lists, numeric cells are coerced with fallbacks, and missing identifiers are
synthesised (third client → ``C003``). The mapper never rejects a row: values
it cannot coerce are passed through so the validation engine can report them.
"""

import json
import math
import re
from typing import Any, Literal, Optional

import structlog
from pydantic import BaseModel, Field

from alchemist.models.entities import Client, Task, ValidationContext, Worker
from alchemist.validators.reference_data import (
    COLUMN_ALIASES,
    ID_PAD_WIDTH,
    ID_PREFIXES,
    INTEGER_COLUMNS,
    LIST_COLUMNS,
    LIST_DELIMITERS,
    PHASE_LIST_COLUMNS,
)

logger = structlog.get_logger()

EntityType = Literal["clients", "workers", "tasks"]

ID_COLUMNS: dict[str, str] = {
    "clients": "ClientID",
    "workers": "WorkerID",
    "tasks": "TaskID",
}

# Fallbacks for absent columns; "{n}" is the 1-based row number
DEFAULTS: dict[str, dict[str, Any]] = {
    "clients": {
        "ClientName": "Client {n}",
        "PriorityLevel": 1,
        "RequestedTaskIDs": [],
        "GroupTag": "default",
        "AttributesJSON": "{}",
    },
    "workers": {
        "WorkerName": "Worker {n}",
        "Skills": [],
        "AvailableSlots": [1, 2, 3],
        "MaxLoadPerPhase": 1,
        "WorkerGroup": "default",
        "QualificationLevel": 1,
    },
    "tasks": {
        "TaskName": "Task {n}",
        "Category": "general",
        "Duration": 1,
        "RequiredSkills": [],
        "PreferredPhases": [1, 2, 3],
        "MaxConcurrent": 1,
    },
}

_LEADING_INT = re.compile(r"^\s*([-+]?\d+)")
_WHOLE_INT = re.compile(r"^[-+]?\d+$")


class MappingResult(BaseModel):
    """Outcome of mapping one uploaded sheet."""

    entity: str
    rows: list[dict[str, Any]] = Field(default_factory=list)
    column_map: dict[str, str] = Field(default_factory=dict, description="Uploaded header → canonical column")
    unmapped_columns: list[str] = Field(default_factory=list)
    synthesized_ids: list[int] = Field(
        default_factory=list,
        description="Row indexes whose identifier was generated, not uploaded",
    )


def normalize_header(header: str) -> str:
    """Lower-case and strip everything but letters and digits: 'Client_ID ' → 'clientid'."""
    return re.sub(r"[^a-z0-9]", "", str(header).lower())


def synthesize_id(entity: EntityType, index: int) -> str:
    """Placeholder identifier for a row without one: ('clients', 2) → 'C003'."""
    return f"{ID_PREFIXES[entity]}{str(index + 1).zfill(ID_PAD_WIDTH)}"


def build_column_map(headers: list[str], entity: EntityType) -> tuple[dict[str, str], list[str]]:
    """Match uploaded headers to canonical columns.

    The first header mapping to a canonical column wins; later ones are
    reported as unmapped alongside headers with no alias.

    Returns:
        (column_map, unmapped_columns)
    """
    aliases = COLUMN_ALIASES[entity]
    column_map: dict[str, str] = {}
    unmapped: list[str] = []

    for header in headers:
        canonical = aliases.get(normalize_header(header))
        if canonical is None or canonical in column_map.values():
            unmapped.append(header)
            continue
        column_map[header] = canonical

    return column_map, unmapped


def map_rows(rows: list[dict[str, Any]], entity: EntityType) -> MappingResult:
    """Map raw rows (header → cell) to canonical entity dicts.

    Args:
        rows: Parsed spreadsheet rows
        entity: Which collection the rows belong to

    Returns:
        MappingResult with canonical rows and mapping diagnostics

    Raises:
        ValueError: if entity is not clients, workers or tasks
    """
    if entity not in COLUMN_ALIASES:
        raise ValueError(f"Unknown entity type '{entity}'. Use one of: {', '.join(COLUMN_ALIASES)}")

    if not rows:
        return MappingResult(entity=entity)

    # Headers in first-seen order across all rows
    headers = list(dict.fromkeys(h for row in rows for h in row))
    column_map, unmapped = build_column_map(headers, entity)

    mapped_rows = []
    synthesized = []
    for index, row in enumerate(rows):
        values = {
            canonical: _coerce(canonical, row.get(header))
            for header, canonical in column_map.items()
        }
        if not values.get(ID_COLUMNS[entity]):
            synthesized.append(index)
        mapped_rows.append(_apply_defaults(values, entity, index))

    logger.info(
        "rows_mapped",
        entity=entity,
        rows=len(mapped_rows),
        mapped_columns=len(column_map),
        unmapped_columns=unmapped,
        synthesized_ids=len(synthesized),
    )

    return MappingResult(
        entity=entity,
        rows=mapped_rows,
        column_map=column_map,
        unmapped_columns=unmapped,
        synthesized_ids=synthesized,
    )


def to_context(
    clients: list[dict[str, Any]],
    workers: list[dict[str, Any]],
    tasks: list[dict[str, Any]],
    rules: Optional[list[Any]] = None,
) -> ValidationContext:
    """Build a validation snapshot from canonical rows (as produced by map_rows)."""
    return ValidationContext(
        clients=[Client.model_validate(row) for row in clients],
        workers=[Worker.model_validate(row) for row in workers],
        tasks=[Task.model_validate(row) for row in tasks],
        rules=rules,
    )


# ── Value coercion ──


def _coerce(column: str, value: Any) -> Any:
    """Convert one cell to the shape its canonical column expects (None = absent)."""
    if value is None:
        return None
    if column in LIST_COLUMNS:
        return _parse_list(value, phases=column in PHASE_LIST_COLUMNS)
    if column in INTEGER_COLUMNS:
        return _parse_int(value)
    if column == "AttributesJSON":
        if isinstance(value, (dict, list)):
            return json.dumps(value)
        return str(value).strip()
    return str(value).strip()


def _parse_list(value: Any, phases: bool = False) -> list:
    """Split 'a, b; c|d' into items; phase lists turn whole-number tokens into ints."""
    if isinstance(value, (list, tuple)):
        items = list(value)
    elif isinstance(value, str):
        items = [part.strip() for part in re.split(LIST_DELIMITERS, value)]
        items = [part for part in items if part != ""]
    elif isinstance(value, (int, float)) and not isinstance(value, bool):
        items = [value]
    else:
        return []

    if not phases:
        return [str(item).strip() for item in items if item is not None]

    parsed = []
    for item in items:
        if isinstance(item, str) and _WHOLE_INT.match(item.strip()):
            parsed.append(int(item.strip()))
        elif isinstance(item, float) and item.is_integer():
            parsed.append(int(item))
        else:
            parsed.append(item)
    return parsed


def _parse_int(value: Any) -> int:
    """Leading integer of the cell ('3.7' → 3, '12 phases' → 12), or 0 if none."""
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else 0
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else 0


def _clamp(value: int, bounds: tuple) -> int:
    low, high = bounds
    if low is not None:
        value = max(low, value)
    if high is not None:
        value = min(high, value)
    return value


def _apply_defaults(values: dict[str, Any], entity: EntityType, index: int) -> dict[str, Any]:
    """Fill absent fields, synthesise the ID, clamp integer columns."""
    id_column = ID_COLUMNS[entity]
    row: dict[str, Any] = {id_column: values.get(id_column) or synthesize_id(entity, index)}

    for column, default in DEFAULTS[entity].items():
        value = values.get(column)

        if column in INTEGER_COLUMNS:
            # 0 and unparseable cells fall back to the default before clamping
            row[column] = _clamp(value or default, INTEGER_COLUMNS[column])
        elif column in LIST_COLUMNS:
            row[column] = list(default) if value is None else value
        elif isinstance(default, str):
            row[column] = value or default.replace("{n}", str(index + 1))
        else:
            row[column] = default if value is None else value

    return row
