"""Canonical roster entities — clients, workers, tasks and the validation context.

Attributes are snake_case; the canonical spreadsheet column names are the
field aliases. Values are deliberately permissive (empty IDs, out-of-range
numbers, non-numeric phase slots) so the validation engine can report them
instead of the model rejecting them.
"""

from typing import Any, Optional, Union

from pydantic import BaseModel, Field, field_validator

from alchemist.models.rules import Rule, check_unique_rule_ids

ENTITY_MODEL_CONFIG = {"populate_by_name": True, "frozen": True}


class Client(BaseModel):
    """A client requesting tasks."""

    client_id: str = Field(default="", alias="ClientID")
    client_name: str = Field(default="", alias="ClientName")
    priority_level: int = Field(default=1, alias="PriorityLevel")
    requested_task_ids: list[str] = Field(default_factory=list, alias="RequestedTaskIDs")
    group_tag: str = Field(default="", alias="GroupTag")
    attributes_json: Union[str, dict, list, None] = Field(default="", alias="AttributesJSON")

    model_config = ENTITY_MODEL_CONFIG


class Worker(BaseModel):
    """A worker offering skills over a set of phases."""

    worker_id: str = Field(default="", alias="WorkerID")
    worker_name: str = Field(default="", alias="WorkerName")
    skills: list[str] = Field(default_factory=list, alias="Skills")
    available_slots: list[Any] = Field(default_factory=list, alias="AvailableSlots")
    max_load_per_phase: int = Field(default=1, alias="MaxLoadPerPhase")
    worker_group: str = Field(default="", alias="WorkerGroup")
    qualification_level: int = Field(default=1, alias="QualificationLevel")

    model_config = ENTITY_MODEL_CONFIG


class Task(BaseModel):
    """A unit of work with skill requirements and phase preferences."""

    task_id: str = Field(default="", alias="TaskID")
    task_name: str = Field(default="", alias="TaskName")
    category: str = Field(default="", alias="Category")
    duration: int = Field(default=1, alias="Duration")
    required_skills: list[str] = Field(default_factory=list, alias="RequiredSkills")
    preferred_phases: list[Any] = Field(default_factory=list, alias="PreferredPhases")
    max_concurrent: int = Field(default=1, alias="MaxConcurrent")

    model_config = ENTITY_MODEL_CONFIG


class ValidationContext(BaseModel):
    """Snapshot of the three collections (plus optional rules) for one pass.

    ``rules=None`` means rule data was not supplied, so rule-aware checks
    are skipped. ``rules=[]`` means no rules are defined and those checks pass.
    """

    clients: list[Client] = Field(default_factory=list)
    workers: list[Worker] = Field(default_factory=list)
    tasks: list[Task] = Field(default_factory=list)
    rules: Optional[list[Rule]] = None

    model_config = {"frozen": True}

    unique_rule_ids = field_validator("rules")(check_unique_rule_ids)

    @property
    def has_rules(self) -> bool:
        return self.rules is not None

    def enabled_rules(self) -> list[Rule]:
        """Enabled rules in declaration order (empty when none were supplied)."""
        return [r for r in (self.rules or []) if r.enabled]
