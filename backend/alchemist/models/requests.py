"""API request models."""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from alchemist.models.entities import Client, Task, ValidationContext, Worker
from alchemist.models.rules import Rule, check_unique_rule_ids


class ValidateRequest(BaseModel):
    """Roster snapshot to validate. Omit ``rules`` to skip rule-aware checks."""

    clients: list[Client] = Field(default_factory=list)
    workers: list[Worker] = Field(default_factory=list)
    tasks: list[Task] = Field(default_factory=list)
    rules: Optional[list[Rule]] = Field(
        default=None,
        description="Business rules; null means rule data was not supplied",
    )

    unique_rule_ids = field_validator("rules")(check_unique_rule_ids)

    def largest_collection(self) -> int:
        return max(len(self.clients), len(self.workers), len(self.tasks))

    def to_context(self) -> ValidationContext:
        return ValidationContext(
            clients=self.clients,
            workers=self.workers,
            tasks=self.tasks,
            rules=self.rules,
        )


class IngestRequest(BaseModel):
    """Raw rows from an uploaded sheet, keyed by the sheet's own headers."""

    rows: list[dict[str, Any]] = Field(
        default_factory=list,
        examples=[[{"client_id": "C001", "name": "Acme", "priority": "3", "tasks": "T001;T002"}]],
    )


class SearchRequest(BaseModel):
    """Keyword query over the same roster snapshot the validator receives."""

    query: str = Field(..., min_length=1, examples=["clients with high priority requesting task T7"])
    clients: list[Client] = Field(default_factory=list)
    workers: list[Worker] = Field(default_factory=list)
    tasks: list[Task] = Field(default_factory=list)

    def largest_collection(self) -> int:
        return max(len(self.clients), len(self.workers), len(self.tasks))

    def to_context(self) -> ValidationContext:
        return ValidationContext(clients=self.clients, workers=self.workers, tasks=self.tasks)
