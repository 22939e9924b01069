"""Business rule models — a tagged union keyed by ``type``.

Rule types with a known parameter shape get their own model so each rule-aware
check works against typed fields; the remaining types keep a free-form
``parameters`` map.
"""

from collections import Counter
from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field


class RuleBase(BaseModel):
    """Fields shared by every rule type."""

    id: str
    name: str = ""
    description: str = ""
    enabled: bool = True
    priority: int = 1

    model_config = {"populate_by_name": True, "frozen": True}


class CoRunRule(RuleBase):
    """Tasks that must be scheduled together."""

    type: Literal["coRun"] = "coRun"
    task_ids: list[str] = Field(default_factory=list, alias="taskIds")


class LoadLimitRule(RuleBase):
    """Caps the slots a worker group may take per phase."""

    type: Literal["loadLimit"] = "loadLimit"
    worker_group: str = Field(alias="workerGroup")
    max_slots: int = Field(alias="maxSlots", ge=1)


class PhaseWindowRule(RuleBase):
    """Restricts a task to an explicit set of phases."""

    type: Literal["phaseWindow"] = "phaseWindow"
    task_id: str = Field(alias="taskId")
    phases: list[int] = Field(default_factory=list)


class GenericRule(RuleBase):
    """Rule types without a structured parameter shape."""

    type: Literal["slotRestriction", "patternMatch", "precedence", "custom"]
    parameters: dict[str, Any] = Field(default_factory=dict)


Rule = Annotated[
    Union[CoRunRule, LoadLimitRule, PhaseWindowRule, GenericRule],
    Field(discriminator="type"),
]


def check_unique_rule_ids(rules: Optional[list[RuleBase]]) -> Optional[list[RuleBase]]:
    """Rule ids key the rule-aware findings, so they must be unique within a collection."""
    if rules is None:
        return rules
    counts = Counter(r.id for r in rules)
    duplicates = sorted(rule_id for rule_id, n in counts.items() if n > 1)
    if duplicates:
        raise ValueError(f"Duplicate rule id(s): {', '.join(duplicates)}")
    return rules
