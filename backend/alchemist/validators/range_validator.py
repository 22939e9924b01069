"""Range Validator — PriorityLevel within 1-5, Duration at least one phase."""

from alchemist.models.entities import ValidationContext
from alchemist.validators.base import BaseValidator
from alchemist.validators.models import Category, Entity, Finding, Severity
from alchemist.validators.reference_data import MIN_DURATION, PRIORITY_LEVEL_RANGE


class RangeValidator(BaseValidator):
    """One finding per violating row per field."""

    @property
    def name(self) -> str:
        return "RangeValidator"

    @property
    def category(self) -> Category:
        return Category.OUT_OF_RANGE

    def validate(self, context: ValidationContext) -> list[Finding]:
        findings = []
        low, high = PRIORITY_LEVEL_RANGE

        for i, client in enumerate(context.clients):
            if not low <= client.priority_level <= high:
                findings.append(self._finding(
                    id=f"priority-range-{i}",
                    severity=Severity.ERROR,
                    message=f"PriorityLevel must be between {low} and {high}",
                    entity=Entity.CLIENTS,
                    row_index=i,
                    column="PriorityLevel",
                    suggestion=f"Set priority to a value between {low}-{high}",
                    evidence=f"PriorityLevel={client.priority_level}",
                ))

        for i, task in enumerate(context.tasks):
            if task.duration < MIN_DURATION:
                findings.append(self._finding(
                    id=f"duration-range-{i}",
                    severity=Severity.ERROR,
                    message=f"Duration must be at least {MIN_DURATION}",
                    entity=Entity.TASKS,
                    row_index=i,
                    column="Duration",
                    suggestion=f"Set duration to at least {MIN_DURATION} phase",
                    evidence=f"Duration={task.duration}",
                ))

        return findings
