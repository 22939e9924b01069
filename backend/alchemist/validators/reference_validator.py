"""Reference Validator — requested task IDs must name existing tasks."""

from alchemist.models.entities import ValidationContext
from alchemist.validators.base import BaseValidator
from alchemist.validators.models import Category, Entity, Finding, Severity


class ReferenceValidator(BaseValidator):
    """One finding per (client row, missing task ID) pair."""

    @property
    def name(self) -> str:
        return "ReferenceValidator"

    @property
    def category(self) -> Category:
        return Category.UNKNOWN_REFERENCES

    def validate(self, context: ValidationContext) -> list[Finding]:
        findings = []
        task_ids = {t.task_id for t in context.tasks}

        for i, client in enumerate(context.clients):
            for task_id in self._unique(client.requested_task_ids):
                if task_id in task_ids:
                    continue
                findings.append(self._finding(
                    id=f"unknown-task-{i}-{task_id}",
                    severity=Severity.ERROR,
                    message=f"Referenced TaskID '{task_id}' does not exist",
                    entity=Entity.CLIENTS,
                    row_index=i,
                    column="RequestedTaskIDs",
                    suggestion="Remove invalid task reference or add the missing task",
                ))

        return findings
