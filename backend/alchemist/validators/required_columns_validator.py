"""Required Columns Validator — identifying and display fields must be present."""

from alchemist.models.entities import ValidationContext
from alchemist.validators.base import BaseValidator
from alchemist.validators.models import Category, Entity, Finding, Severity


class RequiredColumnsValidator(BaseValidator):
    """Flags rows missing an ID (error) or a client name (warning)."""

    @property
    def name(self) -> str:
        return "RequiredColumnsValidator"

    @property
    def category(self) -> Category:
        return Category.REQUIRED_COLUMNS

    def validate(self, context: ValidationContext) -> list[Finding]:
        findings = []

        for i, client in enumerate(context.clients):
            if not client.client_id:
                findings.append(self._finding(
                    id=f"client-id-{i}",
                    severity=Severity.ERROR,
                    message="ClientID is required",
                    entity=Entity.CLIENTS,
                    row_index=i,
                    column="ClientID",
                    suggestion="Generate a unique client ID",
                ))
            if not client.client_name:
                findings.append(self._finding(
                    id=f"client-name-{i}",
                    severity=Severity.WARNING,
                    message="ClientName is missing",
                    entity=Entity.CLIENTS,
                    row_index=i,
                    column="ClientName",
                    suggestion="Add a descriptive client name",
                ))

        for i, worker in enumerate(context.workers):
            if not worker.worker_id:
                findings.append(self._finding(
                    id=f"worker-id-{i}",
                    severity=Severity.ERROR,
                    message="WorkerID is required",
                    entity=Entity.WORKERS,
                    row_index=i,
                    column="WorkerID",
                    suggestion="Generate a unique worker ID",
                ))

        for i, task in enumerate(context.tasks):
            if not task.task_id:
                findings.append(self._finding(
                    id=f"task-id-{i}",
                    severity=Severity.ERROR,
                    message="TaskID is required",
                    entity=Entity.TASKS,
                    row_index=i,
                    column="TaskID",
                    suggestion="Generate a unique task ID",
                ))

        return findings
