"""Duplicate ID Validator — ClientID, WorkerID and TaskID must be unique."""

from collections import defaultdict

from alchemist.models.entities import ValidationContext
from alchemist.validators.base import BaseValidator
from alchemist.validators.models import Category, Entity, Finding, Severity


class DuplicateIdValidator(BaseValidator):
    """Every row sharing a duplicated ID gets its own finding."""

    @property
    def name(self) -> str:
        return "DuplicateIdValidator"

    @property
    def category(self) -> Category:
        return Category.DUPLICATE_IDS

    def validate(self, context: ValidationContext) -> list[Finding]:
        findings = []

        findings.extend(self._check_collection(
            [c.client_id for c in context.clients], Entity.CLIENTS, "client", "ClientID",
        ))
        findings.extend(self._check_collection(
            [w.worker_id for w in context.workers], Entity.WORKERS, "worker", "WorkerID",
        ))
        findings.extend(self._check_collection(
            [t.task_id for t in context.tasks], Entity.TASKS, "task", "TaskID",
        ))

        return findings

    def _check_collection(
        self, ids: list[str], entity: Entity, label: str, column: str
    ) -> list[Finding]:
        """One finding per (duplicated value, row) pair, in first-appearance order."""
        findings = []

        # dict keeps first-appearance order of each value
        rows_by_id: dict[str, list[int]] = defaultdict(list)
        for i, value in enumerate(ids):
            if value:
                rows_by_id[value].append(i)

        for value, rows in rows_by_id.items():
            if len(rows) < 2:
                continue
            for i in rows:
                findings.append(self._finding(
                    id=f"duplicate-{label}-{value}-{i}",
                    severity=Severity.ERROR,
                    message=f"Duplicate {column}: {value}",
                    entity=entity,
                    row_index=i,
                    column=column,
                    suggestion=f"Make {label} IDs unique",
                    evidence=f"rows: {', '.join(str(r) for r in rows)}",
                ))

        return findings
