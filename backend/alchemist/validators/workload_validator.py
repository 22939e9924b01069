"""Workload Validator — per-phase load should not exceed the phases a worker covers."""

from alchemist.models.entities import ValidationContext
from alchemist.validators.base import BaseValidator
from alchemist.validators.models import Category, Entity, Finding, Severity


class WorkloadValidator(BaseValidator):
    """Flags workers with fewer available slots than MaxLoadPerPhase."""

    @property
    def name(self) -> str:
        return "WorkloadValidator"

    @property
    def category(self) -> Category:
        return Category.OVERLOADED_WORKERS

    def validate(self, context: ValidationContext) -> list[Finding]:
        findings = []

        for i, worker in enumerate(context.workers):
            available = len(worker.available_slots or [])
            max_load = worker.max_load_per_phase or 1

            if available < max_load:
                findings.append(self._finding(
                    id=f"overloaded-worker-{i}",
                    severity=Severity.WARNING,
                    message="Worker has fewer available slots than max load per phase",
                    entity=Entity.WORKERS,
                    row_index=i,
                    column="MaxLoadPerPhase",
                    suggestion="Increase available slots or reduce max load per phase",
                    evidence=f"AvailableSlots={available}, MaxLoadPerPhase={max_load}",
                ))

        return findings
