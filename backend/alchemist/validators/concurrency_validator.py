"""Concurrency Validator — MaxConcurrent must be reachable by qualified workers.

A worker is qualified for a task when its skills are a superset of the
task's required skills. A task with no required skills is open to everyone.
"""

from alchemist.models.entities import ValidationContext
from alchemist.validators.base import BaseValidator
from alchemist.validators.models import Category, Entity, Finding, Severity


class ConcurrencyValidator(BaseValidator):
    """Flags tasks whose declared concurrency exceeds the qualified worker count."""

    @property
    def name(self) -> str:
        return "ConcurrencyValidator"

    @property
    def category(self) -> Category:
        return Category.MAX_CONCURRENCY

    def validate(self, context: ValidationContext) -> list[Finding]:
        findings = []
        skill_sets = [set(worker.skills) for worker in context.workers]

        for i, task in enumerate(context.tasks):
            required = set(task.required_skills)
            qualified = sum(1 for skills in skill_sets if required <= skills)

            if task.max_concurrent > qualified:
                findings.append(self._finding(
                    id=f"max-concurrency-{i}",
                    severity=Severity.WARNING,
                    message=(
                        f"MaxConcurrent ({task.max_concurrent}) exceeds "
                        f"qualified workers ({qualified})"
                    ),
                    entity=Entity.TASKS,
                    row_index=i,
                    column="MaxConcurrent",
                    suggestion="Reduce max concurrency or add more qualified workers",
                    evidence=f"MaxConcurrent={task.max_concurrent}, qualified={qualified}",
                ))

        return findings
