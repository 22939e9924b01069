"""Phase Saturation Validator — aggregate task demand vs worker capacity per phase.

capacity[p] = sum of MaxLoadPerPhase over workers available in phase p
demand[p]   = sum of Duration over tasks that prefer phase p

A phase listed twice by the same worker or task counts once. Non-numeric
phase entries are ignored here; MalformedListValidator reports them.
"""

from collections import defaultdict

from alchemist.models.entities import ValidationContext
from alchemist.validators.base import BaseValidator
from alchemist.validators.models import Category, Entity, Finding, Severity


class PhaseSaturationValidator(BaseValidator):
    """One finding per saturated phase, in ascending phase order."""

    @property
    def name(self) -> str:
        return "PhaseSaturationValidator"

    @property
    def category(self) -> Category:
        return Category.PHASE_SLOT_SATURATION

    def validate(self, context: ValidationContext) -> list[Finding]:
        findings = []

        capacity: dict[int, int] = defaultdict(int)
        for worker in context.workers:
            for phase in self._phases(worker.available_slots):
                capacity[phase] += worker.max_load_per_phase or 1

        demand: dict[int, int] = defaultdict(int)
        for task in context.tasks:
            for phase in self._phases(task.preferred_phases):
                demand[phase] += task.duration

        for phase in sorted(demand):
            required = demand[phase]
            available = capacity.get(phase, 0)
            if required <= available:
                continue

            findings.append(self._finding(
                id=f"phase-saturation-{phase}",
                severity=Severity.WARNING,
                message=f"Phase {phase} requires {required} slots but only {available} are available",
                entity=Entity.TASKS,
                suggestion="Add more workers for this phase or adjust task preferences",
                evidence=f"phase={phase} required={required} available={available}",
            ))

        return findings
