"""Malformed List Validator — worker phase slots must be positive numbers."""

from alchemist.models.entities import ValidationContext
from alchemist.validators.base import BaseValidator
from alchemist.validators.models import Category, Entity, Finding, Severity


class MalformedListValidator(BaseValidator):
    """Flags a worker's AvailableSlots once if any element is not a number >= 1."""

    @property
    def name(self) -> str:
        return "MalformedListValidator"

    @property
    def category(self) -> Category:
        return Category.MALFORMED_LISTS

    def validate(self, context: ValidationContext) -> list[Finding]:
        findings = []

        for i, worker in enumerate(context.workers):
            invalid = [slot for slot in worker.available_slots if not self._is_phase_number(slot)]
            if invalid:
                findings.append(self._finding(
                    id=f"malformed-slots-{i}",
                    severity=Severity.ERROR,
                    message="AvailableSlots contains invalid values",
                    entity=Entity.WORKERS,
                    row_index=i,
                    column="AvailableSlots",
                    suggestion="Use only positive integers for phase slots",
                    evidence=f"invalid: {', '.join(repr(s) for s in invalid)}",
                ))

        return findings
