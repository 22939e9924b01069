"""Skill Coverage Validator — every required skill must be offered by some worker."""

from alchemist.models.entities import ValidationContext
from alchemist.validators.base import BaseValidator
from alchemist.validators.models import Category, Entity, Finding, Severity


class SkillCoverageValidator(BaseValidator):
    """One finding per task, listing all of its uncovered skills."""

    @property
    def name(self) -> str:
        return "SkillCoverageValidator"

    @property
    def category(self) -> Category:
        return Category.SKILL_COVERAGE

    def validate(self, context: ValidationContext) -> list[Finding]:
        findings = []
        offered = {skill for worker in context.workers for skill in worker.skills}

        for i, task in enumerate(context.tasks):
            uncovered = [s for s in self._unique(task.required_skills) if s not in offered]
            if not uncovered:
                continue

            findings.append(self._finding(
                id=f"skill-coverage-{i}",
                severity=Severity.ERROR,
                message=f"Required skills not available: {', '.join(uncovered)}",
                entity=Entity.TASKS,
                row_index=i,
                column="RequiredSkills",
                suggestion="Add workers with these skills or adjust task requirements",
                evidence=f"uncovered: {', '.join(uncovered)}",
            ))

        return findings
