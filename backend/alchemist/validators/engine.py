"""Validation Engine — runs every check over a roster snapshot, produces findings.

This is the main entry point for roster validation. It runs all registered
validators in a fixed order and returns a flat list of findings (or a
ValidationReport wrapping them).

Usage:
    engine = ValidationEngine()
    report = engine.validate(context)
    if not report.passed:
        # Block export until report.errors are fixed
"""

import time
from typing import Optional

import structlog

from alchemist.models.entities import ValidationContext
from alchemist.validators.base import BaseValidator
from alchemist.validators.models import Finding, ValidationReport

# Import all validators
from alchemist.validators.required_columns_validator import RequiredColumnsValidator
from alchemist.validators.duplicate_id_validator import DuplicateIdValidator
from alchemist.validators.malformed_list_validator import MalformedListValidator
from alchemist.validators.range_validator import RangeValidator
from alchemist.validators.json_validator import JsonValidator
from alchemist.validators.reference_validator import ReferenceValidator
from alchemist.validators.co_run_validator import CoRunValidator
from alchemist.validators.workload_validator import WorkloadValidator
from alchemist.validators.phase_saturation_validator import PhaseSaturationValidator
from alchemist.validators.skill_coverage_validator import SkillCoverageValidator
from alchemist.validators.concurrency_validator import ConcurrencyValidator
from alchemist.validators.rule_conflict_validator import RuleConflictValidator

logger = structlog.get_logger()


class ValidationEngine:
    """Runs all validators and produces a flat, ordered list of findings.

    Design principles:
        - Deterministic: same input → same findings, same order, same ids
        - Total: a validator that crashes contributes no findings, the pass never raises
        - Stateless: every call recomputes from scratch, nothing is cached
        - Observable: logs every validation run with timing
    """

    def __init__(self, validators: Optional[list[BaseValidator]] = None):
        """Initialize with default validators or custom list.

        Args:
            validators: Optional list of validators. If None, uses all defaults.
        """
        self.validators = validators if validators is not None else self._default_validators()

    @staticmethod
    def _default_validators() -> list[BaseValidator]:
        """Create the default validator chain in execution order.

        The order fixes the output order of findings and must not change.
        """
        return [
            RequiredColumnsValidator(),
            DuplicateIdValidator(),
            MalformedListValidator(),
            RangeValidator(),
            JsonValidator(),
            ReferenceValidator(),
            CoRunValidator(),            # Needs rule data
            WorkloadValidator(),
            PhaseSaturationValidator(),
            SkillCoverageValidator(),
            ConcurrencyValidator(),
            RuleConflictValidator(),     # Needs rule data
        ]

    def run_all(self, context: ValidationContext) -> list[Finding]:
        """Run every validator against the snapshot.

        Args:
            context: Clients, workers, tasks and optional rules

        Returns:
            Findings in validator order, then in each validator's own order
        """
        start_time = time.perf_counter()

        all_findings: list[Finding] = []
        validator_timings: dict[str, float] = {}

        for validator in self.validators:
            v_start = time.perf_counter()
            try:
                all_findings.extend(validator.validate(context))
            except Exception as e:
                # Don't let one broken validator kill the whole pass
                logger.error(
                    "validator_failed",
                    validator=validator.name,
                    error=str(e),
                    error_type=type(e).__name__,
                )
            finally:
                v_duration = (time.perf_counter() - v_start) * 1000
                validator_timings[validator.name] = round(v_duration, 2)

        total_duration = (time.perf_counter() - start_time) * 1000

        logger.info(
            "validation_complete",
            clients=len(context.clients),
            workers=len(context.workers),
            tasks=len(context.tasks),
            rules=None if context.rules is None else len(context.rules),
            total_findings=len(all_findings),
            duration_ms=round(total_duration, 2),
            validator_timings=validator_timings,
        )

        return all_findings

    def validate(self, context: ValidationContext) -> ValidationReport:
        """Run all validators and wrap the findings in a report.

        Rule-aware validators that could not run because the context carries
        no rule data are listed in ``skipped_checks`` rather than counted as passed.
        """
        findings = self.run_all(context)
        return ValidationReport.build(findings, self.skipped_checks(context))

    def skipped_checks(self, context: ValidationContext) -> list[str]:
        """Names of rule-aware validators that have nothing to check in this context."""
        if context.has_rules:
            return []
        return [v.name for v in self.validators if v.requires_rules]

    def add_validator(self, validator: BaseValidator) -> None:
        """Add a custom validator to the end of the chain."""
        self.validators.append(validator)

    def remove_validator(self, validator_name: str) -> None:
        """Remove a validator by name."""
        self.validators = [v for v in self.validators if v.name != validator_name]

    @property
    def validator_names(self) -> list[str]:
        return [v.name for v in self.validators]


# Module-level singleton
validation_engine = ValidationEngine()


def run_all(context: ValidationContext) -> list[Finding]:
    """Run the default validator chain. See ValidationEngine.run_all."""
    return validation_engine.run_all(context)
