"""Base validator — abstract class implementing the Strategy Pattern.

Each validator is a standalone, independently testable unit.
New validators are added without modifying the engine.
"""

import math
from abc import ABC, abstractmethod
from typing import Any, Optional

from alchemist.models.entities import ValidationContext
from alchemist.validators.models import Category, Entity, Finding, Severity
from alchemist.validators.reference_data import MIN_PHASE


class BaseValidator(ABC):
    """Abstract base for all roster validators.

    Contract:
        - validate() is deterministic: same input → same output
        - validate() returns a list of Finding (empty = no issues)
        - validate() treats missing or empty data as "no finding", never raises
        - No network calls, no file I/O, no shared mutable state
    """

    #: Rule-aware validators only run when the context carries rule data.
    requires_rules: bool = False

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable name for logging."""
        ...

    @property
    @abstractmethod
    def category(self) -> Category:
        """Category label attached to every finding this validator emits."""
        ...

    @abstractmethod
    def validate(self, context: ValidationContext) -> list[Finding]:
        """Run validation checks against the roster snapshot.

        Args:
            context: Clients, workers, tasks and (optionally) rules

        Returns:
            List of Finding (empty if no issues)
        """
        ...

    # ── Helper Methods ──

    def _finding(
        self,
        id: str,
        severity: Severity,
        message: str,
        entity: Entity,
        row_index: Optional[int] = None,
        column: Optional[str] = None,
        suggestion: Optional[str] = None,
        evidence: Optional[str] = None,
    ) -> Finding:
        """Convenience method to create a Finding in this validator's category."""
        return Finding(
            id=id,
            severity=severity,
            category=self.category,
            message=message,
            entity=entity,
            row_index=row_index,
            column=column,
            suggestion=suggestion,
            evidence=evidence,
        )

    @staticmethod
    def _is_phase_number(value: Any) -> bool:
        """True for a finite number >= MIN_PHASE (booleans and numeric strings excluded)."""
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            return False
        return math.isfinite(value) and value >= MIN_PHASE

    @staticmethod
    def _phases(values: list[Any]) -> list[int]:
        """Distinct integral phase numbers from a list, in first-seen order."""
        phases: list[int] = []
        for value in values or []:
            if BaseValidator._is_phase_number(value) and float(value).is_integer():
                phase = int(value)
                if phase not in phases:
                    phases.append(phase)
        return phases

    @staticmethod
    def _unique(values: list[str]) -> list[str]:
        """Drop repeated entries, keeping first-seen order."""
        return list(dict.fromkeys(values or []))
