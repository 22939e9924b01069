"""Rule Conflict Validator — detects business rules that contradict each other.

Only enabled rules are considered, and only when rule data was supplied.
"""

from collections import defaultdict
from typing import Optional

from alchemist.models.entities import ValidationContext
from alchemist.models.rules import CoRunRule, LoadLimitRule, PhaseWindowRule
from alchemist.validators.base import BaseValidator
from alchemist.validators.models import Category, Entity, Finding, Severity


class RuleConflictValidator(BaseValidator):
    """Detects contradictions between phase-window, load-limit and co-run rules."""

    requires_rules = True

    @property
    def name(self) -> str:
        return "RuleConflictValidator"

    @property
    def category(self) -> Category:
        return Category.CONFLICTING_RULES

    def validate(self, context: ValidationContext) -> list[Finding]:
        findings = []
        if not context.has_rules:
            return findings

        rules = context.enabled_rules()
        windows = self._phase_windows(rules)

        # ── 1. Disjoint phase windows on one task ──
        findings.extend(self._check_phase_windows(context, rules, windows))

        # ── 2. Differing load limits on one worker group ──
        findings.extend(self._check_load_limits(rules))

        # ── 3. Co-run groups that cannot share a phase ──
        findings.extend(self._check_co_run_windows(rules, windows))

        return findings

    @staticmethod
    def _phase_windows(rules: list) -> dict[str, set[int]]:
        """Effective phase window per task: intersection of all its window rules."""
        windows: dict[str, set[int]] = {}
        for rule in rules:
            if isinstance(rule, PhaseWindowRule):
                phases = set(rule.phases)
                windows[rule.task_id] = windows[rule.task_id] & phases if rule.task_id in windows else phases
        return windows

    def _check_phase_windows(
        self, context: ValidationContext, rules: list, windows: dict[str, set[int]]
    ) -> list[Finding]:
        """Two or more window rules on the same task with no phase in common."""
        findings = []

        by_task: dict[str, list[PhaseWindowRule]] = defaultdict(list)
        for rule in rules:
            if isinstance(rule, PhaseWindowRule):
                by_task[rule.task_id].append(rule)

        for task_id, task_rules in by_task.items():
            if len(task_rules) < 2 or windows[task_id]:
                continue

            findings.append(self._finding(
                id=f"conflict-phase-window-{task_id}",
                severity=Severity.ERROR,
                message=f"Phase-window rules for task '{task_id}' have no phase in common",
                entity=Entity.TASKS,
                row_index=self._task_row(context, task_id),
                column="PreferredPhases",
                suggestion="Align the phase windows or disable one of the rules",
                evidence="; ".join(
                    f"{r.id}: {sorted(r.phases)}" for r in task_rules
                ),
            ))

        return findings

    def _check_load_limits(self, rules: list) -> list[Finding]:
        """Load-limit rules on one worker group that disagree on maxSlots."""
        findings = []

        by_group: dict[str, list[LoadLimitRule]] = defaultdict(list)
        for rule in rules:
            if isinstance(rule, LoadLimitRule):
                by_group[rule.worker_group].append(rule)

        for group, group_rules in by_group.items():
            limits = sorted({r.max_slots for r in group_rules})
            if len(limits) < 2:
                continue

            findings.append(self._finding(
                id=f"conflict-load-limit-{group}",
                severity=Severity.WARNING,
                message=(
                    f"Worker group '{group}' has conflicting load limits: "
                    f"{', '.join(str(limit) for limit in limits)}"
                ),
                entity=Entity.WORKERS,
                column="WorkerGroup",
                suggestion="Keep a single load-limit rule per worker group",
                evidence="; ".join(f"{r.id}: {r.max_slots}" for r in group_rules),
            ))

        return findings

    def _check_co_run_windows(
        self, rules: list, windows: dict[str, set[int]]
    ) -> list[Finding]:
        """Co-run tasks must share at least one phase allowed by their windows."""
        findings = []

        for rule in rules:
            if not isinstance(rule, CoRunRule):
                continue

            # Tasks whose own windows are already empty are reported by check 1
            constrained = [
                t for t in self._unique(rule.task_ids) if windows.get(t)
            ]
            if len(constrained) < 2:
                continue

            common = set.intersection(*(windows[t] for t in constrained))
            if common:
                continue

            label = rule.name or rule.id
            findings.append(self._finding(
                id=f"conflict-corun-window-{rule.id}",
                severity=Severity.ERROR,
                message=(
                    f"Co-run rule '{label}' groups tasks whose phase windows never overlap: "
                    f"{', '.join(constrained)}"
                ),
                entity=Entity.TASKS,
                suggestion="Widen the phase windows or split the co-run group",
                evidence="; ".join(f"{t}: {sorted(windows[t])}" for t in constrained),
            ))

        return findings

    @staticmethod
    def _task_row(context: ValidationContext, task_id: str) -> Optional[int]:
        for i, task in enumerate(context.tasks):
            if task.task_id == task_id:
                return i
        return None
