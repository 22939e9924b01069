"""Co-Run Validator — detects cycles across overlapping co-run rule groups.

Co-run rules and the tasks they name form a bipartite graph (rule — task).
Two tasks linked by more than one chain of co-run rules close a cycle: the
groups overlap in a loop, so they are really a single, larger group declared
inconsistently. Detection is incremental union-find over that graph.
"""

from alchemist.models.entities import ValidationContext
from alchemist.models.rules import CoRunRule
from alchemist.validators.base import BaseValidator
from alchemist.validators.models import Category, Entity, Finding, Severity


class _DisjointSet:
    """Union-find with path halving."""

    def __init__(self):
        self._parent: dict = {}

    def find(self, node):
        self._parent.setdefault(node, node)
        while self._parent[node] != node:
            self._parent[node] = self._parent[self._parent[node]]
            node = self._parent[node]
        return node

    def union(self, a, b) -> bool:
        """Merge the sets of a and b. Returns False if they were already joined."""
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        self._parent[root_b] = root_a
        return True


class _CoRunGraph:
    """Bipartite rule/task graph tracked as connected components."""

    def __init__(self):
        self._sets = _DisjointSet()

    def add_rule(self, position: int, task_ids: list[str]) -> list[str]:
        """Link a rule to its tasks; return tasks that were already connected to it."""
        rule_node = ("rule", position)
        closing = []
        for task_id in task_ids:
            if not self._sets.union(rule_node, ("task", task_id)):
                closing.append(task_id)
        return closing


class CoRunValidator(BaseValidator):
    """Flags each co-run rule whose task membership closes a cycle."""

    requires_rules = True

    @property
    def name(self) -> str:
        return "CoRunValidator"

    @property
    def category(self) -> Category:
        return Category.CIRCULAR_CO_RUNS

    def validate(self, context: ValidationContext) -> list[Finding]:
        findings = []
        if not context.has_rules:
            return findings

        graph = _CoRunGraph()
        for position, rule in enumerate(context.enabled_rules()):
            if not isinstance(rule, CoRunRule):
                continue

            closing = graph.add_rule(position, self._unique(rule.task_ids))
            if not closing:
                continue

            label = rule.name or rule.id
            findings.append(self._finding(
                id=f"circular-corun-{rule.id}",
                severity=Severity.ERROR,
                message=(
                    f"Co-run rule '{label}' forms a cycle with other co-run rules "
                    f"through task(s) {', '.join(closing)}"
                ),
                entity=Entity.TASKS,
                suggestion="Merge the overlapping co-run groups into a single rule",
                evidence=f"rule: {rule.id}, tasks: {', '.join(rule.task_ids)}",
            ))

        return findings

