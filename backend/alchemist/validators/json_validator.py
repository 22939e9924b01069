"""JSON Validator — client AttributesJSON must be parseable when present."""

import json

from alchemist.models.entities import ValidationContext
from alchemist.validators.base import BaseValidator
from alchemist.validators.models import Category, Entity, Finding, Severity


def _reject_constant(name: str):
    # NaN / Infinity / -Infinity are Python extensions, not JSON
    raise ValueError(f"Invalid JSON constant {name}")


class JsonValidator(BaseValidator):
    """Syntax only: a parse failure is the trigger, no schema is enforced."""

    @property
    def name(self) -> str:
        return "JsonValidator"

    @property
    def category(self) -> Category:
        return Category.BROKEN_JSON

    def validate(self, context: ValidationContext) -> list[Finding]:
        findings = []

        for i, client in enumerate(context.clients):
            raw = client.attributes_json
            if not raw or not isinstance(raw, str):
                continue
            try:
                json.loads(raw, parse_constant=_reject_constant)
            except ValueError as e:
                findings.append(self._finding(
                    id=f"broken-json-{i}",
                    severity=Severity.ERROR,
                    message="AttributesJSON is not valid JSON",
                    entity=Entity.CLIENTS,
                    row_index=i,
                    column="AttributesJSON",
                    suggestion="Fix JSON syntax or leave empty",
                    evidence=str(e),
                ))

        return findings
