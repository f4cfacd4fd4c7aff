"""
Rule engine for evaluating validation schemas against request payloads.

A schema maps field names to rule pipelines. The engine parses each pipeline
once, then for every payload walks the fields in declaration order, stopping
at the first failing rule of each field.
"""

import logging
from collections.abc import Mapping
from typing import Any, Iterable

from rule_validator.core.models import RuleOutcome, RuleSpec, ValidationResult
from rule_validator.core.rules.rule_parser import FieldSchema, parse_rules
from rule_validator.core.validators import (
    MARKER_RULES,
    NULLABLE,
    SOMETIMES,
    VALIDATOR_REGISTRY,
    UnknownRuleError,
    ValidationError,
    get_validator_class,
)

logger = logging.getLogger(__name__)


def validate_rule(
    rule_name: str,
    value: Any,
    params: list[str] | None = None,
    all_data: Mapping[str, Any] | None = None,
    field: str | None = None,
) -> RuleOutcome:
    """
    Evaluate a single rule against a value.

    Args:
        rule_name: Registered rule name
        value: The value to check
        params: Rule parameters as strings (e.g. ["3"] for min:3)
        all_data: The whole payload, for cross-field rules
        field: Name of the field being checked (needed by confirmed and present)

    Returns:
        RuleOutcome with the failure message when the rule does not pass

    Raises:
        UnknownRuleError: If rule_name is not registered
    """
    try:
        validator_class = get_validator_class(rule_name)
    except UnknownRuleError:
        logger.error(
            f"Unknown validation rule: {rule_name}",
            extra={"rule_name": rule_name, "field_name": field},
        )
        raise

    validator = validator_class(field, params)
    try:
        validator.validate(value, all_data if all_data is not None else {})
    except ValidationError as e:
        return RuleOutcome(valid=False, message=e.message or f"La regla {rule_name} falló")

    return RuleOutcome(valid=True)


class RuleEngine:
    """
    Evaluates a validation schema against payloads.

    The schema is parsed into RuleSpec lists at construction; rule names are
    resolved against the registry when they are evaluated, unless strict=True
    asks for every name to be checked up front.
    """

    VALIDATOR_REGISTRY = VALIDATOR_REGISTRY

    def __init__(self, schema: Mapping[str, FieldSchema], strict: bool = False):
        """
        Initialize the rule engine with a validation schema.

        Args:
            schema: Field name -> pipeline string or list of rule tokens
            strict: Raise UnknownRuleError at construction for unregistered names
        """
        if not isinstance(schema, Mapping):
            raise TypeError(f"Schema must be a mapping, got {type(schema).__name__}")

        self.schema = dict(schema)
        self.strict = strict
        self.field_rules: dict[str, list[RuleSpec]] = {}
        self._build_rules()

    def _build_rules(self) -> None:
        """Parse every field pipeline into RuleSpec lists."""
        for field_name, field_schema in self.schema.items():
            rules = parse_rules(field_schema)

            if self.strict:
                for rule in rules:
                    if rule.name not in self.VALIDATOR_REGISTRY:
                        logger.error(
                            f"Unknown validation rule '{rule.name}' for field '{field_name}'",
                            extra={"rule_name": rule.name, "field_name": field_name},
                        )
                        raise UnknownRuleError(rule.name)

            self.field_rules[field_name] = rules

    def validate(self, data: Mapping[str, Any]) -> ValidationResult:
        """
        Validate a payload against the schema.

        Args:
            data: Decoded request body

        Returns:
            ValidationResult with at most one message per failing field

        Raises:
            TypeError: If data is not a mapping
            UnknownRuleError: If an evaluated rule is not registered
        """
        if not isinstance(data, Mapping):
            raise TypeError(f"Data must be a mapping, got {type(data).__name__}")

        errors: dict[str, str] = {}
        for field_name, rules in self.field_rules.items():
            message = self._validate_field(field_name, rules, data)
            if message is not None:
                errors[field_name] = message

        return ValidationResult.from_errors(errors)

    def _validate_field(
        self,
        field_name: str,
        rules: list[RuleSpec],
        data: Mapping[str, Any],
    ) -> str | None:
        """Return the first failure message for a field, or None if it passes."""
        names = {rule.name for rule in rules}

        if SOMETIMES in names and field_name not in data:
            return None

        value = data.get(field_name)
        if NULLABLE in names and value is None:
            return None

        for rule in rules:
            if rule.name in MARKER_RULES:
                continue

            outcome = validate_rule(rule.name, value, rule.params, data, field=field_name)
            if not outcome.valid:
                logger.debug(
                    f"Field '{field_name}' failed rule '{rule.name}': {outcome.message}",
                    extra={"field_name": field_name, "rule_name": rule.name},
                )
                return outcome.message

        return None

    def validate_batch(self, payloads: Iterable[Mapping[str, Any]]) -> list[ValidationResult]:
        """
        Validate a batch of payloads.

        Args:
            payloads: Decoded request bodies

        Returns:
            List of ValidationResult objects, one per payload
        """
        results = [self.validate(payload) for payload in payloads]

        failed = sum(1 for result in results if not result.valid)
        logger.info(
            f"Validated batch of {len(results)} payloads ({failed} invalid)",
            extra={"total": len(results), "invalid": failed},
        )
        return results

    def get_rule_summary(self) -> dict[str, Any]:
        """
        Get summary of the compiled schema.

        Returns:
            Dictionary with field and rule counts
        """
        return {
            "total_fields": len(self.field_rules),
            "total_rules": sum(len(rules) for rules in self.field_rules.values()),
            "rules_by_name": self._count_by_name(),
        }

    def _count_by_name(self) -> dict[str, int]:
        """Count rules by name across all fields."""
        counts: dict[str, int] = {}
        for rules in self.field_rules.values():
            for rule in rules:
                counts[rule.name] = counts.get(rule.name, 0) + 1
        return counts


def validate_schema(schema: Mapping[str, FieldSchema], data: Mapping[str, Any]) -> ValidationResult:
    """
    Validate a payload against a schema in one call.

    Args:
        schema: Field name -> rule pipeline
        data: Decoded request body

    Returns:
        ValidationResult; callers answer 422 with result.errors when not valid
    """
    return RuleEngine(schema).validate(data)
