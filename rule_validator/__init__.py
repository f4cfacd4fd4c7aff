"""
rule-validator: rule pipeline validation for request payloads.

    from rule_validator import validate_schema

    result = validate_schema(
        {"email": "required|email", "age": "nullable|integer|min:18"},
        {"email": "a@b.com", "age": None},
    )
    if not result.valid:
        return 422, result.to_error_payload()
"""

from rule_validator.core.models import RuleOutcome, RuleSpec, ValidationResult
from rule_validator.core.rules import (
    RuleEngine,
    SchemaBuilder,
    SchemaConfigLoader,
    parse_rules,
    serialize_rules,
    validate_rule,
    validate_schema,
)
from rule_validator.core.validators import (
    VALIDATOR_REGISTRY,
    RuleConfigurationError,
    UnknownRuleError,
    ValidationError,
)

__version__ = "1.0.0"

__all__ = [
    "validate_rule",
    "validate_schema",
    "parse_rules",
    "serialize_rules",
    "RuleEngine",
    "SchemaConfigLoader",
    "SchemaBuilder",
    "RuleSpec",
    "RuleOutcome",
    "ValidationResult",
    "VALIDATOR_REGISTRY",
    "ValidationError",
    "RuleConfigurationError",
    "UnknownRuleError",
]
