"""
Static registry of built-in validation rules.

Maps the rule name used in schema pipelines ("required", "min", ...) to the
validator class implementing it. Read-only after import.
"""

from types import MappingProxyType

from .base_validator import BaseValidator, UnknownRuleError
from .comparison_validator import ConfirmedValidator, InValidator, NotInValidator, SameValidator
from .range_validator import BetweenValidator, MaxValidator, MinValidator
from .regex_validator import DateValidator, EmailValidator, RegexValidator, UrlValidator, UuidValidator
from .required_field_validator import (
    NullableValidator,
    PresentValidator,
    RequiredIfValidator,
    RequiredUnlessValidator,
    RequiredValidator,
    SometimesValidator,
)
from .type_validator import (
    ArrayValidator,
    BooleanValidator,
    IntegerValidator,
    JsonValidator,
    NumericValidator,
    ObjectValidator,
    StringValidator,
)

# Marker rules change how the engine walks a field's pipeline
NULLABLE = "nullable"
SOMETIMES = "sometimes"
MARKER_RULES = frozenset({NULLABLE, SOMETIMES})

VALIDATOR_REGISTRY: MappingProxyType[str, type[BaseValidator]] = MappingProxyType({
    # Basic
    "required": RequiredValidator,
    "string": StringValidator,
    "json": JsonValidator,
    "integer": IntegerValidator,
    "numeric": NumericValidator,
    "boolean": BooleanValidator,
    "array": ArrayValidator,
    "object": ObjectValidator,
    # Formats
    "email": EmailValidator,
    "url": UrlValidator,
    "uuid": UuidValidator,
    "date": DateValidator,
    "regex": RegexValidator,
    # Membership
    "in": InValidator,
    "not_in": NotInValidator,
    # Size
    "min": MinValidator,
    "max": MaxValidator,
    "between": BetweenValidator,
    # Cross-field
    "confirmed": ConfirmedValidator,
    "same": SameValidator,
    "required_if": RequiredIfValidator,
    "required_unless": RequiredUnlessValidator,
    # Markers
    NULLABLE: NullableValidator,
    SOMETIMES: SometimesValidator,
    "present": PresentValidator,
})


def get_validator_class(rule_name: str) -> type[BaseValidator]:
    """
    Resolve a rule name to its validator class.

    Raises:
        UnknownRuleError: If the rule is not registered
    """
    validator_class = VALIDATOR_REGISTRY.get(rule_name)
    if validator_class is None:
        raise UnknownRuleError(rule_name)
    return validator_class


def is_registered(rule_name: str) -> bool:
    return rule_name in VALIDATOR_REGISTRY
