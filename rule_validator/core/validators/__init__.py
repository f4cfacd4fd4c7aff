"""
Validation rule implementations.

Provides one validator per built-in rule (required, type checks, formats,
membership, size, cross-field) and the registry that maps rule names to them.
"""

from .base_validator import BaseValidator, RuleConfigurationError, UnknownRuleError, ValidationError
from .comparison_validator import ConfirmedValidator, InValidator, NotInValidator, SameValidator
from .range_validator import BetweenValidator, MaxValidator, MinValidator
from .regex_validator import DateValidator, EmailValidator, RegexValidator, UrlValidator, UuidValidator
from .registry import MARKER_RULES, NULLABLE, SOMETIMES, VALIDATOR_REGISTRY, get_validator_class, is_registered
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
    TypeValidator,
)

__all__ = [
    "BaseValidator",
    "ValidationError",
    "RuleConfigurationError",
    "UnknownRuleError",
    "VALIDATOR_REGISTRY",
    "MARKER_RULES",
    "NULLABLE",
    "SOMETIMES",
    "get_validator_class",
    "is_registered",
    "RequiredValidator",
    "RequiredIfValidator",
    "RequiredUnlessValidator",
    "PresentValidator",
    "NullableValidator",
    "SometimesValidator",
    "TypeValidator",
    "StringValidator",
    "JsonValidator",
    "IntegerValidator",
    "NumericValidator",
    "BooleanValidator",
    "ArrayValidator",
    "ObjectValidator",
    "RegexValidator",
    "EmailValidator",
    "UuidValidator",
    "UrlValidator",
    "DateValidator",
    "InValidator",
    "NotInValidator",
    "SameValidator",
    "ConfirmedValidator",
    "MinValidator",
    "MaxValidator",
    "BetweenValidator",
]
