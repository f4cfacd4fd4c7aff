"""
Base validator interface for all validation rules.

All validators must inherit from BaseValidator and implement the validate() method.
"""

import math
import re
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any


class ValidationError(Exception):
    """Raised when a validation rule fails."""

    def __init__(self, rule_name: str, field_name: str | None, message: str):
        self.rule_name = rule_name
        self.field_name = field_name
        self.message = message
        super().__init__(f"[{rule_name}] {field_name}: {message}")


class RuleConfigurationError(ValueError):
    """Raised when a schema or rule is misconfigured (a programmer error)."""


class UnknownRuleError(RuleConfigurationError):
    """Raised when a schema references a rule name that is not registered."""

    def __init__(self, rule_name: str):
        self.rule_name = rule_name
        super().__init__(f"Regla desconocida: {rule_name}")


class BaseValidator(ABC):
    """
    Abstract base class for all validators.

    A validator is built for one field with the rule's string parameters,
    and checks a value in the context of the whole payload.
    """

    rule_type: str = ""

    def __init__(self, field_name: str | None, params: list[str] | None = None):
        """
        Initialize validator.

        Args:
            field_name: Name of the field being validated (None for standalone checks)
            params: Ordered string parameters from the rule token (e.g. ["3"] for min:3)
        """
        self.field_name = field_name
        self.params = list(params or [])

    @abstractmethod
    def validate(self, value: Any, record: Mapping[str, Any]) -> None:
        """
        Validate a value against this rule.

        Args:
            value: The field value to validate
            record: The entire payload (for cross-field rules)

        Raises:
            ValidationError: If validation fails
        """
        pass

    def param(self, index: int) -> str | None:
        """Return the positional parameter at index, or None if absent."""
        return self.params[index] if index < len(self.params) else None

    def fail(self, message: str) -> ValidationError:
        return ValidationError(rule_name=self.rule_type, field_name=self.field_name, message=message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(field={self.field_name}, params={self.params})"


# Shared coercion helpers. Payloads arrive as decoded JSON, so these follow
# JSON/JavaScript conventions for null, booleans and numbers.

UNDEFINED = "undefined"

_FLOAT_PREFIX = re.compile(r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)")


def is_blank(value: Any) -> bool:
    """True for null and the empty string; 0, False and [] are present values."""
    return value is None or (isinstance(value, str) and value == "")


def is_number(value: Any) -> bool:
    return isinstance(value, int | float) and not isinstance(value, bool)


def format_number(number: float) -> str:
    """Print a number without a trailing '.0', like a JSON number."""
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "Infinity" if number > 0 else "-Infinity"
    if float(number).is_integer():
        return str(int(number))
    return repr(float(number))


def stringify(value: Any) -> str:
    """Convert a payload value to its string form for membership and pattern checks."""
    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        return format_number(value)
    if isinstance(value, list | tuple):
        return ",".join("" if item is None else stringify(item) for item in value)
    if isinstance(value, Mapping):
        return "[object Object]"
    return str(value)


def lookup_string(record: Mapping[str, Any], key: str | None) -> str:
    """Stringify record[key], with absent keys rendered as 'undefined'."""
    if key is None or key not in record:
        return UNDEFINED
    return stringify(record[key])


def parse_float(value: Any) -> float:
    """
    Parse the leading numeric prefix of a value, returning NaN when there is none.

    Booleans, null, mappings and sequences are never numeric.
    """
    if is_number(value):
        return float(value)
    if not isinstance(value, str):
        return math.nan

    text = value.lstrip()
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return math.nan
    token = match.group(0)
    if token.lstrip("+-") == "Infinity":
        return -math.inf if token.startswith("-") else math.inf
    return float(token)


def parse_limit(raw: str | None) -> float:
    """Parse a rule parameter as a number; missing or malformed limits are NaN."""
    return parse_float(raw) if raw is not None else math.nan
