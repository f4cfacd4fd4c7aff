"""
Type validators - check the JSON type of a field value.
"""

import math
from collections.abc import Mapping
from typing import Any

from .base_validator import BaseValidator, is_number, parse_float


class TypeValidator(BaseValidator):
    """
    Validates that a field value has the expected JSON type.

    Subclasses set ``rule_type`` and ``message`` and implement ``accepts``.
    Values are checked as decoded; no coercion is attempted.
    """

    message = ""

    def accepts(self, value: Any) -> bool:
        raise NotImplementedError

    def validate(self, value: Any, record: Mapping[str, Any]) -> None:
        """
        Validate that the value matches the expected type.

        Args:
            value: The field value to validate
            record: The entire record

        Raises:
            ValidationError: If type validation fails
        """
        if not self.accepts(value):
            raise self.fail(self.message)


class StringValidator(TypeValidator):
    rule_type = "string"
    message = "debe ser texto"

    def accepts(self, value: Any) -> bool:
        return isinstance(value, str)


class JsonValidator(TypeValidator):
    """Accepts any non-null JSON object or array."""

    rule_type = "json"
    message = "debe ser un objeto JSON válido"

    def accepts(self, value: Any) -> bool:
        return isinstance(value, (Mapping, list, tuple))


class IntegerValidator(TypeValidator):
    """Accepts integral numbers, including floats such as 5.0. Booleans are rejected."""

    rule_type = "integer"
    message = "debe ser un entero"

    def accepts(self, value: Any) -> bool:
        if not is_number(value):
            return False
        if isinstance(value, int):
            return True
        return math.isfinite(value) and value.is_integer()


class NumericValidator(TypeValidator):
    """Accepts numbers and strings with a leading numeric prefix ("12.5", "3kg")."""

    rule_type = "numeric"
    message = "debe ser numérico"

    def accepts(self, value: Any) -> bool:
        return value is not None and not math.isnan(parse_float(value))


class BooleanValidator(TypeValidator):
    rule_type = "boolean"
    message = "debe ser booleano"

    def accepts(self, value: Any) -> bool:
        return isinstance(value, bool)


class ArrayValidator(TypeValidator):
    rule_type = "array"
    message = "debe ser un arreglo"

    def accepts(self, value: Any) -> bool:
        return isinstance(value, list | tuple)


class ObjectValidator(TypeValidator):
    rule_type = "object"
    message = "debe ser un objeto"

    def accepts(self, value: Any) -> bool:
        return isinstance(value, Mapping)
