"""
Size validators - min, max and between.

Strings and arrays are measured by length; other values are compared
numerically when they parse as a number.
"""

import math
from collections.abc import Mapping
from typing import Any

from .base_validator import BaseValidator, format_number, parse_float, parse_limit


def measure(value: Any) -> tuple[str, float]:
    """
    Return how a value is sized and its size.

    Returns:
        ("length", len) for strings and arrays, ("number", n) for numeric
        values, ("none", nan) when neither applies
    """
    if isinstance(value, str | list | tuple):
        return "length", float(len(value))

    number = parse_float(value)
    if not math.isnan(number):
        return "number", number

    return "none", math.nan


class MinValidator(BaseValidator):
    """
    Parameters: [limit]. Length >= limit for strings/arrays, value >= limit for numbers.
    """

    rule_type = "min"

    def validate(self, value: Any, record: Mapping[str, Any]) -> None:
        limit = parse_limit(self.param(0))
        kind, size = measure(value)

        if kind == "length":
            if not size >= limit:
                raise self.fail(f"mínimo {format_number(limit)}")
        elif kind == "number":
            if not size >= limit:
                raise self.fail(f"debe ser ≥ {format_number(limit)}")
        else:
            raise self.fail("mínimo no aplicable")


class MaxValidator(BaseValidator):
    """
    Parameters: [limit]. Length <= limit for strings/arrays, value <= limit for numbers.
    """

    rule_type = "max"

    def validate(self, value: Any, record: Mapping[str, Any]) -> None:
        limit = parse_limit(self.param(0))
        kind, size = measure(value)

        if kind == "length":
            if not size <= limit:
                raise self.fail(f"máximo {format_number(limit)}")
        elif kind == "number":
            if not size <= limit:
                raise self.fail(f"debe ser ≤ {format_number(limit)}")
        else:
            raise self.fail("máximo no aplicable")


class BetweenValidator(BaseValidator):
    """
    Parameters: [min, max], both inclusive.
    """

    rule_type = "between"

    def validate(self, value: Any, record: Mapping[str, Any]) -> None:
        low = parse_limit(self.param(0))
        high = parse_limit(self.param(1))
        kind, size = measure(value)

        if kind == "none":
            raise self.fail("between no aplicable")

        # NaN limits never compare true, so a malformed limit fails the value
        if not (size >= low and size <= high):
            raise self.fail(f"entre {format_number(low)} y {format_number(high)}")
