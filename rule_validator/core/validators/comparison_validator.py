"""
Cross-field and membership validators - same, confirmed, in and not_in.
"""

from collections.abc import Mapping
from typing import Any

from .base_validator import BaseValidator, RuleConfigurationError, is_number, stringify

# Stands in for a key absent from the record; equal only to itself, never to None.
_MISSING = object()


def lookup(record: Mapping[str, Any], key: str | None) -> Any:
    return record.get(key, _MISSING) if key is not None else _MISSING


def own_value(value: Any, field_name: str | None, record: Mapping[str, Any]) -> Any:
    """The value under test, or _MISSING when the field is absent from the record."""
    if value is None and field_name is not None and field_name not in record:
        return _MISSING
    return value


def values_equal(left: Any, right: Any) -> bool:
    """
    Compare two payload values without Python's bool/int conflation.

    True never equals 1, while 1 and 1.0 are the same number.
    """
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left is right
    if is_number(left) and is_number(right):
        return left == right
    if type(left) is not type(right) and not (
        isinstance(left, Mapping) and isinstance(right, Mapping)
    ):
        return False
    return left == right


class SameValidator(BaseValidator):
    """Parameters: [other_field]. The value must equal record[other_field]."""

    rule_type = "same"

    def validate(self, value: Any, record: Mapping[str, Any]) -> None:
        other = self.param(0)
        if not values_equal(own_value(value, self.field_name, record), lookup(record, other)):
            raise self.fail(f"debe coincidir con {other}")


class ConfirmedValidator(BaseValidator):
    """
    The value must equal record["<field>_confirmation"].

    An absent key only matches another absent key; null never matches absent.
    """

    rule_type = "confirmed"

    def validate(self, value: Any, record: Mapping[str, Any]) -> None:
        if self.field_name is None:
            raise RuleConfigurationError("La regla confirmed requiere el nombre del campo")

        confirmation = lookup(record, f"{self.field_name}_confirmation")
        if not values_equal(own_value(value, self.field_name, record), confirmation):
            raise self.fail("no coincide con la confirmación")


class InValidator(BaseValidator):
    """Parameters: the allowed values. The string form of the value must be one of them."""

    rule_type = "in"

    def validate(self, value: Any, record: Mapping[str, Any]) -> None:
        if stringify(value) not in self.params:
            raise self.fail(f"debe ser uno de [{','.join(self.params)}]")


class NotInValidator(BaseValidator):
    """Parameters: the forbidden values."""

    rule_type = "not_in"

    def validate(self, value: Any, record: Mapping[str, Any]) -> None:
        if stringify(value) in self.params:
            raise self.fail(f"no puede ser ninguno de [{','.join(self.params)}]")
