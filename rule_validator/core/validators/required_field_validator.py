"""
Presence validators - required, conditional requirement and schema markers.
"""

from collections.abc import Mapping
from typing import Any

from .base_validator import BaseValidator, RuleConfigurationError, is_blank, lookup_string


class RequiredValidator(BaseValidator):
    """
    Validates that a value is present.

    Fails if:
    - Field value is None (or the field is missing from the record)
    - Field value is an empty string

    0, False and empty collections are present values.
    """

    rule_type = "required"

    def validate(self, value: Any, record: Mapping[str, Any]) -> None:
        if is_blank(value):
            raise self.fail("requerido")


class RequiredIfValidator(BaseValidator):
    """
    Requires the value when another field equals a given value.

    Parameters: [other_field, expected]. The other field is compared by its
    string form, so required_if:active,true matches a boolean True.
    """

    rule_type = "required_if"

    def validate(self, value: Any, record: Mapping[str, Any]) -> None:
        other, expected = self.param(0), self.param(1)
        if lookup_string(record, other) == expected and is_blank(value):
            raise self.fail(f"requerido cuando {other} es {expected}")


class RequiredUnlessValidator(BaseValidator):
    """Requires the value unless another field equals a given value."""

    rule_type = "required_unless"

    def validate(self, value: Any, record: Mapping[str, Any]) -> None:
        other, expected = self.param(0), self.param(1)
        if lookup_string(record, other) != expected and is_blank(value):
            raise self.fail(f"requerido a menos que {other} sea {expected}")


class PresentValidator(BaseValidator):
    """Validates that the field key exists on the payload, even when its value is null."""

    rule_type = "present"

    def validate(self, value: Any, record: Mapping[str, Any]) -> None:
        if self.field_name is None:
            raise RuleConfigurationError("La regla present requiere el nombre del campo")
        if self.field_name not in record:
            raise self.fail("debe estar presente")


class NullableValidator(BaseValidator):
    """
    Schema marker: when the value is null the engine skips the field's other rules.

    Evaluated on its own it always passes.
    """

    rule_type = "nullable"

    def validate(self, value: Any, record: Mapping[str, Any]) -> None:
        return None


class SometimesValidator(BaseValidator):
    """
    Schema marker: when the field is absent from the payload the engine skips it.

    Evaluated on its own it always passes.
    """

    rule_type = "sometimes"

    def validate(self, value: Any, record: Mapping[str, Any]) -> None:
        return None
