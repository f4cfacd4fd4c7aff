"""
Parsing and serialization of field rule pipelines.

A pipeline is either a pipe-delimited string ("required|string|max:255") or an
ordered list of tokens (["required", "string", "max:255"]). Lists may also hold
RuleSpec objects, which are kept as they are.
"""

from collections.abc import Sequence
from typing import Union

from rule_validator.core.models import RuleSpec

FieldSchema = Union[str, Sequence[Union[str, RuleSpec]]]


def parse_rules(field_schema: FieldSchema) -> list[RuleSpec]:
    """
    Convert a field pipeline into an ordered list of RuleSpec.

    Args:
        field_schema: Pipe-delimited string or list of tokens

    Returns:
        One RuleSpec per token, in declared order

    Examples:
        >>> [r.to_token() for r in parse_rules("required|min:3")]
        ['required', 'min:3']
    """
    if isinstance(field_schema, str) or not isinstance(field_schema, Sequence):
        tokens: Sequence[Union[str, RuleSpec]] = str(field_schema).split("|")
    else:
        tokens = field_schema

    return [
        token if isinstance(token, RuleSpec) else RuleSpec.parse(str(token))
        for token in tokens
    ]


def serialize_rules(rules: Sequence[RuleSpec]) -> str:
    """Serialize a RuleSpec list back to pipe-delimited form."""
    return "|".join(rule.to_token() for rule in rules)
