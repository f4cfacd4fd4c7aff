"""
Validation rule engine, pipeline parsing and schema configuration.
"""

from .rule_config import SchemaBuilder, SchemaConfigLoader
from .rule_engine import RuleEngine, validate_rule, validate_schema
from .rule_parser import FieldSchema, parse_rules, serialize_rules

__all__ = [
    "RuleEngine",
    "validate_rule",
    "validate_schema",
    "parse_rules",
    "serialize_rules",
    "FieldSchema",
    "SchemaConfigLoader",
    "SchemaBuilder",
]
