"""
Core data models for the rule validation engine.

All models use Pydantic for runtime validation and type safety.
"""

from .rule_spec import RuleSpec
from .validation_result import RuleOutcome, ValidationResult

__all__ = [
    "RuleSpec",
    "RuleOutcome",
    "ValidationResult",
]
