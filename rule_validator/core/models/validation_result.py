"""
ValidationResult model representing the outcome of validating a payload (ephemeral).
"""

from typing import Any, Dict

from pydantic import BaseModel, Field, field_validator


class RuleOutcome(BaseModel):
    """
    Outcome of evaluating a single rule against a value.

    Attributes:
        valid: Whether the rule passed
        message: Failure message, None when the rule passed
    """

    valid: bool
    message: str | None = None

    @field_validator('message')
    @classmethod
    def check_message_consistency(cls, v, info):
        """Validate that a passing outcome carries no message and a failing one does."""
        valid = info.data.get('valid')
        if valid is True and v is not None:
            raise ValueError("valid=True but message is set")
        if valid is False and not v:
            raise ValueError("valid=False but message is empty")
        return v


class ValidationResult(BaseModel):
    """
    Outcome of validating a payload against a schema (ephemeral, built per call).

    Attributes:
        valid: True iff no field failed
        errors: Field name -> message of the first rule that failed for it
    """

    valid: bool
    errors: Dict[str, str] = Field(default_factory=dict)

    @field_validator('errors')
    @classmethod
    def check_valid_consistency(cls, v, info):
        """Validate that valid mirrors whether errors is empty."""
        valid = info.data.get('valid')
        if valid is True and len(v) > 0:
            raise ValueError("valid=True but errors is not empty")
        if valid is False and len(v) == 0:
            raise ValueError("valid=False but errors is empty")
        return v

    @classmethod
    def from_errors(cls, errors: Dict[str, str]) -> "ValidationResult":
        return cls(valid=not errors, errors=dict(errors))

    def to_error_payload(self, message: str = "Datos de entrada inválidos", code: int = 0) -> Dict[str, Any]:
        """
        Build the body a host returns alongside a 422 Unprocessable Entity response.

        Args:
            message: Human readable summary
            code: Application-level error code

        Returns:
            Dictionary with success, code, message, data and errors keys
        """
        return {
            "success": False,
            "code": code,
            "message": message,
            "data": None,
            "errors": dict(self.errors),
        }

    class Config:
        json_schema_extra = {
            "example": {
                "valid": False,
                "errors": {
                    "email": "formato de email inválido",
                    "age": "debe ser ≥ 18"
                }
            }
        }
