"""
Unit tests for Pydantic data models.
"""

import pytest
from pydantic import ValidationError

from rule_validator.core.models import RuleOutcome, RuleSpec, ValidationResult


class TestRuleSpec:
    """Tests for RuleSpec model"""

    def test_parse_rule_without_params(self):
        """Test parsing a bare rule name"""
        spec = RuleSpec.parse("required")
        assert spec.name == "required"
        assert spec.params == []

    def test_parse_rule_with_params(self):
        """Test params are split on commas after the first colon"""
        spec = RuleSpec.parse("required_if:tipo,barco")
        assert spec.name == "required_if"
        assert spec.params == ["tipo", "barco"]

    def test_parse_keeps_colons_inside_params(self):
        """Test only the first colon separates name from params"""
        spec = RuleSpec.parse("regex:^\\d{2}:\\d{2}$")
        assert spec.name == "regex"
        assert spec.params == ["^\\d{2}:\\d{2}$"]

    def test_parse_empty_param_string(self):
        """Test 'min:' yields no params"""
        assert RuleSpec.parse("min:").params == []

    def test_to_token(self):
        """Test serialization back to token form"""
        assert RuleSpec(name="between", params=["1", "10"]).to_token() == "between:1,10"
        assert RuleSpec(name="email").to_token() == "email"
        assert str(RuleSpec(name="max", params=["255"])) == "max:255"

    def test_rule_spec_is_frozen(self):
        """Test RuleSpec cannot be mutated after creation"""
        spec = RuleSpec.parse("min:3")
        with pytest.raises(ValidationError):
            spec.name = "max"

    def test_equality(self):
        """Test specs with the same name and params are equal"""
        assert RuleSpec.parse("min:3") == RuleSpec(name="min", params=["3"])
        assert RuleSpec.parse("min:3") != RuleSpec.parse("min:4")


class TestRuleOutcome:
    """Tests for RuleOutcome model"""

    def test_passing_outcome(self):
        """Test a passing outcome has no message"""
        outcome = RuleOutcome(valid=True)
        assert outcome.valid is True
        assert outcome.message is None

    def test_failing_outcome(self):
        """Test a failing outcome carries its message"""
        outcome = RuleOutcome(valid=False, message="requerido")
        assert outcome.valid is False
        assert outcome.message == "requerido"

    def test_passing_outcome_with_message_rejected(self):
        """Test valid=True with a message raises ValidationError"""
        with pytest.raises(ValidationError):
            RuleOutcome(valid=True, message="requerido")

    def test_failing_outcome_with_empty_message_rejected(self):
        """Test valid=False with an empty message raises ValidationError"""
        with pytest.raises(ValidationError):
            RuleOutcome(valid=False, message="")


class TestValidationResult:
    """Tests for ValidationResult model"""

    def test_valid_result(self):
        """Test creating a ValidationResult for a valid payload"""
        result = ValidationResult(valid=True, errors={})
        assert result.valid is True
        assert result.errors == {}

    def test_invalid_result(self):
        """Test creating a ValidationResult for an invalid payload"""
        result = ValidationResult(valid=False, errors={"email": "formato de email inválido"})
        assert result.valid is False
        assert result.errors["email"] == "formato de email inválido"

    def test_valid_with_errors_rejected(self):
        """Test that valid=True with errors raises ValidationError"""
        with pytest.raises(ValidationError) as exc_info:
            ValidationResult(valid=True, errors={"email": "requerido"})
        assert "errors" in str(exc_info.value)

    def test_invalid_without_errors_rejected(self):
        """Test that valid=False with no errors raises ValidationError"""
        with pytest.raises(ValidationError):
            ValidationResult(valid=False, errors={})

    def test_from_errors(self):
        """Test validity is derived from the errors map"""
        assert ValidationResult.from_errors({}).valid is True
        assert ValidationResult.from_errors({"age": "debe ser un entero"}).valid is False

    def test_to_error_payload(self):
        """Test the 422 response body"""
        result = ValidationResult.from_errors({"roleId": "debe ser un entero"})

        payload = result.to_error_payload()

        assert payload == {
            "success": False,
            "code": 0,
            "message": "Datos de entrada inválidos",
            "data": None,
            "errors": {"roleId": "debe ser un entero"},
        }

    def test_to_error_payload_custom_message(self):
        """Test message and code can be overridden"""
        result = ValidationResult.from_errors({"a": "requerido"})
        payload = result.to_error_payload("Recepción inválida", code=42)
        assert payload["message"] == "Recepción inválida"
        assert payload["code"] == 42
