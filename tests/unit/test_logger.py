"""
Unit tests for structured logging.
"""

import io
import json

import pytest

from rule_validator.observability.logger import get_logger, log_operation, setup_logger


class TestSetupLogger:
    """Tests for setup_logger"""

    def test_json_format(self):
        stream = io.StringIO()
        logger = setup_logger("rule_validator.test_json", level="INFO", format_type="json", stream=stream)

        logger.info("Validated batch", extra={"total": 3})

        record = json.loads(stream.getvalue().strip())
        assert record["message"] == "Validated batch"
        assert record["level"] == "INFO"
        assert record["logger"] == "rule_validator.test_json"
        assert record["total"] == 3

    def test_text_format(self):
        stream = io.StringIO()
        logger = setup_logger("rule_validator.test_text", level="DEBUG", format_type="text", stream=stream)

        logger.debug("Field failed")

        assert "DEBUG" in stream.getvalue()
        assert "Field failed" in stream.getvalue()

    def test_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("LOG_LEVEL", "WARNING")
        stream = io.StringIO()
        logger = setup_logger("rule_validator.test_env", format_type="text", stream=stream)

        logger.info("hidden")
        logger.warning("shown")

        assert "hidden" not in stream.getvalue()
        assert "shown" in stream.getvalue()

    def test_setup_is_idempotent(self):
        stream = io.StringIO()
        setup_logger("rule_validator.test_idem", stream=stream)
        logger = setup_logger("rule_validator.test_idem", stream=stream)

        assert len(logger.handlers) == 1

    def test_uses_test_env_file(self, test_env_vars):
        import os

        assert os.getenv("LOG_FORMAT") == "text"


class TestLogOperation:
    """Tests for the log_operation context manager"""

    def test_logs_success(self):
        stream = io.StringIO()
        logger = setup_logger("rule_validator.test_op", level="INFO", format_type="json", stream=stream)

        with log_operation("Validating payloads", logger=logger, schema="users"):
            pass

        lines = [json.loads(line) for line in stream.getvalue().strip().splitlines()]
        assert lines[0]["message"] == "Starting: Validating payloads"
        assert lines[1]["status"] == "success"
        assert lines[1]["schema"] == "users"
        assert "duration_seconds" in lines[1]

    def test_logs_failure_and_reraises(self):
        stream = io.StringIO()
        logger = setup_logger("rule_validator.test_op_fail", level="INFO", format_type="json", stream=stream)

        with pytest.raises(ValueError):
            with log_operation("Validating payloads", logger=logger):
                raise ValueError("boom")

        assert '"status": "error"' in stream.getvalue()
        assert '"error_type": "ValueError"' in stream.getvalue()


class TestGetLogger:
    """Tests for get_logger"""

    def test_package_loggers_follow_package_handler(self):
        stream = io.StringIO()
        setup_logger("rule_validator", level="WARNING", format_type="text", stream=stream)

        logger = get_logger("rule_validator.cli.validate_cli")
        logger.info("hidden")
        logger.warning("shown")

        assert not logger.handlers
        assert "hidden" not in stream.getvalue()
        assert "shown" in stream.getvalue()

    def test_cli_logger_is_in_package_namespace(self):
        from rule_validator.cli import validate_cli

        assert validate_cli.logger.name == "rule_validator.cli.validate_cli"

    def test_outside_name_gets_own_handler(self):
        logger = get_logger("rule_validator_test_outside")

        assert len(logger.handlers) == 1
