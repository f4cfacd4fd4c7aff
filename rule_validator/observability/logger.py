"""
Logging setup for rule-validator.

Records are written to stderr, as JSON lines (python-json-logger) or plain
text, so that command output on stdout stays machine readable. LOG_LEVEL and
LOG_FORMAT pick the defaults.
"""
import logging
import os
import sys
import time
from contextlib import contextmanager
from typing import Iterator, TextIO

from pythonjsonlogger import jsonlogger

PACKAGE_LOGGER = "rule_validator"

JSON_FIELDS = "%(timestamp)s %(level)s %(logger)s %(module)s %(function)s %(message)s"
TEXT_FORMAT = "%(asctime)s %(levelname)-8s %(name)s [%(module)s.%(funcName)s] %(message)s"


class EngineJsonFormatter(jsonlogger.JsonFormatter):
    """JSON formatter that names the level, logger and call site of every record."""

    def add_fields(self, log_record: dict, record: logging.LogRecord, message_dict: dict) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record.setdefault("timestamp", self.formatTime(record, self.datefmt))
        log_record["level"] = record.levelname
        log_record["logger"] = record.name
        log_record["module"] = record.module
        log_record["function"] = record.funcName


def _resolve_level(level: str | None) -> int:
    name = (level or os.getenv("LOG_LEVEL") or "INFO").upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def _build_formatter(format_type: str) -> logging.Formatter:
    if format_type == "json":
        return EngineJsonFormatter(JSON_FIELDS, datefmt="%Y-%m-%dT%H:%M:%S")
    return logging.Formatter(TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S")


def setup_logger(
    name: str = PACKAGE_LOGGER,
    level: str | None = None,
    format_type: str | None = None,
    stream: TextIO | None = None,
) -> logging.Logger:
    """
    Install a single handler on the named logger, replacing any previous one.

    Args:
        name: Logger name
        level: DEBUG, INFO, WARNING, ERROR or CRITICAL; defaults to LOG_LEVEL
        format_type: "json" or "text"; defaults to LOG_FORMAT, then "json"
        stream: Output stream, stderr when omitted

    Returns:
        The configured logger
    """
    log_level = _resolve_level(level)
    format_type = (format_type or os.getenv("LOG_FORMAT") or "json").lower()

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(log_level)
    handler.setFormatter(_build_formatter(format_type))

    logger = logging.getLogger(name)
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(log_level)
    logger.propagate = False
    return logger


def get_logger(name: str = PACKAGE_LOGGER) -> logging.Logger:
    """
    Return a logger, configuring its handler on first use.

    Names under the package namespace share the package logger's handler, so
    reconfiguring "rule_validator" (e.g. via --log-level) reaches them too.
    """
    in_package = name == PACKAGE_LOGGER or name.startswith(PACKAGE_LOGGER + ".")
    owner = logging.getLogger(PACKAGE_LOGGER if in_package else name)
    if not owner.handlers:
        setup_logger(owner.name)
    return logging.getLogger(name)


@contextmanager
def log_operation(operation_name: str, logger: logging.Logger | None = None, **fields) -> Iterator[None]:
    """
    Log the start, outcome and duration of a block.

    Usage:
        with log_operation("Validating payloads", logger=logger, schema="users"):
            engine.validate_batch(payloads)

    Exceptions are logged with status "error" and re-raised.
    """
    log = logger or get_logger()
    context = {"operation": operation_name, **fields}
    log.info(f"Starting: {operation_name}", extra=context)

    started = time.perf_counter()
    try:
        yield
    except Exception as exc:
        log.error(
            f"Failed: {operation_name}",
            extra={
                **context,
                "duration_seconds": round(time.perf_counter() - started, 3),
                "status": "error",
                "error_type": type(exc).__name__,
                "error_message": str(exc),
            },
            exc_info=True,
        )
        raise

    log.info(
        f"Completed: {operation_name}",
        extra={
            **context,
            "duration_seconds": round(time.perf_counter() - started, 3),
            "status": "success",
        },
    )
