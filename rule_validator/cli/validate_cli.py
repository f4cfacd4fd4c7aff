"""
Command-line interface for checking payloads against validation schemas.

Usage:
    python -m rule_validator.cli.validate_cli check --schema <schema.yaml> --input <payload.json> [options]
    python -m rule_validator.cli.validate_cli check --schema <schema.yaml> --data '{"email": "a@b.com"}'
    python -m rule_validator.cli.validate_cli rules
"""

import argparse
import json
import os
import sys
from pathlib import Path
from typing import Any

from rule_validator.core.rules import RuleEngine, SchemaConfigLoader
from rule_validator.core.validators import VALIDATOR_REGISTRY, RuleConfigurationError
from rule_validator.observability.logger import get_logger, log_operation, setup_logger

logger = get_logger("rule_validator.cli.validate_cli")

EXIT_VALID = 0
EXIT_INVALID = 1
EXIT_ERROR = 2


def load_payloads(args) -> tuple[list[dict[str, Any]], bool]:
    """
    Read the payload(s) to validate.

    Args:
        args: Command-line arguments

    Returns:
        (payloads, is_batch) where is_batch is True when the input was a JSON array
    """
    if args.data is not None:
        document = json.loads(args.data)
    else:
        input_path = Path(args.input)
        if not input_path.exists():
            raise FileNotFoundError(f"Input file not found: {args.input}")
        with open(input_path, encoding="utf-8") as f:
            document = json.load(f)

    if isinstance(document, list):
        payloads = document
        is_batch = True
    else:
        payloads = [document]
        is_batch = False

    for index, payload in enumerate(payloads):
        if not isinstance(payload, dict):
            raise RuleConfigurationError(
                f"Payload {index} must be a JSON object, got {type(payload).__name__}"
            )

    return payloads, is_batch


def check_command(args) -> int:
    """
    Validate payloads against a schema file and print the results as JSON.

    Args:
        args: Command-line arguments

    Returns:
        Process exit code
    """
    schema_path = args.schema or os.getenv("RULE_VALIDATOR_SCHEMA")
    if not schema_path:
        logger.error("No schema given (use --schema or RULE_VALIDATOR_SCHEMA)")
        print("Error: no schema given (use --schema or RULE_VALIDATOR_SCHEMA)", file=sys.stderr)
        return EXIT_ERROR

    try:
        schema = SchemaConfigLoader(schema_path).load_schema(args.name)
        engine = RuleEngine(schema, strict=args.strict)
        payloads, is_batch = load_payloads(args)

        with log_operation("Validating payloads", logger=logger, schema=schema_path, count=len(payloads)):
            results = engine.validate_batch(payloads)

    except (RuleConfigurationError, FileNotFoundError, json.JSONDecodeError) as e:
        logger.error(f"Validation could not run: {e}", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR

    if is_batch:
        output: Any = [result.model_dump() for result in results]
    else:
        output = results[0].model_dump()

    print(json.dumps(output, ensure_ascii=False, indent=args.indent))

    return EXIT_VALID if all(result.valid for result in results) else EXIT_INVALID


def rules_command(args) -> int:
    """
    List the registered validation rules.

    Args:
        args: Command-line arguments

    Returns:
        Process exit code
    """
    width = max(len(name) for name in VALIDATOR_REGISTRY)
    for name in sorted(VALIDATOR_REGISTRY):
        print(f"{name:<{width}}  {VALIDATOR_REGISTRY[name].__name__}")
    return EXIT_VALID


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Validate JSON payloads against rule pipeline schemas",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Validate a payload file
  python -m rule_validator.cli.validate_cli check --schema schemas/users.yaml --input body.json

  # Pick one schema from a multi schema file
  python -m rule_validator.cli.validate_cli check --schema schemas/api.yaml --name create_user \\
      --data '{"username": "ana", "email": "ana@example.com"}'

  # List the available rules
  python -m rule_validator.cli.validate_cli rules
        """
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Log level (default: LOG_LEVEL or INFO)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    check_parser = subparsers.add_parser("check", help="Validate payloads against a schema")
    check_parser.add_argument(
        "--schema",
        default=None,
        help="Path to schema YAML file (default: RULE_VALIDATOR_SCHEMA)"
    )
    check_parser.add_argument(
        "--name",
        default=None,
        help="Schema name inside a multi schema file"
    )
    source = check_parser.add_mutually_exclusive_group(required=True)
    source.add_argument(
        "--input",
        help="Path to a JSON file holding an object or an array of objects"
    )
    source.add_argument(
        "--data",
        help="Inline JSON object or array of objects"
    )
    check_parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject unknown rule names before validating"
    )
    check_parser.add_argument(
        "--indent",
        type=int,
        default=2,
        help="JSON output indentation (default: 2)"
    )

    subparsers.add_parser("rules", help="List registered rules")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.log_level:
        setup_logger(level=args.log_level)

    if not args.command:
        parser.print_help()
        return EXIT_ERROR

    if args.command == "check":
        return check_command(args)
    if args.command == "rules":
        return rules_command(args)

    return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
