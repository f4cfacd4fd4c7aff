"""
Schema configuration management.

Loads validation schemas from YAML files and provides a builder for
assembling schemas in code.
"""

from pathlib import Path
from typing import Any

import yaml

from rule_validator.core.validators import NULLABLE, RuleConfigurationError


class SchemaConfigLoader:
    """
    Loads validation schemas from YAML configuration files.

    Single schema format:
    ```yaml
    schema:
      username: "required|string|max:255"
      email: [required, email, "max:255"]
      roleId: "required|integer"
    ```

    Multi schema format:
    ```yaml
    schemas:
      create_user:
        username: "required|string|max:255"
      update_user:
        username: "sometimes|string|max:255"
    ```
    """

    def __init__(self, config_path: str | Path):
        """
        Initialize the schema config loader.

        Args:
            config_path: Path to the YAML configuration file
        """
        self.config_path = Path(config_path)
        if not self.config_path.exists():
            raise FileNotFoundError(f"Schema configuration file not found: {config_path}")

    def _read(self) -> dict[str, Any]:
        with open(self.config_path, encoding="utf-8") as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise RuleConfigurationError(f"Invalid YAML in {self.config_path}: {e}")

        if not isinstance(config, dict):
            raise RuleConfigurationError("Configuration file must contain a 'schema' or 'schemas' section")
        return config

    def load_schema(self, name: str | None = None) -> dict[str, str | list[str]]:
        """
        Load one schema from the YAML file.

        Args:
            name: Schema name inside a 'schemas' section (required for multi schema files)

        Returns:
            Field name -> rule pipeline

        Raises:
            RuleConfigurationError: If the file has no matching schema or it is malformed
        """
        config = self._read()

        if name is None:
            if "schema" in config:
                return self._parse_schema(config["schema"], "schema")
            schemas = config.get("schemas")
            if isinstance(schemas, dict) and len(schemas) == 1:
                only_name = next(iter(schemas))
                return self._parse_schema(schemas[only_name], only_name)
            raise RuleConfigurationError(
                "Configuration file must contain a 'schema' section, "
                "or a schema name must be given for a 'schemas' section"
            )

        schemas = self.load_schemas()
        if name not in schemas:
            raise RuleConfigurationError(
                f"Schema '{name}' not found. Available: {', '.join(schemas) or 'none'}"
            )
        return schemas[name]

    def load_schemas(self) -> dict[str, dict[str, str | list[str]]]:
        """
        Load every schema of a multi schema file.

        Returns:
            Schema name -> schema
        """
        config = self._read()

        if "schemas" not in config:
            if "schema" in config:
                return {"schema": self._parse_schema(config["schema"], "schema")}
            raise RuleConfigurationError("Configuration file must contain a 'schemas' section")

        schemas = config["schemas"]
        if not isinstance(schemas, dict):
            raise RuleConfigurationError("'schemas' must map schema names to schemas")

        return {
            str(schema_name): self._parse_schema(schema_def, str(schema_name))
            for schema_name, schema_def in schemas.items()
        }

    def _parse_schema(self, schema_def: Any, schema_name: str) -> dict[str, str | list[str]]:
        """
        Check a schema definition read from YAML.

        Args:
            schema_def: Mapping of field names to pipelines
            schema_name: Name used in error messages

        Returns:
            The schema with list pipelines converted to lists of strings

        Raises:
            RuleConfigurationError: If the definition is malformed
        """
        if not isinstance(schema_def, dict) or not schema_def:
            raise RuleConfigurationError(f"Schema '{schema_name}' must map field names to rules")

        schema: dict[str, str | list[str]] = {}
        for field_name, pipeline in schema_def.items():
            if not isinstance(field_name, str):
                raise RuleConfigurationError(
                    f"Field names in schema '{schema_name}' must be strings, got {field_name!r}"
                )

            if isinstance(pipeline, str):
                schema[field_name] = pipeline
            elif isinstance(pipeline, list) and all(isinstance(token, str) for token in pipeline):
                schema[field_name] = list(pipeline)
            else:
                raise RuleConfigurationError(
                    f"Rules for field '{field_name}' in schema '{schema_name}' "
                    "must be a string or a list of strings"
                )

        return schema


class SchemaBuilder:
    """
    Programmatically build validation schemas.

    Example:
        schema = SchemaBuilder() \\
            .required("email", "email", "max:255") \\
            .nullable("age", "integer", "min:18") \\
            .build()
    """

    def __init__(self):
        """Initialize empty schema."""
        self.fields: dict[str, list[str]] = {}

    def field(self, field_name: str, *rules: str) -> "SchemaBuilder":
        """Append rule tokens to a field's pipeline."""
        self.fields.setdefault(field_name, []).extend(rules)
        return self

    def rule(self, field_name: str, rule_name: str, *params: Any) -> "SchemaBuilder":
        """Append one rule built from its name and parameters, e.g. rule("age", "between", 18, 65)."""
        token = rule_name
        if params:
            token += ":" + ",".join(str(p) for p in params)
        return self.field(field_name, token)

    def required(self, field_name: str, *rules: str) -> "SchemaBuilder":
        """Add a field whose pipeline starts with 'required'."""
        return self.field(field_name, "required", *rules)

    def nullable(self, field_name: str, *rules: str) -> "SchemaBuilder":
        """Add a field whose pipeline starts with the 'nullable' marker."""
        return self.field(field_name, NULLABLE, *rules)

    def build(self) -> dict[str, list[str]]:
        """Build and return the schema."""
        return {field_name: list(rules) for field_name, rules in self.fields.items()}
