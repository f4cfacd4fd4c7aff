"""
Pattern and format validators - regex, email, uuid, url and date.
"""

import re
from collections.abc import Mapping
from datetime import date, datetime
from re import Pattern
from typing import Any

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .base_validator import BaseValidator, stringify

EMAIL_PATTERN: Pattern = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
UUID_PATTERN: Pattern = re.compile(
    r"[0-9a-f]{8}-[0-9a-f]{4}-[1-5][0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}",
    re.IGNORECASE,
)

_url_adapter = TypeAdapter(AnyUrl)
_datetime_adapter = TypeAdapter(datetime)
_date_adapter = TypeAdapter(date)

# Common non-ISO shapes accepted by browsers and HTTP headers.
LOOSE_DATE_FORMATS = (
    "%Y/%m/%d",
    "%Y/%m/%d %H:%M:%S",
    "%m/%d/%Y",
    "%b %d %Y",
    "%b %d, %Y",
    "%B %d %Y",
    "%B %d, %Y",
    "%d %b %Y",
    "%a, %d %b %Y %H:%M:%S GMT",
)


class RegexValidator(BaseValidator):
    """
    Validates that a field value matches a regular expression pattern.

    Parameters: [pattern]. The pattern is searched anywhere in the string form
    of the value; anchor it with ^...$ for a full match. A pattern that does
    not compile fails the value instead of raising.
    """

    rule_type = "regex"

    def __init__(self, field_name: str | None, params: list[str] | None = None):
        super().__init__(field_name, params)

        self.pattern_text = self.param(0) or ""
        try:
            self.pattern: Pattern | None = re.compile(self.pattern_text)
        except re.error:
            self.pattern = None

    def validate(self, value: Any, record: Mapping[str, Any]) -> None:
        """
        Validate that the value matches the regex pattern.

        Args:
            value: The field value to validate
            record: The entire record

        Raises:
            ValidationError: If the pattern is invalid or the value doesn't match
        """
        if self.pattern is None:
            raise self.fail("patrón de regex inválido")

        if not self.pattern.search(stringify(value)):
            raise self.fail(f"no coincide con {self.pattern_text}")


class EmailValidator(BaseValidator):
    rule_type = "email"

    def validate(self, value: Any, record: Mapping[str, Any]) -> None:
        if not EMAIL_PATTERN.fullmatch(stringify(value)):
            raise self.fail("formato de email inválido")


class UuidValidator(BaseValidator):
    """Accepts RFC 4122 shaped UUIDs, versions 1 to 5, in either case."""

    rule_type = "uuid"

    def validate(self, value: Any, record: Mapping[str, Any]) -> None:
        if not UUID_PATTERN.fullmatch(stringify(value)):
            raise self.fail("UUID inválido")


class UrlValidator(BaseValidator):
    """Accepts absolute URLs with any scheme (http, https, ftp, mailto...)."""

    rule_type = "url"

    def validate(self, value: Any, record: Mapping[str, Any]) -> None:
        if not isinstance(value, str):
            raise self.fail("URL inválida")
        try:
            _url_adapter.validate_python(value)
        except PydanticValidationError:
            raise self.fail("URL inválida")


class DateValidator(BaseValidator):
    """
    Accepts ISO 8601 dates and datetimes ("2025-11-17", "2025-11-17T08:30:00Z"),
    numeric Unix timestamps, and the LOOSE_DATE_FORMATS shapes
    ("2025/11/17", "Nov 17 2025", "Mon, 17 Nov 2025 08:30:00 GMT").

    Free-form text that only a browser's heuristic parser would read, such as
    "17 November 2025 8am", is rejected.
    """

    rule_type = "date"

    def validate(self, value: Any, record: Mapping[str, Any]) -> None:
        if value is None or isinstance(value, bool):
            raise self.fail("fecha inválida")
        if isinstance(value, datetime | date):
            return

        for adapter in (_datetime_adapter, _date_adapter):
            try:
                adapter.validate_python(value)
                return
            except PydanticValidationError:
                continue

        if isinstance(value, str):
            for fmt in LOOSE_DATE_FORMATS:
                try:
                    datetime.strptime(value.strip(), fmt)
                    return
                except ValueError:
                    continue
        raise self.fail("fecha inválida")
