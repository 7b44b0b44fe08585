"""
Validation for verity options files.

Checks raw parsed YAML against the options schema and reports errors
with the path of the offending key and a suggestion.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .models import RecognizerType


@dataclass
class ValidationError:
    """A single validation error with context."""
    path: str  # e.g., "compare.recognizer"
    message: str
    value: Any = None
    suggestion: str | None = None

    def __str__(self) -> str:
        parts = [f"{self.path}: {self.message}"]
        if self.value is not None:
            parts.append(f"   Got: {self.value!r}")
        if self.suggestion:
            parts.append(f"   Hint: {self.suggestion}")
        return "\n".join(parts)


@dataclass
class ValidationResult:
    """Result of options validation."""
    errors: list[ValidationError] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return len(self.errors) == 0

    def add_error(
        self,
        path: str,
        message: str,
        value: Any = None,
        suggestion: str | None = None
    ) -> None:
        self.errors.append(ValidationError(path, message, value, suggestion))

    def __str__(self) -> str:
        if self.is_valid:
            return "Options validation passed"
        lines = [f"Options validation failed with {len(self.errors)} error(s):\n"]
        lines.extend(str(e) for e in self.errors)
        return "\n".join(lines)


class OptionsValidator:
    """Validates raw parsed YAML against the options schema."""

    REQUIRED_TOP_LEVEL = {"version"}
    OPTIONAL_TOP_LEVEL = {"compare", "report"}
    COMPARE_KEYS = {"recognizer", "detect_cycles"}
    REPORT_KEYS = {"max_value_length"}
    VALID_RECOGNIZERS = {r.value for r in RecognizerType}

    def __init__(self, data: dict[str, Any]):
        self.data = data
        self.result = ValidationResult()

    def validate(self) -> ValidationResult:
        """Run all validation checks and return result."""
        self._validate_top_level()
        if not self.result.is_valid:
            return self.result

        self._validate_version()
        self._validate_compare()
        self._validate_report()

        return self.result

    def _validate_top_level(self) -> None:
        keys = set(self.data.keys())
        missing = self.REQUIRED_TOP_LEVEL - keys
        unknown = keys - self.REQUIRED_TOP_LEVEL - self.OPTIONAL_TOP_LEVEL

        for key in sorted(missing):
            self.result.add_error(
                key,
                f"Required field '{key}' is missing",
                suggestion=f"Add '{key}:' to your options file"
            )

        for key in sorted(unknown, key=str):
            self.result.add_error(
                str(key),
                f"Unknown top-level field '{key}'",
                suggestion=f"Valid fields are: {', '.join(sorted(self.REQUIRED_TOP_LEVEL | self.OPTIONAL_TOP_LEVEL))}"
            )

    def _validate_version(self) -> None:
        version = self.data.get("version")
        if not isinstance(version, int) or isinstance(version, bool):
            self.result.add_error(
                "version",
                "Must be an integer",
                value=version,
                suggestion="Use 'version: 1'"
            )
        elif version != 1:
            self.result.add_error(
                "version",
                "Unsupported version",
                value=version,
                suggestion="Only version 1 is supported"
            )

    def _validate_section(self, name: str, allowed: set[str]) -> dict[str, Any] | None:
        section = self.data.get(name)
        if section is None:
            return None
        if not isinstance(section, dict):
            self.result.add_error(name, "Must be an object", value=section)
            return None

        for key in sorted(set(section) - allowed, key=str):
            self.result.add_error(
                f"{name}.{key}",
                "Unknown field",
                suggestion=f"Valid fields are: {', '.join(sorted(allowed))}"
            )
        return section

    def _validate_compare(self) -> None:
        compare = self._validate_section("compare", self.COMPARE_KEYS)
        if compare is None:
            return

        recognizer = compare.get("recognizer")
        if recognizer is not None and recognizer not in self.VALID_RECOGNIZERS:
            self.result.add_error(
                "compare.recognizer",
                "Invalid recognizer",
                value=recognizer,
                suggestion=f"Valid recognizers: {', '.join(sorted(self.VALID_RECOGNIZERS))}"
            )

        detect_cycles = compare.get("detect_cycles")
        if detect_cycles is not None and not isinstance(detect_cycles, bool):
            self.result.add_error(
                "compare.detect_cycles",
                "Must be a boolean",
                value=detect_cycles,
                suggestion="Use 'true' or 'false'"
            )

    def _validate_report(self) -> None:
        report = self._validate_section("report", self.REPORT_KEYS)
        if report is None:
            return

        max_length = report.get("max_value_length")
        if max_length is None:
            return
        if not isinstance(max_length, int) or isinstance(max_length, bool):
            self.result.add_error(
                "report.max_value_length",
                "Must be an integer",
                value=max_length
            )
        elif max_length < 10:
            self.result.add_error(
                "report.max_value_length",
                "Must be >= 10",
                value=max_length
            )
