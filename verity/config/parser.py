"""
Options parser.

Converts validated YAML data into a CompareOptions instance.
"""

from __future__ import annotations

from typing import Any

from .models import CompareOptions, RecognizerType


class OptionsParser:
    """Parses validated YAML into typed options."""

    def __init__(self, data: dict[str, Any]):
        self.data = data

    def parse(self) -> CompareOptions:
        compare = self.data.get("compare") or {}
        report = self.data.get("report") or {}
        options = CompareOptions()

        # Explicit nulls keep the default
        if compare.get("recognizer") is not None:
            options.recognizer = RecognizerType(compare["recognizer"])
        if compare.get("detect_cycles") is not None:
            options.detect_cycles = compare["detect_cycles"]
        if report.get("max_value_length") is not None:
            options.max_value_length = report["max_value_length"]

        return options
