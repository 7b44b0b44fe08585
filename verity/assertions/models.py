"""
Check result models.

A CheckResult is what callers see: a status, a message and the values
involved. When it was derived from a comparison or collection verdict,
the verdict is kept and drives the failure report.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..comparison import Verdict, VerdictKind
from ..reconcile import CollectionVerdict, CollectionVerdictKind

# Detail keys that restate what the verdict already reports
_VERDICT_DETAIL_KEYS = {"member", "reason", "missing", "unexpected", "index", "exhausted"}


class CheckStatus(str, Enum):
    """Status of a check."""
    PASSED = "passed"
    FAILED = "failed"
    ERROR = "error"  # check could not be evaluated


@dataclass
class CheckResult:
    """
    Result of a single check.

    Attributes:
        status: PASSED, FAILED or ERROR
        message: Sentence describing the outcome
        path: Member path ("address.city") or JSONPath the result refers to
        expected: Reference value, when the check has one
        actual: Value under test
        details: Extra facts for the report (missing elements, hints, ...)
        verdict: Comparison or collection verdict behind the result
        max_value_length: Values longer than this are cut in the report
    """
    status: CheckStatus
    message: str
    path: str | None = None
    expected: Any = None
    actual: Any = None
    details: dict[str, Any] = field(default_factory=dict)
    verdict: Verdict | CollectionVerdict | None = field(default=None, repr=False)
    max_value_length: int = field(default=100, repr=False)

    @property
    def passed(self) -> bool:
        return self.status == CheckStatus.PASSED

    @property
    def failed(self) -> bool:
        return self.status == CheckStatus.FAILED

    def __bool__(self) -> bool:
        return self.passed

    def __str__(self) -> str:
        if self.passed:
            return f"PASS: {self.message}"

        rows = [f"{self.status.value.upper()}: {self.message}"]
        rows.extend(f"   {label}: {text}" for label, text in self.report_rows())
        return "\n".join(rows)

    def report_rows(self) -> list[tuple[str, str]]:
        """Labelled lines explaining a non-passing result."""
        limit = self.max_value_length
        rows: list[tuple[str, str]] = []

        if self.path:
            rows.append(("Path", self.path))
        if self.expected is not None:
            rows.append(("Expected", render_value(self.expected, limit)))
        if self.actual is not None:
            rows.append(("Actual", render_value(self.actual, limit)))

        rows.extend(_verdict_rows(self.verdict, limit))

        for key, value in self.details.items():
            if self.verdict is not None and key in _VERDICT_DETAIL_KEYS:
                continue
            rows.append((key, render_value(value, limit)))
        return rows

    @classmethod
    def passed_result(
        cls,
        message: str,
        path: str | None = None,
        actual: Any = None,
        verdict: Verdict | CollectionVerdict | None = None,
    ) -> CheckResult:
        return cls(CheckStatus.PASSED, message, path=path, actual=actual, verdict=verdict)

    @classmethod
    def failed_result(
        cls,
        message: str,
        path: str | None = None,
        expected: Any = None,
        actual: Any = None,
        details: dict[str, Any] | None = None,
        verdict: Verdict | CollectionVerdict | None = None,
    ) -> CheckResult:
        return cls(
            CheckStatus.FAILED,
            message,
            path=path,
            expected=expected,
            actual=actual,
            details=details or {},
            verdict=verdict,
        )

    @classmethod
    def error_result(
        cls,
        message: str,
        path: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> CheckResult:
        """Result for a check that could not be evaluated."""
        return cls(CheckStatus.ERROR, message, path=path, details=details or {})


def _verdict_rows(
    verdict: Verdict | CollectionVerdict | None, limit: int
) -> list[tuple[str, str]]:
    if verdict is None or verdict.matched:
        return []

    if isinstance(verdict, Verdict):
        if verdict.kind == VerdictKind.MISSING_MEMBER:
            return [("Missing member", verdict.member_label)]
        if verdict.kind == VerdictKind.CYCLE_DETECTED:
            return [("Cycle at", verdict.dotted_path or "<root>")]
        return [("Reason", (verdict.reason or "not_equal").replace("_", " "))]

    if verdict.kind == CollectionVerdictKind.MISSING_ELEMENTS:
        return [("Missing", render_value(verdict.elements, limit))]
    if verdict.kind == CollectionVerdictKind.UNEXPECTED_ELEMENTS:
        return [("Unexpected", render_value(verdict.elements, limit))]
    if verdict.expected_absent:
        return [("Expected collection", "null")]

    rows = [("First difference", f"index {verdict.index}")]
    if verdict.exhausted:
        rows.append(("Ran out", verdict.exhausted))
    return rows


def render_value(value: Any, max_length: int = 100) -> str:
    """Render a value for a report, cut to ``max_length`` characters."""
    if value is None:
        text = "null"
    elif isinstance(value, (list, dict)):
        try:
            text = json.dumps(value, ensure_ascii=False, default=repr)
        except (TypeError, ValueError):
            text = repr(value)
    else:
        text = repr(value)

    if len(text) <= max_length:
        return text
    return text[: max_length - 3] + "..."


def format_item_count(count: int) -> str:
    """Describe a number of items: "1 item", "3 items"."""
    return f"{count} item" if count <= 1 else f"{count} items"
