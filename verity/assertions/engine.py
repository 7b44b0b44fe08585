"""
Check engine.

This module turns comparison and collection verdicts into pass/fail
results. Negation is applied in exactly one place, after the verdict has
been computed, so the engines underneath stay polarity-free.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from functools import lru_cache
from numbers import Number
from typing import Any

from jsonpath_ng import parse as parse_jsonpath
from jsonpath_ng.exceptions import JSONPathError
from jsonpath_ng.jsonpath import JSONPath

from ..comparison import StructuralComparator, VerdictKind
from ..config import CompareOptions
from ..exceptions import CheckFailedError, MalformedInputError
from ..introspection import create_recognizer
from ..reconcile import (
    CollectionVerdict,
    CollectionVerdictKind,
    contains_at_least,
    contains_exactly,
    contains_only,
    expected_values,
)
from ..reconcile.reconciler import is_collection
from .models import CheckResult, format_item_count

logger = logging.getLogger(__name__)


class CheckEngine:
    """
    Engine for running checks on values and object graphs.

    Every check computes a fact ("the fields match", "the collection holds
    these values") and hands it to ``_interpret``, which is the single
    place where the negation flag is applied.

    Example:
        engine = CheckEngine()
        result = engine.has_fields_with_same_values(actual, expected)
        result = engine.contains([1, 2, 2, 3], 2, 2)
        result = engine.contains(data, 1, 2, path="$.results[*].id")

        # "must differ" direction
        result = engine.inverted().has_fields_with_same_values(actual, expected)
    """

    def __init__(self, options: CompareOptions | None = None, negated: bool = False):
        self.options = options or CompareOptions()
        self.negated = negated
        self.comparator = StructuralComparator(
            recognizer=create_recognizer(self.options.recognizer.value),
            detect_cycles=self.options.detect_cycles,
        )

    def inverted(self) -> CheckEngine:
        """Return an engine with the negation flag flipped."""
        return CheckEngine(self.options, negated=not self.negated)

    # ─────────────────────────────────────────────────────────────────────
    # Structural checks
    # ─────────────────────────────────────────────────────────────────────

    def has_fields_with_same_values(
        self, actual: Any, expected: Any, path: str | None = None
    ) -> CheckResult:
        """
        Check that ``actual`` has the same field values as ``expected``.

        The comparison walks both object graphs member by member. Fields
        whose values define ``__eq__`` are compared with it; other objects
        are walked recursively.

        Args:
            actual: The value under test
            expected: The reference value
            path: Optional JSONPath selecting the value under test

        Returns:
            CheckResult indicating pass/fail
        """
        actual, error = self._select_one(actual, path)
        if error:
            return error

        verdict = self.comparator.compare(expected, actual)
        member_path = _join_path(path, verdict.dotted_path)

        if verdict.kind == VerdictKind.MISSING_MEMBER:
            fails_message = f"The checked value's field '{verdict.dotted_path}' is absent from the expected value"
            details = {"member": verdict.member_label}
        elif verdict.kind == VerdictKind.CYCLE_DETECTED:
            fails_message = f"Cyclic structure detected at '{verdict.dotted_path or '<root>'}'"
            details = {"reason": verdict.reason}
        elif verdict.path:
            fails_message = f"The checked value's field '{verdict.dotted_path}' does not have the expected value"
            details = {"reason": verdict.reason}
        else:
            fails_message = "The checked value does not have the expected value"
            details = {"reason": verdict.reason}

        return self._interpret(
            verdict.matched,
            holds_message="The checked value has the same field values as the expected one",
            fails_message=fails_message,
            path=member_path,
            expected=verdict.expected if verdict.kind == VerdictKind.MISMATCH else expected,
            actual=verdict.actual if verdict.kind == VerdictKind.MISMATCH else actual,
            details=details,
            verdict=verdict,
        )

    def has_not_fields_with_same_values(
        self, actual: Any, expected: Any, path: str | None = None
    ) -> CheckResult:
        """Check that at least one field of ``actual`` differs from ``expected``."""
        return self.inverted().has_fields_with_same_values(actual, expected, path=path)

    # ─────────────────────────────────────────────────────────────────────
    # Collection checks
    # ─────────────────────────────────────────────────────────────────────

    def contains(self, actual: Any, *expected: Any, path: str | None = None) -> CheckResult:
        """
        Check that a collection contains the expected values, in any order.

        Duplicated expected values must be matched by as many elements.
        A single collection argument is used as the expected values;
        a single string is one expected value.
        """
        return self._collection_check(
            actual, expected, path,
            operation=contains_at_least,
            holds_message="The collection contains the expected value(s)",
        )

    def contains_exactly(self, actual: Any, *expected: Any, path: str | None = None) -> CheckResult:
        """Check that a collection holds exactly the expected values, in order."""
        return self._collection_check(
            actual, expected, path,
            operation=contains_exactly,
            holds_message="The collection contains exactly the expected values",
        )

    def contains_only(self, actual: Any, *expected: Any, path: str | None = None) -> CheckResult:
        """Check that every element of a collection is one of the expected values."""
        return self._collection_check(
            actual, expected, path,
            operation=contains_only,
            holds_message="The collection contains only the expected value(s)",
        )

    def has_size(self, actual: Any, expected_size: int, path: str | None = None) -> CheckResult:
        """Check that a collection has exactly ``expected_size`` items."""
        items, error = self._select_many(actual, path)
        if error:
            return error

        count = len(items)
        return self._interpret(
            count == expected_size,
            holds_message=f"The collection has {format_item_count(expected_size)}",
            fails_message=f"The collection has {format_item_count(count)} instead of {expected_size}",
            path=path,
            expected=f"size {expected_size}",
            actual=f"size {count}",
        )

    def is_empty(self, actual: Any, path: str | None = None) -> CheckResult:
        """Check that a collection has no items."""
        items, error = self._select_many(actual, path)
        if error:
            return error

        return self._interpret(
            not items,
            holds_message="The collection is empty",
            fails_message="The collection is not empty",
            path=path,
            expected="empty",
            actual=items or None,
        )

    # ─────────────────────────────────────────────────────────────────────
    # Object checks
    # ─────────────────────────────────────────────────────────────────────

    def is_equal_to(self, actual: Any, expected: Any, path: str | None = None) -> CheckResult:
        """Check that ``actual == expected``."""
        actual, error = self._select_one(actual, path)
        if error:
            return error

        return self._interpret(
            actual == expected,
            holds_message="The checked value is equal to the expected one",
            fails_message="The checked value is different from the expected one",
            path=path,
            expected=expected,
            actual=actual,
            details=_type_hint(expected, actual),
        )

    def is_not_equal_to(self, actual: Any, expected: Any, path: str | None = None) -> CheckResult:
        """Check that ``actual != expected``."""
        return self.inverted().is_equal_to(actual, expected, path=path)

    def is_null(self, actual: Any, path: str | None = None) -> CheckResult:
        """Check that the value is None."""
        actual, error = self._select_one(actual, path)
        if error:
            return error

        return self._interpret(
            actual is None,
            holds_message="The checked value is null",
            fails_message="The checked value must be null",
            path=path,
            actual=actual,
        )

    def is_not_null(self, actual: Any, path: str | None = None) -> CheckResult:
        """Check that the value is not None."""
        return self.inverted().is_null(actual, path=path)

    def is_same_reference(self, actual: Any, expected: Any) -> CheckResult:
        """Check that both names refer to the same instance."""
        return self._interpret(
            actual is expected,
            holds_message="The checked value is the same instance as the expected one",
            fails_message="The checked value must be the same instance as the expected one",
            expected=expected,
            actual=actual,
        )

    def is_distinct_from(self, actual: Any, comparand: Any) -> CheckResult:
        """Check that ``actual`` is a different instance than ``comparand``."""
        return self.inverted().is_same_reference(actual, comparand)

    def is_instance_of(self, actual: Any, expected_type: type) -> CheckResult:
        """Check that the value's type is exactly ``expected_type``."""
        actual_type = type(actual)
        return self._interpret(
            actual_type is expected_type,
            holds_message=f"The checked value is an instance of {expected_type.__name__}",
            fails_message=f"The checked value is of type {actual_type.__name__}, not {expected_type.__name__}",
            expected=expected_type.__name__,
            actual=actual_type.__name__,
        )

    def inherits_from(self, actual: Any, base_type: type) -> CheckResult:
        """Check that the value's type is ``base_type`` or derives from it."""
        actual_type = type(actual)
        return self._interpret(
            isinstance(actual, base_type),
            holds_message=f"The checked value's type is part of the {base_type.__name__} hierarchy",
            fails_message=f"The checked value's type {actual_type.__name__} does not derive from {base_type.__name__}",
            expected=base_type.__name__,
            actual=actual_type.__name__,
        )

    # ─────────────────────────────────────────────────────────────────────
    # Number checks
    # ─────────────────────────────────────────────────────────────────────

    def is_zero(self, actual: Any) -> CheckResult:
        """Check that a number is zero."""
        return self._number_check(actual, lambda n: n == 0, "is zero", "is not zero")

    def is_not_zero(self, actual: Any) -> CheckResult:
        """Check that a number is not zero."""
        return self.inverted().is_zero(actual)

    def is_positive(self, actual: Any) -> CheckResult:
        """Check that a number is strictly positive."""
        return self._number_check(actual, lambda n: n > 0, "is strictly positive", "is not strictly positive")

    def is_less_than(self, actual: Any, comparand: Any) -> CheckResult:
        """Check that a number is strictly less than ``comparand``."""
        return self._number_check(
            actual, lambda n: n < comparand,
            f"is less than {comparand!r}", f"is not less than {comparand!r}",
            expected=f"< {comparand!r}",
        )

    def is_greater_than(self, actual: Any, comparand: Any) -> CheckResult:
        """Check that a number is strictly greater than ``comparand``."""
        return self._number_check(
            actual, lambda n: n > comparand,
            f"is greater than {comparand!r}", f"is not greater than {comparand!r}",
            expected=f"> {comparand!r}",
        )

    # ─────────────────────────────────────────────────────────────────────
    # Internals
    # ─────────────────────────────────────────────────────────────────────

    def _interpret(
        self,
        holds: bool,
        holds_message: str,
        fails_message: str,
        path: str | None = None,
        expected: Any = None,
        actual: Any = None,
        details: dict[str, Any] | None = None,
        verdict: Any = None,
    ) -> CheckResult:
        """Turn a computed fact into a result, applying the negation flag."""
        if holds != self.negated:
            result = CheckResult.passed_result(
                message=holds_message if holds else fails_message,
                path=path,
                actual=actual,
                verdict=verdict,
            )
        elif holds:
            result = CheckResult.failed_result(
                message=f"{holds_message}, whereas it must not",
                path=path,
                expected=f"different from {expected!r}" if expected is not None else None,
                actual=actual,
                verdict=verdict,
            )
        else:
            result = CheckResult.failed_result(
                message=fails_message,
                path=path,
                expected=expected,
                actual=actual,
                details=details,
                verdict=verdict,
            )

        result.max_value_length = self.options.max_value_length
        return result

    def _collection_check(
        self,
        actual: Any,
        expected: tuple[Any, ...],
        path: str | None,
        operation: Any,
        holds_message: str,
    ) -> CheckResult:
        items, error = self._select_many(actual, path)
        if error:
            return error

        try:
            verdict: CollectionVerdict = operation(items, *expected)
        except MalformedInputError as e:
            return CheckResult.error_result(
                message="Cannot check collection",
                path=path,
                details={"error": str(e)},
            )

        needles = expected_values(*expected)
        return self._interpret(
            verdict.matched,
            holds_message=holds_message,
            fails_message=_describe_collection_verdict(verdict, items),
            path=path,
            expected=needles,
            actual=items,
            details=_collection_details(verdict, items, needles),
            verdict=verdict,
        )

    def _number_check(
        self,
        actual: Any,
        predicate: Callable[[Any], bool],
        holds_text: str,
        fails_text: str,
        expected: Any = None,
    ) -> CheckResult:
        if not isinstance(actual, Number):
            return CheckResult.error_result(
                message=f"Cannot run a number check on {type(actual).__name__}",
                details={"type": type(actual).__name__},
            )
        try:
            holds = predicate(actual)
        except TypeError as e:
            # complex numbers are unordered; comparands may not be numbers
            return CheckResult.error_result(
                message=f"Cannot run a number check on {type(actual).__name__}",
                details={"error": str(e)},
            )
        return self._interpret(
            holds,
            holds_message=f"The checked value {holds_text}",
            fails_message=f"The checked value {fails_text}",
            expected=expected,
            actual=actual,
        )

    def _select_one(self, data: Any, path: str | None) -> tuple[Any, CheckResult | None]:
        """Return the first JSONPath match, or ``data`` itself when no path is given."""
        if path is None:
            return data, None

        matches, error = self._evaluate_path(data, path)
        if error:
            return None, error

        if not matches:
            return None, CheckResult.failed_result(
                message="Path does not exist",
                path=path,
                actual="<path not found>",
            )
        return matches[0].value, None

    def _select_many(self, data: Any, path: str | None) -> tuple[list[Any], CheckResult | None]:
        """
        Return the collection to check.

        Without a path, ``data`` itself. With a path, a single match that is
        a collection is used as-is; otherwise every match value is an item.
        """
        if path is None:
            if data is None or not (is_collection(data) or isinstance(data, str)):
                return [], CheckResult.error_result(
                    message=f"Cannot check items of {type(data).__name__}",
                    details={"type": type(data).__name__},
                )
            return list(data), None

        matches, error = self._evaluate_path(data, path)
        if error:
            return [], error

        if len(matches) == 1 and is_collection(matches[0].value):
            return list(matches[0].value), None
        return [m.value for m in matches], None

    def _evaluate_path(self, data: Any, path: str) -> tuple[list, CheckResult | None]:
        """Run a JSONPath query, returning (matches, None) or ([], error result)."""
        try:
            query = _compile_path(path)
        except JSONPathError as e:
            return [], CheckResult.error_result(
                message="Invalid JSONPath expression",
                path=path,
                details={"error": str(e)},
            )

        try:
            return query.find(data), None
        except Exception as e:
            logger.debug(f"JSONPath {path} could not walk {type(data).__name__}: {e}")
            return [], CheckResult.error_result(
                message=f"JSONPath cannot be applied to {type(data).__name__}",
                path=path,
                details={"error": f"{type(e).__name__}: {e}"},
            )


@lru_cache(maxsize=128)
def _compile_path(path: str) -> JSONPath:
    return parse_jsonpath(path)


def _join_path(json_path: str | None, member_path: str) -> str | None:
    if json_path and member_path:
        return f"{json_path}.{member_path}"
    return json_path or member_path or None


def _describe_collection_verdict(verdict: CollectionVerdict, items: list[Any]) -> str:
    if verdict.kind == CollectionVerdictKind.MISSING_ELEMENTS:
        return "The collection does not contain the expected value(s)"
    if verdict.kind == CollectionVerdictKind.UNEXPECTED_ELEMENTS:
        return "The collection does not contain only the expected value(s), it also contains other values"
    if verdict.expected_absent:
        return f"Found {format_item_count(len(items))} instead of the expected [null] (0 item)"
    return f"The collection does not contain exactly the expected values (first difference at index {verdict.index})"


def _collection_details(
    verdict: CollectionVerdict, items: list[Any], needles: list[Any] | None
) -> dict[str, Any]:
    if verdict.kind == CollectionVerdictKind.MISSING_ELEMENTS:
        return {"missing": verdict.elements}
    if verdict.kind == CollectionVerdictKind.UNEXPECTED_ELEMENTS:
        return {"unexpected": verdict.elements}
    if verdict.kind == CollectionVerdictKind.ORDER_MISMATCH:
        details: dict[str, Any] = {
            "index": verdict.index,
            "found": format_item_count(len(items)),
        }
        if needles is not None:
            details["expected_count"] = format_item_count(len(needles))
        if verdict.exhausted:
            details["exhausted"] = verdict.exhausted
        return details
    return {}


def _type_hint(expected: Any, actual: Any) -> dict[str, Any]:
    """Point out a type difference, which is often the real cause of inequality."""
    if expected is None or actual is None or type(expected) is type(actual):
        return {}
    return {"hint": f"{type(actual).__name__} value checked against {type(expected).__name__}"}


def require(result: CheckResult) -> CheckResult:
    """
    Raise if a check did not pass.

    Raises:
        CheckFailedError: If the result is FAILED or ERROR
    """
    if not result.passed:
        raise CheckFailedError(result)
    return result


# Convenience functions for quick checks
def assert_fields_match(actual: Any, expected: Any) -> CheckResult:
    """Check that two object graphs have the same field values."""
    return CheckEngine().has_fields_with_same_values(actual, expected)


def assert_contains(actual: Any, *expected: Any) -> CheckResult:
    """Check that a collection contains the expected values, in any order."""
    return CheckEngine().contains(actual, *expected)


def assert_contains_exactly(actual: Any, *expected: Any) -> CheckResult:
    """Check that a collection holds exactly the expected values, in order."""
    return CheckEngine().contains_exactly(actual, *expected)


def assert_contains_only(actual: Any, *expected: Any) -> CheckResult:
    """Check that a collection holds nothing but the expected values."""
    return CheckEngine().contains_only(actual, *expected)
