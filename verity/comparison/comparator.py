"""
Structural equality comparator.

Walks two object graphs member by member and reports the first place
where they differ. Values whose type defines its own ``__eq__`` are
compared with it; other objects are walked recursively.
"""

from __future__ import annotations

import logging
from typing import Any

from ..introspection import MemberResolver, NameRecognizer, ObjectIntrospector
from ..introspection.names import DEFAULT_RECOGNIZER
from .models import Verdict

logger = logging.getLogger(__name__)


def has_value_equality(value: Any) -> bool:
    """Whether the value's type overrides identity-based ``__eq__``."""
    return type(value).__eq__ is not object.__eq__


class StructuralComparator:
    """
    Compares two object graphs field by field.

    The comparator has no polarity: it always answers "where do these
    differ?" and leaves the interpretation to its caller.

    Example:
        comparator = StructuralComparator()
        verdict = comparator.compare(expected=Person("Ann", Address("Oslo")),
                                     actual=person)
        if not verdict.matched:
            print(verdict.dotted_path)  # e.g. "address.city"
    """

    def __init__(
        self,
        recognizer: NameRecognizer | None = None,
        detect_cycles: bool = True,
    ):
        self.recognizer = recognizer or DEFAULT_RECOGNIZER
        self.introspector = ObjectIntrospector(self.recognizer)
        self.resolver = MemberResolver(self.introspector, self.recognizer)
        self.detect_cycles = detect_cycles

    def compare(self, expected: Any, actual: Any, path: tuple[str, ...] = ()) -> Verdict:
        """
        Compare ``actual`` against ``expected``.

        Args:
            expected: Reference object graph
            actual: Object graph under test
            path: Labels of the members leading to these values

        Returns:
            Verdict.match(), or the first mismatch / missing member found
        """
        return self._compare_node(expected, actual, tuple(path), set())

    def _compare_node(
        self,
        expected: Any,
        actual: Any,
        path: tuple[str, ...],
        active: set[tuple[int, int]],
    ) -> Verdict:
        if expected is None:
            if actual is None:
                return Verdict.match()
            return Verdict.mismatch(path, actual, None, reason="expected_none")

        if actual is None:
            return Verdict.mismatch(path, None, expected, reason="actual_none")

        if not self.introspector.has_state(actual):
            if has_value_equality(expected):
                if expected == actual:
                    return Verdict.match()
                return Verdict.mismatch(path, actual, expected)
            if expected is actual:
                return Verdict.match()
            return Verdict.mismatch(path, actual, expected, reason="not_same_instance")

        key = (id(expected), id(actual))
        if self.detect_cycles:
            if key in active:
                logger.debug(f"Cycle detected at {'.'.join(path) or '<root>'}")
                return Verdict.cycle_detected(path)
            active.add(key)

        try:
            return self._compare_members(expected, actual, path, active)
        finally:
            active.discard(key)

    def _compare_members(
        self,
        expected: Any,
        actual: Any,
        path: tuple[str, ...],
        active: set[tuple[int, int]],
    ) -> Verdict:
        expected_type = type(expected)

        for member in self.introspector.members(actual):
            member_path = path + (member.label,)
            counterpart = self.resolver.resolve(expected, expected_type, member.raw_name)
            if counterpart is None:
                return Verdict.missing_member(member_path, member.label)

            actual_value = member.get_value(actual)
            expected_value = counterpart.get_value(expected)

            if expected_value is None:
                if actual_value is not None:
                    return Verdict.mismatch(member_path, actual_value, None, reason="expected_none")
                continue

            if has_value_equality(expected_value):
                if not expected_value == actual_value:
                    return Verdict.mismatch(member_path, actual_value, expected_value)
                continue

            logger.debug(f"Recursing into {'.'.join(member_path)}")
            verdict = self._compare_node(expected_value, actual_value, member_path, active)
            if not verdict.matched:
                return verdict

        return Verdict.match()


def compare(expected: Any, actual: Any) -> Verdict:
    """Compare two object graphs with default settings."""
    return StructuralComparator().compare(expected, actual)
