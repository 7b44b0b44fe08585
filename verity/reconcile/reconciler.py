"""
Collection membership checks.

Three independent questions over a checked sequence (the haystack) and a
set of expected elements (the needles):

    contains_at_least  - every needle occurs, duplicates counted (multiset)
    contains_exactly   - same elements in the same order
    contains_only      - no haystack element outside the needles

Elements are compared with ``==`` only; they need not be hashable.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from ..exceptions import MalformedInputError
from .models import CollectionVerdict


def is_collection(value: Any) -> bool:
    """Iterable that should be unwrapped; text is always a single element."""
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, bytearray))


def expected_values(*values: Any) -> list[Any] | None:
    """
    Normalize variadic expected values into the expected collection.

    A single argument that is itself a (non-text) collection *is* the
    expected collection. A single ``None`` means no collection was given.
    Anything else is the list of expected elements.

    Examples:
        expected_values(1, 2, 3)    # [1, 2, 3]
        expected_values([1, 2, 3])  # [1, 2, 3]
        expected_values("abc")      # ["abc"]
        expected_values(None)       # None
    """
    if len(values) == 1:
        single = values[0]
        if single is None:
            return None
        if is_collection(single):
            return list(single)
    return list(values)


def _haystack(haystack: Iterable[Any] | None) -> list[Any]:
    if haystack is None:
        raise MalformedInputError("No collection to check (got None)")
    if not isinstance(haystack, Iterable):
        raise MalformedInputError(f"{type(haystack).__name__} is not iterable")
    return list(haystack)


def _index_of(items: list[Any], element: Any) -> int:
    for index, item in enumerate(items):
        if item == element:
            return index
    return -1


def contains_at_least(haystack: Iterable[Any], *needles: Any) -> CollectionVerdict:
    """
    Check that every needle occurs in the haystack, in any order.

    Duplicate needles need as many equal haystack elements.

    Returns:
        ALL_FOUND, or MISSING_ELEMENTS with the unmatched needles in their
        original order
    """
    items = _haystack(haystack)
    expected = expected_values(*needles)
    if expected is None:
        raise MalformedInputError("No expected values given (got None)")

    remaining = list(expected)
    for element in items:
        if not remaining:
            break
        index = _index_of(remaining, element)
        if index >= 0:
            del remaining[index]

    if remaining:
        return CollectionVerdict.missing(remaining)
    return CollectionVerdict.all_found()


def contains_exactly(haystack: Iterable[Any], *needles: Any) -> CollectionVerdict:
    """
    Check that the haystack holds exactly the needles, in the same order.

    Returns:
        ALL_FOUND, or ORDER_MISMATCH at the first differing index. When one
        side runs out first, its value is None and ``exhausted`` names it.
        With no expected collection at all, ORDER_MISMATCH carries the whole
        haystack as ``actual`` and sets ``expected_absent``.
    """
    items = _haystack(haystack)
    expected = expected_values(*needles)
    if expected is None:
        return CollectionVerdict.order_mismatch(0, items, None, expected_absent=True)

    for index in range(max(len(items), len(expected))):
        if index >= len(items):
            return CollectionVerdict.order_mismatch(index, None, expected[index], exhausted="actual")
        if index >= len(expected):
            return CollectionVerdict.order_mismatch(index, items[index], None, exhausted="expected")
        if not items[index] == expected[index]:
            return CollectionVerdict.order_mismatch(index, items[index], expected[index])

    return CollectionVerdict.all_found()


def contains_only(haystack: Iterable[Any], *needles: Any) -> CollectionVerdict:
    """
    Check that every haystack element equals some needle.

    Multiplicity is not checked: ``[1, 1, 2]`` contains only ``1, 2``.

    Returns:
        ALL_FOUND, or UNEXPECTED_ELEMENTS listing each offending element
    """
    items = _haystack(haystack)
    expected = expected_values(*needles)
    if expected is None:
        raise MalformedInputError("No expected values given (got None)")

    unexpected = [element for element in items if _index_of(expected, element) < 0]

    if unexpected:
        return CollectionVerdict.unexpected(unexpected)
    return CollectionVerdict.all_found()
