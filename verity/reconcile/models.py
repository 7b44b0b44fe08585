"""
Verdict models for collection membership checks.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class CollectionVerdictKind(str, Enum):
    """Kind of collection check outcome."""
    ALL_FOUND = "all_found"
    MISSING_ELEMENTS = "missing_elements"
    UNEXPECTED_ELEMENTS = "unexpected_elements"
    ORDER_MISMATCH = "order_mismatch"


@dataclass(frozen=True)
class CollectionVerdict:
    """
    Outcome of one collection check.

    Attributes:
        kind: What was found
        elements: Missing needles or unexpected haystack elements
        index: First differing position (ORDER_MISMATCH)
        actual: Haystack element at ``index``, None once exhausted
        expected: Needle at ``index``, None once exhausted
        expected_absent: True when no expected collection was given at all
        exhausted: "actual" or "expected" when that side ran out first
    """
    kind: CollectionVerdictKind
    elements: list[Any] = field(default_factory=list)
    index: int | None = None
    actual: Any = None
    expected: Any = None
    expected_absent: bool = False
    exhausted: str | None = None

    @property
    def matched(self) -> bool:
        return self.kind == CollectionVerdictKind.ALL_FOUND

    @classmethod
    def all_found(cls) -> CollectionVerdict:
        return cls(CollectionVerdictKind.ALL_FOUND)

    @classmethod
    def missing(cls, elements: list[Any]) -> CollectionVerdict:
        return cls(CollectionVerdictKind.MISSING_ELEMENTS, elements=list(elements))

    @classmethod
    def unexpected(cls, elements: list[Any]) -> CollectionVerdict:
        return cls(CollectionVerdictKind.UNEXPECTED_ELEMENTS, elements=list(elements))

    @classmethod
    def order_mismatch(
        cls,
        index: int,
        actual: Any,
        expected: Any,
        expected_absent: bool = False,
        exhausted: str | None = None,
    ) -> CollectionVerdict:
        return cls(
            CollectionVerdictKind.ORDER_MISMATCH,
            index=index,
            actual=actual,
            expected=expected,
            expected_absent=expected_absent,
            exhausted=exhausted,
        )
