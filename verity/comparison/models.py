"""
Verdict models for structural comparison.

A verdict is the outcome of comparing two object graphs. It is a plain
value: it says where the graphs first differ, not whether that is a failure.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class VerdictKind(str, Enum):
    """Kind of structural comparison outcome."""
    MATCH = "match"
    MISMATCH = "mismatch"
    MISSING_MEMBER = "missing_member"
    CYCLE_DETECTED = "cycle_detected"


@dataclass(frozen=True)
class Verdict:
    """
    Outcome of one top-level structural comparison.

    Attributes:
        kind: What was found
        path: Member labels from the root to the offending member
        actual: Value found on the checked side (MISMATCH)
        expected: Value found on the expected side (MISMATCH)
        reason: Short machine-friendly reason, e.g. "not_equal"
        member_label: Label of the member with no counterpart (MISSING_MEMBER)
    """
    kind: VerdictKind
    path: tuple[str, ...] = ()
    actual: Any = None
    expected: Any = None
    reason: str | None = None
    member_label: str | None = None

    @property
    def matched(self) -> bool:
        return self.kind == VerdictKind.MATCH

    @property
    def dotted_path(self) -> str:
        """Path rendered as ``address.city``; empty for the root."""
        return ".".join(self.path)

    @classmethod
    def match(cls) -> Verdict:
        return cls(VerdictKind.MATCH)

    @classmethod
    def mismatch(
        cls, path: tuple[str, ...], actual: Any, expected: Any, reason: str = "not_equal"
    ) -> Verdict:
        return cls(VerdictKind.MISMATCH, path=path, actual=actual, expected=expected, reason=reason)

    @classmethod
    def missing_member(cls, path: tuple[str, ...], member_label: str) -> Verdict:
        return cls(VerdictKind.MISSING_MEMBER, path=path, member_label=member_label)

    @classmethod
    def cycle_detected(cls, path: tuple[str, ...]) -> Verdict:
        return cls(VerdictKind.CYCLE_DETECTED, path=path, reason="cyclic_structure")
