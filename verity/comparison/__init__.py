"""
Structural comparison of object graphs.

Usage:
    from verity.comparison import StructuralComparator

    verdict = StructuralComparator().compare(expected, actual)
    if not verdict.matched:
        print(verdict.kind, verdict.dotted_path)
"""

from .models import Verdict, VerdictKind
from .comparator import StructuralComparator, compare, has_value_equality

__all__ = [
    "Verdict",
    "VerdictKind",
    "StructuralComparator",
    "compare",
    "has_value_equality",
]
