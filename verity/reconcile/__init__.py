"""
Collection membership checks.

Usage:
    from verity.reconcile import contains_at_least, contains_exactly, contains_only

    contains_at_least([1, 2, 2, 3], 2, 2).matched   # True
    contains_exactly([1, 2, 3], [3, 2, 1]).index     # 0
    contains_only([1, 2, 3], 1, 2).elements          # [3]
"""

from .models import CollectionVerdict, CollectionVerdictKind
from .reconciler import contains_at_least, contains_exactly, contains_only, expected_values

__all__ = [
    "CollectionVerdict",
    "CollectionVerdictKind",
    "contains_at_least",
    "contains_exactly",
    "contains_only",
    "expected_values",
]
