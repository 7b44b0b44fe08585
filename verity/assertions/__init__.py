"""
Check layer for verity

This package turns comparison and collection verdicts into pass/fail
results, applying the negation flag in a single place.

Supported checks:
    - has_fields_with_same_values: deep, member-by-member equality
    - contains / contains_exactly / contains_only: collection membership
    - is_equal_to, is_null, is_same_reference, is_instance_of, inherits_from
    - has_size, is_empty
    - is_zero, is_positive, is_less_than, is_greater_than

Usage:
    from verity.assertions import CheckEngine, require

    engine = CheckEngine()
    result = engine.contains([1, 2, 2, 3], 2, 2)
    result = engine.contains(data, 1, 2, path="$.results[*].id")

    if not result.passed:
        print(result)  # Detailed failure message

    # Raise an AssertionError for the test framework
    require(engine.has_fields_with_same_values(actual, expected))
"""

# Models
from .models import CheckResult, CheckStatus, format_item_count

# Engine
from .engine import (
    CheckEngine,
    require,
    # Convenience functions
    assert_fields_match,
    assert_contains,
    assert_contains_exactly,
    assert_contains_only,
)

__all__ = [
    # Models
    "CheckResult",
    "CheckStatus",
    "format_item_count",
    # Engine
    "CheckEngine",
    "require",
    # Convenience functions
    "assert_fields_match",
    "assert_contains",
    "assert_contains_exactly",
    "assert_contains_only",
]
