"""
verity - structural comparison and collection checks for tests

This package provides the comparison engines behind a set of assertion
primitives, and a thin check layer that turns their verdicts into results.

Subpackages:
    - introspection: Member listing, name normalization and resolution
    - comparison: Deep, member-by-member structural equality
    - reconcile: Collection membership (at least / exactly / only)
    - assertions: Check engine, negation and failure reporting
    - config: Options loaded from YAML

Usage:
    from verity import CheckEngine, compare, contains_at_least, require

    verdict = compare(expected, actual)
    verdict.matched, verdict.dotted_path

    contains_at_least([1, 2, 2, 3], 2, 2).matched  # True

    engine = CheckEngine()
    require(engine.has_fields_with_same_values(actual, expected))
    require(engine.inverted().contains_only([1, 2, 3], 1, 2))
"""

__version__ = "0.1.0"

# Re-export introspection for convenience
from .introspection import (
    MemberDescriptor,
    MemberOrigin,
    MemberResolver,
    NameRecognizer,
    NullRecognizer,
    ObjectIntrospector,
    PatternRecognizer,
    TypeDescriptor,
    create_recognizer,
    normalize,
    resolve,
)

# Re-export comparison for convenience
from .comparison import StructuralComparator, Verdict, VerdictKind, compare

# Re-export reconcile for convenience
from .reconcile import (
    CollectionVerdict,
    CollectionVerdictKind,
    contains_at_least,
    contains_exactly,
    contains_only,
    expected_values,
)

# Re-export assertions for convenience
from .assertions import (
    CheckEngine,
    CheckResult,
    CheckStatus,
    require,
    assert_fields_match,
    assert_contains,
    assert_contains_exactly,
    assert_contains_only,
)

# Re-export config for convenience
from .config import CompareOptions, RecognizerType, load_options, parse_options_yaml

# Exceptions
from .exceptions import CheckFailedError, MalformedInputError, MemberResolutionError, VerityError

__all__ = [
    # Package info
    "__version__",
    # Introspection
    "MemberDescriptor",
    "MemberOrigin",
    "MemberResolver",
    "NameRecognizer",
    "NullRecognizer",
    "ObjectIntrospector",
    "PatternRecognizer",
    "TypeDescriptor",
    "create_recognizer",
    "normalize",
    "resolve",
    # Comparison
    "StructuralComparator",
    "Verdict",
    "VerdictKind",
    "compare",
    # Reconcile
    "CollectionVerdict",
    "CollectionVerdictKind",
    "contains_at_least",
    "contains_exactly",
    "contains_only",
    "expected_values",
    # Assertions
    "CheckEngine",
    "CheckResult",
    "CheckStatus",
    "require",
    "assert_fields_match",
    "assert_contains",
    "assert_contains_exactly",
    "assert_contains_only",
    # Config
    "CompareOptions",
    "RecognizerType",
    "load_options",
    "parse_options_yaml",
    # Exceptions
    "CheckFailedError",
    "MalformedInputError",
    "MemberResolutionError",
    "VerityError",
]
