"""
Object introspection for structural comparison.

This package lists the state members of arbitrary objects, maps
interpreter-synthesized member names back to their source names, and
resolves a member by name across a class hierarchy.

Usage:
    from verity.introspection import MemberResolver, normalize

    normalize("_Account__balance")
    # ("balance", MemberOrigin.SYNTHESIZED_CAPTURE)

    member = MemberResolver().resolve(account, type(account), "balance")
"""

# Names
from .names import (
    DEFAULT_RECOGNIZER,
    MemberOrigin,
    NameRecognizer,
    NullRecognizer,
    PatternRecognizer,
    create_recognizer,
    normalize,
)

# Members
from .members import MemberDescriptor, ObjectIntrospector, TypeDescriptor

# Resolution
from .resolver import MemberResolver, resolve

__all__ = [
    # Names
    "DEFAULT_RECOGNIZER",
    "MemberOrigin",
    "NameRecognizer",
    "NullRecognizer",
    "PatternRecognizer",
    "create_recognizer",
    "normalize",
    # Members
    "MemberDescriptor",
    "ObjectIntrospector",
    "TypeDescriptor",
    # Resolution
    "MemberResolver",
    "resolve",
]
