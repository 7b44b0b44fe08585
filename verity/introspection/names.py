"""
Member name normalization.

Python rewrites some attribute names before storing them on an instance.
This module maps such a raw name back to the name the author wrote and
classifies where it came from.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Protocol


class MemberOrigin(str, Enum):
    """Where a member's raw name came from."""
    ORDINARY = "ordinary"
    SYNTHESIZED_ACCESSOR = "synthesized_accessor"  # _value_ behind .value
    SYNTHESIZED_CAPTURE = "synthesized_capture"  # _Owner__x from self.__x


class NameRecognizer(Protocol):
    """Strategy that turns a raw member name into (semantic name, origin)."""

    def normalize(self, raw_name: str) -> tuple[str, MemberOrigin]: ...


class PatternRecognizer:
    """
    Recognizes synthesized names with an ordered list of anchored patterns.

    Each rule is a compiled regex with a single ``name`` group and the
    origin to report on a match. Rules are tried in order and must match
    the whole raw name; anything else is ordinary.

    Example:
        recognizer = PatternRecognizer.python()
        recognizer.normalize("_Account__balance")
        # ("balance", MemberOrigin.SYNTHESIZED_CAPTURE)
    """

    # Words joined by single underscores: "value", "cache_key"
    _WORDS = r"[A-Za-z0-9]+(?:_[A-Za-z0-9]+)*"

    SUNDER_PATTERN = re.compile(rf"_(?P<name>{_WORDS})_")
    MANGLED_PATTERN = re.compile(rf"_(?P<owner>{_WORDS})__(?P<name>[A-Za-z_]\w*)(?<!__)")

    def __init__(self, rules: list[tuple[re.Pattern[str], MemberOrigin]]):
        self.rules = list(rules)

    @classmethod
    def python(cls) -> PatternRecognizer:
        """Rules for names CPython synthesizes: sunder storage, then private mangling."""
        return cls([
            (cls.SUNDER_PATTERN, MemberOrigin.SYNTHESIZED_ACCESSOR),
            (cls.MANGLED_PATTERN, MemberOrigin.SYNTHESIZED_CAPTURE),
        ])

    def normalize(self, raw_name: str) -> tuple[str, MemberOrigin]:
        for pattern, origin in self.rules:
            match = pattern.fullmatch(raw_name)
            if match:
                return match.group("name"), origin
        return raw_name, MemberOrigin.ORDINARY


class NullRecognizer:
    """Recognizer that treats every name as ordinary."""

    def normalize(self, raw_name: str) -> tuple[str, MemberOrigin]:
        return raw_name, MemberOrigin.ORDINARY


DEFAULT_RECOGNIZER: NameRecognizer = PatternRecognizer.python()


def normalize(raw_name: str, recognizer: NameRecognizer | None = None) -> tuple[str, MemberOrigin]:
    """Map a raw member name to its semantic name and origin."""
    return (recognizer or DEFAULT_RECOGNIZER).normalize(raw_name)


def mangled_owner(raw_name: str) -> str | None:
    """Return the owner class name encoded in a mangled private name, if any."""
    match = PatternRecognizer.MANGLED_PATTERN.fullmatch(raw_name)
    if match is None:
        return None
    return match.group("owner")


def create_recognizer(name: str) -> NameRecognizer:
    """
    Create a recognizer from its configured name.

    Args:
        name: "python" for CPython's synthesized names, "none" to disable

    Raises:
        ValueError: If the name is unknown
    """
    if name == "python":
        return PatternRecognizer.python()
    elif name == "none":
        return NullRecognizer()
    else:
        raise ValueError(f"Unsupported recognizer: {name}")
