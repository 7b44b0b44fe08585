"""
Exception types raised by verity.

Ordinary mismatches are never raised: the engines return verdicts and the
check layer decides whether a failure should be signalled.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .assertions.models import CheckResult


class VerityError(Exception):
    """Base class for all verity errors."""


class MalformedInputError(VerityError, ValueError):
    """A required argument is missing or unusable (e.g. no collection at all)."""


class MemberResolutionError(VerityError, LookupError):
    """A member listed during introspection could not be read back."""


class CheckFailedError(VerityError, AssertionError):
    """AssertionError carrying the CheckResult that failed."""

    def __init__(self, result: CheckResult):
        self.result = result
        super().__init__(str(result))
