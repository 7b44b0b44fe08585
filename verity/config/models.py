"""
Typed options for comparisons and check results.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class RecognizerType(str, Enum):
    """Synthesized-name recognizers that can be configured."""
    PYTHON = "python"
    NONE = "none"


@dataclass
class CompareOptions:
    """
    Options shared by the comparator and the check layer.

    Attributes:
        recognizer: Which synthesized-name recognizer to use
        detect_cycles: Return CYCLE_DETECTED instead of recursing forever
        max_value_length: Truncation length for values in result messages
    """
    recognizer: RecognizerType = RecognizerType.PYTHON
    detect_cycles: bool = True
    max_value_length: int = 100
