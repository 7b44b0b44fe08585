"""
Options for verity comparisons.

Usage:
    from verity.config import load_options, parse_options_yaml

    # Load from file
    options, result = load_options("verity.yaml")
    if not result.is_valid:
        print(result)

    # Or validate from string
    options, result = parse_options_yaml("version: 1\ncompare:\n  detect_cycles: false\n")
"""

# Public API
from .loader import load_options, parse_options_yaml

# Models
from .models import CompareOptions, RecognizerType

# Validation
from .validation import OptionsValidator, ValidationError, ValidationResult

__all__ = [
    # Loader functions
    "load_options",
    "parse_options_yaml",
    # Models
    "CompareOptions",
    "RecognizerType",
    # Validation
    "OptionsValidator",
    "ValidationError",
    "ValidationResult",
]
