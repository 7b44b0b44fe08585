"""
Options loader.

This module provides the public API for loading and validating verity
options from disk or from a YAML string.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from .models import CompareOptions
from .parser import OptionsParser
from .validation import OptionsValidator, ValidationResult

logger = logging.getLogger(__name__)


def load_options(path: str | Path) -> tuple[CompareOptions | None, ValidationResult]:
    """
    Load and validate options from a YAML file.

    Args:
        path: Path to the YAML options file

    Returns:
        Tuple of (CompareOptions or None, ValidationResult)
        If validation fails, CompareOptions will be None.

    Example:
        options, result = load_options("verity.yaml")
        if not result.is_valid:
            print(result)
        engine = CheckEngine(options)
    """
    path = Path(path)

    if not path.exists():
        result = ValidationResult()
        result.add_error(
            str(path),
            "File not found",
            suggestion="Check the file path is correct"
        )
        return None, result

    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        result = ValidationResult()
        result.add_error(
            str(path),
            f"Invalid YAML syntax: {e}",
            suggestion="Check YAML formatting (indentation, colons, etc.)"
        )
        return None, result

    options, result = _build(data, str(path))
    if options is not None:
        logger.info(f"Loaded options from {path}")
    return options, result


def parse_options_yaml(yaml_string: str) -> tuple[CompareOptions | None, ValidationResult]:
    """
    Validate options from a YAML string (useful for testing).

    Args:
        yaml_string: YAML content as a string

    Returns:
        Tuple of (CompareOptions or None, ValidationResult)
    """
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        result = ValidationResult()
        result.add_error("yaml", f"Invalid YAML syntax: {e}")
        return None, result

    return _build(data, "yaml")


def _build(data: Any, source: str) -> tuple[CompareOptions | None, ValidationResult]:
    if not isinstance(data, dict):
        result = ValidationResult()
        result.add_error(
            source,
            "Content must be a YAML object (not a list or scalar)",
            value=type(data).__name__
        )
        return None, result

    result = OptionsValidator(data).validate()
    if not result.is_valid:
        logger.warning(f"Invalid options in {source}: {len(result.errors)} error(s)")
        return None, result

    return OptionsParser(data).parse(), result
