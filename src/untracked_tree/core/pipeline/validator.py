from __future__ import annotations

"""
Configuration Validation Service.

Ensures the configuration dictionary handed to the pipeline conforms to the
expected schema. Coerces types, injects defaults and reports every value it
had to replace.
"""

import logging
from typing import Any, Dict, List, Tuple

from untracked_tree.domain.config import get_default_config
from untracked_tree.infra.logging.config import LEVEL_NAMES

logger = logging.getLogger(__name__)

_STRING_FIELDS = ["input_path", "log_file"]
_BOOL_FIELDS = ["show_files", "json_output"]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and a
                                          list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update({k: v for k, v in config.items() if v is not None})

    for key in _STRING_FIELDS:
        value = merged[key]
        if not isinstance(value, str):
            _reject(key, value, "string", strict, warnings)
            merged[key] = defaults[key]

    for key in _BOOL_FIELDS:
        value = merged[key]
        if not isinstance(value, bool):
            _reject(key, value, "bool", strict, warnings)
            merged[key] = defaults[key]

    merged["min_size"] = _validate_min_size(merged["min_size"], defaults["min_size"], strict, warnings)

    level = str(merged["log_level"]).strip().upper()
    if level not in LEVEL_NAMES:
        _reject("log_level", merged["log_level"], "logging level", strict, warnings)
        level = defaults["log_level"]
    merged["log_level"] = level

    unknown = sorted(set(merged) - set(defaults))
    for key in unknown:
        warnings.append(f"Unknown configuration key ignored: '{key}'")
        del merged[key]

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _validate_min_size(value: Any, default: int, strict: bool, warnings: List[str]) -> int:
    """Accept non-negative integers (or integer strings) only."""
    try:
        if isinstance(value, bool):
            raise ValueError
        size = int(value)
        if size < 0:
            raise ValueError
        return size
    except (TypeError, ValueError):
        _reject("min_size", value, "non-negative integer", strict, warnings)
        return default


def _reject(key: str, value: Any, expected: str, strict: bool, warnings: List[str]) -> None:
    msg = f"Invalid value for '{key}': expected {expected}, received {value!r}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using default.")
