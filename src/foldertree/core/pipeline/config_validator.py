from __future__ import annotations

"""
Configuration Validation Service.

Normalizes untrusted configuration (persisted JSON, CLI overrides) into
strictly typed values, filling missing keys with domain defaults.
"""

import logging
from typing import Any, Dict, List, Tuple

from foldertree.domain.config import get_default_config

logger = logging.getLogger(__name__)

_BOOL_FIELDS = ["include_hidden", "use_source_gitignore", "print_tree"]
_STRING_FIELDS = ["encoding"]
_LIST_FIELDS = ["gitignore_paths"]

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize a configuration dictionary.

    Args:
        config: Raw configuration data.
        strict: If True, raise TypeError on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
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
    merged.update(config)

    for field in _STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)
    for field in _BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)
    for field in _LIST_FIELDS:
        merged[field] = _as_list_str(merged.get(field), defaults[field], field, warnings, strict)

    return merged, warnings

# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _reject(msg: str, warnings: List[str], strict: bool) -> None:
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback
    _reject(f"Invalid field '{field}': expected str, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    if value is None:
        return fallback
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off"):
            return False
    if isinstance(value, int):
        return bool(value)
    _reject(f"Invalid field '{field}': expected bool, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    if value is None:
        return list(fallback)
    if isinstance(value, str):
        return [p.strip() for p in value.split(",") if p.strip()]
    if isinstance(value, (list, tuple)):
        if not all(isinstance(x, str) for x in value):
            _reject(f"Invalid field '{field}': list items must be str.", warnings, strict)
            return list(fallback)
        return [x.strip() for x in value if x.strip()]
    _reject(f"Invalid field '{field}': expected list, received {type(value).__name__}.", warnings, strict)
    return list(fallback)
