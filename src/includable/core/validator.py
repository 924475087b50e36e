from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper between untrusted settings (JSON file, CLI flags) and the lookup
core. Coerces types, injects defaults and normalizes paths so that
build_environment() always receives a well-formed dictionary.
"""

import logging
import os
from typing import Any, Dict, List, Tuple

from includable.domain.config import get_default_config
from includable.domain.constants import SEARCH_PATH_SEPARATOR

logger = logging.getLogger(__name__)


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
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on invalid values instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and the
                                          list of warnings produced.

    Raises:
        TypeError: In strict mode, on a type mismatch.
        ValueError: In strict mode, on an invalid environment name.
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

    for field in ("environmentpath", "environment", "environment_root", "config_file"):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    merged["literal_match"] = _as_bool(
        merged.get("literal_match"), defaults["literal_match"], "literal_match", warnings, strict
    )
    merged["basemodulepath"] = _as_path_list(
        merged.get("basemodulepath"), defaults["basemodulepath"], "basemodulepath", warnings, strict
    )

    merged["environment"] = _normalize_environment_name(
        merged["environment"], defaults["environment"], warnings, strict
    )
    for field in ("environmentpath", "environment_root", "config_file"):
        if merged[field]:
            merged[field] = os.path.expanduser(merged[field])

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and strip string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_path_list(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """
    Normalize a directory list.

    Accepts a list of strings or a colon-delimited string (the native
    Puppet notation). An explicitly empty list stays empty.
    """
    if value is None:
        return list(fallback)

    if isinstance(value, str):
        return [x.strip() for x in value.split(SEARCH_PATH_SEPARATOR) if x.strip()]

    if isinstance(value, (list, tuple)):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                s = item.strip()
                if s:
                    out.append(s)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: DOMAIN NORMALIZATION
# -----------------------------------------------------------------------------

def _normalize_environment_name(name: str, fallback: str, warnings: List[str], strict: bool) -> str:
    """Environment names are single directory names, never paths."""
    if "/" in name or "\\" in name or name in (".", ".."):
        msg = f"Invalid environment name '{name}': must be a plain directory name."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using '{fallback}'.")
        return fallback
    return name
