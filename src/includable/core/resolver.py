from __future__ import annotations

"""
Search Path Resolution Service.

Builds the ordered list of module directories for an environment. Two
strategies are available: the 'modulepath' setting of the environment
configuration file, and a fixed fallback made of the environment's own
module directory followed by the global defaults. Resolution tries the
first and degrades to the second with an advisory, never an error.
"""

import logging
import re
from typing import Callable, List, Optional

from includable.domain.constants import (
    BASEMODULEPATH_TOKEN,
    MODULEPATH_SETTING,
    SEARCH_PATH_SEPARATOR,
)
from includable.domain.environment import EnvironmentContext
from includable.infra.fs import stream_file_content

logger = logging.getLogger(__name__)

AdvisoryCallback = Callable[[str], None]

_MODULEPATH_LINE_RX = re.compile(rf"^{re.escape(MODULEPATH_SETTING)}\s*=")


class ModulepathConfigError(Exception):
    """Raised when the environment configuration cannot supply a search path."""

# ==============================================================================
# PUBLIC API
# ==============================================================================

def resolve_search_path(
        env: EnvironmentContext,
        on_advisory: Optional[AdvisoryCallback] = None,
) -> List[str]:
    """
    Resolve the ordered search path for an environment.

    Reads 'modulepath' from the environment configuration file when one is
    set. Any failure on that route is reported as an advisory (WARNING log
    record and optional callback) and the fixed fallback is used instead.

    Args:
        env: Environment under evaluation.
        on_advisory: Optional sink receiving advisory messages.

    Returns:
        List[str]: Search path entries, highest precedence first. Entries are
                   neither deduplicated nor checked for existence.
    """
    try:
        modulepath = modulepath_from_config(env)
    except ModulepathConfigError as e:
        msg = f"Error reading `{MODULEPATH_SETTING}` from {env.config_file} ({e})"
        _emit_advisory(msg, on_advisory)
        return fallback_modulepath(env)

    return modulepath.split(SEARCH_PATH_SEPARATOR)


def modulepath_from_config(env: EnvironmentContext) -> str:
    """
    Config-file strategy: read the last 'modulepath = ...' assignment.

    The global default token is replaced with the real default directories,
    preserving their position in the list.

    Args:
        env: Environment under evaluation.

    Returns:
        str: Delimited search path string (e.g. 'site:modules:/etc/...').

    Raises:
        ModulepathConfigError: No usable assignment could be obtained.
    """
    if not env.config_file:
        raise ModulepathConfigError("no configuration file for this environment")

    last_match: Optional[str] = None
    try:
        for line in stream_file_content(env.config_file):
            if _MODULEPATH_LINE_RX.match(line):
                last_match = line
    except OSError as e:
        raise ModulepathConfigError(e.strerror or str(e)) from e

    if last_match is None:
        raise ModulepathConfigError(f"no `{MODULEPATH_SETTING}` assignment found")

    # Value ends at a second '=' if present
    value = last_match.split("=")[1].strip()
    if not value:
        raise ModulepathConfigError(f"empty `{MODULEPATH_SETTING}` value")

    return value.replace(BASEMODULEPATH_TOKEN, env.default_module_path, 1)


def fallback_modulepath(env: EnvironmentContext) -> List[str]:
    """
    Fixed strategy: the environment module directory, then global defaults.

    Relative entries such as 'site' are only searched when configured.
    """
    return [env.modules_dir, *env.default_module_dirs]

# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _emit_advisory(message: str, on_advisory: Optional[AdvisoryCallback]) -> None:
    logger.warning(message)
    if on_advisory is not None:
        on_advisory(message)
