from __future__ import annotations

"""
Includability Lookup Orchestrator.

Composes name mapping, search path resolution and manifest probing into a
single first-match scan. The public entry points never raise: every
failure degrades to a negative result for the affected directory.
"""

import logging
import os
from typing import Optional

from includable.core.mapping import manifest_relpath
from includable.core.prober import probe
from includable.core.resolver import (
    AdvisoryCallback,
    fallback_modulepath,
    resolve_search_path,
)
from includable.domain.environment import EnvironmentContext
from includable.infra.fs import join_search_entry

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API
# ==============================================================================

def includable(
        name: str,
        env: EnvironmentContext,
        *,
        on_advisory: Optional[AdvisoryCallback] = None,
        literal: bool = True,
) -> bool:
    """
    Tell whether 'include <name>' should succeed in the given environment.

    Intended for lazy role classes: a node can be assigned a role before
    the role class is written, and the caller falls back to a base class
    while this returns False.

    Args:
        name: Qualified class name (e.g. 'role::base').
        env: Environment under evaluation.
        on_advisory: Optional sink for non-fatal configuration advisories.
        literal: Match the name literally inside manifests (recommended).

    Returns:
        bool: True if a declaring manifest exists on the search path.
    """
    return locate(name, env, on_advisory=on_advisory, literal=literal) is not None


def locate(
        name: str,
        env: EnvironmentContext,
        *,
        on_advisory: Optional[AdvisoryCallback] = None,
        literal: bool = True,
) -> Optional[str]:
    """
    Find the manifest that would satisfy 'include <name>'.

    Scans the search path in order and stops at the first directory whose
    candidate manifest declares the class.

    Args:
        name: Qualified class name.
        env: Environment under evaluation.
        on_advisory: Optional sink for non-fatal configuration advisories.
        literal: Match the name literally inside manifests.

    Returns:
        Optional[str]: Path of the first declaring manifest, or None.
    """
    relpath = manifest_relpath(name)

    try:
        search_path = resolve_search_path(env, on_advisory)
    except Exception as e:
        # on_advisory is caller code
        logger.warning(f"Search path resolution failed ({e}). Using defaults.")
        search_path = fallback_modulepath(env)

    for entry in search_path:
        if not entry:
            continue

        target = os.path.join(join_search_entry(env.root, entry), relpath)
        logger.debug(f"includable checking for `{name}` in `{target}`")

        try:
            found = probe(target, name, literal=literal)
        except Exception as e:
            logger.debug(f"Probe of `{target}` failed: {e}")
            found = False

        if found:
            logger.debug(f"includable found `{name}` at `{target}`")
            return target

    return None
