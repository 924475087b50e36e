from __future__ import annotations

"""
Manifest Probing Component.

Decides whether a candidate manifest exists and plausibly declares a given
class. The check is a line-level pattern match only: the manifest is never
parsed, so a syntactically broken class still counts as present.
"""

import logging
import re
from contextlib import closing

from includable.domain.constants import DECLARATION_KEYWORD
from includable.infra.fs import is_regular_file, stream_file_content

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATTERN CONSTRUCTION
# -----------------------------------------------------------------------------

def declaration_pattern(name: str, *, literal: bool = True) -> re.Pattern:
    """
    Compile the declaration matcher for a qualified name.

    The pattern is anchored at the start of the line (leading whitespace
    allowed) but not at the end: no word boundary is required after the
    name, so 'class role::base2' also satisfies 'role::base'.

    Args:
        name: Qualified class name.
        literal: Escape regex metacharacters in the name. When False the
                 name is embedded as a raw regex fragment.

    Returns:
        re.Pattern: Compiled matcher.

    Raises:
        re.error: If literal is False and the name is not a valid fragment.
    """
    fragment = re.escape(name) if literal else name
    return re.compile(rf"^\s*{DECLARATION_KEYWORD}\s+{fragment}")

# -----------------------------------------------------------------------------
# PROBE
# -----------------------------------------------------------------------------

def probe(path: str, name: str, *, literal: bool = True) -> bool:
    """
    Check that a manifest exists at path and declares the named class.

    Lines are streamed and scanning stops at the first match. Read failures
    (permissions, file vanishing mid-scan) count as a negative probe.

    Args:
        path: Absolute path of the candidate manifest.
        name: Qualified class name.
        literal: See declaration_pattern().

    Returns:
        bool: True on the first declaring line, False otherwise.
    """
    if not is_regular_file(path):
        return False

    try:
        rx = declaration_pattern(name, literal=literal)
    except re.error as e:
        logger.debug(f"Unusable declaration pattern for `{name}`: {e}")
        return False

    try:
        with closing(stream_file_content(path)) as lines:
            for line in lines:
                if rx.match(line):
                    return True
    except OSError as e:
        logger.debug(f"Cannot scan `{path}`: {e}")
        return False

    return False
