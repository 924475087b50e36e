from __future__ import annotations

"""
Qualified Name to Manifest Path Mapping.

Implements the module autoloader layout: the first segment of a qualified
name is the module directory, the remaining segments locate the manifest
under its 'manifests' folder.
"""

import posixpath

from includable.domain.constants import (
    INIT_MANIFEST_STEM,
    MANIFEST_EXTENSION,
    MANIFESTS_DIR,
    NAMESPACE_DELIMITER,
)


def manifest_relpath(name: str) -> str:
    """
    Convert a qualified name into its manifest path relative to a module dir.

    Examples:
        foo           -> foo/manifests/init.pp
        foo::bar      -> foo/manifests/bar.pp
        foo::bar::baz -> foo/manifests/bar/baz.pp

    Args:
        name: Non-empty qualified name.

    Returns:
        str: Relative path using '/' separators.
    """
    module, *rest = name.split(NAMESPACE_DELIMITER)
    if not rest:
        rest = [INIT_MANIFEST_STEM]
    return posixpath.join(module, MANIFESTS_DIR, *rest) + MANIFEST_EXTENSION
