from __future__ import annotations

"""
includable: test whether a Puppet class file exists and can be included.

Typical use is lazy role classification::

    env = EnvironmentContext.for_environment(
        "/etc/puppetlabs/code/environments", "production",
        ["/etc/puppetlabs/code/modules"],
    )
    role = "role::webserver" if includable("role::webserver", env) else "role::base"
"""

from includable.core.engine import includable, locate
from includable.core.mapping import manifest_relpath
from includable.core.prober import declaration_pattern, probe
from includable.core.resolver import ModulepathConfigError, resolve_search_path
from includable.domain.environment import EnvironmentContext, SettingsProvider

__version__ = "0.1.0"

__all__ = [
    "EnvironmentContext",
    "ModulepathConfigError",
    "SettingsProvider",
    "declaration_pattern",
    "includable",
    "locate",
    "manifest_relpath",
    "probe",
    "resolve_search_path",
]
