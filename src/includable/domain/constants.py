from __future__ import annotations

"""
Domain Constants.

Centralizes the naming conventions of the Puppet code layout: namespace
delimiter, manifest placement, environment configuration keys and the
vendor default directories used when nothing else is configured.
"""

from typing import List

# -----------------------------------------------------------------------------
# QUALIFIED NAME → MANIFEST LAYOUT
# -----------------------------------------------------------------------------

NAMESPACE_DELIMITER = "::"
MANIFESTS_DIR = "manifests"
INIT_MANIFEST_STEM = "init"
MANIFEST_EXTENSION = ".pp"

# Keyword introducing a class declaration inside a manifest
DECLARATION_KEYWORD = "class"

# -----------------------------------------------------------------------------
# ENVIRONMENT LAYOUT
# -----------------------------------------------------------------------------

ENVIRONMENT_CONF_NAME = "environment.conf"
ENVIRONMENT_MODULES_DIR = "modules"

MODULEPATH_SETTING = "modulepath"
BASEMODULEPATH_TOKEN = "$basemodulepath"
SEARCH_PATH_SEPARATOR = ":"

# -----------------------------------------------------------------------------
# VENDOR DEFAULTS
# -----------------------------------------------------------------------------

DEFAULT_ENVIRONMENT = "production"
DEFAULT_ENVIRONMENT_PATH = "/etc/puppetlabs/code/environments"
DEFAULT_BASEMODULEPATH: List[str] = [
    "/etc/puppetlabs/code/modules",
    "/opt/puppetlabs/puppet/modules",
]
