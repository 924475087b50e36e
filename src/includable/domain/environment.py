from __future__ import annotations

"""
Environment Domain Models.

Defines the read-only bundle describing the environment currently being
evaluated and the provider protocol that supplies it. The core never reads
global settings: every lookup receives an EnvironmentContext explicitly.
"""

import os
from dataclasses import dataclass, field
from typing import Iterable, Optional, Protocol, Sequence, Tuple

from includable.domain.constants import (
    ENVIRONMENT_CONF_NAME,
    ENVIRONMENT_MODULES_DIR,
    SEARCH_PATH_SEPARATOR,
)

# -----------------------------------------------------------------------------
# SETTINGS PROVIDER CONTRACT
# -----------------------------------------------------------------------------

class SettingsProvider(Protocol):
    """
    Boundary surface implemented by whatever knows the environment settings.
    """

    def get_environment_root(self) -> str:
        ...

    def get_default_module_directories(self) -> Sequence[str]:
        ...

    def get_config_file_path(self) -> Optional[str]:
        ...

# -----------------------------------------------------------------------------
# ENVIRONMENT CONTEXT
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class EnvironmentContext:
    """
    Immutable snapshot of the environment under evaluation.

    Attributes:
        root: Absolute directory of the environment.
        default_module_dirs: Global module directories, highest precedence first.
        config_file: Optional path to the per-environment configuration file.
    """
    root: str
    default_module_dirs: Tuple[str, ...] = field(default_factory=tuple)
    config_file: Optional[str] = None

    def __post_init__(self) -> None:
        # Accept any iterable of directories but store a tuple
        object.__setattr__(self, "default_module_dirs", tuple(self.default_module_dirs))

    @property
    def modules_dir(self) -> str:
        """Module directory owned by the environment itself."""
        return os.path.join(self.root, ENVIRONMENT_MODULES_DIR)

    @property
    def default_module_path(self) -> str:
        """Default directories rendered as a delimited search path string."""
        return SEARCH_PATH_SEPARATOR.join(self.default_module_dirs)

    @classmethod
    def from_provider(cls, provider: SettingsProvider) -> EnvironmentContext:
        """
        Snapshot a settings provider into a context value.

        Args:
            provider: Object implementing the SettingsProvider protocol.

        Returns:
            EnvironmentContext: Detached, read-only copy of the settings.
        """
        return cls(
            root=provider.get_environment_root(),
            default_module_dirs=tuple(provider.get_default_module_directories()),
            config_file=provider.get_config_file_path() or None,
        )

    @classmethod
    def for_environment(
            cls,
            environmentpath: str,
            environment: str,
            basemodulepath: Iterable[str],
    ) -> EnvironmentContext:
        """
        Build the context for a directory environment laid out the Puppet way.

        The root is <environmentpath>/<environment> and its configuration
        lives in <root>/environment.conf.

        Args:
            environmentpath: Directory holding all environments.
            environment: Name of the environment being evaluated.
            basemodulepath: Global module directories.

        Returns:
            EnvironmentContext: Context for the named environment.
        """
        root = os.path.join(environmentpath, environment)
        return cls(
            root=root,
            default_module_dirs=tuple(basemodulepath),
            config_file=os.path.join(root, ENVIRONMENT_CONF_NAME),
        )
