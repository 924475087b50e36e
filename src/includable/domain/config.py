from __future__ import annotations

"""
Configuration Domain Management.

Holds the dict-based runtime configuration describing where environments
live, which one is evaluated and which global module directories apply.
Settings are read from an optional JSON file and turned into an
EnvironmentContext through a concrete SettingsProvider.
"""

import json
import logging
import os
from typing import Any, Dict, List, Optional, Sequence

from includable.domain.constants import (
    DEFAULT_BASEMODULEPATH,
    DEFAULT_ENVIRONMENT,
    DEFAULT_ENVIRONMENT_PATH,
    ENVIRONMENT_CONF_NAME,
)
from includable.domain.environment import EnvironmentContext
from includable.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_ENV_VAR = "INCLUDABLE_CONFIG"
CONFIG_FILE_NAME = "config.json"

CONFIG_KEYS: List[str] = [
    "environmentpath",
    "environment",
    "basemodulepath",
    "environment_root",
    "config_file",
    "literal_match",
]


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Empty 'environment_root' and 'config_file' mean "derive from
    environmentpath and environment".

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        "environmentpath": DEFAULT_ENVIRONMENT_PATH,
        "environment": DEFAULT_ENVIRONMENT,
        "basemodulepath": list(DEFAULT_BASEMODULEPATH),
        "environment_root": "",
        "config_file": "",
        "literal_match": True,
    }


def default_config_path() -> str:
    """Settings file location: $INCLUDABLE_CONFIG, else the user data dir."""
    return os.environ.get(CONFIG_ENV_VAR) or os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load settings from a JSON file merged over the defaults.

    Unknown keys are ignored. A missing file is normal; a corrupt one is
    logged and ignored.

    Args:
        path: Explicit settings file. Defaults to default_config_path().

    Returns:
        Dict[str, Any]: The merged (not yet validated) configuration.
    """
    config = get_default_config()
    config_path = path or default_config_path()

    if not os.path.exists(config_path):
        logger.debug(f"Settings file {config_path} not found. Using defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load settings from {config_path}: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Corrupted settings file {config_path}. Using defaults.")
        return config

    for key in CONFIG_KEYS:
        if key in data:
            config[key] = data[key]
    return config

# -----------------------------------------------------------------------------
# Settings Provider
# -----------------------------------------------------------------------------
class ConfigSettingsProvider:
    """
    SettingsProvider backed by a validated configuration dictionary.
    """

    def __init__(self, config: Dict[str, Any]) -> None:
        self._config = config

    def get_environment_root(self) -> str:
        root = self._config.get("environment_root") or os.path.join(
            self._config["environmentpath"], self._config["environment"]
        )
        return os.path.abspath(root)

    def get_default_module_directories(self) -> Sequence[str]:
        return list(self._config.get("basemodulepath") or [])

    def get_config_file_path(self) -> Optional[str]:
        explicit = self._config.get("config_file")
        if explicit:
            return explicit
        return os.path.join(self.get_environment_root(), ENVIRONMENT_CONF_NAME)


def build_environment(config: Dict[str, Any]) -> EnvironmentContext:
    """
    Snapshot a validated configuration into an EnvironmentContext.

    Args:
        config: Output of validate_config().

    Returns:
        EnvironmentContext: Read-only environment description.
    """
    return EnvironmentContext.from_provider(ConfigSettingsProvider(config))
