from __future__ import annotations

"""
Unit tests for search path resolution.

Verifies:
1. modulepath parsing from environment.conf (last assignment wins).
2. $basemodulepath substitution preserving order.
3. Fixed fallback and the advisory side channel.
"""

import logging
from pathlib import Path
from typing import List

import pytest

from includable.core.resolver import (
    ModulepathConfigError,
    fallback_modulepath,
    modulepath_from_config,
    resolve_search_path,
)
from includable.domain.environment import EnvironmentContext

DEFAULTS = ("/etc/puppetlabs/code/modules", "/opt/puppetlabs/puppet/modules")


def _env(root: Path, conf_text: str = None, config_file: str = "default") -> EnvironmentContext:
    conf = root / "environment.conf"
    if conf_text is not None:
        conf.write_text(conf_text, encoding="utf-8")
    return EnvironmentContext(
        root=str(root),
        default_module_dirs=DEFAULTS,
        config_file=str(conf) if config_file == "default" else config_file,
    )

# -----------------------------------------------------------------------------
# CONFIG-FILE STRATEGY
# -----------------------------------------------------------------------------

def test_modulepath_is_read_and_basemodulepath_substituted(tmp_path: Path) -> None:
    env = _env(tmp_path, "modulepath = site:modules:$basemodulepath\n")

    assert resolve_search_path(env) == ["site", "modules", *DEFAULTS]


def test_basemodulepath_token_keeps_its_position(tmp_path: Path) -> None:
    env = _env(tmp_path, "modulepath=$basemodulepath:site\n")

    assert resolve_search_path(env) == [*DEFAULTS, "site"]


def test_last_modulepath_assignment_wins(tmp_path: Path) -> None:
    text = (
        "# comment\n"
        "modulepath = first\n"
        "manifest = site.pp\n"
        "modulepath = second:/abs/modules\n"
        "environment_timeout = 0\n"
    )
    env = _env(tmp_path, text)

    assert modulepath_from_config(env) == "second:/abs/modules"


def test_indented_or_foreign_keys_are_ignored(tmp_path: Path) -> None:
    text = "  modulepath = indented\nmymodulepath = other\nmodulepath = real\n"
    env = _env(tmp_path, text)

    assert modulepath_from_config(env) == "real"


def test_empty_entries_are_preserved_for_the_caller(tmp_path: Path) -> None:
    env = _env(tmp_path, "modulepath = :site::modules\n")

    assert resolve_search_path(env) == ["", "site", "", "modules"]


def test_no_matching_line_raises(tmp_path: Path) -> None:
    env = _env(tmp_path, "manifest = site.pp\n")

    with pytest.raises(ModulepathConfigError):
        modulepath_from_config(env)


def test_empty_value_raises(tmp_path: Path) -> None:
    env = _env(tmp_path, "modulepath =   \n")

    with pytest.raises(ModulepathConfigError):
        modulepath_from_config(env)


def test_unset_config_path_raises(tmp_path: Path) -> None:
    env = _env(tmp_path, config_file=None)

    with pytest.raises(ModulepathConfigError):
        modulepath_from_config(env)

# -----------------------------------------------------------------------------
# FALLBACK STRATEGY
# -----------------------------------------------------------------------------

def test_fallback_is_environment_modules_then_defaults(tmp_path: Path) -> None:
    env = _env(tmp_path)

    assert fallback_modulepath(env) == [str(tmp_path / "modules"), *DEFAULTS]


@pytest.mark.parametrize(
    "conf_text",
    [
        None,                       # file missing
        "manifest = site.pp\n",     # no modulepath line
        "modulepath =\n",           # empty value
    ],
)
def test_config_failure_falls_back_with_one_advisory(tmp_path: Path, conf_text, caplog) -> None:
    env = _env(tmp_path, conf_text)
    advisories: List[str] = []

    with caplog.at_level(logging.WARNING, logger="includable.core.resolver"):
        result = resolve_search_path(env, on_advisory=advisories.append)

    assert result == [str(tmp_path / "modules"), *DEFAULTS]
    assert len(advisories) == 1
    assert "environment.conf" in advisories[0]
    assert any(r.levelno == logging.WARNING for r in caplog.records)


def test_config_path_pointing_to_directory_falls_back(tmp_path: Path) -> None:
    conf_dir = tmp_path / "environment.conf"
    conf_dir.mkdir()
    env = _env(tmp_path)

    assert resolve_search_path(env) == [str(tmp_path / "modules"), *DEFAULTS]


def test_success_emits_no_advisory(tmp_path: Path) -> None:
    env = _env(tmp_path, "modulepath = site\n")
    advisories: List[str] = []

    resolve_search_path(env, on_advisory=advisories.append)

    assert advisories == []
