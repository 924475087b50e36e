from __future__ import annotations

"""
Unit tests for the CLI controller (in-process).

Verifies exit codes, output rendering and configuration layering.
"""

import json

import pytest

from includable.interface.cli.app import EXIT_FOUND, EXIT_NOT_FOUND, EXIT_USAGE, _merge_config, main

pytestmark = pytest.mark.usefixtures("reset_logging")


@pytest.fixture
def environment(env_root, write_manifest):
    (env_root / "environment.conf").write_text("modulepath = site:modules\n", encoding="utf-8")
    manifest = write_manifest(env_root / "site", "role/manifests/base.pp", "class role::base {\n}\n")
    return env_root, manifest


def _run(env_root, *extra):
    return main(["--use-defaults", "--root", str(env_root), "--basemodulepath", "", *extra])


def test_found_prints_true_and_exits_zero(environment, capsys) -> None:
    env_root, _ = environment

    assert _run(env_root, "role::base") == EXIT_FOUND
    assert capsys.readouterr().out.strip() == "true"


def test_missing_prints_false_and_exits_one(environment, capsys) -> None:
    env_root, _ = environment

    assert _run(env_root, "role::db") == EXIT_NOT_FOUND
    assert capsys.readouterr().out.strip() == "false"


def test_which_prints_manifest_path(environment, capsys) -> None:
    env_root, manifest = environment

    assert _run(env_root, "role::base", "--which") == EXIT_FOUND
    assert capsys.readouterr().out.strip() == str(manifest)


def test_json_output(environment, capsys) -> None:
    env_root, manifest = environment

    _run(env_root, "role::base", "--json")
    payload = json.loads(capsys.readouterr().out)

    assert payload == {"name": "role::base", "includable": True, "path": str(manifest)}


def test_empty_name_is_a_usage_error(environment, capsys) -> None:
    env_root, _ = environment

    assert _run(env_root, "  ") == EXIT_USAGE
    assert "non-empty" in capsys.readouterr().err


def test_dump_config_reflects_overrides(environment, capsys) -> None:
    env_root, _ = environment

    assert _run(env_root, "--dump-config", "-e", "dev") == EXIT_FOUND
    cfg = json.loads(capsys.readouterr().out)

    assert cfg["environment"] == "dev"
    assert cfg["environment_root"] == str(env_root)


def test_settings_file_is_layered_under_cli_flags(tmp_path, environment, capsys) -> None:
    env_root, _ = environment
    settings = tmp_path / "settings.json"
    settings.write_text(json.dumps({"environment": "qa", "literal_match": False}), encoding="utf-8")

    main(["--settings", str(settings), "--root", str(env_root), "-e", "dev", "--dump-config"])
    cfg = json.loads(capsys.readouterr().out)

    assert cfg["environment"] == "dev"
    assert cfg["literal_match"] is False


def test_merge_config_ignores_none_and_unknown_keys() -> None:
    merged = _merge_config({"environment": "production"}, {"environment": None, "bogus": 1})

    assert merged == {"environment": "production"}
