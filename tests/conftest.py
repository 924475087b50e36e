from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

1. Path manipulation so the 'src' directory is importable without install.
2. Builders for throwaway environment trees with manifests and configs.
3. Root logger reset for tests that run the logging bootstrap.
"""

import logging
import os
import sys
from pathlib import Path
from typing import Callable, Optional

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from includable.domain.environment import EnvironmentContext  # noqa: E402
from includable.infra.logging import _CONFIGURED_FLAG_ATTR, _QUEUE_LISTENER_ATTR  # noqa: E402


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def write_manifest() -> Callable[[Path, str, str], Path]:
    """
    Return a helper writing <module_dir>/<relpath> with the given content.

    Parent directories are created as needed.
    """
    def _write(module_dir: Path, relpath: str, content: str) -> Path:
        target = module_dir / relpath
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
        return target

    return _write


@pytest.fixture
def env_root(tmp_path: Path) -> Path:
    """Empty environment directory named 'production'."""
    root = tmp_path / "environments" / "production"
    root.mkdir(parents=True)
    return root


@pytest.fixture
def make_env(env_root: Path) -> Callable[..., EnvironmentContext]:
    """
    Return a factory building an EnvironmentContext around env_root.

    If 'modulepath' is given, an environment.conf declaring it is written.
    """
    def _make(modulepath: Optional[str] = None, default_dirs=()) -> EnvironmentContext:
        conf = env_root / "environment.conf"
        if modulepath is not None:
            conf.write_text(f"modulepath = {modulepath}\n", encoding="utf-8")
        return EnvironmentContext(
            root=str(env_root),
            default_module_dirs=tuple(str(d) for d in default_dirs),
            config_file=str(conf),
        )

    return _make


@pytest.fixture
def reset_logging():
    """Detach includable handlers from the root logger around a test."""
    def _reset() -> None:
        root = logging.getLogger()
        listener = getattr(root, _QUEUE_LISTENER_ATTR, None)
        if listener is not None and getattr(listener, "_thread", None) is not None:
            listener.stop()
        setattr(root, _QUEUE_LISTENER_ATTR, None)
        for h in list(root.handlers):
            if getattr(h, "_includable_handler", False):
                root.removeHandler(h)
                h.close()
        if hasattr(root, _CONFIGURED_FLAG_ATTR):
            delattr(root, _CONFIGURED_FLAG_ATTR)

    _reset()
    yield
    _reset()
