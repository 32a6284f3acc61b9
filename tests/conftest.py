"""Shared pytest configuration and fixtures for all tests."""

import json
import os
import tempfile
from pathlib import Path

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: end-to-end CLI scenarios on a temporary home")
    # Modules configure logging at import time; keep the log file out of the real home
    os.environ.setdefault("AUTOSYMLINK_STATE_DIR", tempfile.mkdtemp(prefix="autosymlink-test-state-"))


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def write_config(path: Path, links: list[dict], aliases: dict | None = None) -> Path:
    """Write a config file with the given links (and inline aliases) and return its path."""
    config: dict = {"links": links}
    if aliases is not None:
        config["aliases"] = aliases
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return path


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def home(tmp_path: Path, monkeypatch) -> Path:
    """A temporary HOME with XDG_CONFIG_HOME unset.

    Returns:
        Path to the home directory
    """
    home_dir = tmp_path / "home"
    home_dir.mkdir()
    monkeypatch.setenv("HOME", str(home_dir))
    monkeypatch.setenv("USER", "tester")
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    return home_dir


@pytest.fixture
def config_dir(home: Path) -> Path:
    """Default config directory under the temporary HOME."""
    path = home / ".config" / "autosymlink"
    path.mkdir(parents=True)
    return path
