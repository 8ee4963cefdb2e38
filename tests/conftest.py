"""Shared test fixtures for xtio test suite."""

import io
import json
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from xtio import output as _output_mod
from xtio.lib.log_lib import OutputConfig, OutputManager
from xtio.lib.log_lib import manager as _manager_mod


def pytest_configure(config):
    config.addinivalue_line("markers", "slow: runs the CLI in a subprocess")


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------
class CountingSink(io.StringIO):
    """StringIO that also records each individual write."""

    def __init__(self):
        super().__init__()
        self.writes = []

    def write(self, s):
        self.writes.append(s)
        return super().write(s)


@pytest.fixture
def buf():
    """A StringIO buffer for capturing output."""
    return io.StringIO()


@pytest.fixture
def sink():
    """A sink that counts writes."""
    return CountingSink()


@pytest.fixture
def out(sink):
    """An OutputManager writing plain text to a counting sink."""
    return OutputManager(OutputConfig(file=sink, color=False))


@pytest.fixture
def debug_out(sink):
    """Same as ``out`` with debugging enabled."""
    return OutputManager(OutputConfig(file=sink, color=False, debugging=True))


# ---------------------------------------------------------------------------
# Singletons
# ---------------------------------------------------------------------------
@pytest.fixture(autouse=True)
def _reset_singletons():
    """Reset the OutputManager and FileSystem singletons between tests."""
    old_manager = _manager_mod._manager
    old_fs = _output_mod._filesystem
    _manager_mod._manager = None
    _output_mod._filesystem = None
    yield
    _manager_mod._manager = old_manager
    _output_mod._filesystem = old_fs


# ---------------------------------------------------------------------------
# Temporary directory fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def tmp_config_home(tmp_path):
    """Provide a temporary home directory for ~/.xtio/config.json."""
    home = tmp_path / "home"
    home.mkdir()
    with patch.dict(os.environ, {"HOME": str(home), "USERPROFILE": str(home)}):
        with patch("pathlib.Path.home", return_value=home):
            yield home


@pytest.fixture
def tmp_project(tmp_path, tmp_config_home, monkeypatch):
    """A project directory used as cwd, isolated from real config files."""
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return project


@pytest.fixture
def sample_tree(tmp_path):
    """A directory with a mix of file types.

    sample/
        app.js
        boot.js
        notes.txt
        package.json
        readme.md
        lib/
    """
    root = tmp_path / "sample"
    root.mkdir()
    (root / "lib").mkdir()
    (root / "app.js").write_text("var a = 1;\n", encoding="utf-8")
    (root / "boot.js").write_text("require('xt');\n", encoding="utf-8")
    (root / "notes.txt").write_text("first\nsecond\nthird", encoding="utf-8")
    (root / "package.json").write_text("{}\n", encoding="utf-8")
    (root / "readme.md").write_text("# sample\n", encoding="utf-8")
    return root


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------
@pytest.fixture
def sample_project_config(tmp_project):
    """Write a .xtio.json file in the tmp project."""
    config = {
        "debugging": True,
        "max_depth": 2,
    }
    path = tmp_project / ".xtio.json"
    path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return path, config


@pytest.fixture
def sample_global_config(tmp_config_home):
    """Write a global config file in the tmp home."""
    config_dir = tmp_config_home / ".xtio"
    config_dir.mkdir()
    config = {
        "debugging": False,
        "color": False,
        "shorten_max": 5,
        "policy": "raise",
    }
    path = config_dir / "config.json"
    path.write_text(json.dumps(config, indent=2), encoding="utf-8")
    return path, config
