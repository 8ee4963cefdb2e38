"""Tests for xtio.config — configuration file management."""

import json
from argparse import Namespace

from xtio.config import (
    DEFAULTS,
    build_output_config,
    find_project_config,
    get_global_config_path,
    load_json,
    load_project_config,
    resolve_config,
    resolve_policy,
)
from xtio.lib.fs_lib import ErrorPolicy


class TestLoadJson:

    def test_missing_file(self, tmp_path):
        assert load_json(tmp_path / "nope.json") == {}

    def test_malformed_file(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{not json", encoding="utf-8")
        assert load_json(path) == {}

    def test_non_object(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        assert load_json(path) == {}


class TestGlobalConfigPath:

    def test_under_home(self, tmp_config_home):
        assert get_global_config_path() == tmp_config_home / ".xtio" / "config.json"


class TestFindProjectConfig:

    def test_found_in_cwd(self, sample_project_config):
        path, _ = sample_project_config
        assert find_project_config() == path.resolve()

    def test_found_in_parent(self, sample_project_config):
        path, _ = sample_project_config
        child = path.parent / "src" / "deep"
        child.mkdir(parents=True)
        assert find_project_config(child) == path.resolve()

    def test_not_found(self, tmp_project):
        assert find_project_config() is None
        assert load_project_config() == ({}, None)


class TestResolveConfig:
    """Three-layer config resolution (CLI > project > global)."""

    def test_defaults_when_no_config(self, tmp_project):
        resolved = resolve_config(Namespace())
        assert resolved == DEFAULTS

    def test_project_wins_over_global(self, sample_project_config,
                                      sample_global_config):
        resolved = resolve_config(Namespace(debugging=None))
        assert resolved["debugging"] is True
        assert resolved["max_depth"] == 2
        # Only in global
        assert resolved["shorten_max"] == 5
        assert resolved["color"] is False

    def test_cli_wins_over_project(self, sample_project_config):
        resolved = resolve_config(Namespace(debugging=False, max_depth=7))
        assert resolved["debugging"] is False
        assert resolved["max_depth"] == 7

    def test_none_cli_values_fall_through(self, sample_global_config, tmp_project):
        resolved = resolve_config(Namespace(color=None, policy=None))
        assert resolved["color"] is False
        assert resolved["policy"] == "raise"

    def test_explicit_config_path(self, tmp_project, tmp_path):
        custom = tmp_path / "custom.json"
        custom.write_text(json.dumps({"shorten-max": 1}), encoding="utf-8")
        resolved = resolve_config(Namespace(config=str(custom)))
        assert resolved["shorten_max"] == 1

    def test_subset_of_keys(self, tmp_project):
        assert resolve_config(Namespace(), keys=["color"]) == {"color": True}

    def test_no_args(self, tmp_project):
        assert resolve_config()["debugging"] is False


class TestBuildOutputConfig:

    def test_from_resolved(self, buf):
        config = build_output_config(
            {"debugging": True, "color": False, "max_depth": 2}, file=buf)
        assert config.debugging is True
        assert config.color is False
        assert config.max_depth == 2
        assert config.file is buf

    def test_missing_keys_use_defaults(self):
        config = build_output_config({})
        assert config.debugging is False
        assert config.color is True
        assert config.max_depth == DEFAULTS["max_depth"]


class TestResolvePolicy:

    def test_named_policies(self):
        assert resolve_policy({"policy": "raise"}) is ErrorPolicy.RAISE
        assert resolve_policy({"policy": "suppress-and-log"}) \
            is ErrorPolicy.SUPPRESS_AND_LOG

    def test_unknown_falls_back(self):
        assert resolve_policy({"policy": "explode"}) is ErrorPolicy.SUPPRESS_AND_LOG
        assert resolve_policy({}) is ErrorPolicy.SUPPRESS_AND_LOG
