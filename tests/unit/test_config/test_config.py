"""
test_config.py - golden.yaml loading, environment overrides, CI guard
"""

from pathlib import Path

import pytest
import yaml

from golden_files.config import (
    GoldenConfig,
    check_update_allowed,
    detect_ci,
    is_truthy,
    load_config,
)
from golden_files.domain.errors import ConfigError, UpdateBlockedError

# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture
def write_config(tmp_path: Path):
    """Write a golden.yaml and return its path."""
    def _write(data: object) -> Path:
        path = tmp_path / "golden.yaml"
        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f)
        return path
    return _write


# =============================================================================
# load_config
# =============================================================================


class TestLoadConfig:
    """load_config."""

    def test_defaults_without_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
        """No golden.yaml in cwd → defaults."""
        monkeypatch.chdir(tmp_path)

        assert load_config(environ={}) == GoldenConfig()

    def test_reads_golden_section(self, write_config):
        path = write_config({
            "golden": {
                "color": False,
                "update": True,
                "uuid_threshold": 5,
                "timestamp_threshold": 7,
            },
        })

        config = load_config(path, environ={})

        assert config.color is False
        assert config.update is True
        assert config.uuid_threshold == 5
        assert config.timestamp_threshold == 7

    def test_relative_base_dir(self, write_config, tmp_path: Path):
        """base_dir resolves against the config file's directory."""
        path = write_config({"golden": {"base_dir": "testdata"}})

        config = load_config(path, environ={})

        assert config.base_dir == tmp_path.resolve() / "testdata"

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "golden.yaml"
        path.write_text("", encoding="utf-8")

        assert load_config(path, environ={}) == GoldenConfig()

    def test_other_sections_ignored(self, write_config):
        path = write_config({"paths": {"x": 1}})

        assert load_config(path, environ={}) == GoldenConfig()

    def test_explicit_missing_file(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "nope.yaml", environ={})

    def test_unknown_key(self, write_config):
        path = write_config({"golden": {"colour": False}})

        with pytest.raises(ConfigError, match="unknown config keys"):
            load_config(path, environ={})

    def test_bad_types(self, write_config):
        path = write_config({"golden": {"uuid_threshold": "many"}})

        with pytest.raises(ConfigError):
            load_config(path, environ={})

    def test_not_a_mapping(self, write_config):
        path = write_config(["golden"])

        with pytest.raises(ConfigError, match="mapping"):
            load_config(path, environ={})

    def test_invalid_yaml(self, tmp_path: Path):
        path = tmp_path / "golden.yaml"
        path.write_text("golden: [unclosed", encoding="utf-8")

        with pytest.raises(ConfigError) as exc_info:
            load_config(path, environ={})

        assert isinstance(exc_info.value.cause, yaml.YAMLError)


class TestEnvironmentOverrides:
    """Environment variables win over the file."""

    def test_update_env(self, write_config):
        path = write_config({"golden": {"update": False}})

        assert load_config(path, environ={"GOLDEN_UPDATE": "1"}).update is True
        assert load_config(path, environ={"GOLDEN_UPDATE": "true"}).update is True
        assert load_config(path, environ={"GOLDEN_UPDATE": "0"}).update is False

    def test_env_can_disable_update(self, write_config):
        path = write_config({"golden": {"update": True}})

        assert load_config(path, environ={"GOLDEN_UPDATE": "no"}).update is False

    def test_no_color(self, write_config):
        path = write_config({"golden": {"color": True}})

        assert load_config(path, environ={"NO_COLOR": "1"}).color is False

    def test_allow_ci_update(self, write_config):
        path = write_config({})

        assert load_config(path, environ={"GOLDEN_ALLOW_CI_UPDATE": "yes"}).allow_update_in_ci is True

    @pytest.mark.parametrize("value,expected", [
        ("1", True), ("TRUE", True), (" on ", True), ("yes", True),
        ("0", False), ("", False), ("off", False), (None, False),
    ])
    def test_is_truthy(self, value, expected):
        assert is_truthy(value) is expected


# =============================================================================
# CI guard
# =============================================================================


class TestCheckUpdateAllowed:
    """Update mode is blocked in CI."""

    def test_detect_ci(self):
        assert detect_ci({"GITHUB_ACTIONS": "true"}) == "GITHUB_ACTIONS"
        assert detect_ci({}) is None
        assert detect_ci({"CI": ""}) is None

    def test_blocked_in_ci(self):
        with pytest.raises(UpdateBlockedError) as exc_info:
            check_update_allowed(GoldenConfig(update=True), environ={"CI": "true"})

        assert exc_info.value.context["indicator"] == "CI"

    def test_allowed_locally(self):
        check_update_allowed(GoldenConfig(update=True), environ={})

    def test_not_updating_in_ci(self):
        check_update_allowed(GoldenConfig(update=False), environ={"CI": "true"})

    def test_explicitly_allowed(self):
        check_update_allowed(
            GoldenConfig(update=True, allow_update_in_ci=True),
            environ={"JENKINS_URL": "http://ci"},
        )

    def test_with_update(self):
        assert GoldenConfig().with_update(True).update is True
