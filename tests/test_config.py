"""Tests for application configuration loading."""

import json
from pathlib import Path

import pytest
import yaml

from neighbors_light.core.config import (
    AppConfig,
    configure_logging,
    get_app_config,
    load_app_config,
)


@pytest.fixture
def clean_env(monkeypatch, tmp_path):
    """No config env vars, and a working directory without a config file."""
    for var in ("NEIGHBORS_LIGHT_CONFIG", "NEIGHBORS_LIGHT_PREFS_PATH", "NEIGHBORS_LIGHT_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


class TestAppConfig:
    def test_defaults(self):
        """Defaults match the documented values."""
        config = AppConfig()
        assert config.at_risk_threshold_hours == 72.0
        assert config.at_risk_threshold_ms == 72 * 60 * 60 * 1000
        assert config.log_level == "INFO"
        assert config.data_path is None
        assert config.preferences_path.name == "preferences.json"

    def test_from_dict(self):
        """Known keys are read, log level upper-cased, unknown keys ignored."""
        config = AppConfig.from_dict({
            "at_risk_threshold_hours": 48,
            "preferences_path": "/tmp/prefs.json",
            "log_level": "debug",
            "unknown": "ignored",
        })
        assert config.at_risk_threshold_hours == 48.0
        assert config.preferences_path == Path("/tmp/prefs.json")
        assert config.log_level == "DEBUG"

    def test_non_positive_threshold_rejected(self):
        """A threshold of zero is rejected."""
        with pytest.raises(ValueError):
            AppConfig.from_dict({"at_risk_threshold_hours": 0})


class TestLoadAppConfig:
    """Test file formats."""

    def test_yaml(self, tmp_path):
        """YAML files are loaded."""
        path = tmp_path / "config.yaml"
        path.write_text(yaml.safe_dump({"at_risk_threshold_hours": 24, "data_path": "data.json"}))
        config = load_app_config(path)
        assert config.at_risk_threshold_hours == 24.0
        assert config.data_path == Path("data.json")

    def test_json(self, tmp_path):
        """JSON files are loaded."""
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"log_level": "WARNING"}))
        assert load_app_config(path).log_level == "WARNING"

    def test_empty_yaml_gives_defaults(self, tmp_path):
        """An empty YAML file gives defaults."""
        path = tmp_path / "config.yml"
        path.write_text("")
        assert load_app_config(path).at_risk_threshold_hours == 72.0

    def test_missing_file(self, tmp_path):
        """A missing file raises FileNotFoundError."""
        with pytest.raises(FileNotFoundError):
            load_app_config(tmp_path / "absent.yaml")

    def test_unsupported_format(self, tmp_path):
        """Other extensions are rejected."""
        path = tmp_path / "config.toml"
        path.write_text("x = 1")
        with pytest.raises(ValueError, match="Unsupported config format"):
            load_app_config(path)


class TestGetAppConfig:
    """Test resolution order."""

    def test_defaults_without_file(self, clean_env):
        """Defaults are used when no file is found."""
        assert get_app_config().at_risk_threshold_hours == 72.0

    def test_cwd_config_file(self, clean_env, tmp_path):
        """config/neighbors_light.yaml in the working directory is read."""
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "neighbors_light.yaml").write_text("at_risk_threshold_hours: 12\n")
        assert get_app_config().at_risk_threshold_hours == 12.0

    def test_env_config_file_wins(self, clean_env, tmp_path):
        """NEIGHBORS_LIGHT_CONFIG wins over the working directory file."""
        (tmp_path / "config").mkdir()
        (tmp_path / "config" / "neighbors_light.yaml").write_text("at_risk_threshold_hours: 12\n")
        env_file = tmp_path / "other.json"
        env_file.write_text(json.dumps({"at_risk_threshold_hours": 36}))
        clean_env.setenv("NEIGHBORS_LIGHT_CONFIG", str(env_file))
        assert get_app_config().at_risk_threshold_hours == 36.0

    def test_env_overrides(self, clean_env, tmp_path):
        """Env vars override the preferences path and log level."""
        clean_env.setenv("NEIGHBORS_LIGHT_PREFS_PATH", str(tmp_path / "p.json"))
        clean_env.setenv("NEIGHBORS_LIGHT_LOG_LEVEL", "debug")
        config = get_app_config()
        assert config.preferences_path == tmp_path / "p.json"
        assert config.log_level == "DEBUG"


def test_configure_logging_accepts_unknown_level():
    """Unknown level names fall back to INFO instead of raising."""
    configure_logging("NOT_A_LEVEL")
