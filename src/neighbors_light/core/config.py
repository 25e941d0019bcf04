"""Application configuration.

Configuration can be loaded from:
1. A YAML/JSON file named by the NEIGHBORS_LIGHT_CONFIG environment variable
2. ./config/neighbors_light.yaml in the working directory
3. Built-in defaults

Individual environment variables (NEIGHBORS_LIGHT_PREFS_PATH,
NEIGHBORS_LIGHT_LOG_LEVEL) override whatever the file provides.

Example usage:
    from neighbors_light.core.config import get_app_config, configure_logging

    config = get_app_config()
    configure_logging(config.log_level)
"""

import json
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

CONFIG_ENV_VAR = "NEIGHBORS_LIGHT_CONFIG"
PREFS_PATH_ENV_VAR = "NEIGHBORS_LIGHT_PREFS_PATH"
LOG_LEVEL_ENV_VAR = "NEIGHBORS_LIGHT_LOG_LEVEL"

DEFAULT_CONFIG_FILE = Path("config") / "neighbors_light.yaml"


def _default_preferences_path() -> Path:
    return Path.home() / ".neighbors_light" / "preferences.json"


@dataclass
class AppConfig:
    """Runtime settings for the views and the Streamlit shell.

    Attributes:
        at_risk_threshold_hours: Waiting time after which a referral is
            flagged. Default 72.
        preferences_path: JSON file backing the preferences store.
        log_level: Root logging level name. Default "INFO".
        data_path: Optional JSON snapshot served by the in-memory backend.
            Sample data is used when None.
    """

    at_risk_threshold_hours: float = 72.0
    preferences_path: Path = field(default_factory=_default_preferences_path)
    log_level: str = "INFO"
    data_path: Path | None = None

    @property
    def at_risk_threshold_ms(self) -> float:
        return self.at_risk_threshold_hours * 60 * 60 * 1000

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AppConfig":
        """Build from a parsed config file, ignoring unknown keys."""
        config = cls()
        if "at_risk_threshold_hours" in data:
            hours = float(data["at_risk_threshold_hours"])
            if hours <= 0:
                raise ValueError("at_risk_threshold_hours must be positive")
            config.at_risk_threshold_hours = hours
        if data.get("preferences_path") is not None:
            config.preferences_path = Path(data["preferences_path"]).expanduser()
        if data.get("log_level") is not None:
            config.log_level = str(data["log_level"]).upper()
        if data.get("data_path") is not None:
            config.data_path = Path(data["data_path"]).expanduser()
        return config


def load_app_config(config_path: Path) -> AppConfig:
    """Load configuration from a YAML or JSON file.

    Args:
        config_path: Path to configuration file (.yaml, .yml, or .json)

    Returns:
        AppConfig instance

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If file format is not supported
    """
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        if config_path.suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        elif config_path.suffix == ".json":
            data = json.load(f)
        else:
            raise ValueError(
                f"Unsupported config format: {config_path.suffix}. "
                "Use .yaml, .yml, or .json"
            )

    return AppConfig.from_dict(data or {})


def get_app_config() -> AppConfig:
    """Resolve configuration from file and environment.

    Checks in order:
    1. NEIGHBORS_LIGHT_CONFIG environment variable
    2. ./config/neighbors_light.yaml
    3. Defaults
    """
    if env_path := os.environ.get(CONFIG_ENV_VAR):
        config = load_app_config(Path(env_path))
    elif (Path.cwd() / DEFAULT_CONFIG_FILE).exists():
        config = load_app_config(Path.cwd() / DEFAULT_CONFIG_FILE)
    else:
        config = AppConfig()

    if prefs_path := os.environ.get(PREFS_PATH_ENV_VAR):
        config.preferences_path = Path(prefs_path).expanduser()
    if log_level := os.environ.get(LOG_LEVEL_ENV_VAR):
        config.log_level = log_level.upper()

    return config


def configure_logging(level: str = "INFO") -> None:
    """Set up root logging once for the app process."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
