"""Configuration management for the CLI."""

import os
from pathlib import Path
from typing import Any

import yaml

from snippets.storage import DEFAULT_STORAGE

STORAGE_ENV = "SNIPPETS_APP_STORAGE"
LOG_LEVEL_ENV = "SNIPPETS_APP_LOG_LEVEL"

DEFAULTS: dict[str, Any] = {
    "storage": DEFAULT_STORAGE,
    "log_level": "info",
    "download_timeout": 30.0,
}


class Config:
    """Configuration management for the CLI application."""

    @staticmethod
    def from_file(path: Path) -> dict[str, Any]:
        """Load configuration from a YAML file."""
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file: {e}")
        except OSError as e:
            raise ValueError(f"Error reading config file: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {path}")
        return data

    @staticmethod
    def get_config_paths() -> list[Path]:
        """Get the default configuration file paths to check."""
        paths = []

        # User config
        xdg_config_home = Path(
            os.environ.get("XDG_CONFIG_HOME", Path.home() / ".config")
        )
        paths.append(xdg_config_home / "snippets" / "config.yaml")

        # Project config
        paths.append(Path(".snippets.yaml"))
        paths.append(Path("snippets.yaml"))

        return paths

    @staticmethod
    def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
        """Merge configuration dictionaries, later ones winning."""
        result: dict[str, Any] = {}
        for config in configs:
            result.update({k: v for k, v in config.items() if v is not None})
        return result


def load_config(config_file: Path | None = None) -> dict[str, Any]:
    """Load configuration from defaults, files and environment variables.

    Precedence, lowest first: built-in defaults, the default config paths,
    ``config_file``, then the ``SNIPPETS_APP_*`` environment variables.
    """
    config = dict(DEFAULTS)

    for path in Config.get_config_paths():
        if path.exists():
            config = Config.merge_configs(config, Config.from_file(path))

    if config_file is not None:
        config = Config.merge_configs(config, Config.from_file(config_file))

    env_overrides = {}
    if storage := os.environ.get(STORAGE_ENV):
        env_overrides["storage"] = storage
    if log_level := os.environ.get(LOG_LEVEL_ENV):
        env_overrides["log_level"] = log_level

    return Config.merge_configs(config, env_overrides)
