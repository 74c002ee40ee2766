"""Configuration management - locating, loading and validating config files."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from .models import FileMoverConfig


class ConfigManager:
    """Finds and loads the configuration file."""

    DEFAULT_CONFIG_LOCATIONS = [
        Path("config/filemover.yaml"),
        Path.home() / ".config" / "filemover" / "config.yaml",
        Path.home() / ".filemover" / "config.yaml",
    ]

    def __init__(self, config_path: Path | None = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Explicit path to config file. If None, searches default locations.
        """
        self.config_path = config_path

    def load(self) -> FileMoverConfig:
        """
        Load configuration from file, falling back to defaults when none is found.

        Returns:
            Loaded and validated configuration.

        Raises:
            ValueError: If the config file is not valid YAML or fails validation.
        """
        config_file = self._find_config_file()

        if config_file is None:
            return FileMoverConfig()

        try:
            with open(config_file, encoding="utf-8") as f:
                config_dict = yaml.safe_load(f) or {}

            config = FileMoverConfig(**config_dict)

        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in config file {config_file}: {e}") from e
        except ValidationError as e:
            raise ValueError(f"Invalid configuration in {config_file}: {e}") from e
        except TypeError as e:
            # A YAML document that is not a mapping
            raise ValueError(f"Invalid configuration in {config_file}: {e}") from e

        self.config_path = config_file
        return config

    def _find_config_file(self) -> Path | None:
        """Find the explicit config file, else the first existing default location."""
        if self.config_path is not None:
            return self.config_path if self.config_path.exists() else None

        for location in self.DEFAULT_CONFIG_LOCATIONS:
            if location.exists():
                return location

        return None


_config_manager: ConfigManager | None = None


def get_config_manager(config_path: Path | None = None) -> ConfigManager:
    """
    Get global config manager instance.

    Passing a config path that differs from the current manager's replaces it.

    Args:
        config_path: Optional explicit config path.

    Returns:
        ConfigManager instance.
    """
    global _config_manager
    if _config_manager is None or (
        config_path is not None and config_path != _config_manager.config_path
    ):
        _config_manager = ConfigManager(config_path)
    return _config_manager
