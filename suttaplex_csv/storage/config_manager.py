"""
Manages loading, validation, and migration of the INI configuration file.
"""

import configparser
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from suttaplex_csv.exceptions import ConfigurationError
from suttaplex_csv.models.config import AppConfig

log = logging.getLogger(__name__)


class ConfigManager:
    """Handles all operations related to the application's INI config file."""

    def __init__(self, config_file_path: Path):
        self.config_file_path = config_file_path
        self._parser = configparser.ConfigParser(interpolation=None)

    def load_config(self, cli_options: dict[str, Any] | None = None) -> AppConfig:
        """
        Loads configuration from the INI file, applies CLI overrides, and validates it.

        A missing file is not an error: built-in defaults are used instead.

        Args:
            cli_options: A dictionary of options provided via the command line.

        Returns:
            A validated AppConfig object.

        Raises:
            ConfigurationError: If the config file is unreadable or validation fails.
        """
        config_from_file: dict[str, Any] = {}

        if self.config_file_path.is_file():
            try:
                self._parser.read(self.config_file_path, encoding="utf-8")
            except configparser.Error as e:
                raise ConfigurationError(
                    f"Error parsing configuration file: {e}"
                ) from e

            if self._migrate_if_needed():
                log.info(
                    "[yellow]Configuration file was updated with new default values."
                    "[/yellow]"
                )
            config_from_file = self._get_config_as_dict()
        else:
            log.debug(f"No config file at {self.config_file_path}; using defaults.")

        # Override with CLI options
        if cli_options:
            config_from_file.update(cli_options)

        try:
            config_dir = self.config_file_path.parent
            return AppConfig(**config_from_file, config_path=str(config_dir))
        except ValidationError as e:
            raise ConfigurationError(f"Configuration validation failed:\n{e}") from e

    def save_new_config(self, settings: dict[str, Any] | None = None) -> None:
        """
        Creates and saves a new configuration file.

        Args:
            settings: Values to store; anything missing falls back to model defaults.
        """
        settings = settings or {}
        config = configparser.ConfigParser(interpolation=None)
        config["DEFAULT"] = {}

        defaults = AppConfig.model_construct()
        for key in sorted(AppConfig.get_ini_keys()):
            value = settings.get(key, getattr(defaults, key, None))
            if value is not None:
                config["DEFAULT"][key] = str(value)

        try:
            self.config_file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_file_path, "w", encoding="utf-8") as configfile:
                config.write(configfile)
        except OSError as e:
            raise ConfigurationError(f"Failed to save configuration file: {e}") from e

    def _get_config_as_dict(self) -> dict[str, Any]:
        """Reads the 'DEFAULT' section of the INI file into a dictionary."""
        section = self._parser["DEFAULT"]
        defaults = AppConfig.model_construct()
        try:
            return {
                "api_base_url": section.get("api_base_url", defaults.api_base_url),
                "request_timeout": section.getint(
                    "request_timeout", defaults.request_timeout
                ),
                "request_delay_ms": section.getint(
                    "request_delay_ms", defaults.request_delay_ms
                ),
                "output_dir": section.get("output_dir", defaults.output_dir),
                "catalog_path": section.get("catalog_path", defaults.catalog_path),
            }
        except (ValueError, configparser.Error) as e:
            raise ConfigurationError(f"Invalid value in configuration file: {e}") from e

    def _migrate_if_needed(self) -> bool:
        """Adds missing default values to an existing config file."""
        defaults = AppConfig.model_construct()
        needs_saving = False

        config_section = self._parser["DEFAULT"]

        for key in sorted(AppConfig.get_ini_keys()):
            if key not in config_section:
                config_section[key] = str(getattr(defaults, key))
                needs_saving = True
                log.debug(
                    f"Migrating config: added missing key '{key}' with "
                    f"value '{config_section[key]}'."
                )

        if needs_saving:
            try:
                with open(self.config_file_path, "w", encoding="utf-8") as f:
                    self._parser.write(f)
            except OSError as e:
                log.error(f"Could not save migrated configuration file: {e}")
                return False

        return needs_saving
