"""
Configuration Manager - Read-only JSON settings loading.

Settings are read once from an optional JSON file and validated into an
AppSettings instance. Nothing is ever written back.
"""

import json
import logging
from pathlib import Path
from typing import Optional, Union

from pydantic import ValidationError

from kisskh.core.config_schemas import AppSettings
from kisskh.core.exceptions import ConfigurationError


logger = logging.getLogger(__name__)


class ConfigManager:
    """Loads and validates application settings from a JSON file."""

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        Initialize configuration manager.

        Args:
            config_file: Path to a settings JSON file. Defaults are used when
                         omitted or when the file does not exist.
        """
        self.config_file = Path(config_file) if config_file else None
        self._settings = self._load_settings()

    def _load_settings(self) -> AppSettings:
        """Load and validate application settings."""
        if self.config_file is None:
            return AppSettings()

        if not self.config_file.exists():
            logger.info(f"Settings file {self.config_file} not found, using defaults")
            return AppSettings()

        try:
            with open(self.config_file, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Could not read settings file: {e}",
                config_path=str(self.config_file),
                details=str(e)
            )

        try:
            settings = AppSettings.model_validate(data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid settings: {e.error_count()} validation error(s)",
                config_path=str(self.config_file),
                details=str(e)
            )

        logger.debug(f"Settings loaded from {self.config_file}")
        return settings

    @property
    def settings(self) -> AppSettings:
        """Get the loaded application settings."""
        return self._settings


__all__ = ["ConfigManager"]
