"""
Configuration management for revolver applications.

Provides a configuration file at ~/.revolver/config.json for default settings.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

from revolver.looper import Prompts

logger = logging.getLogger(__name__)


# Default values - single source of truth
DEFAULTS = {
    "applied_prompt": "+>> ",
    "skipped_prompt": "->> ",
    "erred_prompt": "!>> ",
    "simple": False,
    "log_level": "WARNING",
    "log_file": None,
    "commands_dir": None,
}


class Config(BaseModel):
    """Configuration settings.

    All settings are optional. Use DEFAULTS for default values.
    """

    model_config = {"extra": "ignore"}  # Ignore unknown fields like _comment

    # Prompt settings
    applied_prompt: Optional[str] = Field(
        default=None,
        description="Prompt shown after a command was applied"
    )
    skipped_prompt: Optional[str] = Field(
        default=None,
        description="Prompt shown after a command was skipped"
    )
    erred_prompt: Optional[str] = Field(
        default=None,
        description="Prompt shown after a command error"
    )

    # Terminal settings
    simple: Optional[bool] = Field(
        default=None,
        description="Use plain stdin/stdout (no prompt_toolkit)"
    )

    # Logging settings
    log_level: Optional[str] = Field(
        default=None,
        description="Log level (DEBUG, INFO, WARNING, ERROR)"
    )
    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logging is off when unset)"
    )

    # Command settings
    commands_dir: Optional[str] = Field(
        default=None,
        description="Directory of additional command packages"
    )

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value with fallback to DEFAULTS, then to provided default."""
        value = getattr(self, key, None)
        if value is not None:
            return value
        return DEFAULTS.get(key, default)

    def prompts(self) -> Prompts:
        """Build the looper prompts from the configured strings."""
        return Prompts(
            applied=self.get("applied_prompt"),
            skipped=self.get("skipped_prompt"),
            erred=self.get("erred_prompt"),
        )


class ConfigManager:
    """Loads configuration from a JSON file."""

    CONFIG_FILE = Path.home() / ".revolver" / "config.json"

    def __init__(self, config_file: Optional[Path] = None):
        if config_file is not None:
            self.CONFIG_FILE = Path(config_file)
        self._config: Optional[Config] = None

    @property
    def config(self) -> Config:
        """Get the current config, loading if necessary."""
        if self._config is None:
            self._config = self.load()
        return self._config

    def load(self) -> Config:
        """Load configuration from file.

        Returns:
            Config object with loaded settings, or defaults if file doesn't exist.
        """
        if not self.CONFIG_FILE.exists():
            return Config()

        try:
            data = json.loads(self.CONFIG_FILE.read_text())
            return Config.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            logger.warning(f"Invalid config file {self.CONFIG_FILE} ({e}), using defaults")
            return Config()

    def get(self, key: str, default: Any = None) -> Any:
        """Get a config value with fallback."""
        return self.config.get(key, default)


# Singleton instance
_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    """Get the singleton ConfigManager instance."""
    global _manager
    if _manager is None:
        _manager = ConfigManager()
    return _manager


def get_config() -> Config:
    """Get the current configuration."""
    return get_config_manager().config
