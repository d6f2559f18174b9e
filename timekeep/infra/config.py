"""
Configuration management using Pydantic Settings.

Architecture Decision: Why pydantic-settings?
- Type-safe configuration with validation
- Supports multiple sources (YAML, env vars, defaults)
- Easy to test with different configurations
"""

import logging
import os
from pathlib import Path
from typing import Optional

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from timekeep.domain.models import DisplayPreferences

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class Settings(BaseSettings):
    """
    Application settings with multiple sources:
    1. Default values (hardcoded)
    2. YAML config file
    3. Environment variables or explicit arguments (highest priority)

    Preferences given through TIMEKEEP_PREFERENCES or the `preferences`
    argument are kept as-is; the YAML overlay only fills in the rest.
    """
    model_config = SettingsConfigDict(
        env_prefix='TIMEKEEP_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore'
    )

    app_name: str = "Timekeep"
    config_dir: Optional[Path] = None

    preferences: DisplayPreferences = Field(default_factory=DisplayPreferences)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._init_paths()
        self._load_yaml_config()

    def _init_paths(self):
        """Pick the per-user config directory if none was given"""
        if self.config_dir is None:
            if os.name == 'nt':  # Windows
                base = Path(os.getenv('APPDATA') or Path.home())
            else:  # Linux/Mac
                base = Path.home() / '.config'
            self.config_dir = base / self.app_name.lower()

    def config_file(self) -> Path:
        """settings.yaml in the working directory wins over the user one"""
        local_file = Path("config/settings.yaml")
        if local_file.exists():
            return local_file
        return self.config_dir / "settings.yaml"

    def _load_yaml_config(self):
        """Load preferences from YAML file unless they were already provided"""
        if "preferences" in self.model_fields_set:
            return

        config_file = self.config_file()
        if not config_file.exists():
            return

        with open(config_file, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f)

        if not config_data:
            return
        if not isinstance(config_data, dict):
            logger.warning("Ignoring %s: expected a mapping, got %s",
                           config_file, type(config_data).__name__)
            return
        self.preferences = DisplayPreferences(**config_data)

    def save_preferences(self):
        """Save current preferences to YAML file"""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        config_file = self.config_dir / "settings.yaml"
        with open(config_file, 'w', encoding='utf-8') as f:
            yaml.dump(self.preferences.model_dump(), f, default_flow_style=False)


def configure_logging(settings: Settings) -> None:
    """Set up root logging from the user's preferences"""
    level = logging.getLevelName(settings.preferences.log_level.upper())
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    """Reload settings from file"""
    global _settings
    _settings = Settings()
    return _settings
