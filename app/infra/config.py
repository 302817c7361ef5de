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

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict
from app.domain.models import UserPreferences

logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """
    Application settings with multiple sources:
    1. Default values (hardcoded)
    2. YAML config file (preferences only)
    3. Environment variables (highest priority)
    """
    model_config = SettingsConfigDict(
        env_prefix='TODOAPP_',
        env_file='.env',
        env_file_encoding='utf-8'
    )

    # Application paths
    app_name: str = "TodoApp"
    config_dir: Optional[Path] = None

    # Task list file, relative paths resolve against the working directory
    data_file: Path = Path("todos.json")

    log_level: str = "INFO"

    # User preferences
    preferences: UserPreferences = Field(default_factory=UserPreferences)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._init_paths()
        self._load_yaml_config()

    def _init_paths(self):
        """Initialize default paths based on OS"""
        if self.config_dir is None:
            if os.name == 'nt':  # Windows
                base = Path(os.getenv('APPDATA', Path.home()))
            else:  # Linux/Mac
                base = Path.home() / '.config'
            self.config_dir = base / self.app_name.lower()

    def _load_yaml_config(self):
        """Load preferences from YAML file"""
        # First check in workspace config folder
        config_file = Path("config/settings.yaml")
        if not config_file.exists():
            # Then check in user's config directory
            config_file = self.config_dir / "settings.yaml"

        if config_file.exists():
            try:
                with open(config_file, 'r', encoding='utf-8') as f:
                    config_data = yaml.safe_load(f)
            except (OSError, yaml.YAMLError) as e:
                logger.warning("Ignoring unreadable config %s: %s", config_file, e)
                return
            if not config_data:
                return
            if not isinstance(config_data, dict):
                logger.warning("Ignoring config %s: expected a mapping, got %s",
                               config_file, type(config_data).__name__)
                return
            try:
                # Update preferences with YAML data
                self.preferences = UserPreferences.model_validate(config_data)
            except ValidationError as e:
                logger.warning("Ignoring invalid preferences in %s: %s", config_file, e)


# Global settings instance
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings

