"""
CacheClip Settings Management
Loads and validates settings from settings.yml using Pydantic
"""

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from cacheclip.config.paths import AppPaths

logger = logging.getLogger(__name__)

# Hard ceiling on stored entries; settings may only lower it
MAX_HISTORY_ITEMS = 100


class HistorySettings(BaseModel):
    """History retention settings"""
    max_items: int = Field(
        default=MAX_HISTORY_ITEMS,
        ge=1,
        le=MAX_HISTORY_ITEMS,
        description="Maximum number of entries to keep (1-100)"
    )


class DaemonSettings(BaseModel):
    """Clipboard polling settings"""
    poll_interval_ms: int = Field(
        default=500,
        ge=50,
        le=60000,
        description="Delay between clipboard samples in milliseconds (50-60000)"
    )

    @property
    def poll_interval(self) -> float:
        """Polling interval in seconds"""
        return self.poll_interval_ms / 1000.0


class DisplaySettings(BaseModel):
    """Display-related settings"""
    default_list_count: int = Field(
        default=10,
        ge=1,
        le=MAX_HISTORY_ITEMS,
        description="Number of entries shown by `list` when no count is given"
    )
    max_content_length: int = Field(
        default=60,
        ge=10,
        le=500,
        description="Content longer than this is truncated with an ellipsis (10-500)"
    )


class Settings(BaseModel):
    """Main settings model"""
    history: HistorySettings = Field(default_factory=HistorySettings)
    daemon: DaemonSettings = Field(default_factory=DaemonSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)


class SettingsManager:
    """Manages loading and accessing settings"""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize settings manager

        Args:
            config_path: Path to settings.yml file. Defaults to the per-user config dir
        """
        if config_path is None:
            config_path = AppPaths.default().config_path

        self.config_path = config_path
        self.settings = self._load_settings()

    def _load_settings(self) -> Settings:
        """Load and validate settings from YAML file"""
        if not self.config_path.exists():
            logger.debug(f"Settings file not found at {self.config_path}, using defaults")
            return Settings()

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                config_data = yaml.safe_load(f)
        except (OSError, yaml.YAMLError) as e:
            logger.warning(f"Error reading settings from {self.config_path}: {e}")
            logger.warning("Using default settings")
            return Settings()

        if config_data is None:
            logger.info("Settings file is empty, using defaults")
            return Settings()

        if not isinstance(config_data, dict):
            logger.warning(f"Settings file {self.config_path} is not a mapping, using defaults")
            return Settings()

        try:
            settings = Settings(**config_data)
        except ValidationError as e:
            logger.warning(f"Invalid settings in {self.config_path}: {e}")
            logger.warning("Using default settings")
            return Settings()

        logger.info(f"Loaded settings from {self.config_path}")
        return settings

    def reload(self):
        """Reload settings from file"""
        self.settings = self._load_settings()

    @property
    def max_items(self) -> int:
        """Get the history max items setting"""
        return self.settings.history.max_items

    @property
    def poll_interval(self) -> float:
        """Get the daemon polling interval in seconds"""
        return self.settings.daemon.poll_interval

    @property
    def default_list_count(self) -> int:
        """Get the default list count setting"""
        return self.settings.display.default_list_count

    @property
    def max_content_length(self) -> int:
        """Get the content truncation length setting"""
        return self.settings.display.max_content_length
