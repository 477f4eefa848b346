"""Configuration management."""

from .paths import AppPaths
from .settings import (
    MAX_HISTORY_ITEMS,
    DaemonSettings,
    DisplaySettings,
    HistorySettings,
    Settings,
    SettingsManager,
)

__all__ = [
    "AppPaths",
    "DaemonSettings",
    "DisplaySettings",
    "HistorySettings",
    "MAX_HISTORY_ITEMS",
    "Settings",
    "SettingsManager",
]
