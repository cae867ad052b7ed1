"""Configuration management."""

from .paths import AppPaths
from .settings import (
    CoordinatorSettings,
    DisplaySettings,
    ServiceSettings,
    Settings,
    SettingsManager,
    load_settings,
)

__all__ = [
    "AppPaths",
    "CoordinatorSettings",
    "DisplaySettings",
    "ServiceSettings",
    "Settings",
    "SettingsManager",
    "load_settings",
]
