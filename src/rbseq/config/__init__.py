"""Configuration management for rbseq."""

from .settings import (
    Settings,
    ChunkingSettings,
    CycleSettings,
    LoggingSettings,
    LogLevel,
    get_settings,
    set_settings,
    reset_settings,
)
from .loader import ConfigurationLoader, configure_from_env

__all__ = [
    "Settings",
    "ChunkingSettings",
    "CycleSettings",
    "LoggingSettings",
    "LogLevel",
    "get_settings",
    "set_settings",
    "reset_settings",
    "ConfigurationLoader",
    "configure_from_env",
]
