"""Core configuration settings for rbseq."""

import logging
from pathlib import Path
from typing import Optional
from dataclasses import dataclass, field
from enum import Enum

from rbseq.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

class LogLevel(Enum):
    """Supported logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"

@dataclass
class ChunkingSettings:
    """Chunking behaviour."""
    # An empty source still produces one empty chunk unless disabled.
    emit_empty_group: bool = True

    def validate(self) -> None:
        """Validate chunking settings."""
        if not isinstance(self.emit_empty_group, bool):
            raise ConfigurationError(
                "emit_empty_group must be a boolean",
                config_field="chunking.emit_empty_group"
            )

@dataclass
class CycleSettings:
    """Cycle behaviour."""
    log_every_pass: bool = False

    def validate(self) -> None:
        """Validate cycle settings."""
        if not isinstance(self.log_every_pass, bool):
            raise ConfigurationError(
                "log_every_pass must be a boolean",
                config_field="cycle.log_every_pass"
            )

@dataclass
class LoggingSettings:
    """Logging configuration."""
    level: LogLevel = LogLevel.INFO
    log_dir: Optional[Path] = None
    console_output: bool = True

    def validate(self) -> None:
        """Validate logging settings."""
        if not isinstance(self.level, LogLevel):
            raise ConfigurationError(
                f"Invalid log level: {self.level}",
                config_field="logging.level"
            ).add_suggestion(f"Use one of: {[lvl.value for lvl in LogLevel]}")

        if self.log_dir and self.log_dir.exists() and not self.log_dir.is_dir():
            raise ConfigurationError(
                f"Log path is not a directory: {self.log_dir}",
                config_field="logging.log_dir"
            ).add_suggestion("Point log_dir at a directory or leave it unset")

@dataclass
class Settings:
    """Main configuration settings for rbseq."""
    chunking: ChunkingSettings = field(default_factory=ChunkingSettings)
    cycle: CycleSettings = field(default_factory=CycleSettings)
    logging: LoggingSettings = field(default_factory=LoggingSettings)

    def validate(self) -> None:
        """Validate all configuration settings."""
        try:
            self.chunking.validate()
            self.cycle.validate()
            self.logging.validate()
        except ConfigurationError:
            raise
        except Exception as e:
            raise ConfigurationError(
                f"Configuration validation failed: {str(e)}"
            ) from e

    def to_dict(self) -> dict:
        """Convert settings to dictionary for debugging."""
        return {
            'chunking': {
                'emit_empty_group': self.chunking.emit_empty_group,
            },
            'cycle': {
                'log_every_pass': self.cycle.log_every_pass,
            },
            'logging': {
                'level': self.logging.level.value,
                'log_dir': str(self.logging.log_dir) if self.logging.log_dir else None,
                'console_output': self.logging.console_output,
            },
        }

# Global settings instance
_settings: Optional[Settings] = None

def get_settings() -> Settings:
    """Get the current global settings, installing defaults on first use."""
    global _settings
    if _settings is None:
        _settings = Settings()
        logger.debug("No settings installed, using defaults")
    return _settings

def set_settings(settings: Settings) -> None:
    """Set the global settings instance."""
    global _settings
    settings.validate()  # Validate before setting
    _settings = settings
    logger.info("Configuration loaded and validated successfully")

def reset_settings() -> None:
    """Drop the global settings so the next access falls back to defaults."""
    global _settings
    _settings = None
