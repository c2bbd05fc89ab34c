"""Configuration loading from environment and programmatic sources."""

import os
import logging
from pathlib import Path
from dataclasses import replace
from typing import Any, Mapping, Optional

from rbseq.config.settings import (
    Settings, ChunkingSettings, CycleSettings, LoggingSettings, LogLevel,
    set_settings,
)
from rbseq.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

ENV_PREFIX = "RBSEQ_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}

def _parse_bool(raw: Any, config_field: str) -> bool:
    if isinstance(raw, bool):
        return raw
    value = str(raw).strip().lower()
    if value in _TRUE:
        return True
    if value in _FALSE:
        return False
    raise ConfigurationError(
        f"Cannot interpret {raw!r} as a boolean",
        config_field=config_field
    ).add_suggestion("Use one of: 1/0, true/false, yes/no, on/off")

def _parse_level(raw: Any) -> LogLevel:
    if isinstance(raw, LogLevel):
        return raw
    try:
        return LogLevel(str(raw).strip().upper())
    except ValueError as e:
        raise ConfigurationError(
            f"Invalid log level: {raw}",
            config_field="logging.level"
        ).add_suggestion(f"Use one of: {[lvl.value for lvl in LogLevel]}") from e

def _section(data: Mapping[str, Any], name: str) -> Mapping[str, Any]:
    section = data.get(name)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigurationError(
            f"Section '{name}' must be a mapping, got {type(section).__name__}",
            config_field=name
        ).add_suggestion(f"Provide '{name}' as a table of key/value pairs")
    return section

class ConfigurationLoader:
    """Loads configuration from mappings, the environment and system defaults."""

    def load_defaults(self) -> Settings:
        """Load default configuration settings."""
        return Settings(
            chunking=ChunkingSettings(emit_empty_group=True),
            cycle=CycleSettings(log_every_pass=False),
            logging=LoggingSettings(
                level=LogLevel.INFO,
                log_dir=None,
                console_output=True,
            ),
        )

    def load_from_mapping(self, data: Mapping[str, Any]) -> Settings:
        """Load configuration from a nested mapping, e.g. parsed from a file."""
        settings = self.load_defaults()
        unknown = set(data) - {"chunking", "cycle", "logging"}
        if unknown:
            raise ConfigurationError(
                f"Unknown configuration sections: {sorted(unknown)}"
            ).add_suggestion("Valid sections are: chunking, cycle, logging")

        chunking_updates = {}
        chunking = _section(data, "chunking")
        if "emit_empty_group" in chunking:
            chunking_updates['emit_empty_group'] = _parse_bool(
                chunking["emit_empty_group"], "chunking.emit_empty_group"
            )

        cycle_updates = {}
        cycle = _section(data, "cycle")
        if "log_every_pass" in cycle:
            cycle_updates['log_every_pass'] = _parse_bool(
                cycle["log_every_pass"], "cycle.log_every_pass"
            )

        logging_updates = {}
        log_cfg = _section(data, "logging")
        if "level" in log_cfg:
            logging_updates['level'] = _parse_level(log_cfg["level"])
        if log_cfg.get("log_dir"):
            logging_updates['log_dir'] = Path(log_cfg["log_dir"])
        if "console_output" in log_cfg:
            logging_updates['console_output'] = _parse_bool(
                log_cfg["console_output"], "logging.console_output"
            )

        return replace(
            settings,
            chunking=replace(settings.chunking, **chunking_updates),
            cycle=replace(settings.cycle, **cycle_updates),
            logging=replace(settings.logging, **logging_updates),
        )

    def load_from_env(self, environ: Optional[Mapping[str, str]] = None) -> Settings:
        """Load configuration from RBSEQ_* environment variables."""
        env = os.environ if environ is None else environ
        data: dict = {"chunking": {}, "cycle": {}, "logging": {}}

        if f"{ENV_PREFIX}CHUNK_EMIT_EMPTY" in env:
            data["chunking"]["emit_empty_group"] = env[f"{ENV_PREFIX}CHUNK_EMIT_EMPTY"]
        if f"{ENV_PREFIX}CYCLE_LOG_EVERY_PASS" in env:
            data["cycle"]["log_every_pass"] = env[f"{ENV_PREFIX}CYCLE_LOG_EVERY_PASS"]
        if f"{ENV_PREFIX}LOG_LEVEL" in env:
            data["logging"]["level"] = env[f"{ENV_PREFIX}LOG_LEVEL"]
        if env.get(f"{ENV_PREFIX}LOG_DIR"):
            data["logging"]["log_dir"] = env[f"{ENV_PREFIX}LOG_DIR"]
        if f"{ENV_PREFIX}LOG_CONSOLE" in env:
            data["logging"]["console_output"] = env[f"{ENV_PREFIX}LOG_CONSOLE"]

        overrides = sum(len(section) for section in data.values())
        logger.debug("Loaded %d configuration overrides from environment", overrides)
        return self.load_from_mapping(data)

def configure_from_env(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Load settings from the environment, validate and install them globally."""
    loader = ConfigurationLoader()
    settings = loader.load_from_env(environ)
    set_settings(settings)
    return settings
