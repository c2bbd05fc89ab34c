# logging setup for rbseq
import logging
import logging.config
from datetime import datetime
from pathlib import Path
from typing import Optional

from platformdirs import user_log_dir

from rbseq.config.settings import LoggingSettings, get_settings

LOGGER_NAME = "rbseq"

def default_log_dir() -> Path:
    """Per-user log directory for rbseq."""
    return Path(user_log_dir(LOGGER_NAME))

def setup_logging(
    log_dir: Optional[str] = None,
    console: Optional[bool] = None,
    level: Optional[str] = None,
    settings: Optional[LoggingSettings] = None,
) -> logging.Logger:
    """
    Setup logging with a file handler and an optional console handler.

    Explicit arguments win over ``settings``; ``settings`` defaults to the
    logging section of the global configuration.

    Args:
        log_dir: Directory for log files (defaults to the user log dir)
        console: Whether to enable console logging
        level: Level of the ``rbseq`` logger
        settings: Logging settings to fall back on
    """
    settings = settings or get_settings().logging
    if log_dir is None:
        log_dir = settings.log_dir or default_log_dir()
    if console is None:
        console = settings.console_output
    level = (level or settings.level.value).upper()

    Path(log_dir).mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = str(Path(log_dir) / f"{LOGGER_NAME}_{ts}.log")

    handlers = ["file"]
    config = {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "plain": {
                "format": "{asctime} {levelname:<7} {name} - {message}",
                "style": "{",
            },
            "console": {
                "format": "{levelname:<7} {message}",
                "style": "{",
            }
        },
        "handlers": {
            "file": {
                "class": "logging.FileHandler",
                "formatter": "plain",
                "filename": log_path,
                "encoding": "utf-8",
                "mode": "w",
                "level": "DEBUG",   # capture everything in file
            }
        },
        "loggers": {
            LOGGER_NAME: {
                "level": level,
                "handlers": handlers,
                "propagate": False,
            },
        },
    }

    if console:
        config["handlers"]["console"] = {
            "class": "logging.StreamHandler",
            "formatter": "console",
            "level": level,
        }
        handlers.append("console")

    logging.config.dictConfig(config)

    logger = logging.getLogger(LOGGER_NAME)
    logger.info("Logging initialised. File: %s", log_path)
    return logger
