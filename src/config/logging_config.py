import logging
import logging.config
import os

from core.errors import ConfigError

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_FILE = os.getenv("LOG_FILE", "")

# zerolog-style level names, plus the stdlib ones
LEVELS = {
    "": "INFO",
    "trace": "DEBUG",
    "debug": "DEBUG",
    "info": "INFO",
    "warn": "WARNING",
    "warning": "WARNING",
    "error": "ERROR",
    "fatal": "CRITICAL",
    "panic": "CRITICAL",
    "critical": "CRITICAL",
}


def resolve_log_level(name: str) -> str:
    """
    Map a configured level name onto a logging level name.

    Raises:
        ConfigError: If the name is not a known level.
    """
    try:
        return LEVELS[name.strip().lower()]
    except KeyError:
        raise ConfigError(f"unknown log level: {name!r}") from None


def build_logging_config(level_name: str = LOG_LEVEL, log_file: str = LOG_FILE) -> dict:
    level = resolve_log_level(level_name)
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "default",
            "level": level,
        },
    }
    if log_file:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "filename": log_file,
            "formatter": "default",
            "level": level,
        }
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {
                "format": LOG_FORMAT,
            },
        },
        "handlers": handlers,
        "root": {
            "handlers": list(handlers),
            "level": level,
        },
    }


def setup_logging(level_name: str = LOG_LEVEL, log_file: str = LOG_FILE):
    config = build_logging_config(level_name, log_file)
    if log_file and os.path.dirname(log_file):
        os.makedirs(os.path.dirname(log_file), exist_ok=True)
    logging.config.dictConfig(config)
