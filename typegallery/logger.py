# typegallery/logger.py
# Module loggers + the one-line action log used across the app

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path

from typegallery import config

ROOT_LOGGER = "typegallery"
_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

ENABLE_VERBOSE_LOGGING = config.VERBOSE

_configured = False


def _configure_root() -> logging.Logger:
    """Attach console (and optional rotating file) handlers once."""
    global _configured
    root = logging.getLogger(ROOT_LOGGER)
    if _configured:
        return root

    root.setLevel(getattr(logging, config.LOG_LEVEL, logging.INFO))
    root.propagate = False
    formatter = logging.Formatter(_FORMAT)

    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    root.addHandler(console)

    if config.LOG_FILE:
        path = Path(config.LOG_FILE)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            path,
            maxBytes=config.LOG_MAX_BYTES,
            backupCount=config.LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    _configured = True
    return root


def get_logger(name: str) -> logging.Logger:
    """Return a child of the package logger, e.g. get_logger(__name__)."""
    _configure_root()
    if name == ROOT_LOGGER or name.startswith(ROOT_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER}.{name}")


def set_verbose(on: bool):
    """Enable/disable per-request detail logs."""
    global ENABLE_VERBOSE_LOGGING
    ENABLE_VERBOSE_LOGGING = bool(on)


def log_action(message: str, level: int = logging.INFO):
    get_logger("actions").log(level, message)


def log_verbose(message: str):
    """Log only while verbose logging is on."""
    if ENABLE_VERBOSE_LOGGING:
        log_action(message)
