"""Logging setup shared by the library modules and the CLI."""

import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_LOGGING_CONFIGURED = False


def _resolve_level(level: str | int | None) -> int:
    """Resolves an explicit level, then LOG_LEVEL, then INFO."""
    candidate = level if level is not None else os.getenv("LOG_LEVEL")
    if candidate is None or candidate == "":
        return logging.INFO
    if isinstance(candidate, int):
        return candidate
    resolved = logging.getLevelName(str(candidate).strip().upper())
    if isinstance(resolved, int):
        return resolved
    return logging.INFO


def configure_logging(level: str | int | None = None) -> int:
    """Configures root logging and returns the effective level.

    An explicit ``level`` wins over the ``LOG_LEVEL`` environment variable.
    """
    global _LOGGING_CONFIGURED
    resolved = _resolve_level(level)
    root_logger = logging.getLogger()
    if not _LOGGING_CONFIGURED and not root_logger.handlers:
        logging.basicConfig(format=LOG_FORMAT, level=resolved)
        for handler in root_logger.handlers:
            handler.setLevel(resolved)
    root_logger.setLevel(resolved)
    _LOGGING_CONFIGURED = True
    return resolved


def get_logger(name: str) -> logging.Logger:
    """Returns a named logger, configuring logging from LOG_LEVEL on first use."""
    if not _LOGGING_CONFIGURED:
        configure_logging()
    return logging.getLogger(name)
