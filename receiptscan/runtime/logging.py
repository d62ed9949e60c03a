"""Logging setup for the receiptscan namespace.

CLI and workflow modules call get_logger(__name__); parser modules use
logging.getLogger(__name__) and inherit the namespace configuration.
RECEIPTSCAN_LOG_LEVEL selects the level (DEBUG, INFO, WARNING, ERROR).
"""

import logging
import os
import sys

DEFAULT_LOG_LEVEL = logging.INFO

LOGGER_NAMESPACE = "receiptscan"

LOG_FORMAT = "%(levelname)s [%(name)s] %(message)s"
LOG_FORMAT_DEBUG = "%(levelname)s [%(name)s:%(lineno)d] %(message)s"

_ENV_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
}

_logging_configured = False


def _formatter_for(level: int) -> logging.Formatter:
    # Line numbers only at DEBUG
    return logging.Formatter(LOG_FORMAT_DEBUG if level == logging.DEBUG else LOG_FORMAT)


def _level_from_env() -> int:
    env_level = os.environ.get("RECEIPTSCAN_LOG_LEVEL", "").upper()
    return _ENV_LEVELS.get(env_level, DEFAULT_LOG_LEVEL)


def configure_logging(level: int | None = None) -> None:
    """Attach a stderr handler to the receiptscan logger once.

    Args:
        level: Log level to use. If None, RECEIPTSCAN_LOG_LEVEL or
               DEFAULT_LOG_LEVEL applies.
    """
    global _logging_configured

    if _logging_configured:
        return

    if level is None:
        level = _level_from_env()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(_formatter_for(level))

    namespace_logger = logging.getLogger(LOGGER_NAMESPACE)
    namespace_logger.setLevel(level)
    namespace_logger.addHandler(handler)
    namespace_logger.propagate = False

    _logging_configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the receiptscan namespace, typically for __name__."""
    configure_logging()

    if name == LOGGER_NAMESPACE or name.startswith(f"{LOGGER_NAMESPACE}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}")


def set_log_level(level: int) -> None:
    """Change the namespace log level at runtime, switching the format for DEBUG."""
    namespace_logger = logging.getLogger(LOGGER_NAMESPACE)
    namespace_logger.setLevel(level)
    for handler in namespace_logger.handlers:
        handler.setFormatter(_formatter_for(level))
