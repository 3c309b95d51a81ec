"""structlog configuration driven by the application config section."""

from __future__ import annotations

import logging
import sys

import structlog

from .models import AppConfig

_LOG_LEVELS = {
    "fatal": logging.CRITICAL,
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "log": logging.INFO,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "verbose": logging.DEBUG,
}


def config_resolve_log_level(log_level: str) -> int:
    """Map a configured level name to a standard logging level (INFO if unknown)."""

    return _LOG_LEVELS.get(log_level.strip().lower(), logging.INFO)


def config_configure_logging(app_config: AppConfig) -> None:
    """Configure structlog and the root logger for the running process.

    Args:
        app_config: Application section providing level and format.

    Returns:
        None: Logging is configured as a side effect.
    """

    level = config_resolve_log_level(app_config.log_level)
    renderer = (
        structlog.processors.JSONRenderer()
        if app_config.log_format == "json"
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(message)s"))
    root_logger.addHandler(handler)
    root_logger.setLevel(level)
