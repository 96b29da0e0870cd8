"""
Logging Package
Structured logging with security features

Provides drop-in replacement for standard logging that uses
structured JSON logging with sensitive data filtering.
"""
from sanicviews.logging.logger_config import (
    LoggerConfig,
    JSONFormatter,
    SensitiveDataFilter
)
import logging
from typing import Optional, Union

__all__ = [
    'LoggerConfig',
    'JSONFormatter',
    'SensitiveDataFilter',
    'LoggerFactory',
    'getLogger',
    'INFO',
    'DEBUG',
    'WARNING',
    'ERROR',
    'CRITICAL',
]

INFO = logging.INFO
DEBUG = logging.DEBUG
WARNING = logging.WARNING
ERROR = logging.ERROR
CRITICAL = logging.CRITICAL


def getLogger(name: Optional[str] = None) -> logging.Logger:
    """
    Get a logger instance (drop-in replacement for logging.getLogger)

    Only allows logger names that are:
    - None (root logger)
    - Configured in ALLOWED_LOGGING_HANDLERS (e.g., 'application', 'views')
    - Module-based names (containing '.') like 'sanicviews.view.renderer'

    Example:
        from sanicviews.logging import getLogger
        logger = getLogger(__name__)
        logger.debug("The partial view '%s' was found.", 'sidebar')
    """
    if name and name.startswith('sanic.'):
        return logging.getLogger(name)

    if name is not None and '.' not in name:
        from sanicviews.support import Config
        allowed_handlers = Config.get('app.ALLOWED_LOGGING_HANDLERS', {}) or {}

        allowed_names = [
            handler_config.get('name')
            for handler_config in allowed_handlers.values()
            if handler_config.get('name') is not None
        ]

        if name not in allowed_names:
            # Force arbitrary names to use root logger
            name = None

    return logging.getLogger(name)


class LoggerFactory:
    """
    Creates named loggers for framework components

    Example:
        factory = LoggerFactory()
        logger = factory.create_logger(PartialViewExecutor)
        # -> logger named 'sanicviews.view.partial_executor.PartialViewExecutor'
    """

    def create_logger(self, category: Union[str, type]) -> logging.Logger:
        if isinstance(category, type):
            category = f"{category.__module__}.{category.__qualname__}"
        return getLogger(category)
