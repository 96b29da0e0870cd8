"""
Logging Service Provider
Initializes application-wide structured logging
"""
import logging
from sanicviews.service_provider import ServiceProvider
from sanicviews.logging import LoggerConfig, LoggerFactory
from sanicviews.support import Config


class LoggingServiceProvider(ServiceProvider):
    """Logging service provider - sets up structured logging"""

    def register(self):
        """Register logging services"""
        self.setup_application_logger()
        self.app.singleton('log.factory', LoggerFactory())

    def setup_application_logger(self):
        """
        Setup each logger listed in app.ALLOWED_LOGGING_HANDLERS

        Example config/app.py:
            ALLOWED_LOGGING_HANDLERS = {
                'views': {'name': 'sanicviews', 'file_name': 'views'},
            }
        """
        allowed_handlers = Config.get('app.ALLOWED_LOGGING_HANDLERS', {}) or {}

        for handler_config in allowed_handlers.values():
            LoggerConfig.setup_logger(
                name=handler_config.get('name'),
                filter_sensitive=handler_config.get('filter_sensitive', True),
                file_name=handler_config.get('file_name')
            )

        # Keep Sanic's console output out of our handlers
        for logger_name in ('sanic.root', 'sanic.error', 'sanic.access', 'sanic.server'):
            logging.getLogger(logger_name).propagate = False
