"""
Service Providers
"""
from sanicviews.providers.logging_service_provider import LoggingServiceProvider
from sanicviews.providers.view_service_provider import ViewServiceProvider

__all__ = [
    'LoggingServiceProvider',
    'ViewServiceProvider',
]
