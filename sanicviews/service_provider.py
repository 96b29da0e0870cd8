"""
Service Provider Base Class
Registers services in the container and bootstraps them
"""
from abc import ABC
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from sanicviews.application import Application


class ServiceProvider(ABC):
    """
    Base Service Provider class

    register() binds services; boot() runs after every provider has
    registered, so it may resolve services bound by other providers.
    """

    def __init__(self, app: 'Application'):
        self.app = app

    def register(self):
        """
        Register services in the container

        Example:
            self.app.singleton('diagnostics', DiagnosticSource())
            self.app.bind('view.writer', lambda app: ...)
        """
        pass

    def boot(self):
        """Bootstrap services (after all providers are registered)"""
        pass
