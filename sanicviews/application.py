"""
Framework Application Class
Service container and provider lifecycle around a Sanic app
"""
from sanic import Sanic
from typing import Any, Callable, Dict, List, Optional
import inspect


class Application:
    """Service container - holds bindings and boots service providers"""

    def __init__(self, sanic_app: Optional[Sanic] = None):
        self.sanic_app = sanic_app
        self.providers: List[Any] = []
        self.bindings: Dict[str, Dict[str, Any]] = {}
        self.booted = False

        if sanic_app is not None:
            # ActionContext.from_request finds the container here
            sanic_app.ctx.container = self

        self.singleton('app', self)

    def singleton(self, key: str, factory_or_instance):
        """
        Register a singleton binding
        If factory: Will be called once with the application and cached
        If instance: Will be stored directly
        """
        if inspect.isfunction(factory_or_instance) or inspect.ismethod(factory_or_instance):
            self.bindings[key] = {'type': 'singleton', 'factory': factory_or_instance, 'instance': None}
        else:
            self.bindings[key] = {'type': 'singleton', 'factory': None, 'instance': factory_or_instance}

    def bind(self, key: str, factory: Callable[['Application'], Any]):
        """Register a factory binding (called every time)"""
        self.bindings[key] = {'type': 'factory', 'factory': factory}

    def make(self, key: str) -> Any:
        """Resolve a binding from the container"""
        if key not in self.bindings:
            raise KeyError(f"Binding '{key}' not found in container")

        binding = self.bindings[key]

        if binding['type'] == 'factory':
            return binding['factory'](self)

        if binding['instance'] is None:
            binding['instance'] = binding['factory'](self)
        return binding['instance']

    def has(self, key: str) -> bool:
        """Check if a binding exists in the container"""
        return key in self.bindings

    def register_provider(self, provider_class):
        """Register a service provider"""
        provider = provider_class(self)
        provider.register()
        self.providers.append(provider)
        return provider

    def boot(self):
        """Boot all service providers"""
        if self.booted:
            return

        for provider in self.providers:
            provider.boot()

        self.booted = True
