"""
View Contexts
Action context for the in-flight request and the context handed to views
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, TYPE_CHECKING

from sanic.request import Request

from sanicviews.view.view_data import ViewDataDictionary

if TYPE_CHECKING:
    from sanicviews.application import Application
    from sanicviews.view.engine import View
    from sanicviews.view.view_data import TempDataDictionary
    from sanicviews.view.writer import HttpResponseStreamWriter


@dataclass
class ActionDescriptor:
    """Describes the action handling the request; name is the default view name"""
    name: str
    controller_name: Optional[str] = None
    route_values: Dict[str, Any] = field(default_factory=dict)


@dataclass
class ActionContext:
    """
    The in-flight request and the action handling it

    content_type may be set by handler code; it is used when the result
    does not specify one.
    """
    request: Request
    action_descriptor: ActionDescriptor
    services: Optional['Application'] = None
    content_type: Optional[str] = None

    @classmethod
    def from_request(cls, request: Request, services: Optional['Application'] = None) -> 'ActionContext':
        """
        Build a context from the matched Sanic route

        Route names look like 'app.handler' or 'app.blueprint.handler';
        the handler becomes the action name and the blueprint the controller.

        Example:
            @bp.get('/inbox')
            async def inbox(request):
                context = ActionContext.from_request(request)
                context.action_descriptor.name             # 'inbox'
                context.action_descriptor.controller_name  # bp.name
        """
        route = getattr(request, 'route', None)
        parts = route.name.split('.') if route is not None and route.name else ['']

        descriptor = ActionDescriptor(
            name=parts[-1],
            controller_name=parts[-2] if len(parts) > 2 else None,
            route_values=dict(request.match_info) if route is not None else {},
        )

        if services is None:
            services = getattr(request.app.ctx, 'container', None)

        return cls(request=request, action_descriptor=descriptor, services=services)


class ViewContext:
    """
    Everything a view needs to render itself into the response
    """

    def __init__(
        self,
        action_context: ActionContext,
        view: 'View',
        view_data: Optional[ViewDataDictionary],
        temp_data: Optional['TempDataDictionary'],
        writer: 'HttpResponseStreamWriter',
        template_globals: Optional[Dict[str, Any]] = None
    ):
        self.action_context = action_context
        self.view = view
        self.view_data = view_data if view_data is not None else ViewDataDictionary()
        self.temp_data = temp_data
        self.writer = writer
        self.template_globals = template_globals or {}

    @property
    def request(self) -> Request:
        return self.action_context.request

    def template_context(self) -> Dict[str, Any]:
        """
        Build complete template context

        Globals first, then view data, then the framework entries
        (model, view_data, temp_data, request, csrf_token).
        """
        context = {}
        context.update(self.template_globals)
        context.update(self.view_data)

        context['model'] = self.view_data.model
        context['view_data'] = self.view_data
        context['temp_data'] = self.temp_data
        context['request'] = self.request

        csrf_token = getattr(self.request.ctx, 'csrf_token', None)
        if csrf_token:
            context['csrf_token'] = csrf_token

        return context
