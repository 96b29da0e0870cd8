"""
Partial View Result
Describes the partial view an action wants rendered
"""
from dataclasses import dataclass, field
from typing import Any, Optional, Union

from sanicviews.exceptions import ArgumentMissingException
from sanicviews.view.content_type import MediaType
from sanicviews.view.context import ActionContext
from sanicviews.view.engine import ViewEngine
from sanicviews.view.view_data import TempDataDictionary, ViewDataDictionary


@dataclass
class PartialViewResult:
    """
    Partial view to render for the current action

    view_name defaults to the action name and view_engine to the
    application's composite engine. A content_type given as a string
    is parsed into a MediaType.

    Example:
        return PartialViewResult(view_name='sidebar', view_data=ViewDataDictionary({'items': items}))
    """
    view_name: Optional[str] = None
    view_engine: Optional[ViewEngine] = None
    view_data: ViewDataDictionary = field(default_factory=ViewDataDictionary)
    temp_data: Optional[TempDataDictionary] = None
    content_type: Optional[Union[MediaType, str]] = None
    status_code: Optional[int] = None

    def __post_init__(self):
        if not isinstance(self.view_data, ViewDataDictionary):
            self.view_data = ViewDataDictionary(self.view_data)
        if isinstance(self.content_type, str):
            self.content_type = MediaType.parse(self.content_type)

    @property
    def model(self) -> Any:
        return self.view_data.model

    async def execute_result(self, action_context: ActionContext):
        """
        Find the view and render it

        Temp data is saved by the renderer just before the response starts.

        Raises:
            ViewNotFoundException: no engine located the view
        """
        if action_context is None:
            raise ArgumentMissingException('action_context')
        if action_context.services is None:
            raise RuntimeError(
                "No service container on the action context. "
                "Register ViewServiceProvider before rendering views."
            )

        executor = action_context.services.make('view.partial_executor')

        view = executor.resolve(action_context, self).ensure_successful().view
        await executor.render(action_context, view, self)
