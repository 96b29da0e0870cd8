"""
Partial View Executor
Finds and renders the view for a PartialViewResult
"""
from typing import Awaitable, Optional, TYPE_CHECKING

from sanicviews.diagnostics import DiagnosticSource, VIEW_FOUND, VIEW_NOT_FOUND, ViewFound, ViewNotFound
from sanicviews.exceptions import ArgumentMissingException
from sanicviews.logging import LoggerFactory
from sanicviews.view.context import ActionContext
from sanicviews.view.engine import View, ViewEngine, ViewEngineResult
from sanicviews.view.options import ViewOptions
from sanicviews.view.renderer import ViewRenderer
from sanicviews.view.writer import HttpResponseStreamWriterFactory

if TYPE_CHECKING:
    from sanicviews.view.results import PartialViewResult


class PartialViewExecutor:
    """
    Finds and renders partial views

    Example:
        executor = app.make('view.partial_executor')
        result = executor.resolve(action_context, partial_result)
        result.ensure_successful()
        await executor.render(action_context, result.view, partial_result)
    """

    def __init__(
        self,
        view_engine: ViewEngine,
        writer_factory: HttpResponseStreamWriterFactory,
        diagnostics: DiagnosticSource,
        logger_factory: LoggerFactory,
        options: Optional[ViewOptions] = None
    ):
        if view_engine is None:
            raise ArgumentMissingException('view_engine')
        if writer_factory is None:
            raise ArgumentMissingException('writer_factory')
        if diagnostics is None:
            raise ArgumentMissingException('diagnostics')
        if logger_factory is None:
            raise ArgumentMissingException('logger_factory')

        self.view_engine = view_engine
        self.diagnostics = diagnostics
        self.renderer = ViewRenderer(writer_factory, diagnostics, options)
        self.logger = logger_factory.create_logger(PartialViewExecutor)

    def resolve(self, action_context: ActionContext, result: 'PartialViewResult') -> ViewEngineResult:
        """
        Locate the view for result

        The result's engine overrides the default engine, and a non-empty
        result view name overrides the action name. A missing view is
        reported and returned, not raised.
        """
        if action_context is None:
            raise ArgumentMissingException('action_context')
        if result is None:
            raise ArgumentMissingException('result')

        view_engine = result.view_engine if result.view_engine is not None else self.view_engine
        view_name = result.view_name if result.view_name else action_context.action_descriptor.name

        engine_result = view_engine.find_partial_view(action_context, view_name)

        if engine_result.success:
            if self.diagnostics.is_enabled(VIEW_FOUND):
                self.diagnostics.write(
                    VIEW_FOUND,
                    ViewFound(
                        action_context=action_context,
                        is_partial=True,
                        result=result,
                        view_name=view_name,
                        view=engine_result.view,
                    )
                )

            self.logger.debug("The partial view '%s' was found.", view_name)
        else:
            if self.diagnostics.is_enabled(VIEW_NOT_FOUND):
                self.diagnostics.write(
                    VIEW_NOT_FOUND,
                    ViewNotFound(
                        action_context=action_context,
                        is_partial=True,
                        result=result,
                        view_name=view_name,
                        searched_locations=engine_result.searched_locations,
                    )
                )

            self.logger.error(
                "The partial view '%s' was not found. Searched locations: %s",
                view_name,
                engine_result.searched_locations,
            )

        return engine_result

    def render(self, action_context: ActionContext, view: View, result: 'PartialViewResult') -> Awaitable[None]:
        """
        Render view into the response with the result's data, content type and status

        Arguments are checked before the awaitable is created, so a missing
        argument raises at call time.
        """
        if action_context is None:
            raise ArgumentMissingException('action_context')
        if view is None:
            raise ArgumentMissingException('view')
        if result is None:
            raise ArgumentMissingException('result')

        return self.renderer.render(
            action_context,
            view,
            result.view_data,
            result.temp_data,
            result.content_type,
            result.status_code,
        )
