"""
View Renderer
Applies content type and status code, then renders a view into the response
"""
from typing import Optional, Union

from sanicviews.defaults import DEFAULT_CHARSET, DEFAULT_CONTENT_TYPE, DEFAULT_STATUS_CODE
from sanicviews.diagnostics import DiagnosticSource, BEFORE_VIEW, AFTER_VIEW, BeforeView, AfterView
from sanicviews.exceptions import ArgumentMissingException
from sanicviews.view.content_type import MediaType
from sanicviews.view.context import ActionContext, ViewContext
from sanicviews.view.engine import View
from sanicviews.view.options import ViewOptions
from sanicviews.view.view_data import TempDataDictionary, ViewDataDictionary
from sanicviews.view.writer import HttpResponseStreamWriterFactory


class ViewRenderer:
    """
    Shared rendering step used by the view executors

    Content type priority:
        1. content_type passed in (set on the result)
        2. action_context.content_type (set by handler code)
        3. text/html; charset=utf-8

    The winning content type gets charset=utf-8 when it has none, and its
    charset encodes the body. The response starts on the writer's first
    flush; temp data is saved right before that, so the session still
    reflects reads made while the view was buffering.
    """

    DEFAULT_CONTENT_TYPE = MediaType(DEFAULT_CONTENT_TYPE, DEFAULT_CHARSET)

    def __init__(
        self,
        writer_factory: HttpResponseStreamWriterFactory,
        diagnostics: DiagnosticSource,
        options: Optional[ViewOptions] = None
    ):
        if writer_factory is None:
            raise ArgumentMissingException('writer_factory')
        if diagnostics is None:
            raise ArgumentMissingException('diagnostics')

        self.writer_factory = writer_factory
        self.diagnostics = diagnostics
        self.options = options or ViewOptions()

    async def render(
        self,
        action_context: ActionContext,
        view: View,
        view_data: Optional[ViewDataDictionary],
        temp_data: Optional[TempDataDictionary],
        content_type: Optional[Union[MediaType, str]],
        status_code: Optional[int]
    ):
        if action_context is None:
            raise ArgumentMissingException('action_context')
        if view is None:
            raise ArgumentMissingException('view')

        if content_type is None:
            content_type = action_context.content_type or self.DEFAULT_CONTENT_TYPE
        if isinstance(content_type, str):
            content_type = MediaType.parse(content_type)
        if not content_type.charset:
            # Copy so the caller's value is left untouched
            content_type = content_type.with_charset(DEFAULT_CHARSET)

        status = status_code if status_code is not None else DEFAULT_STATUS_CODE

        async def start_response():
            # Response middleware persists the session when the response starts
            if temp_data is not None:
                temp_data.save()
            return await action_context.request.respond(status=status, content_type=str(content_type))

        async with self.writer_factory.create_writer(start_response, content_type.charset) as writer:
            view_context = ViewContext(
                action_context,
                view,
                view_data,
                temp_data,
                writer,
                self.options.template_globals,
            )

            if self.diagnostics.is_enabled(BEFORE_VIEW):
                self.diagnostics.write(BEFORE_VIEW, BeforeView(view, view_context))

            await view.render(view_context)

            if self.diagnostics.is_enabled(AFTER_VIEW):
                self.diagnostics.write(AFTER_VIEW, AfterView(view, view_context))

            await writer.flush()
