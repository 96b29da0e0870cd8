"""
Helper Functions
Shortcuts for building and rendering partial views from Sanic handlers
"""
from typing import Any, Dict, Optional, Union

from sanic.request import Request

from sanicviews.view import (
    ActionContext,
    MediaType,
    PartialViewResult,
    SessionTempDataProvider,
    TempDataDictionary,
    ViewDataDictionary,
)


def partial(
    view_name: Optional[str] = None,
    context: Optional[Dict[str, Any]] = None,
    model: Any = None,
    status: Optional[int] = None,
    content_type: Optional[Union[MediaType, str]] = None,
    temp_data: Optional[TempDataDictionary] = None,
) -> PartialViewResult:
    """
    Create a partial view result

    Example:
        return partial('sidebar', {'items': items}, status=200)
    """
    return PartialViewResult(
        view_name=view_name,
        view_data=ViewDataDictionary(context, model=model),
        temp_data=temp_data,
        content_type=content_type,
        status_code=status,
    )


def temp_data(request: Request) -> TempDataDictionary:
    """
    Temp data for the current request, cached on request.ctx

    Example:
        temp_data(request)['message'] = 'Saved'
    """
    existing = getattr(request.ctx, 'temp_data', None)
    if existing is None:
        existing = TempDataDictionary(request, SessionTempDataProvider())
        request.ctx.temp_data = existing
    return existing


async def render_partial(request: Request, result: PartialViewResult):
    """
    Render result as the response of the current Sanic handler

    Example:
        @app.get('/inbox/sidebar')
        async def sidebar(request):
            await render_partial(request, partial(context={'unread': 3}))
    """
    await result.execute_result(ActionContext.from_request(request))
