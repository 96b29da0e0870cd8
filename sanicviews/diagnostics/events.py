"""
Diagnostic Events
Typed payloads written to the DiagnosticSource, one class per event name
"""
from dataclasses import dataclass
from typing import List, TYPE_CHECKING

if TYPE_CHECKING:
    from sanicviews.view.context import ActionContext, ViewContext
    from sanicviews.view.engine import View
    from sanicviews.view.results import PartialViewResult

VIEW_FOUND = 'sanicviews.view_found'
VIEW_NOT_FOUND = 'sanicviews.view_not_found'
BEFORE_VIEW = 'sanicviews.before_view'
AFTER_VIEW = 'sanicviews.after_view'


@dataclass(frozen=True)
class ViewFound:
    action_context: 'ActionContext'
    is_partial: bool
    result: 'PartialViewResult'
    view_name: str
    view: 'View'

    name = VIEW_FOUND


@dataclass(frozen=True)
class ViewNotFound:
    action_context: 'ActionContext'
    is_partial: bool
    result: 'PartialViewResult'
    view_name: str
    searched_locations: List[str]

    name = VIEW_NOT_FOUND


@dataclass(frozen=True)
class BeforeView:
    view: 'View'
    view_context: 'ViewContext'

    name = BEFORE_VIEW


@dataclass(frozen=True)
class AfterView:
    view: 'View'
    view_context: 'ViewContext'

    name = AFTER_VIEW
