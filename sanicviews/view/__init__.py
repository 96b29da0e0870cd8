"""
View Package
Partial view lookup, diagnostics and rendering
"""
from sanicviews.view.content_type import MediaType
from sanicviews.view.context import ActionDescriptor, ActionContext, ViewContext
from sanicviews.view.engine import View, ViewEngine, ViewEngineResult, CompositeViewEngine
from sanicviews.view.jinja_engine import JinjaView, JinjaViewEngine
from sanicviews.view.options import ViewOptions
from sanicviews.view.partial_executor import PartialViewExecutor
from sanicviews.view.renderer import ViewRenderer
from sanicviews.view.results import PartialViewResult
from sanicviews.view.view_data import ViewDataDictionary, TempDataDictionary, SessionTempDataProvider
from sanicviews.view.writer import HttpResponseStreamWriter, HttpResponseStreamWriterFactory

__all__ = [
    # Contexts
    'ActionDescriptor',
    'ActionContext',
    'ViewContext',

    # Lookup
    'View',
    'ViewEngine',
    'ViewEngineResult',
    'CompositeViewEngine',
    'JinjaView',
    'JinjaViewEngine',

    # Execution
    'PartialViewExecutor',
    'PartialViewResult',
    'ViewRenderer',
    'ViewOptions',

    # Data
    'MediaType',
    'ViewDataDictionary',
    'TempDataDictionary',
    'SessionTempDataProvider',

    # Output
    'HttpResponseStreamWriter',
    'HttpResponseStreamWriterFactory',
]
