"""
Diagnostics Package
"""
from sanicviews.diagnostics.source import DiagnosticSource
from sanicviews.diagnostics.events import (
    VIEW_FOUND,
    VIEW_NOT_FOUND,
    BEFORE_VIEW,
    AFTER_VIEW,
    ViewFound,
    ViewNotFound,
    BeforeView,
    AfterView,
)

__all__ = [
    'DiagnosticSource',
    'VIEW_FOUND',
    'VIEW_NOT_FOUND',
    'BEFORE_VIEW',
    'AFTER_VIEW',
    'ViewFound',
    'ViewNotFound',
    'BeforeView',
    'AfterView',
]
