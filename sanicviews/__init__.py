"""
sanicviews
Partial view resolution and rendering for Sanic applications
"""

from sanicviews.helpers import (
    partial,
    temp_data,
    render_partial,
)

__all__ = [
    'partial',
    'temp_data',
    'render_partial',
]
