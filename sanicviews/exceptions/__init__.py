"""
Exceptions Package
"""
from sanicviews.exceptions.custom import (
    FrameworkException,
    ArgumentMissingException,
    ViewNotFoundException,
)

__all__ = [
    'FrameworkException',
    'ArgumentMissingException',
    'ViewNotFoundException',
]
