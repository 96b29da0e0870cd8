"""
Framework Support Classes
"""

from sanicviews.support.config import Config

__all__ = [
    'Config',
]
