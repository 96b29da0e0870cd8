"""
View Options
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List

from sanicviews.view.engine import ViewEngine


@dataclass
class ViewOptions:
    """
    Engines consulted by the composite engine, in order, and the
    globals available to every template
    """
    view_engines: List[ViewEngine] = field(default_factory=list)
    template_globals: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_config(cls) -> 'ViewOptions':
        from sanicviews.support import Config
        return cls(template_globals=dict(Config.get('view.GLOBALS', {}) or {}))
