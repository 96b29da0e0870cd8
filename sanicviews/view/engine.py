"""
View Engine
Lookup contracts, lookup results and the composite engine
"""
from abc import ABC, abstractmethod
from typing import List, Optional, Sequence, TYPE_CHECKING

from sanicviews.exceptions import ArgumentMissingException, ViewNotFoundException

if TYPE_CHECKING:
    from sanicviews.view.context import ActionContext, ViewContext


class View(ABC):
    """A located, renderable view"""

    path: str = ''

    @abstractmethod
    async def render(self, view_context: 'ViewContext'):
        """Write the view output to view_context.writer"""
        pass


class ViewEngineResult:
    """
    Outcome of a view lookup: exactly one of found or not found

    Example:
        result = engine.find_partial_view(action_context, 'sidebar')
        if result.success:
            await result.view.render(view_context)
        else:
            print(result.searched_locations)
    """

    __slots__ = ('view_name', 'view', 'searched_locations')

    def __init__(self, view_name: str, view: Optional[View], searched_locations: Sequence[str]):
        self.view_name = view_name
        self.view = view
        self.searched_locations = list(searched_locations)

    @classmethod
    def found(cls, view_name: str, view: View) -> 'ViewEngineResult':
        if view is None:
            raise ArgumentMissingException('view')
        return cls(view_name, view, ())

    @classmethod
    def not_found(cls, view_name: str, searched_locations: Sequence[str]) -> 'ViewEngineResult':
        return cls(view_name, None, searched_locations)

    @property
    def success(self) -> bool:
        return self.view is not None

    def ensure_successful(self) -> 'ViewEngineResult':
        """Raise ViewNotFoundException listing the searched locations unless found"""
        if not self.success:
            raise ViewNotFoundException(self.view_name, self.searched_locations)
        return self

    def __repr__(self) -> str:
        if self.success:
            return f'ViewEngineResult.found({self.view_name!r}, {self.view!r})'
        return f'ViewEngineResult.not_found({self.view_name!r}, {self.searched_locations!r})'


class ViewEngine(ABC):
    """Locates views by name"""

    @abstractmethod
    def find_view(self, action_context: 'ActionContext', view_name: str) -> ViewEngineResult:
        pass

    @abstractmethod
    def find_partial_view(self, action_context: 'ActionContext', view_name: str) -> ViewEngineResult:
        pass


class CompositeViewEngine(ViewEngine):
    """
    Delegates to an ordered list of engines

    The first successful lookup wins. When every engine misses, the
    searched locations of all engines are returned in engine order.
    """

    def __init__(self, view_engines: Optional[Sequence[ViewEngine]] = None):
        self.view_engines: List[ViewEngine] = list(view_engines or [])

    def find_view(self, action_context: 'ActionContext', view_name: str) -> ViewEngineResult:
        return self._find(action_context, view_name, partial=False)

    def find_partial_view(self, action_context: 'ActionContext', view_name: str) -> ViewEngineResult:
        return self._find(action_context, view_name, partial=True)

    def _find(self, action_context: 'ActionContext', view_name: str, partial: bool) -> ViewEngineResult:
        searched_locations: List[str] = []

        for engine in self.view_engines:
            if partial:
                result = engine.find_partial_view(action_context, view_name)
            else:
                result = engine.find_view(action_context, view_name)

            if result.success:
                return result

            searched_locations.extend(result.searched_locations)

        return ViewEngineResult.not_found(view_name, searched_locations)
