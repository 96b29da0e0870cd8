"""
Jinja View Engine
Locates templates on disk through configurable location formats
"""
import asyncio
from pathlib import Path
from typing import List, Optional, Sequence, Union

from jinja2 import Environment, FileSystemLoader, Template, TemplateNotFound, select_autoescape

from sanicviews.view.context import ActionContext, ViewContext
from sanicviews.view.engine import View, ViewEngine, ViewEngineResult


class JinjaView(View):
    """A compiled Jinja2 template"""

    def __init__(self, template: Template, path: str, is_partial: bool):
        self.template = template
        self.path = path
        self.is_partial = is_partial

    async def render(self, view_context: ViewContext):
        # Run rendering in thread pool to avoid blocking event loop
        content = await asyncio.to_thread(self.template.render, view_context.template_context())
        await view_context.writer.write(content)

    def __repr__(self) -> str:
        return f'JinjaView({self.path!r})'


class JinjaViewEngine(ViewEngine):
    """
    View engine backed by a Jinja2 Environment

    View names are expanded through location formats, e.g. with the
    defaults, view 'sidebar' for controller 'inbox' searches
    'inbox/sidebar.html' then 'shared/sidebar.html'. Names that end in
    the file extension or start with '/' are used as-is.

    Example:
        engine = JinjaViewEngine(['resources/views'])
        result = engine.find_partial_view(action_context, 'sidebar')
    """

    def __init__(
        self,
        template_dirs: Optional[Sequence[Union[str, Path]]] = None,
        location_formats: Optional[Sequence[str]] = None,
        file_extension: Optional[str] = None,
        environment: Optional[Environment] = None
    ):
        from sanicviews.defaults import (
            DEFAULT_VIEW_PATHS,
            DEFAULT_VIEW_LOCATION_FORMATS,
            DEFAULT_VIEW_FILE_EXTENSION,
        )
        from sanicviews.support import Config

        if template_dirs is None:
            template_dirs = Config.get('view.PATHS', DEFAULT_VIEW_PATHS)
        if location_formats is None:
            location_formats = Config.get('view.LOCATION_FORMATS', DEFAULT_VIEW_LOCATION_FORMATS)
        if file_extension is None:
            file_extension = Config.get('view.FILE_EXTENSION', DEFAULT_VIEW_FILE_EXTENSION)

        self.location_formats = list(location_formats)
        self.file_extension = file_extension
        self.environment = environment or Environment(
            loader=FileSystemLoader([str(path) for path in template_dirs]),
            autoescape=select_autoescape(),
        )

    def find_view(self, action_context: ActionContext, view_name: str) -> ViewEngineResult:
        return self._locate(action_context, view_name, is_partial=False)

    def find_partial_view(self, action_context: ActionContext, view_name: str) -> ViewEngineResult:
        return self._locate(action_context, view_name, is_partial=True)

    def _locate(self, action_context: ActionContext, view_name: str, is_partial: bool) -> ViewEngineResult:
        searched_locations = []

        for location in self.expand_locations(action_context, view_name):
            try:
                template = self.environment.get_template(location)
            except TemplateNotFound:
                searched_locations.append(location)
                continue

            return ViewEngineResult.found(view_name, JinjaView(template, location, is_partial))

        return ViewEngineResult.not_found(view_name, searched_locations)

    def expand_locations(self, action_context: ActionContext, view_name: str) -> List[str]:
        """Candidate template paths for view_name, in search order"""
        if self.is_direct_path(view_name):
            return [view_name.lstrip('/')]

        controller = action_context.action_descriptor.controller_name
        locations = []

        for location_format in self.location_formats:
            if '{controller}' in location_format and not controller:
                continue

            location = location_format.format(
                controller=controller or '',
                view=view_name,
                extension=self.file_extension,
            )
            if location not in locations:
                locations.append(location)

        return locations

    def is_direct_path(self, view_name: str) -> bool:
        if view_name.startswith('/'):
            return True
        # An empty extension matches every name
        return bool(self.file_extension) and view_name.endswith(self.file_extension)
