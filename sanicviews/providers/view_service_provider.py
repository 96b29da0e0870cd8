"""
View Service Provider
Wires view engines, diagnostics and the partial view executor
"""
from sanicviews.service_provider import ServiceProvider
from sanicviews.diagnostics import DiagnosticSource
from sanicviews.logging import LoggerFactory
from sanicviews.view import (
    CompositeViewEngine,
    HttpResponseStreamWriterFactory,
    JinjaViewEngine,
    PartialViewExecutor,
    ViewOptions,
)


class ViewServiceProvider(ServiceProvider):
    """
    Registers:
        view.options           ViewOptions with the Jinja engine from config
        view.engine            CompositeViewEngine over view.options engines
        view.writer_factory    HttpResponseStreamWriterFactory
        diagnostics            DiagnosticSource (unless already bound)
        log.factory            LoggerFactory (unless already bound)
        view.partial_executor  PartialViewExecutor
    """

    def register(self):
        self.app.singleton('view.options', self._make_options)
        self.app.singleton('view.engine', lambda app: CompositeViewEngine(app.make('view.options').view_engines))
        self.app.singleton('view.writer_factory', lambda app: HttpResponseStreamWriterFactory())

        if not self.app.has('diagnostics'):
            self.app.singleton('diagnostics', DiagnosticSource())
        if not self.app.has('log.factory'):
            self.app.singleton('log.factory', LoggerFactory())

        self.app.singleton('view.partial_executor', lambda app: PartialViewExecutor(
            app.make('view.engine'),
            app.make('view.writer_factory'),
            app.make('diagnostics'),
            app.make('log.factory'),
            app.make('view.options'),
        ))

    @staticmethod
    def _make_options(app) -> ViewOptions:
        options = ViewOptions.from_config()
        options.view_engines.append(JinjaViewEngine())
        return options
