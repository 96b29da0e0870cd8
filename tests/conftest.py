"""Pytest configuration and shared fixtures."""

import copy
import logging
from types import SimpleNamespace
from unittest.mock import Mock

import pytest

from sanicviews.diagnostics import DiagnosticSource
from sanicviews.logging import LoggerFactory
from sanicviews.support import Config
from sanicviews.view import (
    ActionContext,
    ActionDescriptor,
    HttpResponseStreamWriterFactory,
    PartialViewExecutor,
    View,
    ViewEngine,
    ViewEngineResult,
)

EXECUTOR_LOGGER = "sanicviews.view.partial_executor.PartialViewExecutor"


class FakeStreamResponse:
    """Records what a view streams into the response."""

    def __init__(self, status, content_type):
        self.status = status
        self.content_type = content_type
        self.chunks = []

    async def send(self, data):
        self.chunks.append(data)

    @property
    def body(self):
        return b"".join(self.chunks)


class FakeRequest:
    """Stand-in for a Sanic request supporting streamed responses."""

    def __init__(self):
        self.ctx = SimpleNamespace()
        self.response = None
        self.session_at_response = None

    async def respond(self, status=200, content_type=None, headers=None):
        # Sanic runs response middleware (and persists the session) here
        session = getattr(self.ctx, "session", None)
        self.session_at_response = copy.deepcopy(session)
        self.response = FakeStreamResponse(status, content_type)
        return self.response


class StubView(View):
    """View that writes fixed markup."""

    path = "stub.html"

    def __init__(self, content="<p>stub</p>"):
        self.content = content
        self.temp_data_reads = []
        self.rendered_with = None

    async def render(self, view_context):
        self.rendered_with = view_context
        await view_context.writer.write(self.content)
        for key in self.temp_data_reads:
            await view_context.writer.write(view_context.temp_data[key])


@pytest.fixture(autouse=True)
def reset_config():
    """Drop runtime config overrides between tests."""
    yield
    Config.clear_runtime_overrides()


@pytest.fixture
def fake_request():
    return FakeRequest()


@pytest.fixture
def action_context(fake_request):
    return ActionContext(
        request=fake_request,
        action_descriptor=ActionDescriptor(name="Index", controller_name="home"),
    )


@pytest.fixture
def stub_view():
    return StubView()


@pytest.fixture
def found_engine(stub_view):
    """Engine mock that finds every view."""
    engine = Mock(spec=ViewEngine)
    engine.find_partial_view.side_effect = lambda context, name: ViewEngineResult.found(name, stub_view)
    return engine


@pytest.fixture
def missing_engine():
    """Engine mock that never finds a view."""
    engine = Mock(spec=ViewEngine)
    engine.find_partial_view.side_effect = lambda context, name: ViewEngineResult.not_found(
        name, [f"home/{name}.html", f"shared/{name}.html"]
    )
    return engine


@pytest.fixture
def diagnostics():
    return DiagnosticSource()


@pytest.fixture
def recorded_events(diagnostics):
    """Every event written to the diagnostics fixture, as (name, payload)."""
    events = []
    diagnostics.subscribe(lambda name, payload: events.append((name, payload)))
    return events


@pytest.fixture
def make_executor(diagnostics):
    def factory(engine, diagnostic_source=None):
        return PartialViewExecutor(
            engine,
            HttpResponseStreamWriterFactory(buffer_size=1024),
            diagnostic_source if diagnostic_source is not None else diagnostics,
            LoggerFactory(),
        )

    return factory


@pytest.fixture
def executor_logs(caplog):
    """Log records emitted by the partial view executor."""
    caplog.set_level(logging.DEBUG, logger="sanicviews")

    def records():
        return [record for record in caplog.records if record.name == EXECUTOR_LOGGER]

    return records
