"""Tests for PartialViewExecutor."""

import logging
from unittest.mock import AsyncMock, Mock

import pytest

from sanicviews.diagnostics import VIEW_FOUND, VIEW_NOT_FOUND, DiagnosticSource
from sanicviews.exceptions import ArgumentMissingException
from sanicviews.logging import LoggerFactory
from sanicviews.view import (
    HttpResponseStreamWriterFactory,
    MediaType,
    PartialViewExecutor,
    PartialViewResult,
    ViewDataDictionary,
)
from sanicviews.view import partial_executor as partial_executor_module


class TestConstruction:
    """Tests for required collaborators."""

    @pytest.mark.parametrize(
        "missing", ["view_engine", "writer_factory", "diagnostics", "logger_factory"]
    )
    def test_missing_collaborator_raises(self, missing, found_engine):
        """Test that every collaborator is required."""
        arguments = {
            "view_engine": found_engine,
            "writer_factory": HttpResponseStreamWriterFactory(buffer_size=16),
            "diagnostics": DiagnosticSource(),
            "logger_factory": LoggerFactory(),
        }
        arguments[missing] = None

        with pytest.raises(ArgumentMissingException) as exc_info:
            PartialViewExecutor(**arguments)

        assert exc_info.value.argument == missing
        assert isinstance(exc_info.value, ValueError)


class TestResolveFound:
    """Tests for resolve() when the engine finds the view."""

    def test_returns_engine_result_unmodified(self, make_executor, found_engine, action_context):
        """Test that the engine's result object is returned as-is."""
        sentinel = Mock(success=True, view=Mock(), searched_locations=[])
        found_engine.find_partial_view.side_effect = None
        found_engine.find_partial_view.return_value = sentinel

        result = make_executor(found_engine).resolve(action_context, PartialViewResult(view_name="Details"))

        assert result is sentinel

    def test_emits_single_view_found_event(
        self, make_executor, found_engine, action_context, stub_view, recorded_events
    ):
        """Test that one ViewFound event carries the resolved name and view."""
        partial = PartialViewResult(view_name="Details")

        make_executor(found_engine).resolve(action_context, partial)

        assert len(recorded_events) == 1
        name, event = recorded_events[0]
        assert name == VIEW_FOUND
        assert event.is_partial is True
        assert event.view_name == "Details"
        assert event.view is stub_view
        assert event.result is partial
        assert event.action_context is action_context

    def test_logs_single_debug_message(self, make_executor, found_engine, action_context, executor_logs):
        """Test that a found view is logged once at debug level."""
        make_executor(found_engine).resolve(action_context, PartialViewResult(view_name="Details"))

        records = executor_logs()
        assert len(records) == 1
        assert records[0].levelno == logging.DEBUG
        assert records[0].getMessage() == "The partial view 'Details' was found."

    def test_no_event_when_channel_disabled(self, make_executor, found_engine, action_context, diagnostics):
        """Test that nothing is written when no listener wants the event."""
        events = []
        diagnostics.subscribe(lambda name, payload: events.append(name), events=[VIEW_NOT_FOUND])

        make_executor(found_engine).resolve(action_context, PartialViewResult())

        assert events == []


class TestResolveNotFound:
    """Tests for resolve() when the engine misses."""

    def test_returns_not_found_result(self, make_executor, missing_engine, action_context):
        """Test that a missing view is returned, not raised."""
        result = make_executor(missing_engine).resolve(action_context, PartialViewResult(view_name="sidebar"))

        assert result.success is False
        assert result.view is None
        assert result.searched_locations == ["home/sidebar.html", "shared/sidebar.html"]

    def test_emits_single_view_not_found_event(
        self, make_executor, missing_engine, action_context, recorded_events
    ):
        """Test that one ViewNotFound event carries every searched location."""
        partial = PartialViewResult(view_name="sidebar")

        make_executor(missing_engine).resolve(action_context, partial)

        assert len(recorded_events) == 1
        name, event = recorded_events[0]
        assert name == VIEW_NOT_FOUND
        assert event.is_partial is True
        assert event.view_name == "sidebar"
        assert event.searched_locations == ["home/sidebar.html", "shared/sidebar.html"]
        assert event.result is partial

    def test_logs_single_error_with_locations(
        self, make_executor, missing_engine, action_context, executor_logs
    ):
        """Test that a missing view is logged once at error level with locations."""
        make_executor(missing_engine).resolve(action_context, PartialViewResult(view_name="sidebar"))

        records = executor_logs()
        assert len(records) == 1
        assert records[0].levelno == logging.ERROR
        message = records[0].getMessage()
        assert "The partial view 'sidebar' was not found." in message
        assert "home/sidebar.html" in message
        assert "shared/sidebar.html" in message

    def test_no_event_when_channel_disabled(self, make_executor, missing_engine, action_context, diagnostics):
        """Test that nothing is written when only the found channel is enabled."""
        events = []
        diagnostics.subscribe(lambda name, payload: events.append(name), events=[VIEW_FOUND])

        make_executor(missing_engine).resolve(action_context, PartialViewResult())

        assert events == []


class TestDisabledDiagnosticsCost:
    """Tests that disabled channels build no event payloads."""

    @pytest.mark.parametrize("engine_fixture", ["found_engine", "missing_engine"])
    def test_no_payload_constructed(self, request, engine_fixture, make_executor, action_context, monkeypatch):
        """Test that event classes are never instantiated for disabled channels."""
        found_event = Mock()
        not_found_event = Mock()
        monkeypatch.setattr(partial_executor_module, "ViewFound", found_event)
        monkeypatch.setattr(partial_executor_module, "ViewNotFound", not_found_event)

        sink = Mock(spec=DiagnosticSource)
        sink.is_enabled.return_value = False

        executor = make_executor(request.getfixturevalue(engine_fixture), diagnostic_source=sink)
        executor.resolve(action_context, PartialViewResult(view_name="Details"))

        found_event.assert_not_called()
        not_found_event.assert_not_called()
        sink.write.assert_not_called()
        sink.is_enabled.assert_called_once()


class TestViewNameAndEngineSelection:
    """Tests for view name derivation and engine override."""

    def test_explicit_view_name_is_queried(self, make_executor, found_engine, action_context):
        """Test that the result's view name is used when set."""
        make_executor(found_engine).resolve(action_context, PartialViewResult(view_name="Details"))

        found_engine.find_partial_view.assert_called_once_with(action_context, "Details")

    @pytest.mark.parametrize("view_name", [None, ""])
    def test_missing_view_name_uses_action_name(self, view_name, make_executor, found_engine, action_context):
        """Test that an unset or empty view name falls back to the action name."""
        make_executor(found_engine).resolve(action_context, PartialViewResult(view_name=view_name))

        found_engine.find_partial_view.assert_called_once_with(action_context, "Index")

    def test_engine_override_replaces_default(self, make_executor, found_engine, missing_engine, action_context):
        """Test that the result's engine is used instead of the default."""
        executor = make_executor(missing_engine)

        result = executor.resolve(action_context, PartialViewResult(view_engine=found_engine))

        assert result.success is True
        found_engine.find_partial_view.assert_called_once_with(action_context, "Index")
        missing_engine.find_partial_view.assert_not_called()


class TestArgumentValidation:
    """Tests that missing arguments fail before any side effect."""

    @pytest.fixture
    def sink(self):
        sink = Mock(spec=DiagnosticSource)
        sink.is_enabled.return_value = True
        return sink

    def test_resolve_without_context(self, make_executor, found_engine, sink, executor_logs):
        """Test resolve(None, result)."""
        with pytest.raises(ArgumentMissingException) as exc_info:
            make_executor(found_engine, sink).resolve(None, PartialViewResult())

        assert exc_info.value.argument == "action_context"
        found_engine.find_partial_view.assert_not_called()
        sink.is_enabled.assert_not_called()
        assert executor_logs() == []

    def test_resolve_without_result(self, make_executor, found_engine, sink, action_context, executor_logs):
        """Test resolve(context, None)."""
        with pytest.raises(ArgumentMissingException) as exc_info:
            make_executor(found_engine, sink).resolve(action_context, None)

        assert exc_info.value.argument == "result"
        found_engine.find_partial_view.assert_not_called()
        sink.write.assert_not_called()
        assert executor_logs() == []

    @pytest.mark.parametrize("missing", ["action_context", "view", "result"])
    def test_render_missing_argument(
        self, missing, make_executor, found_engine, sink, action_context, stub_view, fake_request, executor_logs
    ):
        """Test render() with each argument missing raises at call time."""
        arguments = {"action_context": action_context, "view": stub_view, "result": PartialViewResult()}
        arguments[missing] = None

        with pytest.raises(ArgumentMissingException) as exc_info:
            make_executor(found_engine, sink).render(**arguments)

        assert exc_info.value.argument == missing
        assert fake_request.response is None
        sink.write.assert_not_called()
        assert executor_logs() == []


class TestRender:
    """Tests for render() delegation."""

    @pytest.mark.asyncio
    async def test_delegates_descriptor_values_unmodified(self, make_executor, found_engine, action_context, stub_view):
        """Test that view data, temp data, content type and status reach the renderer."""
        executor = make_executor(found_engine)
        executor.renderer.render = AsyncMock()
        view_data = ViewDataDictionary({"title": "Inbox"})
        temp_data = {"flash": "Saved"}
        content_type = MediaType("text/html")
        partial = PartialViewResult(
            view_data=view_data,
            temp_data=temp_data,
            content_type=content_type,
            status_code=200,
        )

        await executor.render(action_context, stub_view, partial)

        executor.renderer.render.assert_awaited_once()
        args = executor.renderer.render.await_args.args
        assert args[0] is action_context
        assert args[1] is stub_view
        assert args[2] is view_data
        assert args[3] is temp_data
        assert args[4] is content_type
        assert args[5] == 200

    @pytest.mark.asyncio
    async def test_writes_view_output(self, make_executor, found_engine, action_context, stub_view, fake_request):
        """Test that the view output reaches the response."""
        await make_executor(found_engine).render(
            action_context, stub_view, PartialViewResult(content_type="text/html", status_code=200)
        )

        assert fake_request.response.body == b"<p>stub</p>"
        assert fake_request.response.status == 200
        assert fake_request.response.content_type == "text/html; charset=utf-8"

    @pytest.mark.asyncio
    async def test_render_failure_propagates(self, make_executor, found_engine, action_context, stub_view):
        """Test that view errors are not caught."""
        stub_view.render = AsyncMock(side_effect=LookupError("boom"))

        with pytest.raises(LookupError, match="boom"):
            await make_executor(found_engine).render(action_context, stub_view, PartialViewResult())
