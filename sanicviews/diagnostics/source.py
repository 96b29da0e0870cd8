"""
Diagnostic Source
Named, independently enable-able notifications for observability tooling
"""
import threading
from typing import Any, Callable, Iterable, List, Optional, Tuple, Union

Listener = Callable[[str, Any], None]
EventFilter = Callable[[str], bool]


class DiagnosticSource:
    """
    Publishes diagnostic events to subscribed listeners

    Producers must check is_enabled() before building a payload, so that a
    source without interested listeners costs a single lookup per event.

    Example:
        diagnostics = DiagnosticSource()
        unsubscribe = diagnostics.subscribe(
            lambda name, event: print(name, event.view_name),
            events=[VIEW_NOT_FOUND],
        )

        if diagnostics.is_enabled(VIEW_NOT_FOUND):
            diagnostics.write(VIEW_NOT_FOUND, ViewNotFound(...))

        unsubscribe()
    """

    def __init__(self, name: str = 'sanicviews'):
        self.name = name
        self._lock = threading.Lock()
        self._subscriptions: List[Tuple[EventFilter, Listener]] = []

    def subscribe(
        self,
        listener: Listener,
        events: Optional[Union[Iterable[str], EventFilter]] = None
    ) -> Callable[[], None]:
        """
        Subscribe a listener

        Args:
            listener: Called as listener(event_name, payload)
            events: Event names, a predicate over event names, or None for all

        Returns:
            Callable that removes the subscription
        """
        if events is None:
            event_filter = lambda name: True
        elif callable(events):
            event_filter = events
        else:
            names = frozenset(events)
            event_filter = names.__contains__

        subscription = (event_filter, listener)
        with self._lock:
            self._subscriptions = self._subscriptions + [subscription]

        def unsubscribe():
            with self._lock:
                self._subscriptions = [s for s in self._subscriptions if s is not subscription]

        return unsubscribe

    def is_enabled(self, name: str) -> bool:
        """Check whether any listener wants events with this name"""
        return any(event_filter(name) for event_filter, _ in self._subscriptions)

    def write(self, name: str, payload: Any):
        """Deliver payload to every listener enabled for name"""
        for event_filter, listener in self._subscriptions:
            if event_filter(name):
                listener(name, payload)
