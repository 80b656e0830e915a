"""Event source contract and an in-process implementation."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any, Protocol

EventHandler = Callable[..., object]

_LOGGER = logging.getLogger("simple_event_tester.event_sources")
_LOGGER.addHandler(logging.NullHandler())


class EventSource(Protocol):
    """Subscribe/unsubscribe surface of an event-emitting client."""

    def on(self, event_name: str, handler: EventHandler) -> Any: ...

    def off(self, event_name: str, handler: EventHandler) -> Any: ...


class LocalEventSource:
    """Synchronous in-process emitter.

    Handlers run in subscription order. Each emit delivers to the handlers
    registered when it started, so handlers may unsubscribe during delivery.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, list[EventHandler]] = {}

    def on(self, event_name: str, handler: EventHandler) -> LocalEventSource:
        self._handlers.setdefault(event_name, []).append(handler)
        return self

    def off(self, event_name: str, handler: EventHandler) -> LocalEventSource:
        handlers = self._handlers.get(event_name)
        if handlers and handler in handlers:
            handlers.remove(handler)
            if not handlers:
                del self._handlers[event_name]
        return self

    def emit(self, event_name: str, *args: object) -> int:
        """Deliver one occurrence and return the number of handlers invoked."""
        snapshot = tuple(self._handlers.get(event_name, ()))
        _LOGGER.debug("Emitting %r to %d handler(s)", event_name, len(snapshot))
        for handler in snapshot:
            handler(*args)
        return len(snapshot)

    def listener_count(self, event_name: str) -> int:
        """Number of handlers currently subscribed to `event_name`."""
        return len(self._handlers.get(event_name, ()))
