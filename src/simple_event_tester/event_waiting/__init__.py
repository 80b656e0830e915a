"""Event waiting domain exports."""

from .event_sources import EventHandler, EventSource, LocalEventSource
from .event_waiter import EventWaiter, Projection
from .timeout_report import format_timeout_report
from .wait_outcomes import CheckedOccurrence, EventWaitTimeoutError

__all__ = [
    "EventHandler",
    "EventSource",
    "LocalEventSource",
    "EventWaiter",
    "Projection",
    "CheckedOccurrence",
    "EventWaitTimeoutError",
    "format_timeout_report",
]
