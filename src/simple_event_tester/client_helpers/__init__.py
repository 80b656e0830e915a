"""Chat client convenience helpers built on the event waiter."""

from .client_events import ClientEvent
from .message_waiters import MessageEventWaiter
from .mock_defaults import message_defaults, with_defaults

__all__ = [
    "ClientEvent",
    "MessageEventWaiter",
    "message_defaults",
    "with_defaults",
]
