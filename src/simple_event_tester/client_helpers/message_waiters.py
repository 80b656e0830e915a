"""Convenience waiters for message and reaction events."""

from __future__ import annotations

from simple_event_tester.configuration.runtime_settings import (
    ClientIdentity,
    Configuration,
    WaitingSettings,
)
from simple_event_tester.event_waiting.event_sources import EventSource
from simple_event_tester.event_waiting.event_waiter import EventWaiter, Projection

from .client_events import ClientEvent
from .mock_defaults import message_defaults, with_defaults


def _message(message: object) -> object:
    return message


def _updated_message(_old_message: object, new_message: object) -> object:
    return new_message


def _reaction_and_user(reaction: object, user: object) -> list[object]:
    return [reaction, user]


class MessageEventWaiter:
    """Pre-filled `wait_for_event` calls for the chat client's message events."""

    def __init__(
        self,
        waiter: EventWaiter,
        *,
        identity: ClientIdentity | None = None,
        waiting: WaitingSettings | None = None,
    ) -> None:
        self._waiter = waiter
        self._identity = identity or ClientIdentity()
        self._waiting = waiting or WaitingSettings()

    @classmethod
    def from_configuration(
        cls, source: EventSource, configuration: Configuration
    ) -> MessageEventWaiter:
        return cls(
            EventWaiter(source),
            identity=configuration.identity,
            waiting=configuration.waiting,
        )

    async def wait_for_message_create(
        self, mock: object = None, *, base: bool = False, time_limit_ms: float | None = None
    ) -> object:
        return await self._wait(
            ClientEvent.MESSAGE_CREATE, _message, self._mock(mock, base), time_limit_ms
        )

    async def wait_for_message_update(
        self, mock: object = None, *, base: bool = False, time_limit_ms: float | None = None
    ) -> object:
        """Wait for an edit; the updated (new) message is matched and returned."""
        return await self._wait(
            ClientEvent.MESSAGE_UPDATE, _updated_message, self._mock(mock, base), time_limit_ms
        )

    async def wait_for_message_delete(
        self, mock: object = None, *, base: bool = False, time_limit_ms: float | None = None
    ) -> object:
        return await self._wait(
            ClientEvent.MESSAGE_DELETE, _message, self._mock(mock, base), time_limit_ms
        )

    async def wait_for_reaction_add(
        self, mock: object = None, *, time_limit_ms: float | None = None
    ) -> object:
        """Wait for a reaction; matched and returned as `[reaction, user]`."""
        return await self._wait(
            ClientEvent.MESSAGE_REACTION_ADD, _reaction_and_user, mock, time_limit_ms
        )

    async def wait_for_reaction_remove(
        self, mock: object = None, *, time_limit_ms: float | None = None
    ) -> object:
        return await self._wait(
            ClientEvent.MESSAGE_REACTION_REMOVE, _reaction_and_user, mock, time_limit_ms
        )

    def _mock(self, mock: object, base: bool) -> object:
        if mock is None:
            mock = {}
        return with_defaults(mock, message_defaults(self._identity), base=base)

    async def _wait(
        self,
        event: ClientEvent,
        project: Projection,
        spec: object,
        time_limit_ms: float | None,
    ) -> object:
        return await self._waiter.wait_for_event(
            event.value,
            project,
            spec,
            self._waiting.default_time_limit_ms if time_limit_ms is None else time_limit_ms,
            strict_length=self._waiting.strict_length,
        )
