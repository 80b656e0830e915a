"""Event waiting service: await the first occurrence matching a spec."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from simple_event_tester.spec_matching.match_outcomes import MatchFail
from simple_event_tester.spec_matching.spec_models import Spec, build_spec
from simple_event_tester.spec_matching.structural_matcher import match

from .event_sources import EventHandler, EventSource
from .timeout_report import format_timeout_report
from .wait_outcomes import CheckedOccurrence, EventWaitTimeoutError

_LOGGER = logging.getLogger("simple_event_tester.event_waiting")
_LOGGER.addHandler(logging.NullHandler())

Projection = Callable[..., object]


@dataclass
class _WaitRequest:
    """Transient state of one wait."""

    event_name: str
    project: Projection
    spec: Spec
    strict_length: bool
    time_limit_ms: float
    checked: list[CheckedOccurrence] = field(default_factory=list)


class _Subscription:
    """Handler registration owned by one wait; released at most once."""

    def __init__(self, source: EventSource, event_name: str, handler: EventHandler) -> None:
        self._source = source
        self._event_name = event_name
        self._handler = handler
        self._active = False

    def open(self) -> None:
        self._source.on(self._event_name, self._handler)
        self._active = True

    def release(self) -> None:
        if not self._active:
            return
        self._active = False
        self._source.off(self._event_name, self._handler)


class _Deadline:
    """Loop timer that never fires before `delay` seconds have elapsed."""

    def __init__(
        self, loop: asyncio.AbstractEventLoop, delay: float, callback: Callable[[], None]
    ) -> None:
        self._loop = loop
        self._when = loop.time() + delay
        self._callback = callback
        self._handle = loop.call_at(self._when, self._fire)

    def _fire(self) -> None:
        # call_at may run up to one clock resolution early.
        if self._loop.time() < self._when:
            self._handle = self._loop.call_at(self._when, self._fire)
            return
        self._callback()

    def cancel(self) -> None:
        self._handle.cancel()


class EventWaiter:
    """Waits for event occurrences matching a spec on one event source."""

    def __init__(self, source: EventSource) -> None:
        self._source = source

    @property
    def source(self) -> EventSource:
        return self._source

    async def wait_for_event(
        self,
        event_name: str,
        project: Projection,
        spec: object,
        time_limit_ms: float,
        strict_length: bool = False,
    ) -> object:
        """Wait for the first occurrence of `event_name` whose projection matches `spec`.

        Args:
          event_name: Event to subscribe to on the source.
          project: Maps the raw emitted arguments to the value to match.
          spec: Authored or built spec (see `build_spec`).
          time_limit_ms: Deadline in milliseconds.
          strict_length: Forwarded to the structural matcher.

        Returns:
          The projected value of the first matching occurrence.

        Raises:
          EventWaitTimeoutError: If nothing matched before the deadline. The
            handler is already unsubscribed when this is raised.
          ValueError: If `time_limit_ms` is not a non-negative number.
          SpecDefinitionError: If `spec` contains values with no spec meaning.
        """
        request = _WaitRequest(
            event_name=event_name,
            project=project,
            spec=build_spec(spec),
            strict_length=strict_length,
            time_limit_ms=_validate_time_limit(time_limit_ms),
        )
        loop = asyncio.get_running_loop()
        settled: asyncio.Future[object] = loop.create_future()

        def on_occurrence(*args: object) -> None:
            if settled.done():
                return
            matched, candidate = _evaluate(request, args)
            if not matched:
                return
            subscription.release()
            deadline.cancel()
            _LOGGER.debug(
                "Matched %r event after %d non-matching occurrence(s)",
                event_name,
                len(request.checked),
            )
            settled.set_result(candidate)

        def on_deadline() -> None:
            subscription.release()
            if settled.done():
                return
            checked = tuple(request.checked)
            _LOGGER.debug(
                "Timed out after %s ms waiting for %r (%d occurrence(s) checked)",
                request.time_limit_ms,
                event_name,
                len(checked),
            )
            settled.set_exception(
                EventWaitTimeoutError(
                    format_timeout_report(event_name, request.spec, request.time_limit_ms, checked),
                    event_name=event_name,
                    spec=request.spec,
                    time_limit_ms=request.time_limit_ms,
                    checked=checked,
                )
            )

        subscription = _Subscription(self._source, event_name, on_occurrence)
        deadline = _Deadline(loop, request.time_limit_ms / 1000, on_deadline)
        try:
            subscription.open()
            _LOGGER.debug("Waiting up to %s ms for %r event", request.time_limit_ms, event_name)
            return await settled
        finally:
            subscription.release()
            deadline.cancel()


def _evaluate(request: _WaitRequest, args: tuple[object, ...]) -> tuple[bool, object]:
    try:
        candidate = request.project(*args)
    except Exception as exc:  # pylint: disable=broad-except
        _LOGGER.warning("Projection of %r occurrence raised %r", request.event_name, exc)
        request.checked.append(CheckedOccurrence(candidate=args, error=repr(exc)))
        return False, None
    try:
        outcome = match(candidate, request.spec, request.strict_length)
    except Exception as exc:  # pylint: disable=broad-except
        _LOGGER.warning("Matching %r occurrence raised %r", request.event_name, exc)
        request.checked.append(CheckedOccurrence(candidate=candidate, error=repr(exc)))
        return False, candidate
    if isinstance(outcome, MatchFail):
        _LOGGER.debug("Occurrence of %r did not match: %s", request.event_name, outcome.message)
        request.checked.append(CheckedOccurrence(candidate=candidate, failure=outcome))
        return False, candidate
    return True, candidate


def _validate_time_limit(time_limit_ms: float) -> float:
    if isinstance(time_limit_ms, bool) or not isinstance(time_limit_ms, int | float):
        raise ValueError("time_limit_ms must be a number of milliseconds.")
    if time_limit_ms < 0:
        raise ValueError("time_limit_ms must not be negative.")
    return time_limit_ms
