"""Event waiting outcome entities."""

from __future__ import annotations

from dataclasses import dataclass

from simple_event_tester.spec_matching.match_outcomes import MatchFail
from simple_event_tester.spec_matching.spec_models import Spec


@dataclass(frozen=True)
class CheckedOccurrence:
    """One occurrence examined by a pending wait that did not match."""

    candidate: object
    failure: MatchFail | None = None
    error: str | None = None

    @property
    def failure_message(self) -> str:
        if self.error is not None:
            return f"evaluation raised {self.error}"
        if self.failure is None:
            return ""
        return self.failure.message


class EventWaitTimeoutError(TimeoutError):
    """Raised when no occurrence matched the spec before the deadline."""

    def __init__(
        self,
        message: str,
        *,
        event_name: str,
        spec: Spec,
        time_limit_ms: float,
        checked: tuple[CheckedOccurrence, ...],
    ) -> None:
        super().__init__(message)
        self.event_name = event_name
        self.spec = spec
        self.time_limit_ms = time_limit_ms
        self.checked = checked
