"""Structural matching outcome entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class MissingInActual:
    """Spec constrains a value the actual does not have."""

    def describe(self) -> str:
        return "does not exist in actual"


@dataclass(frozen=True)
class TypeMismatch:
    """Actual container category differs from the spec's."""

    expected_type: str
    actual_type: str

    def describe(self) -> str:
        return f"has type {self.actual_type} instead of {self.expected_type}"


@dataclass(frozen=True)
class LengthMismatch:
    """Actual container size differs from the spec's under strict length."""

    expected: int
    actual: int

    def describe(self) -> str:
        return (
            f"has size {self.actual} instead of {self.expected}. "
            "Turn strict_length off to allow different lengths."
        )


@dataclass(frozen=True)
class PredicateFalse:
    """Predicate spec returned a literal False."""

    predicate_source: str
    actual_json: str

    def describe(self) -> str:
        return f"function ({self.predicate_source}) returned false for {self.actual_json}"


@dataclass(frozen=True)
class ValueMismatch:
    """Literal spec differs from the actual value."""

    actual: object
    expected: object

    def describe(self) -> str:
        return f"different: actual: {self.actual!r}, expected: {self.expected!r}"


MismatchReason = MissingInActual | TypeMismatch | LengthMismatch | PredicateFalse | ValueMismatch


@dataclass(frozen=True)
class MatchPass:
    """Actual value satisfies the spec."""

    @property
    def is_ok(self) -> bool:
        return True


@dataclass(frozen=True)
class MatchFail:
    """First divergence between actual value and spec."""

    path: str
    reason: MismatchReason

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def message(self) -> str:
        """Human-readable breadcrumb from the root to the divergence."""
        if not self.path:
            return self.reason.describe()
        return f"{self.path} {self.reason.describe()}"

    def prefixed(self, segment: str) -> MatchFail:
        """Return this failure one container level further up."""
        return MatchFail(path=f"{segment}{self.path}", reason=self.reason)


MatchOutcome = MatchPass | MatchFail

MATCH_PASS = MatchPass()
