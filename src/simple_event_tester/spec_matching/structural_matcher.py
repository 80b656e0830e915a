"""Structural partial matching of live values against specs."""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from .match_outcomes import (
    MATCH_PASS,
    LengthMismatch,
    MatchFail,
    MatchOutcome,
    MissingInActual,
    PredicateFalse,
    TypeMismatch,
    ValueMismatch,
)
from .spec_models import Spec, SpecKind, build_spec
from .spec_rendering import describe_predicate, render_value

_SCALAR_TYPES = (str, bytes, bytearray, int, float, complex, type(None))
_TEXT_TYPES = (str, bytes, bytearray)
_CONTAINER_NAMES = {
    SpecKind.SEQUENCE: "sequence",
    SpecKind.KEYED_MAP: "keyed map",
    SpecKind.RECORD: "record",
}


class _Missing:
    def __repr__(self) -> str:
        return "MISSING"


_MISSING = _Missing()


def match(actual: object, spec: object, strict_length: bool = False) -> MatchOutcome:
    """Compare an actual value against a partial spec.

    Args:
      actual: Live value to inspect.
      spec: Authored spec literal or a spec built with `build_spec`.
      strict_length: Require sequences and keyed maps to have exactly the
        spec's length. Records are never length checked.

    Returns:
      `MATCH_PASS`, or a `MatchFail` describing the first divergence found in
      a top-down walk. Siblings after a failing child are never evaluated.
      A root `None` counts as absent; a `None` held by a field, element or key
      is a value like any other.
    """
    root = _MISSING if actual is None else actual
    return _match_node(root, build_spec(spec), strict_length)


def _match_node(actual: object, spec: Spec, strict_length: bool) -> MatchOutcome:
    if spec.kind == SpecKind.OMITTED:
        return MATCH_PASS
    if actual is _MISSING:
        return MatchFail(path="", reason=MissingInActual())
    if spec.kind == SpecKind.PREDICATE:
        return _match_predicate(actual, spec)
    if spec.is_container and not _has_category(actual, spec.kind):
        return MatchFail(
            path="",
            reason=TypeMismatch(
                expected_type=_CONTAINER_NAMES[spec.kind],
                actual_type=type(actual).__name__,
            ),
        )
    if spec.kind == SpecKind.SEQUENCE:
        return _match_sequence(actual, spec, strict_length)  # type: ignore[arg-type]
    if spec.kind == SpecKind.KEYED_MAP:
        return _match_keyed_map(actual, spec, strict_length)  # type: ignore[arg-type]
    if spec.kind == SpecKind.RECORD:
        return _match_record(actual, spec, strict_length)
    if _loosely_equal(actual, spec.value):
        return MATCH_PASS
    return MatchFail(path="", reason=ValueMismatch(actual=actual, expected=spec.value))


def _match_predicate(actual: object, spec: Spec) -> MatchOutcome:
    # Only an explicit False fails; None, 0 and "" pass.
    if spec.value(actual) is False:
        return MatchFail(
            path="",
            reason=PredicateFalse(
                predicate_source=describe_predicate(spec.value),
                actual_json=render_value(actual),
            ),
        )
    return MATCH_PASS


def _match_sequence(actual: Sequence[object], spec: Spec, strict_length: bool) -> MatchOutcome:
    if strict_length and len(actual) != len(spec.entries):
        return MatchFail(
            path="", reason=LengthMismatch(expected=len(spec.entries), actual=len(actual))
        )
    for index, child in spec.entries:
        element = actual[index] if index < len(actual) else _MISSING
        outcome = _match_node(element, child, strict_length)
        if isinstance(outcome, MatchFail):
            return outcome.prefixed(f"[{index}]")
    return MATCH_PASS


def _match_keyed_map(
    actual: Mapping[object, object], spec: Spec, strict_length: bool
) -> MatchOutcome:
    if strict_length and len(actual) != len(spec.entries):
        return MatchFail(
            path="", reason=LengthMismatch(expected=len(spec.entries), actual=len(actual))
        )
    for key, child in spec.entries:
        value = actual[key] if key in actual else _MISSING
        outcome = _match_node(value, child, strict_length)
        if isinstance(outcome, MatchFail):
            return outcome.prefixed(f".{key}")
    return MATCH_PASS


def _match_record(actual: object, spec: Spec, strict_length: bool) -> MatchOutcome:
    for field, child in spec.entries:
        outcome = _match_node(_lookup_field(actual, field), child, strict_length)
        if isinstance(outcome, MatchFail):
            return outcome.prefixed(f".{field}")
    return MATCH_PASS


def _lookup_field(actual: object, field: object) -> object:
    if isinstance(actual, Mapping):
        return actual[field] if field in actual else _MISSING
    if isinstance(field, str):
        return getattr(actual, field, _MISSING)
    return _MISSING


def _has_category(actual: object, kind: SpecKind) -> bool:
    is_sequence = isinstance(actual, Sequence) and not isinstance(actual, _TEXT_TYPES)
    if kind == SpecKind.SEQUENCE:
        return is_sequence
    if kind == SpecKind.KEYED_MAP:
        return isinstance(actual, Mapping)
    return not is_sequence and not isinstance(actual, _SCALAR_TYPES)


def _loosely_equal(actual: object, expected: object) -> bool:
    if actual == expected:
        return True
    for text, number in ((actual, expected), (expected, actual)):
        if (
            isinstance(text, str)
            and isinstance(number, int | float)
            and not isinstance(number, bool)
        ):
            try:
                return float(text.strip()) == number
            except ValueError:
                return False
    return False
