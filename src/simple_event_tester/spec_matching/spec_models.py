"""Spec models: the tagged tree a partial match is checked against."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class SpecDefinitionError(Exception):
    """Raised when an authored value cannot be turned into a spec."""


class SpecKind(str, Enum):
    """Discriminant of the spec tagged union."""

    OMITTED = "omitted"
    LITERAL = "literal"
    PREDICATE = "predicate"
    SEQUENCE = "sequence"
    KEYED_MAP = "keyed_map"
    RECORD = "record"


class _Omitted:
    """Marker for "no constraint here"."""

    _instance: _Omitted | None = None

    def __new__(cls) -> _Omitted:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "OMITTED"

    def __bool__(self) -> bool:
        return False


OMITTED = _Omitted()


@dataclass(frozen=True)
class Spec:
    """One node of a built spec.

    `value` holds the literal or the predicate callable. `entries` holds the
    children of container kinds as `(index | key | field, child)` pairs in
    authored order.
    """

    kind: SpecKind
    value: Any = None
    entries: tuple[tuple[Any, Spec], ...] = ()

    @property
    def is_container(self) -> bool:
        """Return True for sequence, keyed map and record specs."""
        return self.kind in (SpecKind.SEQUENCE, SpecKind.KEYED_MAP, SpecKind.RECORD)


_OMITTED_SPEC = Spec(kind=SpecKind.OMITTED)


def build_spec(raw: object) -> Spec:
    """Build the tagged spec tree for an authored spec literal.

    `None` and `OMITTED` mean "don't care", `str`/`int`/`float`/`bool` are
    literals, callables are predicates, `list`/`tuple` are ordered sequences
    and any other mapping (a plain `dict`) is a record. Keyed maps must be
    authored explicitly with `keyed_map`. Already built specs are returned
    unchanged.

    Raises:
      SpecDefinitionError: If `raw` (or a nested value) has no spec meaning.
    """
    if isinstance(raw, Spec):
        return raw
    if raw is None or raw is OMITTED:
        return _OMITTED_SPEC
    if isinstance(raw, bool | int | float | str):
        return Spec(kind=SpecKind.LITERAL, value=raw)
    if callable(raw):
        return Spec(kind=SpecKind.PREDICATE, value=raw)
    if isinstance(raw, Mapping):
        return Spec(
            kind=SpecKind.RECORD,
            entries=tuple((field, build_spec(child)) for field, child in raw.items()),
        )
    if isinstance(raw, list | tuple):
        return Spec(
            kind=SpecKind.SEQUENCE,
            entries=tuple((index, build_spec(child)) for index, child in enumerate(raw)),
        )
    raise SpecDefinitionError(f"Unsupported spec value of type {type(raw).__name__}: {raw!r}")


def keyed_map(entries: Mapping[Any, object] | Iterable[tuple[Any, object]]) -> Spec:
    """Build a keyed-map spec matched by key lookup against a mapping.

    Unlike a record, a keyed map may use non-string keys and honours
    strict length (key cardinality).
    """
    pairs = entries.items() if isinstance(entries, Mapping) else entries
    return Spec(
        kind=SpecKind.KEYED_MAP,
        entries=tuple((key, build_spec(child)) for key, child in pairs),
    )


def predicate(function: Callable[[Any], object]) -> Spec:
    """Build a predicate spec explicitly (e.g. for callable classes)."""
    if not callable(function):
        raise SpecDefinitionError(f"Predicate must be callable, got {type(function).__name__}.")
    return Spec(kind=SpecKind.PREDICATE, value=function)
