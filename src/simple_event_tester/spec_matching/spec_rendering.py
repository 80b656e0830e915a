"""Diagnostic rendering of specs, predicates and actual values."""

from __future__ import annotations

import ast
import dataclasses
import inspect
import json
from collections.abc import Callable, Mapping
from types import CodeType
from typing import Any

from .spec_models import Spec, SpecKind


def describe_predicate(function: Callable[..., object]) -> str:
    """Return the source text of a predicate, or its qualified name.

    Lambdas are cut out of their line, so two predicates written on the same
    line are told apart.
    """
    try:
        if getattr(function, "__name__", None) == "<lambda>":
            return _lambda_source(function)
        source = inspect.getsource(function)
    except (OSError, TypeError, SyntaxError):
        return _qualified_name(function)
    return " ".join(source.split())


def _lambda_source(function: Callable[..., object]) -> str:
    code: CodeType = function.__code__  # type: ignore[attr-defined]
    lines, _ = inspect.findsource(function)
    text = "".join(lines)
    candidates = [
        node
        for node in ast.walk(ast.parse(text))
        if isinstance(node, ast.Lambda) and node.lineno == code.co_firstlineno
    ]
    scores = [_covered_positions(node.body, code) for node in candidates]
    if not candidates or (len(candidates) > 1 and max(scores) == 0):
        return _qualified_name(function)
    node = candidates[scores.index(max(scores))]
    segment = ast.get_source_segment(text, node)
    if segment is None:
        return _qualified_name(function)
    return " ".join(segment.split())


def _covered_positions(body: ast.expr, code: CodeType) -> int:
    """Count the instructions of `code` located inside `body`."""
    if body.end_lineno is None or body.end_col_offset is None:
        return 0
    start = (body.lineno, body.col_offset)
    end = (body.end_lineno, body.end_col_offset)
    covered = 0
    for lineno, end_lineno, col, end_col in code.co_positions():
        if lineno is None or end_lineno is None or col is None or end_col is None:
            continue
        if start <= (lineno, col) and (end_lineno, end_col) <= end:
            covered += 1
    return covered


def _qualified_name(function: Callable[..., object]) -> str:
    name = getattr(function, "__qualname__", repr(function))
    code = getattr(function, "__code__", None)
    if name.endswith("<lambda>") and code is not None:
        return f"{name} (line {code.co_firstlineno})"
    return name


def render_value(value: object) -> str:
    """Render an actual value as compact JSON, falling back to repr."""
    try:
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=_json_fallback)
    except (TypeError, ValueError):
        return repr(value)


def render_spec(spec: Spec) -> Any:
    """Convert a built spec into a JSON-compatible structure."""
    if spec.kind == SpecKind.OMITTED:
        return None
    if spec.kind == SpecKind.LITERAL:
        return spec.value
    if spec.kind == SpecKind.PREDICATE:
        return f"<predicate {describe_predicate(spec.value)}>"
    if spec.kind == SpecKind.SEQUENCE:
        return [render_spec(child) for _, child in spec.entries]
    rendered = {
        str(key): render_spec(child)
        for key, child in spec.entries
        if child.kind != SpecKind.OMITTED
    }
    if spec.kind == SpecKind.KEYED_MAP:
        return {"<keyed map>": rendered}
    return rendered


def format_spec(spec: Spec) -> str:
    """Serialize a built spec for timeout and CLI diagnostics."""
    return json.dumps(render_spec(spec), ensure_ascii=False, indent=2, default=repr)


def _json_fallback(value: object) -> object:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return dataclasses.asdict(value)
    if isinstance(value, Mapping):
        return {str(key): item for key, item in value.items()}
    if isinstance(value, set | frozenset):
        return sorted(value, key=repr)
    return repr(value)
