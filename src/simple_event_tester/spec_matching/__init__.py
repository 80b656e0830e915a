"""Structural matching domain exports."""

from .match_outcomes import (
    MATCH_PASS,
    LengthMismatch,
    MatchFail,
    MatchOutcome,
    MatchPass,
    MismatchReason,
    MissingInActual,
    PredicateFalse,
    TypeMismatch,
    ValueMismatch,
)
from .spec_documents import SpecDocumentError, load_document
from .spec_models import (
    OMITTED,
    Spec,
    SpecDefinitionError,
    SpecKind,
    build_spec,
    keyed_map,
    predicate,
)
from .spec_rendering import describe_predicate, format_spec, render_spec, render_value
from .structural_matcher import match

__all__ = [
    "OMITTED",
    "Spec",
    "SpecKind",
    "SpecDefinitionError",
    "build_spec",
    "keyed_map",
    "predicate",
    "MATCH_PASS",
    "MatchPass",
    "MatchFail",
    "MatchOutcome",
    "MismatchReason",
    "MissingInActual",
    "TypeMismatch",
    "LengthMismatch",
    "PredicateFalse",
    "ValueMismatch",
    "describe_predicate",
    "format_spec",
    "render_spec",
    "render_value",
    "SpecDocumentError",
    "load_document",
    "match",
]
