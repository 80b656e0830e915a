"""Structural matcher tests."""

from __future__ import annotations

from types import SimpleNamespace

import pytest
from simple_event_tester.spec_matching import (
    MATCH_PASS,
    OMITTED,
    LengthMismatch,
    MatchFail,
    MissingInActual,
    PredicateFalse,
    TypeMismatch,
    ValueMismatch,
    keyed_map,
    match,
)


def _fail(outcome: object) -> MatchFail:
    assert isinstance(outcome, MatchFail), f"expected a failure, got {outcome!r}"
    return outcome


@pytest.mark.parametrize("actual", [None, 0, "", [], {}, object(), SimpleNamespace(a=1)])
def test_omitted_spec_passes_for_any_actual(actual: object) -> None:
    assert match(actual, None) == MATCH_PASS
    assert match(actual, OMITTED).is_ok


def test_absent_actual_fails_when_spec_is_present() -> None:
    outcome = _fail(match(None, "x"))

    assert outcome.path == ""
    assert outcome.reason == MissingInActual()
    assert outcome.message == "does not exist in actual"


def test_none_held_by_a_field_is_a_value_not_an_absence() -> None:
    assert match({"guildId": None}, {"guildId": lambda value: value is None}).is_ok
    assert match([None], [lambda value: value is None]).is_ok

    outcome = _fail(match({"guildId": None}, {"guildId": "g-1"}))
    assert outcome.path == ".guildId"
    assert outcome.reason == ValueMismatch(actual=None, expected="g-1")


def test_none_held_by_a_field_fails_container_specs_with_a_type_mismatch() -> None:
    outcome = _fail(match({"author": None}, {"author": {"id": "42"}}))

    assert outcome.path == ".author"
    assert outcome.reason == TypeMismatch(expected_type="record", actual_type="NoneType")


def test_missing_field_is_still_absent_next_to_none_fields() -> None:
    outcome = _fail(match({"guildId": None}, {"channelId": "c-1"}))

    assert outcome.path == ".channelId"
    assert outcome.reason == MissingInActual()


@pytest.mark.parametrize("returned", [0, "", None, [], True, "no"])
def test_predicate_passes_unless_it_returns_false(returned: object) -> None:
    assert match(5, lambda _value: returned).is_ok


def test_predicate_returning_false_reports_source_and_actual_json() -> None:
    outcome = _fail(match({"value": 5}, {"value": lambda n: n > 6}))

    assert outcome.path == ".value"
    assert isinstance(outcome.reason, PredicateFalse)
    assert "n > 6" in outcome.reason.predicate_source
    assert outcome.reason.actual_json == "5"
    assert outcome.message.startswith(".value function (")
    assert outcome.message.endswith("returned false for 5")


def test_predicate_failure_names_only_the_failing_lambda_on_a_shared_line() -> None:
    spec = {"a": lambda v: v == 1, "b": lambda v: v > 5}

    outcome = _fail(match({"a": 1, "b": 2}, spec))

    assert outcome.path == ".b"
    assert isinstance(outcome.reason, PredicateFalse)
    assert outcome.reason.predicate_source == "lambda v: v > 5"
    assert outcome.message == ".b function (lambda v: v > 5) returned false for 2"


def test_predicate_receives_the_actual_subvalue() -> None:
    seen: list[object] = []

    def remember(value: object) -> bool:
        seen.append(value)
        return True

    assert match({"embeds": [{"title": "hello"}]}, {"embeds": [{"title": remember}]}).is_ok
    assert seen == ["hello"]


def test_sequence_allows_extra_actual_elements_without_strict_length() -> None:
    assert match([1, 2, 3], [1, 2]).is_ok


def test_sequence_rejects_different_length_under_strict_length() -> None:
    outcome = _fail(match([1, 2, 3], [1, 2], strict_length=True))

    assert outcome.path == ""
    assert outcome.reason == LengthMismatch(expected=2, actual=3)
    assert "Turn strict_length off" in outcome.message


def test_sequence_reports_missing_index_when_actual_is_shorter() -> None:
    outcome = _fail(match([1], [1, 2]))

    assert outcome.path == "[1]"
    assert outcome.reason == MissingInActual()
    assert outcome.message == "[1] does not exist in actual"


def test_sequence_is_index_aligned_not_content_aligned() -> None:
    outcome = _fail(match(["b", "a"], ["a"]))

    assert outcome.path == "[0]"
    assert outcome.reason == ValueMismatch(actual="b", expected="a")


def test_sequence_omitted_element_beyond_actual_length_passes() -> None:
    assert match([1], [1, None]).is_ok


def test_sequence_accepts_tuple_actual() -> None:
    assert match((1, 2), [1, 2], strict_length=True).is_ok


def test_record_ignores_fields_not_in_spec_even_under_strict_length() -> None:
    assert match({"a": 1, "b": 2}, {"a": 1}).is_ok
    assert match({"a": 1, "b": 2}, {"a": 1}, strict_length=True).is_ok


def test_record_matches_object_attributes() -> None:
    message = SimpleNamespace(author=SimpleNamespace(id="42"), content="hi", pinned=False)

    assert match(message, {"author": {"id": "42"}, "content": "hi"}).is_ok
    outcome = _fail(match(message, {"author": {"id": "7"}}))
    assert outcome.path == ".author.id"


def test_record_reports_missing_field() -> None:
    outcome = _fail(match(SimpleNamespace(content="hi"), {"missing": 1}))

    assert outcome.path == ".missing"
    assert outcome.message == ".missing does not exist in actual"


def test_first_failure_short_circuits_sibling_fields() -> None:
    calls: list[object] = []

    def spy_b(value: object) -> bool:
        calls.append(value)
        return False

    outcome = _fail(match({"a": 1, "b": 2}, {"a": lambda _value: False, "b": spy_b}))

    assert outcome.path == ".a"
    assert calls == []


def test_failure_path_is_composed_from_root_to_divergence() -> None:
    outcome = _fail(match({"list": [{"name": "x"}]}, {"list": [{"name": "y"}]}))

    assert outcome.path == ".list[0].name"
    assert outcome.reason == ValueMismatch(actual="x", expected="y")
    assert outcome.message == ".list[0].name different: actual: 'x', expected: 'y'"


@pytest.mark.parametrize(
    ("actual", "spec", "expected_type", "actual_type"),
    [
        ({"test": "string"}, {"test": {}}, "record", "str"),
        ({"test": {"a": 1}}, {"test": [1]}, "sequence", "dict"),
        ({"test": [1]}, {"test": {"a": 1}}, "record", "list"),
        ({"test": "abc"}, {"test": ["a"]}, "sequence", "str"),
        (
            {"test": SimpleNamespace(a=1)},
            {"test": keyed_map({"a": 1})},
            "keyed map",
            "SimpleNamespace",
        ),
    ],
)
def test_container_category_mismatch_fails_before_recursing(
    actual: object, spec: object, expected_type: str, actual_type: str
) -> None:
    outcome = _fail(match(actual, spec))

    assert outcome.path == ".test"
    assert outcome.reason == TypeMismatch(expected_type=expected_type, actual_type=actual_type)
    assert outcome.message == f".test has type {actual_type} instead of {expected_type}"


def test_empty_record_spec_accepts_any_non_scalar() -> None:
    assert match({"test": {}}, {"test": {}}).is_ok
    assert match({"test": {"key": "value"}}, {"test": {}}).is_ok
    assert match(SimpleNamespace(), {}).is_ok


def test_keyed_map_matches_by_key_lookup() -> None:
    spec = keyed_map({"key": "value"})

    assert match({"key": "value", "other": 1}, spec).is_ok
    outcome = _fail(match({"key": "different"}, spec))
    assert outcome.path == ".key"
    assert outcome.reason == ValueMismatch(actual="different", expected="value")


def test_keyed_map_reports_missing_key() -> None:
    outcome = _fail(match({"key": "value"}, keyed_map([("key", "value"), ("other", 1)])))

    assert outcome.path == ".other"
    assert outcome.reason == MissingInActual()


def test_keyed_map_strict_length_compares_key_cardinality() -> None:
    outcome = _fail(match({"a": 1, "b": 2}, keyed_map({"a": 1}), strict_length=True))

    assert outcome.reason == LengthMismatch(expected=1, actual=2)
    assert match({"a": 1}, keyed_map({"a": 1}), strict_length=True).is_ok


def test_keyed_map_supports_non_string_keys() -> None:
    assert match({1: "one", 2: "two"}, keyed_map([(2, "two")])).is_ok


def test_strict_length_applies_to_nested_sequences() -> None:
    outcome = _fail(match({"list": [1, 2]}, {"list": [1]}, strict_length=True))

    assert outcome.path == ".list"
    assert isinstance(outcome.reason, LengthMismatch)


@pytest.mark.parametrize(
    ("actual", "spec"),
    [("5", 5), (5, "5"), (1.5, "1.5"), (True, True), ("hi", "hi"), (2, 2.0)],
)
def test_literals_compare_loosely(actual: object, spec: object) -> None:
    assert match(actual, spec).is_ok


@pytest.mark.parametrize(("actual", "spec"), [("abc", 5), (5, 6), ("hi", "HI"), ("", 0)])
def test_literal_mismatch_reports_actual_and_expected(actual: object, spec: object) -> None:
    outcome = _fail(match(actual, spec))

    assert outcome.path == ""
    assert outcome.reason == ValueMismatch(actual=actual, expected=spec)
