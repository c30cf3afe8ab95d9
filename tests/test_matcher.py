"""Tests for contains_variable and referenced_variables."""

import pytest

from templating.variables.matcher import (
    contains_variable,
    flatten_input,
    referenced_variables,
)


def test_shorthand_reference():
    assert contains_variable("$foo is set", "foo") is True
    assert contains_variable("$foo is set", "bar") is False


def test_name_must_match_exactly():
    assert contains_variable("$foobar", "foo") is False
    assert contains_variable("$foo", "foobar") is False


def test_full_match_text_is_not_a_slot():
    assert contains_variable("$foo", "$foo") is False


def test_bracket_format_slot_is_a_hit():
    assert contains_variable("[[x:y]]", "y") is True
    assert contains_variable("[[x:y]]", "x") is True


def test_curly_field_and_format_slots_are_hits():
    text = "${server.region:csv}"
    assert contains_variable(text, "server") is True
    assert contains_variable(text, "region") is True
    assert contains_variable(text, "csv") is True
    assert contains_variable(text, "serv") is False


def test_no_references_never_matches():
    for name in ("foo", "", "x"):
        assert contains_variable("plain text without refs", name) is False


def test_several_string_inputs():
    assert contains_variable(["no refs", "still none", "rate($metric)"], "metric") is True
    assert contains_variable(["no refs", "still none"], "metric") is False


def test_mapping_input_is_flattened():
    target = {"refId": "A", "expr": "up{job=\"$job\"}", "hide": False}
    assert contains_variable(target, "job") is True
    assert contains_variable([target, "other"], "job") is True


def test_reference_can_span_joined_inputs():
    assert contains_variable(["[[foo", "bar]]"], "foo bar") is True


def test_flatten_input_renders_values():
    record = {"a": True, "b": None, "c": ["$x", "$y"], "d": 3}
    assert flatten_input(record) == "true  $x,$y 3"
    assert flatten_input("as is") == "as is"
    assert contains_variable(record, "y") is True


def test_empty_inputs_raise_value_error():
    with pytest.raises(ValueError):
        contains_variable([], "foo")


def test_bad_argument_types_raise_type_error():
    with pytest.raises(TypeError):
        contains_variable("$foo", None)
    with pytest.raises(TypeError):
        contains_variable([42], "foo")


def test_referenced_variables():
    assert referenced_variables("$a [[b:fmt]] ${c.d}") == {"a", "b", "c"}
    assert referenced_variables(["plain"]) == set()
