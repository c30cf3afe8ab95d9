"""Tests for the variable reference scanner."""

import threading

import pytest

from templating.variables.scanner import (
    ReferenceSyntax,
    find_all,
    first_match,
    scan,
)


def test_plain_text_has_no_references():
    assert list(scan("rate(http_requests_total[5m])")) == []
    assert list(scan("")) == []
    assert first_match("no references here") is None


def test_shorthand_dollar():
    refs = list(scan("$foo"))
    assert len(refs) == 1
    assert refs[0].syntax == ReferenceSyntax.SHORTHAND_DOLLAR
    assert refs[0].name == "foo"
    assert refs[0].format is None
    assert refs[0].field is None
    assert refs[0].raw_match == "$foo"


def test_double_bracket_with_format():
    refs = list(scan("[[bar:fmt]]"))
    assert len(refs) == 1
    assert refs[0].syntax == ReferenceSyntax.DOUBLE_BRACKET
    assert refs[0].name == "bar"
    assert refs[0].format == "fmt"


def test_double_bracket_name_may_contain_non_word_characters():
    ref = first_match("[[my var-1]]")
    assert ref.syntax == ReferenceSyntax.DOUBLE_BRACKET
    assert ref.name == "my var-1"
    assert ref.format is None


def test_double_bracket_is_lazy():
    refs = list(scan("[[a]] and [[b]]"))
    assert [r.name for r in refs] == ["a", "b"]


def test_curly_brace_with_field_and_format():
    refs = list(scan("${baz.field:fmt2}"))
    assert len(refs) == 1
    assert refs[0].syntax == ReferenceSyntax.CURLY_BRACE
    assert refs[0].name == "baz"
    assert refs[0].field == "field"
    assert refs[0].format == "fmt2"


def test_curly_brace_field_keeps_dots():
    ref = first_match("${server.labels.region}")
    assert ref.name == "server"
    assert ref.field == "labels.region"
    assert ref.format is None


def test_shorthand_stops_at_non_word_character():
    ref = first_match("$foo.bar")
    assert ref.syntax == ReferenceSyntax.SHORTHAND_DOLLAR
    assert ref.name == "foo"


def test_word_characters_are_ascii_only():
    assert first_match("$é") is None
    assert first_match("$fooé").name == "foo"


def test_unterminated_curly_is_not_a_reference():
    assert list(scan("${foo")) == []


def test_matches_are_ordered_with_offsets():
    text = "x $a [[b]] ${c}"
    refs = list(scan(text))
    assert [r.syntax for r in refs] == [
        ReferenceSyntax.SHORTHAND_DOLLAR,
        ReferenceSyntax.DOUBLE_BRACKET,
        ReferenceSyntax.CURLY_BRACE,
    ]
    for ref in refs:
        assert text[ref.start:ref.end] == ref.raw_match


def test_groups_hold_all_capture_slots():
    ref = first_match("[[x:y]]")
    assert ref.groups == (None, "x", "y", None, None, None)


def test_find_all_returns_raw_substrings():
    assert find_all("$a and [[b:c]] or ${d}") == ["$a", "[[b:c]]", "${d}"]


def test_first_match_returns_leftmost():
    assert first_match("$a $b").name == "a"


def test_scan_is_restartable():
    text = "$a [[b]] ${c.d:e}"
    assert list(scan(text)) == list(scan(text))


def test_first_match_has_no_state_between_calls():
    first_match("some text $later")
    assert first_match("$early").name == "early"
    assert first_match("$early").start == 0


def test_concurrent_scans_are_independent():
    text = " ".join(f"$v{i}" for i in range(200))
    expected = [f"v{i}" for i in range(200)]
    results = []

    def worker():
        results.append([r.name for r in scan(text)])

    threads = [threading.Thread(target=worker) for _ in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert results == [expected] * 8


def test_non_string_input_raises_type_error():
    with pytest.raises(TypeError):
        list(scan(None))
    with pytest.raises(TypeError):
        first_match(42)
