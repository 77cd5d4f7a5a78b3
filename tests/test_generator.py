import math
import sys

import pytest

from lisn.errors import LisnGenerationError
from lisn.printer.generator import (
    display_length,
    needs_literal,
    to_compact_text,
    to_pretty_text,
    value_to_text,
)
from lisn.reader.parser import parse
from lisn.types.cell import Cell

# -----------------------------------------------------
# Atoms
# -----------------------------------------------------

@pytest.mark.parametrize(
    "value,expected",
    [
        (None, "null"),
        (True, "true"),
        (False, "false"),
        (7, "7"),
        (-3, "-3"),
        (2.5, "2.5"),
        (-0.0, "-0.0"),
        (3.0, "3.0"),
        (1e16, "1e16"),
        (1e-05, "1e-05"),
        ("abc", "abc"),
        ("@ref", "@ref"),
        ("kebab-case", "kebab-case"),
        ("007", '"007"'),
        ("-x", '"-x"'),
        (".hidden", '".hidden"'),
        ("a b", '"a b"'),
        ("tab\there", '"tab\there"'),
        ("f(x)", '"f(x)"'),
        ("close)", '"close)"'),
        ("", '""'),
        ("true", '"true"'),
        ("false", '"false"'),
        ("null", '"null"'),
        ("back\\slash", '"back\\slash"'),
    ]
)
def test_value_to_text(value, expected):
    assert value_to_text(value) == expected


@pytest.mark.parametrize(
    "value,expected",
    [
        ('say "hi"', 'say\\s\\"hi\\"'),
        ('"(a', '\\"\\u28\\u61'),
        ('1"', '\\u31\\"'),
        ('a\\"', 'a\\\\\\"'),
    ]
)
def test_strings_with_double_quotes_are_escaped(value, expected):
    text = value_to_text(value)
    assert text == expected
    assert parse(text) == value


def test_needs_literal():
    assert needs_literal("007")
    assert needs_literal("has space")
    assert not needs_literal("plain")
    assert not needs_literal("a-1.5")


@pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
def test_non_finite_floats_are_rejected(value):
    with pytest.raises(LisnGenerationError):
        value_to_text(value)


@pytest.mark.parametrize(
    "value",
    [object(), {1, 2}, b"bytes", Cell("a"), [1, object()], {"a": object()}, {1: "one"}]
)
def test_unsupported_values(value):
    with pytest.raises(LisnGenerationError):
        to_compact_text(value)
    with pytest.raises(LisnGenerationError):
        to_pretty_text(value)

# -----------------------------------------------------
# Compact
# -----------------------------------------------------

@pytest.mark.parametrize(
    "value,expected",
    [
        ([], "()"),
        ({}, "(map)"),
        ([1, "a", None], "(list 1 a null)"),
        ((1, 2), "(list 1 2)"),
        ([[]], "(list ())"),
        ({"a": 1, "b": [True, False, None]}, "(map(a 1)(b (list true false null)))"),
        ({"@ref": "X1"}, "(map(@ref X1))"),
        ({"007": "two words"}, '(map("007" "two words"))'),
        ([{"x": {}}, [1.5]], "(list (map(x (map))) (list 1.5))"),
    ]
)
def test_compact(value, expected):
    assert to_compact_text(value) == expected


def test_compact_does_not_mutate_input():
    value = {"b": [3, 2, 1], "a": {"z": None}}
    to_compact_text(value)
    assert value == {"b": [3, 2, 1], "a": {"z": None}}
    assert list(value) == ["b", "a"]

# -----------------------------------------------------
# Width estimate
# -----------------------------------------------------

@pytest.mark.parametrize(
    "value,expected",
    [
        (None, 4),
        (True, 4),
        (False, 5),
        ("abc", 3),
        (12, 2),
        (-1.5, 4),
        ([], 2),
        ([1, 2], 5),
        ({"a": 1}, 7),
        ({}, 4),
    ]
)
def test_display_length(value, expected):
    assert display_length(value) == expected

# -----------------------------------------------------
# Pretty
# -----------------------------------------------------

def test_pretty_atoms_and_empty_containers():
    assert to_pretty_text("007") == '"007"'
    assert to_pretty_text([]) == "()"
    assert to_pretty_text({}) == "(map)"


def test_pretty_short_values_stay_inline():
    assert to_pretty_text({"a": 1, "b": 2}) == "(map (a 1)(b 2))"
    assert to_pretty_text([1, 2, 3]) == "(list 1 2 3)"


def test_pretty_wide_map_puts_one_pair_per_line():
    value = {"alpha": "x" * 30, "beta": "y" * 30, "gamma": 1}
    expected = "\n".join([
        "(map",
        "  (alpha " + "x" * 30 + ")",
        "  (beta " + "y" * 30 + ")",
        "  (gamma 1)",
        ")",
    ])
    assert to_pretty_text(value) == expected


def test_pretty_wide_list():
    value = ["a" * 40, "b" * 40]
    assert to_pretty_text(value) == "(list\n  " + "a" * 40 + "\n  " + "b" * 40 + "\n)"


def test_pretty_splits_a_wide_pair():
    value = {"items": ["a" * 40, "b" * 40]}
    expected = "\n".join([
        "(map",
        "  (items",
        "    (list",
        "      " + "a" * 40,
        "      " + "b" * 40,
        "    )",
        "  )",
        ")",
    ])
    assert to_pretty_text(value) == expected


def test_pretty_lines_respect_width():
    value = {
        "name": "Arsenal",
        "players": [{"name": f"player-{i}", "number": i, "active": i % 2 == 0} for i in range(6)],
        "ground": {"@ref": "G1"},
    }
    for line in to_pretty_text(value).splitlines():
        assert len(line) < 80


def test_pretty_options():
    value = {"a": 1, "b": 2}
    assert to_pretty_text(value, {"max_line_length": 10}) == "(map\n  (a 1)\n  (b 2)\n)"
    assert to_pretty_text(value, {"max_line_length": 10, "indent_width": 4}) == "(map\n    (a 1)\n    (b 2)\n)"


def test_unknown_option_is_rejected():
    with pytest.raises(ValueError):
        to_pretty_text([1], {"width": 10})


def _nested_list(depth):
    value = [1]
    for _ in range(depth):
        value = [value]
    return value


def test_deep_nesting_is_a_generation_error():
    value = _nested_list(3000)
    with pytest.raises(LisnGenerationError):
        to_compact_text(value)
    with pytest.raises(LisnGenerationError):
        to_pretty_text(value)


@pytest.mark.skipif(not hasattr(sys, "set_int_max_str_digits"), reason="no int string limit")
def test_integer_beyond_string_limit():
    previous = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(4300)
    try:
        with pytest.raises(LisnGenerationError):
            to_compact_text([10**5000])
        with pytest.raises(LisnGenerationError):
            to_pretty_text({"n": 10**5000})
    finally:
        sys.set_int_max_str_digits(previous)
