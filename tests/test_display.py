"""Tests for value rendering and diff highlighting."""

import importlib
from collections import namedtuple

import pytest

from assertkit import AssertConfig, assert_that, display, show
from assertkit.display import compact_diff, list_diff, render


class Money:
    def __init__(self, cents):
        self.cents = cents

    def __display__(self):
        return f"${self.cents / 100:.2f}"


class Broken:
    def __repr__(self):
        raise RuntimeError("no repr")


Point = namedtuple("Point", "x y")


# --- display ---


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (None, "None"),
        (1, "1"),
        (1.5, "1.5"),
        (True, "True"),
        ("a", '"a"'),
        (b"a", "b'a'"),
        ([1, "a"], '[1, "a"]'),
        ((1, 2), "(1, 2)"),
        ((1,), "(1,)"),
        ({"a": 1}, '{"a"=1}'),
        ({3, 1, 2}, "[1, 2, 3]"),
        (frozenset({"b", "a"}), '["a", "b"]'),
        ([None, [2]], "[None, [2]]"),
    ],
)
def test_display(value, expected):
    assert display(value) == expected


def test_display_namedtuple_uses_repr():
    assert display(Point(1, 2)) == "Point(x=1, y=2)"


def test_display_uses_dunder_display():
    assert display(Money(150)) == "$1.50"
    assert display([Money(5)]) == "[$0.05]"


def test_display_never_raises():
    assert display(Broken()) == "Broken object"


def test_display_class_with_dunder_display_uses_repr():
    assert display(Money) == repr(Money)
    assert show(Money) == f"<{Money!r}>"


def test_display_recursive_list():
    items = []
    items.append(items)
    assert display(items) == "list object"


def test_display_uses_config():
    config = AssertConfig(none_token="null", quote="'")
    assert display([None, "a"], config) == "[null, 'a']"


def test_show_wraps_value():
    assert show(1) == "<1>"
    assert show(0, "[]") == "[0]"
    assert show("a") == '<"a">'


# --- render ---


def test_render_with_display_function():
    assert render(1, lambda value: f"#{value}") == "#1"


def test_render_falls_back_when_display_function_raises():
    def explode(value):
        raise ValueError(value)

    assert render("a", explode) == '"a"'


def test_broken_subject_still_produces_message():
    with pytest.raises(AssertionError) as exc_info:
        assert_that(Broken()).is_none()
    assert str(exc_info.value) == "expected to be None but was:<Broken object>"


# --- compact_diff ---


@pytest.mark.parametrize(
    ("expected", "actual", "context", "result"),
    [
        ("test1", "test0", 20, ("test[1]", "test[0]")),
        ("abcdefX", "abcdefY", 3, ("...def[X]", "...def[Y]")),
        ("Xabcdef", "Yabcdef", 3, ("[X]abc...", "[Y]abc...")),
        ("ab", "abc", 20, ("ab[]", "ab[c]")),
        ("abc", "xyz", 20, ("[abc]", "[xyz]")),
        ("aXb", "aYb", 0, ("...[X]...", "...[Y]...")),
    ],
)
def test_compact_diff(expected, actual, context, result):
    assert compact_diff(expected, actual, context) == result


def test_compact_diff_does_not_overlap_prefix_and_suffix():
    assert compact_diff("aa", "aaa") == ("aa[]", "aa[a]")


# --- list_diff ---


def test_list_diff_equal_lists():
    assert list_diff([1, 2], [1, 2]) == []


def test_list_diff_missing_and_extra():
    assert list_diff([1, 2, 3], [1, 3, 4]) == [
        ("expected", 1, 2),
        ("unexpected", 2, 4),
    ]


def test_list_diff_swapped_elements():
    assert list_diff([2, 1], [1, 2]) == [("unexpected", 0, 1), ("expected", 1, 1)]


def test_list_diff_unhashable_elements():
    assert list_diff([[1]], [[2]]) == [("expected", 0, [1]), ("unexpected", 0, [2])]


def test_list_diff_replaced_element():
    assert list_diff([1, 2, 3], [1, 5, 3]) == [
        ("expected", 1, 2),
        ("unexpected", 1, 5),
    ]


def test_list_diff_long_lists():
    expected = list(range(5000))
    actual = expected[:2500] + [-1] + expected[2500:]
    assert list_diff(expected, actual) == [("unexpected", 2500, -1)]


def test_list_diff_large_unhashable_lists_compare_by_position(monkeypatch):
    display_module = importlib.import_module("assertkit.display")
    monkeypatch.setattr(display_module, "MAX_DIFF_CELLS", 4)
    assert list_diff([[1], [2], [3]], [[1], [9]]) == [
        ("expected", 1, [2]),
        ("unexpected", 1, [9]),
        ("expected", 2, [3]),
    ]
