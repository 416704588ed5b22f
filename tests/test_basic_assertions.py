"""Tests for the generic and numeric assertions."""

import pytest

from assertkit import AssertionFailure, assert_that


def failure_message(check):
    with pytest.raises(AssertionFailure) as exc_info:
        check()
    return str(exc_info.value)


# --- equality and identity ---


def test_is_not_equal_to():
    assert_that(1).is_not_equal_to(2)
    assert failure_message(lambda: assert_that(1).is_not_equal_to(1)) == (
        "expected to not be equal to:<1>"
    )


def test_is_same_as():
    items = []
    assert_that(items).is_same_as(items)
    assert failure_message(lambda: assert_that([]).is_same_as([])) == (
        "expected to be the same instance as:<[]> but was:<[]>"
    )


def test_is_true_and_is_false():
    assert_that(True).is_true()
    assert_that(False).is_false()
    assert failure_message(lambda: assert_that(0).is_true()) == (
        "expected:<[True]> but was:<[0]>"
    )


def test_is_not_none():
    assert_that(0).is_not_none()
    assert failure_message(lambda: assert_that(None).is_not_none()) == (
        "expected to not be None"
    )


# --- type and membership ---


def test_is_instance_of():
    assert_that(True).is_instance_of(int)
    assert failure_message(lambda: assert_that("a").is_instance_of(int)) == (
        "expected to be instance of:<int> but had class:<str>"
    )


def test_is_in_and_is_not_in():
    assert_that(2).is_in(1, 2).is_not_in(3, 4)
    assert failure_message(lambda: assert_that(3).is_in(1, 2)) == (
        "expected:<[1, 2]> to contain:<3>"
    )
    assert failure_message(lambda: assert_that(1).is_not_in(1, 2)) == (
        "expected:<[1, 2]> to not contain:<1>"
    )


def test_matches_predicate():
    assert_that(4).matches_predicate(lambda value: value % 2 == 0)
    assert failure_message(
        lambda: assert_that(3).matches_predicate(lambda value: value % 2 == 0)
    ) == "expected <3> to satisfy the predicate"


# --- length ---


def test_length_derives_named_assertion():
    assert_that("abc").length().is_equal_to(3)
    assert failure_message(lambda: assert_that([1]).length().is_equal_to(2)) == (
        "expected [length]:<[2]> but was:<[1]> ([1])"
    )


def test_has_length():
    assert_that((1, 2)).has_length(2)
    assert failure_message(lambda: assert_that([1]).has_length(2)) == (
        "expected to have length:<2> but was:<[1]> (length 1)"
    )


# --- numbers ---


@pytest.mark.parametrize(
    ("check", "message"),
    [
        (lambda: assert_that(0).is_positive(), "expected to be positive but was:<0>"),
        (lambda: assert_that(0).is_negative(), "expected to be negative but was:<0>"),
        (lambda: assert_that(0.5).is_zero(), "expected to be 0 but was:<0.5>"),
        (
            lambda: assert_that(1).is_greater_than(1),
            "expected to be greater than:<1> but was:<1>",
        ),
        (
            lambda: assert_that(2).is_less_than(1),
            "expected to be less than:<1> but was:<2>",
        ),
        (
            lambda: assert_that(4).is_between(1, 3),
            "expected to be between:<1> and <3> but was:<4>",
        ),
    ],
)
def test_number_failures(check, message):
    assert failure_message(check) == message


def test_is_between_is_inclusive():
    assert_that(1).is_between(1, 3)
    assert_that(3).is_between(1, 3)
