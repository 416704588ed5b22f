"""Fluent, composable assertions with soft-assertion blocks."""

from assertkit.config import DEFAULT_CONFIG, AssertConfig, load_config
from assertkit.core import (
    Assert,
    FailingAssert,
    SoftAssertions,
    ValueAssert,
    aggregate,
    assert_all,
    assert_that,
    fail,
)
from assertkit.display import Displayable, display, show
from assertkit.failure import AssertionFailure, MultipleFailuresError

__all__ = [
    "Assert",
    "AssertConfig",
    "AssertionFailure",
    "DEFAULT_CONFIG",
    "Displayable",
    "FailingAssert",
    "MultipleFailuresError",
    "SoftAssertions",
    "ValueAssert",
    "aggregate",
    "assert_all",
    "assert_that",
    "display",
    "fail",
    "load_config",
    "show",
]
