"""Assertions that apply to any subject."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from assertkit.core import Assert


class AnyAssertions:
    def is_equal_to(self: Assert, expected: Any) -> Assert:
        def check(actual: Any) -> None:
            if actual == expected:
                return
            self.fail_with(expected, actual)

        return self.given(check)

    def is_not_equal_to(self: Assert, expected: Any) -> Assert:
        def check(actual: Any) -> None:
            if actual != expected:
                return
            self.expected(f"to not be equal to:{self.show(expected)}")

        return self.given(check)

    def is_same_as(self: Assert, expected: Any) -> Assert:
        def check(actual: Any) -> None:
            if actual is expected:
                return
            self.expected(
                f"to be the same instance as:{self.show(expected)} but was:{self.show(actual)}"
            )

        return self.given(check)

    def is_none(self: Assert) -> Assert:
        def check(actual: Any) -> None:
            if actual is None:
                return
            self.expected(f"to be None but was:{self.show(actual)}")

        return self.given(check)

    def is_not_none(self: Assert) -> Assert:
        def check(actual: Any) -> None:
            if actual is not None:
                return
            self.expected("to not be None")

        return self.given(check)

    def is_true(self: Assert) -> Assert:
        return self.is_equal_to(True)

    def is_false(self: Assert) -> Assert:
        return self.is_equal_to(False)

    def is_instance_of(self: Assert, kind: type) -> Assert:
        def check(actual: Any) -> None:
            if isinstance(actual, kind):
                return
            self.expected(
                f"to be instance of:<{kind.__name__}> but had class:<{type(actual).__name__}>"
            )

        return self.given(check)

    def is_in(self: Assert, *values: Any) -> Assert:
        def check(actual: Any) -> None:
            if actual in values:
                return
            self.expected(f":{self.show(list(values))} to contain:{self.show(actual)}")

        return self.given(check)

    def is_not_in(self: Assert, *values: Any) -> Assert:
        def check(actual: Any) -> None:
            if actual not in values:
                return
            self.expected(f":{self.show(list(values))} to not contain:{self.show(actual)}")

        return self.given(check)

    def matches_predicate(self: Assert, predicate: Callable[[Any], bool]) -> Assert:
        """Pass when ``predicate(subject)`` is truthy."""

        def check(actual: Any) -> None:
            if predicate(actual):
                return
            self.expected(f"{self.show(actual)} to satisfy the predicate")

        return self.given(check)

    def length(self: Assert) -> Assert:
        """Assert on ``len(subject)``."""
        return self.prop("length", len)

    def has_length(self: Assert, expected: int) -> Assert:
        def check(actual: Any) -> None:
            size = len(actual)
            if size == expected:
                return
            self.expected(
                f"to have length:{self.show(expected)} but was:{self.show(actual)} (length {size})"
            )

        return self.given(check)
