"""Comparisons for numeric subjects."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from assertkit.core import Assert


class NumberAssertions:
    def is_positive(self: Assert) -> Assert:
        def check(actual: Any) -> None:
            if actual > 0:
                return
            self.expected(f"to be positive but was:{self.show(actual)}")

        return self.given(check)

    def is_negative(self: Assert) -> Assert:
        def check(actual: Any) -> None:
            if actual < 0:
                return
            self.expected(f"to be negative but was:{self.show(actual)}")

        return self.given(check)

    def is_zero(self: Assert) -> Assert:
        def check(actual: Any) -> None:
            if actual == 0:
                return
            self.expected(f"to be 0 but was:{self.show(actual)}")

        return self.given(check)

    def is_greater_than(self: Assert, other: Any) -> Assert:
        def check(actual: Any) -> None:
            if actual > other:
                return
            self.expected(f"to be greater than:{self.show(other)} but was:{self.show(actual)}")

        return self.given(check)

    def is_less_than(self: Assert, other: Any) -> Assert:
        def check(actual: Any) -> None:
            if actual < other:
                return
            self.expected(f"to be less than:{self.show(other)} but was:{self.show(actual)}")

        return self.given(check)

    def is_between(self: Assert, start: Any, end: Any) -> Assert:
        """Inclusive on both ends."""

        def check(actual: Any) -> None:
            if start <= actual <= end:
                return
            self.expected(
                f"to be between:{self.show(start)} and {self.show(end)} but was:{self.show(actual)}"
            )

        return self.given(check)
