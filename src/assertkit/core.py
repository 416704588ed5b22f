"""Assertion wrapper, soft-assertion blocks and the top-level entry points.

Example:
    >>> from assertkit import assert_that, assert_all
    >>> assert_that([1, 2, 3]).contains(2).each(lambda item: item.is_positive())
    >>> with assert_all() as soft:
    ...     soft.assert_that(1).is_equal_to(1)
    ...     soft.assert_that("a").is_in("a", "b")
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable, Iterator
from contextlib import AbstractContextManager, contextmanager
from dataclasses import dataclass, replace
from typing import Any, Generic, NoReturn, TypeVar

from assertkit.assertions.any import AnyAssertions
from assertkit.assertions.number import NumberAssertions
from assertkit.assertions.sequence import SequenceAssertions
from assertkit.config import DEFAULT_CONFIG, AssertConfig
from assertkit.display import compact_diff, render
from assertkit.failure import (
    MISSING,
    AssertionFailure,
    FailureCollector,
    Failures,
    RaisingFailures,
    run_boundary,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

DisplayWith = Callable[[Any], str]
FailIf = Callable[[list[AssertionFailure]], bool]


@dataclass(frozen=True)
class AssertContext:
    """State shared by an assertion and the assertions derived from it.

    Attributes:
        failures: Handler receiving failures (raising, or a block's collector).
        config: Rendering settings.
        origin: Subject of the root assertion once a child has been derived
            from it; shown at the end of failure messages of descendants.
        origin_display: Display function that was active for ``origin``.
    """

    failures: Failures
    config: AssertConfig = DEFAULT_CONFIG
    origin: Any = MISSING
    origin_display: DisplayWith | None = None

    @property
    def has_origin(self) -> bool:
        return self.origin is not MISSING

    def display_origin(self) -> str:
        return render(self.origin, self.origin_display, self.config)


class Assert(AnyAssertions, NumberAssertions, SequenceAssertions, ABC, Generic[T]):
    """Base of the two assertion variants.

    :class:`ValueAssert` wraps a live subject. :class:`FailingAssert` is what
    a failed :meth:`transform` returns: every operation on it is a no-op.
    """

    def __init__(
        self,
        name: str | None,
        context: AssertContext,
        display_with: DisplayWith | None = None,
    ):
        self.name = name
        self.context = context
        self.display_with = display_with

    # --- rendering ---

    def display(self, value: Any) -> str:
        return render(value, self.display_with, self.context.config)

    def show(self, value: Any, wrap: str = "<>") -> str:
        return f"{wrap[0]}{self.display(value)}{wrap[1]}"

    def append_name(self, segment: str, separator: str = "") -> str:
        if not self.name:
            return segment
        return f"{self.name}{separator}{segment}"

    # --- failure primitives ---

    def expected(
        self, message: str, expected: Any = MISSING, actual: Any = MISSING
    ) -> NoReturn:
        """Raise a failure reading ``expected [name] <message> (origin)``."""
        name = f" [{self.name}]" if self.name else ""
        space = "" if message.startswith(":") else " "
        origin = (
            f" ({self.context.display_origin()})" if self.context.has_origin else ""
        )
        raise AssertionFailure(
            f"expected{name}{space}{message}{origin}", expected=expected, actual=actual
        )

    def fail_with(self, expected: Any, actual: Any) -> NoReturn:
        """Raise an equality failure, highlighting where the two values differ."""
        expected_text = self.display(expected)
        actual_text = self.display(actual)
        if expected is None or actual is None or expected_text == actual_text:
            self.expected(f":<{expected_text}> but was:<{actual_text}>", expected, actual)
        expected_text, actual_text = compact_diff(
            expected_text, actual_text, self.context.config.diff_context
        )
        self.expected(f":<{expected_text}> but was:<{actual_text}>", expected, actual)

    # --- chaining ---

    @abstractmethod
    def given(self, accessor: Callable[[T], Any]) -> Assert[T]:
        """Run a check against the subject."""
        ...

    @abstractmethod
    def transform(
        self, mapper: Callable[[T], R], name: str | None = MISSING
    ) -> Assert[R]:
        """Derive an assertion on a value computed from the subject."""
        ...

    @abstractmethod
    def assert_that(
        self,
        value: R,
        name: str | None = MISSING,
        display_with: DisplayWith | None = MISSING,
    ) -> Assert[R]:
        """Start a child assertion in this assertion's context."""
        ...

    @abstractmethod
    def all(
        self,
        body: Callable[[Assert[T]], Any],
        message: str | None = None,
        fail_if: FailIf | None = None,
    ) -> Assert[T]:
        """Run ``body`` as an aggregation boundary."""
        ...

    def prop(self, name: str, extract: Callable[[T], R]) -> Assert[R]:
        """Assert on a property of the subject, naming it ``parent.name``."""
        return self.transform(extract, name=self.append_name(name, "."))


class ValueAssert(Assert[T]):
    """An assertion on a live subject."""

    def __init__(
        self,
        value: T,
        name: str | None,
        context: AssertContext,
        display_with: DisplayWith | None = None,
    ):
        super().__init__(name, context, display_with)
        self.value = value

    def __repr__(self) -> str:
        return f"ValueAssert({self.display(self.value)}, name={self.name!r})"

    def given(self, accessor: Callable[[T], Any]) -> Assert[T]:
        """Run ``accessor`` on the subject; a raised failure goes to the handler."""
        try:
            accessor(self.value)
        except AssertionFailure as error:
            self.context.failures.fail(error)
        return self

    def transform(
        self, mapper: Callable[[T], R], name: str | None = MISSING
    ) -> Assert[R]:
        """Assert on ``mapper(subject)``.

        If ``mapper`` fails, the failure is reported and an inert assertion
        is returned so the rest of the chain is skipped.
        """
        name = self.name if name is MISSING else name
        try:
            value = mapper(self.value)
        except AssertionFailure as error:
            self.context.failures.fail(error)
            logger.debug(f"Transform failed, skipping chained checks: {error.message}")
            return FailingAssert(error, name, self.context, self.display_with)
        return self.assert_that(value, name=name)

    def assert_that(
        self,
        value: R,
        name: str | None = MISSING,
        display_with: DisplayWith | None = MISSING,
    ) -> Assert[R]:
        """Start a child assertion inheriting this one's name and display."""
        name = self.name if name is MISSING else name
        display_with = self.display_with if display_with is MISSING else display_with
        context = self.context
        if not context.has_origin:
            context = replace(context, origin=self.value, origin_display=self.display_with)
        return ValueAssert(value, name, context, display_with)

    def all(
        self,
        body: Callable[[Assert[T]], Any],
        message: str | None = None,
        fail_if: FailIf | None = None,
    ) -> Assert[T]:
        """Run ``body`` as an aggregation boundary around this subject.

        ``body`` receives a copy of this assertion that records into the new
        boundary. ``fail_if`` sees the failures recorded in the boundary and
        decides whether a combined failure is reported.
        """

        def run(collector: FailureCollector) -> None:
            scoped = ValueAssert(
                self.value,
                self.name,
                replace(self.context, failures=collector),
                self.display_with,
            )
            body(scoped)

        run_boundary(
            self.context.failures,
            run,
            message=message,
            fail_if=fail_if,
            config=self.context.config,
        )
        return self


class FailingAssert(Assert[T]):
    """An assertion whose subject could not be produced. Every operation is a no-op."""

    def __init__(
        self,
        error: AssertionFailure,
        name: str | None,
        context: AssertContext,
        display_with: DisplayWith | None = None,
    ):
        super().__init__(name, context, display_with)
        self.error = error

    def __repr__(self) -> str:
        return f"FailingAssert({self.error.message!r}, name={self.name!r})"

    def given(self, accessor: Callable[[T], Any]) -> Assert[T]:
        return self

    def transform(
        self, mapper: Callable[[T], R], name: str | None = MISSING
    ) -> Assert[R]:
        name = self.name if name is MISSING else name
        return FailingAssert(self.error, name, self.context, self.display_with)

    def assert_that(
        self,
        value: R,
        name: str | None = MISSING,
        display_with: DisplayWith | None = MISSING,
    ) -> Assert[R]:
        name = self.name if name is MISSING else name
        display_with = self.display_with if display_with is MISSING else display_with
        return FailingAssert(self.error, name, self.context, display_with)

    def all(
        self,
        body: Callable[[Assert[T]], Any],
        message: str | None = None,
        fail_if: FailIf | None = None,
    ) -> Assert[T]:
        return self


def assert_that(
    subject: T,
    name: str | None = None,
    display_with: DisplayWith | None = None,
    config: AssertConfig | None = None,
) -> Assert[T]:
    """Wrap ``subject`` in an assertion that fails fast.

    Args:
        subject: The value under test.
        name: Label prefixed to failure messages, e.g. ``"user.email"``.
        display_with: Renders values in failure messages instead of the
            default display. Inherited by derived assertions.
        config: Rendering settings, inherited by derived assertions.
    """
    context = AssertContext(RaisingFailures(), config or DEFAULT_CONFIG)
    return ValueAssert(subject, name, context, display_with)


def fail(message: str, expected: Any = MISSING, actual: Any = MISSING) -> NoReturn:
    """Fail the current check with ``message``."""
    raise AssertionFailure(message, expected=expected, actual=actual)


class SoftAssertions:
    """Handle for one soft-assertion block.

    Assertions started through :meth:`assert_that` record their failures in
    the block instead of raising, so every failure of the block is reported
    together when it ends.
    """

    def __init__(self, collector: FailureCollector, config: AssertConfig):
        self._collector = collector
        self.config = config

    @property
    def failures(self) -> list[AssertionFailure]:
        """Failures recorded so far in this block."""
        return self._collector.failures

    def assert_that(
        self,
        subject: T,
        name: str | None = None,
        display_with: DisplayWith | None = None,
    ) -> Assert[T]:
        context = AssertContext(self._collector, self.config)
        return ValueAssert(subject, name, context, display_with)

    def fail(self, message: str) -> None:
        """Record a failure without leaving the block."""
        self._collector.fail(AssertionFailure(message))

    def assert_all(
        self, message: str | None = None, *, fail_if: FailIf | None = None
    ) -> AbstractContextManager[SoftAssertions]:
        """Open a nested block that reports into this one."""
        return _soft_block(self._collector, message, fail_if, self.config)


@contextmanager
def _soft_block(
    parent: Failures,
    message: str | None,
    fail_if: FailIf | None,
    config: AssertConfig,
) -> Iterator[SoftAssertions]:
    collector = FailureCollector()
    try:
        yield SoftAssertions(collector, config)
    except AssertionFailure as error:
        collector.fail(error)
    collector.report(parent, message=message, fail_if=fail_if, config=config)


def assert_all(
    message: str | None = None,
    *,
    fail_if: FailIf | None = None,
    config: AssertConfig | None = None,
) -> AbstractContextManager[SoftAssertions]:
    """Collect every failure of a ``with`` block and raise them together.

    Example:
        >>> with assert_all() as soft:
        ...     soft.assert_that(user.name).is_equal_to("Sue")
        ...     soft.assert_that(user.age).is_greater_than(18)

    With a single failure and no ``message`` that failure is raised as is;
    otherwise a :class:`~assertkit.failure.MultipleFailuresError` lists them
    all in the order they happened.
    """
    return _soft_block(RaisingFailures(), message, fail_if, config or DEFAULT_CONFIG)


def aggregate(
    body: Callable[[SoftAssertions], Any],
    message: str | None = None,
    fail_if: FailIf | None = None,
    config: AssertConfig | None = None,
) -> None:
    """Functional form of :func:`assert_all`: run ``body`` as one soft block."""
    config = config or DEFAULT_CONFIG
    run_boundary(
        RaisingFailures(),
        lambda collector: body(SoftAssertions(collector, config)),
        message=message,
        fail_if=fail_if,
        config=config,
    )
