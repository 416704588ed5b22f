"""Assertions on iterables.

Each check materializes the subject at most once, so one-shot iterators and
generators work as subjects. Infinite iterators never finish: bound them
(e.g. with ``itertools.islice``) before asserting.

Quantified checks (:meth:`~SequenceAssertions.each`, ``any``, ``none``,
``at_least``, ``at_most``, ``exactly``) run the given function on an assertion
for every element, inside an aggregation boundary. An element passes when it
adds no failure to that boundary.

Example:
    >>> assert_that(people).extracting(lambda p: p.name).contains_all("Sue", "Bob")
    >>> assert_that([-1, 1, 2]).at_least(2, lambda item: item.is_positive())
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from assertkit.display import list_diff, show
from assertkit.failure import AssertionFailure

if TYPE_CHECKING:
    from assertkit.core import Assert

ElementCheck = Callable[["Assert"], Any]


@dataclass
class _Tally:
    """Per-call counters for a quantified check."""

    items: int = 0
    passed: int = 0
    passed_items: list[tuple[int, Any]] = field(default_factory=list)


class _LazyMap:
    """Re-iterable lazy projection of an iterable."""

    def __init__(self, source: Iterable[Any], project: Callable[[Any], Any]):
        self._source = source
        self._project = project

    def __iter__(self) -> Iterator[Any]:
        return (self._project(item) for item in self._source)


def _check_elements(
    scoped: Assert, items: Iterable[Any], f: ElementCheck, tally: _Tally
) -> None:
    """Run ``f`` on a child assertion per element, counting the ones that pass.

    ``scoped`` must be bound to a boundary collector. An element passes when
    the collector did not grow while ``f`` ran on it.
    """
    collector = scoped.context.failures
    for index, item in enumerate(items):
        before = len(collector)
        try:
            f(scoped.assert_that(item, name=scoped.append_name(show(index, "[]"))))
        except AssertionFailure as error:
            collector.fail(error)
        tally.items += 1
        if len(collector) == before:
            tally.passed += 1
            tally.passed_items.append((index, item))


class SequenceAssertions:
    # --- membership ---

    def contains(self: Assert, element: Any) -> Assert:
        def check(actual: Iterable[Any]) -> None:
            actual_list = list(actual)
            if element in actual_list:
                return
            self.expected(f"to contain:{self.show(element)} but was:{self.show(actual_list)}")

        return self.given(check)

    def does_not_contain(self: Assert, element: Any) -> Assert:
        def check(actual: Iterable[Any]) -> None:
            actual_list = list(actual)
            if element not in actual_list:
                return
            self.expected(
                f"to not contain:{self.show(element)} but was:{self.show(actual_list)}"
            )

        return self.given(check)

    def contains_none(self: Assert, *elements: Any) -> Assert:
        def check(actual: Iterable[Any]) -> None:
            actual_list = list(actual)
            not_expected = [e for e in elements if e in actual_list]
            if not not_expected:
                return
            self.expected(
                f"to contain none of:{self.show(list(elements))} but was:{self.show(actual_list)}"
                f"\n elements not expected:{self.show(not_expected)}"
            )

        return self.given(check)

    def contains_all(self: Assert, *elements: Any) -> Assert:
        """Every element is present, in any order; extra elements are allowed."""

        def check(actual: Iterable[Any]) -> None:
            actual_list = list(actual)
            not_found = [e for e in elements if e not in actual_list]
            if not not_found:
                return
            self.expected(
                f"to contain all:{self.show(list(elements))} but was:{self.show(actual_list)}"
                f"\n elements not found:{self.show(not_found)}"
            )

        return self.given(check)

    def contains_only(self: Assert, *elements: Any) -> Assert:
        """Same distinct values on both sides, in any order; duplicates are ignored.

        ``[1, 2, 2]`` contains only ``(2, 1)`` and ``[1, 2]`` contains only
        ``(2, 2, 1)``.
        """

        def check(actual: Iterable[Any]) -> None:
            actual_list = list(actual)
            not_in_actual = [e for e in elements if e not in actual_list]
            not_in_expected = [a for a in actual_list if a not in elements]
            if not not_in_actual and not not_in_expected:
                return
            self.expected(
                f"to contain only:{self.show(list(elements))} but was:{self.show(actual_list)}"
                + _leftovers(self, not_in_actual, not_in_expected)
            )

        return self.given(check)

    def contains_exactly(self: Assert, *elements: Any) -> Assert:
        """Same elements in the same order, with nothing extra."""

        def check(actual: Iterable[Any]) -> None:
            actual_list = list(actual)
            expected_list = list(elements)
            if actual_list == expected_list:
                return
            lines = [
                f"to contain exactly:{self.show(expected_list)} but was:{self.show(actual_list)}"
            ]
            for kind, index, value in list_diff(expected_list, actual_list):
                lines.append(f" at index:{index} {kind}:{self.show(value)}")
            self.expected("\n".join(lines))

        return self.given(check)

    def contains_exactly_in_any_order(self: Assert, *elements: Any) -> Assert:
        """Equal as multisets: each expected element consumes one equal actual element."""

        def check(actual: Iterable[Any]) -> None:
            actual_list = list(actual)
            not_in_actual = list(elements)
            not_in_expected = list(actual_list)
            for element in elements:
                if element in not_in_expected:
                    not_in_expected.remove(element)
                    not_in_actual.remove(element)
            if not not_in_actual and not not_in_expected:
                return
            self.expected(
                f"to contain exactly in any order:{self.show(list(elements))}"
                f" but was:{self.show(actual_list)}"
                + _leftovers(self, not_in_actual, not_in_expected)
            )

        return self.given(check)

    def is_empty(self: Assert) -> Assert:
        def check(actual: Iterable[Any]) -> None:
            actual_list = list(actual)
            if not actual_list:
                return
            self.expected(f"to be empty but was:{self.show(actual_list)}")

        return self.given(check)

    def is_not_empty(self: Assert) -> Assert:
        def check(actual: Iterable[Any]) -> None:
            for _ in actual:
                return
            self.expected("to not be empty")

        return self.given(check)

    # --- projections ---

    def extracting(
        self: Assert,
        f1: Callable[[Any], Any],
        f2: Callable[[Any], Any] | None = None,
        f3: Callable[[Any], Any] | None = None,
    ) -> Assert:
        """Assert on the values extracted from each element.

        With one function the elements become single values, with two they
        become pairs and with three triples::

            assert_that(people).extracting(name, age).contains(("Sue", 20))
        """
        if f2 is None:
            project = f1
        elif f3 is None:
            project = lambda item: (f1(item), f2(item))  # noqa: E731
        else:
            project = lambda item: (f1(item), f2(item), f3(item))  # noqa: E731
        return self.transform(lambda actual: _LazyMap(actual, project))

    # --- quantified checks ---

    def each(self: Assert, f: ElementCheck) -> Assert:
        """Run ``f`` on every element and report every failing element."""
        tally = _Tally()
        return self.all(lambda scoped: _check_elements(scoped, scoped.value, f, tally))

    def none(self: Assert, f: ElementCheck) -> Assert:
        """Pass when no element passes ``f``. An empty subject passes.

        A failure names every element that passed.
        """

        def check(actual: Iterable[Any]) -> None:
            tally = _count_passes(self, list(actual), f)
            if not tally.passed:
                return
            self.expected("none to pass" + _passed_lines(self, tally))

        return self.given(check)

    def at_least(self: Assert, times: int, f: ElementCheck) -> Assert:
        tally = _Tally()
        return self.all(
            lambda scoped: _check_elements(scoped, scoped.value, f, tally),
            message=f"expected to pass at least {times} times",
            fail_if=lambda failures: tally.passed < times,
        )

    def at_most(self: Assert, times: int, f: ElementCheck) -> Assert:
        """Pass when at most ``times`` elements pass; a failure names the ones that did."""

        def check(actual: Iterable[Any]) -> None:
            tally = _count_passes(self, list(actual), f)
            if tally.passed <= times:
                return
            self.expected(
                f"to pass at most {times} times but passed {tally.passed} times"
                + _passed_lines(self, tally)
            )

        return self.given(check)

    def exactly(self: Assert, times: int, f: ElementCheck) -> Assert:
        """Pass when exactly ``times`` elements pass.

        Too few passes report the failing elements, too many name the passing ones.
        """

        def check(actual: Iterable[Any]) -> None:
            items = list(actual)
            tally = _Tally()
            self.all(
                lambda scoped: _check_elements(scoped, items, f, tally),
                message=f"expected to pass exactly {times} times",
                fail_if=lambda failures: tally.passed < times,
            )
            if tally.passed <= times:
                return
            self.expected(
                f"to pass exactly {times} times but passed {tally.passed} times"
                + _passed_lines(self, tally)
            )

        return self.given(check)

    def any(self: Assert, f: ElementCheck) -> Assert:
        """Pass when at least one element passes ``f``.

        ``f`` still runs on every element after one has passed.
        """
        tally = _Tally()
        return self.all(
            lambda scoped: _check_elements(scoped, scoped.value, f, tally),
            message="expected any item to pass",
            fail_if=lambda failures: tally.passed == 0,
        )


def _count_passes(owner: Assert, items: list[Any], f: ElementCheck) -> _Tally:
    """Run ``f`` on every element, dropping the failures of elements that fail it."""
    tally = _Tally()
    owner.all(
        lambda scoped: _check_elements(scoped, items, f, tally),
        fail_if=lambda failures: False,
    )
    return tally


def _passed_lines(owner: Assert, tally: _Tally) -> str:
    return "".join(
        f"\n at index:{index} passed:{owner.show(item)}"
        for index, item in tally.passed_items
    )


def _leftovers(
    owner: Assert, not_in_actual: list[Any], not_in_expected: list[Any]
) -> str:
    text = ""
    if not_in_actual:
        text += f"\n elements not found:{owner.show(not_in_actual)}"
    if not_in_expected:
        text += f"\n extra elements found:{owner.show(not_in_expected)}"
    return text
