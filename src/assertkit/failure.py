"""Failure types, failure handlers and the aggregating block runner.

A failure handler decides what happens when an assertion fails:

- :class:`RaisingFailures` is used when no aggregation boundary is active and
  raises the failure straight away.
- :class:`FailureCollector` belongs to one aggregation boundary and records
  failures so the rest of the block keeps running.

:func:`run_boundary` runs a block under a fresh collector and reports a single
combined failure to the enclosing handler once the block is done.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from typing import Any, Protocol

from assertkit.config import DEFAULT_CONFIG, AssertConfig

logger = logging.getLogger(__name__)


class _Missing:
    """Sentinel for an expected/actual value that was not supplied."""

    __slots__ = ()

    def __repr__(self) -> str:
        return "<MISSING>"


MISSING: Any = _Missing()


class AssertionFailure(AssertionError):
    """An expected condition was not met.

    Attributes:
        message: Human-readable description of the failure.
        expected: The expected value, when the check compared two values.
        actual: The actual value, when the check compared two values.
    """

    def __init__(self, message: str, expected: Any = MISSING, actual: Any = MISSING):
        super().__init__(message)
        self.message = message
        self.expected = expected
        self.actual = actual

    def __str__(self) -> str:
        return self.message


class MultipleFailuresError(AssertionFailure):
    """Several failures collected in one aggregation boundary."""

    def __init__(
        self,
        heading: str,
        failures: Sequence[AssertionFailure],
        config: AssertConfig = DEFAULT_CONFIG,
    ):
        self.heading = heading
        self.failures = list(failures)
        super().__init__(_format_report(heading, self.failures, config.indent))


def _format_report(heading: str, failures: list[AssertionFailure], indent: str) -> str:
    if not failures:
        return heading
    noun = "failure" if len(failures) == 1 else "failures"
    lines = [f"{heading} ({len(failures)} {noun})"]
    for number, failure in enumerate(failures, start=1):
        body = failure.message.replace("\n", "\n" + indent)
        lines.append(f"{indent}{number}) {body}")
    return "\n".join(lines)


class Failures(Protocol):
    """Handler that receives assertion failures."""

    def fail(self, error: AssertionFailure) -> None: ...


class RaisingFailures:
    """Handler used outside of any aggregation boundary: fail fast."""

    def fail(self, error: AssertionFailure) -> None:
        raise error


class FailureCollector:
    """Ordered failures recorded within a single aggregation boundary.

    A collector is closed once its boundary has reported; it must not be
    reused afterwards.
    """

    def __init__(self) -> None:
        self._failures: list[AssertionFailure] = []
        self.closed = False

    def fail(self, error: AssertionFailure) -> None:
        if self.closed:
            raise RuntimeError(
                f"Failure collector is closed, cannot record: {error.message}"
            )
        logger.debug(f"Collected failure #{len(self._failures) + 1}: {error.message}")
        self._failures.append(error)

    @property
    def failures(self) -> list[AssertionFailure]:
        return list(self._failures)

    def __len__(self) -> int:
        return len(self._failures)

    def report(
        self,
        parent: Failures,
        *,
        message: str | None = None,
        fail_if: Callable[[list[AssertionFailure]], bool] | None = None,
        config: AssertConfig = DEFAULT_CONFIG,
    ) -> None:
        """Close the boundary and pass a combined failure to ``parent`` if needed.

        ``fail_if`` receives the failures recorded in this boundary and
        defaults to "at least one failure". When it returns false the
        failures are dropped and never reach ``parent``.
        """
        failures = self.failures
        self.closed = True
        self._failures.clear()

        should_fail = fail_if(failures) if fail_if is not None else bool(failures)
        if not should_fail:
            if failures:
                logger.debug(f"Boundary passed, dropping {len(failures)} failure(s)")
            return

        logger.debug(f"Boundary failed with {len(failures)} failure(s)")
        parent.fail(combine_failures(failures, message, config))


def combine_failures(
    failures: Sequence[AssertionFailure],
    message: str | None = None,
    config: AssertConfig = DEFAULT_CONFIG,
) -> AssertionFailure:
    """Merge the failures of one boundary into the single error it reports."""
    if len(failures) == 1 and message is None:
        return failures[0]
    return MultipleFailuresError(message or config.heading, failures, config)


def run_boundary(
    parent: Failures,
    body: Callable[[FailureCollector], Any],
    *,
    message: str | None = None,
    fail_if: Callable[[list[AssertionFailure]], bool] | None = None,
    config: AssertConfig = DEFAULT_CONFIG,
) -> None:
    """Run ``body`` under a new collector, then report to ``parent``.

    An :class:`AssertionFailure` escaping ``body`` is recorded and ends the
    body early. Any other exception propagates untouched.
    """
    collector = FailureCollector()
    try:
        body(collector)
    except AssertionFailure as error:
        collector.fail(error)
    collector.report(parent, message=message, fail_if=fail_if, config=config)
