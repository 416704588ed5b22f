"""Assertion families mixed into :class:`assertkit.core.Assert`."""

from assertkit.assertions.any import AnyAssertions
from assertkit.assertions.number import NumberAssertions
from assertkit.assertions.sequence import SequenceAssertions

__all__ = ["AnyAssertions", "NumberAssertions", "SequenceAssertions"]
