"""Rendering of arbitrary values for failure messages."""

from __future__ import annotations

import difflib
from collections.abc import Callable, Mapping, Sequence, Set
from typing import Any, Protocol, runtime_checkable

from assertkit.config import DEFAULT_CONFIG, AssertConfig

ELLIPSIS = "..."

# Largest LCS table built for lists of unhashable elements
MAX_DIFF_CELLS = 1_000_000


@runtime_checkable
class Displayable(Protocol):
    """A value that knows how to render itself in failure messages."""

    def __display__(self) -> str: ...


def display(value: Any, config: AssertConfig = DEFAULT_CONFIG) -> str:
    """Render ``value`` without surrounding brackets.

    Never raises: a value whose own rendering blows up is shown as
    ``ClassName object`` instead.
    """
    try:
        return _display(value, config)
    except Exception:
        return f"{type(value).__name__} object"


def _display(value: Any, config: AssertConfig) -> str:
    if value is None:
        return config.none_token
    # classes defining __display__ match the protocol but cannot be called unbound
    if isinstance(value, Displayable) and not isinstance(value, type):
        return value.__display__()
    if isinstance(value, str):
        return f"{config.quote}{value}{config.quote}"
    if isinstance(value, (bytes, bytearray)):
        return repr(value)
    if isinstance(value, Mapping):
        items = ", ".join(
            f"{_display(k, config)}={_display(v, config)}" for k, v in value.items()
        )
        return "{" + items + "}"
    if isinstance(value, tuple):
        if hasattr(value, "_fields"):
            return repr(value)
        items = ", ".join(_display(v, config) for v in value)
        trailing = "," if len(value) == 1 else ""
        return f"({items}{trailing})"
    if isinstance(value, Set):
        # set iteration order depends on hashing, sort for stable output
        return "[" + ", ".join(sorted(_display(v, config) for v in value)) + "]"
    if isinstance(value, Sequence):
        return "[" + ", ".join(_display(v, config) for v in value) + "]"
    return repr(value)


def show(value: Any, wrap: str = "<>", config: AssertConfig = DEFAULT_CONFIG) -> str:
    """Render ``value`` inside the bracket pair ``wrap``, e.g. ``<1>`` or ``[0]``."""
    return f"{wrap[0]}{display(value, config)}{wrap[1]}"


def render(
    value: Any,
    display_with: Callable[[Any], str] | None = None,
    config: AssertConfig = DEFAULT_CONFIG,
) -> str:
    """Render ``value`` through a custom display function, falling back to :func:`display`."""
    if display_with is None:
        return display(value, config)
    try:
        return str(display_with(value))
    except Exception:
        return display(value, config)


def compact_diff(expected: str, actual: str, context: int = 20) -> tuple[str, str]:
    """Highlight where two rendered values differ.

    The differing middle parts are wrapped in ``[]`` and the shared prefix and
    suffix are trimmed to ``context`` characters::

        >>> compact_diff("test1", "test0")
        ('test[1]', 'test[0]')
    """
    limit = min(len(expected), len(actual))

    prefix = 0
    while prefix < limit and expected[prefix] == actual[prefix]:
        prefix += 1

    suffix = 0
    while (
        suffix < limit - prefix
        and expected[len(expected) - 1 - suffix] == actual[len(actual) - 1 - suffix]
    ):
        suffix += 1

    head = expected[max(0, prefix - context) : prefix]
    if prefix > context:
        head = ELLIPSIS + head

    tail = expected[len(expected) - suffix :][:context]
    if suffix > context:
        tail = tail + ELLIPSIS

    expected_mid = expected[prefix : len(expected) - suffix]
    actual_mid = actual[prefix : len(actual) - suffix]
    return f"{head}[{expected_mid}]{tail}", f"{head}[{actual_mid}]{tail}"


def list_diff(expected: list[Any], actual: list[Any]) -> list[tuple[str, int, Any]]:
    """Return the edits turning ``expected`` into ``actual``.

    Each edit is ``("expected", index, value)`` for an element missing from
    ``actual`` (indexed into ``expected``) or ``("unexpected", index, value)``
    for an extra element (indexed into ``actual``). Elements only need to
    support ``==``.
    """
    try:
        matcher = difflib.SequenceMatcher(None, expected, actual, autojunk=False)
        opcodes = matcher.get_opcodes()
    except TypeError:
        # unhashable elements
        return _lcs_diff(expected, actual)

    edits: list[tuple[str, int, Any]] = []
    for tag, i1, i2, j1, j2 in opcodes:
        if tag == "equal":
            continue
        edits.extend(("expected", i, expected[i]) for i in range(i1, i2))
        edits.extend(("unexpected", j, actual[j]) for j in range(j1, j2))
    return edits


def _lcs_diff(expected: list[Any], actual: list[Any]) -> list[tuple[str, int, Any]]:
    n, m = len(expected), len(actual)
    if n * m > MAX_DIFF_CELLS:
        return _positional_diff(expected, actual)

    # lcs[i][j] is the longest common subsequence of expected[i:] and actual[j:]
    lcs = [[0] * (m + 1) for _ in range(n + 1)]
    for i in range(n - 1, -1, -1):
        for j in range(m - 1, -1, -1):
            if expected[i] == actual[j]:
                lcs[i][j] = lcs[i + 1][j + 1] + 1
            else:
                lcs[i][j] = max(lcs[i + 1][j], lcs[i][j + 1])

    edits: list[tuple[str, int, Any]] = []
    i = j = 0
    while i < n and j < m:
        if expected[i] == actual[j]:
            i += 1
            j += 1
        elif lcs[i + 1][j] >= lcs[i][j + 1]:
            edits.append(("expected", i, expected[i]))
            i += 1
        else:
            edits.append(("unexpected", j, actual[j]))
            j += 1
    edits.extend(("expected", k, expected[k]) for k in range(i, n))
    edits.extend(("unexpected", k, actual[k]) for k in range(j, m))
    return edits


def _positional_diff(
    expected: list[Any], actual: list[Any]
) -> list[tuple[str, int, Any]]:
    """Index-aligned comparison, used when an LCS table would be too large."""
    edits: list[tuple[str, int, Any]] = []
    for index in range(max(len(expected), len(actual))):
        if index < len(expected) and index < len(actual):
            if expected[index] == actual[index]:
                continue
            edits.append(("expected", index, expected[index]))
            edits.append(("unexpected", index, actual[index]))
        elif index < len(expected):
            edits.append(("expected", index, expected[index]))
        else:
            edits.append(("unexpected", index, actual[index]))
    return edits
