"""Side effects on arbitrary values inside an expression."""

from __future__ import annotations

from typing import Callable, TypeVar

T = TypeVar("T")


def tap(value: T, action: Callable[[T], object]) -> T:
    """Run action on value and return value unchanged.

    Example:
        >>> seen = []
        >>> tap(3, seen.append) + 1
        4
        >>> seen
        [3]
    """
    action(value)
    return value
