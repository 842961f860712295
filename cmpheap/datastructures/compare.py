"""Ready-made comparison functions for `Heap`.

A comparison function takes two items and returns a negative number, zero
or a positive number when the first item comes before, ties with or comes
after the second one.
"""

from __future__ import annotations
from typing import Any, Callable, Optional, TypeVar

from .ordering import CompareFn

T = TypeVar("T")
K = TypeVar("K")


def ascending(a: Any, b: Any) -> int:
    """Natural order of the items (smallest first)."""
    return (a > b) - (a < b)


def descending(a: Any, b: Any) -> int:
    """Reverse natural order (largest first)."""
    return (b > a) - (b < a)


def by_key(key: Callable[[T], K], reverse: bool = False) -> CompareFn[T]:
    """Compare items by `key(item)`; useful when the items are not comparable."""
    order = descending if reverse else ascending

    def compare(a: T, b: T) -> int:
        return order(key(a), key(b))

    return compare


def none_last(compare: CompareFn[T]) -> CompareFn[Optional[T]]:
    """Wrap `compare` so None ranks after every other item."""

    def wrapped(a: Optional[T], b: Optional[T]) -> int:
        if a is None or b is None:
            return (a is None) - (b is None)
        return compare(a, b)

    return wrapped
