from __future__ import annotations
import logging
from typing import Callable, Generic, Iterable, Iterator, List, Optional, TypeVar

from .compare import by_key as key_compare
from .ordering import CompareFn

T = TypeVar("T")
K = TypeVar("K")

logger = logging.getLogger(__name__)


# -----------------------------
# Index arithmetic
# -----------------------------
def parent(idx: int) -> int:
    return (idx - 1) // 2


def child_left(idx: int) -> int:
    return idx * 2 + 1


def child_right(idx: int) -> int:
    return idx * 2 + 2


class Heap(Generic[T]):
    """A binary heap ordered by a caller-supplied comparison function.

    `compare(a, b)` returns a negative number when `a` comes first, zero
    when both rank the same and a positive number when `b` comes first.
    The smallest item under `compare` sits at the root.

    Implementation notes
    --------------------
    • Storage is a plain list read as a complete binary tree.
    • `pop`, `peek` and `remove` return None when there is nothing to
      return. None is also a legal item, so check `len()` if you store it.
    • Iterating does not consume the heap (a clone is drained instead);
      use `consume()` to drain the heap itself.
    """

    __slots__ = ("_compare", "_data")

    def __init__(self, compare: CompareFn[T]) -> None:
        self._compare = compare
        self._data: List[T] = []

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _sift_up(self, idx: int) -> None:
        data, compare = self._data, self._compare
        while idx > 0:
            p = parent(idx)
            if compare(data[p], data[idx]) <= 0:
                break
            data[p], data[idx] = data[idx], data[p]
            idx = p

    def _sift_down(self, idx: int) -> None:
        data, compare = self._data, self._compare
        n = len(data)
        non_leaf_count = n // 2
        while idx < non_leaf_count:
            left = child_left(idx)
            right = child_right(idx)
            child = left
            if right < n and compare(data[left], data[right]) > 0:
                child = right
            if compare(data[idx], data[child]) <= 0:
                break
            data[idx], data[child] = data[child], data[idx]
            idx = child

    def _heapify(self) -> None:
        """Restore the heap property over the whole list in O(n) time."""
        for i in range(parent(len(self._data) - 1), -1, -1):
            self._sift_down(i)

    # -----------------------------
    # Construction
    # -----------------------------
    @classmethod
    def from_iterable(cls, it: Iterable[T], compare: CompareFn[T]) -> "Heap[T]":
        """Build a heap from any finite iterable in O(n).

        The items are copied into a fresh list; `it` itself is never touched.
        """
        heap = cls(compare)
        heap._data = list(it)
        heap._heapify()
        logger.debug("built heap of %d items", len(heap._data))
        return heap

    @classmethod
    def by_key(
        cls, key: Callable[[T], K], it: Iterable[T] = (), reverse: bool = False
    ) -> "Heap[T]":
        """Build a heap ordered by `key(item)` (largest first if `reverse`)."""
        return cls.from_iterable(it, key_compare(key, reverse=reverse))

    def clone(self) -> "Heap[T]":
        """Independent copy sharing the comparator (items are not copied)."""
        heap = type(self)(self._compare)
        heap._data = list(self._data)
        return heap

    __copy__ = clone

    # -----------------------------
    # Public API
    # -----------------------------
    @property
    def compare(self) -> CompareFn[T]:
        return self._compare

    def push(self, item: T) -> None:
        """Push item onto the heap (O(log n))."""
        self._data.append(item)
        self._sift_up(len(self._data) - 1)

    def pop(self) -> Optional[T]:
        """Pop and return the smallest item, or None if empty (O(log n))."""
        data = self._data
        if len(data) < 2:
            return data.pop() if data else None
        top = data[0]
        data[0] = data.pop()
        self._sift_down(0)
        return top

    def peek(self) -> Optional[T]:
        """Return the smallest item without removing it (O(1))."""
        return self._data[0] if self._data else None

    def pushpop(self, item: T) -> T:
        """Push item then pop the smallest, in a single O(log n) operation.

        If `item` would come out first anyway the heap is left untouched.
        """
        data = self._data
        if not data or self._compare(data[0], item) > 0:
            return item
        top = data[0]
        data[0] = item
        self._sift_down(0)
        return top

    def replace(self, item: T) -> T:
        """Pop the smallest item, then push `item` (O(log n)).

        The heap must not be empty.
        """
        data = self._data
        if not data:
            raise IndexError("replace on empty heap")
        top = data[0]
        data[0] = item
        self._sift_down(0)
        return top

    def remove(self, predicate: Callable[[T], bool]) -> Optional[T]:
        """Remove and return the first stored item matching `predicate`.

        Items are scanned in storage order, not sorted order. Returns None
        when nothing matches. O(n) scan plus O(log n) fix-up.
        """
        data = self._data
        for idx, item in enumerate(data):
            if predicate(item):
                break
        else:
            return None

        last = data.pop()
        if idx == len(data):
            return last
        data[idx] = last
        self._sift_down(idx)
        # The moved item came from another subtree and may rank below its new parent.
        self._sift_up(idx)
        return item

    def reorder(self, compare: Optional[CompareFn[T]] = None) -> None:
        """Switch to a new comparator and re-heapify in O(n).

        With no argument the current comparator is kept, which repairs the
        heap after stored items were mutated in place.
        """
        if compare is not None:
            self._compare = compare
        self._heapify()
        logger.debug("reordered heap of %d items", len(self._data))

    def consume(self) -> Iterator[T]:
        """Yield items in sorted order by popping this heap.

        Stopping early leaves the remaining items in a valid heap.
        """
        while self._data:
            yield self.pop()  # type: ignore[misc]

    def __iter__(self) -> Iterator[T]:
        # Sorted order, drained from a clone so the heap stays intact.
        return self.clone().consume()

    def __len__(self) -> int:
        return len(self._data)

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return bool(self._data)

    def to_list(self) -> List[T]:
        """Items in storage (heap) order."""
        return list(self._data)

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"Heap({self._data!r})"
