from .ordering import CompareFn
from .heap import Heap, child_left, child_right, parent
from .compare import ascending, by_key, descending, none_last

__all__ = [
    "CompareFn",
    "Heap",
    "parent",
    "child_left",
    "child_right",
    "ascending",
    "descending",
    "by_key",
    "none_last",
]
