from .datastructures import (
    CompareFn,
    Heap,
    ascending,
    by_key,
    descending,
    none_last,
)

__version__ = "0.1.0"

__all__ = [
    "CompareFn",
    "Heap",
    "ascending",
    "descending",
    "by_key",
    "none_last",
]
