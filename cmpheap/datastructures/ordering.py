from typing import Callable, TypeVar

T = TypeVar("T")

# Negative: first argument comes first. Zero: tie. Positive: second comes first.
CompareFn = Callable[[T, T], int]
