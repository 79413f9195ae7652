from typing import TypeVar, Callable

T = TypeVar("T")
Comparator = Callable[[T, T], int]
Nanoseconds = int
