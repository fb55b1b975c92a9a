"""Type definitions for dlinkedlist."""

from collections.abc import Callable
from typing import Protocol, TypeAlias, TypeVar

# Generic element type
T = TypeVar("T")

# Callables supplied by the caller
Predicate: TypeAlias = Callable[[T], bool]
Comparator: TypeAlias = Callable[[T, T], int]

# Returned by index searches when no element matches
NOT_PRESENT = -1


class List(Protocol[T]):
    """Positional list operations implemented by DoublyLinkedList."""

    def append(self, value: T) -> None: ...

    def insert_at(self, index: int, value: T) -> bool: ...

    def size(self) -> int: ...

    def get(self, index: int) -> T | None: ...

    def remove_at(self, index: int) -> T | None: ...

    def index_of(self, predicate: Predicate[T]) -> int: ...

    def last_index_of(self, predicate: Predicate[T]) -> int: ...

    def remove_if(self, predicate: Predicate[T]) -> bool: ...

    def sort(self, comparator: Comparator[T]) -> None: ...

    def sorted_search(self, pattern: T, comparator: Comparator[T]) -> int: ...

    def clear(self) -> None: ...
