"""Doubly-linked list with positional access, predicate search and in-place sort."""

import logging
import weakref
from collections.abc import Iterable, Iterator
from functools import cmp_to_key
from typing import Generic

from dlinkedlist.errors import ListIndexError
from dlinkedlist.types import NOT_PRESENT, Comparator, Predicate, T

logger = logging.getLogger(__name__)


class Node(Generic[T]):
    """
    A node in the doubly-linked list.

    ``next`` holds the following node. ``prev`` is kept as a weak reference,
    so the forward chain is the only strong path from the list to its nodes.
    """

    __slots__ = ("value", "next", "_prev_ref", "__weakref__")

    def __init__(self, value: T) -> None:
        self.value = value
        self.next: Node[T] | None = None
        self._prev_ref: weakref.ref[Node[T]] | None = None

    @property
    def prev(self) -> "Node[T] | None":
        """Return the previous node, or None at the head or once it is gone."""
        if self._prev_ref is None:
            return None
        return self._prev_ref()

    @prev.setter
    def prev(self, node: "Node[T] | None") -> None:
        """Point the weak back-link at node."""
        self._prev_ref = weakref.ref(node) if node is not None else None


class DoublyLinkedList(Generic[T]):
    """
    Doubly-linked list with positional access and caller-supplied ordering.

    Out-of-range positions are reported through return values rather than
    exceptions: ``None`` from get()/remove_at(), ``NOT_PRESENT`` from the
    index searches and ``False`` from insert_at(). Only the subscript
    operator raises.
    """

    def __init__(self, values: Iterable[T] | None = None) -> None:
        """
        Initialize the list.

        Args:
            values: Optional initial values, appended in iteration order.
        """
        self._head: Node[T] | None = None
        self._tail: Node[T] | None = None
        self._size = 0
        if values is not None:
            for value in values:
                self.append(value)

    def append(self, value: T) -> None:
        """Append value to the end of the list. O(1)."""
        node = Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            self._tail.next = node
            node.prev = self._tail
            self._tail = node
        self._size += 1

    def insert_at(self, index: int, value: T) -> bool:
        """
        Insert value so that it ends up at the given position.

        Inserting at 0 or at size() is O(1); any other position is O(N).

        Args:
            index: Target position, 0 <= index <= size()
            value: Value to insert

        Returns:
            True if inserted, False if index is out of range (list unchanged)
        """
        if index == self._size:
            self.append(value)
            return True
        if not self._is_valid_index(index):
            return False

        node = Node(value)
        if index == 0:
            self._link_head(node)
        else:
            self._link_before(node, self._locate(index))
        self._size += 1
        return True

    def size(self) -> int:
        """Return the number of elements. O(1)."""
        return self._size

    def get(self, index: int) -> T | None:
        """
        Return the value at a zero-based position. O(N).

        Returns:
            The value, or None if index is outside [0, size())
        """
        node = self._node_at(index)
        return node.value if node is not None else None

    def remove_at(self, index: int) -> T | None:
        """
        Remove the element at a zero-based position. O(N).

        Returns:
            The removed value, or None if index is outside [0, size())
        """
        node = self._node_at(index)
        if node is None:
            return None
        self._unlink(node)
        return node.value

    def index_of(self, predicate: Predicate[T]) -> int:
        """Return the position of the first match, or NOT_PRESENT. O(N)."""
        index = 0
        node = self._head
        while node is not None:
            if predicate(node.value):
                return index
            node = node.next
            index += 1
        return NOT_PRESENT

    def last_index_of(self, predicate: Predicate[T]) -> int:
        """Return the position of the last match, or NOT_PRESENT. O(N)."""
        index = self._size - 1
        node = self._tail
        while node is not None:
            if predicate(node.value):
                return index
            node = node.prev
            index -= 1
        return NOT_PRESENT

    def remove_if(self, predicate: Predicate[T]) -> bool:
        """
        Remove every element matching predicate in a single forward pass. O(N).

        Returns:
            True if at least one element was removed
        """
        old_size = self._size
        node = self._head
        while node is not None:
            # Unlinking clears node.next, so take the successor first
            following = node.next
            if predicate(node.value):
                self._unlink(node)
            node = following

        removed = old_size - self._size
        if removed:
            logger.debug("remove_if dropped %d of %d elements", removed, old_size)
        return removed > 0

    def sort(self, comparator: Comparator[T]) -> None:
        """
        Sort the values in place. O(N log N).

        Values are sorted in a temporary buffer and written back into the
        existing nodes; node identities and links are left untouched. The
        sort is stable.

        Args:
            comparator: Returns a negative, zero or positive int when its
                first argument orders before, equal to or after the second
        """
        values = [node.value for node in self._nodes()]
        values.sort(key=cmp_to_key(comparator))
        for node, value in zip(self._nodes(), values):
            node.value = value
        logger.debug("Sorted %d elements", self._size)

    def sorted_search(self, pattern: T, comparator: Comparator[T]) -> int:
        """
        Find pattern in a list already sorted by comparator.

        This is a linear scan from the head, not a binary search.

        Args:
            pattern: Value to look for
            comparator: The ordering the list is sorted by

        Returns:
            The position of an equal element, or -(insertion_point + 1) if
            there is none, where insertion_point is where pattern would go
        """
        insertion_point = 0
        node = self._head
        while node is not None:
            result = comparator(pattern, node.value)
            if result == 0:
                return insertion_point
            if result < 0:
                return -(insertion_point + 1)
            insertion_point += 1
            node = node.next
        return -(self._size + 1)

    def clear(self) -> None:
        """Remove all elements. O(1)."""
        logger.debug("Clearing %d elements", self._size)
        self._head = self._tail = None
        self._size = 0

    def to_list(self) -> list[T]:
        """Return the values as a Python list, head first."""
        return list(self)

    def __len__(self) -> int:
        """Return the number of elements in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0

    def __iter__(self) -> Iterator[T]:
        """Iterate over values from head to tail."""
        for node in self._nodes():
            yield node.value

    def __reversed__(self) -> Iterator[T]:
        """Iterate over values from tail to head."""
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __getitem__(self, index: int) -> T:
        """
        Return the value at index, counting from the end when negative.

        Raises:
            ListIndexError: If index is out of range
        """
        position = index + self._size if index < 0 else index
        node = self._node_at(position)
        if node is None:
            raise ListIndexError(f"list index {index} out of range for size {self._size}")
        return node.value

    def __contains__(self, value: object) -> bool:
        """Return True if an element equals value."""
        return self.index_of(lambda item: item == value) != NOT_PRESENT

    def __eq__(self, other: object) -> bool:
        """Compare with another list element by element."""
        if not isinstance(other, DoublyLinkedList):
            return NotImplemented
        return len(self) == len(other) and all(a == b for a, b in zip(self, other))

    def __repr__(self) -> str:
        """Return a repr listing the values in order."""
        return f"{type(self).__name__}({self.to_list()!r})"

    def _is_valid_index(self, index: int) -> bool:
        """Return True if index addresses an existing element."""
        return 0 <= index < self._size

    def _node_at(self, index: int) -> Node[T] | None:
        """Return the node at index, or None if index is out of range. O(N)."""
        if not self._is_valid_index(index):
            return None
        return self._locate(index)

    def _locate(self, index: int) -> Node[T]:
        """Walk to a valid index from whichever end is closer."""
        node: Node[T] | None
        if index <= self._size // 2:
            position = 0
            node = self._head
            while node is not None and position != index:
                node = node.next
                position += 1
        else:
            position = self._size - 1
            node = self._tail
            while node is not None and position != index:
                node = node.prev
                position -= 1
        if node is None:
            raise RuntimeError(f"List linkage is inconsistent with size {self._size}")
        return node

    def _nodes(self) -> Iterator[Node[T]]:
        """Iterate over nodes from head to tail."""
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def _link_head(self, node: Node[T]) -> None:
        """Link node in front of the current head. Caller adjusts size."""
        node.next = self._head
        if self._head is not None:
            self._head.prev = node
        self._head = node

    def _link_before(self, node: Node[T], after: Node[T]) -> None:
        """Splice node between after and its predecessor. Caller adjusts size."""
        before = after.prev
        node.next = after
        node.prev = before
        if before is not None:
            before.next = node
        after.prev = node

    def _unlink(self, node: Node[T]) -> None:
        """Remove a linked node from the chain and decrement size. O(1)."""
        if self._head is self._tail:
            self._head = self._tail = None
        elif node is self._head:
            self._head = node.next
            if self._head is not None:
                self._head.prev = None
        elif node is self._tail:
            self._tail = node.prev
            if self._tail is not None:
                self._tail.next = None
        else:
            before = node.prev
            after = node.next
            if before is not None:
                before.next = after
            if after is not None:
                after.prev = before
        node.prev = None
        node.next = None
        self._size -= 1
