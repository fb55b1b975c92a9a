"""dlinkedlist - Generic doubly-linked list with positional access and in-place sort."""

from dlinkedlist.errors import LinkedListError, ListIndexError
from dlinkedlist.linkedlist import DoublyLinkedList, Node
from dlinkedlist.types import NOT_PRESENT, Comparator, List, Predicate

__version__ = "0.0.1"

__all__ = [
    "DoublyLinkedList",
    "Node",
    "List",
    "Predicate",
    "Comparator",
    "NOT_PRESENT",
    "LinkedListError",
    "ListIndexError",
]
