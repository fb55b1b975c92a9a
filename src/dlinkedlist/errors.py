"""Exception classes for dlinkedlist."""


class LinkedListError(Exception):
    """Base exception for all dlinkedlist errors."""


class ListIndexError(LinkedListError, IndexError):
    """Raised when subscripting a list with an index outside its bounds."""
