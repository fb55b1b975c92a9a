"""Shared assertions for list linkage tests."""

from typing import Any

from dlinkedlist import DoublyLinkedList


def assert_linked(lst: DoublyLinkedList[Any]) -> None:
    """Check that head/tail, size and every prev/next link agree."""
    head = lst._head
    tail = lst._tail
    if lst.size() == 0:
        assert head is None
        assert tail is None
        return

    assert head is not None and tail is not None
    assert head.prev is None
    assert tail.next is None

    forward = []
    node = head
    while node is not None:
        if node.next is not None:
            assert node.next.prev is node
        forward.append(node)
        node = node.next

    backward = []
    node = tail
    while node is not None:
        if node.prev is not None:
            assert node.prev.next is node
        backward.append(node)
        node = node.prev

    assert len(forward) == lst.size()
    assert backward[::-1] == forward
