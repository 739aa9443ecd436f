"""Singly and doubly linked lists, and a bit string kept in a doubly linked list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    next: Optional["_Node"] = None


@dataclass(eq=False)
class _DoubleNode:
    value: Any
    prev: Optional["_DoubleNode"] = None
    next: Optional["_DoubleNode"] = None


class LinkedList:
    """A singly linked list that grows at the tail."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: Any) -> None:
        """Add ``value`` at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def remove(self, value: Any) -> bool:
        """Unlink the first node equal to ``value``; return whether one was found."""
        previous: Optional[_Node] = None
        node = self._head
        while node is not None and node.value != value:
            previous, node = node, node.next
        if node is None:
            return False
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        if node is self._tail:
            self._tail = previous
        self._size -= 1
        return True

    def clear(self) -> None:
        """Drop every node."""
        self._head = self._tail = None
        self._size = 0

    def __contains__(self, value: Any) -> bool:
        return any(item == value for item in self)

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"


class DoublyLinkedList:
    """A doubly linked list with positional insertion and deletion.

    Positions are 0-based indexes.
    """

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._head: Optional[_DoubleNode] = None
        self._tail: Optional[_DoubleNode] = None
        self._size = 0
        for value in values:
            self.append(value)

    def push_front(self, value: Any) -> None:
        """Add ``value`` before the first node."""
        node = _DoubleNode(value, next=self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node
        self._size += 1

    def append(self, value: Any) -> None:
        """Add ``value`` after the last node."""
        node = _DoubleNode(value, prev=self._tail)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def _node_at(self, position: int) -> _DoubleNode:
        node = self._head
        for _ in range(position):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert(self, value: Any, position: int) -> None:
        """Insert ``value`` so that it ends up at index ``position`` (0 to len)."""
        if not 0 <= position <= self._size:
            raise IndexError(f"invalid position {position}")
        if position == 0:
            self.push_front(value)
            return
        if position == self._size:
            self.append(value)
            return
        after = self._node_at(position)
        before = after.prev
        assert before is not None
        node = _DoubleNode(value, prev=before, next=after)
        before.next = node
        after.prev = node
        self._size += 1

    def pop_front(self) -> Any:
        """Remove the first node and return its value."""
        if self._head is None:
            raise IndexError("the list is empty")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return node.value

    def delete_at(self, position: int) -> Any:
        """Remove the node at index ``position`` and return its value."""
        if not 0 <= position < self._size:
            raise IndexError(f"invalid position {position}")
        if position == 0:
            return self.pop_front()
        node = self._node_at(position)
        assert node.prev is not None
        node.prev.next = node.next
        if node.next is None:
            self._tail = node.prev
        else:
            node.next.prev = node.prev
        self._size -= 1
        return node.value

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[Any]:
        node = self._tail
        while node is not None:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"


class BitList:
    """A binary number held bit by bit, most significant bit first."""

    def __init__(self, bits: Iterable[Any] = ()) -> None:
        self._bits = DoublyLinkedList()
        for bit in bits:
            self.append(int(bit) if isinstance(bit, str) and bit in "01" else bit)

    def append(self, bit: int) -> None:
        """Add a bit (0 or 1) after the current least significant bit."""
        if bit not in (0, 1):
            raise ValueError(f"not a binary bit: {bit!r}")
        self._bits.append(int(bit))

    def ones_complement(self) -> str:
        """Every bit inverted."""
        return "".join(str(1 - bit) for bit in self._bits)

    def twos_complement(self) -> str:
        """The two's complement at the same width."""
        result = []
        seen_one = False
        for bit in reversed(self._bits):
            if seen_one:
                result.append(1 - bit)
            else:
                result.append(bit)
                seen_one = bit == 1
        return "".join(str(bit) for bit in reversed(result))

    def __iter__(self) -> Iterator[int]:
        return iter(self._bits)

    def __len__(self) -> int:
        return len(self._bits)

    def __str__(self) -> str:
        return "".join(str(bit) for bit in self._bits)

    def __repr__(self) -> str:
        return f"BitList({str(self)!r})"