"""Treaps, flattening a binary tree to a list, and Huffman codes."""

from __future__ import annotations

import heapq
import itertools
from collections.abc import Hashable, Iterator, Sequence
from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=False)
class TreapNode:
    """A node of a :class:`Treap`."""

    key: Any
    priority: Any
    left: Optional["TreapNode"] = None
    right: Optional["TreapNode"] = None


def _rotate_right(node: TreapNode) -> TreapNode:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    return pivot


def _rotate_left(node: TreapNode) -> TreapNode:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    return pivot


class Treap:
    """A binary search tree on keys that is a max-heap on priorities.

    Keys equal to a node's key go into its left subtree.
    """

    def __init__(self) -> None:
        self.root: Optional[TreapNode] = None
        self._size = 0

    def insert(self, key: Any, priority: Any) -> None:
        """Add ``key`` with the given ``priority``."""
        self.root = self._insert(self.root, key, priority)
        self._size += 1

    def _insert(self, node: Optional[TreapNode], key: Any, priority: Any) -> TreapNode:
        if node is None:
            return TreapNode(key, priority)
        if key <= node.key:
            node.left = self._insert(node.left, key, priority)
            if node.left.priority > node.priority:
                node = _rotate_right(node)
        else:
            node.right = self._insert(node.right, key, priority)
            if node.right.priority > node.priority:
                node = _rotate_left(node)
        return node

    def __iter__(self) -> Iterator[tuple[Any, Any]]:
        """``(key, priority)`` pairs in ascending key order."""
        stack: list[TreapNode] = []
        node = self.root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.key, node.priority
            node = node.right

    def __len__(self) -> int:
        return self._size


@dataclass(eq=False)
class TreeNode:
    """A binary tree node."""

    val: Any
    left: Optional["TreeNode"] = None
    right: Optional["TreeNode"] = None


def flatten(root: Optional[TreeNode]) -> None:
    """Rearrange the tree in place into a right-leaning chain in preorder."""
    node = root
    while node is not None:
        if node.left is not None:
            tail = node.left
            while tail.right is not None:
                tail = tail.right
            tail.right = node.right
            node.right = node.left
            node.left = None
        node = node.right


@dataclass(eq=False)
class _HuffmanNode:
    weight: Any
    symbol: Any = None
    left: Optional["_HuffmanNode"] = None
    right: Optional["_HuffmanNode"] = None


def huffman_codes(symbols: Sequence[Hashable], frequencies: Sequence[Any]) -> dict:
    """Huffman code of every symbol, listed left branch first.

    A lone symbol gets the empty code.
    """
    if len(symbols) != len(frequencies):
        raise ValueError("symbols and frequencies must have the same length")
    if not symbols:
        raise ValueError("huffman_codes() needs at least one symbol")
    if len(set(symbols)) != len(symbols):
        raise ValueError("symbols must be distinct")
    order = itertools.count()
    heap = [
        (frequency, next(order), _HuffmanNode(frequency, symbol))
        for symbol, frequency in zip(symbols, frequencies)
    ]
    heapq.heapify(heap)
    while len(heap) > 1:
        left_weight, _, left = heapq.heappop(heap)
        right_weight, _, right = heapq.heappop(heap)
        weight = left_weight + right_weight
        heapq.heappush(heap, (weight, next(order), _HuffmanNode(weight, left=left, right=right)))
    codes: dict = {}
    stack = [(heap[0][2], "")]
    while stack:
        node, code = stack.pop()
        if node.left is None and node.right is None:
            codes[node.symbol] = code
            continue
        if node.right is not None:
            stack.append((node.right, code + "1"))
        if node.left is not None:
            stack.append((node.left, code + "0"))
    return codes