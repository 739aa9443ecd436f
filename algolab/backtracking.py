"""Exhaustive search and recursion puzzles: queens, knights, towers and codes."""

from __future__ import annotations

import itertools
from collections.abc import Iterable, Iterator, Sequence
from typing import Hashable, Optional

_KNIGHT_MOVES = ((-2, 1), (-1, 2), (1, 2), (2, 1), (2, -1), (1, -2), (-1, -2), (-2, -1))


def count_queen_placements(board: Sequence[str]) -> int:
    """Ways to place one queen per row so that no two attack each other.

    ``board`` is a square of strings where ``.`` is a free square and any
    other character is a square a queen may not stand on.
    """
    size = len(board)
    if any(len(row) != size for row in board):
        raise ValueError("count_queen_placements() needs a square board")
    count = 0
    for columns in itertools.permutations(range(size)):
        if any(board[row][col] != "." for row, col in enumerate(columns)):
            continue
        if len({row + col for row, col in enumerate(columns)}) != size:
            continue
        if len({row - col for row, col in enumerate(columns)}) != size:
            continue
        count += 1
    return count


def solve_n_queens(n: int) -> Optional[list[list[int]]]:
    """First placement of ``n`` non-attacking queens, filled column by column.

    Returns an ``n`` x ``n`` grid with 1 where a queen stands, or ``None``
    when no placement exists.
    """
    if n < 0:
        raise ValueError("n must not be negative")
    board = [[0] * n for _ in range(n)]
    rows: set[int] = set()
    sums: set[int] = set()
    diffs: set[int] = set()

    def place(col: int) -> bool:
        if col >= n:
            return True
        for row in range(n):
            if row in rows or row + col in sums or row - col in diffs:
                continue
            rows.add(row)
            sums.add(row + col)
            diffs.add(row - col)
            board[row][col] = 1
            if place(col + 1):
                return True
            board[row][col] = 0
            rows.discard(row)
            sums.discard(row + col)
            diffs.discard(row - col)
        return False

    return board if place(0) else None


def knight_tour(size: int = 8) -> Optional[list[list[int]]]:
    """A knight's tour from the top-left corner found by plain backtracking.

    Returns the board with the move number (from 1) on every square, or
    ``None`` when no tour starts from the corner.
    """
    if size < 1:
        raise ValueError("size must be at least 1")
    board = [[0] * size for _ in range(size)]
    last = size * size

    def visit(row: int, col: int, move: int) -> bool:
        board[row][col] = move
        if move == last:
            return True
        for d_row, d_col in _KNIGHT_MOVES:
            new_row, new_col = row + d_row, col + d_col
            if (
                0 <= new_row < size
                and 0 <= new_col < size
                and board[new_row][new_col] == 0
                and visit(new_row, new_col, move + 1)
            ):
                return True
        board[row][col] = 0
        return False

    return board if visit(0, 0, 1) else None


def subset_sum(values: Iterable[int], total: int) -> bool:
    """Whether some subset of the non-negative ``values`` adds up to ``total``."""
    items = list(values)
    if total < 0 or any(value < 0 for value in items):
        raise ValueError("subset_sum() handles non-negative numbers only")
    reachable = {0}
    for value in items:
        if total in reachable:
            return True
        reachable |= {s + value for s in reachable if s + value <= total}
    return total in reachable


def hanoi_moves(
    disks: int,
    source: Hashable = "A",
    target: Hashable = "C",
    auxiliary: Hashable = "B",
) -> list[tuple[int, Hashable, Hashable]]:
    """Moves that carry ``disks`` disks from ``source`` to ``target``.

    Each move is ``(disk, from_rod, to_rod)`` with disk 1 the smallest.
    """
    if disks < 0:
        raise ValueError("disks must not be negative")
    moves: list[tuple[int, Hashable, Hashable]] = []

    def carry(n: int, start: Hashable, end: Hashable, spare: Hashable) -> None:
        if n == 0:
            return
        carry(n - 1, start, spare, end)
        moves.append((n, start, end))
        carry(n - 1, spare, end, start)

    carry(disks, source, target, auxiliary)
    return moves


def gray_code(bits: int) -> list[str]:
    """Reflected binary Gray code of the given width, as bit strings."""
    if bits < 1:
        raise ValueError("bits must be at least 1")
    codes = ["0", "1"]
    for _ in range(bits - 1):
        codes = ["0" + code for code in codes] + ["1" + code for code in reversed(codes)]
    return codes


def swap_permutations(text: str) -> Iterator[str]:
    """All arrangements of ``text``, in the order produced by swap-and-recurse."""
    chars = list(text)
    last = len(chars) - 1

    def arrange(start: int) -> Iterator[str]:
        if start >= last:
            yield "".join(chars)
            return
        for pick in range(start, last + 1):
            chars[start], chars[pick] = chars[pick], chars[start]
            yield from arrange(start + 1)
            chars[start], chars[pick] = chars[pick], chars[start]

    yield from arrange(0)


def expand_wildcards(pattern: str) -> list[str]:
    """Every string made by replacing each ``?`` with ``0`` or ``1``, 0 first."""
    choices = [("0", "1") if char == "?" else (char,) for char in pattern]
    return ["".join(combo) for combo in itertools.product(*choices)]


def count_with_consecutive_ones(length: int) -> int:
    """Number of binary strings of ``length`` that contain two adjacent 1s."""
    if length < 0:
        raise ValueError("length must not be negative")
    ending_zero, ending_one = 1, 0
    for _ in range(length):
        ending_zero, ending_one = ending_zero + ending_one, ending_zero
    without = ending_zero + ending_one if length else 1
    return 2**length - without