"""String and grid puzzles: anagrams, brackets, subsequences, sudoku and unions."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

_PAIRS = {")": "(", "]": "[", "}": "{"}


def are_anagrams(first: str, second: str) -> bool:
    """Whether the two strings hold the same characters the same number of times."""
    return len(first) == len(second) and sorted(first) == sorted(second)


def reverse_string(text: str) -> str:
    """``text`` with its characters in reverse order."""
    return text[::-1]


def is_palindrome(word: str) -> bool:
    """Whether ``word`` reads the same backwards."""
    return word == word[::-1]


def brackets_match(expression: str) -> bool:
    """Whether every ``()``, ``[]`` and ``{}`` in ``expression`` is properly paired."""
    stack = []
    for char in expression:
        if char in "([{":
            stack.append(char)
        elif char in _PAIRS:
            if not stack or stack.pop() != _PAIRS[char]:
                return False
    return not stack


def lcs_length(first: str, second: str) -> int:
    """Length of the longest common subsequence of two strings."""
    previous = [0] * (len(second) + 1)
    for char in first:
        current = [0]
        for j, other in enumerate(second):
            if char == other:
                current.append(previous[j] + 1)
            else:
                current.append(max(current[j], previous[j + 1]))
        previous = current
    return previous[-1]


def reverse_madness(
    text: str,
    lefts: Sequence[int],
    rights: Sequence[int],
    queries: Iterable[int],
) -> str:
    """Apply mirror reversals to a string split into segments.

    The segments ``[lefts[i], rights[i]]`` (1-based, inclusive) partition
    ``text``. A query ``x`` reverses, inside the segment holding ``x``, the
    stretch between ``x`` and its mirror position in that segment.
    """
    if len(lefts) != len(rights):
        raise ValueError("lefts and rights must have the same length")
    flips = [0] * (len(text) + 1)
    for position in queries:
        if not 1 <= position <= len(text):
            raise ValueError(f"query {position} is outside 1..{len(text)}")
        flips[position - 1] += 1
    pieces = []
    for left, right in zip(lefts, rights):
        low, high = left - 1, right - 1
        if not 0 <= low <= high < len(text):
            raise ValueError(f"segment [{left}, {right}] is outside the text")
        segment = list(text[low : high + 1])
        parity = 0
        for j in range(low, (low + high) // 2 + 1):
            parity += flips[j] + flips[high - j + low]
            if parity % 2:
                a, b = j - low, high - j
                segment[a], segment[b] = segment[b], segment[a]
        pieces.append("".join(segment))
    return "".join(pieces)


def is_valid_sudoku(board: Sequence[Sequence[str]]) -> bool:
    """Whether the filled cells of a 9 x 9 board break no sudoku rule; ``.`` is empty."""
    seen = set()
    for i, row in enumerate(board):
        for j, cell in enumerate(row):
            if cell == ".":
                continue
            keys = (("row", i, cell), ("column", j, cell), ("block", i // 3, j // 3, cell))
            if any(key in seen for key in keys):
                return False
            seen.update(keys)
    return True


def largest_partial_union(sets: Sequence[Iterable[int]]) -> int:
    """Size of the largest union of some of the sets that differs from the union of all.

    Returns 0 when no such union exists.
    """
    groups = [set(group) for group in sets]
    everything = set().union(*groups)
    best = 0
    for value in everything:
        partial = set().union(*(group for group in groups if value not in group))
        if len(partial) != len(everything):
            best = max(best, len(partial))
    return best