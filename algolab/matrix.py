"""An immutable numeric matrix supporting element-wise addition."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

MAX_SIZE = 100
"""Largest number of rows or columns a matrix may have."""


class Matrix:
    """A rectangular grid of numbers of at most 100 x 100."""

    def __init__(self, rows: Iterable[Iterable[Any]]) -> None:
        data = tuple(tuple(row) for row in rows)
        columns = len(data[0]) if data else 0
        if any(len(row) != columns for row in data):
            raise ValueError("all rows must have the same length")
        if len(data) > MAX_SIZE or columns > MAX_SIZE:
            raise ValueError(f"a matrix may have at most {MAX_SIZE} rows and columns")
        self._data = data
        self._columns = columns

    @classmethod
    def zeros(cls, rows: int, columns: int) -> "Matrix":
        """A matrix of the given shape filled with 0."""
        return cls([[0] * columns for _ in range(rows)])

    @property
    def rows(self) -> int:
        return len(self._data)

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.columns

    def __getitem__(self, index: int) -> tuple:
        return self._data[index]

    def __iter__(self) -> Iterator[tuple]:
        return iter(self._data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    def __hash__(self) -> int:
        return hash((self.shape, self._data))

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.shape != other.shape:
            raise ValueError("matrices of different shapes cannot be added")
        return Matrix(
            [a + b for a, b in zip(mine, theirs)] for mine, theirs in zip(self, other)
        )

    def __str__(self) -> str:
        return "".join("".join(f"{value} " for value in row) + "\n" for row in self._data)

    def __repr__(self) -> str:
        return f"Matrix({[list(row) for row in self._data]!r})"