"""A small dense matrix of floats with the operations a tiny network needs."""

from __future__ import annotations

import random
from typing import Callable, Iterable, Sequence


class Matrix:
    """A rows x cols matrix of floats, zero-initialised."""

    def __init__(self, rows: int, cols: int) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"matrix dimensions must be non-negative, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        self.data: list[list[float]] = [[0.0] * cols for _ in range(rows)]

    @classmethod
    def from_list(cls, values: Iterable[float]) -> Matrix:
        """Build a 1 x n row matrix from a flat sequence of numbers."""
        return cls.from_rows([list(values)])

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """Build a matrix from a sequence of equally long rows."""
        rows = [list(row) for row in rows]
        width = len(rows[0]) if rows else 0
        if any(len(row) != width for row in rows):
            raise ValueError("all rows must have the same length")
        matrix = cls(len(rows), width)
        matrix.data = [[float(value) for value in row] for row in rows]
        return matrix

    @property
    def shape(self) -> tuple[int, int]:
        return self.rows, self.cols

    def to_list(self) -> list[float]:
        """Return all values flattened in row-major order."""
        return [value for row in self.data for value in row]

    def copy(self) -> Matrix:
        return Matrix.from_rows(self.data) if self.rows else Matrix(0, self.cols)

    def scale(self, scalar: float) -> None:
        """Multiply every element by ``scalar`` in place."""
        self.map(lambda value: value * scalar)

    def randomize(self, low: float, high: float, rng: random.Random | None = None) -> None:
        """Fill with uniform random values between ``low`` and ``high``."""
        rng = rng or random.Random()
        self.data = [
            [low + rng.random() * (high - low) for _ in range(self.cols)]
            for _ in range(self.rows)
        ]

    def add_scalar(self, number: float) -> None:
        """Add ``number`` to every element in place."""
        self.map(lambda value: value + number)

    def _check_same_shape(self, other: Matrix) -> None:
        if self.shape != other.shape:
            raise ValueError(f"shape mismatch: {self.shape} vs {other.shape}")

    def add(self, other: Matrix) -> None:
        """Add ``other`` element-wise in place."""
        self._check_same_shape(other)
        self.data = [
            [a + b for a, b in zip(row, other_row)]
            for row, other_row in zip(self.data, other.data)
        ]

    def subtract(self, other: Matrix) -> Matrix:
        """Return a new matrix holding ``self - other`` element-wise."""
        self._check_same_shape(other)
        return Matrix.from_rows(
            [[a - b for a, b in zip(row, other_row)] for row, other_row in zip(self.data, other.data)]
        )

    def hadamard(self, other: Matrix) -> None:
        """Multiply by ``other`` element-wise in place."""
        self._check_same_shape(other)
        self.data = [
            [a * b for a, b in zip(row, other_row)]
            for row, other_row in zip(self.data, other.data)
        ]

    def matmul(self, other: Matrix) -> Matrix:
        """Return the matrix product ``self @ other``."""
        if self.cols != other.rows:
            raise ValueError(f"cannot multiply {self.shape} by {other.shape}")
        columns = list(zip(*other.data)) if other.rows else [()] * other.cols
        result = Matrix(self.rows, other.cols)
        result.data = [
            [sum((a * b for a, b in zip(row, column)), 0.0) for column in columns]
            for row in self.data
        ]
        return result

    def __matmul__(self, other: Matrix) -> Matrix:
        return self.matmul(other)

    def transpose(self) -> Matrix:
        """Return a new matrix with rows and columns swapped."""
        result = Matrix(self.cols, self.rows)
        result.data = [list(column) for column in zip(*self.data)] if self.rows else []
        return result

    def map(self, func: Callable[[float], float]) -> None:
        """Apply ``func`` to every element in place."""
        self.data = [[func(value) for value in row] for row in self.data]

    def mapped(self, func: Callable[[float], float]) -> Matrix:
        """Return a new matrix with ``func`` applied to every element."""
        result = self.copy()
        result.map(func)
        return result

    def format(self) -> str:
        """Render one line per row, each value followed by a space."""
        return "".join(
            "".join(f"{value:g} " for value in row) + "\n" for row in self.data
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self.data == other.data

    def __repr__(self) -> str:
        return f"Matrix({self.rows}, {self.cols}, data={self.data!r})"