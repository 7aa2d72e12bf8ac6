"""Dense row-major matrices of floats, sized for a small neural network."""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable, Iterator, Sequence


class Matrix:
    """A rows x cols matrix stored as a flat, row-major list of floats."""

    __slots__ = ("rows", "cols", "data")

    def __init__(self, rows: int, cols: int, data: Iterable[float] | None = None) -> None:
        if rows < 0 or cols < 0:
            raise ValueError(f"matrix dimensions must be non-negative, got {rows}x{cols}")
        self.rows = rows
        self.cols = cols
        if data is None:
            self.data = [0.0] * (rows * cols)
        else:
            self.data = [float(v) for v in data]
            if len(self.data) != rows * cols:
                raise ValueError(
                    f"expected {rows * cols} values for a {rows}x{cols} matrix, "
                    f"got {len(self.data)}"
                )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> Matrix:
        """Build a matrix from a sequence of equally long rows."""
        height = len(rows)
        width = len(rows[0]) if height else 0
        if any(len(row) != width for row in rows):
            raise ValueError("all rows must have the same length")
        return cls(height, width, (v for row in rows for v in row))

    @classmethod
    def column(cls, values: Iterable[float]) -> Matrix:
        """Build an n x 1 column vector."""
        flat = [float(v) for v in values]
        return cls(len(flat), 1, flat)

    @property
    def shape(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    def _offset(self, key: int | tuple[int, int]) -> int:
        if isinstance(key, tuple):
            row, col = key
            if not (0 <= row < self.rows and 0 <= col < self.cols):
                raise IndexError(f"index {key} out of range for {self.rows}x{self.cols} matrix")
            return row * self.cols + col
        size = len(self.data)
        if not -size <= key < size:
            raise IndexError(f"index {key} out of range for matrix of {size} elements")
        return key % size

    def __getitem__(self, key: int | tuple[int, int]) -> float:
        return self.data[self._offset(key)]

    def __setitem__(self, key: int | tuple[int, int], value: float) -> None:
        self.data[self._offset(key)] = float(value)

    def __iter__(self) -> Iterator[float]:
        return iter(self.data)

    def __len__(self) -> int:
        return len(self.data)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self.data == other.data

    def __repr__(self) -> str:
        return f"Matrix({self.rows}, {self.cols}, {self.data!r})"

    def fill(self, value: float) -> None:
        """Set every element to ``value``."""
        self.data = [float(value)] * len(self.data)

    def randomize(
        self, low: float, high: float, rng: random.Random | None = None
    ) -> None:
        """Fill with values drawn uniformly from [low, high]."""
        draw = (rng or random).uniform
        self.data = [draw(low, high) for _ in self.data]

    def _row(self, i: int) -> list[float]:
        return self.data[i * self.cols:(i + 1) * self.cols]

    def dot(self, other: Matrix) -> Matrix:
        """Matrix product ``self @ other``."""
        if self.cols != other.rows:
            raise ValueError(
                f"cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}"
            )
        other_cols = [other.data[j::other.cols] for j in range(other.cols)] if other.cols else []
        result = [
            sum(a * b for a, b in zip(self._row(i), col))
            for i in range(self.rows)
            for col in other_cols
        ]
        return Matrix(self.rows, other.cols, result)

    def __matmul__(self, other: Matrix) -> Matrix:
        return self.dot(other)

    def _check_same_shape(self, other: Matrix) -> None:
        if self.shape != other.shape:
            raise ValueError(
                f"shape mismatch: {self.rows}x{self.cols} vs {other.rows}x{other.cols}"
            )

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(self.rows, self.cols, (a + b for a, b in zip(self.data, other.data)))

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other)
        return Matrix(self.rows, self.cols, (a - b for a, b in zip(self.data, other.data)))

    def transpose(self) -> Matrix:
        """Return a new matrix with rows and columns swapped."""
        if not self.cols:
            return Matrix(0, self.rows)
        return Matrix(
            self.cols,
            self.rows,
            (v for j in range(self.cols) for v in self.data[j::self.cols]),
        )

    def apply(self, func: Callable[[float], float]) -> None:
        """Replace every element ``v`` with ``func(v)`` in place."""
        self.data = [float(func(v)) for v in self.data]

    def format(self) -> str:
        """Render the matrix one row per line, each value as ``%6.3f``."""
        return "".join(
            "".join(f"{v:6.3f} " for v in self._row(i)) + "\n" for i in range(self.rows)
        )

    def __str__(self) -> str:
        return self.format()