"""Dense matrices of floats with addition, subtraction and multiplication."""

from __future__ import annotations

from collections.abc import Iterable, Sequence


class Matrix:
    """A matrix with a declared shape and row-major data."""

    __slots__ = ("rows", "cols", "data")

    def __init__(self, rows: int, cols: int, data: Iterable[Sequence[float]]) -> None:
        self.rows = rows
        self.cols = cols
        self.data = [[float(value) for value in row] for row in data]

    def __repr__(self) -> str:
        return f"Matrix(rows={self.rows}, cols={self.cols}, data={self.data!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return (self.rows, self.cols, self.data) == (other.rows, other.cols, other.data)

    def check(self) -> bool:
        """Return True if the data matches the declared number of rows and columns."""
        return len(self.data) == self.rows and all(len(row) == self.cols for row in self.data)

    def _require_same_shape(self, other: Matrix) -> None:
        if (self.rows, self.cols) != (other.rows, other.cols):
            raise ValueError(
                f"shape mismatch: {self.rows}x{self.cols} and {other.rows}x{other.cols}"
            )

    def __add__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other)
        data = [[a + b for a, b in zip(r1, r2)] for r1, r2 in zip(self.data, other.data)]
        return Matrix(self.rows, self.cols, data)

    def __sub__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._require_same_shape(other)
        data = [[a - b for a, b in zip(r1, r2)] for r1, r2 in zip(self.data, other.data)]
        return Matrix(self.rows, self.cols, data)

    def __mul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        if self.cols != other.rows:
            raise ValueError(
                f"cannot multiply {self.rows}x{self.cols} by {other.rows}x{other.cols}"
            )
        columns = [[other.data[k][j] for k in range(other.rows)] for j in range(other.cols)]
        data = [
            [sum((a * b for a, b in zip(row[: self.cols], column)), 0.0) for column in columns]
            for row in self.data[: self.rows]
        ]
        return Matrix(self.rows, other.cols, data)