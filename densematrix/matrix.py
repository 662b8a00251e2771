import numbers
from dataclasses import dataclass
from typing import Iterable, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from densematrix import config
from densematrix.errors import DimensionMismatch, InvalidDimension, NotSquare, OutOfBounds
from densematrix.util import contains, unit_sequence


class Size(NamedTuple):
    rows: int
    columns: int


def _check_dimensions(*dims: int) -> None:
    for d in dims:
        if d < 0:
            raise InvalidDimension(f"Matrix dimensions must be non-negative, got {d}")


@dataclass(eq=False)
class Matrix:
    """Dense matrix of float64 entries.

    ``data`` is always a two-dimensional ``numpy`` array owned by this
    matrix. Every operation returns a new matrix with its own storage; only
    ``set_value_at`` writes in place, so callers sharing one matrix across
    threads must serialise those writes themselves.
    """

    data: np.ndarray

    def __post_init__(self):
        if isinstance(self.data, np.ndarray):
            arr = np.array(self.data, dtype=float)
            if arr.ndim != 2:
                raise ValueError(f"Expected a 2-D array, got {arr.ndim} dimensions")
        else:
            rows = [list(row) for row in self.data]
            if rows:
                ncols = len(rows[0])
                for row in rows:
                    if len(row) != ncols:
                        raise ValueError("All rows must have the same length")
                arr = np.array(rows, dtype=float).reshape(len(rows), ncols)
            else:
                arr = np.zeros((0, 0))
        if arr.shape[0] == 0:
            # no rows means no columns
            arr = np.zeros((0, 0))
        self.data = arr

    @property
    def nrows(self) -> int:
        return self.data.shape[0]

    @property
    def ncols(self) -> int:
        return self.data.shape[1]

    @property
    def shape(self) -> Tuple[int, int]:
        return self.nrows, self.ncols

    def size(self) -> Size:
        return Size(self.nrows, self.ncols)

    def is_square(self) -> bool:
        return self.nrows == self.ncols

    def __len__(self) -> int:
        return self.nrows * self.ncols

    def __eq__(self, other) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self.data, other.data))

    # --- construction ---

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "Matrix":
        return cls(data=rows)

    @classmethod
    def zeros(cls, rows: int, columns: int) -> "Matrix":
        return cls.filled(rows, columns, 0.0)

    @classmethod
    def filled(cls, rows: int, columns: int, value: float) -> "Matrix":
        _check_dimensions(rows, columns)
        return cls([unit_sequence(value, columns) for _ in range(rows)])

    @classmethod
    def square(cls, order: int) -> "Matrix":
        return cls.zeros(order, order)

    @classmethod
    def filled_square(cls, order: int, value: float) -> "Matrix":
        return cls.filled(order, order, value)

    @classmethod
    def identity(cls, order: int) -> "Matrix":
        eye = cls.square(order)
        for i in range(order):
            eye = eye.insert(i, i, 1.0)
        return eye

    @classmethod
    def vector(cls, n: int) -> "Matrix":
        """Return an ``n x 1`` column of zeros."""
        return cls.zeros(n, 1)

    @classmethod
    def vector_from(cls, *values: float) -> "Matrix":
        """Return an ``n x 1`` column holding ``values`` top to bottom."""
        return cls([[v] for v in values])

    def copy(self) -> "Matrix":
        return Matrix(self.data.copy())

    def tolist(self) -> List[List[float]]:
        return self.data.tolist()

    # --- element access ---

    def _locate(self, index: int) -> Tuple[int, int]:
        rows, columns = self.size()
        if not 0 <= index < rows * columns:
            raise OutOfBounds(f"Index {index} outside a {rows}x{columns} matrix")
        return divmod(index, columns)

    def value_at(self, index: int) -> float:
        """Return the entry at row-major position ``index``."""
        r, c = self._locate(index)
        return float(self.data[r, c])

    def set_value_at(self, index: int, value: float) -> None:
        """In-place: overwrite the entry at row-major position ``index``."""
        r, c = self._locate(index)
        self.data[r, c] = value

    def insert(self, row: int, column: int, value: float) -> "Matrix":
        """
        Return a copy with ``(row, column)`` set to ``value``.

        The copy is grown with zeros along whichever axes are too short to
        hold the target cell, so the result stays rectangular.
        """
        if row < 0 or column < 0:
            raise OutOfBounds(f"Cannot insert at negative position ({row}, {column})")
        rows, columns = self.shape
        grown = np.zeros((max(rows, row + 1), max(columns, column + 1)))
        grown[:rows, :columns] = self.data
        grown[row, column] = value
        return Matrix(grown)

    def insert_row(self, after_row: int, values: Sequence[float]) -> "Matrix":
        """Write ``values`` into row ``after_row + 1``, growing as needed."""
        filled = self.copy()
        for j, v in enumerate(values):
            filled = filled.insert(after_row + 1, j, v)
        return filled

    def insert_rows(self, *rows: Sequence[float], after_row: int = -1) -> "Matrix":
        """
        Write each of ``rows`` on consecutive rows, the first one directly
        after ``after_row``. With the default the rows start at index 0,
        which builds a matrix row by row from an empty one.
        """
        filled = self.copy()
        for k, values in enumerate(rows):
            filled = filled.insert_row(after_row + k, values)
        return filled

    # --- structural transforms ---

    def divide_rows(self, after_row: int) -> Tuple["Matrix", "Matrix"]:
        """
        Split into rows ``[0, after_row]`` and ``[after_row + 1, nrows)``.
        Both halves are independent copies.
        """
        if not -1 <= after_row < self.nrows:
            raise OutOfBounds(f"Cannot split {self.nrows} rows after row {after_row}")
        return Matrix(self.data[: after_row + 1]), Matrix(self.data[after_row + 1 :])

    def divide_columns(self, after_column: int) -> Tuple["Matrix", "Matrix"]:
        """Column-wise counterpart of ``divide_rows``; also returns copies."""
        if not -1 <= after_column < self.ncols:
            raise OutOfBounds(
                f"Cannot split {self.ncols} columns after column {after_column}"
            )
        return (
            Matrix(self.data[:, : after_column + 1]),
            Matrix(self.data[:, after_column + 1 :]),
        )

    def augment(self, other: "Matrix") -> "Matrix":
        if self.nrows != other.nrows:
            raise DimensionMismatch(
                f"Cannot augment {self.nrows} rows with {other.nrows} rows"
            )
        return Matrix(np.hstack([self.data, other.data]))

    def reflect(self) -> "Matrix":
        """Transpose of a square matrix."""
        if not self.is_square():
            raise NotSquare(f"Cannot reflect a {self.nrows}x{self.ncols} matrix")
        return Matrix(self.data.T)

    def submatrix(self, rows: Iterable[int], columns: Iterable[int]) -> "Matrix":
        """
        Remove the given row and column indices, keeping the survivors in
        their original order.
        """
        excluded_rows = sorted(set(rows))
        excluded_columns = sorted(set(columns))
        for r in excluded_rows:
            if not 0 <= r < self.nrows:
                raise OutOfBounds(f"Cannot exclude row {r} of {self.nrows}")
        for c in excluded_columns:
            if not 0 <= c < self.ncols:
                raise OutOfBounds(f"Cannot exclude column {c} of {self.ncols}")

        kept_rows = [
            r for r in range(self.nrows) if not contains(excluded_rows, r, presorted=True)
        ]
        kept_columns = [
            c for c in range(self.ncols) if not contains(excluded_columns, c, presorted=True)
        ]
        return Matrix(self.data[np.ix_(kept_rows, kept_columns)])

    # --- algebra ---

    def multiply(self, other: "Matrix") -> "Matrix":
        if self.ncols != other.nrows:
            raise DimensionMismatch(f"Dimension mismatch: {self.ncols} != {other.nrows}")
        return Matrix(self.data @ other.data)

    def __matmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def multiply_by_value(self, value: float) -> "Matrix":
        return Matrix(self.data * value)

    def __mul__(self, value):
        if not isinstance(value, numbers.Real):
            return NotImplemented
        return self.multiply_by_value(value)

    __rmul__ = __mul__

    def determinant(self) -> float:
        from densematrix.determinant import determinant

        return determinant(self)

    def apply_signs(self) -> "Matrix":
        from densematrix.determinant import apply_signs

        return apply_signs(self)

    def adjoint(self) -> "Matrix":
        from densematrix.determinant import adjoint

        return adjoint(self)

    def inverse(self, tolerance: Optional[float] = None) -> "Matrix":
        from densematrix.determinant import inverse

        return inverse(self, tolerance=tolerance)

    def echelon(self, tolerance: Optional[float] = None) -> "Matrix":
        from densematrix.echelon import echelon

        return echelon(self, tolerance=tolerance)

    def pivot_columns(self, tolerance: Optional[float] = None) -> List[int]:
        from densematrix.echelon import pivot_columns

        return pivot_columns(self, tolerance=tolerance)

    def rank(self, tolerance: Optional[float] = None) -> int:
        from densematrix.echelon import rank

        return rank(self, tolerance=tolerance)

    # --- debugging ---

    def to_display_string(self) -> str:
        lines = ["["]
        for row in self.data:
            lines.append(
                " [" + ", ".join(config.DISPLAY_FORMAT.format(x) for x in row) + "]"
            )
        lines.append("]")
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_display_string()

    def to_sympy(self):
        import sympy as sp
        return sp.Matrix(self.tolist())

    def pprint(self):
        from sympy import pprint
        pprint(self.to_sympy())
