"""Exceptions raised by matrix operations."""


class MatrixError(ValueError):
    """Base class for every failure reported by ``densematrix``."""


class DimensionMismatch(MatrixError):
    """Operand shapes are incompatible for the requested operation."""


class NotSquare(MatrixError):
    """The operation is only defined for square matrices."""


class SingularMatrix(MatrixError):
    """The matrix has a (numerically) zero determinant."""


class InvalidDimension(MatrixError):
    """A constructor was given a negative dimension."""


class OutOfBounds(MatrixError, IndexError):
    """An index lies outside the current shape of the matrix."""
