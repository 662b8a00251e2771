import logging

from .errors import (
    DimensionMismatch,
    InvalidDimension,
    MatrixError,
    NotSquare,
    OutOfBounds,
    SingularMatrix,
)
from .matrix import Matrix, Size
from .determinant import adjoint, apply_signs, determinant, inverse
from .echelon import echelon, pivot_columns, rank

__all__ = [
    "DimensionMismatch",
    "InvalidDimension",
    "Matrix",
    "MatrixError",
    "NotSquare",
    "OutOfBounds",
    "SingularMatrix",
    "Size",
    "adjoint",
    "apply_signs",
    "determinant",
    "echelon",
    "inverse",
    "pivot_columns",
    "rank",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
