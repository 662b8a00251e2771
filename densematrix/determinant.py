"""Determinant, adjugate and inverse by cofactor expansion.

The determinant is expanded along the first row and recurses on the minors,
so its cost grows as O(n!). An LU factorisation gives the same value in
O(n^3) and may replace ``_expand`` provided the results agree within
floating-point tolerance and the same errors are raised.

The adjugate is assembled in three steps that must stay in this order:

1. the determinant of every minor ``M_rc`` (row ``r`` and column ``c``
   deleted) fills cell ``(r, c)``,
2. ``apply_signs`` negates every cell with ``r + c`` odd,
3. the signed cofactor matrix is reflected about its diagonal.

``inverse`` divides the adjugate by the determinant after rejecting
matrices whose determinant is not finite or is negligible relative to the
product of the row norms (the Hadamard bound).
"""

import logging
import math
from typing import Optional

import numpy as np

from densematrix import config
from densematrix.errors import MatrixError, NotSquare, SingularMatrix
from densematrix.matrix import Matrix

logger = logging.getLogger(__name__)


def _require_square(A: Matrix, operation: str) -> None:
    if not A.is_square():
        raise NotSquare(
            f"{operation} requires a square matrix, got {A.nrows}x{A.ncols}"
        )


def _warn_if_large(order: int, operation: str) -> None:
    if order >= config.DETERMINANT_WARN_ORDER:
        logger.warning(
            "%s(): cofactor expansion of order %d is O(n!) and may be slow",
            operation,
            order,
        )


def _expand(a: np.ndarray) -> float:
    """Cofactor expansion of a square array along its first row."""
    n = a.shape[0]
    if n == 0:
        # Empty product.
        return 1.0
    if n == 1:
        return float(a[0, 0])

    total = 0.0
    below = a[1:]
    for i in range(n):
        entry = a[0, i]
        if entry == 0:
            continue
        sign = 1.0 if i % 2 == 0 else -1.0
        minor = np.delete(below, i, axis=1)
        total += sign * entry * _expand(minor)
    return total


def determinant(A: Matrix) -> float:
    """Compute the determinant of a square matrix.

    Args:
        A: Square matrix. The ``0 x 0`` matrix has determinant ``1.0``.

    Returns:
        The determinant as a Python float.

    Raises:
        NotSquare: If ``A`` is not square.
    """
    _require_square(A, "determinant")
    _warn_if_large(A.nrows, "determinant")
    return float(_expand(A.data))


def apply_signs(A: Matrix) -> Matrix:
    """Negate every entry whose row and column indices have odd sum."""
    rows, columns = np.indices(A.shape)
    signed = np.where((rows + columns) % 2 == 1, -A.data, A.data)
    # clear negative zeros
    return Matrix(signed + 0.0)


def adjoint(A: Matrix) -> Matrix:
    """Compute the adjugate (transposed cofactor matrix) of ``A``.

    Raises:
        NotSquare: If ``A`` is not square.
    """
    _require_square(A, "adjoint")
    n = A.nrows
    _warn_if_large(n - 1, "adjoint")

    minors = np.zeros((n, n))
    for r in range(n):
        for c in range(n):
            minors[r, c] = _expand(A.submatrix([r], [c]).data)

    return apply_signs(Matrix(minors)).reflect()


def _singularity_bound(A: Matrix, tolerance: float) -> float:
    """Scale ``tolerance`` by the Hadamard bound of ``A``.

    ``|det(A)|`` never exceeds the product of the row norms, so comparing
    against that product keeps the test independent of the entries' scale.
    The empty product makes the bound of a ``0 x 0`` matrix ``tolerance``.
    """
    return tolerance * float(np.prod(np.linalg.norm(A.data, axis=1)))


def inverse(A: Matrix, tolerance: Optional[float] = None) -> Matrix:
    """Compute ``adjoint(A) / determinant(A)``.

    Args:
        A: Square matrix.
        tolerance: Relative singularity threshold. The matrix is rejected
            when ``|det(A)|`` is at or below ``tolerance`` times the product
            of its row norms. Defaults to ``config.SINGULAR_TOLERANCE``.

    Raises:
        NotSquare: If ``A`` is not square.
        MatrixError: If the determinant is not finite.
        SingularMatrix: If the determinant is within the scaled tolerance
            of zero.
    """
    if tolerance is None:
        tolerance = config.SINGULAR_TOLERANCE

    det = determinant(A)
    if not math.isfinite(det):
        raise MatrixError(f"Cannot invert a matrix with determinant {det}")

    bound = _singularity_bound(A, tolerance)
    if abs(det) <= bound:
        raise SingularMatrix(
            f"Matrix is singular: |det| = {abs(det):g} <= {bound:g}"
        )
    logger.debug("inverse(): order %d, det = %g", A.nrows, det)
    return adjoint(A).multiply_by_value(1.0 / det)
