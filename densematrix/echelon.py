"""Gauss-Jordan reduction to reduced row-echelon form.

``echelon`` walks the rows top to bottom while a ``lead`` column index
sweeps left to right. For each row it looks downward for an entry in the
lead column that is not effectively zero, swaps that row up, scales it so
the pivot becomes 1 and clears the lead column in every other row. Columns
without a usable pivot are skipped by advancing ``lead`` only.

All "is this zero" decisions use a single absolute tolerance, which
defaults to ``config.PIVOT_TOLERANCE``.
"""

import logging
from typing import List, Optional

import numpy as np

from densematrix import config
from densematrix.matrix import Matrix

logger = logging.getLogger(__name__)


def echelon(A: Matrix, tolerance: Optional[float] = None) -> Matrix:
    """Return the reduced row-echelon form of ``A``.

    The reduction runs on a private copy; ``A`` is left unchanged.

    Args:
        A: Matrix of any shape.
        tolerance: Entries with absolute value at or below this are never
            chosen as pivots.

    Returns:
        A new matrix in reduced row-echelon form.
    """
    if tolerance is None:
        tolerance = config.PIVOT_TOLERANCE

    T = A.data.copy()
    n_rows, n_cols = T.shape

    lead = 0
    for row in range(n_rows):
        if lead >= n_cols:
            break

        i = row
        while abs(T[i, lead]) <= tolerance:
            i += 1
            if i == n_rows:
                i = row
                lead += 1
                if lead == n_cols:
                    return Matrix(T)

        if i != row:
            T[[i, row]] = T[[row, i]]

        pivot = T[row, lead]
        logger.debug("echelon(): pivot %g at (%d, %d), swapped from row %d",
                     pivot, row, lead, i)
        T[row] = T[row] / pivot

        for k in range(n_rows):
            if k != row:
                T[k] = T[k] - T[k, lead] * T[row]

        lead += 1

    return Matrix(T)


def pivot_columns(A: Matrix, tolerance: Optional[float] = None) -> List[int]:
    """Column index of the leading entry of each non-zero row of
    ``echelon(A)``."""
    if tolerance is None:
        tolerance = config.PIVOT_TOLERANCE

    R = echelon(A, tolerance=tolerance)
    pivots = []
    for row in R.data:
        nonzero = np.flatnonzero(np.abs(row) > tolerance)
        if nonzero.size:
            pivots.append(int(nonzero[0]))
    return pivots


def rank(A: Matrix, tolerance: Optional[float] = None) -> int:
    return len(pivot_columns(A, tolerance=tolerance))
