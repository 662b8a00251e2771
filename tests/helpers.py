import random

import numpy as np

from densematrix.matrix import Matrix


def assert_matrix_close(actual: Matrix, expected, atol: float = 1e-9) -> None:
    """Compare a matrix against another matrix or a nested list."""
    if isinstance(expected, Matrix):
        expected = expected.data
    expected = np.asarray(expected, dtype=float)
    assert actual.shape == expected.shape, f"{actual.shape} != {expected.shape}"
    assert np.allclose(actual.data, expected, atol=atol), (
        f"\n{actual}\n!=\n{expected}"
    )


def is_reduced_echelon(R: Matrix, tol: float = 1e-9) -> bool:
    """
    Check:
    - Each non-zero row leads with a 1, strictly right of the row above.
    - Once a zero row appears, all later rows are zero.
    - Every pivot column is zero outside its pivot row.
    """
    data = R.data
    last_pivot_col = -1
    zero_row_seen = False

    for r in range(R.nrows):
        nonzero = np.flatnonzero(np.abs(data[r]) > tol)
        if nonzero.size == 0:
            zero_row_seen = True
            continue
        if zero_row_seen:
            return False

        pivot_col = int(nonzero[0])
        if pivot_col <= last_pivot_col:
            return False
        if abs(data[r, pivot_col] - 1.0) > tol:
            return False

        others = np.delete(data[:, pivot_col], r)
        if np.any(np.abs(others) > tol):
            return False
        last_pivot_col = pivot_col

    return True


def make_random_matrix(nrows: int, ncols: int, low: int = -9, high: int = 9) -> Matrix:
    """Generate a random matrix with small integer-valued entries."""
    data = [
        [float(random.randint(low, high)) for _ in range(ncols)]
        for _ in range(nrows)
    ]
    return Matrix.from_rows(data)


def make_invertible_matrix(n: int) -> Matrix:
    """Generate a random matrix whose determinant is safely away from zero."""
    while True:
        A = make_random_matrix(n, n)
        det = abs(np.linalg.det(A.data))
        if det > 0.5 and det > 1e-3 * np.prod(np.linalg.norm(A.data, axis=1)):
            return A
