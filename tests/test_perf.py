"""Performance sanity checks for the cofactor and elimination routines.

These tests verify that runtime does not regress catastrophically.
They use generous wall-clock bounds and are marked ``perf`` so they
are excluded from the default test run.

Run with: pytest -m perf
"""

import time

import pytest

from densematrix.matrix import Matrix
from tests.helpers import assert_matrix_close, make_invertible_matrix, make_random_matrix


@pytest.mark.perf
class TestPerformanceSanity:
    """Wall-clock sanity checks for representative sizes."""

    # Cofactor expansion is O(n!), so the determinant sizes stay small.
    CASES = [
        pytest.param(6, 5.0, id="det-6x6"),
        pytest.param(8, 30.0, id="det-8x8"),
    ]

    @pytest.mark.parametrize("size, max_seconds", CASES)
    def test_determinant_bound(self, seeded_rng, size: int, max_seconds: float) -> None:
        A = make_random_matrix(size, size)

        t0 = time.perf_counter()
        A.determinant()
        elapsed = time.perf_counter() - t0

        assert elapsed < max_seconds, (
            f"{size}x{size} determinant took {elapsed:.2f}s "
            f"(limit {max_seconds:.1f}s)"
        )

    def test_inverse_bound(self, seeded_rng) -> None:
        A = make_invertible_matrix(6)

        t0 = time.perf_counter()
        A_inv = A.inverse()
        elapsed = time.perf_counter() - t0

        # Verify correctness so timing doesn't mask a bug
        assert_matrix_close(A @ A_inv, Matrix.identity(6), atol=1e-8)
        assert elapsed < 30.0, f"6x6 inverse took {elapsed:.2f}s"

    def test_echelon_bound(self, seeded_rng) -> None:
        A = make_random_matrix(200, 200)

        t0 = time.perf_counter()
        A.echelon()
        elapsed = time.perf_counter() - t0

        assert elapsed < 10.0, f"200x200 echelon took {elapsed:.2f}s"
