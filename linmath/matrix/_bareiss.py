"""
Fraction-free (Bareiss) determinant for integral matrices.

Every intermediate division is exact, so running the recurrence over
Python ints gives the exact determinant with no rounding or overflow.
"""

from __future__ import annotations

from typing import Sequence


def bareiss_determinant(values: Sequence[Sequence[int]]) -> tuple[int, int]:
    """
    Exact determinant of a square integer matrix.

    Args:
        values: Square matrix as nested sequences of ints (logical order)

    Returns:
        (determinant, number of row interchanges performed)
    """
    a = [[int(x) for x in row] for row in values]
    n = len(a)
    if n == 0:
        return 1, 0

    swaps = 0
    previous = 1
    for k in range(n - 1):
        if a[k][k] == 0:
            pivot_row = next((r for r in range(k + 1, n) if a[r][k] != 0), None)
            if pivot_row is None:
                return 0, swaps
            a[k], a[pivot_row] = a[pivot_row], a[k]
            swaps += 1

        pivot = a[k][k]
        for i in range(k + 1, n):
            row_i, row_k = a[i], a[k]
            for j in range(k + 1, n):
                row_i[j] = (row_i[j] * pivot - row_i[k] * row_k[j]) // previous
            row_i[k] = 0
        previous = pivot

    det = a[n - 1][n - 1]
    return (-det if swaps % 2 else det), swaps
