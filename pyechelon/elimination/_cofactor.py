"""
Determinant by recursive Laplace (cofactor) expansion along the first row.

O(n!). Only meant as an independent oracle for small matrices.
"""

from __future__ import annotations

from typing import Any, Sequence

from pyechelon.core.protocols import Field


def laplace_determinant(data: Sequence[Sequence[Any]], field: Field) -> Any:
    """
    det(A) = sum_j (-1)^j * a[0][j] * det(minor(A, 0, j)).

    Base cases: 0x0 -> one, 1x1 -> a, 2x2 -> ad - bc.
    """
    n = len(data)
    if n == 0:
        return field.one
    if n == 1:
        return data[0][0]
    if n == 2:
        return field.sub(
            field.mul(data[0][0], data[1][1]),
            field.mul(data[0][1], data[1][0]),
        )

    det = field.zero
    for j in range(n):
        minor = [
            [row[k] for k in range(n) if k != j]
            for row in data[1:]
        ]
        term = field.mul(data[0][j], laplace_determinant(minor, field))
        det = field.add(det, term) if j % 2 == 0 else field.sub(det, term)
    return det
