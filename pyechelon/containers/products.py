"""
Matrix products, trace and approximate comparison.

All arithmetic goes through the operands' Field, so these work for any
field the containers support.
"""

from __future__ import annotations

from typing import Any

from pyechelon.containers.matrix import Matrix
from pyechelon.containers.vector import Vector
from pyechelon.core.exceptions import DimensionError
from pyechelon.core.tolerances import select_tolerance
from pyechelon.core.validation import check_same_field, check_square


def matmul(a: Matrix, b: Matrix) -> Matrix:
    """
    Matrix product C = A B.

    A is m x n, B is n x p, C is m x p.

    Raises:
        DimensionError: If A.cols != B.rows
        ValidationError: If A and B are over different fields
    """
    if a.cols != b.rows:
        raise DimensionError(
            f"matmul: A is {a.rows}x{a.cols} but B is {b.rows}x{b.cols}; "
            f"A.cols must equal B.rows",
            expected=(a.cols, b.cols),
            actual=b.shape,
        )
    check_same_field(a, b, ('A', 'B'))

    field = a.field
    b_cols = [b.column(j) for j in range(b.cols)]
    rows = [
        [_dot(field, a.row(i), b_cols[j]) for j in range(b.cols)]
        for i in range(a.rows)
    ]
    return Matrix._from_lists(rows, b.cols, field)


def matvec(a: Matrix, v: Vector) -> Vector:
    """
    Matrix-vector product y = A x.

    Raises:
        DimensionError: If A.cols != v.size
        ValidationError: If A and v are over different fields
    """
    if a.cols != v.size:
        raise DimensionError(
            f"matvec: A has {a.cols} columns but vector has {v.size} entries",
            expected=a.cols,
            actual=v.size,
        )
    check_same_field(a, v, ('A', 'v'))

    return Vector(
        _data=tuple(_dot(a.field, a.row(i), v.data) for i in range(a.rows)),
        _field=a.field,
    )


def trace(a: Matrix) -> Any:
    """
    Sum of the diagonal entries.

    Raises:
        NotSquareError: If A is not square
    """
    check_square(a.shape, 'trace')
    field = a.field
    total = field.zero
    for i in range(a.rows):
        total = field.add(total, a[i, i])
    return total


def allclose(a: Matrix, b: Matrix, atol: float | None = None) -> bool:
    """
    True if A and B have the same shape and every |a_ij - b_ij| <= atol.

    The default atol comes from select_tolerance() for the operands' field:
    1e-8 for REAL and COMPLEX, exact equality for RATIONAL.

    Magnitudes are taken with the field's absolute(), so complex entries
    compare by modulus of the difference.

    Raises:
        ValidationError: If A and B are over different fields
    """
    check_same_field(a, b, ('A', 'B'))
    if a.shape != b.shape:
        return False
    field = a.field
    if atol is None:
        atol = select_tolerance(field.name).atol
    return all(
        field.absolute(field.sub(x, y)) <= atol
        for row_a, row_b in zip(a.data, b.data)
        for x, y in zip(row_a, row_b)
    )


def _dot(field, xs, ys) -> Any:
    total = field.zero
    for x, y in zip(xs, ys):
        total = field.add(total, field.mul(x, y))
    return total
