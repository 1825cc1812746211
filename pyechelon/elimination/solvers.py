"""
Solver dispatch for elimination-based algorithms.

Provides eliminate() as the comprehensive entry point, plus
row_echelon(), rank(), rank_by_pivots(), determinant(),
determinant_recursive() and inverse().

Every function is pure: the input Matrix is never mutated and failures
raise before any partial result is produced.
"""

from __future__ import annotations

import warnings
from typing import Any, Literal

from pyechelon.containers.matrix import Matrix
from pyechelon.core.exceptions import ValidationError
from pyechelon.core.tolerances import ILL_CONDITIONED_PIVOT_RATIO
from pyechelon.core.validation import check_square
from pyechelon.elimination._cofactor import laplace_determinant
from pyechelon.elimination._reduce import gauss_jordan
from pyechelon.elimination._triangular import forward_eliminate
from pyechelon.elimination.backends.cpu import CPUEliminationBackend
from pyechelon.elimination.solution import EchelonSolution


BackendChoice = Literal['auto', 'cpu']


def _get_backend(backend: BackendChoice):
    """Select backend based on preference."""
    if backend in ('auto', 'cpu'):
        return CPUEliminationBackend()
    raise ValidationError(f"Unknown backend: {backend!r}")


def _check_matrix(matrix: Any, name: str) -> None:
    if not isinstance(matrix, Matrix):
        raise ValidationError(
            f"{name}: expected a Matrix, got {type(matrix).__name__}"
        )


def eliminate(
    matrix: Matrix,
    *,
    backend: BackendChoice = 'auto',
) -> EchelonSolution:
    """
    Reduce a matrix to reduced row-echelon form.

    Partial pivoting: each pivot is the largest-magnitude candidate in its
    column. Columns with no candidate above the field tolerance are
    skipped. Pivot rows are normalized to a leading one and the pivot
    column is cleared above and below.

    Parameters
    ----------
    matrix : Matrix
        Any shape, any field.
    backend : str
        'auto' or 'cpu'.

    Returns
    -------
    EchelonSolution with the reduced matrix, pivot columns, rank and
    row swap count.
    """
    _check_matrix(matrix, 'matrix')
    be = _get_backend(backend)
    result = be.solve(matrix)
    return EchelonSolution(_result=result, _matrix=matrix)


def row_echelon(matrix: Matrix) -> Matrix:
    """
    Reduced row-echelon form of ``matrix``, same shape.

    Equivalent to ``eliminate(matrix).reduced``.
    """
    return eliminate(matrix).reduced


def rank(matrix: Matrix) -> int:
    """
    Rank by echelon counting.

    Reduces ``matrix`` and counts the rows that are not entirely near zero.
    Result is in [0, min(rows, cols)].
    """
    return eliminate(matrix).rank


def rank_by_pivots(matrix: Matrix) -> int:
    """
    Rank by pivot counting.

    Forward elimination (no normalization, eliminate below the pivot only)
    and count the columns that yield a pivot above tolerance. Always agrees
    with rank().
    """
    _check_matrix(matrix, 'matrix')
    work = matrix.to_lists()
    return len(forward_eliminate(work, matrix.field).pivots)


def determinant(matrix: Matrix) -> Any:
    """
    Determinant by triangularization.

    Multiplies the pivots fixed by partial-pivoting forward elimination and
    flips the sign on every row swap. A column with no pivot above the
    field tolerance short-circuits to exactly field.zero.

    Raises
    ------
    NotSquareError
        If ``matrix`` is not square.
    """
    _check_matrix(matrix, 'matrix')
    check_square(matrix.shape, 'determinant')

    field = matrix.field
    work = matrix.to_lists()
    tri = forward_eliminate(work, field, stop_on_missing=True)
    if not tri.complete:
        return field.zero

    det = field.one
    for pivot in tri.pivots:
        det = field.mul(det, pivot)
    if tri.row_swaps % 2 == 1:
        det = field.negate(det)
    return det


def determinant_recursive(matrix: Matrix) -> Any:
    """
    Determinant by cofactor (Laplace) expansion along the first row.

    Factorial cost; intended as a cross-check for determinant() on small
    matrices.

    Raises
    ------
    NotSquareError
        If ``matrix`` is not square.
    """
    _check_matrix(matrix, 'matrix')
    check_square(matrix.shape, 'determinant_recursive')
    return laplace_determinant(matrix.data, matrix.field)


def inverse(matrix: Matrix) -> Matrix:
    """
    Inverse by Gauss-Jordan elimination on the augmented matrix [A | I].

    Works over any field. Issues a RuntimeWarning (but still returns) when
    the smallest pivot is tiny relative to the largest, which indicates an
    ill-conditioned input.

    Raises
    ------
    NotSquareError
        If ``matrix`` is not square.
    SingularMatrixError
        If some column has no pivot above the field tolerance. No partial
        result is returned.
    """
    _check_matrix(matrix, 'matrix')
    check_square(matrix.shape, 'inverse')

    field = matrix.field
    n = matrix.rows
    augmented = [
        list(row) + [field.one if i == j else field.zero for j in range(n)]
        for i, row in enumerate(matrix.data)
    ]

    reduction = gauss_jordan(augmented, field, pivot_cols=n, singular='raise')

    mags = reduction.pivot_magnitudes
    if mags and field.eps > 0:
        ratio = min(mags) / max(mags)
        if ratio < ILL_CONDITIONED_PIVOT_RATIO:
            warnings.warn(
                f"Matrix is ill-conditioned: pivot magnitude ratio {ratio:.3g} "
                f"is below {ILL_CONDITIONED_PIVOT_RATIO:g}; the inverse may be "
                f"inaccurate",
                RuntimeWarning,
                stacklevel=2,
            )

    return Matrix._from_lists([row[n:] for row in augmented], n, field)
