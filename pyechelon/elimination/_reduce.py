"""
Gauss-Jordan reduction to reduced row-echelon form.

Shared core of row_echelon, rank and inverse. Operates in place on a
private working copy; callers are responsible for copying their input.

Algorithm:
1. Keep a moving pivot position (pivot_row, pivot_col), starting at (0, 0).
2. Pick the largest-magnitude candidate in pivot_col at or below pivot_row.
3. If it is near zero the column has no pivot: zero its entries from
   pivot_row down and advance pivot_col only (or raise, for callers that
   require a pivot in every column).
4. Otherwise swap it into pivot_row, divide the whole row by the pivot,
   and subtract factor_i * pivot row from every other row i, where
   factor_i is row i's entry in pivot_col.
5. Advance both indices; stop when either reaches its bound.
"""

from __future__ import annotations

from dataclasses import dataclass, field as dc_field
from typing import Any, Literal

from pyechelon.core.exceptions import SingularMatrixError
from pyechelon.core.protocols import Field
from pyechelon.elimination._pivot import clear_column, select_pivot, swap_rows


@dataclass
class Reduction:
    """
    Bookkeeping from one gauss_jordan() pass.

    Attributes:
        pivot_columns: Columns that received a pivot, in order
        row_swaps: Number of row interchanges performed
        pivot_magnitudes: Magnitude of each pivot before normalization
        suppressed: (column, magnitude) for columns skipped although their
            best candidate was not exactly zero
    """
    pivot_columns: list[int] = dc_field(default_factory=list)
    row_swaps: int = 0
    pivot_magnitudes: list[Any] = dc_field(default_factory=list)
    suppressed: list[tuple[int, Any]] = dc_field(default_factory=list)


def gauss_jordan(
    work: list[list[Any]],
    field: Field,
    *,
    pivot_cols: int | None = None,
    singular: Literal['skip', 'raise'] = 'skip',
) -> Reduction:
    """
    Reduce ``work`` to reduced row-echelon form in place.

    Args:
        work: Row-major working copy; every row has the same length
        field: Field used for all arithmetic
        pivot_cols: Only search the first pivot_cols columns for pivots.
            Row operations still span the full row width, which is what
            Gauss-Jordan inversion on [A | I] needs. Default: all columns.
        singular: 'skip' advances past a column with no usable pivot;
            'raise' raises SingularMatrixError instead.

    Returns:
        Reduction with pivot columns, swap count and diagnostics

    Raises:
        SingularMatrixError: If singular='raise' and a column has no pivot
    """
    n_rows = len(work)
    width = len(work[0]) if work else 0
    n_pivot_cols = width if pivot_cols is None else pivot_cols

    out = Reduction()
    pivot_row = 0
    pivot_col = 0

    while pivot_row < n_rows and pivot_col < n_pivot_cols:
        best_row, best_mag = select_pivot(work, pivot_col, pivot_row, field)

        if field.is_near_zero(work[best_row][pivot_col]):
            if singular == 'raise':
                raise SingularMatrixError(
                    f"Matrix is singular: no pivot above {field.eps:g} in column "
                    f"{pivot_col} (largest candidate magnitude {best_mag!s})",
                    matrix_name='A',
                    pivot_column=pivot_col,
                    rank=len(out.pivot_columns),
                    expected_rank=n_pivot_cols,
                )
            if best_mag != 0:
                out.suppressed.append((pivot_col, best_mag))
            clear_column(work, pivot_col, pivot_row, field)
            pivot_col += 1
            continue

        if swap_rows(work, pivot_row, best_row):
            out.row_swaps += 1

        pivot_line = work[pivot_row]
        pivot = pivot_line[pivot_col]
        out.pivot_columns.append(pivot_col)
        out.pivot_magnitudes.append(best_mag)

        # Normalize: leading entry becomes exactly one
        for j in range(width):
            pivot_line[j] = field.div(pivot_line[j], pivot)

        # Eliminate pivot_col from every other row, above and below
        for i in range(n_rows):
            if i == pivot_row:
                continue
            line = work[i]
            factor = line[pivot_col]
            for j in range(width):
                line[j] = field.sub(line[j], field.mul(factor, pivot_line[j]))

        pivot_row += 1
        pivot_col += 1

    return out


def count_nonzero_rows(rows: tuple[tuple[Any, ...], ...], field: Field) -> int:
    """Number of rows with at least one entry that is not near zero."""
    return sum(
        1 for row in rows
        if any(not field.is_near_zero(value) for value in row)
    )
