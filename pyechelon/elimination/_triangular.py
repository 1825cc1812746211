"""
Forward elimination to upper-triangular (row-echelon, non-normalized) form.

Used by determinant and rank_by_pivots. Unlike gauss_jordan() the pivot
row is never divided and only rows below the pivot are eliminated, so
the pivots themselves stay on the diagonal and their product is the
determinant up to the sign of the row permutation.
"""

from __future__ import annotations

from dataclasses import dataclass, field as dc_field
from typing import Any

from pyechelon.core.protocols import Field
from pyechelon.elimination._pivot import clear_column, select_pivot, swap_rows


@dataclass
class Triangularization:
    """
    Bookkeeping from one forward_eliminate() pass.

    Attributes:
        pivots: Pivot values in the order they were fixed
        pivot_columns: Column of each pivot
        row_swaps: Number of row interchanges
        complete: False if the pass stopped early on a missing pivot
    """
    pivots: list[Any] = dc_field(default_factory=list)
    pivot_columns: list[int] = dc_field(default_factory=list)
    row_swaps: int = 0
    complete: bool = True


def forward_eliminate(
    work: list[list[Any]],
    field: Field,
    *,
    stop_on_missing: bool = False,
) -> Triangularization:
    """
    Eliminate below each pivot in place, with partial pivoting.

    Args:
        work: Row-major working copy
        field: Field used for all arithmetic
        stop_on_missing: Stop at the first column without a usable pivot
            and mark the result incomplete (determinant short-circuit).
            Otherwise the column is skipped, its entries from the pivot row
            down are zeroed and the pivot row stays put.
    """
    n_rows = len(work)
    n_cols = len(work[0]) if work else 0

    out = Triangularization()
    pivot_row = 0
    pivot_col = 0

    while pivot_row < n_rows and pivot_col < n_cols:
        best_row, _ = select_pivot(work, pivot_col, pivot_row, field)

        if field.is_near_zero(work[best_row][pivot_col]):
            if stop_on_missing:
                out.complete = False
                return out
            clear_column(work, pivot_col, pivot_row, field)
            pivot_col += 1
            continue

        if swap_rows(work, pivot_row, best_row):
            out.row_swaps += 1

        pivot_line = work[pivot_row]
        pivot = pivot_line[pivot_col]
        out.pivots.append(pivot)
        out.pivot_columns.append(pivot_col)

        for i in range(pivot_row + 1, n_rows):
            line = work[i]
            factor = field.div(line[pivot_col], pivot)
            for j in range(pivot_col, n_cols):
                line[j] = field.sub(line[j], field.mul(factor, pivot_line[j]))

        pivot_row += 1
        pivot_col += 1

    return out
