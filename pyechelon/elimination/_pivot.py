"""
Partial pivot selection shared by every elimination kernel.
"""

from __future__ import annotations

from typing import Any

from pyechelon.core.protocols import Field


def select_pivot(
    work: list[list[Any]],
    col: int,
    start_row: int,
    field: Field,
) -> tuple[int, Any]:
    """
    Find the row at or below ``start_row`` whose entry in ``col`` has the
    largest magnitude.

    Ties keep the first (topmost) candidate, so an already-placed pivot is
    never swapped for an equal one.

    Returns:
        (row index, magnitude of the candidate)
    """
    best_row = start_row
    best_mag = field.absolute(work[start_row][col])
    for i in range(start_row + 1, len(work)):
        mag = field.absolute(work[i][col])
        if mag > best_mag:
            best_row = i
            best_mag = mag
    return best_row, best_mag


def swap_rows(work: list[list[Any]], i: int, j: int) -> bool:
    """Swap rows i and j in place. Returns True if a swap happened."""
    if i == j:
        return False
    work[i], work[j] = work[j], work[i]
    return True


def clear_column(work: list[list[Any]], col: int, start_row: int, field: Field) -> None:
    """
    Set ``col`` to exactly field.zero in every row at or below ``start_row``.

    Called when a column has no pivot: its sub-tolerance residue below the
    current pivot row is treated as zero from then on.
    """
    for i in range(start_row, len(work)):
        work[i][col] = field.zero
