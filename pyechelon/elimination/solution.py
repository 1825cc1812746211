"""
Row-echelon solution types.

Contains the parameter payload and user-facing solution wrapper.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pyechelon.containers.matrix import Matrix
from pyechelon.core.result import Result
from pyechelon.elimination._reduce import count_nonzero_rows


@dataclass(frozen=True)
class EchelonParams:
    """
    Parameter payload for a Gauss-Jordan reduction.

    Attributes:
        reduced: Reduced row-echelon form, same shape as the input
        pivot_columns: Columns holding a leading one, in row order
        row_swaps: Number of row interchanges performed
    """
    reduced: Matrix
    pivot_columns: tuple[int, ...]
    row_swaps: int


@dataclass
class EchelonSolution:
    """
    User-facing row-echelon result.

    Wraps Result[EchelonParams] and provides convenient accessors.
    """
    _result: Result[EchelonParams]
    _matrix: Matrix

    @property
    def reduced(self) -> Matrix:
        """Reduced row-echelon form."""
        return self._result.params.reduced

    @property
    def pivot_columns(self) -> tuple[int, ...]:
        return self._result.params.pivot_columns

    @property
    def row_swaps(self) -> int:
        return self._result.params.row_swaps

    @property
    def rank(self) -> int:
        """Number of rows of the reduced form that are not entirely near zero."""
        reduced = self.reduced
        return count_nonzero_rows(reduced.data, reduced.field)

    @property
    def nullity(self) -> int:
        """Number of columns without a pivot (cols - rank)."""
        return self._matrix.cols - self.rank

    @property
    def is_full_rank(self) -> bool:
        return self.rank == min(self._matrix.shape)

    # --- Metadata ---

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def backend_name(self) -> str:
        return self._result.backend_name

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def summary(self) -> str:
        """Plain-text summary of the reduction."""
        rows, cols = self._matrix.shape
        lines = [
            "Row Echelon Reduction",
            f"  shape:         {rows} x {cols} ({self._matrix.field.name})",
            f"  rank:          {self.rank}",
            f"  pivot columns: {list(self.pivot_columns)}",
            f"  row swaps:     {self.row_swaps}",
            f"  backend:       {self.backend_name}",
        ]
        for w in self.warnings:
            lines.append(f"  warning: {w}")
        lines.append("")
        lines.append(str(self.reduced))
        return "\n".join(lines)

    def __repr__(self) -> str:
        rows, cols = self._matrix.shape
        return (
            f"EchelonSolution(rows={rows}, cols={cols}, rank={self.rank}, "
            f"pivots={list(self.pivot_columns)})"
        )
