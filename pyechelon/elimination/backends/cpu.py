"""
CPU reference backend for row-echelon reduction.

Pure Python over the matrix's Field; exact for RATIONAL, deterministic
for REAL and COMPLEX.
"""

from __future__ import annotations

from pyechelon.containers.matrix import Matrix
from pyechelon.core.result import Result
from pyechelon.core.timing import Timer
from pyechelon.elimination._reduce import gauss_jordan
from pyechelon.elimination.solution import EchelonParams


class CPUEliminationBackend:
    """CPU reference backend for Gauss-Jordan reduction."""

    @property
    def name(self) -> str:
        return 'cpu_gauss_jordan'

    def solve(self, design: Matrix) -> Result[EchelonParams]:
        """
        Reduce ``design`` to reduced row-echelon form.

        The input is copied before elimination and never mutated.
        """
        timer = Timer()
        timer.start()

        field = design.field
        with timer.section('copy'):
            work = design.to_lists()

        with timer.section('elimination'):
            reduction = gauss_jordan(work, field)

        reduced = Matrix._from_lists(work, design.cols, field)

        warnings = tuple(
            f"column {col} treated as zero: largest candidate magnitude "
            f"{mag!s} is below pivot tolerance {field.eps:g}"
            for col, mag in reduction.suppressed
        )

        timer.stop()

        return Result(
            params=EchelonParams(
                reduced=reduced,
                pivot_columns=tuple(reduction.pivot_columns),
                row_swaps=reduction.row_swaps,
            ),
            info={
                'method': 'gauss_jordan',
                'pivoting': 'partial',
                'field': field.name,
                'pivot_eps': field.eps,
                'shape': design.shape,
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=warnings,
        )
