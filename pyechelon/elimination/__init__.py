"""
Elimination module.

Pivoted Gaussian elimination and the algorithms built on it. All
functions work over any Field carried by the input Matrix.

Public API:
    eliminate(m)              - Full reduction with diagnostics
    row_echelon(m)            - Reduced row-echelon form
    rank(m)                   - Rank by counting non-zero echelon rows
    rank_by_pivots(m)         - Rank by counting pivots
    determinant(m)            - Determinant by triangularization
    determinant_recursive(m)  - Determinant by cofactor expansion
    inverse(m)                - Inverse by Gauss-Jordan on [A | I]
"""

from pyechelon.elimination.solution import EchelonParams, EchelonSolution
from pyechelon.elimination.solvers import (
    eliminate,
    row_echelon,
    rank,
    rank_by_pivots,
    determinant,
    determinant_recursive,
    inverse,
)

__all__ = [
    "eliminate",
    "row_echelon",
    "rank",
    "rank_by_pivots",
    "determinant",
    "determinant_recursive",
    "inverse",
    "EchelonParams",
    "EchelonSolution",
]
