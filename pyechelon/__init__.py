"""
PyEchelon: generic pivoted Gaussian elimination for small dense matrices.

Immutable Vector/Matrix containers over an abstract scalar field (real,
complex or rational), and the algorithms built on partial-pivoting
elimination: reduced row-echelon form, rank, determinant and inverse.

Submodules:
    core: Field protocol, fields, exceptions, validation, tolerances
    containers: Vector, Matrix, products
    elimination: row_echelon, rank, determinant, inverse
"""

__version__ = "0.1.0"

from pyechelon.core.fields import REAL, COMPLEX, RATIONAL
from pyechelon.core.exceptions import (
    PyEchelonError,
    ValidationError,
    DimensionError,
    NotSquareError,
    InvalidReshapeError,
    NumericalError,
    SingularMatrixError,
)
from pyechelon.containers import (
    Matrix,
    Vector,
    reshape,
    transpose,
    matmul,
    matvec,
    trace,
    allclose,
)
from pyechelon.elimination import (
    eliminate,
    row_echelon,
    rank,
    rank_by_pivots,
    determinant,
    determinant_recursive,
    inverse,
)

__all__ = [
    "__version__",
    # Fields
    "REAL",
    "COMPLEX",
    "RATIONAL",
    # Containers
    "Matrix",
    "Vector",
    "reshape",
    "transpose",
    "matmul",
    "matvec",
    "trace",
    "allclose",
    # Elimination
    "eliminate",
    "row_echelon",
    "rank",
    "rank_by_pivots",
    "determinant",
    "determinant_recursive",
    "inverse",
    # Exceptions
    "PyEchelonError",
    "ValidationError",
    "DimensionError",
    "NotSquareError",
    "InvalidReshapeError",
    "NumericalError",
    "SingularMatrixError",
]
