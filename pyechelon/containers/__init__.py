"""
Vector and Matrix containers.

Immutable value types over a scalar Field, plus the shape operations and
products that callers use alongside the elimination algorithms.

Public API:
    Vector, Matrix           - containers
    transpose(m)             - swap dimensions
    reshape(x, rows, cols)   - row-major relayout of a Vector or Matrix
    matmul(a, b)             - matrix product
    matvec(a, v)             - matrix-vector product
    trace(a)                 - diagonal sum
    allclose(a, b, atol)     - approximate entrywise comparison
"""

from pyechelon.containers.matrix import Matrix
from pyechelon.containers.vector import Vector
from pyechelon.containers.shape import reshape, transpose
from pyechelon.containers.products import allclose, matmul, matvec, trace

__all__ = [
    "Matrix",
    "Vector",
    "reshape",
    "transpose",
    "matmul",
    "matvec",
    "trace",
    "allclose",
]
