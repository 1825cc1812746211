"""
Free-function forms of the container shape operations.
"""

from __future__ import annotations

from pyechelon.containers.matrix import Matrix
from pyechelon.containers.vector import Vector
from pyechelon.core.exceptions import ValidationError


def transpose(matrix: Matrix) -> Matrix:
    """Return the transpose of ``matrix`` (dimensions swap)."""
    return matrix.transpose()


def reshape(container: Vector | Matrix, rows: int, cols: int) -> Matrix:
    """
    Reshape a Vector or Matrix into a rows x cols Matrix (row-major).

    Raises:
        InvalidReshapeError: If rows * cols differs from the element count
        ValidationError: If ``container`` is neither a Vector nor a Matrix
    """
    if isinstance(container, Vector):
        return container.to_matrix(rows, cols)
    if isinstance(container, Matrix):
        return container.reshape(rows, cols)
    raise ValidationError(
        f"reshape expects a Vector or Matrix, got {type(container).__name__}"
    )
