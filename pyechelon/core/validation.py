"""
Input validation utilities for PyEchelon.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

from __future__ import annotations

from typing import Any, Sequence

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyechelon.core.exceptions import (
    DimensionError,
    InvalidReshapeError,
    NotSquareError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
) -> NDArray[Any]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    Integer and boolean data is promoted to float64; complex data is kept.

    Args:
        array: Input to validate
        name: Parameter name for error messages

    Returns:
        numpy.ndarray with floating or complex dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.asarray(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    if result.dtype == np.bool_:
        return result.astype(np.float64)

    if not np.issubdtype(result.dtype, np.number):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected numeric data"
        )

    if not np.issubdtype(result.dtype, np.inexact):
        result = result.astype(np.float64)

    return result


def check_finite(array: NDArray[Any], name: str) -> None:
    """
    Verify array contains no NaN or Inf values.

    Raises:
        ValidationError: If array contains non-finite values
    """
    if not np.all(np.isfinite(array)):
        n_nan = int(np.sum(np.isnan(array)))
        n_inf = int(np.sum(np.isinf(array)))
        raise ValidationError(
            f"{name}: contains non-finite values ({n_nan} NaN, {n_inf} Inf)"
        )


def check_ndim(array: NDArray[Any], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}",
            expected=ndim,
            actual=array.ndim,
        )


def check_1d(array: NDArray[Any], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[Any], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_rectangular(rows: Sequence[Sequence[Any]], name: str) -> int:
    """
    Verify every row of a nested sequence has the same length.

    Args:
        rows: Row-major nested sequence
        name: Parameter name for error messages

    Returns:
        The common row length (0 for an empty sequence)

    Raises:
        ValidationError: If rows are not sequences or lengths differ
    """
    lengths = []
    for i, row in enumerate(rows):
        if isinstance(row, (str, bytes)) or not hasattr(row, '__len__'):
            raise ValidationError(
                f"{name}: row {i} is not a sequence (got {type(row).__name__})"
            )
        lengths.append(len(row))

    if not lengths:
        return 0

    if len(set(lengths)) > 1:
        raise ValidationError(
            f"{name}: jagged rows, lengths {lengths}; every row must have "
            f"{lengths[0]} entries"
        )
    return lengths[0]


def check_square(shape: tuple[int, int], name: str) -> None:
    """
    Verify a (rows, cols) shape is square.

    Raises:
        NotSquareError: If rows != cols
    """
    rows, cols = shape
    if rows != cols:
        raise NotSquareError(
            f"{name}: requires a square matrix, got {rows}x{cols}",
            shape=shape,
        )


def check_reshape(size: int, rows: int, cols: int, name: str) -> None:
    """
    Verify a container of ``size`` elements can be laid out as rows x cols.

    Raises:
        InvalidReshapeError: If dimensions are negative or rows*cols != size
    """
    if rows < 0 or cols < 0:
        raise InvalidReshapeError(
            f"{name}: dimensions must be non-negative, got {rows}x{cols}",
            size=size,
            requested=(rows, cols),
        )
    if rows * cols != size:
        raise InvalidReshapeError(
            f"{name}: cannot reshape {size} elements into {rows}x{cols} "
            f"({rows * cols} elements)",
            size=size,
            requested=(rows, cols),
        )


def check_same_field(a: Any, b: Any, names: tuple[str, str]) -> None:
    """
    Verify two containers are defined over the same field.

    Raises:
        ValidationError: If the fields differ
    """
    if a.field != b.field:
        raise ValidationError(
            f"{names[0]} is over the {a.field.name} field but {names[1]} is over "
            f"the {b.field.name} field"
        )
