"""
Matrix: immutable rectangular grid of field elements.

Storage is a tuple of row tuples, so instances can be shared freely
without observable aliasing. Algorithms that need to mutate take a
private working copy through to_lists().
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Sequence, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyechelon.core.exceptions import ValidationError
from pyechelon.core.fields import COMPLEX, REAL
from pyechelon.core.protocols import Field
from pyechelon.core.validation import (
    check_2d,
    check_array,
    check_finite,
    check_rectangular,
    check_reshape,
)

if TYPE_CHECKING:
    from pyechelon.containers.vector import Vector


@dataclass(frozen=True)
class Matrix:
    """
    Dense matrix over a scalar field, row-major.

    Invariants: rows == len(data), every row has cols entries,
    rows >= 0 and cols >= 0. Immutable after construction.

    Construction:
        Matrix.from_rows([[1, 2], [3, 4]])
        Matrix.from_rows([[1j, 0], [0, 1j]], field=COMPLEX)
        Matrix.from_array(np.eye(3))
        Matrix.identity(3)
    """
    _data: tuple[tuple[Any, ...], ...]
    _rows: int
    _cols: int
    _field: Field

    def __post_init__(self) -> None:
        if self._rows < 0 or self._cols < 0:
            raise ValidationError(
                f"Matrix: dimensions must be non-negative, got {self._rows}x{self._cols}"
            )
        if not isinstance(self._data, tuple):
            raise ValidationError(
                f"Matrix: data must be a tuple of row tuples, got {type(self._data).__name__}"
            )
        if len(self._data) != self._rows:
            raise ValidationError(
                f"Matrix: rows={self._rows} but data has {len(self._data)} rows"
            )
        for i, row in enumerate(self._data):
            if not isinstance(row, tuple):
                raise ValidationError(
                    f"Matrix: row {i} must be a tuple, got {type(row).__name__}"
                )
            if len(row) != self._cols:
                raise ValidationError(
                    f"Matrix: jagged rows, row {i} has {len(row)} entries "
                    f"but cols={self._cols}"
                )

    @classmethod
    def from_rows(
        cls,
        rows: Iterable[Sequence[Any]],
        field: Field = REAL,
        *,
        cols: int | None = None,
    ) -> Matrix:
        """
        Build a Matrix from a nested sequence of rows.

        Parameters
        ----------
        rows : iterable of sequences
            Row-major entries. Every row must have the same length.
        field : Field
            Scalar field the entries belong to. Each entry is passed
            through field.coerce. NaN and Inf are rejected for REAL
            and COMPLEX, as in from_array.
        cols : int, optional
            Column count. Only needed to describe an empty (0 x cols)
            matrix; otherwise it must agree with the row length.
        """
        rows = list(rows)
        width = check_rectangular(rows, 'rows')

        if cols is None:
            cols = width
        elif rows and cols != width:
            raise ValidationError(
                f"rows: cols={cols} given but rows have {width} entries"
            )
        elif cols < 0:
            raise ValidationError(f"cols must be non-negative, got {cols}")

        data = tuple(
            tuple(_coerce(field, value, (i, j)) for j, value in enumerate(row))
            for i, row in enumerate(rows)
        )
        if field == REAL or field == COMPLEX:
            check_finite(np.asarray(data), 'rows')
        return cls(_data=data, _rows=len(data), _cols=cols, _field=field)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Matrix:
        """
        Build a Matrix from a 2D numpy array or array-like.

        Complex dtypes produce a matrix over COMPLEX; everything else is
        converted to float64 and placed over REAL. NaN and Inf are rejected.
        """
        arr = check_array(array, 'array')
        check_2d(arr, 'array')
        check_finite(arr, 'array')

        field = COMPLEX if np.iscomplexobj(arr) else REAL
        return cls.from_rows(arr.tolist(), field, cols=arr.shape[1])

    @classmethod
    def zeros(cls, rows: int, cols: int, field: Field = REAL) -> Matrix:
        """rows x cols matrix of field.zero."""
        if rows < 0 or cols < 0:
            raise ValidationError(f"dimensions must be non-negative, got {rows}x{cols}")
        row = tuple(field.zero for _ in range(cols))
        return cls(_data=tuple(row for _ in range(rows)), _rows=rows, _cols=cols, _field=field)

    @classmethod
    def identity(cls, n: int, field: Field = REAL) -> Matrix:
        """n x n identity matrix."""
        if n < 0:
            raise ValidationError(f"n must be non-negative, got {n}")
        data = tuple(
            tuple(field.one if i == j else field.zero for j in range(n))
            for i in range(n)
        )
        return cls(_data=data, _rows=n, _cols=n, _field=field)

    @classmethod
    def _from_lists(cls, rows: list[list[Any]], cols: int, field: Field) -> Matrix:
        """Freeze a working copy produced by an algorithm. Entries are not re-coerced."""
        data = tuple(tuple(row) for row in rows)
        return cls(_data=data, _rows=len(data), _cols=cols, _field=field)

    # --- Shape ---

    @property
    def data(self) -> tuple[tuple[Any, ...], ...]:
        """Entries as a tuple of row tuples."""
        return self._data

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def size(self) -> int:
        """Total number of entries."""
        return self._rows * self._cols

    @property
    def field(self) -> Field:
        return self._field

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    # --- Access ---

    def __getitem__(self, index: tuple[int, int]) -> Any:
        i, j = index
        return self._data[i][j]

    def row(self, i: int) -> tuple[Any, ...]:
        return self._data[i]

    def column(self, j: int) -> tuple[Any, ...]:
        return tuple(row[j] for row in self._data)

    # --- Transformations (each returns a new Matrix) ---

    def transpose(self) -> Matrix:
        """Swap row and column indices; a rows x cols matrix becomes cols x rows."""
        data = tuple(
            tuple(self._data[i][j] for i in range(self._rows))
            for j in range(self._cols)
        )
        return Matrix(_data=data, _rows=self._cols, _cols=self._rows, _field=self._field)

    def reshape(self, rows: int, cols: int) -> Matrix:
        """
        Lay the entries out row-major as a rows x cols matrix.

        Raises:
            InvalidReshapeError: If rows * cols != self.size
        """
        check_reshape(self.size, rows, cols, 'matrix')
        flat = [value for row in self._data for value in row]
        data = tuple(tuple(flat[i * cols:(i + 1) * cols]) for i in range(rows))
        return Matrix(_data=data, _rows=rows, _cols=cols, _field=self._field)

    def to_vector(self) -> 'Vector':
        """Flatten row-major into a Vector."""
        from pyechelon.containers.vector import Vector
        return Vector(
            _data=tuple(value for row in self._data for value in row),
            _field=self._field,
        )

    def to_lists(self) -> list[list[Any]]:
        """Fresh mutable list-of-lists copy of the entries."""
        return [list(row) for row in self._data]

    def to_numpy(self) -> NDArray[Any]:
        """
        Convert to a numpy array.

        float64 for REAL, complex128 for COMPLEX, object dtype for any
        other field (e.g. exact rationals).
        """
        if self._field == REAL:
            dtype = np.float64
        elif self._field == COMPLEX:
            dtype = np.complex128
        else:
            dtype = object
        arr = np.empty((self._rows, self._cols), dtype=dtype)
        for i, row in enumerate(self._data):
            for j, value in enumerate(row):
                arr[i, j] = value
        return arr

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, cols={self._cols}, field={self._field.name})"

    def __str__(self) -> str:
        if not self._data:
            return f"[] ({self._rows}x{self._cols})"
        cells = [[str(value) for value in row] for row in self._data]
        width = max((len(c) for row in cells for c in row), default=0)
        return "\n".join(
            "[" + ", ".join(c.rjust(width) for c in row) + "]" for row in cells
        )


def _coerce(field: Field, value: Any, position: tuple[int, int]) -> Any:
    try:
        return field.coerce(value)
    except (TypeError, ValueError) as e:
        raise ValidationError(
            f"rows: entry {position} ({value!r}) is not a {field.name} number: {e}"
        ) from e
