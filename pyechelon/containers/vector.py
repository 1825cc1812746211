"""
Vector: immutable ordered sequence of field elements.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, NDArray

from pyechelon.core.exceptions import ValidationError
from pyechelon.core.fields import COMPLEX, REAL
from pyechelon.core.protocols import Field
from pyechelon.core.validation import check_1d, check_array, check_finite, check_reshape

if TYPE_CHECKING:
    from pyechelon.containers.matrix import Matrix


@dataclass(frozen=True)
class Vector:
    """
    Fixed-size vector over a scalar field.

    Invariant: size == len(data). Immutable after construction.

    Construction:
        Vector.from_values([1, 2, 3])
        Vector.from_array(np.arange(4.0))
    """
    _data: tuple[Any, ...]
    _field: Field

    def __post_init__(self) -> None:
        if not isinstance(self._data, tuple):
            raise ValidationError(
                f"Vector: data must be a tuple, got {type(self._data).__name__}"
            )

    @classmethod
    def from_values(cls, values: Iterable[Any], field: Field = REAL) -> Vector:
        """
        Build a Vector, passing every value through field.coerce.

        NaN and Inf are rejected for REAL and COMPLEX.
        """
        data = []
        for i, value in enumerate(values):
            try:
                data.append(field.coerce(value))
            except (TypeError, ValueError) as e:
                raise ValidationError(
                    f"values: entry {i} ({value!r}) is not a {field.name} number: {e}"
                ) from e
        if field == REAL or field == COMPLEX:
            check_finite(np.asarray(data), 'values')
        return cls(_data=tuple(data), _field=field)

    @classmethod
    def from_array(cls, array: ArrayLike) -> Vector:
        """
        Build a Vector from a 1D numpy array or array-like.

        Complex dtypes produce a vector over COMPLEX, everything else REAL.
        """
        arr = check_array(array, 'array')
        check_1d(arr, 'array')
        check_finite(arr, 'array')
        field = COMPLEX if np.iscomplexobj(arr) else REAL
        return cls.from_values(arr.tolist(), field)

    @property
    def data(self) -> tuple[Any, ...]:
        return self._data

    @property
    def size(self) -> int:
        return len(self._data)

    @property
    def field(self) -> Field:
        return self._field

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def __getitem__(self, i: int) -> Any:
        return self._data[i]

    def to_matrix(self, rows: int, cols: int) -> 'Matrix':
        """
        Lay the entries out row-major as a rows x cols Matrix.

        Raises:
            InvalidReshapeError: If rows * cols != size
        """
        from pyechelon.containers.matrix import Matrix

        check_reshape(self.size, rows, cols, 'vector')
        data = tuple(self._data[i * cols:(i + 1) * cols] for i in range(rows))
        return Matrix(_data=data, _rows=rows, _cols=cols, _field=self._field)

    def reshape(self, rows: int, cols: int) -> 'Matrix':
        """Alias of to_matrix()."""
        return self.to_matrix(rows, cols)

    def to_numpy(self) -> NDArray[Any]:
        if self._field == REAL:
            return np.array(self._data, dtype=np.float64)
        if self._field == COMPLEX:
            return np.array(self._data, dtype=np.complex128)
        arr = np.empty(len(self._data), dtype=object)
        for i, value in enumerate(self._data):
            arr[i] = value
        return arr

    def __repr__(self) -> str:
        return f"Vector(size={self.size}, field={self._field.name})"
