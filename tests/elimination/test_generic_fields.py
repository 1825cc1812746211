"""
Elimination over a user-supplied field.

The algorithms only touch scalars through the Field protocol, so a
finite field defined here (integers mod 7) must work unchanged.
"""

from dataclasses import dataclass

import pytest

from pyechelon import (
    Matrix,
    determinant,
    determinant_recursive,
    eliminate,
    inverse,
    matmul,
    rank,
    rank_by_pivots,
)
from pyechelon.core.exceptions import SingularMatrixError
from pyechelon.core.protocols import Field


@dataclass(frozen=True)
class PrimeField:
    """Integers modulo a prime. Every non-zero element is a valid pivot."""
    p: int = 7
    name: str = 'gf7'
    eps: float = 0.0

    @property
    def zero(self) -> int:
        return 0

    @property
    def one(self) -> int:
        return 1

    def coerce(self, value):
        return int(value) % self.p

    def add(self, a, b):
        return (a + b) % self.p

    def sub(self, a, b):
        return (a - b) % self.p

    def mul(self, a, b):
        return (a * b) % self.p

    def div(self, a, b):
        return (a * pow(b, -1, self.p)) % self.p

    def negate(self, a):
        return (-a) % self.p

    def absolute(self, a):
        return 0 if a % self.p == 0 else 1

    def is_near_zero(self, a):
        return a % self.p == 0


GF7 = PrimeField()


def test_satisfies_protocol():
    assert isinstance(GF7, Field)


def test_coercion_reduces_entries():
    m = Matrix.from_rows([[8, -1]], GF7)
    assert m.row(0) == (1, 6)


def test_determinant():
    m = Matrix.from_rows([[1, 2], [3, 4]], GF7)
    assert determinant(m) == 5
    assert determinant_recursive(m) == 5


def test_determinant_3x3_agrees():
    m = Matrix.from_rows([[2, 3, 1], [4, 0, 6], [5, 5, 3]], GF7)
    assert determinant(m) == determinant_recursive(m)


def test_rank_depends_on_field():
    # Over the reals this is rank 2; mod 7 the second row is 3x the first
    m = Matrix.from_rows([[1, 2], [3, -1]], GF7)
    assert rank(m) == 1
    assert rank_by_pivots(m) == 1

    m = Matrix.from_rows([[1, 1], [1, 8]], GF7)
    assert rank(m) == 1


def test_row_echelon():
    m = Matrix.from_rows([[2, 4, 1], [1, 2, 3]], GF7)
    sol = eliminate(m)
    assert sol.pivot_columns == (0, 2)
    assert sol.reduced.row(0) == (1, 2, 0)
    assert sol.reduced.row(1) == (0, 0, 1)
    assert sol.warnings == ()


def test_inverse():
    m = Matrix.from_rows([[1, 2], [3, 4]], GF7)
    inv = inverse(m)
    assert inv.field == GF7
    assert matmul(m, inv) == Matrix.identity(2, GF7)
    assert matmul(inv, m) == Matrix.identity(2, GF7)


def test_inverse_singular():
    m = Matrix.from_rows([[1, 2], [3, -1]], GF7)
    with pytest.raises(SingularMatrixError):
        inverse(m)
