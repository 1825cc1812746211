"""
Concrete scalar fields.

Each field is a small frozen dataclass satisfying the Field protocol.
No field inherits from another; shared behaviour is simply repeated,
since the operations are one-liners.

Module singletons:
    REAL:     Python float, tolerance PIVOT_EPS
    COMPLEX:  Python complex (re, im pair), modulus as magnitude
    RATIONAL: fractions.Fraction, exact zero test
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from numbers import Complex as _ComplexNumber
from typing import Any

from pyechelon.core.tolerances import PIVOT_EPS


@dataclass(frozen=True)
class RealField:
    """Real numbers represented as Python floats."""
    name: str = 'real'
    eps: float = PIVOT_EPS

    @property
    def zero(self) -> float:
        return 0.0

    @property
    def one(self) -> float:
        return 1.0

    def coerce(self, value: Any) -> float:
        if isinstance(value, (str, bytes)):
            raise TypeError(f"expected a real number, got {type(value).__name__}")
        return float(value)

    def add(self, a: float, b: float) -> float:
        return a + b

    def sub(self, a: float, b: float) -> float:
        return a - b

    def mul(self, a: float, b: float) -> float:
        return a * b

    def div(self, a: float, b: float) -> float:
        return a / b

    def negate(self, a: float) -> float:
        return -a

    def absolute(self, a: float) -> float:
        return abs(a)

    def is_near_zero(self, a: float) -> bool:
        return abs(a) < self.eps


@dataclass(frozen=True)
class ComplexField:
    """
    Complex numbers represented as Python complex.

    Pivot selection orders candidates by modulus; the zero test applies the
    same absolute tolerance as the real field to the modulus.
    """
    name: str = 'complex'
    eps: float = PIVOT_EPS

    @property
    def zero(self) -> complex:
        return 0j

    @property
    def one(self) -> complex:
        return 1 + 0j

    def coerce(self, value: Any) -> complex:
        if isinstance(value, (str, bytes)) or not isinstance(value, _ComplexNumber):
            # numpy scalars register with numbers.Complex; anything else is rejected
            raise TypeError(f"expected a complex number, got {type(value).__name__}")
        return complex(value)

    def add(self, a: complex, b: complex) -> complex:
        return a + b

    def sub(self, a: complex, b: complex) -> complex:
        return a - b

    def mul(self, a: complex, b: complex) -> complex:
        return a * b

    def div(self, a: complex, b: complex) -> complex:
        return a / b

    def negate(self, a: complex) -> complex:
        return -a

    def absolute(self, a: complex) -> float:
        return abs(a)

    def is_near_zero(self, a: complex) -> bool:
        return abs(a) < self.eps


@dataclass(frozen=True)
class RationalField:
    """
    Rational numbers represented as fractions.Fraction.

    Arithmetic is exact, so the zero test is exact as well (eps = 0).
    Floats are converted through their exact binary value; pass strings
    such as '1/3' or Fraction instances for exact decimal input.
    """
    name: str = 'rational'
    eps: float = 0.0

    @property
    def zero(self) -> Fraction:
        return Fraction(0)

    @property
    def one(self) -> Fraction:
        return Fraction(1)

    def coerce(self, value: Any) -> Fraction:
        return Fraction(value)

    def add(self, a: Fraction, b: Fraction) -> Fraction:
        return a + b

    def sub(self, a: Fraction, b: Fraction) -> Fraction:
        return a - b

    def mul(self, a: Fraction, b: Fraction) -> Fraction:
        return a * b

    def div(self, a: Fraction, b: Fraction) -> Fraction:
        return a / b

    def negate(self, a: Fraction) -> Fraction:
        return -a

    def absolute(self, a: Fraction) -> Fraction:
        return abs(a)

    def is_near_zero(self, a: Fraction) -> bool:
        return a == 0


REAL = RealField()
COMPLEX = ComplexField()
RATIONAL = RationalField()
