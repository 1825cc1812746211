"""
Tolerance constants for numerical decisions and comparisons.

Two kinds of tolerance live here:
- PIVOT_EPS decides, during elimination, whether a candidate pivot is zero.
- ToleranceTier values describe how closely results are expected to match
  when checked against each other (inverse round trip, cofactor oracle).

Used by the fields, the elimination kernels and the test suite.
"""

from dataclasses import dataclass
from typing import Literal


# Absolute magnitude below which a pivot is treated as zero
PIVOT_EPS = 1e-10

# Smallest/largest pivot magnitude ratio below which inversion warns.
# The result is still returned; only a RuntimeWarning is issued.
ILL_CONDITIONED_PIVOT_RATIO = 1e-12


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    atol: float
    name: str
    description: str


# A · inverse(A) against the identity
INVERSE_CHECK = ToleranceTier(
    atol=1e-8,
    name='inverse_check',
    description='Round trip A @ inv(A) ≈ I in floating point',
)

# Elimination determinant against Laplace expansion
COFACTOR_AGREEMENT = ToleranceTier(
    atol=1e-6,
    name='cofactor_agreement',
    description='Elimination determinant vs cofactor expansion',
)

# Exact fields (rationals): results must match exactly
EXACT = ToleranceTier(
    atol=0.0,
    name='exact',
    description='Exact arithmetic: no rounding error allowed',
)


def select_tolerance(
    field_name: str,
    check: Literal['inverse', 'cofactor'] = 'inverse',
) -> ToleranceTier:
    """Select the comparison tier for a field and a kind of check."""
    if field_name == 'rational':
        return EXACT
    if check == 'cofactor':
        return COFACTOR_AGREEMENT
    return INVERSE_CHECK
