"""
Core infrastructure for PyEchelon.

This module provides shared abstractions and utilities used by the
containers and the elimination algorithms.

Key components:
    protocols: Field, Backend protocols
    fields: REAL, COMPLEX, RATIONAL field instances
    result: Generic Result[P] envelope
    exceptions: Exception hierarchy
    validation: Input validators
    tolerances: Pivot tolerance and comparison tiers
    timing: Section timer
"""

from pyechelon.core.protocols import Field, Backend
from pyechelon.core.fields import (
    REAL,
    COMPLEX,
    RATIONAL,
    RealField,
    ComplexField,
    RationalField,
)
from pyechelon.core.result import Result
from pyechelon.core.exceptions import (
    PyEchelonError,
    ValidationError,
    DimensionError,
    NotSquareError,
    InvalidReshapeError,
    NumericalError,
    SingularMatrixError,
)

__all__ = [
    # Protocols
    "Field",
    "Backend",
    # Fields
    "REAL",
    "COMPLEX",
    "RATIONAL",
    "RealField",
    "ComplexField",
    "RationalField",
    # Result
    "Result",
    # Exceptions
    "PyEchelonError",
    "ValidationError",
    "DimensionError",
    "NotSquareError",
    "InvalidReshapeError",
    "NumericalError",
    "SingularMatrixError",
]
