"""
Generic result container for PyEchelon computations.

The Result class provides a standardized envelope for backend output.
This enables shared tooling for timing and diagnostics while allowing
each algorithm to define its own parameter structure.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, pivot tolerance)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True)
"""

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope for elimination computations.

    Type Parameters:
        P: The algorithm-specific parameter payload type

    Attributes:
        params: Algorithm-specific payload (reduced matrix, pivots, etc.)
        info: Structured metadata (method, field, tolerance)
        timing: Execution timing breakdown, or None if not measured
        backend_name: Identifier of the backend that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=EchelonParams(reduced=r, pivot_columns=(0, 1), row_swaps=1),
        ...     info={'method': 'gauss_jordan', 'field': 'real'},
        ...     timing={'total_seconds': 0.0001},
        ...     backend_name='cpu_gauss_jordan'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    backend_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
