"""
Core protocols for PyEchelon.

These define structural interfaces that scalar fields and computational
backends must satisfy. We use Protocol (structural typing) rather than ABC
(nominal typing) so any scalar type can be plugged in without inheriting
from a library base class.

Design Principles:
    - Minimal contracts: prescribe only what elimination actually needs
    - Type-safe: use generics to preserve type information through pipelines
"""

from typing import Any, Protocol, TypeVar, runtime_checkable

# Type variables for generic payloads
K = TypeVar('K')  # Scalar element type
P = TypeVar('P')  # Parameter payload type
D = TypeVar('D')  # Input container type


@runtime_checkable
class Field(Protocol[K]):
    """
    Arithmetic contract a scalar type must satisfy to instantiate the kernel.

    Every elimination step (pivot search, row scaling, row subtraction,
    determinant accumulation) is expressed through these operations, so the
    algorithms never depend on a concrete numeric type.

    Attributes:
        name: Short identifier ('real', 'complex', 'rational')
        eps: Absolute tolerance below which a pivot is treated as zero
        zero: Additive identity
        one: Multiplicative identity
    """

    name: str
    eps: float

    @property
    def zero(self) -> K:
        ...

    @property
    def one(self) -> K:
        ...

    def coerce(self, value: Any) -> K:
        """
        Convert an arbitrary input value to a field element.

        Raises:
            TypeError or ValueError: If the value has no representation
        """
        ...

    def add(self, a: K, b: K) -> K:
        ...

    def sub(self, a: K, b: K) -> K:
        ...

    def mul(self, a: K, b: K) -> K:
        ...

    def div(self, a: K, b: K) -> K:
        ...

    def negate(self, a: K) -> K:
        ...

    def absolute(self, a: K) -> Any:
        """
        Magnitude of an element.

        The return value only needs to support ordering and comparison with
        ``eps``; it is used for pivot selection.
        """
        ...

    def is_near_zero(self, a: K) -> bool:
        """True if ``a`` is indistinguishable from zero under this field's tolerance."""
        ...


@runtime_checkable
class Backend(Protocol[D, P]):
    """
    Protocol for computational backends.

    Each backend takes an input container and produces a parameter payload
    wrapped in a Result envelope. Backends are stateless; all configuration
    is passed at construction time.

    Type Parameters:
        D: The input type this backend accepts
        P: The parameter payload type this backend produces
    """

    @property
    def name(self) -> str:
        """
        Backend identifier.

        Convention: '{device}_{algorithm}', e.g. 'cpu_gauss_jordan'.
        """
        ...

    def solve(self, design: D) -> 'Result[P]':
        """
        Execute the computation.

        Raises:
            NumericalError: If numerical issues prevent a solution
            ValidationError: If the input is invalid for this backend
        """
        ...
