"""
Generic result container for linmath computations.

The Result class provides a standardized envelope for computations that
report more than a bare number: which method ran, what it observed along
the way, how long it took and which non-fatal issues it hit.

Design decisions:
    - Generic over parameter payload P for type safety
    - info dict for flexible metadata (method, swaps, pivots)
    - timing is optional (don't burden unit tests)
    - Immutable (frozen=True) so a result cannot drift from its inputs
"""

from dataclasses import dataclass, field
from typing import TypeVar, Generic, Any

P = TypeVar('P')  # Parameter payload type


@dataclass(frozen=True)
class Result(Generic[P]):
    """
    Immutable result envelope.

    Type Parameters:
        P: The parameter payload type

    Attributes:
        params: Computed quantities
        info: Structured metadata (method, row swaps, diagnostics)
        timing: Execution timing breakdown, or None if not measured
        method_name: Identifier of the algorithm that produced this result
        warnings: Non-fatal issues encountered during computation

    Examples:
        >>> Result(
        ...     params=DeterminantParams(value=-2.0, swaps=1, pivots=(3.0, 0.667)),
        ...     info={'method': 'gauss_jordan', 'dtype': 'float64'},
        ...     timing={'total_seconds': 0.0001, 'elimination': 0.00008},
        ...     method_name='gauss_jordan'
        ... )
    """
    params: P
    info: dict[str, Any]
    timing: dict[str, float] | None
    method_name: str
    warnings: tuple[str, ...] = field(default_factory=tuple)

    def has_warning(self, substring: str) -> bool:
        """Check if any warning contains the given substring."""
        return any(substring in w for w in self.warnings)
