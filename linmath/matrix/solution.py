"""
Determinant solution types.

DeterminantSolution wraps Result[DeterminantParams] and provides a
printable summary.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from linmath.core.result import Result


@dataclass(frozen=True)
class DeterminantParams:
    """
    Parameter payload for a determinant computation.

    Attributes
    ----------
    value : numpy scalar
        The determinant, in the matrix element type.
    swaps : int
        Row interchanges performed during elimination.
    pivots : tuple or None
        Diagonal of the reduced working copy (Gauss-Jordan only).
    """
    value: Any
    swaps: int
    pivots: tuple[float, ...] | None = None


@dataclass
class DeterminantSolution:
    """User-facing determinant result."""
    _result: Result[DeterminantParams]

    @property
    def value(self) -> Any:
        """The determinant."""
        return self._result.params.value

    @property
    def swaps(self) -> int:
        return self._result.params.swaps

    @property
    def pivots(self) -> tuple[float, ...] | None:
        return self._result.params.pivots

    @property
    def method(self) -> str:
        return self._result.method_name

    @property
    def is_singular(self) -> bool:
        """True when the determinant is zero or not finite."""
        return bool(self._result.info['singular'])

    @property
    def info(self) -> dict[str, Any]:
        return self._result.info

    @property
    def timing(self) -> dict[str, float] | None:
        return self._result.timing

    @property
    def warnings(self) -> tuple[str, ...]:
        return self._result.warnings

    def __float__(self) -> float:
        return float(self.value)

    def summary(self) -> str:
        """Human-readable report of the computation."""
        info = self._result.info
        lines = [
            "",
            "\tDeterminant",
            "",
            f"matrix:  {info['rows']}x{info['cols']} {info['dtype']}",
            f"method:  {self.method}",
            f"value:   {self.value!s}",
            f"row swaps: {self.swaps}",
        ]
        if self.pivots is not None:
            pivots = np.array2string(np.asarray(self.pivots), precision=6, separator=', ')
            lines.append(f"pivots:  {pivots}")
        if self.timing is not None:
            lines.append(f"elapsed: {self.timing['total_seconds']:.6f}s")
        for warning in self.warnings:
            lines.append(f"warning: {warning}")
        lines.append("")
        return "\n".join(lines)

    def __repr__(self) -> str:
        return f"DeterminantSolution(value={self.value!s}, method={self.method!r})"
