"""
RowIndex: the permutable table of row offsets.

Entry ``i`` is the flat buffer offset of the first element of logical
row ``i``. Its order is the logical row order of a Matrix and may differ
from the physical layout after swaps.
"""

from __future__ import annotations

from typing import Iterator

import numpy as np
from numpy.typing import NDArray


class RowIndex:
    """
    Ordered offsets ``row_index[i] = k * cols`` forming a permutation of
    the physical rows.
    """

    def __init__(self, rows: int, cols: int):
        self._cols = cols
        self._offsets: NDArray[np.intp] = np.arange(rows, dtype=np.intp) * cols

    def swap(self, a: int, b: int) -> None:
        """Exchange two entries. O(1); no element moves."""
        offsets = self._offsets
        offsets[a], offsets[b] = offsets[b], offsets[a]

    @property
    def offsets(self) -> NDArray[np.intp]:
        """Read-only view of the offsets in logical order."""
        view = self._offsets.view()
        view.flags.writeable = False
        return view

    def permutation(self) -> tuple[int, ...]:
        """Physical row number of each logical row."""
        if self._cols == 0:
            return tuple(range(len(self._offsets)))
        return tuple(int(o) // self._cols for o in self._offsets)

    def is_identity(self) -> bool:
        """True when logical and physical order coincide."""
        return self.permutation() == tuple(range(len(self._offsets)))

    def __len__(self) -> int:
        return len(self._offsets)

    def __getitem__(self, i: int) -> int:
        return int(self._offsets[i])

    def __iter__(self) -> Iterator[int]:
        return (int(o) for o in self._offsets)

    def __repr__(self) -> str:
        return f"RowIndex({self.permutation()})"
