"""Compressed sparse row matrices and a row-wise builder for them."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import scipy.sparse


@dataclass(frozen=True, eq=False)
class CSRMatrix:
    """A square matrix stored in compressed sparse row form (zero-based)."""

    size: int
    row_offsets: np.ndarray
    column_indices: np.ndarray
    values: np.ndarray

    @property
    def nnz(self) -> int:
        """Number of stored entries."""
        return int(self.values.shape[0])

    def to_scipy(self) -> scipy.sparse.csr_matrix:
        """Return the matrix as a SciPy CSR matrix sharing the same layout."""
        return scipy.sparse.csr_matrix(
            (self.values, self.column_indices, self.row_offsets),
            shape=(self.size, self.size),
        )


class CSRMatrixBuilder:
    """Collects entries of a square sparse matrix row by row.

    Accessing an entry, for reading or writing, stores it explicitly,
    starting from zero if it was not present before.
    """

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("Matrix size must be non-negative")
        self.size = size
        self._rows: list[dict[int, float]] = [{} for _ in range(size)]

    def _check(self, key: tuple[int, int]) -> tuple[int, int]:
        try:
            i, j = key
        except (TypeError, ValueError):
            raise TypeError("Matrix index must be a pair (row, column)") from None
        if not (0 <= i < self.size and 0 <= j < self.size):
            raise IndexError("Matrix index out of bounds")
        return i, j

    def __getitem__(self, key: tuple[int, int]) -> float:
        i, j = self._check(key)
        return self._rows[i].setdefault(j, 0.0)

    def __setitem__(self, key: tuple[int, int], value: float) -> None:
        i, j = self._check(key)
        self._rows[i][j] = float(value)

    def to_csr(self) -> CSRMatrix:
        """Build a CSR matrix with column indices sorted within each row."""
        counts = [len(row) for row in self._rows]
        row_offsets = np.zeros(self.size + 1, dtype=np.int64)
        np.cumsum(counts, out=row_offsets[1:])
        entries = [item for row in self._rows for item in sorted(row.items())]
        column_indices = np.fromiter((col for col, _ in entries), dtype=np.int64, count=len(entries))
        values = np.fromiter((val for _, val in entries), dtype=np.float32, count=len(entries))
        return CSRMatrix(self.size, row_offsets, column_indices, values)