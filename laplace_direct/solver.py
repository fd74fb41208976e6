"""Direct sparse solution of the symmetric positive definite Laplacian system."""

from __future__ import annotations

import numpy as np
import scipy.sparse
import scipy.sparse.linalg

from .csr import CSRMatrix
from .utilities import write_as_image


class SolverError(RuntimeError):
    """Raised when the sparse direct solver cannot complete a phase."""


def _validate(matrix: CSRMatrix) -> None:
    n = matrix.size
    offsets = np.asarray(matrix.row_offsets)
    columns = np.asarray(matrix.column_indices)
    if offsets.shape != (n + 1,):
        raise SolverError("Invalid matrix: row offsets must have size + 1 entries")
    if offsets[0] != 0 or np.any(np.diff(offsets) < 0):
        raise SolverError("Invalid matrix: row offsets must start at zero and not decrease")
    if offsets[-1] != columns.shape[0] or columns.shape[0] != np.asarray(matrix.values).shape[0]:
        raise SolverError("Invalid matrix: entry counts do not match row offsets")
    if columns.size and (columns.min() < 0 or columns.max() >= n):
        raise SolverError("Invalid matrix: column index out of range")
    rows = np.repeat(np.arange(n), np.diff(offsets))
    if np.any(columns < rows):
        raise SolverError("Invalid matrix: entries below the diagonal in an upper triangular matrix")


def _symmetric_from_upper(matrix: CSRMatrix) -> scipy.sparse.csc_matrix:
    upper = matrix.to_scipy().astype(np.float64)
    diagonal = scipy.sparse.diags(upper.diagonal())
    return (upper + upper.T - diagonal).tocsc()


def direct_sparse_solver(matrix: CSRMatrix, f: np.ndarray, write_output: bool = True) -> np.ndarray:
    """Solve ``A x = f`` where ``matrix`` holds the upper triangle of symmetric ``A``.

    Returns ``x`` with the shape of ``f`` in single precision. When
    ``write_output`` is true, the middle slice along the first axis is
    written to ``x.0000.pgm``.
    """
    f = np.asarray(f)
    if f.size != matrix.size:
        raise ValueError("Right-hand side size does not match the matrix size")

    _validate(matrix)
    full = _symmetric_from_upper(matrix)

    try:
        factor = scipy.sparse.linalg.splu(full, permc_spec="MMD_AT_PLUS_A")
    except RuntimeError as exc:
        raise SolverError(f"Error during numerical factorization: {exc}") from exc

    print("Reordering completed ... ")
    print(f"Number of nonzeros in factors = {factor.L.nnz + factor.U.nnz}")
    print("Factorization completed ... ")

    rhs = f.astype(np.float64).ravel()
    solution = factor.solve(rhs)
    if not np.all(np.isfinite(solution)):
        raise SolverError("Error during solution phase")

    print("Solve completed ... ")

    x = solution.astype(np.float32).reshape(f.shape)
    if write_output:
        write_as_image("x", x, 0, 0, x.shape[0] // 2)
    return x