"""Assembly of the upper triangle of the 7-point Laplacian on a 3-D grid."""

from __future__ import annotations

import numpy as np

from .csr import CSRMatrix
from .utilities import SHAPE


def linear_index(i: int, j: int, k: int, shape: tuple[int, int, int] = SHAPE) -> int:
    """Row-major index of grid node ``(i, j, k)``."""
    _, ydim, zdim = shape
    return (i * ydim + j) * zdim + k


def build_upper_triangular_laplacian_matrix(shape: tuple[int, int, int] = SHAPE) -> CSRMatrix:
    """Upper triangle of the Dirichlet Laplacian, identity on boundary nodes.

    Interior nodes carry 6 on the diagonal and -1 towards each following
    interior neighbour along ``k``, ``j`` and ``i``; boundary nodes carry 1.
    """
    if len(shape) != 3 or any(int(d) <= 0 for d in shape):
        raise ValueError("Grid shape must be three positive dimensions")
    xdim, ydim, zdim = (int(d) for d in shape)
    size = xdim * ydim * zdim

    nodes = np.arange(size, dtype=np.int64).reshape(xdim, ydim, zdim)
    interior = np.zeros((xdim, ydim, zdim), dtype=bool)
    interior[1:-1, 1:-1, 1:-1] = True

    rows = [nodes.ravel()]
    cols = [nodes.ravel()]
    vals = [np.where(interior, 6.0, 1.0).ravel()]

    for axis, stride in ((2, 1), (1, zdim), (0, ydim * zdim)):
        coupled = interior.copy()
        cut = [slice(None)] * 3
        cut[axis] = slice(max(shape[axis] - 2, 0), None)
        coupled[tuple(cut)] = False
        sources = nodes[coupled]
        rows.append(sources)
        cols.append(sources + stride)
        vals.append(np.full(sources.shape, -1.0))

    row_idx = np.concatenate(rows)
    col_idx = np.concatenate(cols)
    values = np.concatenate(vals)

    order = np.lexsort((col_idx, row_idx))
    counts = np.bincount(row_idx, minlength=size)
    row_offsets = np.zeros(size + 1, dtype=np.int64)
    np.cumsum(counts, out=row_offsets[1:])

    return CSRMatrix(
        size,
        row_offsets,
        col_idx[order],
        values[order].astype(np.float32),
    )