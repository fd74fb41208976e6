"""Grid parameters, problem set-up and PGM slice output."""

from __future__ import annotations

from pathlib import Path

import numpy as np

XDIM = 128
YDIM = 128
ZDIM = 128
SHAPE = (XDIM, YDIM, ZDIM)

K_MAX = 1000
NU_MAX = 1e-3


def clear(x: np.ndarray) -> None:
    """Set every element of ``x`` to zero in place."""
    x[...] = 0.0


def initialize_problem(shape: tuple[int, int, int] = SHAPE) -> tuple[np.ndarray, np.ndarray]:
    """Return the zero initial guess ``x`` and the right-hand side ``b``.

    ``b`` is one on a square patch of the first two ``k`` layers; the patch
    spans ``[X/4, 3*(X/4))`` in both ``i`` and ``j``.
    """
    x = np.zeros(shape, dtype=np.float32)
    b = np.zeros(shape, dtype=np.float32)
    quarter = shape[0] // 4
    patch = slice(quarter, 3 * quarter)
    b[patch, patch, 0:2] = 1.0
    return x, b


def write_as_image(
    filename_prefix: str,
    x: np.ndarray,
    count: int,
    axis: int,
    slice_index: int,
) -> Path:
    """Write one slice of ``x`` as an ASCII PGM image and return its path.

    The file is named ``<prefix>.<count:04d>.pgm``; pixel values are
    ``x * 255`` truncated towards zero.
    """
    if x.ndim != 3:
        raise ValueError("Expected a three-dimensional array")
    if axis not in (0, 1, 2):
        raise ValueError("Invalid axis in write_as_image()")

    plane = np.take(x, slice_index, axis=axis)
    pixels = np.trunc(plane.astype(np.float64) * 255.0).astype(np.int64)
    rows, cols = plane.shape

    path = Path(f"{filename_prefix}.{count:04d}.pgm")
    with path.open("w") as output:
        output.write("P2\n")
        output.write(f"{rows} {cols}\n")
        output.write("255\n")
        for row in pixels:
            output.write("".join(f"{value} " for value in row.tolist()))
            output.write("\n")
    return path