"""Command line entry point: assemble the Laplacian problem and solve it directly."""

from __future__ import annotations

import argparse

from .laplacian import build_upper_triangular_laplacian_matrix
from .solver import direct_sparse_solver
from .timer import Timer
from .utilities import SHAPE, initialize_problem


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError("dimension must be positive")
    return value


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="laplace-direct",
        description="Solve the 3-D Laplace problem with a sparse direct solver.",
    )
    parser.add_argument(
        "--dims",
        nargs=3,
        type=_positive_int,
        default=list(SHAPE),
        metavar=("X", "Y", "Z"),
        help="grid dimensions (default: %(default)s)",
    )
    parser.add_argument(
        "--no-output",
        action="store_true",
        help="do not write the solution slice as a PGM image",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Build the problem, time its initialization and solve it."""
    args = _parser().parse_args(argv)
    shape = tuple(args.dims)

    timer = Timer()
    timer.start()
    _, f = initialize_problem(shape)
    matrix = build_upper_triangular_laplacian_matrix(shape)
    timer.stop("Initialization : ")

    direct_sparse_solver(matrix, f, not args.no_output)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())