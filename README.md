# laplace-direct

This package solves the Laplace equation on a regular 3D grid with a direct sparse solver.

It assembles the upper triangle of the seven-point Laplacian as a CSR matrix. Interior
nodes carry 6 on the diagonal and -1 towards each following interior neighbour. Boundary
nodes carry an identity entry, so the right-hand side fixes their values. The full
symmetric matrix is rebuilt from the upper triangle, then factorised with SciPy's sparse
LU and solved.

The default problem is a 128 × 128 × 128 grid. The right-hand side is 1 on a square patch
that spans `[X/4, 3*(X/4))` in the first two axes, on the first two layers of the third
axis. It is 0 everywhere else.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install .[test]
```

## Command line

```
laplace-direct [--dims X Y Z] [--no-output]
```

- `--dims X Y Z` sets the grid dimensions. The default is `128 128 128`, and each value must be positive.
- `--no-output` skips writing the solution image.

The command does the following:

1. Builds the right-hand side and the matrix, then prints the time taken, e.g. `[Initialization : 1234.5ms]`.
2. Factorises and solves the system, printing a progress line after each step. One of these lines gives the number of nonzeros in the factors.
3. Unless `--no-output` is given, writes the middle slice of the solution along the first axis to `x.0000.pgm`. This is an ASCII (P2) greyscale image whose pixel values are `x * 255` truncated towards zero.

Large grids need a lot of memory and time for the factorisation. Use `--dims` to try smaller problems first.

## Library use

```python
from laplace_direct.utilities import initialize_problem, write_as_image
from laplace_direct.laplacian import build_upper_triangular_laplacian_matrix
from laplace_direct.solver import direct_sparse_solver
from laplace_direct.timer import Timer

shape = (32, 32, 32)
x, f = initialize_problem(shape)

timer = Timer()
timer.start()
matrix = build_upper_triangular_laplacian_matrix(shape)
timer.stop("Initialization : ")

x = direct_sparse_solver(matrix, f, write_output=False)
path = write_as_image("x", x, 0, 0, shape[0] // 2)   # x.0000.pgm
```

### Modules

- `laplace_direct.utilities`
  - Holds the default grid size as `XDIM`, `YDIM`, `ZDIM` and `SHAPE`.
  - `clear(x)` zeroes an array in place.
  - `initialize_problem(shape)` returns the zero initial guess and the right-hand side, both as `float32`.
  - `write_as_image(prefix, x, count, axis, slice_index)` writes `<prefix>.<count:04d>.pgm` and returns its path. An axis other than 0, 1 or 2 raises `ValueError`.
- `laplace_direct.laplacian`
  - `linear_index(i, j, k, shape)` gives the row-major node index.
  - `build_upper_triangular_laplacian_matrix(shape)` assembles the matrix.
- `laplace_direct.solver`
  - `direct_sparse_solver(matrix, f, write_output)` solves the system and returns `x` with the shape of `f` as `float32`.
  - It raises `SolverError` for a malformed or non-upper-triangular matrix, a failed factorisation or a non-finite solution.
  - It raises `ValueError` when the size of `f` does not match the matrix.
- `laplace_direct.timer`
  - `Timer` has `start`, `stop(msg)`, `reset`, `restart`, `pause` and `report(msg)`, and an `elapsed_ms` property.
  - Both `stop` and `report` print `[<msg><ms>ms]`.
  - A custom `clock` and output `stream` can be passed to `Timer`.
- `laplace_direct.csr`
  - Holds `CSRMatrix` and `CSRMatrixBuilder`.

### Building sparse matrices

`CSRMatrixBuilder` collects entries row by row, and `to_csr()` converts them to a
`CSRMatrix`. In the result, column indices are sorted within each row and values are
`float32`. `CSRMatrix.to_scipy()` returns a SciPy CSR matrix, and `CSRMatrix.nnz` gives the
number of stored entries.

```python
from laplace_direct.csr import CSRMatrixBuilder

builder = CSRMatrixBuilder(3)
builder[0, 0] = 2.0
builder[0, 1] = -1.0
builder[1, 1] = 2.0
builder[2, 2] = 1.0
csr = builder.to_csr()
```

Reading an entry that was never set stores it explicitly as 0.0. An index outside the
matrix raises `IndexError`, and a key that is not a `(row, column)` pair raises `TypeError`.

## Limitations

The package solves only with a direct LU factorisation. It has no iterative solver.
`utilities` defines the constants `K_MAX` and `NU_MAX`, but nothing in the package uses
them. Output is limited to a single ASCII PGM slice. The solution is not saved in any
other format.