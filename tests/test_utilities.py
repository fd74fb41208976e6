import numpy as np
import pytest

from laplace_direct.utilities import SHAPE, clear, initialize_problem, write_as_image


def test_clear_zeroes_in_place():
    x = np.ones((3, 4, 5), dtype=np.float32)
    clear(x)
    assert not x.any()
    assert x.shape == (3, 4, 5)


def test_initialize_problem_patch_small_grid():
    x, b = initialize_problem((8, 8, 8))
    assert x.dtype == np.float32 and b.dtype == np.float32
    assert not x.any()
    assert (b[2:6, 2:6, 0:2] == 1.0).all()
    expected_sum = 4 * 4 * 2
    assert b.sum() == expected_sum


def test_initialize_problem_default_shape():
    x, b = initialize_problem()
    assert x.shape == SHAPE and b.shape == SHAPE
    assert b[32, 32, 0] == 1.0
    assert b[95, 95, 1] == 1.0
    assert b[96, 32, 0] == 0.0
    assert b[31, 32, 0] == 0.0
    assert b[64, 64, 2] == 0.0


def test_write_as_image_header_and_pixels(tmp_path):
    x = np.zeros((2, 3, 4), dtype=np.float32)
    x[1, :, :] = 1.0
    x[1, 0, 0] = 0.5
    path = write_as_image(str(tmp_path / "x"), x, 7, 0, 1)
    assert path.name == "x.0007.pgm"
    lines = path.read_text().split("\n")
    assert lines[0] == "P2"
    assert lines[1] == "3 4"
    assert lines[2] == "255"
    assert lines[3] == "127 255 255 255 "
    assert lines[4] == "255 255 255 255 "
    assert len([line for line in lines[3:] if line]) == 3


@pytest.mark.parametrize("axis, dims", [(0, "3 4"), (1, "2 4"), (2, "2 3")])
def test_write_as_image_dimensions_per_axis(tmp_path, axis, dims):
    x = np.zeros((2, 3, 4), dtype=np.float32)
    path = write_as_image(str(tmp_path / "img"), x, 0, axis, 0)
    lines = path.read_text().splitlines()
    assert lines[1] == dims
    rows = lines[3:]
    rows_expected, cols_expected = (int(v) for v in dims.split())
    assert len(rows) == rows_expected
    assert all(len(r.split()) == cols_expected for r in rows)


def test_write_as_image_axis_two_reads_column(tmp_path):
    x = np.zeros((2, 2, 3), dtype=np.float32)
    x[1, 0, 2] = 1.0
    path = write_as_image(str(tmp_path / "z"), x, 12, 2, 2)
    assert path.name == "z.0012.pgm"
    lines = path.read_text().splitlines()
    assert lines[3].split() == ["0", "0"]
    assert lines[4].split() == ["255", "0"]


def test_write_as_image_invalid_axis(tmp_path):
    x = np.zeros((2, 2, 2), dtype=np.float32)
    with pytest.raises(ValueError, match="Invalid axis"):
        write_as_image(str(tmp_path / "bad"), x, 0, 3, 0)