import numpy as np
import pytest
from PIL import Image

from gauss_smooth.exceptions import InvalidArgumentError
from gauss_smooth.libs.common.np_imgops import load_grid, save_grid


def test_save_then_load_keeps_xy_axes(tmp_path):
    grid = np.zeros((4, 3), dtype=np.uint8)  # width 4, height 3
    grid[3, 0] = 200
    path = tmp_path / "grid.png"

    save_grid(grid, path)

    with Image.open(path) as im:
        assert im.size == (4, 3)
        assert im.mode == "L"
        assert im.getpixel((3, 0)) == 200
    loaded = load_grid(path)
    assert loaded.shape == (4, 3)
    np.testing.assert_array_equal(loaded, grid)


def test_load_converts_color_to_grayscale(tmp_path):
    path = tmp_path / "rgb.png"
    Image.new("RGB", (5, 2), color=(255, 255, 255)).save(path)

    grid = load_grid(path)

    assert grid.dtype == np.uint8
    assert grid.shape == (5, 2)
    assert (grid == 255).all()


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_grid(tmp_path / "missing.png")


def test_save_rejects_float_grid(tmp_path):
    with pytest.raises(InvalidArgumentError):
        save_grid(np.zeros((2, 2)), tmp_path / "f.png")
