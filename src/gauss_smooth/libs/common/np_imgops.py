"""Grayscale image files <-> uint8 grids indexed [x, y]."""

import os

import numpy as np
from PIL import Image

from gauss_smooth.exceptions import InvalidArgumentError


def load_grid(fpath) -> np.ndarray:
    '''returns a uint8 grid of shape (width, height) from an image path.
    Color images are converted to 8-bit grayscale (Pillow "L").'''
    if not os.path.isfile(fpath):
        raise FileNotFoundError(fpath)
    try:
        with Image.open(fpath) as im:
            pixels = np.array(im.convert("L"), dtype=np.uint8)
    except OSError as e:
        raise IOError(f'Failed to read image {fpath}: {e}') from e
    # Pillow is row-major (height, width)
    return np.ascontiguousarray(pixels.T)


def save_grid(grid: np.ndarray, fpath) -> None:
    '''writes a uint8 grid of shape (width, height) as a grayscale image'''
    grid = np.asarray(grid)
    if grid.ndim != 2 or grid.dtype != np.uint8:
        raise InvalidArgumentError(
            f'save_grid expects a 2D uint8 grid, got {grid.ndim}D {grid.dtype}'
        )
    Image.fromarray(np.ascontiguousarray(grid.T)).save(fpath)
