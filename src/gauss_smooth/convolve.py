"""Separable 2D convolution with reflect (mirror) boundary handling.

Grids are indexed ``grid[x, y]``: axis 0 is x (width), axis 1 is y (height).
The row pass convolves along x, the column pass along y. Both passes share one
helper that convolves along axis 0; the column pass runs it on transposed
views.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, List, Tuple

import numpy as np

from gauss_smooth.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)


def reflect_index(p, length: int):
    """Mirror index ``p`` into ``[0, length)`` without repeating the edge sample.

    ``-1 -> 0``, ``-2 -> 1``, ``length -> length - 1``. Indices further out are
    reflected again, so any ``length >= 1`` is valid. Accepts an int or an
    integer array.
    """
    if length < 1:
        raise InvalidArgumentError(f"length must be >= 1, got {length}")
    period = 2 * length
    if np.ndim(p) == 0:
        q = int(p) % period
        return period - q - 1 if q >= length else q
    q = np.mod(np.asarray(p), period)
    return np.where(q >= length, period - q - 1, q)


def _partition(extent: int, workers: int) -> List[Tuple[int, int]]:
    # contiguous, non-overlapping [lo, hi) ranges
    parts = max(1, min(int(workers), extent))
    step, extra = divmod(extent, parts)
    bounds = []
    lo = 0
    for i in range(parts):
        hi = lo + step + (1 if i < extra else 0)
        bounds.append((lo, hi))
        lo = hi
    return bounds


def _convolve_axis0(
    src: np.ndarray, kernel: np.ndarray, dst: np.ndarray, lo: int, hi: int
) -> None:
    """Write ``dst[:, lo:hi]``: ``src[:, lo:hi]`` convolved along axis 0."""
    radius = len(kernel) // 2
    n = src.shape[0]
    block = src[:, lo:hi]
    positions = np.arange(n)
    acc = np.zeros(block.shape, dtype=np.float64)
    for j, weight in enumerate(kernel):
        idx = reflect_index(positions + (j - radius), n)
        acc += block[idx] * weight
    dst[:, lo:hi] = acc


def _run_partitioned(fn: Callable[[int, int], None], extent: int, workers: int) -> None:
    bounds = _partition(extent, workers)
    if len(bounds) == 1:
        fn(*bounds[0])
        return
    with ThreadPoolExecutor(max_workers=len(bounds)) as executor:
        futures = [executor.submit(fn, lo, hi) for lo, hi in bounds]
        # every partition must finish before the caller moves on
        for future in futures:
            future.result()


def smooth_separable(grid: np.ndarray, kernel: np.ndarray, workers: int = 1) -> np.ndarray:
    """
    Convolve a 2D float grid with a 1D kernel along x, then along y.

    Parameters
    ----------
    grid : np.ndarray
        2D array of shape (width, height). Not modified.
    kernel : np.ndarray
        1D kernel of odd length, centered.
    workers : int
        Number of threads per pass. Each pass is split into contiguous ranges;
        the column pass starts only after the whole row pass has completed.

    Returns
    -------
    np.ndarray
        New float64 array with the same shape as ``grid``.
    """
    grid = np.asarray(grid, dtype=np.float64)
    kernel = np.asarray(kernel, dtype=np.float64)
    if grid.ndim != 2 or grid.size == 0:
        raise InvalidArgumentError(f"Expected a non-empty 2D grid, got shape {grid.shape}")
    if kernel.ndim != 1 or len(kernel) % 2 != 1:
        raise InvalidArgumentError(
            f"Kernel must be 1D with odd length, got shape {kernel.shape}"
        )
    if workers < 1:
        raise InvalidArgumentError(f"workers must be >= 1, got {workers}")

    width, height = grid.shape
    logger.debug(
        "Separable convolution: grid=%dx%d radius=%d workers=%d",
        width,
        height,
        len(kernel) // 2,
        workers,
    )

    intermediate = np.empty((width, height), dtype=np.float64)
    smoothed = np.empty((width, height), dtype=np.float64)

    # Pass 1: along x, partitioned over y
    _run_partitioned(
        lambda lo, hi: _convolve_axis0(grid, kernel, intermediate, lo, hi),
        height,
        workers,
    )
    # Pass 2: along y, partitioned over x (transposed views write into smoothed)
    _run_partitioned(
        lambda lo, hi: _convolve_axis0(intermediate.T, kernel, smoothed.T, lo, hi),
        width,
        workers,
    )
    return smoothed
