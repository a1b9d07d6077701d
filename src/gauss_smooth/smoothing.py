"""Public Gaussian smoothing entry points for float and 8-bit grids.

Both entry points share one float64 core: 8-bit input is widened losslessly,
smoothed, then rounded half to even and clamped back to ``[0, 255]``.

A sigma of zero is the identity and returns a copy of the input. Negative or
non-finite sigma raises :class:`InvalidArgumentError`.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from gauss_smooth.config.options import SmoothingOptions
from gauss_smooth.convolve import smooth_separable
from gauss_smooth.exceptions import InvalidArgumentError
from gauss_smooth.kernel import DEFAULT_TRUNCATE, build_kernel

logger = logging.getLogger(__name__)

UINT8_MIN = 0
UINT8_MAX = 255


def _validate_grid(grid) -> np.ndarray:
    if grid is None:
        raise InvalidArgumentError("grid must not be None")
    arr = np.asarray(grid)
    if arr.ndim != 2:
        raise InvalidArgumentError(f"Expected a 2D grid, got {arr.ndim} dimension(s)")
    if arr.size == 0:
        raise InvalidArgumentError(f"Grid must not be empty, got shape {arr.shape}")
    if not (np.issubdtype(arr.dtype, np.integer) or np.issubdtype(arr.dtype, np.floating)):
        raise InvalidArgumentError(f"Unsupported grid dtype: {arr.dtype}")
    return arr


def _resolve_options(
    sigma: Optional[float], truncate: Optional[float], options: Optional[SmoothingOptions]
) -> SmoothingOptions:
    if options is None:
        if sigma is None:
            raise InvalidArgumentError("sigma is required when no options are given")
        return SmoothingOptions(
            sigma=float(sigma),
            truncate=DEFAULT_TRUNCATE if truncate is None else float(truncate),
        )
    if sigma is None and truncate is None:
        return options
    return SmoothingOptions(
        sigma=options.sigma if sigma is None else float(sigma),
        truncate=options.truncate if truncate is None else float(truncate),
        workers=options.workers,
    )


def _narrow(smoothed: np.ndarray) -> np.ndarray:
    # np.rint rounds half to even
    return np.clip(np.rint(smoothed), UINT8_MIN, UINT8_MAX).astype(np.uint8)


def _smooth_float(widened: np.ndarray, options: SmoothingOptions) -> np.ndarray:
    if options.sigma == 0:
        return widened.copy()
    kernel = build_kernel(options.sigma, options.truncate)
    return smooth_separable(widened, kernel, workers=options.workers)


def smooth(
    grid,
    sigma: Optional[float] = None,
    truncate: Optional[float] = None,
    *,
    options: Optional[SmoothingOptions] = None,
) -> np.ndarray:
    """
    Gaussian-smooth a 2D grid in float64.

    Parameters
    ----------
    grid : array-like
        Real-valued 2D grid indexed ``[x, y]``. Not modified.
    sigma : float
        Standard deviation of the Gaussian, in samples. Overrides ``options``.
    truncate : float
        Kernel half-width in standard deviations (default 4.0). Overrides ``options``.
    options : SmoothingOptions, optional
        Parameter bundle, e.g. from :class:`gauss_smooth.config.Config`.

    Returns
    -------
    np.ndarray
        New float64 grid of the same shape.
    """
    arr = _validate_grid(grid)
    opts = _resolve_options(sigma, truncate, options)
    logger.debug("smooth: shape=%s dtype=%s %s", arr.shape, arr.dtype, opts)
    return _smooth_float(arr.astype(np.float64), opts)


def smooth_quantized(
    grid,
    sigma: Optional[float] = None,
    truncate: Optional[float] = None,
    *,
    options: Optional[SmoothingOptions] = None,
) -> np.ndarray:
    """Gaussian-smooth an 8-bit grid; returns a new uint8 grid of the same shape."""
    arr = _validate_grid(grid)
    if arr.dtype != np.uint8:
        raise InvalidArgumentError(f"Expected a uint8 grid, got {arr.dtype}")
    opts = _resolve_options(sigma, truncate, options)
    logger.debug("smooth_quantized: shape=%s %s", arr.shape, opts)

    return _narrow(_smooth_float(arr.astype(np.float64), opts))
