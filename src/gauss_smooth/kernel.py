"""1D Gaussian kernel construction."""

from __future__ import annotations

import logging
import math

import numpy as np

from gauss_smooth.exceptions import InvalidArgumentError

logger = logging.getLogger(__name__)

DEFAULT_TRUNCATE = 4.0


class GaussianKernel:
    """Discretized, normalized 1D Gaussian.

    The kernel spans ``floor(truncate * sigma + 0.5)`` samples on each side of
    the center. A zero sigma yields the identity kernel ``[1.0]``.
    """

    def __init__(self, sigma: float, truncate: float = DEFAULT_TRUNCATE):
        sigma = float(sigma)
        truncate = float(truncate)
        if not math.isfinite(sigma) or sigma < 0:
            raise InvalidArgumentError(f"sigma must be a finite value >= 0, got {sigma}")
        if not math.isfinite(truncate) or truncate < 0:
            raise InvalidArgumentError(
                f"truncate must be a finite value >= 0, got {truncate}"
            )
        self.sigma = sigma
        self.truncate = truncate

    @property
    def radius(self) -> int:
        return int(math.floor(self.truncate * self.sigma + 0.5))

    def generate_kernel(self) -> np.ndarray:
        radius = self.radius
        if self.sigma == 0 or radius == 0:
            return np.ones(1, dtype=np.float64)

        x = np.arange(-radius, radius + 1, dtype=np.float64)
        g = np.exp(-(x**2) / (2.0 * self.sigma**2))
        g = g / g.sum()
        logger.debug(
            "Built Gaussian kernel: sigma=%s truncate=%s radius=%d",
            self.sigma,
            self.truncate,
            radius,
        )
        return g


def build_kernel(sigma: float, truncate: float = DEFAULT_TRUNCATE) -> np.ndarray:
    """
    Build a normalized 1D Gaussian kernel.

    Parameters
    ----------
    sigma : float
        Standard deviation of the Gaussian, in samples. Zero gives ``[1.0]``.
    truncate : float
        Number of standard deviations covered on each side of the center.

    Returns
    -------
    np.ndarray
        float64 array of odd length ``2 * radius + 1``, symmetric, summing to 1.

    Raises
    ------
    InvalidArgumentError
        If sigma or truncate is negative or not finite.
    """
    return GaussianKernel(sigma, truncate).generate_kernel()
