"""gauss_smooth package public API surface.

Two-dimensional Gaussian smoothing of float and 8-bit grids using a separable
kernel with reflect boundary handling.
"""

from __future__ import annotations

__version__ = "0.1.0"

from .convolve import reflect_index, smooth_separable
from .exceptions import ConfigurationError, GaussSmoothError, InvalidArgumentError
from .kernel import GaussianKernel, build_kernel
from .smoothing import smooth, smooth_quantized

__all__ = [
    "__version__",
    "build_kernel",
    "GaussianKernel",
    "reflect_index",
    "smooth_separable",
    "smooth",
    "smooth_quantized",
    "GaussSmoothError",
    "InvalidArgumentError",
    "ConfigurationError",
]
