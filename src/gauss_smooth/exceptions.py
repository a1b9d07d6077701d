from __future__ import annotations


class GaussSmoothError(Exception):
    """Base class for gauss-smooth exceptions."""


class InvalidArgumentError(GaussSmoothError, ValueError):
    """Raised when a grid, kernel or smoothing parameter is unusable."""


class ConfigurationError(GaussSmoothError):
    """Raised when configuration loading fails."""

    pass
