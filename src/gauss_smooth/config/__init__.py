"""Configuration management for gauss-smooth.

The main components are:
    Config: Loads default smoothing parameters from a YAML file
    SmoothingOptions: Validated, immutable set of smoothing parameters

Example:
    >>> from gauss_smooth.config import Config
    >>> options = Config().with_overrides(sigma=2.0)
    >>> options.truncate
    4.0
"""

from .config import Config, logger
from .options import SmoothingOptions

__all__ = ["Config", "SmoothingOptions", "logger"]
