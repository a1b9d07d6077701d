"""Configuration loading for gauss-smooth.

This module provides:
- YAML config loading with a packaged fallback
- Default smoothing parameters (sigma, truncate, workers)
- Conversion of those defaults into SmoothingOptions
"""

from __future__ import annotations

import copy
import logging
from pathlib import Path
from typing import Dict, Optional

import yaml

from gauss_smooth.config.options import SmoothingOptions
from gauss_smooth.exceptions import ConfigurationError, InvalidArgumentError

logger = logging.getLogger(__name__)


class Config:
    """Primary configuration manager for gauss-smooth.

    Loads the ``defaults`` section of a YAML file and exposes it as typed
    attributes. Keys missing from the file fall back to the class constants.

    Attributes:
        sigma (float): Default Gaussian standard deviation.
        truncate (float): Default kernel half-width, in standard deviations.
        workers (int): Default number of threads per convolution pass.
    """

    DEFAULT_SIGMA = 1.0
    DEFAULT_TRUNCATE = 4.0
    DEFAULT_WORKERS = 1

    def __init__(self, path: "Path | str | Config" = "", verbose: Optional[bool] = False):
        """Initialize the Config instance.

        When constructed with a path/str (or default), configuration is read from disk.
        When constructed with another Config instance, an in-memory copy is made
        without re-reading from disk.

        Raises:
            ConfigurationError: If the file cannot be read or holds invalid values.
        """
        self.verbose = verbose

        if isinstance(path, Config):
            self.__dict__.update(copy.deepcopy(path.__dict__))
            self.verbose = verbose or path.verbose
            return

        config_path = Path(__file__).parent / "config.yaml" if path == "" else Path(path)
        self._config_path = config_path
        self._config = self._load(config_path)

        defaults = self._config.get("defaults") or {}
        if not isinstance(defaults, dict):
            raise ConfigurationError(f"'defaults' must be a mapping in {config_path}")
        try:
            self.sigma: float = float(defaults.get("sigma", self.DEFAULT_SIGMA))
            self.truncate: float = float(defaults.get("truncate", self.DEFAULT_TRUNCATE))
            self.workers: int = int(defaults.get("workers", self.DEFAULT_WORKERS))
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Invalid default value in {config_path}: {exc}") from exc

        # fail at load time rather than on first use
        self.options  # noqa: B018
        logger.debug(
            "Loaded config %s: sigma=%s truncate=%s workers=%s",
            config_path,
            self.sigma,
            self.truncate,
            self.workers,
        )

    @staticmethod
    def _load(config_path: Path) -> Dict:
        try:
            with open(config_path, "r") as f:
                data = yaml.safe_load(f)
        except OSError as exc:
            raise ConfigurationError(f"Cannot read config file {config_path}: {exc}") from exc
        except yaml.YAMLError as exc:
            raise ConfigurationError(f"Invalid YAML in {config_path}: {exc}") from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(f"Config root must be a mapping: {config_path}")
        return data

    @property
    def path(self) -> Path:
        return self._config_path

    @property
    def options(self) -> SmoothingOptions:
        """Get the configured defaults as validated SmoothingOptions.

        Raises:
            ConfigurationError: If any default is out of range.
        """
        try:
            return SmoothingOptions(
                sigma=self.sigma, truncate=self.truncate, workers=self.workers
            )
        except InvalidArgumentError as exc:
            raise ConfigurationError(f"{self._config_path}: {exc}") from exc

    def with_overrides(
        self,
        sigma: Optional[float] = None,
        truncate: Optional[float] = None,
        workers: Optional[int] = None,
    ) -> SmoothingOptions:
        """Return options with any non-None argument replacing the configured default."""
        return SmoothingOptions(
            sigma=self.sigma if sigma is None else float(sigma),
            truncate=self.truncate if truncate is None else float(truncate),
            workers=self.workers if workers is None else int(workers),
        )
