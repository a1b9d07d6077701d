import math
from dataclasses import dataclass

from gauss_smooth.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class SmoothingOptions:
    sigma: float = 1.0
    truncate: float = 4.0
    workers: int = 1  # threads per convolution pass

    def __post_init__(self):
        if not math.isfinite(self.sigma) or self.sigma < 0:
            raise InvalidArgumentError(f"sigma must be a finite value >= 0, got {self.sigma}")
        if not math.isfinite(self.truncate) or self.truncate < 0:
            raise InvalidArgumentError(
                f"truncate must be a finite value >= 0, got {self.truncate}"
            )
        if self.workers < 1:
            raise InvalidArgumentError(f"workers must be >= 1, got {self.workers}")
