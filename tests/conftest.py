import sys
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np
import pytest
import yaml

# Ensure the repository's src directory is importable for package imports
_REPO_ROOT = Path(__file__).resolve().parents[1]
_SRC = _REPO_ROOT / "src"
if str(_SRC) not in sys.path:
    sys.path.insert(0, str(_SRC))


@pytest.fixture
def ramp_5x5() -> np.ndarray:
    """5x5 ramp: value = 10 + 50*x + 10*y."""
    return np.array(
        [
            [10, 20, 30, 40, 50],
            [60, 70, 80, 90, 100],
            [110, 120, 130, 140, 150],
            [160, 170, 180, 190, 200],
            [210, 220, 230, 240, 250],
        ],
        dtype=np.float64,
    )


@pytest.fixture
def create_test_config():
    """Factory fixture to create temporary config files for testing."""

    def _create_config(tmp_path: Path, defaults: Optional[Dict[str, Any]] = None) -> Path:
        if defaults is None:
            defaults = {"sigma": 2.0, "truncate": 3.0, "workers": 2}
        config_file = tmp_path / "test_config.yaml"
        config_file.write_text(yaml.dump({"defaults": defaults}))
        return config_file

    return _create_config
