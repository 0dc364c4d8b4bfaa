"""
Run configuration for grid-size sweeps.

The RunConfig loads a YAML run definition describing which grid sizes to
simulate, how many trials to run for each, and where to write results.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

import yaml

from ..percolation.analysis import DEFAULT_CONFIDENCE, z_score


class RunConfig:
    """
    Loads and validates a run configuration YAML.

    Example:
        config = RunConfig.from_yaml('config/square_sweep.yaml')
        print(config.run_name)
        print(config.grid_sizes)
    """

    def __init__(self, data: Dict[str, Any]):
        self._data = data
        self._validate()

    @classmethod
    def from_yaml(cls, path: str) -> 'RunConfig':
        """Load run config from YAML file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Run config not found: {path}")

        with open(path, 'r') as f:
            data = yaml.safe_load(f)

        if not isinstance(data, dict):
            raise ValueError(f"Run config must be a mapping: {path}")

        return cls(data)

    def _validate(self):
        """Validate required config sections and simulation parameters."""
        required_sections = ['run_name', 'simulation', 'output']
        for section in required_sections:
            if section not in self._data:
                raise ValueError(f"Missing required config section: '{section}'")

        if 'base_dir' not in self._data['output']:
            raise ValueError("Missing required config key: 'output.base_dir'")

        sim = self._data['simulation']
        grid_sizes = sim.get('grid_sizes')
        if not isinstance(grid_sizes, list) or not grid_sizes:
            raise ValueError("'simulation.grid_sizes' must be a non-empty list")
        for n in grid_sizes:
            if isinstance(n, bool) or not isinstance(n, int) or n < 1:
                raise ValueError(f"Invalid grid size: {n!r} (must be an integer >= 1)")

        trials = sim.get('trials')
        if isinstance(trials, bool) or not isinstance(trials, int) or trials < 1:
            raise ValueError(f"Invalid trials: {trials!r} (must be an integer >= 1)")

        z_score(self.confidence)

    # --- Properties ---

    @property
    def run_name(self) -> str:
        return self._data['run_name']

    @property
    def description(self) -> str:
        return self._data.get('description', '')

    # --- Simulation ---

    @property
    def grid_sizes(self) -> List[int]:
        return list(self._data['simulation']['grid_sizes'])

    @property
    def trials(self) -> int:
        return self._data['simulation']['trials']

    @property
    def seed(self) -> Optional[int]:
        return self._data['simulation'].get('seed')

    @property
    def confidence(self) -> float:
        return float(self._data['simulation'].get('confidence', DEFAULT_CONFIDENCE))

    # --- Output paths ---

    @property
    def base_dir(self) -> Path:
        return Path(self._data['output']['base_dir'])

    @property
    def results_dir(self) -> Path:
        return self.base_dir / self._data['output'].get('results_dir', 'thresholds')

    @property
    def summary_csv(self) -> Path:
        return self.base_dir / self._data['output'].get('summary_csv', 'threshold_summary.csv')

    def result_path(self, n: int) -> Path:
        """Path of the saved thresholds for grid size n."""
        return self.results_dir / f"n_{n}.npz"
