"""
Run orchestrator - runs the percolation threshold sweep for a RunConfig.

For each configured grid size this runs the Monte Carlo trials, saves the
per-trial thresholds, and finally aggregates all saved sizes into the
summary CSV.

Usage:
    orchestrator = RunOrchestrator(config)
    orchestrator.run_all()
"""

from typing import Any, Dict, List

import numpy as np
import pandas as pd

from .config import RunConfig
from ..percolation.analysis import aggregate_results_to_csv
from ..percolation.stats import PercolationStats
from ..utils.timing import format_duration


class RunOrchestrator:
    """
    Runs a grid-size sweep described by a RunConfig.

    Example:
        config = RunConfig.from_yaml('config/square_sweep.yaml')
        orch = RunOrchestrator(config)
        df = orch.run_all()
    """

    def __init__(self, config: RunConfig, skip_completed: bool = True):
        """
        Initialize orchestrator.

        Args:
            config: Run configuration
            skip_completed: If True, skip grid sizes whose results already exist (default: True)
        """
        self.config = config
        self.skip_completed = skip_completed

    def pending_sizes(self) -> List[int]:
        """Grid sizes that still need to be simulated."""
        if not self.skip_completed:
            return self.config.grid_sizes
        return [n for n in self.config.grid_sizes
                if not self.config.result_path(n).exists()]

    def _rng_for_size(self, n: int) -> np.random.Generator:
        # Independent stream per grid size, so results do not depend on sweep order
        seed = self.config.seed
        if seed is None:
            return np.random.default_rng()
        return np.random.default_rng(np.random.SeedSequence([seed, n]))

    def run_size(self, n: int) -> Dict[str, Any]:
        """
        Run all trials for one grid size and save the thresholds.

        Args:
            n: Grid dimension

        Returns:
            Summary statistics for this grid size
        """
        config = self.config
        stats = PercolationStats(
            n,
            config.trials,
            rng=self._rng_for_size(n),
            confidence=config.confidence,
        )

        output_file = config.result_path(n)
        output_file.parent.mkdir(parents=True, exist_ok=True)
        stats.save(output_file)

        print(f"  n={n}: mean={stats.mean():.6f} stddev={stats.stddev():.6f} "
              f"({format_duration(stats.elapsed_seconds)})")
        return stats.summary()

    def run_all(self) -> pd.DataFrame:
        """
        Run every pending grid size, then aggregate all results.

        Returns:
            Aggregated DataFrame written to the summary CSV
        """
        config = self.config
        pending = self.pending_sizes()
        skipped = len(config.grid_sizes) - len(pending)

        print(f"Run: {config.run_name}")
        print(f"Grid sizes: {len(pending)} pending, {skipped} already completed")
        print(f"Trials per size: {config.trials}")

        for n in pending:
            self.run_size(n)

        return aggregate_results_to_csv(config.results_dir, config.summary_csv)
