"""
Monte Carlo estimation of the site-percolation threshold.

Each trial opens uniformly random sites of a fresh n-by-n grid until the
system percolates and records the fraction of sites that were open at that
moment. Averaging over independent trials estimates the percolation
threshold (about 0.5927 for the infinite square lattice).
"""

import math
from pathlib import Path
from typing import Dict, Optional, Union

import numpy as np

from .analysis import DEFAULT_CONFIDENCE, summarize_thresholds, z_score
from .grid_percolation import Percolation
from ..utils.timing import Stopwatch


def run_trial(n: int, rng: np.random.Generator) -> float:
    """
    Run a single percolation trial.

    Args:
        n: Grid dimension
        rng: Random generator used to pick sites

    Returns:
        Fraction of open sites when the system first percolates
    """
    perc = Percolation(n)
    n_sites = n * n

    while not perc.percolates():
        # Draw coordinates in batches; repeats of open sites are no-ops
        sites = rng.integers(1, n + 1, size=(n_sites, 2))
        for row, col in sites:
            perc.open(int(row), int(col))
            if perc.percolates():
                break

    return perc.number_of_open_sites() / n_sites


class PercolationStats:
    """
    Repeated independent percolation trials on n-by-n grids.

    Example:
        stats = PercolationStats(200, 100, seed=42)
        stats.mean()
        stats.confidence_lo(), stats.confidence_hi()
    """

    def __init__(
        self,
        n: int,
        trials: int,
        seed: Optional[int] = None,
        rng: Optional[np.random.Generator] = None,
        confidence: float = DEFAULT_CONFIDENCE,
    ):
        """
        Perform ``trials`` independent experiments on an n-by-n grid.

        Args:
            n: Grid dimension (>= 1)
            trials: Number of trials (>= 1)
            seed: Seed for a new default generator (ignored if rng is given)
            rng: Random generator to draw sites from
            confidence: Confidence level for the interval endpoints
        """
        for value in (n, trials):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value < 1:
                raise ValueError(f"n and trials must be integers >= 1, got n={n!r}, trials={trials!r}")
        z_score(confidence)

        self.n = int(n)
        self.trials = int(trials)
        self.confidence = float(confidence)

        if rng is None:
            rng = np.random.default_rng(seed)

        watch = Stopwatch()
        self.thresholds = np.empty(self.trials, dtype=np.float64)
        for i in range(self.trials):
            self.thresholds[i] = run_trial(self.n, rng)
        self.elapsed_seconds = watch.elapsed_time()

        self._summary = summarize_thresholds(self.thresholds, self.confidence)

    @classmethod
    def from_thresholds(
        cls,
        n: int,
        thresholds: np.ndarray,
        confidence: float = DEFAULT_CONFIDENCE,
    ) -> 'PercolationStats':
        """Build an instance from already computed per-trial thresholds."""
        stats = cls.__new__(cls)
        stats.n = int(n)
        stats.thresholds = np.asarray(thresholds, dtype=np.float64)
        stats.trials = len(stats.thresholds)
        stats.confidence = float(confidence)
        stats.elapsed_seconds = math.nan
        stats._summary = summarize_thresholds(stats.thresholds, stats.confidence)
        return stats

    def mean(self) -> float:
        """Sample mean of the percolation threshold."""
        return self._summary['mean']

    def stddev(self) -> float:
        """Sample standard deviation of the threshold (NaN for one trial)."""
        return self._summary['stddev']

    def confidence_lo(self) -> float:
        """Low endpoint of the confidence interval."""
        return self._summary['confidence_lo']

    def confidence_hi(self) -> float:
        """High endpoint of the confidence interval."""
        return self._summary['confidence_hi']

    def summary(self) -> Dict[str, float]:
        summary = {'n': self.n}
        summary.update(self._summary)
        return summary

    def save(self, filename: Union[str, Path]) -> None:
        """
        Save per-trial thresholds to file.

        Args:
            filename: Path to output .npz file
        """
        np.savez(
            filename,
            thresholds=self.thresholds,
            n=self.n,
            trials=self.trials,
            confidence=self.confidence,
        )

    @classmethod
    def load(cls, filename: Union[str, Path]) -> 'PercolationStats':
        """
        Load per-trial thresholds from file.

        Args:
            filename: Path to input .npz file
        """
        with np.load(filename) as dump:
            return cls.from_thresholds(
                int(dump['n']), dump['thresholds'], float(dump['confidence'])
            )
