"""Site percolation model, union-find engine and threshold estimation."""

from .union_find import WeightedQuickUnionUF
from .grid_percolation import Percolation, site_index, site_coords
from .stats import PercolationStats, run_trial
from .analysis import summarize_thresholds, z_score, load_results, aggregate_results_to_csv

__all__ = [
    'WeightedQuickUnionUF', 'Percolation', 'site_index', 'site_coords',
    'PercolationStats', 'run_trial',
    'summarize_thresholds', 'z_score', 'load_results', 'aggregate_results_to_csv',
]
