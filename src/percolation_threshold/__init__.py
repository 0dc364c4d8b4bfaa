"""
Percolation Threshold - Monte Carlo estimation of the site-percolation threshold.

This package provides tools for:
- Site percolation on n-by-n grids backed by a weighted union-find
- Repeated trials with summary statistics and confidence intervals
- YAML-configured sweeps over grid sizes with CSV aggregation
"""

__version__ = "1.0.0"
