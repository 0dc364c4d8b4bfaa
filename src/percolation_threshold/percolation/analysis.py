"""
Percolation threshold statistics and result aggregation.

Includes the summary statistics shared by the simulation driver (sample
mean, sample standard deviation, normal confidence interval) and the
aggregation of saved per-grid-size results into a single CSV.
"""

import math
from pathlib import Path
from typing import Any, Dict, Union

import numpy as np
import pandas as pd
from scipy.stats import norm


DEFAULT_CONFIDENCE = 0.95
# Conventional two-sided 95% quantile
DEFAULT_Z = 1.96

SUMMARY_COLUMNS = [
    'n', 'trials', 'mean', 'stddev', 'confidence_lo', 'confidence_hi',
    'confidence', 'file_path',
]


def z_score(confidence: float = DEFAULT_CONFIDENCE) -> float:
    """
    Two-sided standard normal quantile for a confidence level.

    Args:
        confidence: Confidence level in (0, 1)

    Returns:
        z such that P(|Z| <= z) == confidence. Returns exactly 1.96 for 0.95.
    """
    if not 0.0 < confidence < 1.0:
        raise ValueError(f"confidence must be in (0, 1), got {confidence}")
    if confidence == DEFAULT_CONFIDENCE:
        return DEFAULT_Z
    return float(norm.ppf(0.5 + confidence / 2.0))


def summarize_thresholds(
    thresholds: np.ndarray,
    confidence: float = DEFAULT_CONFIDENCE,
) -> Dict[str, float]:
    """
    Compute summary statistics of per-trial percolation thresholds.

    Args:
        thresholds: 1-D array of open-site fractions at percolation
        confidence: Confidence level for the interval

    Returns:
        Dict with 'trials', 'mean', 'stddev', 'confidence_lo',
        'confidence_hi', 'confidence'. The standard deviation and interval
        are NaN when fewer than two trials are available.
    """
    thresholds = np.asarray(thresholds, dtype=np.float64)
    if thresholds.ndim != 1 or thresholds.size == 0:
        raise ValueError("thresholds must be a non-empty 1-D array")

    trials = thresholds.size
    mean = float(np.mean(thresholds))
    stddev = float(np.std(thresholds, ddof=1)) if trials >= 2 else math.nan

    half_width = z_score(confidence) * stddev / math.sqrt(trials)

    return {
        'trials': int(trials),
        'mean': mean,
        'stddev': stddev,
        'confidence_lo': mean - half_width,
        'confidence_hi': mean + half_width,
        'confidence': float(confidence),
    }


def _summarize_result_file(npz_file: Path) -> Dict[str, Any]:
    with np.load(npz_file) as data:
        thresholds = data['thresholds']
        n = int(data['n'])
        confidence = float(data['confidence'])

    row = {'n': n}
    row.update(summarize_thresholds(thresholds, confidence))
    row['file_path'] = str(npz_file)
    return row


def load_results(results_dir: Union[str, Path]) -> pd.DataFrame:
    """
    Load every saved grid-size result (n_*.npz) in a directory.

    Args:
        results_dir: Directory written by the run orchestrator

    Returns:
        DataFrame with one row per grid size, sorted by n
    """
    results_dir = Path(results_dir)
    result_files = sorted(results_dir.glob("n_*.npz"))

    rows = []
    failed_files = []
    for npz_file in result_files:
        try:
            rows.append(_summarize_result_file(npz_file))
        except Exception as e:
            failed_files.append((npz_file, e))

    if failed_files:
        print(f"Warning: Failed to load {len(failed_files)} result files")
        for npz_file, e in failed_files:
            print(f"  {npz_file}: {e}")

    if not rows:
        return pd.DataFrame(columns=SUMMARY_COLUMNS)

    df = pd.DataFrame(rows, columns=SUMMARY_COLUMNS)
    return df.sort_values('n').reset_index(drop=True)


def aggregate_results_to_csv(
    results_dir: Union[str, Path],
    output_csv: Union[str, Path],
) -> pd.DataFrame:
    """
    Aggregate saved grid-size results into a summary CSV.

    Args:
        results_dir: Directory containing n_*.npz result files
        output_csv: Output CSV path

    Returns:
        Aggregated DataFrame (empty if no results were found)
    """
    output_csv = Path(output_csv)

    df = load_results(results_dir)
    if df.empty:
        print(f"No result files found in {results_dir}")
        return df

    output_csv.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(output_csv, index=False)

    print(f"\n=== SUMMARY ===")
    print(f"Grid sizes: {len(df)}")
    print(f"Total trials: {int(df['trials'].sum())}")
    for row in df.itertuples(index=False):
        print(f"  n={row.n:<6d} mean={row.mean:.6f}  stddev={row.stddev:.6f}")
    print(f"\nSaved to: {output_csv}")

    return df
