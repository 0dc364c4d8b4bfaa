"""Tests for the Monte Carlo simulation driver and statistics."""

import math

import numpy as np
import pytest

from percolation_threshold.percolation.analysis import summarize_thresholds, z_score
from percolation_threshold.percolation.stats import PercolationStats, run_trial


class TestRunTrial:
    """Tests for a single trial."""

    def test_one_by_one_threshold(self):
        """Test that a 1x1 grid percolates after its only site opens."""
        assert run_trial(1, np.random.default_rng(0)) == 1.0

    def test_threshold_in_unit_interval(self):
        rng = np.random.default_rng(3)
        for _ in range(20):
            threshold = run_trial(10, rng)
            assert 0.0 < threshold <= 1.0

    def test_minimum_sites_to_percolate(self):
        """Test that at least n sites are open when an n-grid percolates."""
        rng = np.random.default_rng(11)
        n = 8
        for _ in range(10):
            assert run_trial(n, rng) * n * n >= n


class TestPercolationStats:
    """Tests for PercolationStats."""

    @pytest.mark.parametrize("n,trials", [
        (0, 10), (-5, 10), (10, 0), (10, -1),
        (2.5, 3), (3, 2.5), (True, 3), (3, True), ("4", 3),
    ])
    def test_invalid_arguments(self, n, trials):
        with pytest.raises(ValueError):
            PercolationStats(n, trials)

    def test_invalid_confidence(self):
        with pytest.raises(ValueError):
            PercolationStats(5, 2, confidence=1.5)

    def test_same_seed_same_thresholds(self):
        """Test that results are reproducible for a fixed seed."""
        a = PercolationStats(10, 15, seed=123)
        b = PercolationStats(10, 15, seed=123)

        np.testing.assert_array_equal(a.thresholds, b.thresholds)
        assert a.mean() == b.mean()

    def test_rng_argument(self):
        """Test that an explicit generator is used instead of the seed."""
        a = PercolationStats(6, 5, rng=np.random.default_rng(9))
        b = PercolationStats(6, 5, seed=1, rng=np.random.default_rng(9))

        np.testing.assert_array_equal(a.thresholds, b.thresholds)

    def test_single_trial_has_undefined_spread(self):
        """Test that stddev and the interval are NaN for one trial."""
        stats = PercolationStats(10, 1, seed=0)

        assert 0.0 < stats.mean() <= 1.0
        assert math.isnan(stats.stddev())
        assert math.isnan(stats.confidence_lo())
        assert math.isnan(stats.confidence_hi())

    def test_confidence_interval(self):
        stats = PercolationStats(10, 30, seed=5)
        half_width = 1.96 * stats.stddev() / math.sqrt(30)

        assert stats.confidence_lo() == pytest.approx(stats.mean() - half_width)
        assert stats.confidence_hi() == pytest.approx(stats.mean() + half_width)
        assert stats.confidence_lo() < stats.mean() < stats.confidence_hi()

    def test_threshold_estimate(self):
        """Test that the estimate lies near the known 2D site threshold."""
        stats = PercolationStats(20, 100, seed=2024)

        assert 0.55 <= stats.mean() <= 0.62
        assert stats.stddev() > 0
        assert stats.elapsed_seconds >= 0

    def test_summary(self):
        stats = PercolationStats(5, 4, seed=0)
        summary = stats.summary()

        assert summary['n'] == 5
        assert summary['trials'] == 4
        assert summary['mean'] == stats.mean()
        assert summary['confidence'] == 0.95

    def test_save_load(self, tmp_path):
        """Test that saved thresholds are restored with their statistics."""
        stats = PercolationStats(8, 6, seed=42, confidence=0.9)
        output = tmp_path / "n_8.npz"
        stats.save(output)

        loaded = PercolationStats.load(output)

        assert loaded.n == 8
        assert loaded.trials == 6
        assert loaded.confidence == pytest.approx(0.9)
        np.testing.assert_array_equal(loaded.thresholds, stats.thresholds)
        assert loaded.confidence_hi() == pytest.approx(stats.confidence_hi())


class TestSummaryStatistics:
    """Tests for the shared statistics helpers."""

    def test_z_score_default(self):
        assert z_score() == 1.96
        assert z_score(0.95) == 1.96

    def test_z_score_other_levels(self):
        assert z_score(0.99) == pytest.approx(2.5758, abs=1e-4)
        assert z_score(0.90) == pytest.approx(1.6449, abs=1e-4)

    @pytest.mark.parametrize("confidence", [0.0, 1.0, -0.5, 2.0])
    def test_z_score_invalid(self, confidence):
        with pytest.raises(ValueError):
            z_score(confidence)

    def test_summarize_known_values(self):
        summary = summarize_thresholds(np.array([0.5, 0.6, 0.7]))

        assert summary['trials'] == 3
        assert summary['mean'] == pytest.approx(0.6)
        assert summary['stddev'] == pytest.approx(0.1)
        assert summary['confidence_lo'] == pytest.approx(0.6 - 1.96 * 0.1 / math.sqrt(3))
        assert summary['confidence_hi'] == pytest.approx(0.6 + 1.96 * 0.1 / math.sqrt(3))

    def test_summarize_rejects_empty(self):
        with pytest.raises(ValueError):
            summarize_thresholds(np.array([]))
