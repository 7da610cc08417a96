"""
Tests for signal metrics and the walkthrough demo.
"""

import numpy as np
import pytest

from waveshaper.circuits import SPEED_OF_LIGHT
from waveshaper.demo import DemoParameters, run_demo
from waveshaper.signal_metrics import compute_signal_metrics


class TestSignalMetrics:
    def test_metrics_of_square_samples(self):
        metrics = compute_signal_metrics([1.0, 1.0, -1.0, -1.0])
        assert metrics["min"] == -1.0
        assert metrics["max"] == 1.0
        assert metrics["peak_to_peak"] == 2.0
        assert metrics["mean"] == 0.0
        assert metrics["rms"] == pytest.approx(1.0)
        assert metrics["num_samples"] == 4

    def test_empty_samples_raise(self):
        with pytest.raises(ValueError, match="non-empty"):
            compute_signal_metrics([])

    def test_two_dimensional_samples_raise(self):
        with pytest.raises(ValueError, match="one-dimensional"):
            compute_signal_metrics(np.zeros((2, 2)))


class TestDemo:
    """End-to-end walkthrough without printing."""

    def test_run_demo(self):
        results = run_demo(DemoParameters(random_state=0, verbose=False))

        assert results.r_eq == 5.0
        assert results.current == 1.0
        assert results.wavelength == SPEED_OF_LIGHT / 2.0

        assert len(results.t) == len(results.pure_signal) == len(results.filtered_signal)
        assert set(np.unique(results.pure_signal)) <= {1.0, -1.0}

        # Integrator accumulates tau * x from zero memory
        tau = 2.0 * 2.0 / len(results.pure_signal)
        np.testing.assert_allclose(
            results.filtered_signal, np.cumsum(tau * results.pure_signal), atol=1e-9
        )

        assert len(results.random_signal) == 11
        assert np.all(results.random_signal >= -1.0)
        assert np.all(results.random_signal < 1.0)
        assert set(results.metrics) == {"pure", "filtered", "random"}

    def test_run_demo_is_reproducible_with_seed(self):
        first = run_demo(DemoParameters(random_state=5, verbose=False))
        second = run_demo(DemoParameters(random_state=5, verbose=False))
        np.testing.assert_array_equal(first.random_signal, second.random_signal)

    def test_run_demo_prints_when_verbose(self, capsys):
        run_demo(DemoParameters(random_state=1, verbose=True))
        captured = capsys.readouterr().out
        assert "Equivalent parallel resistance: 5.0" in captured
        assert "Continuous signal test set" in captured
