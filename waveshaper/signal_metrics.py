"""
Shared utilities for summarizing generated signals.
"""

from __future__ import annotations

from typing import Dict

import numpy as np


def compute_signal_metrics(samples) -> Dict[str, float]:
    """
    Extract min, max, peak-to-peak, mean, RMS and sample-count metrics.

    Parameters
    ----------
    samples : array-like
        Samples as returned by StatefulSignal.interval or DataSignal.samples.
        Non-finite values (from degenerate filter parameters) propagate into
        the metrics unchanged.
    """
    y = np.asarray(samples, dtype=float)

    if y.size == 0:
        raise ValueError("Sample vector must be non-empty.")

    if y.ndim != 1:
        raise ValueError(f"Samples must be one-dimensional. Got shape {y.shape}.")

    min_value = np.min(y)
    max_value = np.max(y)

    metrics = {
        "min": float(min_value),
        "max": float(max_value),
        "peak_to_peak": float(max_value - min_value),
        "mean": float(np.mean(y)),
        "rms": float(np.sqrt(np.mean(y ** 2))),
        "num_samples": int(y.size),
    }

    return metrics
