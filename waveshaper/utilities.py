"""
Utility functions for array statistics on collected samples.
"""

import numpy as np


def get_minmax(values) -> tuple[float, float]:
    """
    Return the smallest and largest value of a sequence.

    Parameters
    ----------
    values : array-like
        Sample values

    Returns
    -------
    tuple[float, float]
        (min_value, max_value)

    Examples
    --------
    >>> get_minmax([3.0, -1.0, 2.0])
    (-1.0, 3.0)
    """
    values_array = np.asarray(values, dtype=float)
    if values_array.size == 0:
        raise ValueError("Cannot compute min/max of an empty sequence.")
    return float(np.min(values_array)), float(np.max(values_array))


def normalize_signal(signal) -> np.ndarray:
    """
    Normalize a signal to the range [0, 1].

    Each value is mapped to (value - min) / (max - min). A constant signal has
    max == min and normalizes to nan. An empty signal normalizes to an empty
    array.

    Parameters
    ----------
    signal : array-like
        Sample values

    Returns
    -------
    np.ndarray
        Normalized samples

    Examples
    --------
    >>> normalize_signal([2.0, 4.0, 6.0]).tolist()
    [0.0, 0.5, 1.0]
    """
    signal_array = np.asarray(signal, dtype=float)
    if signal_array.size == 0:
        return signal_array.copy()

    min_value, max_value = get_minmax(signal_array)

    with np.errstate(divide="ignore", invalid="ignore"):
        return (signal_array - min_value) / (max_value - min_value)
