"""
Plotting utilities for visualizing generated and filtered signals.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import numpy as np

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure


def plot_signals(
    t,
    signals: Sequence,
    labels: Sequence[str] | None = None,
    title: str = "Signals",
    save_path: str | None = None,
) -> tuple[Figure, Axes]:
    """
    Plot one or more sample sequences against a shared time axis.

    Parameters
    ----------
    t : array-like
        Time values, e.g. from StatefulSignal.interval_times
    signals : sequence of array-like
        Sample sequences to plot. Each must have the same length as t.
    labels : sequence of str | None, optional
        Legend labels, one per signal (default: "Signal {n}")
    title : str, optional
        Axis title (default: "Signals")
    save_path : str | None, optional
        Path to save the figure (default: None, don't save)

    Returns
    -------
    fig : matplotlib.figure.Figure
        The figure object
    ax : matplotlib.axes.Axes
        The axes object
    """
    import matplotlib.pyplot as plt

    t = np.asarray(t, dtype=float)
    if labels is None:
        labels = [f"Signal {idx + 1}" for idx in range(len(signals))]

    if len(labels) != len(signals):
        raise ValueError(
            f"Got {len(labels)} labels for {len(signals)} signals."
        )

    fig, ax = plt.subplots(1, 1, figsize=(10, 4))

    for signal, label in zip(signals, labels):
        y = np.asarray(signal, dtype=float)
        if y.shape != t.shape:
            raise ValueError(
                f"Signal '{label}' has {y.size} samples but time vector has {t.size}."
            )
        ax.plot(t, y, linewidth=2, label=label)

    ax.grid(True, alpha=0.3)
    ax.set_xlabel("Time (s)")
    ax.set_ylabel("Amplitude")
    ax.set_title(title)
    ax.legend(loc="best")

    plt.tight_layout()
    if save_path:
        # Create output directory if it doesn't exist
        save_path_obj = Path(save_path)
        save_path_obj.parent.mkdir(parents=True, exist_ok=True)
        plt.savefig(save_path, dpi=150, bbox_inches="tight")
    return fig, ax
