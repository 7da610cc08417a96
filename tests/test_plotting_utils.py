"""
Tests for the plotting helper (non-interactive backend).
"""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pytest

from waveshaper.plotting_utils import plot_signals
from waveshaper.signal_blocks import PeriodicSignal
from waveshaper.signals import Triangle


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


def test_plot_signals_saves_figure(tmp_path):
    signal = PeriodicSignal(Triangle(frequency=1.0, amplitude=1.0))
    t = signal.interval_times(0.0, 2.0, 0.05)
    samples = signal.interval(0.0, 2.0, 0.05)

    save_path = tmp_path / "plots" / "triangle.png"
    fig, ax = plot_signals(t, [samples], labels=["Triangle"], save_path=str(save_path))

    assert save_path.exists()
    assert len(ax.get_lines()) == 1
    assert ax.get_legend().get_texts()[0].get_text() == "Triangle"


def test_plot_signals_default_labels():
    _, ax = plot_signals([0.0, 1.0], [[0.0, 1.0], [1.0, 0.0]])
    labels = [text.get_text() for text in ax.get_legend().get_texts()]
    assert labels == ["Signal 1", "Signal 2"]


def test_plot_signals_rejects_mismatched_labels():
    with pytest.raises(ValueError, match="labels"):
        plot_signals([0.0, 1.0], [[0.0, 1.0]], labels=["a", "b"])


def test_plot_signals_rejects_mismatched_lengths():
    with pytest.raises(ValueError, match="samples"):
        plot_signals([0.0, 1.0, 2.0], [[0.0, 1.0]])
