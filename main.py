"""
Command-line entry point for generating, filtering and plotting signals.
"""

from __future__ import annotations

from waveshaper.demo import DemoParameters, run_demo
from waveshaper.plotting_utils import plot_signals

# Demo parameters
demo_params = DemoParameters(
    r1=10.0,  # First parallel resistor (ohms)
    r2=10.0,  # Second parallel resistor (ohms)
    voltage=5.0,  # Source voltage (volts)
    frequency=2.0,  # Square wave frequency (Hz)
    start=0.0,  # Interval start (seconds)
    end=1.0,  # Interval end (seconds)
    step=1.0 / 360.0,  # Sampling step (seconds)
    random_state=None,  # Random seed for reproducibility (None for random)
    verbose=True,  # Print results
)

# Output paths
save_path = "output/square_response.png"  # Path to save signal plot


def main():
    results = run_demo(demo_params)

    # Plot pure and integrated square wave
    plot_signals(
        results.t,
        [results.pure_signal, results.filtered_signal],
        labels=["Square wave", "Integrated"],
        title="Square Wave - Pure vs Integrated",
        save_path=save_path,
    )
    print(f"\nPlot saved to {save_path}")


if __name__ == "__main__":
    main()
