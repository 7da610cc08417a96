"""
Circuit-to-signal walkthrough
=============================

Drives a square wave from a simple resistive circuit, integrates it, and
samples a random response. Used by the command-line entry point; returns every
generated sequence so the run can be inspected or plotted afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from waveshaper.circuits import calculate_wavelength, parallel_resistance
from waveshaper.dsp import Integrator
from waveshaper.signal_blocks import ContinuousSignal, DataSignal, PeriodicSignal
from waveshaper.signal_metrics import compute_signal_metrics
from waveshaper.signals import Random, Square


@dataclass(frozen=True)
class DemoParameters:
    """
    Demo run parameters.

    Attributes
    ----------
    r1, r2 : float
        Parallel resistor values in ohms. Default: 10.0, 10.0
    voltage : float
        Source voltage in volts; the resulting current sets the square wave
        amplitude. Default: 5.0
    frequency : float
        Square wave frequency in Hz. Default: 2.0
    start, end, step : float
        Periodic sampling interval (seconds). Default: 0.0, 1.0, 1/360
    random_min, random_max : float
        Bounds of the random response. Default: -1.0, 1.0
    random_end, random_step : float
        Random response sampling interval (seconds). Default: 10.0, 1.0
    random_state : int | None
        Seed for the random response (None for random). Default: None
    verbose : bool
        Print progress and results. Default: True
    """

    r1: float = 10.0
    r2: float = 10.0
    voltage: float = 5.0
    frequency: float = 2.0
    start: float = 0.0
    end: float = 1.0
    step: float = 1.0 / 360.0
    random_min: float = -1.0
    random_max: float = 1.0
    random_end: float = 10.0
    random_step: float = 1.0
    random_state: int | None = None
    verbose: bool = True


@dataclass
class DemoResults:
    r_eq: float
    current: float
    wavelength: float
    t: np.ndarray
    pure_signal: np.ndarray
    filtered_signal: np.ndarray
    random_signal: np.ndarray
    metrics: dict


def run_demo(params: DemoParameters) -> DemoResults:
    """
    Run the walkthrough.

    Parameters
    ----------
    params : DemoParameters
        Circuit, sampling and reporting parameters

    Returns
    -------
    DemoResults
        Circuit values and the pure, integrated and random sequences
    """
    r_eq = parallel_resistance(params.r1, params.r2)
    current = params.voltage / r_eq
    wavelength = calculate_wavelength(params.frequency)

    if params.verbose:
        print(f"Equivalent parallel resistance: {r_eq} Ω")
        print(f"Current through the circuit: {current} A")
        print(f"Wavelength at {params.frequency} Hz: {wavelength} m")

    signal = PeriodicSignal(Square(frequency=params.frequency, amplitude=current))
    t = signal.interval_times(params.start, params.end, params.step)
    pure_signal = signal.interval(params.start, params.end, params.step)

    # Scale the integration step so one period integrates to a bounded ramp
    integrator = Integrator(tau=2.0 * params.frequency / len(pure_signal))
    signal.add_filter(integrator)
    filtered_signal = signal.interval(params.start, params.end, params.step)

    rng = np.random.default_rng(params.random_state)
    continuous_signal = ContinuousSignal(
        Random(min=params.random_min, max=params.random_max, rng=rng)
    )
    random_signal = continuous_signal.interval(0.0, params.random_end, params.random_step)

    metrics = {
        "pure": compute_signal_metrics(pure_signal),
        "filtered": compute_signal_metrics(filtered_signal),
        "random": compute_signal_metrics(random_signal),
    }

    if params.verbose:
        print(f"\nGenerated {len(pure_signal)} samples per interval")
        print(f"Pure signal RMS: {DataSignal(pure_signal).rms():.4f}")
        for name, signal_metrics in metrics.items():
            print(f"\n=== {name.capitalize()} Signal ===")
            for key, value in signal_metrics.items():
                if np.isfinite(value):
                    print(f"  {key}: {value:.4f}")
                else:
                    print(f"  {key}: {value}")
        print(f"\nContinuous signal test set: {random_signal.tolist()}")

    return DemoResults(
        r_eq=r_eq,
        current=current,
        wavelength=wavelength,
        t=t,
        pure_signal=pure_signal,
        filtered_signal=filtered_signal,
        random_signal=random_signal,
        metrics=metrics,
    )
