"""
Sample sources for signal synthesis.

This module provides the closed-form sources a stateful signal draws its raw
values from. Periodic sources extend the Waveform base class, aperiodic ones
extend the Response base class; both share the Signal contract.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

import numpy as np

# Shared generator for Random responses created without an explicit rng
_default_rng = np.random.default_rng()


class Signal(ABC):
    """
    Abstract base class for sample sources.

    All sources must implement sample(t) to return the signal value at time t.
    Calling a source is equivalent to sampling it.
    """

    @abstractmethod
    def sample(self, t: float) -> float:
        """
        Get the signal value at time t.

        Parameters
        ----------
        t : float
            Current time (seconds)

        Returns
        -------
        float
            Signal value at time t
        """
        pass

    def __call__(self, t: float) -> float:
        return self.sample(t)


def _phase(t: float, frequency: float) -> float:
    # Floored modulo: phase stays in [0, 1) for negative t as well
    return (t * frequency) % 1.0


class Waveform(Signal):
    """
    Base class for periodic sources.

    Every waveform exposes a frequency (Hz) and an amplitude (signal units).
    """

    frequency: float
    amplitude: float


@dataclass(frozen=True)
class Sine(Waveform):
    """
    Sinusoidal waveform: A * sin(2*pi*f*t).

    Parameters
    ----------
    frequency : float
        Frequency in Hz
    amplitude : float
        Peak amplitude
    """

    frequency: float
    amplitude: float

    def sample(self, t: float) -> float:
        return self.amplitude * np.sin(2 * np.pi * self.frequency * t)


@dataclass(frozen=True)
class Square(Waveform):
    """
    Square waveform with a 50% duty cycle.

    Outputs +amplitude for the first half of each period and -amplitude for
    the second half; a phase of exactly 0.5 falls in the negative half.

    Parameters
    ----------
    frequency : float
        Frequency in Hz
    amplitude : float
        Peak amplitude
    """

    frequency: float
    amplitude: float

    def sample(self, t: float) -> float:
        phase = _phase(t, self.frequency)
        return self.amplitude if phase < 0.5 else -self.amplitude


@dataclass(frozen=True)
class Triangle(Waveform):
    """
    Symmetric triangle waveform.

    Rises linearly from -amplitude at phase 0 to +amplitude at phase 0.5, then
    falls back to -amplitude at phase 1.

    Parameters
    ----------
    frequency : float
        Frequency in Hz
    amplitude : float
        Peak amplitude
    """

    frequency: float
    amplitude: float

    def sample(self, t: float) -> float:
        phase = _phase(t, self.frequency)
        if phase < 0.5:
            # Rising edge (0, -A) to (0.5, A)
            return 4.0 * self.amplitude * phase - self.amplitude
        # Falling edge (0.5, A) to (1, -A)
        return 3.0 * self.amplitude - 4.0 * self.amplitude * phase


@dataclass(frozen=True)
class Dc(Waveform):
    """Constant (DC) level. Reports a frequency of 0 Hz."""

    amplitude: float

    @property
    def frequency(self) -> float:
        return 0.0

    def sample(self, t: float) -> float:
        return self.amplitude


class Response(Signal):
    """Base class for aperiodic sources."""


@dataclass(frozen=True)
class Ramp(Response):
    """
    Ramp response: slope * t.

    Parameters
    ----------
    slope : float
        Ramp slope (units per second)
    """

    slope: float

    def sample(self, t: float) -> float:
        return self.slope * t


@dataclass(frozen=True)
class Random(Response):
    """
    Uniform random response.

    Every call draws a fresh value in [min, max), independent of t.

    Parameters
    ----------
    min : float
        Lower bound (inclusive)
    max : float
        Upper bound (exclusive)
    rng : np.random.Generator | None, optional
        Generator to draw from. If None, a shared unseeded generator is used,
        so results are not reproducible. Pass a seeded generator for
        deterministic output. Default: None
    """

    min: float
    max: float
    rng: np.random.Generator | None = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        if self.min > self.max:
            raise ValueError(f"min ({self.min}) must be <= max ({self.max})")

    def sample(self, t: float) -> float:
        rng = self.rng if self.rng is not None else _default_rng
        return float(rng.uniform(self.min, self.max))


@dataclass(frozen=True)
class UnitStep(Response):
    """Heaviside step: 1.0 for t >= 0, otherwise 0.0."""

    def sample(self, t: float) -> float:
        return 1.0 if t >= 0.0 else 0.0
