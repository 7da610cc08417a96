"""
Circuit elements and elementary circuit-law helpers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np

SPEED_OF_LIGHT = 299_792_458.0  # m/s


class Component(ABC):
    """Base class for passive circuit components."""

    @abstractmethod
    def reactance(self, frequency: float) -> float:
        """
        Impedance contribution of the component at a given frequency.

        Parameters
        ----------
        frequency : float
            Frequency in Hz

        Returns
        -------
        float
            Reactance in ohms (resistance for resistors)
        """
        pass


@dataclass(frozen=True)
class Resistor(Component):
    resistance: float  # ohms

    def reactance(self, frequency: float) -> float:
        return self.resistance


@dataclass(frozen=True)
class Capacitor(Component):
    capacitance: float  # farads

    def reactance(self, frequency: float) -> float:
        with np.errstate(divide="ignore"):
            return float(-1.0 / (2.0 * np.pi * np.float64(frequency) * self.capacitance))


@dataclass(frozen=True)
class Inductor(Component):
    inductance: float  # henries

    def reactance(self, frequency: float) -> float:
        return 2.0 * np.pi * frequency * self.inductance


def parallel_resistance(r1: float, r2: float) -> float:
    """
    Equivalent resistance of two resistors in parallel: (r1 * r2) / (r1 + r2).
    """
    numerator = r1 * r2
    denominator = r1 + r2
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(numerator) / denominator)


def calculate_wavelength(frequency: float) -> float:
    """
    Wavelength from frequency: lambda = c / f.

    Parameters
    ----------
    frequency : float
        Frequency in Hz

    Returns
    -------
    float
        Wavelength in meters
    """
    with np.errstate(divide="ignore"):
        return float(np.float64(SPEED_OF_LIGHT) / frequency)
