"""
Single-pole filters.

Each filter maps the current input, the previous filtered output and the
previous raw input to a new output. Filters hold no history of their own; the
owning signal carries the two memory cells and passes them in on every call.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

import numpy as np


class Filter(ABC):
    """
    Base class for one-pole filters.

    All filters must implement apply(input, previous_output, previous_input).
    """

    @abstractmethod
    def apply(self, input: float, previous_output: float, previous_input: float) -> float:
        """
        Compute the filtered output for the current sample.

        Parameters
        ----------
        input : float
            Raw input at the current sample
        previous_output : float
            Filtered output of the previous sample
        previous_input : float
            Raw input of the previous sample

        Returns
        -------
        float
            Filtered output at the current sample
        """
        pass

    def __call__(self, input: float, previous_output: float, previous_input: float) -> float:
        return self.apply(input, previous_output, previous_input)


@dataclass(frozen=True)
class Differentiator(Filter):
    """
    Backward-difference differentiator: (x[k] - x[k-1]) / tau.

    A tau of zero yields inf or nan instead of raising.
    """

    tau: float

    def apply(self, input: float, previous_output: float, previous_input: float) -> float:
        with np.errstate(divide="ignore", invalid="ignore"):
            return float(np.float64(input - previous_input) / self.tau)


@dataclass(frozen=True)
class Integrator(Filter):
    """
    Forward-Euler accumulator: y[k] = tau * x[k] + y[k-1].

    Here tau acts as the integration step size.
    """

    tau: float

    def apply(self, input: float, previous_output: float, previous_input: float) -> float:
        return self.tau * input + previous_output


@dataclass(frozen=True)
class HighPassFilter(Filter):
    """One-pole high-pass with smoothing coefficient alpha."""

    alpha: float

    def apply(self, input: float, previous_output: float, previous_input: float) -> float:
        return input - (
            self.alpha * (previous_input - previous_output) + input * (1.0 - self.alpha)
        )


@dataclass(frozen=True)
class LowPassFilter(Filter):
    """
    Exponential moving average: y[k] = (1 - alpha) * x[k] + alpha * y[k-1].

    alpha near 1 smooths heavily, alpha near 0 passes the input through.
    """

    alpha: float

    def apply(self, input: float, previous_output: float, previous_input: float) -> float:
        return (1.0 - self.alpha) * input + self.alpha * previous_output


@dataclass(frozen=True)
class Rectifier(Filter):
    """Full-wave rectifier: |x[k]|."""

    def apply(self, input: float, previous_output: float, previous_input: float) -> float:
        return abs(input)
