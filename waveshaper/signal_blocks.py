"""
Signal Building Blocks

This module provides the stateful signals that compose a sample source with an
optional filter:
- StatefulSignal: Source + optional one-pole filter with one sample of memory
- PeriodicSignal: StatefulSignal over a Waveform
- ContinuousSignal: StatefulSignal over a Response
- DataSignal: Container for already-collected samples
"""

from __future__ import annotations

import numpy as np

from waveshaper.dsp import Filter
from waveshaper.signals import Response, Signal, Waveform
from waveshaper.utilities import normalize_signal


def _check_step(start: float, end: float, step: float) -> None:
    if step <= 0:
        raise ValueError(f"step must be > 0, got {step}")
    if start <= end and (start + step == start or end + step == end):
        raise ValueError(
            f"step {step} is below the float resolution of the interval [{start}, {end}]"
        )


def _interval_times(start: float, end: float, step: float):
    _check_step(start, end, step)
    t = start

    while t <= end:
        yield t
        next_t = t + step
        if next_t == t:
            raise ValueError(f"step {step} is below the float resolution at t={t}")
        t = next_t


class StatefulSignal:
    """
    Sample source with an optional filter and one sample of filter memory.

    The signal owns two memory cells, previous_input and previous_output, both
    starting at 0.0. They are only updated while a filter is attached: every
    filtered sample feeds the raw value and the memory into the filter, then
    stores the filter output and the raw value for the next call.

    Parameters
    ----------
    source : Signal
        Source of raw sample values
    """

    def __init__(self, source: Signal):
        self._source = source
        self._filter: Filter | None = None
        self.previous_input = 0.0
        self.previous_output = 0.0

    @property
    def source(self) -> Signal:
        return self._source

    @property
    def filter(self) -> Filter | None:
        return self._filter

    def add_filter(self, filter: Filter) -> None:
        """
        Attach a filter, replacing any existing one.

        The memory cells are left untouched, so the first filtered sample sees
        whatever state earlier filtered samples left behind.
        """
        self._filter = filter

    def sample(self, t: float) -> float:
        """
        Produce the (optionally filtered) value at time t.

        Parameters
        ----------
        t : float
            Current time (seconds)

        Returns
        -------
        float
            Raw source value if no filter is attached, filtered value otherwise
        """
        if self._filter is None:
            return self._source.sample(t)

        input = self._source.sample(t)
        # Filter sees the memory from before this sample
        filtered_sample = self._filter.apply(input, self.previous_output, self.previous_input)
        self.previous_output = filtered_sample
        self.previous_input = input
        return filtered_sample

    def interval(self, start: float, end: float, step: float) -> np.ndarray:
        """
        Sample the signal from start to end (inclusive) at a fixed step.

        Time is advanced by repeated addition (t += step) while t <= end, so
        for steps that are not exactly representable the accumulated error can
        add or drop the final sample. A positive step smaller than the float
        spacing at t would never advance time; such steps raise ValueError
        instead of looping forever. Filter memory advances with every sample.

        Parameters
        ----------
        start : float
            First sample time (seconds)
        end : float
            Last admissible sample time (seconds)
        step : float
            Time between samples (seconds), must be positive and resolvable
            at the magnitude of start and end

        Returns
        -------
        np.ndarray
            Samples in time order
        """
        samples = [self.sample(t) for t in _interval_times(start, end, step)]
        return np.array(samples, dtype=float)

    def interval_times(self, start: float, end: float, step: float) -> np.ndarray:
        """Time points visited by interval() for the same arguments."""
        return np.array(list(_interval_times(start, end, step)), dtype=float)

    def reset(self) -> None:
        """Reset the memory cells to zero. The filter stays attached."""
        self.previous_input = 0.0
        self.previous_output = 0.0


class PeriodicSignal(StatefulSignal):
    """
    Stateful signal driven by a periodic waveform.

    Parameters
    ----------
    waveform : Waveform
        Sine, Square, Triangle or Dc source
    """

    def __init__(self, waveform: Waveform):
        super().__init__(waveform)

    @property
    def waveform(self) -> Waveform:
        return self._source

    @property
    def frequency(self) -> float:
        """Waveform frequency in Hz (0.0 for Dc)."""
        return self._source.frequency

    @property
    def amplitude(self) -> float:
        return self._source.amplitude


class ContinuousSignal(StatefulSignal):
    """
    Stateful signal driven by an aperiodic response.

    Parameters
    ----------
    response : Response
        Ramp, Random or UnitStep source
    """

    def __init__(self, response: Response):
        super().__init__(response)

    @property
    def response(self) -> Response:
        return self._source


class DataSignal:
    """
    Container for already-collected samples.

    Parameters
    ----------
    samples : array-like
        Sample values
    """

    def __init__(self, samples):
        self._samples = np.array(samples, dtype=float)

    @property
    def samples(self) -> np.ndarray:
        """Read-only view of the samples."""
        view = self._samples.view()
        view.flags.writeable = False
        return view

    def __len__(self) -> int:
        return self._samples.size

    def rms(self) -> float:
        """
        Root-mean-square value of the samples.

        Returns
        -------
        float
            sqrt(mean(x^2))
        """
        if self._samples.size == 0:
            raise ValueError("Cannot compute RMS of an empty signal.")
        return float(np.sqrt(np.mean(self._samples ** 2)))

    def normalize(self) -> None:
        """Rescale the samples in place to the range [0, 1]."""
        self._samples = normalize_signal(self._samples)
