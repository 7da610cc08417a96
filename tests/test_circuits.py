"""
Tests for circuit helpers and array statistics.
"""

import math
import typing

import numpy as np
import pytest

from waveshaper.circuits import (
    SPEED_OF_LIGHT,
    Capacitor,
    Inductor,
    Resistor,
    calculate_wavelength,
    parallel_resistance,
)
from waveshaper.utilities import get_minmax, normalize_signal


class TestCircuits:
    def test_parallel_resistance(self):
        assert parallel_resistance(10.0, 10.0) == 5.0
        assert parallel_resistance(30.0, 60.0) == pytest.approx(20.0)

    def test_parallel_resistance_of_shorted_pair_is_nan(self):
        assert math.isnan(parallel_resistance(0.0, 0.0))

    def test_wavelength(self):
        assert calculate_wavelength(2.0) == 299_792_458.0 / 2.0
        assert calculate_wavelength(SPEED_OF_LIGHT) == pytest.approx(1.0)

    def test_wavelength_at_zero_frequency_is_infinite(self):
        assert math.isinf(calculate_wavelength(0.0))

    def test_reactance(self):
        frequency = 50.0
        assert Resistor(100.0).reactance(frequency) == 100.0
        assert Capacitor(1e-6).reactance(frequency) == pytest.approx(
            -1.0 / (2.0 * np.pi * frequency * 1e-6)
        )
        assert Inductor(0.1).reactance(frequency) == pytest.approx(2.0 * np.pi * frequency * 0.1)

    def test_capacitor_at_dc_blocks(self):
        assert Capacitor(1e-6).reactance(0.0) == -math.inf


class TestArrayStatistics:
    def test_get_minmax(self):
        assert get_minmax([3.0, -1.0, 2.0]) == (-1.0, 3.0)

    def test_get_minmax_empty_raises(self):
        with pytest.raises(ValueError, match="empty"):
            get_minmax([])

    def test_normalize_signal(self):
        np.testing.assert_allclose(normalize_signal([2.0, 4.0, 6.0]), [0.0, 0.5, 1.0])

    def test_normalize_signal_spans_unit_range(self):
        rng = np.random.default_rng(11)
        normalized = normalize_signal(rng.normal(size=200) * 7.0 - 3.0)
        assert normalized.min() == 0.0
        assert normalized.max() == 1.0

    def test_normalize_empty_signal(self):
        normalized = normalize_signal([])
        assert isinstance(normalized, np.ndarray)
        assert normalized.size == 0

    def test_normalize_constant_signal_is_nan(self):
        assert np.all(np.isnan(normalize_signal([2.0, 2.0, 2.0])))


@pytest.mark.parametrize("component_class", [Resistor, Capacitor, Inductor])
def test_reactance_signatures_are_annotated(component_class):
    hints = typing.get_type_hints(component_class.reactance)
    assert hints == {"frequency": float, "return": float}
