"""Tests for the seasonal hue mapping."""
import math

import numpy as np
import pytest

from birdabundance.model.color import map_range, month_hue


def reference_hue(m: float) -> float:
    scaled = map_range(m, 0, 12, 0, 1)
    degrees = math.floor(scaled * 180)
    return 360 - map_range(math.sin(math.radians(degrees)), 0, 1, 180, 360)


class TestMapRange:
    def test_linear(self):
        assert map_range(0.5, 0, 1, 0, 100) == pytest.approx(50.0)

    def test_not_clamped(self):
        assert map_range(2.0, 0, 1, 0, 100) == pytest.approx(200.0)

    def test_reversed_target(self):
        assert map_range(0.25, 0, 1, 100, 0) == pytest.approx(75.0)


class TestMonthHue:
    def test_january_is_cyan(self):
        assert month_hue(0) == pytest.approx(180.0)

    @pytest.mark.parametrize("m", [0, 3, 6, 9, 11.9])
    def test_matches_reference(self, m):
        assert month_hue(m) == pytest.approx(reference_hue(m), abs=1e-6)

    def test_midyear_is_red(self):
        assert month_hue(6) == pytest.approx(0.0, abs=1e-9)

    def test_range_is_lower_half_of_wheel(self):
        months = np.arange(0, 12, 0.05)
        hues = month_hue(months)
        assert hues.shape == months.shape
        assert np.all(hues >= 0.0)
        assert np.all(hues <= 180.0)

    def test_not_a_linear_ramp(self):
        # 3 months in is a quarter of the way along a linear ramp, not here
        assert month_hue(3) != pytest.approx(135.0)
        assert month_hue(3) == pytest.approx(180 - 180 * math.sin(math.radians(45)))

    def test_degrees_are_floored(self):
        # 0.05 months -> 0.75 degrees -> floored to 0
        assert month_hue(0.05) == pytest.approx(180.0)

    def test_scalar_returns_float(self):
        assert isinstance(month_hue(4), float)
