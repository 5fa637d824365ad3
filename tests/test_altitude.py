from __future__ import annotations

import pytest

from workout_track.altitude import fuse_altitude, pressure_altitude_m
from workout_track.models import ElevationParams


def test_pressure_at_sea_level_is_zero_altitude():
    assert pressure_altitude_m(1013.25) == 0.0


def test_lower_pressure_means_higher_altitude():
    assert pressure_altitude_m(900.0) == pytest.approx(988.7, abs=1.0)
    assert pressure_altitude_m(1020.0) < 0.0


def test_fuse_averages_gps_and_barometer():
    assert fuse_altitude(100.0, 1013.25, barometer_available=True) == 50.0


def test_fuse_uses_gps_without_pressure_or_barometer():
    assert fuse_altitude(100.0, None, barometer_available=True) == 100.0
    assert fuse_altitude(100.0, 900.0, barometer_available=False) == 100.0


def test_custom_reference_pressure():
    params = ElevationParams(sea_level_pressure_hpa=1000.0)
    assert pressure_altitude_m(1000.0, params) == 0.0
