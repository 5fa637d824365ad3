from __future__ import annotations

import random

import pytest

from workout_track.accumulator import TrackAccumulator
from workout_track.models import ElevationParams
from tests.conftest import make_sample


def _ingest_altitudes(acc: TrackAccumulator, altitudes: list[float]) -> None:
    for i, alt in enumerate(altitudes):
        acc.ingest(make_sample(i, alt))


def test_first_sample_sets_anchor_without_gain():
    acc = TrackAccumulator()
    acc.ingest(make_sample(0, 200.0))
    assert acc.base_altitude == 200.0
    assert acc.current_elevation_gain() == 0.0


def test_rise_above_threshold_is_counted_and_reanchors():
    acc = TrackAccumulator()
    _ingest_altitudes(acc, [100.0, 104.0])
    assert acc.current_elevation_gain() == 4.0
    assert acc.base_altitude == 104.0


def test_drop_reanchors_without_changing_gain():
    acc = TrackAccumulator()
    _ingest_altitudes(acc, [100.0, 98.0])
    assert acc.current_elevation_gain() == 0.0
    assert acc.base_altitude == 98.0


def test_small_rise_is_ignored():
    acc = TrackAccumulator()
    _ingest_altitudes(acc, [100.0, 102.0])
    assert acc.current_elevation_gain() == 0.0
    assert acc.base_altitude == 100.0


def test_exactly_threshold_is_ignored():
    acc = TrackAccumulator()
    _ingest_altitudes(acc, [100.0, 103.0])
    assert acc.current_elevation_gain() == 0.0
    assert acc.base_altitude == 100.0


def test_slow_climb_under_threshold_steps_accumulates_against_anchor():
    acc = TrackAccumulator()
    # 100 -> 102 -> 104: the second step is measured against 100, so 4 m counts
    _ingest_altitudes(acc, [100.0, 102.0, 104.0])
    assert acc.current_elevation_gain() == 4.0


def test_descent_then_climb_back_is_counted_from_new_low():
    acc = TrackAccumulator()
    _ingest_altitudes(acc, [100.0, 90.0, 80.0, 95.0])
    assert acc.current_elevation_gain() == 15.0
    assert acc.base_altitude == 95.0


def test_gain_is_non_decreasing():
    rng = random.Random(7)
    acc = TrackAccumulator()
    last = 0.0
    for i in range(500):
        acc.ingest(make_sample(i, rng.uniform(0, 300)))
        gain = acc.current_elevation_gain()
        assert gain >= last
        last = gain


def test_custom_threshold():
    acc = TrackAccumulator(params=ElevationParams(gain_threshold_m=1.0))
    _ingest_altitudes(acc, [100.0, 102.0])
    assert acc.current_elevation_gain() == 2.0


def test_barometer_fusion_applies_when_available():
    acc = TrackAccumulator(barometer_available=True)
    sample = make_sample(0, 100.0, pressure_hpa=1013.25)
    assert acc.fuse_altitude(sample) == 50.0
    acc.ingest(sample)
    assert acc.base_altitude == 50.0


def test_barometer_flag_off_ignores_pressure():
    acc = TrackAccumulator(barometer_available=False)
    acc.ingest(make_sample(0, 100.0, pressure_hpa=1013.25))
    assert acc.base_altitude == 100.0


def test_distance_empty_and_single_sample():
    acc = TrackAccumulator()
    assert acc.total_distance_km() == 0.0
    acc.ingest(make_sample(0))
    assert acc.total_distance_km() == 0.0


def test_distance_sums_consecutive_points():
    acc = TrackAccumulator()
    acc.ingest(make_sample(0, lat=0.0, lon=0.0))
    acc.ingest(make_sample(1, lat=0.01, lon=0.0))
    acc.ingest(make_sample(2, lat=0.02, lon=0.0))
    assert acc.total_distance_km() == pytest.approx(2.2239, abs=1e-3)
    assert acc.points == ((0.0, 0.0), (0.01, 0.0), (0.02, 0.0))


def test_average_speed():
    acc = TrackAccumulator()
    acc.ingest(make_sample(0, lat=0.0, lon=0.0))
    acc.ingest(make_sample(1, lat=0.1, lon=0.0))
    distance = acc.total_distance_km()
    assert acc.average_speed_kmh(1800) == pytest.approx(distance * 2)


def test_average_speed_zero_elapsed():
    acc = TrackAccumulator()
    acc.ingest(make_sample(0, lat=0.0, lon=0.0))
    acc.ingest(make_sample(1, lat=1.0, lon=0.0))
    assert acc.average_speed_kmh(0) == 0.0


def test_reset_clears_everything():
    acc = TrackAccumulator()
    _ingest_altitudes(acc, [100.0, 110.0, 120.0])
    acc.reset()
    assert acc.current_elevation_gain() == 0.0
    assert acc.base_altitude is None
    assert len(acc) == 0
    assert acc.total_distance_km() == 0.0
    assert acc.last_sample is None


def test_snapshot_is_detached_from_later_ingests():
    acc = TrackAccumulator()
    _ingest_altitudes(acc, [100.0, 110.0])
    snap = acc.snapshot()
    acc.ingest(make_sample(5, 130.0))
    assert snap.samples == 2
    assert snap.elevation_gain_m == 10.0
    assert len(snap.points) == 2
