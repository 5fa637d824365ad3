from __future__ import annotations

import pytest

from workout_track.geo import haversine_m, path_length_m


def test_haversine_one_degree_latitude():
    assert haversine_m(0.0, 0.0, 1.0, 0.0) == pytest.approx(111_194.9, abs=0.5)


def test_haversine_same_point():
    assert haversine_m(37.5665, 126.978, 37.5665, 126.978) == 0.0


def test_path_length_short_paths():
    assert path_length_m([]) == 0.0
    assert path_length_m([(37.0, 127.0)]) == 0.0


def test_path_length_sums_segments():
    pts = [(0.0, 0.0), (1.0, 0.0), (2.0, 0.0)]
    assert path_length_m(pts) == pytest.approx(2 * 111_194.9, abs=1.0)
