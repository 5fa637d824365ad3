from __future__ import annotations

from streamlit_app import _map_layer
from workout_track.models import Sample
from workout_track.replay import iter_progress, new_replay_session
from tests.conftest import make_sample


def _rows(samples):
    session, clock_time = new_replay_session()
    return list(iter_progress(samples, session, clock_time))


def test_map_layer_adds_accuracy_circle_at_current_position():
    rows = _rows([make_sample(0, lat=0.0, lon=0.0), make_sample(1, lat=0.001, lon=0.0)])
    layer = _map_layer(rows)
    assert layer["lat"] == [0.0, 0.001, 0.001]
    assert layer["size"][-1] == 5.0
    assert layer["color"][-1] != layer["color"][0]


def test_map_layer_without_accuracy_has_path_only():
    rows = _rows([Sample(geo_time_ms=0, latitude=0.0, longitude=0.0, altitude_m=0.0)])
    layer = _map_layer(rows)
    assert layer["lat"] == [0.0]
    assert len(layer["size"]) == 1
