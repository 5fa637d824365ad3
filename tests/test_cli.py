from __future__ import annotations

import json

from workout_track.cli import main

CSV_TEXT = """geoTime,latitude,longitude,altitude,horizontalAccuracy,pressure
0,0.0,0.0,100.0,5.0,
1800000,0.1,0.0,110.0,5.0,
"""


def test_replay_prints_readouts(write_csv, capsys):
    path = write_csv(CSV_TEXT)
    assert main(["replay", "--csv", str(path)]) == 0
    out = capsys.readouterr().out
    assert "00:30:00" in out
    assert "11.1 km" in out
    assert "22.24 km/h" in out
    assert "10.0 m" in out


def test_replay_json(write_csv, capsys):
    path = write_csv(CSV_TEXT)
    assert main(["replay", "--csv", str(path), "--no-barometer", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["samples"] == 2
    assert payload["elapsed_seconds"] == 1800
    assert payload["elevation_gain_m"] == 10.0
    assert payload["readouts"]["elapsed"] == "00:30:00"


def test_replay_threshold_flag(write_csv, capsys):
    path = write_csv(CSV_TEXT)
    assert main(["replay", "--csv", str(path), "--gain-threshold-m", "20", "--json"]) == 0
    assert json.loads(capsys.readouterr().out)["elevation_gain_m"] == 0.0


def test_inspect_json(write_csv, capsys):
    path = write_csv(CSV_TEXT)
    assert main(["inspect", "--csv", str(path), "--tz", "UTC", "--json"]) == 0
    out = capsys.readouterr().out
    assert "### 行数" in out
    payload = json.loads(out[out.index("{") :])
    assert payload["samples"] == 2
    assert payload["rows_skipped"] == 0


def test_export_progress(write_csv, tmp_path, capsys):
    path = write_csv(CSV_TEXT)
    out = tmp_path / "progress.csv"
    assert main(["export-progress", "--csv", str(path), "--out", str(out), "--tz", "UTC"]) == 0
    assert out.exists()
    assert "rows=2" in capsys.readouterr().out


def test_missing_file_returns_2(tmp_path, capsys):
    assert main(["replay", "--csv", str(tmp_path / "nope.csv")]) == 2
    assert "找不到文件" in capsys.readouterr().err
