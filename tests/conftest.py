from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest

from workout_track.models import Sample


def make_sample(
    t_s: float,
    altitude_m: float = 100.0,
    *,
    lat: float = 37.5665,
    lon: float = 126.9780,
    pressure_hpa: float | None = None,
) -> Sample:
    return Sample(
        geo_time_ms=int(t_s * 1000),
        latitude=lat,
        longitude=lon,
        altitude_m=altitude_m,
        horizontal_accuracy_m=5.0,
        pressure_hpa=pressure_hpa,
    )


@pytest.fixture
def write_csv(tmp_path: Path) -> Callable[[str], Path]:
    def _write(text: str, name: str = "workout.csv") -> Path:
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p

    return _write
