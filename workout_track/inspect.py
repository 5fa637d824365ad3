"""Inspect recorded samples and export per-sample progress."""

from __future__ import annotations

import csv
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable, Sequence

from zoneinfo import ZoneInfo

from workout_track.geo import path_length_m
from workout_track.models import Sample
from workout_track.replay import ProgressRow


def local_time(epoch_ms: int, tz_name: str) -> datetime:
    """Convert a sample timestamp to a timezone-aware local datetime.

    Raises:
        ValueError: If the IANA timezone name is unknown on this system.
    """

    try:
        tz = ZoneInfo(tz_name)
    except Exception as exc:  # ZoneInfoNotFoundError / ValueError depending on the name
        raise ValueError(f"无效时区：{tz_name!r}。例如可用：Asia/Seoul") from exc
    return datetime.fromtimestamp(epoch_ms / 1000.0, tz=tz)


@dataclass(frozen=True, slots=True)
class InspectResult:
    """High-level inspection result for a sample file."""

    samples: int
    min_time_ms: int | None
    max_time_ms: int | None
    longest_gap_s: float
    # gaps a replay with the same pause_gap_seconds would treat as pauses
    gaps_over_pause: int
    min_lat: float | None
    max_lat: float | None
    min_lon: float | None
    max_lon: float | None
    min_altitude_m: float | None
    max_altitude_m: float | None
    with_pressure: int
    worst_accuracy_m: float | None
    path_length_m: float
    duplicates_geo_time: int
    out_of_order: int


def inspect_samples(samples: Sequence[Sample], pause_gap_seconds: float = 60.0) -> InspectResult:
    """Inspect already-loaded samples (in file order).

    Args:
        samples: Samples as loaded from the CSV.
        pause_gap_seconds: Gap length counted in ``gaps_over_pause``.
    """

    if not samples:
        return InspectResult(
            samples=0,
            min_time_ms=None,
            max_time_ms=None,
            longest_gap_s=0.0,
            gaps_over_pause=0,
            min_lat=None,
            max_lat=None,
            min_lon=None,
            max_lon=None,
            min_altitude_m=None,
            max_altitude_m=None,
            with_pressure=0,
            worst_accuracy_m=None,
            path_length_m=0.0,
            duplicates_geo_time=0,
            out_of_order=0,
        )

    out_of_order = 0
    dupe = 0
    longest_gap_s = 0.0
    gaps_over_pause = 0
    for prev, cur in zip(samples, samples[1:]):
        gap_s = (cur.geo_time_ms - prev.geo_time_ms) / 1000.0
        if gap_s < 0:
            out_of_order += 1
            continue
        if gap_s == 0:
            dupe += 1
        longest_gap_s = max(longest_gap_s, gap_s)
        if gap_s > pause_gap_seconds:
            gaps_over_pause += 1

    accuracies = [s.horizontal_accuracy_m for s in samples if s.horizontal_accuracy_m >= 0]
    times = [s.geo_time_ms for s in samples]
    lats = [s.latitude for s in samples]
    lons = [s.longitude for s in samples]
    alts = [s.altitude_m for s in samples]
    return InspectResult(
        samples=len(samples),
        min_time_ms=min(times),
        max_time_ms=max(times),
        longest_gap_s=longest_gap_s,
        gaps_over_pause=gaps_over_pause,
        min_lat=min(lats),
        max_lat=max(lats),
        min_lon=min(lons),
        max_lon=max(lons),
        min_altitude_m=min(alts),
        max_altitude_m=max(alts),
        with_pressure=sum(1 for s in samples if s.pressure_hpa is not None),
        worst_accuracy_m=max(accuracies) if accuracies else None,
        path_length_m=path_length_m((s.latitude, s.longitude) for s in samples),
        duplicates_geo_time=dupe,
        out_of_order=out_of_order,
    )


def export_progress_csv(rows: Iterable[ProgressRow], out_path: str | Path, tz_name: str) -> int:
    """Write cumulative metrics after each sample.

    Output columns:
        - time_local: ISO datetime (local timezone)
        - epoch_ms, latitude, longitude, horizontal_accuracy_m
        - altitude_m, pressure_hpa, fused_altitude_m
        - elapsed_seconds, distance_km, average_speed_kmh, elevation_gain_m, paused_before

    Returns:
        Number of rows written.
    """

    p = Path(out_path)
    written = 0
    with p.open("w", encoding="utf-8", newline="") as f:
        w = csv.DictWriter(
            f,
            fieldnames=[
                "time_local",
                "epoch_ms",
                "latitude",
                "longitude",
                "horizontal_accuracy_m",
                "altitude_m",
                "pressure_hpa",
                "fused_altitude_m",
                "elapsed_seconds",
                "distance_km",
                "average_speed_kmh",
                "elevation_gain_m",
                "paused_before",
            ],
        )
        w.writeheader()
        for row in rows:
            s = row.sample
            w.writerow(
                {
                    "time_local": local_time(s.geo_time_ms, tz_name).isoformat(sep=" "),
                    "epoch_ms": s.geo_time_ms,
                    "latitude": s.latitude,
                    "longitude": s.longitude,
                    # -1 表示设备未提供精度
                    "horizontal_accuracy_m": "" if s.horizontal_accuracy_m < 0 else s.horizontal_accuracy_m,
                    "altitude_m": s.altitude_m,
                    "pressure_hpa": "" if s.pressure_hpa is None else s.pressure_hpa,
                    "fused_altitude_m": f"{row.fused_altitude_m:.2f}",
                    "elapsed_seconds": row.elapsed_seconds,
                    "distance_km": f"{row.distance_km:.4f}",
                    "average_speed_kmh": f"{row.average_speed_kmh:.3f}",
                    "elevation_gain_m": f"{row.elevation_gain_m:.2f}",
                    "paused_before": int(row.paused_before),
                }
            )
            written += 1
    return written
