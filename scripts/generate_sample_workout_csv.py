from __future__ import annotations

import argparse
import csv
import math
import random
from datetime import datetime
from pathlib import Path
from typing import Final

from zoneinfo import ZoneInfo


TZ: Final[str] = "Asia/Seoul"
START_LAT: Final[float] = 37.5665
START_LON: Final[float] = 126.9780


def _epoch_ms(dt: datetime) -> int:
    return int(dt.timestamp() * 1000)


def _pressure_at(altitude_m: float) -> float:
    """Inverse of the standard barometric formula (hPa at altitude)."""

    return 1013.25 * (1.0 - altitude_m / 44330.0) ** (1.0 / 0.1903)


def generate_samples(
    *,
    rows: int,
    seed: int,
    start_local: datetime,
    with_pressure: bool,
) -> list[dict[str, str]]:
    """Generate a fake hike: a climb and descent with GPS/barometer noise."""

    rng = random.Random(seed)
    tz = ZoneInfo(TZ)
    t_ms = _epoch_ms(start_local.replace(tzinfo=tz))

    lat, lon = START_LAT, START_LON
    heading = rng.uniform(0, 2 * math.pi)
    out: list[dict[str, str]] = []

    for i in range(rows):
        # Mostly 1-5s steps, occasionally a long stop
        if rng.random() < 0.01:
            t_ms += int(rng.uniform(60, 300) * 1000)
        else:
            t_ms += int(rng.uniform(1, 5) * 1000)

        heading += rng.uniform(-0.3, 0.3)
        step_m = rng.uniform(1.0, 4.0)
        lat += (step_m * math.cos(heading)) / 111_320.0
        lon += (step_m * math.sin(heading)) / (111_320.0 * math.cos(math.radians(lat)))

        # 0 -> 150 m and back along the route
        true_alt = 40.0 + 150.0 * math.sin(math.pi * i / max(1, rows - 1))
        gps_alt = true_alt + rng.gauss(0, 4.0)
        pressure = _pressure_at(true_alt + rng.gauss(0, 1.0))

        out.append(
            {
                "geoTime": str(t_ms),
                "latitude": f"{lat:.7f}",
                "longitude": f"{lon:.7f}",
                "altitude": f"{gps_alt:.1f}",
                "horizontalAccuracy": f"{rng.choice([3.0, 5.0, 8.0, 12.0]):.1f}",
                "pressure": f"{pressure:.2f}" if with_pressure else "",
            }
        )
    return out


def main() -> int:
    p = argparse.ArgumentParser(description="Generate a fake workout CSV for demo/testing (privacy-safe).")
    p.add_argument("--out", type=str, default="sample_data/workout.csv", help="Output CSV path")
    p.add_argument("--rows", type=int, default=1200, help="Number of rows")
    p.add_argument("--seed", type=int, default=42, help="Random seed (reproducible)")
    p.add_argument("--start", type=str, default="2025-05-01 07:00:00", help="Start local time in Asia/Seoul")
    p.add_argument("--no-pressure", action="store_true", help="Leave the pressure column empty")
    args = p.parse_args()

    rows = generate_samples(
        rows=args.rows,
        seed=args.seed,
        start_local=datetime.fromisoformat(args.start),
        with_pressure=not args.no_pressure,
    )
    out_path = Path(args.out)
    out_path.parent.mkdir(parents=True, exist_ok=True)

    fieldnames = ["geoTime", "latitude", "longitude", "altitude", "horizontalAccuracy", "pressure"]
    with out_path.open("w", encoding="utf-8", newline="") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader()
        w.writerows(rows)

    print(f"Generated: {out_path} (rows={len(rows)}, seed={args.seed})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
