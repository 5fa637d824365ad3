"""CSV input utilities for recorded workout samples."""

from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence

from workout_track.models import Sample

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CsvSummary:
    """Quick summary of CSV parsing."""

    rows_total: int
    rows_parsed: int
    rows_skipped: int
    fieldnames: Sequence[str]


def _parse_int(value: str) -> int:
    return int(value.strip())


def _parse_float(value: str) -> float:
    return float(value.strip())


def _parse_optional_float(value: str | None) -> float | None:
    if value is None or not value.strip():
        return None
    return float(value.strip())


def _sample_from_row(row: Mapping[str, str]) -> Sample:
    return Sample(
        geo_time_ms=_parse_int(row["geoTime"]),
        latitude=_parse_float(row["latitude"]),
        longitude=_parse_float(row["longitude"]),
        altitude_m=_parse_float(row.get("altitude", "0") or "0"),
        horizontal_accuracy_m=_parse_float(row.get("horizontalAccuracy", "-1") or "-1"),
        pressure_hpa=_parse_optional_float(row.get("pressure")),
    )


def load_samples(csv_path: str | Path) -> tuple[list[Sample], CsvSummary]:
    """Load all samples into memory.

    Args:
        csv_path: Path to the CSV.

    Returns:
        (samples, summary)

    Raises:
        KeyError: If a required column is missing from the header.

    Notes:
        Columns:
          - geoTime: epoch milliseconds
          - latitude/longitude: decimal degrees
          - altitude/horizontalAccuracy: meters (optional)
          - pressure: hPa, blank when the device has no barometer (optional)
    """

    p = Path(csv_path)
    rows_total = 0
    parsed: list[Sample] = []
    fieldnames: Sequence[str] = ()

    with p.open("r", encoding="utf-8", newline="") as f:
        reader = csv.DictReader(f)
        fieldnames = reader.fieldnames or ()
        if fieldnames:
            missing = [c for c in ("geoTime", "latitude", "longitude") if c not in fieldnames]
            if missing:
                raise KeyError(f"CSV缺少必要字段：{missing}. 实际字段：{list(fieldnames)}")
        for row in reader:
            rows_total += 1
            try:
                parsed.append(_sample_from_row(row))
            except (KeyError, ValueError, TypeError, AttributeError):
                continue

    summary = CsvSummary(
        rows_total=rows_total,
        rows_parsed=len(parsed),
        rows_skipped=rows_total - len(parsed),
        fieldnames=fieldnames,
    )
    if summary.rows_skipped > 0:
        logger.warning("CSV中有 %s 行解析失败已跳过", summary.rows_skipped)
    return parsed, summary
