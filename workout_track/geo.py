"""Geospatial utilities (no external dependencies)."""

from __future__ import annotations

import math
from typing import Iterable

from workout_track.constants import EARTH_RADIUS_M


def haversine_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute Haversine distance in meters between two lat/lon points.

    Args:
        lat1: Latitude 1 in degrees.
        lon1: Longitude 1 in degrees.
        lat2: Latitude 2 in degrees.
        lon2: Longitude 2 in degrees.

    Returns:
        Distance in meters.
    """

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2.0) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2.0) ** 2
    c = 2.0 * math.atan2(math.sqrt(a), math.sqrt(1.0 - a))
    return EARTH_RADIUS_M * c


def path_length_m(points: Iterable[tuple[float, float]]) -> float:
    """Sum of segment lengths along an ordered (lat, lon) path.

    Returns 0.0 for paths with fewer than two points.
    """

    total = 0.0
    prev: tuple[float, float] | None = None
    for cur in points:
        if prev is not None:
            total += haversine_m(prev[0], prev[1], cur[0], cur[1])
        prev = cur
    return total
