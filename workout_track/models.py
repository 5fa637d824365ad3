"""Data models for workout samples and derived state."""

from __future__ import annotations

from dataclasses import dataclass

from workout_track.constants import (
    BAROMETRIC_EXPONENT,
    BAROMETRIC_SCALE_M,
    GAIN_THRESHOLD_M,
    SEA_LEVEL_PRESSURE_HPA,
)


@dataclass(frozen=True, slots=True)
class Sample:
    """A single position update received during a workout.

    Attributes:
        geo_time_ms: Unix epoch milliseconds.
        latitude: Latitude in decimal degrees.
        longitude: Longitude in decimal degrees.
        altitude_m: GPS-reported altitude in meters.
        horizontal_accuracy_m: Horizontal accuracy radius in meters.
        pressure_hpa: Barometer reading in hPa, None if the device has no barometer.
    """

    geo_time_ms: int
    latitude: float
    longitude: float
    altitude_m: float
    horizontal_accuracy_m: float = -1.0
    pressure_hpa: float | None = None

    @property
    def geo_time_s(self) -> float:
        """Unix epoch seconds as float."""

        return self.geo_time_ms / 1000.0


@dataclass(slots=True)
class ElevationState:
    """Mutable altitude anchor and running gain."""

    base_altitude_m: float | None = None
    cumulative_gain_m: float = 0.0

    def clear(self) -> None:
        self.base_altitude_m = None
        self.cumulative_gain_m = 0.0


@dataclass(frozen=True, slots=True)
class ElevationParams:
    """Parameters controlling altitude fusion and gain accumulation."""

    # Upward change must exceed this before it is counted as climbing.
    gain_threshold_m: float = GAIN_THRESHOLD_M
    sea_level_pressure_hpa: float = SEA_LEVEL_PRESSURE_HPA
    barometric_exponent: float = BAROMETRIC_EXPONENT
    barometric_scale_m: float = BAROMETRIC_SCALE_M


@dataclass(frozen=True, slots=True)
class TrackSnapshot:
    """Immutable view of the accumulated track metrics."""

    samples: int
    distance_km: float
    elevation_gain_m: float
    base_altitude_m: float | None
    points: tuple[tuple[float, float], ...]
