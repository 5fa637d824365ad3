"""Track accumulation: distance, average speed and cumulative elevation gain."""

from __future__ import annotations

from workout_track.altitude import fuse_altitude
from workout_track.geo import haversine_m
from workout_track.models import ElevationParams, ElevationState, Sample, TrackSnapshot


class TrackAccumulator:
    """Collects samples for one workout and derives metrics on demand.

    The accumulator is driven by a single position feed calling :meth:`ingest`
    in time order. It performs no I/O and never blocks.

    Notes:
        Elevation gain uses an asymmetric noise policy: a rise must exceed
        ``params.gain_threshold_m`` to be counted, while any drop re-anchors
        immediately. Slow climbs made of many small steps are therefore
        under-counted.
    """

    def __init__(self, barometer_available: bool = False, params: ElevationParams | None = None) -> None:
        self.barometer_available = barometer_available
        self.params = params or ElevationParams()
        self._samples: list[Sample] = []
        self._elevation = ElevationState()
        self._distance_m = 0.0

    def __len__(self) -> int:
        return len(self._samples)

    def reset(self) -> None:
        """Clear the track and the elevation state."""

        self._samples.clear()
        self._elevation.clear()
        self._distance_m = 0.0

    def ingest(self, sample: Sample) -> None:
        """Append a sample and update the elevation state."""

        if self._samples:
            prev = self._samples[-1]
            self._distance_m += haversine_m(prev.latitude, prev.longitude, sample.latitude, sample.longitude)
        self._samples.append(sample)
        self.update_elevation(self.fuse_altitude(sample))

    def fuse_altitude(self, sample: Sample) -> float:
        return fuse_altitude(sample.altitude_m, sample.pressure_hpa, self.barometer_available, self.params)

    def update_elevation(self, current_altitude_m: float) -> None:
        """Apply one altitude reading to the anchor / gain state."""

        state = self._elevation
        if state.base_altitude_m is None:
            state.base_altitude_m = current_altitude_m
            return

        delta = current_altitude_m - state.base_altitude_m
        if delta > self.params.gain_threshold_m:
            state.cumulative_gain_m += delta
            state.base_altitude_m = current_altitude_m
        elif delta < 0:
            state.base_altitude_m = current_altitude_m

    def total_distance_km(self) -> float:
        return self._distance_m / 1000.0

    def average_speed_kmh(self, elapsed_seconds: float) -> float:
        """Average speed over the active (unpaused) time.

        Args:
            elapsed_seconds: Active session time in seconds.

        Returns:
            km/h, or 0.0 when no time has elapsed.
        """

        if elapsed_seconds <= 0:
            return 0.0
        return self.total_distance_km() / (elapsed_seconds / 3600.0)

    def current_elevation_gain(self) -> float:
        return self._elevation.cumulative_gain_m

    @property
    def base_altitude(self) -> float | None:
        return self._elevation.base_altitude_m

    @property
    def last_sample(self) -> Sample | None:
        return self._samples[-1] if self._samples else None

    @property
    def points(self) -> tuple[tuple[float, float], ...]:
        """Recorded (lat, lon) pairs, e.g. for drawing a polyline."""

        return tuple((s.latitude, s.longitude) for s in self._samples)

    def snapshot(self) -> TrackSnapshot:
        return TrackSnapshot(
            samples=len(self._samples),
            distance_km=self.total_distance_km(),
            elevation_gain_m=self.current_elevation_gain(),
            base_altitude_m=self.base_altitude,
            points=self.points,
        )
