"""Workout session: start / pause / resume / stop around a TrackAccumulator."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from workout_track.accumulator import TrackAccumulator
from workout_track.clock import SessionClock
from workout_track.models import ElevationParams, Sample
from workout_track.readouts import (
    format_accuracy_m,
    format_current_altitude,
    format_distance_km,
    format_elapsed,
    format_elevation_m,
    format_speed_kmh,
)

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    IDLE = "idle"
    RUNNING = "running"
    PAUSED = "paused"


class SessionStateError(RuntimeError):
    """Raised when a transition is not allowed from the current state."""


@dataclass(frozen=True, slots=True)
class SessionSnapshot:
    """Immutable readout of a session, safe to hand to a display layer."""

    state: SessionState
    elapsed_seconds: int
    distance_km: float
    average_speed_kmh: float
    elevation_gain_m: float
    current: Sample | None
    points: tuple[tuple[float, float], ...]

    def readouts(self) -> dict[str, str]:
        """Formatted strings for the bottom panel."""

        return {
            "elapsed": format_elapsed(self.elapsed_seconds),
            "distance": format_distance_km(self.distance_km),
            "speed": format_speed_kmh(self.average_speed_kmh),
            "current_altitude": format_current_altitude(
                self.current.altitude_m if self.current is not None else None
            ),
            "elevation_gain": format_elevation_m(self.elevation_gain_m),
            "accuracy": format_accuracy_m(
                self.current.horizontal_accuracy_m if self.current is not None else None
            ),
        }


class WorkoutSession:
    """Owns the track and the stopwatch for one workout at a time."""

    def __init__(
        self,
        barometer_available: bool = False,
        params: ElevationParams | None = None,
        now: Callable[[], float] | None = None,
    ) -> None:
        self.accumulator = TrackAccumulator(barometer_available=barometer_available, params=params)
        self.clock = SessionClock(now) if now is not None else SessionClock()
        self._state = SessionState.IDLE
        self._current: Sample | None = None

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def current(self) -> Sample | None:
        """Latest position seen, including while paused."""

        return self._current

    def _require(self, *allowed: SessionState, action: str) -> None:
        if self._state not in allowed:
            raise SessionStateError(f"cannot {action} while {self._state.value}")

    def start(self) -> None:
        self._require(SessionState.IDLE, action="start")
        self.accumulator.reset()
        self.clock.stop()
        self.clock.start()
        self._state = SessionState.RUNNING
        logger.debug("workout started")

    def pause(self) -> None:
        self._require(SessionState.RUNNING, action="pause")
        self.clock.pause()
        self._state = SessionState.PAUSED
        logger.debug("workout paused at %.1fs", self.clock.elapsed_seconds)

    def resume(self) -> None:
        self._require(SessionState.PAUSED, action="resume")
        self.clock.resume()
        self._state = SessionState.RUNNING
        logger.debug("workout resumed")

    def stop(self) -> SessionSnapshot:
        """End the workout and return the final snapshot taken before clearing."""

        self._require(SessionState.RUNNING, SessionState.PAUSED, action="stop")
        final = self.snapshot()
        self.clock.stop()
        self.accumulator.reset()
        self._state = SessionState.IDLE
        logger.debug(
            "workout stopped: %s, %.3f km, gain %.1f m",
            format_elapsed(final.elapsed_seconds),
            final.distance_km,
            final.elevation_gain_m,
        )
        return final

    def on_position(self, sample: Sample) -> None:
        """Handle one position update from the location feed."""

        if self._state is SessionState.IDLE:
            logger.debug("ignoring position at %s: no active workout", sample.geo_time_ms)
            return
        # 暂停时照常记录轨迹，只有计时停止
        self._current = sample
        self.accumulator.ingest(sample)

    def snapshot(self) -> SessionSnapshot:
        elapsed = self.clock.elapsed_whole_seconds
        return SessionSnapshot(
            state=self._state,
            elapsed_seconds=elapsed,
            distance_km=self.accumulator.total_distance_km(),
            average_speed_kmh=self.accumulator.average_speed_kmh(elapsed),
            elevation_gain_m=self.accumulator.current_elevation_gain(),
            current=self._current,
            points=self.accumulator.points,
        )
