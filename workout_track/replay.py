"""Replay recorded samples through a workout session."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from workout_track.clock import ManualTime
from workout_track.models import ElevationParams, Sample
from workout_track.session import WorkoutSession


@dataclass(frozen=True, slots=True)
class ProgressRow:
    """Cumulative metrics right after one sample was ingested."""

    sample: Sample
    fused_altitude_m: float
    elapsed_seconds: int
    distance_km: float
    average_speed_kmh: float
    elevation_gain_m: float
    paused_before: bool


def new_replay_session(
    barometer_available: bool = False,
    params: ElevationParams | None = None,
) -> tuple[WorkoutSession, ManualTime]:
    """Build a session whose clock is stepped by hand."""

    clock_time = ManualTime()
    session = WorkoutSession(barometer_available=barometer_available, params=params, now=clock_time)
    return session, clock_time


def iter_progress(
    samples: Iterable[Sample],
    session: WorkoutSession,
    clock_time: ManualTime,
    pause_gap_seconds: float | None = None,
) -> Iterator[ProgressRow]:
    """Feed samples into an idle session, moving its clock to each sample time.

    Args:
        samples: Time-ordered samples.
        session: Idle session built by :func:`new_replay_session`.
        clock_time: The session's time source.
        pause_gap_seconds: If set, a gap longer than this between two samples is
            treated as a pause and is not counted as active time.

    Yields:
        One ProgressRow per sample.
    """

    prev: Sample | None = None
    for cur in samples:
        paused_before = False
        if prev is None:
            clock_time.set(cur.geo_time_s)
            session.start()
        elif pause_gap_seconds is not None and cur.geo_time_s - prev.geo_time_s > pause_gap_seconds:
            # 自动暂停：间隔时间不计入运动时间
            session.pause()
            clock_time.set(cur.geo_time_s)
            session.resume()
            paused_before = True
        else:
            clock_time.set(cur.geo_time_s)

        session.on_position(cur)
        acc = session.accumulator
        elapsed = session.clock.elapsed_whole_seconds
        yield ProgressRow(
            sample=cur,
            fused_altitude_m=acc.fuse_altitude(cur),
            elapsed_seconds=elapsed,
            distance_km=acc.total_distance_km(),
            average_speed_kmh=acc.average_speed_kmh(elapsed),
            elevation_gain_m=acc.current_elevation_gain(),
            paused_before=paused_before,
        )
        prev = cur


def replay_samples(
    samples: Iterable[Sample],
    *,
    barometer_available: bool = False,
    params: ElevationParams | None = None,
    pause_gap_seconds: float | None = None,
) -> WorkoutSession:
    """Replay all samples and return the session (still running unless empty)."""

    session, clock_time = new_replay_session(barometer_available, params)
    for _ in iter_progress(samples, session, clock_time, pause_gap_seconds):
        pass
    return session
