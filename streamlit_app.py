from __future__ import annotations

from pathlib import Path

import streamlit as st

from workout_track.constants import GAIN_THRESHOLD_M
from workout_track.csv_io import load_samples
from workout_track.models import ElevationParams, Sample
from workout_track.readouts import (
    format_accuracy_m,
    format_current_altitude,
    format_distance_km,
    format_elapsed,
    format_elevation_m,
    format_speed_kmh,
)
from workout_track.replay import ProgressRow, iter_progress, new_replay_session


_PATH_POINT_M = 2.0
_PATH_COLOR = "#1e64ffff"
_ACCURACY_COLOR = "#1e64ff1a"


@st.cache_data(show_spinner=False)
def _load_samples(csv_path: str, mtime: float) -> list[Sample]:
    _ = mtime  # part of cache key so updated files reload automatically
    samples, _summary = load_samples(csv_path)
    return samples


def _replay(
    samples: list[Sample],
    barometer_available: bool,
    gain_threshold_m: float,
    pause_gap_seconds: float | None,
) -> list[ProgressRow]:
    session, clock_time = new_replay_session(
        barometer_available, ElevationParams(gain_threshold_m=gain_threshold_m)
    )
    return list(iter_progress(samples, session, clock_time, pause_gap_seconds))


def _map_layer(track: list[ProgressRow]) -> dict[str, list[object]]:
    """Path points plus an accuracy circle around the current position."""

    lats: list[object] = [r.sample.latitude for r in track]
    lons: list[object] = [r.sample.longitude for r in track]
    sizes: list[object] = [_PATH_POINT_M] * len(track)
    colors: list[object] = [_PATH_COLOR] * len(track)

    current = track[-1].sample
    if current.horizontal_accuracy_m > 0:
        lats.append(current.latitude)
        lons.append(current.longitude)
        sizes.append(current.horizontal_accuracy_m)
        colors.append(_ACCURACY_COLOR)
    return {"lat": lats, "lon": lons, "size": sizes, "color": colors}


def main() -> None:
    st.set_page_config(page_title="运动记录", layout="wide")
    st.title("运动记录：轨迹回放")

    with st.sidebar:
        st.subheader("数据")
        csv_path = st.text_input("运动记录CSV路径", value="workout.csv")

        st.subheader("海拔")
        barometer_available = st.toggle("设备有气压计（融合 pressure 列）", value=True)
        gain_threshold_m = st.number_input("爬升阈值 gain_threshold_m（米）", value=GAIN_THRESHOLD_M, step=0.5)

        with st.expander("高级参数（通常不用改）", expanded=False):
            use_auto_pause = st.checkbox("长间隔视为暂停", value=False)
            pause_gap_seconds = st.number_input("pause_gap_seconds", value=60.0, step=10.0)

    p = Path(csv_path)
    if not p.exists():
        st.error(f"找不到文件：{csv_path!r}。可以用 scripts/generate_sample_workout_csv.py 生成示例数据。")
        return

    try:
        samples = _load_samples(csv_path, p.stat().st_mtime)
    except Exception as exc:
        st.exception(exc)
        return
    if not samples:
        st.warning("CSV中没有可用的采样点。")
        return

    rows = _replay(
        samples,
        bool(barometer_available),
        float(gain_threshold_m),
        float(pause_gap_seconds) if use_auto_pause else None,
    )

    upto = st.slider("回放到第几个采样点", min_value=1, max_value=len(rows), value=len(rows))
    row = rows[upto - 1]

    st.metric("运动时间", format_elapsed(row.elapsed_seconds))
    c1, c2, c3, c4, c5 = st.columns(5)
    c1.metric("📍 距离", format_distance_km(row.distance_km))
    c2.metric("⚡ 速度", format_speed_kmh(row.average_speed_kmh))
    c3.metric("🏠 当前海拔", format_current_altitude(row.sample.altitude_m))
    c4.metric("📈 累计爬升", format_elevation_m(row.elevation_gain_m))
    c5.metric("🎯 定位精度", format_accuracy_m(row.sample.horizontal_accuracy_m))

    track = rows[:upto]
    st.map(_map_layer(track), latitude="lat", longitude="lon", size="size", color="color")

    with st.expander("海拔明细", expanded=False):
        st.line_chart(
            {
                "gps_altitude_m": [r.sample.altitude_m for r in track],
                "fused_altitude_m": [r.fused_altitude_m for r in track],
                "elevation_gain_m": [r.elevation_gain_m for r in track],
            }
        )

    st.caption("说明：时间按采样时间戳回放；累计爬升只统计超过阈值的上升，下降会立即重设基准海拔。")


if __name__ == "__main__":
    main()
