"""Display formatting for the workout panel."""

from __future__ import annotations


def format_elapsed(seconds: float) -> str:
    """Format seconds as HH:MM:SS (hours are not wrapped at 24)."""

    s = int(max(0.0, seconds))
    h = s // 3600
    m = (s % 3600) // 60
    sec = s % 60
    return f"{h:02d}:{m:02d}:{sec:02d}"


def format_distance_km(distance_km: float) -> str:
    return f"{distance_km:.1f} km"


def format_speed_kmh(speed_kmh: float) -> str:
    return f"{speed_kmh:.2f} km/h"


def format_elevation_m(gain_m: float) -> str:
    return f"{gain_m:.1f} m"


def format_current_altitude(altitude_m: float | None) -> str:
    """GPS altitude truncated toward zero; "0 m" before the first fix."""

    if altitude_m is None:
        return "0 m"
    return f"{int(altitude_m)} m"


def format_accuracy_m(accuracy_m: float | None) -> str:
    # 负值表示设备未提供精度
    if accuracy_m is None or accuracy_m < 0:
        return "-"
    return f"±{accuracy_m:.0f} m"
