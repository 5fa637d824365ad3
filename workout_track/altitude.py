"""Altitude estimation from GPS and barometric pressure."""

from __future__ import annotations

from workout_track.models import ElevationParams

_DEFAULT_PARAMS = ElevationParams()


def pressure_altitude_m(pressure_hpa: float, params: ElevationParams = _DEFAULT_PARAMS) -> float:
    """Convert a pressure reading to altitude with the standard barometric formula.

    Args:
        pressure_hpa: Atmospheric pressure in hPa.
        params: Reference pressure, exponent and scale.

    Returns:
        Altitude in meters above the reference pressure level.
    """

    ratio = pressure_hpa / params.sea_level_pressure_hpa
    return params.barometric_scale_m * (1.0 - ratio**params.barometric_exponent)


def fuse_altitude(
    gps_altitude_m: float,
    pressure_hpa: float | None,
    barometer_available: bool,
    params: ElevationParams = _DEFAULT_PARAMS,
) -> float:
    """Combine GPS altitude with barometric altitude.

    The result is the unweighted mean of both sources when a pressure reading is
    present and the device reports a barometer; otherwise the GPS altitude is
    returned unchanged.
    """

    if barometer_available and pressure_hpa is not None:
        return (gps_altitude_m + pressure_altitude_m(pressure_hpa, params)) / 2.0
    return gps_altitude_m
