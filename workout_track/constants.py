"""Physical constants and default thresholds."""

from __future__ import annotations

from typing import Final

# Standard atmosphere reference.
SEA_LEVEL_PRESSURE_HPA: Final[float] = 1013.25
BAROMETRIC_EXPONENT: Final[float] = 0.1903
BAROMETRIC_SCALE_M: Final[float] = 44330.0

# Upward deltas at or below this are treated as GPS/barometer jitter.
GAIN_THRESHOLD_M: Final[float] = 3.0

EARTH_RADIUS_M: Final[float] = 6_371_000.0

DEFAULT_TZ: Final[str] = "Asia/Seoul"
