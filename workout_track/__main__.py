"""Module entry point: python -m workout_track ..."""

from __future__ import annotations

from workout_track.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
