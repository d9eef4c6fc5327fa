"""Fixed-width duration formatting."""

from __future__ import annotations


def format_duration(duration_ms: int) -> str:
    """Format a duration in milliseconds to a fixed width string.

    * ``XX.XXX sec`` under 100 seconds
    * `` XX:XX min`` under 100 minutes
    * ``XXX:XX hrs`` for the rest

    Remainders are truncated, never rounded.
    """

    if duration_ms < 0:
        raise ValueError(f"cannot format negative duration {duration_ms}")

    seconds = duration_ms // 1000
    if seconds < 100:
        return f"{seconds:2d}.{duration_ms % 1000:03d} sec"

    minutes = seconds // 60
    if minutes < 100:
        return f"{minutes:3d}:{seconds % 60:02d} min"

    return f"{minutes // 60:3d}:{minutes % 60:02d} hrs"
