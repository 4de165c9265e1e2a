"""
Duration parsing utilities for video assets.

Snapshot rows report video length either as a number of seconds or as a
clock string; these helpers normalise both to float seconds.
"""

from typing import Optional, Union
import math


def parse_duration_to_seconds(value: Union[str, int, float, None]) -> Optional[float]:
    """
    Parse a video duration into total seconds.

    Supported inputs:
    - None or empty string (unknown duration)
    - int/float seconds (e.g., 45, 12.5)
    - SS or SS.ms strings (e.g., "45", "12.5")
    - MM:SS(.ms) strings (e.g., "1:05", "2:30.25")
    - HH:MM:SS(.ms) strings (e.g., "0:01:05.5")

    Args:
        value: Raw duration value

    Returns:
        Total seconds as float, or None when the duration is unknown

    Raises:
        ValueError: If the value is negative, non-finite, or malformed
    """
    if value is None:
        return None

    if isinstance(value, bool):
        raise ValueError(f"Invalid duration: {value!r}")

    if isinstance(value, (int, float)):
        return _checked_seconds(float(value), value)

    text = str(value).strip()
    if not text:
        return None

    if text.startswith('-'):
        raise ValueError("Negative durations are not allowed")

    parts = text.split(':')
    if len(parts) > 3:
        raise ValueError(f"Invalid duration format: {text}. Use HH:MM:SS.ms, MM:SS.ms, or SS")

    try:
        seconds = float(parts[-1])
        minutes = int(parts[-2]) if len(parts) >= 2 else 0
        hours = int(parts[-3]) if len(parts) == 3 else 0
    except ValueError as e:
        raise ValueError(f"Invalid duration format: {text}") from e

    if len(parts) > 1 and not 0 <= seconds < 60:
        raise ValueError(f"Invalid duration components: seconds={seconds}")
    if len(parts) == 3 and not 0 <= minutes < 60:
        raise ValueError(f"Invalid duration components: minutes={minutes}")

    total = hours * 3600 + minutes * 60 + seconds
    # Round to avoid floating point edge cases (e.g., 59.999 -> 60)
    return round(_checked_seconds(total, text), 3)


def _checked_seconds(seconds: float, raw) -> float:
    if math.isnan(seconds) or math.isinf(seconds) or seconds < 0:
        raise ValueError(f"Invalid duration: {raw!r}")
    return seconds


def format_duration(seconds: float) -> str:
    """
    Format seconds as a compact clock string ("0:45", "1:05", "1:02:03").

    Args:
        seconds: Total seconds

    Returns:
        Formatted duration string
    """
    if seconds < 0:
        raise ValueError("Negative seconds not allowed")

    hours, remainder = divmod(int(round(seconds)), 3600)
    minutes, secs = divmod(remainder, 60)

    if hours > 0:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes}:{secs:02d}"
