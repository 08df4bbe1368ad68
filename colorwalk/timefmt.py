from __future__ import annotations

from typing import Tuple

from .constants import MAX_MINUTES


def split_duration(seconds: float) -> Tuple[int, int, int]:
    """Elapsed seconds -> (minutes, seconds, hundredths) for the result screen."""
    millis = max(0, int(round(float(seconds) * 1000)))
    minutes, millis = divmod(millis, 60000)
    secs, millis = divmod(millis, 1000)
    return min(MAX_MINUTES, minutes), secs, millis // 10


def format_duration(seconds: float) -> str:
    m, s, h = split_duration(seconds)
    return f"{m:02d}:{s:02d}.{h:02d}"


__all__ = ["split_duration", "format_duration"]
