from __future__ import annotations

from typing import Any, Optional, Tuple

from .models import Direction


def normalize_direction(value: Any) -> Optional[Direction]:
    """Coerce raw input into a Direction; anything else means "no input"."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Direction):
        return value
    if isinstance(value, int) and 0 <= value < len(Direction):
        return Direction(value)
    return None


def direction_from_point(fx: float, fy: float) -> Direction:
    """Split the unit square along both diagonals into up/right/down/left."""
    if fx < fy:  # bottom left half
        if 1.0 - fx < fy:
            return Direction.DOWN
        return Direction.LEFT
    if 1.0 - fx < fy:  # upper right half
        return Direction.RIGHT
    return Direction.UP


def to_relative_coords(pos: Tuple[float, float], area) -> Tuple[float, float]:
    """Window pixel position -> play area coordinates clamped to [0, 1]."""
    x, y = pos
    w = max(1, area.width)
    h = max(1, area.height)
    fx = (x - area.x) / w
    fy = (y - area.y) / h
    return max(0.0, min(1.0, fx)), max(0.0, min(1.0, fy))


def key_direction(name: str, bindings: dict) -> Optional[Direction]:
    """Look up a key name (``pygame.key.name`` spelling) in ``controls.keys``."""
    for dir_name, keys in bindings.items():
        if name in keys and dir_name in Direction.__members__:
            return Direction[dir_name]
    return None


__all__ = ["normalize_direction", "direction_from_point", "to_relative_coords", "key_direction"]
