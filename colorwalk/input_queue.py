from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Optional, Set, Tuple

from .controls import direction_from_point
from .models import Direction


class InputQueue:
    """Collects input between ticks and hands out one direction per tick.

    Keys (keyboard and GPIO buttons) win over pointers; among pointers a
    mouse click wins over touches, and only the first touch counts.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()  # gpiozero callbacks arrive on their own thread
        self._keys: Set[Direction] = set()
        self._mouse: Optional[Tuple[float, float]] = None
        self._touches: Deque[Tuple[float, float]] = deque()

    def push_key(self, direction: Direction) -> None:
        with self._lock:
            self._keys.add(Direction(direction))

    def push_mouse(self, fx: float, fy: float) -> None:
        with self._lock:
            if self._mouse is None:
                self._mouse = (fx, fy)

    def push_touch(self, fx: float, fy: float) -> None:
        with self._lock:
            self._touches.append((fx, fy))

    def pop_tick(self) -> Optional[Direction]:
        with self._lock:
            out: Optional[Direction] = None
            if self._keys:
                out = min(self._keys)
            elif self._mouse is not None:
                out = direction_from_point(*self._mouse)
            elif self._touches:
                out = direction_from_point(*self._touches[0])
            self._clear()
        return out

    def clear(self) -> None:
        with self._lock:
            self._clear()

    def _clear(self) -> None:
        self._keys.clear()
        self._mouse = None
        self._touches.clear()


__all__ = ["InputQueue"]
