from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Dict, TYPE_CHECKING

from .config import CFG
from .models import Direction

if TYPE_CHECKING:
    from .input_queue import InputQueue

logger = logging.getLogger(__name__)

GPIO_AVAILABLE = True
IS_WINDOWS = sys.platform.startswith("win")
try:
    from gpiozero import Button  # type: ignore
except Exception:  # pragma: no cover - gpiozero is optional
    GPIO_AVAILABLE = False
    Button = None  # type: ignore


@dataclass
class Pins:
    UP: int
    RIGHT: int
    DOWN: int
    LEFT: int


PINS = Pins(**CFG["pins"])

GPIO_PULL_UP = True
GPIO_BOUNCE_TIME = 0.05


def init_gpio(iq: "InputQueue") -> Dict[Direction, "Button"]:
    if IS_WINDOWS or not GPIO_AVAILABLE or Button is None:
        return {}
    pins = {
        Direction.UP: PINS.UP,
        Direction.RIGHT: PINS.RIGHT,
        Direction.DOWN: PINS.DOWN,
        Direction.LEFT: PINS.LEFT,
    }
    try:
        buttons = {
            d: Button(pin, pull_up=GPIO_PULL_UP, bounce_time=GPIO_BOUNCE_TIME)
            for d, pin in pins.items()
        }
    except Exception as e:
        logger.warning(f"GPIO buttons unavailable: {e}")
        return {}
    for d, btn in buttons.items():
        btn.when_pressed = (lambda d=d: iq.push_key(d))
    logger.info(f"GPIO buttons ready on pins {PINS}")
    return buttons


__all__ = [
    "GPIO_AVAILABLE",
    "IS_WINDOWS",
    "Pins",
    "PINS",
    "GPIO_PULL_UP",
    "GPIO_BOUNCE_TIME",
    "init_gpio",
]
