from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Optional, Tuple

from .constants import DOWN, FINAL_ROUND, LEFT, RIGHT, UP

Color = Tuple[int, int, int]


class Direction(IntEnum):
    UP = UP
    RIGHT = RIGHT
    DOWN = DOWN
    LEFT = LEFT


class Phase(Enum):
    UNINITIALIZED = auto()
    PLAYING = auto()
    RESULT = auto()


class Outcome(Enum):
    WIN = auto()
    LOSE = auto()


@dataclass(frozen=True)
class RoundState:
    phase: Phase
    round: int = 0
    outcome: Optional[Outcome] = None

    @classmethod
    def uninitialized(cls) -> "RoundState":
        return cls(Phase.UNINITIALIZED, -1)

    @classmethod
    def playing(cls, round_no: int) -> "RoundState":
        return cls(Phase.PLAYING, round_no)

    @classmethod
    def result(cls, outcome: Outcome, final_round: int = FINAL_ROUND) -> "RoundState":
        offset = 1 if outcome is Outcome.WIN else 2
        return cls(Phase.RESULT, final_round + offset, outcome)

    @property
    def is_playing(self) -> bool:
        return self.phase is Phase.PLAYING

    @property
    def is_result(self) -> bool:
        return self.phase is Phase.RESULT

    @property
    def level(self) -> int:
        """Single-integer encoding: -1, 0..final, final+1 (win), final+2 (lose)."""
        return self.round


@dataclass(frozen=True)
class Frame:
    """What the host reads after each tick."""
    state: RoundState
    colors: Tuple[Optional[Color], ...]
    elapsed: Optional[float] = None


__all__ = ["Color", "Direction", "Phase", "Outcome", "RoundState", "Frame"]
