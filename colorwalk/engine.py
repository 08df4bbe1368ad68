from __future__ import annotations

import logging
import random
import time
from typing import Callable, List, Optional

from .config import CFG
from .constants import FINAL_ROUND, QUADRANTS, SWAP_EVERY
from .controls import normalize_direction
from .models import Color, Direction, Frame, Outcome, RoundState
from .picker import ColorPicker

logger = logging.getLogger(__name__)


def swaps_for_round(round_no: int, every: int = SWAP_EVERY) -> int:
    """Number of colour swaps applied when advancing into ``round_no``."""
    return max(0, round_no) // max(1, every)


class RoundEngine:
    """Round progression for the colour walk.

    UNINITIALIZED -> PLAYING(0) -> PLAYING(1..final) -> RESULT(WIN|LOSE),
    and back to UNINITIALIZED on any input while a result is shown. The
    host calls :meth:`tick` once per frame with at most one direction.
    """

    def __init__(
        self,
        picker: Optional[ColorPicker] = None,
        *,
        rng: Optional[random.Random] = None,
        clock: Callable[[], float] = time.monotonic,
        final_round: Optional[int] = None,
        swap_every: Optional[int] = None,
    ) -> None:
        game_cfg = CFG.get("game", {}) or {}
        self.rng = rng or random.Random()
        self.picker = picker or ColorPicker(rng=self.rng)
        self.clock = clock
        self.final_round = int(final_round if final_round is not None else game_cfg.get("final_round", FINAL_ROUND))
        self.swap_every = int(swap_every if swap_every is not None else game_cfg.get("swap_every", SWAP_EVERY))

        self._state = RoundState.uninitialized()
        self._colors: List[Optional[Color]] = [None] * QUADRANTS
        self._target: Optional[int] = None
        self._start: Optional[float] = None
        self._elapsed: Optional[float] = None
        self.last_swaps = 0

    # ---- Read-only view ----

    @property
    def state(self) -> RoundState:
        return self._state

    @property
    def colors(self) -> tuple[Optional[Color], ...]:
        return tuple(self._colors)

    @property
    def target(self) -> Optional[int]:
        return self._target

    @property
    def elapsed(self) -> Optional[float]:
        return self._elapsed

    def frame(self) -> Frame:
        elapsed = self._elapsed if self._state.is_result else None
        return Frame(self._state, self.colors, elapsed)

    # ---- Tick ----

    def tick(self, direction: object = None, now: Optional[float] = None) -> Frame:
        state = self._state
        if not state.is_playing and not state.is_result:
            self._initialize()
            return self.frame()

        choice = normalize_direction(direction)
        if choice is None:
            if direction is not None:
                logger.debug(f"Discarding malformed input {direction!r}")
            return self.frame()

        if state.is_result:
            self.reset()
        elif state.round == 0 or choice == self._target:
            self._advance(self._now(now))
        else:
            self._lose(self._now(now), choice)
        return self.frame()

    def reset(self) -> None:
        """Back to UNINITIALIZED; the next tick deals four fresh colours."""
        self._state = RoundState.uninitialized()
        self._target = None
        self._start = None
        self._elapsed = None
        self.last_swaps = 0
        logger.debug("Round engine reset")

    # ---- Transitions ----

    def _now(self, now: Optional[float]) -> float:
        return float(now) if now is not None else float(self.clock())

    def _initialize(self) -> None:
        for i in range(QUADRANTS):
            self.reroll_color(i)
        self._state = RoundState.playing(0)
        logger.debug(f"Dealt colours {self._colors}")

    def _advance(self, now: float) -> None:
        nxt = self._state.round + 1
        if nxt == 1:
            self._start = now
            logger.info("Game started")

        if nxt > self.final_round:
            self._finish(Outcome.WIN, now)
            return

        self._state = RoundState.playing(nxt)
        self._target = self.rng.randrange(QUADRANTS)
        self.reroll_color(self._target)
        self.last_swaps = swaps_for_round(nxt, self.swap_every)
        for _ in range(self.last_swaps):
            self.swap_colors()
        logger.debug(f"Round {nxt}: target {Direction(self._target).name}, {self.last_swaps} swaps")

    def _lose(self, now: float, choice: Direction) -> None:
        logger.debug(f"Wrong input {choice.name}, target was {Direction(self._target).name}")
        self._finish(Outcome.LOSE, now)

    def _finish(self, outcome: Outcome, now: float) -> None:
        reached = self._state.round
        self._elapsed = now - self._start
        self._state = RoundState.result(outcome, self.final_round)
        logger.info(f"Game over: {outcome.name} at round {reached} in {self._elapsed:.2f}s")

    # ---- Colour operations ----

    def reroll_color(self, index: int) -> Color:
        # exclusion covers all four slots, re-read after every assignment
        color = self.picker.pick(self._colors)
        self._colors[index] = color
        return color

    def swap_colors(self) -> None:
        a, b = self.rng.randrange(QUADRANTS), self.rng.randrange(QUADRANTS)
        if a == self._target:
            self._target = b
        elif b == self._target:
            self._target = a
        self._colors[a], self._colors[b] = self._colors[b], self._colors[a]


__all__ = ["RoundEngine", "swaps_for_round"]
