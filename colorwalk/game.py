from __future__ import annotations

import logging
import sys
from typing import Optional, Tuple

import pygame

from .config import CFG, persist_windowed_size
from .constants import *
from .controls import key_direction, to_relative_coords
from .engine import RoundEngine
from .input_queue import InputQueue
from .models import Frame, Outcome
from .timefmt import format_duration, split_duration

logger = logging.getLogger(__name__)

WINDOWED_FLAGS = pygame.RESIZABLE


class Game:

    # ---- Core lifecycle wiring ----

    def __init__(self, screen: pygame.Surface, engine: Optional[RoundEngine] = None):
        self.screen = screen
        self.cfg = CFG
        self.engine = engine or RoundEngine()
        self.frame: Frame = self.engine.frame()
        self.clock = pygame.time.Clock()

        self.fullscreen = bool(CFG.get("display", {}).get("fullscreen", False))
        self.last_windowed_size = tuple(CFG.get("display", {}).get("windowed_size", WINDOWED_DEFAULT_SIZE))
        self.key_bindings = dict(CFG.get("controls", {}).get("keys", {}))
        self.show_debug = bool(CFG.get("debug", {}).get("overlay", False))

        self.w, self.h = self.screen.get_size()
        self.play_rect = pygame.Rect(0, 0, GRID_SIZE, GRID_SIZE)
        self.cell = 1
        self._recompute_layout()

        self._debug_font: Optional[pygame.font.Font] = None

    # ---- Layout ----

    def _recompute_layout(self) -> None:
        self.w, self.h = self.screen.get_size()
        # integer cell size keeps the grid pixel-sharp; leftover space is letterbox
        self.cell = max(1, min(self.w, self.h) // GRID_SIZE)
        side = self.cell * GRID_SIZE
        self.play_rect = pygame.Rect((self.w - side) // 2, (self.h - side) // 2, side, side)

    def cell_rect(self, x: int, y: int, w: int = 1, h: int = 1) -> pygame.Rect:
        return pygame.Rect(
            self.play_rect.x + x * self.cell,
            self.play_rect.y + y * self.cell,
            w * self.cell,
            h * self.cell,
        )

    def _set_windowed_size(self, width: int, height: int) -> None:
        width, height = max(WINDOW_MIN_SIZE, int(width)), max(WINDOW_MIN_SIZE, int(height))
        if self.screen.get_size() != (width, height):
            self.screen = pygame.display.set_mode((width, height), WINDOWED_FLAGS)
        self.last_windowed_size = (width, height)
        persist_windowed_size(width, height)
        self._recompute_layout()

    def _set_display_mode(self, fullscreen: bool) -> None:
        self.fullscreen = fullscreen
        if fullscreen:
            self.screen = pygame.display.set_mode((0, 0), pygame.FULLSCREEN)
            self._recompute_layout()
        else:
            w, h = self.last_windowed_size
            self.screen = pygame.display.set_mode((w, h), WINDOWED_FLAGS)
            self._recompute_layout()
        pygame.display.set_caption(WINDOW_TITLE)

    def handle_resize(self, width: int, height: int) -> None:
        if self.fullscreen:
            return
        self._set_windowed_size(width, height)

    # ---- Input ----

    def handle_event(self, event: pygame.event.Event, iq: InputQueue) -> None:
        if event.type == pygame.VIDEORESIZE:
            self.handle_resize(event.w, event.h)
            return

        if event.type == pygame.WINDOWFOCUSLOST:
            iq.clear()
            return

        if event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_ESCAPE, pygame.K_q):
                pygame.quit(); sys.exit(0)
            if event.key == pygame.K_F11:
                iq.clear()
                self._set_display_mode(not self.fullscreen)
                return
            if event.key == pygame.K_F3:
                self.show_debug = not self.show_debug
                return
            direction = key_direction(pygame.key.name(event.key), self.key_bindings)
            if direction is not None:
                iq.push_key(direction)

        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            # SDL also synthesizes mouse events from touches; those arrive as FINGERDOWN
            if getattr(event, "touch", False):
                return
            iq.push_mouse(*to_relative_coords(event.pos, self.play_rect))

        elif event.type == pygame.FINGERDOWN:
            pos = (event.x * self.w, event.y * self.h)
            iq.push_touch(*to_relative_coords(pos, self.play_rect))

    # ---- Update ----

    def update(self, iq: InputQueue) -> None:
        self.frame = self.engine.tick(iq.pop_tick())

    # ---- Rendering ----

    def fill_cells(self, x: int, y: int, w: int, h: int, color) -> None:
        self.screen.fill(color, self.cell_rect(x, y, w, h))

    def _draw_playing(self) -> None:
        self.screen.fill(BG)
        # after a reset the previous game's colours linger until the next deal
        quadrants = QUADRANT_CELLS.items() if self.frame.state.is_playing else ()
        for index, (x, y) in quadrants:
            color = self.frame.colors[index]
            if color is not None:
                self.fill_cells(x, y, QUADRANT_SIZE, QUADRANT_SIZE, color)

        for x, y in DECOR_HBARS:
            self.fill_cells(x, y, 3, 1, DARK)
        for x, y in DECOR_VBARS:
            self.fill_cells(x, y, 1, 3, DARK)
        for x, y in DECOR_PIXELS:
            self.fill_cells(x, y, 1, 1, DARK)

    def _draw_tally_rows(self, value: int, rows: Tuple[int, int], color) -> None:
        tens_y, units_y = rows
        self.fill_cells(RESULT_MARKER_X, tens_y, 1, 1, DARK)
        self.fill_cells(RESULT_MARKER_X, units_y, 1, 1, DARK)
        for i in range(value // 10):
            self.fill_cells(RESULT_TALLY_X0 + i * RESULT_TALLY_STEP, tens_y, 1, 1, color)
        for i in range(value % 10):
            self.fill_cells(RESULT_TALLY_X0 + i * RESULT_TALLY_STEP, units_y, 1, 1, color)

    def _draw_result(self) -> None:
        lost = self.frame.state.outcome is Outcome.LOSE
        self.screen.fill(BG_LOSE if lost else BG)
        palette = self.engine.picker.palette
        minutes, seconds, hundredths = split_duration(self.frame.elapsed or 0.0)
        self._draw_tally_rows(minutes, RESULT_ROWS["minutes"], palette[0])
        self._draw_tally_rows(seconds, RESULT_ROWS["seconds"], palette[1])
        self._draw_tally_rows(hundredths, RESULT_ROWS["hundredths"], palette[2])

    def _font(self) -> pygame.font.Font:
        if self._debug_font is None:
            try:
                self._debug_font = pygame.font.SysFont("monospace", DEBUG_FONT_SIZE)
            except Exception as e:
                logger.warning(f"System font unavailable, using default: {e}")
                self._debug_font = pygame.font.Font(None, DEBUG_FONT_SIZE)
        return self._debug_font

    def _draw_debug(self) -> None:
        lines = [
            f"round {self.frame.state.level}",
            f"fps {self.clock.get_fps():.1f}",
        ]
        if self.frame.elapsed is not None:
            lines.append(f"time {format_duration(self.frame.elapsed)}")
        font = self._font()
        y = DEBUG_MARGIN
        for line in lines:
            surf = font.render(line, True, INK, DARK)
            self.screen.blit(surf, (DEBUG_MARGIN, y))
            y += surf.get_height()

    def draw(self) -> None:
        if self.frame.state.is_result:
            self._draw_result()
        else:
            self._draw_playing()
        if self.show_debug:
            self._draw_debug()
        pygame.display.flip()


__all__ = ["Game"]
