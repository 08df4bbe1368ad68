import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pygame
import pytest

from colorwalk.constants import BG, BG_LOSE, QUADRANT_CELLS
from colorwalk.engine import RoundEngine
from colorwalk.game import Game
from colorwalk.input_queue import InputQueue
from colorwalk.models import Direction, Outcome
from colorwalk.picker import ColorPicker


@pytest.fixture
def game(clock):
    pygame.display.init()
    screen = pygame.display.set_mode((250, 230))
    rng = random.Random(42)
    g = Game(screen, RoundEngine(ColorPicker(rng=rng), rng=rng, clock=clock))
    yield g
    pygame.display.quit()


def rgb_at(game, cell_x, cell_y):
    rect = game.cell_rect(cell_x, cell_y)
    return tuple(game.screen.get_at(rect.center))[:3]


def test_layout_is_a_centred_integer_grid(game):
    assert game.cell == 10
    assert game.play_rect == pygame.Rect(20, 10, 210, 210)


def test_arrow_key_drives_the_engine(game):
    iq = InputQueue()
    game.update(iq)
    assert game.frame.state.round == 0

    game.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_UP, mod=0, unicode=""), iq)
    game.update(iq)
    assert game.frame.state.round == 1


def test_click_is_resolved_through_the_play_area(game):
    iq = InputQueue()
    # left edge of the play area, vertically centred
    game.handle_event(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(22, 115)), iq)
    assert iq.pop_tick() is Direction.LEFT


def test_touch_uses_normalised_window_position(game):
    iq = InputQueue()
    game.handle_event(pygame.event.Event(pygame.FINGERDOWN, x=0.5, y=0.99, touch_id=0, finger_id=0), iq)
    assert iq.pop_tick() is Direction.DOWN


def test_quadrants_are_drawn_in_their_colors(game):
    game.update(InputQueue())
    game.draw()
    for index, (x, y) in QUADRANT_CELLS.items():
        assert rgb_at(game, x + 1, y + 1) == game.frame.colors[index]
    assert rgb_at(game, 0, 0) == BG


@pytest.mark.parametrize("outcome, background", [(Outcome.WIN, BG), (Outcome.LOSE, BG_LOSE)])
def test_result_screen_background(game, clock, outcome, background):
    engine = game.engine
    engine.tick()
    engine.tick(0)
    clock.advance(12.34)
    if outcome is Outcome.LOSE:
        game.frame = engine.tick((engine.target + 1) % 4)
    else:
        while engine.state.is_playing:
            game.frame = engine.tick(engine.target)
    game.draw()
    assert rgb_at(game, 20, 20) == background
    # seconds units row: 12 seconds -> one tens dot, two units dots
    palette = engine.picker.palette
    assert rgb_at(game, 3, 9) == palette[1]
    assert rgb_at(game, 5, 11) == palette[1]
    assert rgb_at(game, 7, 11) == background


def test_reset_frame_does_not_show_previous_colors(game):
    engine = game.engine
    engine.tick()
    engine.tick(0)
    engine.tick((engine.target + 1) % 4)
    iq = InputQueue()
    iq.push_key(Direction.UP)
    game.update(iq)
    assert not game.frame.state.is_playing
    assert None not in game.frame.colors

    game.draw()
    for x, y in QUADRANT_CELLS.values():
        assert rgb_at(game, x + 1, y + 1) == BG


def test_focus_loss_drops_pending_input(game):
    iq = InputQueue()
    game.handle_event(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT, mod=0, unicode=""), iq)
    game.handle_event(pygame.event.Event(pygame.WINDOWFOCUSLOST), iq)
    assert iq.pop_tick() is None
