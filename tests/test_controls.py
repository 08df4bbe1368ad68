import pygame
import pytest

from colorwalk.config import DEFAULT_CFG
from colorwalk.controls import direction_from_point, key_direction, normalize_direction, to_relative_coords
from colorwalk.models import Direction


@pytest.mark.parametrize(
    "fx, fy, expected",
    [
        (0.5, 0.1, Direction.UP),
        (0.9, 0.5, Direction.RIGHT),
        (0.5, 0.9, Direction.DOWN),
        (0.1, 0.5, Direction.LEFT),
        (0.5, 0.5, Direction.UP),
        (0.0, 0.0, Direction.UP),
        (1.0, 0.0, Direction.UP),
        (1.0, 1.0, Direction.RIGHT),
        (0.0, 1.0, Direction.LEFT),
        (0.2, 0.3, Direction.LEFT),
        (0.7, 0.8, Direction.DOWN),
    ],
)
def test_direction_from_point_splits_along_diagonals(fx, fy, expected):
    assert direction_from_point(fx, fy) is expected


def test_relative_coords_inside_play_area():
    area = pygame.Rect(100, 50, 200, 200)
    assert to_relative_coords((100, 50), area) == (0.0, 0.0)
    assert to_relative_coords((200, 150), area) == (0.5, 0.5)
    assert to_relative_coords((250, 100), area) == (0.75, 0.25)


def test_relative_coords_clamp_outside_play_area():
    area = pygame.Rect(100, 50, 200, 200)
    assert to_relative_coords((0, 0), area) == (0.0, 0.0)
    assert to_relative_coords((1000, 60), area) == (1.0, 0.05)


@pytest.mark.parametrize("value, expected", [(0, Direction.UP), (3, Direction.LEFT), (Direction.DOWN, Direction.DOWN)])
def test_normalize_direction_accepts_valid_values(value, expected):
    assert normalize_direction(value) is expected


@pytest.mark.parametrize("value", [None, -1, 4, 22, False, True, 2.0, "2"])
def test_normalize_direction_rejects_everything_else(value):
    assert normalize_direction(value) is None


def test_key_direction_uses_bindings():
    bindings = DEFAULT_CFG["controls"]["keys"]
    assert key_direction("up", bindings) is Direction.UP
    assert key_direction("d", bindings) is Direction.RIGHT
    assert key_direction("s", bindings) is Direction.DOWN
    assert key_direction("left", bindings) is Direction.LEFT
    assert key_direction("space", bindings) is None
    assert key_direction("x", {"NORTH": ["x"]}) is None
