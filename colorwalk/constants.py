from __future__ import annotations

from pathlib import Path

PKG_DIR = Path(__file__).resolve().parent


# --- Palette ----------------------------------------------------------------
# Candidate quadrant colours; rerolls draw from this list.
DEFAULT_PALETTE = (
    (215,  48,  48), (101,  78, 206), ( 65, 175,  79),
    (255,   0,  63), (255, 199,  17), (183,  47, 214),
    (255,  22, 216), (255, 185, 173), ( 37, 186, 109),
    (104, 216,  82), (232, 158, 109), ( 79,  72, 127),
    ( 89, 127, 124), (127,  89,  89), (121, 127,  89),
)

BG = (216, 243, 255)             # playing / win background
BG_LOSE = (0, 0, 0)
DARK = (48, 48, 48)              # decorations and result row markers
INK = (235, 235, 235)            # debug overlay text

# --- Quadrants --------------------------------------------------------------
QUADRANTS = 4
UP, RIGHT, DOWN, LEFT = 0, 1, 2, 3

# --- Round progression ------------------------------------------------------
FINAL_ROUND = 20                 # last playable round; passing it wins
SWAP_EVERY = 3                   # one extra swap every N rounds

# --- Logical grid -----------------------------------------------------------
GRID_SIZE = 21
QUADRANT_CELLS = {
    UP:    (9, 3),
    RIGHT: (15, 9),
    DOWN:  (9, 15),
    LEFT:  (3, 9),
}
QUADRANT_SIZE = 3

# (x, y) of 3x1 horizontal bars, 1x3 vertical bars and single pixels
DECOR_HBARS = ((9, 9), (9, 11), (9, 1), (9, 19), (3, 7), (3, 13), (15, 7), (15, 13))
DECOR_VBARS = ((1, 9), (7, 3), (13, 3), (19, 9), (7, 15), (13, 15))
DECOR_PIXELS = ((9, 10), (11, 10), (7, 7), (13, 7), (7, 13), (13, 13))

# Result screen rows: (tens row y, units row y) per time component
RESULT_ROWS = {
    "minutes":    (4, 6),
    "seconds":    (9, 11),
    "hundredths": (14, 16),
}
RESULT_MARKER_X = 1
RESULT_TALLY_X0 = 3
RESULT_TALLY_STEP = 2
MAX_MINUTES = 99

# --- Display ----------------------------------------------------------------
FPS = 60
WINDOWED_DEFAULT_SIZE = (630, 630)
WINDOW_MIN_SIZE = GRID_SIZE * 4
WINDOW_TITLE = "Color Walk"
DEBUG_FONT_SIZE = 18
DEBUG_MARGIN = 6
