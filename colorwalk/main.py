from __future__ import annotations

import logging
import os
import sys

import pygame

from .config import CFG
from .constants import FPS, WINDOW_TITLE
from .game import Game
from .gpio import init_gpio
from .input_queue import InputQueue

logger = logging.getLogger(__name__)


# ============================== MAIN LOOP ============================== #
def main():
    logging.basicConfig(
        level=CFG.get("logging", {}).get("level", "INFO"),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    os.environ.setdefault('SDL_VIDEO_CENTERED', "1")
    pygame.init()
    fullscreen = bool(CFG.get("display", {}).get("fullscreen", False))
    screen = pygame.display.set_mode((1, 1))  # tiny placeholder; real size set next
    game = Game(screen)
    game._set_display_mode(fullscreen)
    pygame.display.set_caption(WINDOW_TITLE)
    iq = InputQueue()
    _ = init_gpio(iq)
    logger.info(f"Config loaded from {CFG['config_path']}")

    while True:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            game.handle_event(event, iq)
        game.update(iq)
        game.draw()
        game.clock.tick(int(CFG.get("display", {}).get("fps", FPS)))

if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        pygame.quit(); sys.exit(0)
