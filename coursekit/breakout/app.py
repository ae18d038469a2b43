"""Window setup, the start screen and the hand-over to the game."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

import pygame

from coursekit.breakout.game import BEST_RESULTS_FILE, Game
from coursekit.breakout.menus import StartMenu
from coursekit.breakout.resources import DEFAULT_DIRECTORY, Resources

WINDOW_SIZE = (720, 960)
TITLE = "Brick Breaker"


def main(argv: Sequence[str] | None = None) -> int:
    """Open the window, show the start screen, then play until the window closes."""
    parser = argparse.ArgumentParser(prog="brick-breaker", description=TITLE)
    parser.add_argument("--resources", default=DEFAULT_DIRECTORY, help="directory with images, fonts and sounds")
    parser.add_argument("--scores", default=BEST_RESULTS_FILE, help="file keeping the best results")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        screen = pygame.display.set_mode(WINDOW_SIZE)
        pygame.display.set_caption(TITLE)

        resources = Resources(args.resources)
        resources.load_textures()
        resources.load_fonts()

        start = StartMenu()
        while True:
            if start.closed:
                Game(screen, resources, scores_path=args.scores).run()
                return 0
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type == pygame.KEYDOWN:
                    start.handle_key(event.key)
            start.render(screen, resources)
            pygame.display.flip()
    finally:
        pygame.quit()


if __name__ == "__main__":
    sys.exit(main())