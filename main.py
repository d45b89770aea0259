import logging
import sys

import pygame

from bintris_config import CONFIG
from bintris_game import Game
from bintris_input import ShiftRepeat, dispatch
from bintris_layout import compute_dims
from bintris_render import RenderAssets
from bintris_rng import BinaryRandom
from bintris_score import BestScore


def open_window(dims):
    size = (dims.total_w, dims.total_h)
    # vsync is only accepted by pygame 2 set_mode
    if pygame.version.vernum >= (2, 0):
        return pygame.display.set_mode(size, pygame.DOUBLEBUF, vsync=1)
    return pygame.display.set_mode(size, pygame.DOUBLEBUF)


def main():
    logging.basicConfig(level=CONFIG["LOG_LEVEL"],
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN, pygame.KEYUP])

    dims = compute_dims()
    screen = open_window(dims)
    pygame.display.set_caption("Binary Tetris")
    font = pygame.font.SysFont(None, 22)
    big_font = pygame.font.SysFont(None, 42)

    render = RenderAssets(dims, font, big_font)
    clock = pygame.time.Clock()

    best = BestScore(CONFIG["BEST_SCORE_PATH"])
    game = Game(BinaryRandom(CONFIG["SEED"]), best)
    shift = ShiftRepeat(CONFIG["DAS_MS"], CONFIG["ARR_MS"])

    while True:
        dt = clock.tick(60)

        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                game.reset()
                pygame.quit(); sys.exit()
            if e.type == pygame.KEYDOWN:
                dispatch(game, e.key)

        # Horizontal movement repeats while held
        keys = pygame.key.get_pressed()
        step = shift.update(dt, keys[pygame.K_LEFT], keys[pygame.K_RIGHT])
        if step:
            game.move(step)

        game.update()

        render.draw_frame(screen, game, best.value)
        pygame.display.flip()


if __name__ == '__main__':
    main()
