import logging
import pygame, sys
from tower_config import CONFIG
from tower_game import Action, GameController
from tower_input import KeyLatch
from tower_logging import level_from_env, setup_logging
from tower_render import PygameCanvas

log = logging.getLogger("tower.main")


def recreate_window(w, h, flags=pygame.DOUBLEBUF):
    try:
        return pygame.display.set_mode((w, h), flags, vsync=1)
    except (TypeError, pygame.error):
        return pygame.display.set_mode((w, h), flags)


def main():
    setup_logging(level_from_env())
    pygame.init()
    pygame.event.set_allowed([pygame.QUIT, pygame.KEYDOWN])

    game = GameController(CONFIG)
    screen = recreate_window(game.dims.total_w, game.dims.total_h)
    pygame.display.set_caption("Tower Stacker")

    canvas = PygameCanvas(screen)
    latch = KeyLatch()
    clock = pygame.time.Clock()
    log.info("Window %dx%d @ %d fps", game.dims.total_w, game.dims.total_h, CONFIG.target_fps)

    while True:
        dt = clock.tick(CONFIG.target_fps) / 1000.0
        inputs = latch.collect(pygame.event.get())
        if inputs.was_pressed(Action.QUIT):
            log.info("Quit after %d games, best score %d", game.history.count, game.history.best_score())
            pygame.quit(); sys.exit()

        game.update(dt, inputs)
        game.draw(canvas)
        pygame.display.flip()


if __name__ == '__main__':
    main()
