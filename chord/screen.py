import logging

import numpy as np
import pygame

from .constants import BLACK, CAPTION, DOT_SIZE, MARGIN, WHITE

logger = logging.getLogger(__name__)


def project(positions, width, height, count):
    """
    Map chord coordinates to pixel coordinates.

    x is stretched so that `count` units span the window minus the margins;
    y uses the same ratio against the height and is centred vertically.
    Returns an int array of shape (len(positions), 2).
    """
    positions = np.asarray(positions, dtype=np.float64).reshape(-1, 2)
    xs = positions[:, 0] * (width - 2 * MARGIN) / count + MARGIN
    ys = positions[:, 1] * (height - 2 * MARGIN) / count + height / 2.0
    # halves round up
    return np.floor(np.column_stack((xs, ys)) + 0.5).astype(int)


class Screen:
    def __init__(self, width, height):
        pygame.init()
        pygame.display.set_caption(CAPTION)
        self.width = width
        self.height = height
        self.surface = pygame.display.set_mode((width, height))
        self.should_end = False
        logger.info("Opened %dx%d window", width, height)

    def tick(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.should_end = True
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.should_end = True

    def draw_square(self, x, y, w, color=WHITE):
        self.surface.fill(color, pygame.Rect(int(x), int(y), w, w))

    def draw(self, chain):
        self.surface.fill(BLACK)
        for x, y in project(chain.positions(), self.width, self.height, len(chain)):
            self.draw_square(x, y, DOT_SIZE)
        pygame.display.flip()

    def close(self):
        pygame.quit()
