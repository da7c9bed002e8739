"""Pygame window that shows the canvas contents."""

import pygame
from pulseheart.canvas import Canvas


class Simulator:
    """Opens a window that displays the Canvas contents, optionally upscaled."""

    def __init__(self, canvas: Canvas, scale: int = 1, title: str = "Pulse Heart"):
        self.canvas = canvas
        self.scale = scale
        self.width = canvas.width * scale
        self.height = canvas.height * scale

        pygame.init()
        self.screen = pygame.display.set_mode((self.width, self.height))
        pygame.display.set_caption(title)
        self.clock = pygame.time.Clock()
        self.surface = pygame.Surface((canvas.width, canvas.height))

    def update(self) -> bool:
        """Blit canvas to screen. Returns False if window was closed."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False

        # surfarray is indexed [x, y], the canvas buffer [y, x]
        pygame.surfarray.blit_array(self.surface, self.canvas.buffer.swapaxes(0, 1))
        if self.scale == 1:
            self.screen.blit(self.surface, (0, 0))
        else:
            pygame.transform.scale(self.surface, (self.width, self.height), self.screen)
        pygame.display.flip()
        return True

    def tick(self, fps: int = 30) -> None:
        """Limit framerate."""
        self.clock.tick(fps)

    def close(self) -> None:
        pygame.quit()
