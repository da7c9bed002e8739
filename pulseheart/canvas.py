"""RGB pixel buffer that frames are painted onto, backed by a numpy array."""

import numpy as np

# Type alias for RGB tuples
Color = tuple[int, int, int]

CANVAS_WIDTH = 840
CANVAS_HEIGHT = 680


class Canvas:
    """RGB pixel buffer with the few drawing primitives playback needs.

    Pixels live in a uint8 array of shape (height, width, 3), so pixel (x, y)
    is buffer[y, x]. Drawing outside the canvas is clipped, never an error.
    """

    def __init__(self, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT):
        self.width = width
        self.height = height
        self.buffer = np.zeros((height, width, 3), dtype=np.uint8)

    def clear(self, color: Color = (0, 0, 0)) -> None:
        """Fill entire canvas with a color (default black)."""
        self.buffer[:, :] = color

    def rect(self, x: int, y: int, w: int, h: int, color: Color) -> None:
        """Draw a filled rectangle, clipped to the canvas."""
        x0, y0 = max(x, 0), max(y, 0)
        x1, y1 = min(x + w, self.width), min(y + h, self.height)
        if x0 < x1 and y0 < y1:
            self.buffer[y0:y1, x0:x1] = color

    def draw_particles(self, particles, color: Color) -> None:
        """Paint each (x, y, size) particle as a size x size square."""
        for x, y, size in particles:
            self.rect(int(x), int(y), size, size, color)
