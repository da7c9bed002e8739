"""Main run loop - ties together Canvas and Simulator."""

import time
from typing import Callable

from pulseheart.canvas import CANVAS_HEIGHT, CANVAS_WIDTH, Canvas
from pulseheart.simulator import Simulator

# Callback type: fn(canvas, time_seconds, frame_number) -> None
RenderFn = Callable[[Canvas, float, int], None]


def run(render: RenderFn, fps: int = 60, title: str = "Pulse Heart",
        scale: int = 1, width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT) -> None:
    """Run the render loop in a preview window until it is closed.

    Args:
        render: Callback called each tick with (canvas, elapsed_time, frame_number).
                Canvas is NOT auto-cleared between ticks.
        fps: Target ticks per second (default 60).
        title: Window title.
        scale: Pixel scale factor for the window (default 1).
        width: Canvas width in pixels (default 840).
        height: Canvas height in pixels (default 680).
    """
    canvas = Canvas(width, height)
    sim = Simulator(canvas, scale=scale, title=title)

    start = time.monotonic()
    frame = 0

    try:
        while True:
            t = time.monotonic() - start
            render(canvas, t, frame)

            if not sim.update():
                break

            sim.tick(fps)
            frame += 1
    except KeyboardInterrupt:
        pass
    finally:
        sim.close()
