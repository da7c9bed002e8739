"""Pulsing heart - particle frames precomputed once, then looped."""

import os
import random
import sys
import time

from pulseheart import Canvas, build_in_background, run
from pulseheart.canvas import CANVAS_HEIGHT, CANVAS_WIDTH
from pulseheart.generator import DEFAULT_FRAME_COUNT

HEART_COLOR = (255, 0, 0)
FRAME_HOLD = 5  # ticks each precomputed frame stays on screen


def _env_int(name: str, default: int | None) -> int | None:
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        print(f"ERROR: {name} must be an integer, got {raw!r}")
        sys.exit(1)


def load_options() -> dict:
    """Read HEART_SEED / HEART_FRAMES from the environment."""
    seed = _env_int("HEART_SEED", None)
    frame_count = _env_int("HEART_FRAMES", DEFAULT_FRAME_COUNT)
    if frame_count < 1:
        print(f"ERROR: HEART_FRAMES must be at least 1, got {frame_count}")
        sys.exit(1)
    return {
        "frame_count": frame_count,
        "rng": random.Random(seed) if seed is not None else None,
    }


# --- Shared state ---
_build = {"future": None, "started": 0.0}


def start(width: int = CANVAS_WIDTH, height: int = CANVAS_HEIGHT):
    """Kick off the background build (once) and return its Future."""
    if _build["future"] is None:
        options = load_options()
        _build["started"] = time.monotonic()
        future = build_in_background((width / 2, height / 2), **options)
        future.add_done_callback(_report)
        _build["future"] = future
    return _build["future"]


def _report(future) -> None:
    exc = future.exception()
    if exc is not None:
        print(f"[heart] ERROR building frames: {exc}")
        return
    gen = future.result()
    elapsed = time.monotonic() - _build["started"]
    biggest = max(len(f) for f in gen.frames)
    print(f"[heart] built {gen.frame_count} frames ({biggest} particles max) in {elapsed:.2f}s")


def render(canvas: Canvas, t: float, frame: int) -> None:
    canvas.clear()
    future = start(canvas.width, canvas.height)
    # Blank until every frame exists
    if not future.done() or future.exception() is not None:
        return
    frames = future.result().frames
    canvas.draw_particles(frames.loop(frame // FRAME_HOLD), HEART_COLOR)


if __name__ == "__main__":
    run(render, fps=60, title="Pulse Heart")
