"""Pulsing particle heart: precomputed animation frames plus a small pygame player."""

from pulseheart.canvas import Canvas
from pulseheart.generator import (
    FrameSequence, HeartGenerator, Particle, build_in_background, create,
)
from pulseheart.primitives import Point
from pulseheart.run import run

__all__ = [
    "Canvas", "FrameSequence", "HeartGenerator", "Particle", "Point",
    "build_in_background", "create", "run",
]
