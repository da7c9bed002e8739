"""Random sampling helpers and the two curves everything else is built on."""

import math
import random
from typing import NamedTuple, Sequence, TypeVar

T = TypeVar("T")

# Heart curve output is roughly +-17 wide, so 11 gives a ~370px heart
IMAGE_ENLARGE = 11


class Point(NamedTuple):
    """A 2D point in canvas space."""
    x: float
    y: float


def random_source(rng: random.Random | None):
    """The rng to draw from: the given Random, or the module-level generator."""
    return random if rng is None else rng


def random_uniform(low: float, high: float, rng: random.Random | None = None) -> float:
    """Uniform float in [low, high)."""
    return random_source(rng).random() * (high - low) + low


def random_int(low: int, high: int, rng: random.Random | None = None) -> int:
    """Uniform int in [low, high], both ends inclusive."""
    return math.floor(random_source(rng).random() * (high - low + 1)) + low


def random_choice(items: Sequence[T], rng: random.Random | None = None) -> T:
    """Pick one element of a non-empty sequence uniformly."""
    if not items:
        raise ValueError("random_choice() needs a non-empty sequence")
    return items[math.floor(random_source(rng).random() * len(items))]


def heart_curve(t: float, center: Point, enlarge: float = IMAGE_ENLARGE) -> Point:
    """Map an angle t in [0, 2*pi) onto the heart outline around center.

    Sampling t uniformly does not give uniform arc length: points bunch up
    where the curve moves slowly (the dip and the tip), which is the look we want.
    """
    x = 17 * math.sin(t) ** 3
    y = -(16 * math.cos(t) - 5 * math.cos(2 * t) - 3 * math.cos(3 * t))
    return Point(x * enlarge + center.x, y * enlarge + center.y)


def breathing_curve(p: float) -> float:
    """Periodic pulse used to drive per-frame amplitude. Range is about +-0.637."""
    return 2 * (2 * math.sin(4 * p)) / (2 * math.pi)
