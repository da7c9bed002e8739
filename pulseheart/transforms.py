"""Point transforms: inward scatter, radial shrink and the per-frame breathing move."""

import math
import random

from pulseheart.primitives import random_int, random_source


def _log_ratio(beta: float, rng: random.Random | None) -> float:
    u = random_source(rng).random()
    while u == 0.0:
        u = random_source(rng).random()
    return -beta * math.log(u)


def scatter_inside(x: float, y: float, cx: float, cy: float,
                   beta: float = 0.15, rng: random.Random | None = None) -> tuple[float, float]:
    """Pull a point toward the center by an exponentially distributed fraction per axis.

    Bigger beta pulls further in on average: 0.05 keeps points hugging the
    outline, 0.27 spreads them through the interior.
    """
    ratio_x = _log_ratio(beta, rng)
    ratio_y = _log_ratio(beta, rng)
    dx = ratio_x * (x - cx)
    dy = ratio_y * (y - cy)
    return x - dx, y - dy


def shrink_toward_center(x: float, y: float, cx: float, cy: float,
                         ratio: float) -> tuple[float, float]:
    """Move a point along its radius by ratio / d^1.2. Used to place the halo band."""
    dist_sq = (x - cx) ** 2 + (y - cy) ** 2
    if dist_sq == 0:
        return x, y
    force = -1 / dist_sq ** 0.6
    dx = ratio * force * (x - cx)
    dy = ratio * force * (y - cy)
    return x - dx, y - dy


def perturb_position(x: float, y: float, cx: float, cy: float, ratio: float,
                     rng: random.Random | None = None) -> tuple[float, float]:
    """Breathing move for one frame: radial push of ratio / d^0.84 plus +-1 jitter.

    Negative ratio pushes outward instead of inward.
    """
    dist_sq = (x - cx) ** 2 + (y - cy) ** 2
    force = 1 / dist_sq ** 0.42 if dist_sq else 0.0
    dx = ratio * force * (x - cx) + random_int(-1, 1, rng)
    dy = ratio * force * (y - cy) + random_int(-1, 1, rng)
    return x - dx, y - dy
