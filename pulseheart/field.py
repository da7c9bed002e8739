"""Static point populations of the heart: outline, edge diffusion and center diffusion.

These are built once per generator and only ever read afterwards. Every frame
derives new particles from them without touching the stored points.
"""

import math
import random
from dataclasses import dataclass
from typing import Iterable, Iterator

from pulseheart.primitives import Point, heart_curve, random_choice, random_uniform
from pulseheart.transforms import scatter_inside

OUTLINE_SAMPLES = 1000
EDGE_SAMPLES = 3  # scatter draws per outline point
CENTER_SAMPLES = 5000
EDGE_BETA = 0.05
CENTER_BETA = 0.27

# Decimal places kept when deciding whether two points are the same
KEY_PRECISION = 9


class PointSet:
    """Insertion-ordered set of points.

    Two points are equal when both coordinates agree after rounding to
    KEY_PRECISION decimals. The first point added for a key is the one kept.
    """

    def __init__(self, points: Iterable[Point] = ()):
        self._points: dict[tuple[float, float], Point] = {}
        self._frozen = False
        for p in points:
            self.add(p)

    @staticmethod
    def key(point: Point) -> tuple[float, float]:
        return (round(point.x, KEY_PRECISION), round(point.y, KEY_PRECISION))

    def add(self, point: Point) -> bool:
        """Add a point. Returns False if an equal point was already present."""
        if self._frozen:
            raise TypeError("PointSet is frozen")
        k = self.key(point)
        if k in self._points:
            return False
        self._points[k] = Point(*point)
        return True

    def freeze(self) -> "PointSet":
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def as_tuple(self) -> tuple[Point, ...]:
        return tuple(self._points.values())

    def __contains__(self, point) -> bool:
        return self.key(Point(*point)) in self._points

    def __iter__(self) -> Iterator[Point]:
        return iter(self._points.values())

    def __len__(self) -> int:
        return len(self._points)

    def __eq__(self, other) -> bool:
        if not isinstance(other, PointSet):
            return NotImplemented
        return list(self._points) == list(other._points)

    def __repr__(self) -> str:
        return f"PointSet({len(self)} points)"


@dataclass(frozen=True)
class HeartField:
    """The three point populations a heart is drawn from."""
    center: Point
    outline: PointSet
    edge_diffusion: PointSet
    center_diffusion: PointSet

    @classmethod
    def build(cls, center: Point, outline_count: int = OUTLINE_SAMPLES,
              rng: random.Random | None = None) -> "HeartField":
        if isinstance(outline_count, bool) or not isinstance(outline_count, int) or outline_count < 1:
            raise ValueError(f"outline_count must be a positive int, got {outline_count!r}")
        center = Point(*center)
        cx, cy = center

        outline = PointSet()
        for _ in range(outline_count):
            t = random_uniform(0, 2 * math.pi, rng)
            outline.add(heart_curve(t, center))
        outline_points = outline.as_tuple()

        # Thin blur hugging the outline
        edge = PointSet()
        for px, py in outline_points:
            for _ in range(EDGE_SAMPLES):
                edge.add(Point(*scatter_inside(px, py, cx, cy, EDGE_BETA, rng)))

        # Broad fill, sampled with replacement from the outline
        fill = PointSet()
        for _ in range(CENTER_SAMPLES):
            px, py = random_choice(outline_points, rng)
            fill.add(Point(*scatter_inside(px, py, cx, cy, CENTER_BETA, rng)))

        return cls(center, outline.freeze(), edge.freeze(), fill.freeze())

    def __len__(self) -> int:
        return len(self.outline) + len(self.edge_diffusion) + len(self.center_diffusion)
