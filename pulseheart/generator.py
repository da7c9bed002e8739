"""Precomputes the pulsing-heart animation as a fixed sequence of particle frames.

A HeartGenerator builds its HeartField once, then synthesizes every frame up
front. Nothing is exposed until all frames exist, and nothing changes after.

    gen = create((420, 340))
    for x, y, size in gen.frames.loop(frame_number):
        ...  # paint a size x size square at (x, y)
"""

import math
import random
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Iterator, NamedTuple

from pulseheart.field import OUTLINE_SAMPLES, HeartField
from pulseheart.primitives import (
    Point, breathing_curve, heart_curve, random_choice, random_int, random_uniform,
)
from pulseheart.transforms import perturb_position, shrink_toward_center

DEFAULT_FRAME_COUNT = 20
HALO_SCATTER = 60  # halo points get +-60px of extra scatter per axis
HALO_SIZES = (1, 1, 2)


class Particle(NamedTuple):
    """One renderable square."""
    x: float
    y: float
    size: int


Frame = tuple[Particle, ...]


class FrameParams(NamedTuple):
    """Animation parameters derived from a frame index."""
    ratio: float
    halo_radius: int
    halo_count: int


def frame_params(index: int) -> FrameParams:
    c = breathing_curve(index / 10 * math.pi)
    return FrameParams(
        ratio=15 * c,
        halo_radius=math.floor(4 + 6 * (1 + c)),
        halo_count=math.floor(1500 + 2000 * abs(c) ** 2),
    )


def halo_particles(center: Point, params: FrameParams,
                   rng: random.Random | None = None) -> list[Particle]:
    """Fresh halo ring for one frame.

    Curve points are pushed out by the halo radius, then deduplicated on their
    floored pixel before the wide scatter. The dedup set lives for this call only.
    """
    center = Point(*center)
    cx, cy = center
    seen = set()
    particles = []
    for _ in range(params.halo_count):
        t = random_uniform(0, 2 * math.pi, rng)
        x, y = heart_curve(t, center)
        x, y = shrink_toward_center(x, y, cx, cy, params.halo_radius)
        key = (math.floor(x), math.floor(y))
        if key in seen:
            continue
        seen.add(key)
        x += random_int(-HALO_SCATTER, HALO_SCATTER, rng)
        y += random_int(-HALO_SCATTER, HALO_SCATTER, rng)
        particles.append(Particle(x, y, random_choice(HALO_SIZES, rng)))
    return particles


class FrameSequence:
    """Fixed-length, read-only list of frames.

    Indexing is strict: only 0 <= index < len is valid. Use loop() for
    wrap-around playback.
    """

    def __init__(self, frames):
        self._frames: tuple[Frame, ...] = tuple(tuple(f) for f in frames)

    def __getitem__(self, index: int) -> Frame:
        if not isinstance(index, int):
            raise TypeError(f"frame index must be an int, not {type(index).__name__}")
        if not 0 <= index < len(self._frames):
            raise IndexError(f"frame index {index} out of range [0, {len(self._frames)})")
        return self._frames[index]

    def loop(self, index: int) -> Frame:
        """Frame for a running frame counter, wrapping around the sequence."""
        return self[index % len(self._frames)]

    def __len__(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[Frame]:
        return iter(self._frames)

    def __eq__(self, other) -> bool:
        if not isinstance(other, FrameSequence):
            return NotImplemented
        return self._frames == other._frames

    def __repr__(self) -> str:
        return f"FrameSequence({len(self)} frames)"


class HeartGenerator:
    """Owns one heart's static field and its precomputed frames."""

    def __init__(self, center, frame_count: int = DEFAULT_FRAME_COUNT,
                 outline_count: int = OUTLINE_SAMPLES, rng: random.Random | None = None):
        if isinstance(frame_count, bool) or not isinstance(frame_count, int) or frame_count < 1:
            raise ValueError(f"frame_count must be a positive int, got {frame_count!r}")
        self._center = Point(*center)
        self._rng = rng
        self._field = HeartField.build(self._center, outline_count, rng)

        frames: list[Frame | None] = [None] * frame_count
        for index in range(frame_count):
            frames[index] = self._synthesize(index)
        self._frames = FrameSequence(frames)

    @property
    def center(self) -> Point:
        return self._center

    @property
    def frame_count(self) -> int:
        return len(self._frames)

    @property
    def field(self) -> HeartField:
        return self._field

    @property
    def frames(self) -> FrameSequence:
        return self._frames

    def _halo(self, params: FrameParams) -> list[Particle]:
        return halo_particles(self._center, params, self._rng)

    def _breathe(self, points, ratio: float, max_size: int) -> list[Particle]:
        rng = self._rng
        cx, cy = self._center
        particles = []
        for px, py in points:
            x, y = perturb_position(px, py, cx, cy, ratio, rng)
            particles.append(Particle(x, y, random_int(1, max_size, rng)))
        return particles

    def _synthesize(self, index: int) -> Frame:
        params = frame_params(index)
        field = self._field
        particles = self._halo(params)
        particles += self._breathe(field.outline, params.ratio, 3)
        particles += self._breathe(field.edge_diffusion, params.ratio, 2)
        particles += self._breathe(field.center_diffusion, params.ratio, 2)
        return tuple(particles)

    def __repr__(self) -> str:
        return (f"HeartGenerator(center=({self._center.x}, {self._center.y}), "
                f"frames={self.frame_count}, points={len(self._field)})")


def create(center, frame_count: int = DEFAULT_FRAME_COUNT, *,
           outline_count: int = OUTLINE_SAMPLES,
           rng: random.Random | None = None) -> HeartGenerator:
    """Build a generator around center with frame_count precomputed frames."""
    return HeartGenerator(center, frame_count, outline_count, rng)


def build_in_background(center, frame_count: int = DEFAULT_FRAME_COUNT, **options) -> Future:
    """Run create() on a worker thread.

    The returned Future resolves to the finished generator, or carries the
    exception construction raised. It never exposes a half-built one.
    """
    executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="pulseheart-build")
    future = executor.submit(create, center, frame_count, **options)
    executor.shutdown(wait=False)
    return future
