import os
import random

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pytest

from pulseheart import create

CENTER = (420, 340)


class ScriptedRandom(random.Random):
    """Random whose random() replays a fixed list of values."""

    def __init__(self, values):
        super().__init__(0)
        self.values = list(values)

    def random(self):
        return self.values.pop(0)


@pytest.fixture
def scripted():
    return ScriptedRandom


@pytest.fixture(scope="session")
def heart():
    """A small seeded heart shared by the read-only tests."""
    return create(CENTER, 3, rng=random.Random(2024))
