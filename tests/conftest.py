import os
import random
import tempfile

# keep the suite from writing config.json into the package
os.environ.setdefault(
    "COLORWALK_CONFIG", os.path.join(tempfile.mkdtemp(prefix="colorwalk-"), "config.json")
)

import pytest

from colorwalk.engine import RoundEngine
from colorwalk.picker import ColorPicker


class FakeClock:
    def __init__(self, start=100.0):
        self.t = start

    def __call__(self):
        return self.t

    def advance(self, dt):
        self.t += dt


class ScriptedRng:
    """randrange() returns the scripted values in order."""

    def __init__(self, values):
        self.values = list(values)

    def randrange(self, n):
        value = self.values.pop(0)
        assert 0 <= value < n
        return value


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def engine(clock):
    rng = random.Random(1234)
    return RoundEngine(ColorPicker(rng=rng), rng=rng, clock=clock, final_round=20, swap_every=3)


def play_to(engine, round_no, clock=None):
    """Tick a fresh engine up to PLAYING(round_no) answering correctly."""
    if not engine.state.is_playing:
        engine.tick()
    while engine.state.round < round_no:
        if clock is not None:
            clock.advance(0.5)
        engine.tick(engine.target if engine.state.round else 0)
    return engine
