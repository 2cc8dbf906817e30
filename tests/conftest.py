import os
import random

import pytest

# pygame must never try to open a real window during tests
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from core.clock import LogicalClock
from core.engine import RoundEngine
from core.moves import Move, Outcome
from core.state import RoundState


@pytest.fixture()
def clock():
    return LogicalClock()


@pytest.fixture()
def rng():
    return random.Random(1234)


@pytest.fixture()
def state():
    # fixed starting point; new_round() flips the target so tests that
    # need a specific round set the fields directly
    return RoundState(opposing_move=Move.ROCK, target_outcome=Outcome.WIN)


@pytest.fixture()
def engine(clock, state, rng):
    eng = RoundEngine(clock, state, rng)
    eng.start()
    yield eng
    eng.stop()
