import os
import random

import pytest

# pygame must never open a real window or audio device under test.
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")


@pytest.fixture
def rng():
    return random.Random(1234)

