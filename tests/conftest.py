import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

REFRESH_MS = 250
STEP = REFRESH_MS * 1_000_000  # ns


class FakeClock:
    """Nanosecond monotonic clock the test moves by hand; counts how often it is read."""

    def __init__(self, start=100_000_000_000):
        self.now = start
        self.reads = 0

    def __call__(self):
        self.reads += 1
        return self.now

    def advance(self, ns):
        self.now += ns


class FirstChoice:
    """Always picks the first candidate and remembers what it was offered."""

    def __init__(self):
        self.offered = []

    def choice(self, seq):
        self.offered.append(list(seq))
        return seq[0]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def first_choice():
    return FirstChoice()
