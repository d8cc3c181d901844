"""Reference values and test doubles for the prime tests."""

import numpy as np


def simple_sieve(limit: int) -> np.ndarray:
    """Classic sieve up to 'limit' (inclusive), returns a boolean primality mask."""
    is_prime = np.ones(limit + 1, dtype=bool)
    is_prime[:2] = False
    r = int(limit ** 0.5)
    for p in range(2, r + 1):
        if is_prime[p]:
            is_prime[p * p : limit + 1 : p] = False
    return is_prime


class FakeClock:
    """Monotonic clock that advances by `step` seconds on every read."""

    def __init__(self, step: float = 0.0, start: float = 0.0):
        self.now = start
        self.step = step

    def __call__(self) -> float:
        value = self.now
        self.now += self.step
        return value


class RecordingState:
    """Wraps a ProgressState and keeps every published candidate."""

    def __init__(self, state):
        self.state = state
        self.marks = []
        self.stops = 0

    def mark(self, n):
        self.marks.append(n)
        self.state.mark(n)

    def stop(self):
        self.stops += 1
        self.state.stop()
