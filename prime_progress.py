"""
Shared progress state and the live elapsed-time display.

ProgressState has one writer (the search worker) and any number of readers.
Both fields are single objects swapped atomically under the interpreter lock,
so no mutex is needed: `running` is backed by a threading.Event and
`last_examined` by a plain int attribute.
"""

import logging
import sys
import threading
import time

logger = logging.getLogger(__name__)

POLL_INTERVAL = 0.1  # seconds between display ticks


class ProgressState:
    def __init__(self):
        self._stopped = threading.Event()
        self._last_examined = 0

    @property
    def running(self) -> bool:
        return not self._stopped.is_set()

    @property
    def last_examined(self) -> int:
        return self._last_examined

    def mark(self, n: int) -> None:
        """Publish the candidate the worker is about to test."""
        self._last_examined = n

    def stop(self) -> None:
        """Clear the running flag. Only the worker calls this, and only once."""
        if self._stopped.is_set():
            raise RuntimeError("search already stopped")
        self._stopped.set()
        logger.debug("Progress state stopped at %d", self._last_examined)

    def wait(self, timeout: float | None = None) -> bool:
        """Block up to `timeout` seconds; True once the search has stopped."""
        return self._stopped.wait(timeout)


def render_tick(elapsed: float, stream) -> None:
    stream.write(f"\r⏱️  Running: {elapsed:.1f}s")
    stream.flush()


def display_timer(
    state: ProgressState,
    started_at: float,
    interval: float = POLL_INTERVAL,
    stream=None,
    clock=time.monotonic,
    render=render_tick,
) -> int:
    """
    Redraw the elapsed time in place every `interval` seconds until the
    search stops, then end the line. Returns the number of ticks drawn,
    which is zero when the search finishes inside the first interval.
    """
    if stream is None:
        stream = sys.stdout

    ticks = 0
    # wait() returns as soon as stop() fires, so exit lags by at most one interval
    while not state.wait(interval):
        render(clock() - started_at, stream)
        ticks += 1

    stream.write("\n")
    stream.flush()
    logger.debug("Timer finished after %d ticks", ticks)
    return ticks
