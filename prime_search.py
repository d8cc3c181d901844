import logging
import math
import time
from dataclasses import dataclass

from prime_progress import ProgressState
from prime_trial import is_prime

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchParameters:
    upper_bound: int
    timeout_minutes: float

    def __post_init__(self):
        if self.upper_bound <= 0:
            raise ValueError(f"upper_bound must be positive, got {self.upper_bound}")
        if not (math.isfinite(self.timeout_minutes) and self.timeout_minutes > 0):
            raise ValueError(f"timeout_minutes must be positive, got {self.timeout_minutes}")

    @property
    def timeout_seconds(self) -> float:
        return self.timeout_minutes * 60.0


@dataclass(frozen=True)
class SearchOutcome:
    prime_count: int
    highest_prime: int  # 0 when no prime was found
    elapsed_seconds: float
    timed_out: bool


def find_primes(
    params: SearchParameters,
    state: ProgressState,
    started_at: float | None = None,
    clock=time.monotonic,
) -> SearchOutcome:
    """
    Count primes in [1, params.upper_bound] until the range is exhausted or
    the time budget runs out.

    The deadline is checked once per candidate, before it is tested, so a
    single slow test near the top of a large range can overrun the budget by
    up to one O(sqrt(n)) trial division. The loop never yields voluntarily.
    """
    if started_at is None:
        started_at = clock()
    budget = params.timeout_seconds

    prime_count = 0
    highest_prime = 0
    timed_out = False

    logger.debug("Searching 1..%d with a %.3fs budget", params.upper_bound, budget)
    try:
        for n in range(1, params.upper_bound + 1):
            if clock() - started_at > budget:
                timed_out = True
                break

            state.mark(n)

            if is_prime(n):
                prime_count += 1
                highest_prime = n
    finally:
        # The timer waits on this flag, so clear it even if the loop raised
        state.stop()

    elapsed = clock() - started_at
    logger.debug(
        "Search finished: %d primes, highest %d, %.3fs, timed_out=%s",
        prime_count, highest_prime, elapsed, timed_out,
    )
    return SearchOutcome(prime_count, highest_prime, elapsed, timed_out)
