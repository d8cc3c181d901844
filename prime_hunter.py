#!/usr/bin/env python3
"""
Prime Number Hunter: count primes up to a limit against a wall-clock budget
while a second thread keeps an elapsed-time readout on screen.

Examples:
  # Interactive, prompts for both values
  python prime_hunter.py

  # Non-interactive, 30 second budget
  python prime_hunter.py --limit 100000000 --timeout 0.5
"""

import argparse
import logging
import math
import sys
import threading
import time
from concurrent.futures import FIRST_EXCEPTION, Future, wait

from prime_progress import POLL_INTERVAL, ProgressState, display_timer
from prime_search import SearchOutcome, SearchParameters, find_primes

logger = logging.getLogger(__name__)

BANNER = (
    "╔═══════════════════════════════════════╗\n"
    "║     PRIME NUMBER HUNTER v0.1.0        ║\n"
    "║  \"Efficiency: not just for robots\"   ║\n"
    "╚═══════════════════════════════════════╝\n"
)

REPORT_BANNER = (
    "╔═══════════════════════════════════════╗\n"
    "║            MISSION REPORT             ║\n"
    "╚═══════════════════════════════════════╝"
)

SIGN_OFF = "\"Everybody good? Plenty of slaves for my robot colony?\" - TARS (25% humor)"


def parse_count(text: str) -> int:
    """Plain decimal digits only: no sign, no underscores."""
    if not text.isdigit():
        raise ValueError(f"not a whole number: {text!r}")
    return int(text)


def parse_minutes(text: str) -> float:
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"not a finite number: {text!r}")
    return value


def prompt_positive(prompt, parse, input_fn=input, output=print):
    """Ask until `parse` accepts the answer and the value is > 0."""
    while True:
        text = input_fn(prompt).strip()
        try:
            value = parse(text)
        except ValueError:
            output("❌ Invalid input. Please enter a valid number.")
            continue
        if value > 0:
            return value
        output("❌ Please enter a positive number.")


def spawn(name, fn, *args) -> Future:
    """Run fn(*args) on a daemon thread and hand back its Future."""
    future = Future()

    def run():
        if not future.set_running_or_notify_cancel():
            return
        try:
            future.set_result(fn(*args))
        except BaseException as exc:
            future.set_exception(exc)

    threading.Thread(target=run, name=name, daemon=True).start()
    return future


def run_search(
    params: SearchParameters,
    interval: float = POLL_INTERVAL,
    stream=None,
    state: ProgressState | None = None,
):
    """
    Run the search and the timer side by side on two daemon threads.
    Returns (outcome, last number examined).

    Both threads are daemons, so an interrupt or a timer failure returns
    here without joining the search loop, which runs on until the process
    exits. A timer failure is raised as soon as it happens.
    """
    if stream is None:
        stream = sys.stdout
    if state is None:
        state = ProgressState()
    started_at = time.monotonic()

    timer = spawn("prime-hunter-timer", display_timer, state, started_at, interval, stream)
    search = spawn("prime-hunter-search", find_primes, params, state, started_at)

    wait([search, timer], return_when=FIRST_EXCEPTION)
    if timer.done() and timer.exception() is not None:
        raise timer.exception()

    outcome = search.result()
    ticks = timer.result()

    logger.info("Search done after %d timer ticks", ticks)
    return outcome, state.last_examined


def coverage_percent(last_examined: int, upper_bound: int) -> float:
    return last_examined / upper_bound * 100.0


def format_report(params: SearchParameters, outcome: SearchOutcome, last_examined: int) -> str:
    lines = [
        "",
        REPORT_BANNER,
        f"📊 Search Range:        1 to {params.upper_bound}",
        f"🎯 Primes Found:        {outcome.prime_count}",
        f"👑 Highest Prime:       {outcome.highest_prime}",
        f"⏱️  Execution Time:      {outcome.elapsed_seconds:.3f} seconds",
        f"⏰ Timeout Limit:       {params.timeout_minutes:.2f} minutes",
        "",
    ]
    if outcome.timed_out:
        lines += [
            "⚠️  TIMEOUT: Search terminated before completion.",
            f"   Last number checked: {last_examined}",
            f"   Coverage: {coverage_percent(last_examined, params.upper_bound):.2f}%",
        ]
    else:
        lines.append("✅ Search completed successfully!")
    lines += ["", SIGN_OFF]
    return "\n".join(lines)


def positive_int(text: str) -> int:
    try:
        value = parse_count(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def positive_float(text: str) -> float:
    try:
        value = parse_minutes(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {text!r}")
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Trial-division prime search with a time budget.")
    ap.add_argument("--limit", type=positive_int,
                    help="Search primes <= LIMIT (prompted for when omitted).")
    ap.add_argument("--timeout", type=positive_float, metavar="MINUTES",
                    help="Time budget in minutes (prompted for when omitted).")
    ap.add_argument("--interval", type=positive_float, default=POLL_INTERVAL,
                    help=f"Seconds between timer updates (default: {POLL_INTERVAL}).")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                    help="Diagnostics written to stderr (default: WARNING).")
    return ap


def main(argv=None, input_fn=input):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    print(BANNER)

    max_number = args.limit
    if max_number is None:
        max_number = prompt_positive("Enter the maximum number to search: ", parse_count, input_fn)

    timeout_minutes = args.timeout
    if timeout_minutes is None:
        timeout_minutes = prompt_positive(
            "Enter timeout in minutes (e.g., 0.5 for 30 seconds): ", parse_minutes, input_fn,
        )

    params = SearchParameters(max_number, timeout_minutes)

    print(f"\n🔍 Searching for primes up to {params.upper_bound}...")
    print(f"⏰ Timeout set to {params.timeout_minutes:.2f} minutes "
          f"({params.timeout_seconds:.1f} seconds)\n")

    outcome, last_examined = run_search(params, interval=args.interval)
    print(format_report(params, outcome, last_examined))
    return 0


if __name__ == "__main__":
    sys.exit(main())
