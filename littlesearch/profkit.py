# littlesearch/profkit.py — ultra-light counters for the indexing pipeline
# `from littlesearch.profkit import timeit, tick, COUNTERS`.
# Toggle via env var: set PROFKIT=1 to enable; otherwise it's no-op with near-zero overhead.

import os
import time
from collections import defaultdict
from contextlib import contextmanager

ENABLED = os.getenv("PROFKIT", "0") == "1"
COUNTERS = defaultdict(float)  # str -> float (counts / milliseconds)


def enable(flag: bool = True):
    """Switch counters on/off at runtime (tests use this instead of the env var)."""
    global ENABLED
    ENABLED = flag


def reset():
    COUNTERS.clear()


def tick(name: str, n: float = 1.0):
    if ENABLED:
        COUNTERS[name] += n


@contextmanager
def timeit(name: str):
    if not ENABLED:
        yield
        return
    t0 = time.perf_counter()
    try:
        yield
    finally:
        COUNTERS[name] += (time.perf_counter() - t0) * 1000.0  # ms


def report() -> str:
    """One counter per line, sorted by name."""
    return "\n".join(f"{k:<24} {v:,.2f}" for k, v in sorted(COUNTERS.items()))
