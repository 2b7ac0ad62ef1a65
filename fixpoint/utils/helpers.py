"""Utility helpers for fixpoint."""

import gc
import time
from typing import Callable, List


class Timer:
    """High-resolution timer."""

    def __init__(self):
        self.start_ns = 0
        self.end_ns = 0

    def __enter__(self):
        self.start_ns = time.perf_counter_ns()
        return self

    def __exit__(self, *exc):
        self.end_ns = time.perf_counter_ns()

    @property
    def elapsed_ns(self) -> int:
        return self.end_ns - self.start_ns


def time_function(func: Callable, args: tuple, iterations: int = 50, warmup: int = 10) -> List[int]:
    """Time ``func(*args)`` over several iterations, returning ns per call."""
    for _ in range(warmup):
        func(*args)

    times = []
    for _ in range(iterations):
        gc.disable()
        try:
            with Timer() as t:
                func(*args)
        finally:
            gc.enable()
        times.append(t.elapsed_ns)
    return times


def format_ns(ns: float) -> str:
    """Format nanoseconds into a human-readable string."""
    if ns < 1_000:
        return f"{ns:.0f} ns"
    elif ns < 1_000_000:
        return f"{ns / 1_000:.1f} µs"
    elif ns < 1_000_000_000:
        return f"{ns / 1_000_000:.2f} ms"
    else:
        return f"{ns / 1_000_000_000:.3f} s"


def format_slowdown(baseline_ns: float, measured_ns: float) -> str:
    """Format how much slower ``measured`` is than ``baseline``."""
    if baseline_ns <= 0:
        return "∞x"
    ratio = measured_ns / baseline_ns
    if ratio >= 1:
        return f"{ratio:.2f}x slower"
    else:
        return f"{1/ratio:.2f}x faster"
