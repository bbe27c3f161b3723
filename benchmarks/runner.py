# benchmarks/runner.py
#
# Times circsum benchmark functions with the library's own profiler, so a
# benchmark run and a `circsum --profile` run measure the same way. Each
# timed call is recorded as one profiler section; the median of those
# sections is what gets reported.

import numpy as np

from circsum import profiler

def run_benchmark(func, args, num_warmup=5, num_iter=20):
    """
    Calls `func(*args)` repeatedly and returns the median call time in ms.

    The first `num_warmup` calls are made outside the profiler and discarded.
    `num_iter` must be at least 1.
    """
    if num_iter < 1:
        raise ValueError("num_iter must be at least 1")

    for _ in range(num_warmup):
        func(*args)

    with profiler.profile(getattr(func, "__name__", "benchmark")) as p:
        for i in range(num_iter):
            with p.section(f"iter {i}"):
                func(*args)

    return float(np.median([duration for _, duration in p.events]))

def digits_per_second(num_digits, elapsed_ms):
    """Throughput for one pass over `num_digits` digits taking `elapsed_ms`."""
    if elapsed_ms <= 0:
        return float("inf")
    return num_digits / (elapsed_ms / 1000)
