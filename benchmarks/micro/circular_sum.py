# benchmarks/micro/circular_sum.py
#
# Times the circular matching-digit sum on a large random buffer. The pure
# Python summer makes one pass with constant extra memory; the NumPy baseline
# is vectorised but builds a rotated copy and a boolean mask the size of the
# input. Both are checked against each other before timing.

import argparse
import os

import numpy as np

import circsum
from circsum.source import digit_array, random_digits
from benchmarks.runner import digits_per_second, run_benchmark

DEFAULT_SIZE = 10_000_000

def sum_numpy(values):
    if values.size <= 1:
        return 0
    return int(values[values == np.roll(values, -1)].sum(dtype=np.int64))

def main(argv=None):
    parser = argparse.ArgumentParser(description="Benchmark the circular digit summer.")
    # A string default goes through `type=int` only when --size is absent.
    parser.add_argument("--size", type=int,
                        default=os.getenv("CIRCSUM_BENCH_SIZE", str(DEFAULT_SIZE)),
                        help="Number of random digits (default: $CIRCSUM_BENCH_SIZE or 10,000,000).")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--iters", type=int, default=3)
    args = parser.parse_args(argv)

    print("--- Running Circular Digit Sum Benchmark ---")
    print(f"Generating {args.size:,} random digits...")
    digits = random_digits(args.size, seed=args.seed)
    values = digit_array(digits)

    expected = sum_numpy(values)
    result = circsum.sum_matching_circular(digits)
    if result != expected:
        raise RuntimeError(f"circsum returned {result}, NumPy baseline {expected}")
    print(f"Sum: {result}")

    # The inputs are large, so a single warm-up call is enough.
    numpy_time = run_benchmark(sum_numpy, (values,), num_warmup=1, num_iter=args.iters)
    circsum_time = run_benchmark(circsum.sum_matching_circular, (digits,),
                                 num_warmup=1, num_iter=args.iters)

    print(f"NumPy (baseline): {numpy_time:.4f} ms ({digits_per_second(args.size, numpy_time):,.0f} digits/s)")
    print(f"circsum:          {circsum_time:.4f} ms ({digits_per_second(args.size, circsum_time):,.0f} digits/s)")
    if numpy_time > 0:
        print(f"Ratio: {circsum_time / numpy_time:.2f}x")

if __name__ == "__main__":
    main()
