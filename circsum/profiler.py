# circsum/profiler.py
#
# Defines a small wall-clock profiler, providing a context manager for
# timing a block of code and its labelled sections.

import time
from contextlib import contextmanager

class profile:
    """
    A context manager for timing a block of circsum code.

    Example:
        with circsum.profile("solve") as p:
            with p.section("read"):
                digits = read_digits(path)
            with p.section("sum"):
                sum_matching_circular(digits)
        p.print_report()
    """
    def __init__(self, label="total"):
        self.label = label
        self.events = []
        self.elapsed_ms = None

    def __enter__(self):
        self.events = []
        self.elapsed_ms = None
        self._start = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.elapsed_ms = (time.perf_counter() - self._start) * 1000

    @contextmanager
    def section(self, name):
        """Records the duration of the enclosed block as an event named `name`."""
        start = time.perf_counter()
        try:
            yield
        finally:
            self.events.append((name, (time.perf_counter() - start) * 1000))

    def print_report(self):
        print("--- circsum Profiler Report ---")
        if self.elapsed_ms is None:
            print("Profiler has not finished a block yet.")
            return

        print(f"{self.label}: {self.elapsed_ms:.4f} ms")
        if not self.events:
            return
        print("-------------------------------")

        for name, duration in self.events:
            percentage = (duration / self.elapsed_ms * 100) if self.elapsed_ms > 0 else 0
            print(f"{name:<25} | {duration:>10.4f} ms | ({percentage:5.1f}%)")
        print("-------------------------------")
