# circsum/source.py
#
# Helpers that produce digit sequences for the summer: reading a puzzle
# input from disk, and generating large random buffers for benchmarking.

import numpy as np

from .kernel.errors import InvalidDigitError

_ZERO = ord("0")

def read_digits(path) -> str:
    """
    Reads a digit file and returns its contents without trailing whitespace.

    Args:
        path: Path to a UTF-8 text file, typically one line of digits
              followed by a newline.

    Returns:
        The file contents with the line terminator (and any other trailing
        whitespace) removed. Leading content is left alone.
    """
    with open(path, "r", encoding="utf-8") as fh:
        return fh.read().rstrip()

def random_digits(size: int, seed=None) -> str:
    """
    Builds a string of `size` random decimal digits.

    The digits are drawn as a uint8 array and decoded in one step, which is
    far faster than joining Python characters for buffers of 10^8 elements.

    Args:
        size (int): Number of digits to generate.
        seed: Optional seed for `numpy.random.default_rng`. The same seed
              always yields the same string.
    """
    if size < 0:
        raise ValueError(f"size must be non-negative, got {size}")
    rng = np.random.default_rng(seed)
    codes = rng.integers(0, 10, size=size, dtype=np.uint8) + np.uint8(_ZERO)
    return codes.tobytes().decode("ascii")

def digit_array(sequence: str) -> np.ndarray:
    """
    Converts a digit string into a uint8 array of digit values.

    Raises:
        InvalidDigitError: At the first character outside '0'-'9'.
    """
    try:
        raw = sequence.encode("ascii")
    except UnicodeEncodeError as exc:
        raise InvalidDigitError(exc.start, sequence[exc.start]) from None
    if not raw:
        return np.zeros(0, dtype=np.uint8)

    values = np.frombuffer(raw, dtype=np.uint8) - np.uint8(_ZERO)
    # Characters below '0' wrap around to large uint8 values.
    bad = np.flatnonzero(values > 9)
    if bad.size:
        index = int(bad[0])
        raise InvalidDigitError(index, sequence[index])
    return values
