# circsum/kernel/summer.py
#
# Implements the circular adjacent-digit summer. Given a sequence of decimal
# digit characters and a half-open range [start, end), it adds up the value of
# every digit that equals the digit after it, treating the range as a ring so
# that the last digit is compared against the first.
#
# The work is split in two phases:
# 1. A forward scan over every adjacent pair inside the range.
# 2. A single wraparound comparison between positions `start` and `end - 1`.
#
# This avoids copying or rotating the input to simulate circularity, and the
# scan is a plain loop so stack usage stays constant for very large inputs.

import operator

from .errors import RangeError, InvalidDigitError

# Only the ASCII digits are accepted. str.isdigit() would also let through
# characters like '²' which have no single decimal value.
_DIGIT_VALUES = {str(d): d for d in range(10)}

# ============================================================================
# Step 1: Input validation
# ============================================================================

def _resolve_range(length: int, start, end) -> tuple:
    """
    Fills in default bounds and checks that 0 <= start <= end <= length.

    Args:
        length: The length of the sequence being scanned.
        start: The requested start index, or None for 0.
        end: The requested end index, or None for `length`.

    Returns:
        A `(start, end)` tuple of plain ints.
    """
    start = 0 if start is None else operator.index(start)
    end = length if end is None else operator.index(end)
    if start < 0 or start > end or end > length:
        raise RangeError(start, end, length)
    return start, end

def _digit_value(sequence, index: int) -> int:
    """Returns the integer value of `sequence[index]`, or raises InvalidDigitError."""
    char = sequence[index]
    try:
        return _DIGIT_VALUES[char]
    except (KeyError, TypeError):
        raise InvalidDigitError(index, char) from None

# ============================================================================
# Step 2: Forward scan
# ============================================================================

def _matches(previous: int, current: int) -> bool:
    return previous == current

def _scan_forward(sequence, start: int, end: int) -> tuple:
    """
    Walks every adjacent pair in [start, end) once.

    Returns:
        A `(first, last, total)` tuple: the digit values at `start` and
        `end - 1`, and the sum contributed by the non-wrapping pairs.
    """
    first = _digit_value(sequence, start)
    previous = first
    total = 0
    for index in range(start + 1, end):
        current = _digit_value(sequence, index)
        if _matches(previous, current):
            total += previous
        previous = current
    return first, previous, total

# ============================================================================
# Step 3: Public entry point
# ============================================================================

def sum_matching_circular(sequence, start=None, end=None) -> int:
    """
    Sums the digits in `sequence[start:end]` that match their circular successor.

    The element at `end - 1` is compared against the element at `start`, so
    for the full string "1122" the result is 1 + 2 = 3, and for "91212129"
    the only match is the wrapping pair of nines, giving 9.

    Args:
        sequence: An indexable sequence of single characters '0'-'9', such as
            a str. It is only read.
        start (int, optional): First index of the range. Defaults to 0.
        end (int, optional): One past the last index. Defaults to
            `len(sequence)`.

    Returns:
        The sum as an int, always between 0 and 9 * (end - start).

    Raises:
        RangeError: If start < 0, start > end, or end > len(sequence).
        InvalidDigitError: If a character in the range is not a decimal digit.
            The exception carries the offending index.
    """
    start, end = _resolve_range(len(sequence), start, end)

    # Zero or one element has no distinct neighbour to match.
    if end - start <= 1:
        if end > start:
            _digit_value(sequence, start)
        return 0

    first, last, total = _scan_forward(sequence, start, end)

    if _matches(first, last):
        total += first
    return total
