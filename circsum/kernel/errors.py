# circsum/kernel/errors.py
#
# Exceptions raised by the circular digit summer when a caller breaks the
# input contract. They are raised at the point of detection and never
# recovered inside the library.

class CircsumError(ValueError):
    """Base class for all contract violations reported by circsum."""
    pass

class RangeError(CircsumError):
    """Raised when a [start, end) range does not fit the sequence."""
    def __init__(self, start: int, end: int, length: int):
        self.start = start
        self.end = end
        self.length = length
        super().__init__(
            f"invalid range [{start}, {end}) for a sequence of length {length}"
        )

class InvalidDigitError(CircsumError):
    """Raised when a character in the active range is not '0'-'9'."""
    def __init__(self, index: int, char):
        self.index = index
        self.char = char
        super().__init__(f"non-digit character {char!r} at index {index}")
