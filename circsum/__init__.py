# circsum/__init__.py

# Expose the core, user-facing components of the circsum library
# at the top-level package namespace.

from .kernel import sum_matching_circular
from .kernel.errors import CircsumError, RangeError, InvalidDigitError
from .source import read_digits, random_digits
from .profiler import profile
