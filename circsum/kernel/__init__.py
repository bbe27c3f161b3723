# circsum/kernel/__init__.py

from .errors import CircsumError, RangeError, InvalidDigitError
from .summer import sum_matching_circular
