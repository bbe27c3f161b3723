import sys
import os
import random

import pytest

# Make the 'circsum' package in the current project directory importable,
# even if it's not formally installed yet.
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__)))

from circsum import sum_matching_circular, CircsumError, RangeError, InvalidDigitError


def brute_force(digits):
    n = len(digits)
    if n < 2:
        return 0
    return sum(int(digits[i]) for i in range(n) if digits[i] == digits[(i + 1) % n])


@pytest.mark.parametrize("digits, expected", [
    ("1122", 3),
    ("1111", 4),
    ("1234", 0),
    ("91212129", 9),
    ("5", 0),
    ("55", 10),
    ("", 0),
])
def test_known_answers(digits, expected):
    assert sum_matching_circular(digits) == expected


def test_explicit_full_range_matches_defaults():
    digits = "11223344551"
    assert sum_matching_circular(digits, 0, len(digits)) == sum_matching_circular(digits)


def test_subrange_wraps_at_its_own_bounds():
    # [1, 5) is "1212": no adjacent pair matches and the wrap compares '2' with '1'.
    assert sum_matching_circular("912129", 1, 5) == 0
    # [1, 4) is "121": the wrap compares the last '1' with the first '1'.
    assert sum_matching_circular("912129", 1, 4) == 1
    # The full string wraps 9 onto 9.
    assert sum_matching_circular("912129") == 9


def test_only_end_given():
    assert sum_matching_circular("1122", end=2) == 2


def test_degenerate_ranges_return_zero():
    digits = "998877"
    for start in range(len(digits)):
        assert sum_matching_circular(digits, start, start) == 0
        assert sum_matching_circular(digits, start, start + 1) == 0
    assert sum_matching_circular(digits, len(digits), len(digits)) == 0


def test_matches_brute_force_on_random_input():
    rng = random.Random(1234)
    for _ in range(200):
        digits = "".join(rng.choice("0123456789") for _ in range(rng.randint(2, 60)))
        result = sum_matching_circular(digits)
        assert result == brute_force(digits)
        assert 0 <= result <= 9 * len(digits)


def test_subranges_match_brute_force_on_slices():
    rng = random.Random(99)
    digits = "".join(rng.choice("0122") for _ in range(80))
    for _ in range(100):
        start = rng.randint(0, len(digits))
        end = rng.randint(start, len(digits))
        assert sum_matching_circular(digits, start, end) == brute_force(digits[start:end])


def test_is_idempotent():
    digits = "9912399"
    assert sum_matching_circular(digits, 1, 6) == sum_matching_circular(digits, 1, 6)


def test_accepts_any_indexable_sequence():
    assert sum_matching_circular(list("1122")) == 3
    assert sum_matching_circular(tuple("55")) == 10


def test_long_input_does_not_recurse():
    # Far deeper than the default recursion limit.
    digits = "7" * 200_000
    assert sum_matching_circular(digits) == 7 * 200_000


@pytest.mark.parametrize("start, end", [(2, 1), (0, 4), (-1, 2), (4, 4)])
def test_range_errors(start, end):
    with pytest.raises(RangeError) as excinfo:
        sum_matching_circular("123", start, end)
    assert excinfo.value.length == 3
    assert isinstance(excinfo.value, CircsumError)


def test_range_error_reports_bounds():
    with pytest.raises(RangeError, match=r"\[2, 1\)"):
        sum_matching_circular("123", 2, 1)


def test_invalid_digit_reports_index():
    with pytest.raises(InvalidDigitError) as excinfo:
        sum_matching_circular("12a4", 0, 4)
    assert excinfo.value.index == 2
    assert excinfo.value.char == "a"
    assert "index 2" in str(excinfo.value)


def test_invalid_digit_outside_range_is_ignored():
    assert sum_matching_circular("x11y", 1, 3) == 2


def test_invalid_single_character_range():
    with pytest.raises(InvalidDigitError) as excinfo:
        sum_matching_circular("1-2", 1, 2)
    assert excinfo.value.index == 1


@pytest.mark.parametrize("digits, index", [
    ("12 3", 2),
    ("1²3", 1),
    ("٣٣", 0),
    (["1", "22"], 1),
])
def test_rejects_non_ascii_and_multi_character_digits(digits, index):
    with pytest.raises(InvalidDigitError) as excinfo:
        sum_matching_circular(digits)
    assert excinfo.value.index == index


def test_rejects_non_integer_bounds():
    with pytest.raises(TypeError):
        sum_matching_circular("1122", 0.5, 3)


if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
