# examples/inverse_captcha_demo.py

import circsum

CASES = [
    ("1122", 3),
    ("1111", 4),
    ("1234", 0),
    ("91212129", 9),
]

def brute_force(digits):
    """Reference answer: compare every digit to the one after it, wrapping with modulo."""
    n = len(digits)
    if n < 2:
        return 0
    return sum(int(digits[i]) for i in range(n) if digits[i] == digits[(i + 1) % n])

def main():
    """Runs the demonstration."""
    print("--- Running Circular Digit Sum Demonstration ---")

    for digits, expected in CASES:
        result = circsum.sum_matching_circular(digits)
        print(f"sum_matching_circular({digits!r}) = {result}")
        assert result == expected, f"Expected {expected}, got {result}"

    print("\nNow scanning only the middle of '912129' (indices 1 to 5).")
    # The wrap compares index 4 with index 1, not the ends of the string.
    print(f"Result: {circsum.sum_matching_circular('912129', 1, 5)}")

    print("\n--- Cross-checking a random buffer against the brute-force answer ---")
    digits = circsum.random_digits(100_000, seed=2017)
    result = circsum.sum_matching_circular(digits)
    expected_result = brute_force(digits)
    print(f"circsum: {result}, brute force: {expected_result}")
    assert result == expected_result, "circsum result does not match brute force!"
    print("\n[SUCCESS] Results agree.")

    print("\n--- Circular Digit Sum Demonstration Complete ---")


if __name__ == "__main__":
    main()
