"""Bit-manipulation routines: fast powers, set-bit counts, division, subsets."""

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


def binary_pow(x, exponent):
    """Return x raised to an integer exponent by binary exponentiation.

    A zero base gives 0, even for a zero exponent.
    """
    if x == 0:
        return 0.0
    if exponent == 0:
        return 1.0
    base = float(x)
    n = exponent
    if n < 0:
        base = 1 / base
        n = -n
    result = 1.0
    while n > 0:
        if n & 1:
            result *= base
        base *= base
        n >>= 1
    return result


def recursive_pow(x, exponent):
    """Return x raised to an integer exponent by recursive halving."""
    if exponent == 0:
        return 1.0
    half_exponent = exponent // 2 if exponent > 0 else -(-exponent // 2)
    half = recursive_pow(x, half_exponent)
    if exponent % 2 == 0:
        return half * half
    if exponent > 0:
        return x * half * half
    return (half * half) / x


def count_total_set_bits(n):
    """Return the total number of set bits in all integers from 1 to n."""
    total = 0
    k = 1
    while k <= n:
        total += ((n + 1) // (2 * k)) * k
        total += max(0, (n + 1) % (2 * k) - k)
        k *= 2
    return total


def divide(dividend, divisor):
    """Divide two 32-bit integers without '/', truncating toward zero.

    The one overflowing case, INT_MIN / -1, is clamped to INT_MAX.
    """
    for value in (dividend, divisor):
        if not INT_MIN <= value <= INT_MAX:
            raise ValueError(f"{value} does not fit in a signed 32-bit integer")
    if divisor == 0:
        raise ZeroDivisionError("division by zero")
    if dividend == INT_MIN and divisor == -1:
        return INT_MAX
    if dividend == INT_MIN and divisor == 1:
        return INT_MIN
    negative = (dividend < 0) != (divisor < 0)
    remaining, step = abs(dividend), abs(divisor)
    quotient = 0
    for shift in range(31, -1, -1):
        if remaining >> shift >= step:
            quotient += 1 << shift
            remaining -= step << shift
    return -quotient if negative else quotient


def bitmask_subsets(nums):
    """Return every subset of nums, ordered by the bitmask that selects it."""
    nums = list(nums)
    return [
        [value for bit, value in enumerate(nums) if mask >> bit & 1]
        for mask in range(1 << len(nums))
    ]


def two_odd_occurrences(values):
    """Return the two values that occur an odd number of times, larger first.

    Every other value must occur an even number of times.
    """
    values = list(values)
    if not values:
        raise ValueError("values must not be empty")
    combined = 0
    for value in values:
        combined ^= value
    if combined == 0:
        raise ValueError("values do not hold two distinct odd-count numbers")
    lowest_bit = combined & -combined
    group_a = group_b = 0
    for value in values:
        if value & lowest_bit:
            group_a ^= value
        else:
            group_b ^= value
    return (group_a, group_b) if group_a > group_b else (group_b, group_a)