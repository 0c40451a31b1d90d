import math

import pytest

from dsakit.primes import (
    distinct_prime_factors,
    prime_factorization,
    primes_below,
    smallest_prime_factors,
)


def _is_prime(n):
    return n >= 2 and all(n % d for d in range(2, math.isqrt(n) + 1))


def test_spf_table_small():
    assert smallest_prime_factors(10) == [0, 1, 2, 3, 2, 5, 2, 7, 2, 3, 2]


def test_spf_entries_are_smallest_prime_divisors():
    spf = smallest_prime_factors(200)
    assert len(spf) == 201
    for i in range(2, 201):
        p = spf[i]
        assert _is_prime(p)
        assert i % p == 0
        assert all(i % q for q in range(2, p))


def test_spf_negative_raises():
    with pytest.raises(ValueError):
        smallest_prime_factors(-1)


def test_prime_factorization_product_and_order():
    for n in range(2, 300):
        factors = prime_factorization(n)
        assert math.prod(factors) == n
        assert all(_is_prime(f) for f in factors)
        assert factors == sorted(factors)


def test_prime_factorization_of_one_is_empty():
    assert prime_factorization(1) == []


def test_prime_factorization_rejects_zero():
    with pytest.raises(ValueError):
        prime_factorization(0)


def test_primes_below_twenty():
    assert primes_below(20) == [2, 3, 5, 7, 11, 13, 17, 19]


def test_primes_below_matches_trial_division():
    assert primes_below(500) == [p for p in range(500) if _is_prime(p)]


@pytest.mark.parametrize("n", [-5, 0, 1, 2])
def test_primes_below_small_bounds_empty(n):
    assert primes_below(n) == []


def test_primes_below_excludes_bound():
    assert 13 not in primes_below(13)
    assert 13 in primes_below(14)


def test_distinct_prime_factors_matches_factorization():
    for n in range(2, 300):
        assert distinct_prime_factors(n) == sorted(set(prime_factorization(n)))


def test_distinct_prime_factors_of_prime():
    assert distinct_prime_factors(13) == [13]


@pytest.mark.parametrize("n", [-3, 0, 1])
def test_distinct_prime_factors_small(n):
    assert distinct_prime_factors(n) == []