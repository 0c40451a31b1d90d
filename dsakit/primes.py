"""Prime sieves and integer factorisation."""


def smallest_prime_factors(n):
    """Return a table whose entry i is the smallest prime factor of i, for i in 0..n.

    Entry 0 holds 0 and entry 1 holds 1.
    """
    if n < 0:
        raise ValueError("n must be non-negative")
    spf = [1] * (n + 1)
    spf[0] = 0
    for i in range(2, n + 1):
        if spf[i] == 1:
            for j in range(i, n + 1, i):
                if spf[j] == 1:
                    spf[j] = i
    return spf


def prime_factorization(n):
    """Return the prime factors of n with multiplicity, in ascending order."""
    if n < 1:
        raise ValueError("n must be a positive integer")
    spf = smallest_prime_factors(n)
    factors = []
    while n != 1:
        factors.append(spf[n])
        n //= spf[n]
    return factors


def primes_below(n):
    """Return every prime strictly less than n, using a linear sieve."""
    if n <= 1:
        return []
    is_prime = [True] * n
    is_prime[0] = is_prime[1] = False
    spf = [0] * n
    primes = []
    for i in range(2, n):
        if is_prime[i]:
            primes.append(i)
            spf[i] = i
        for p in primes:
            if i * p >= n or p > spf[i]:
                break
            is_prime[i * p] = False
            spf[i * p] = p
    return primes


def distinct_prime_factors(n):
    """Return the distinct primes dividing n, in ascending order."""
    if n <= 1:
        return []
    return [p for p in primes_below(n + 1) if n % p == 0]