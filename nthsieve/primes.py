"""
Baseline sieve (numpy).

Responsibility: prime flags, counting and ordinal scans. No backend
selection, no estimation policy.
"""

import math

import numpy as np

from .errors import EstimationUndercount


def prime_flags_upto(N: int) -> np.ndarray:
    """
    Baseline primality flags over 0..N, shared by both baseline operations.

    count_primes sums the flags; nth_within takes their nonzero indices in
    ascending order and picks the nth. Multiples of each prime p are cleared
    from p*p, so only p <= isqrt(N) needs a pass.

    Parameters
    ----------
    N : int
        Sieve bound (inclusive): the limit for counting, or the estimated
        bound for an ordinal scan. Must be >= 1.

    Returns
    -------
    np.ndarray
        Bool array of length N+1; flags[i] is True iff i is prime.
    """
    flags = np.ones(N + 1, dtype=bool)
    flags[:2] = False
    for p in range(2, math.isqrt(N) + 1):
        if flags[p]:
            flags[p*p::p] = False
    return flags


def count_primes(limit: int) -> int:
    """
    Count primes <= limit.

    Parameters
    ----------
    limit : int
        Upper bound (inclusive). Values below 2 give 0.

    Returns
    -------
    int
        Number of primes.
    """
    if limit < 2:
        return 0
    return int(np.count_nonzero(prime_flags_upto(limit)))


def nth_within(bound: int, n: int) -> int:
    """
    Return the nth prime (1-indexed) among the primes <= bound.

    Raises
    ------
    EstimationUndercount
        If fewer than n primes are <= bound.
    """
    primes = np.flatnonzero(prime_flags_upto(bound))
    if len(primes) < n:
        raise EstimationUndercount(bound, len(primes), n)
    return int(primes[n - 1])
