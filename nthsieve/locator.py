"""
Nth-prime location.

Shared policy for every backend: ordinal validation, the small-n table, the
upper-bound estimate and the undercount retry loop. Backends only supply
nth_within(bound, n), which scans the sieve up to bound.

Estimate:
    p_n < n (ln n + ln ln n)    for n >= 6  (Rosser's bound)

We scale it by MARGIN and floor it at 2n. The retry loop does not rely on
either: an undersized bound is doubled until the scan succeeds.
"""

import math
from typing import Callable

from .errors import EstimationUndercount, InvalidArgument

SMALL_PRIMES = (2, 3, 5, 7, 11)

MARGIN = 1.3


def estimate_upper_bound(n: int) -> int:
    """
    Upper-bound estimate for the nth prime, n > len(SMALL_PRIMES).

    Parameters
    ----------
    n : int
        Ordinal (1-indexed).

    Returns
    -------
    int
        Sieve bound, at least 2n.
    """
    log_n = math.log(n)
    bound = int(n * (log_n + math.log(log_n)) * MARGIN)
    return max(bound, 2 * n)


def nth_prime(n: int, nth_within: Callable[[int, int], int]) -> int:
    """
    Return the nth prime (1-indexed).

    Parameters
    ----------
    n : int
        Ordinal, >= 1.
    nth_within : callable
        Backend scan: nth_within(bound, n) returns the nth prime <= bound or
        raises EstimationUndercount.

    Raises
    ------
    InvalidArgument
        If n < 1.
    """
    if n < 1:
        raise InvalidArgument(f"n must be >= 1, got {n}")
    if n <= len(SMALL_PRIMES):
        return SMALL_PRIMES[n - 1]

    bound = estimate_upper_bound(n)
    while True:
        try:
            return nth_within(bound, n)
        except EstimationUndercount:
            bound *= 2
