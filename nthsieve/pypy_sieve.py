"""
Pure-Python bytearray sieve for the PyPy runtime.

On PyPy the tracing JIT compiles these loops to machine code and they beat
the numpy baseline (numpy on PyPy pays cpyext overhead per call). On CPython
the same loops are slow, so bind() refuses to run there.
"""

import math
import platform

from .errors import BackendUnavailable, EstimationUndercount


def _sieve(limit: int) -> bytearray:
    """Byte flags over 0..limit; 1 = prime. limit >= 2."""
    flags = bytearray([1]) * (limit + 1)
    flags[0] = flags[1] = 0
    for i in range(2, math.isqrt(limit) + 1):
        if flags[i]:
            flags[i*i::i] = bytes(len(range(i*i, limit + 1, i)))
    return flags


def count_primes(limit: int) -> int:
    if limit < 2:
        return 0
    return _sieve(limit).count(1)


def nth_within(bound: int, n: int) -> int:
    flags = _sieve(bound)
    count = 0
    for m in range(bound + 1):
        if flags[m]:
            count += 1
            if count == n:
                return m
    raise EstimationUndercount(bound, count, n)


def bind(implementation=None):
    """
    Return (count_primes, nth_within) when running on PyPy.

    Raises
    ------
    BackendUnavailable
        On any other interpreter.
    """
    implementation = implementation or platform.python_implementation()
    if implementation != "PyPy":
        raise BackendUnavailable(f"requires PyPy, running on {implementation}")
    if count_primes(100) != 25:
        raise BackendUnavailable("bytearray sieve self-check failed")
    return count_primes, nth_within
