"""
Backend capability probe.

Backends in priority order:
1. ACCELERATED      numba-compiled bit-packed sieve (numba_sieve)
2. MANAGED_RUNTIME  bytearray sieve, PyPy only (pypy_sieve)
3. BASELINE         numpy sieve (primes), always available

Each non-baseline binder either returns its (count_primes, nth_within) pair
or raises. probe() records the failure and moves on; nothing it does is
visible to callers besides the availability answer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from . import numba_sieve, primes, pypy_sieve


class BackendKind(Enum):
    ACCELERATED = "accelerated"
    MANAGED_RUNTIME = "managed_runtime"
    BASELINE = "baseline"


@dataclass(frozen=True)
class Backend:
    """
    One implementation of the operation pair.

    For an unavailable backend the callables are None and `error` holds the
    reason binding failed.
    """
    kind: BackendKind
    count_primes: Optional[Callable[[int], int]] = None
    nth_within: Optional[Callable[[int, int], int]] = None
    error: Optional[str] = None


Binder = Callable[[], Tuple[Callable[[int], int], Callable[[int, int], int]]]

BINDERS: Sequence[Tuple[BackendKind, Binder]] = (
    (BackendKind.ACCELERATED, numba_sieve.bind),
    (BackendKind.MANAGED_RUNTIME, pypy_sieve.bind),
)

BASELINE = Backend(BackendKind.BASELINE, primes.count_primes, primes.nth_within)


def probe(binders: Optional[Sequence[Tuple[BackendKind, Binder]]] = None) -> List[Tuple[Backend, bool]]:
    """
    Try every backend in priority order.

    Parameters
    ----------
    binders : sequence of (BackendKind, binder), optional
        Non-baseline candidates. Defaults to BINDERS.

    Returns
    -------
    list of (Backend, bool)
        One entry per candidate plus BASELINE last, with availability.
    """
    if binders is None:
        binders = BINDERS

    results = []
    for kind, bind in binders:
        try:
            count_fn, nth_fn = bind()
        except Exception as e:
            # Missing module, wrong interpreter, compile failure, ...
            results.append((Backend(kind, error=f"{type(e).__name__}: {e}"), False))
            continue
        results.append((Backend(kind, count_fn, nth_fn), True))

    results.append((BASELINE, True))
    return results


def available_backends() -> List[Backend]:
    """All usable backends on this host, ignoring configuration."""
    return [backend for backend, ok in probe() if ok]
