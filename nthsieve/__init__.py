"""
Prime counting and nth-prime location with backend fallback.

    >>> import nthsieve
    >>> nthsieve.count_primes(100)
    25
    >>> nthsieve.nth_prime(1000)
    7919

The backend (numba, PyPy bytearray, or numpy baseline) is chosen on the
first call and kept for the life of the process. Set
DISABLE_MATRYOSHKA_NATIVE or DISABLE_NTHSIEVE_NATIVE to force the baseline.
"""

from .backends import Backend, BackendKind, available_backends, probe
from .config import EngineConfig
from .dispatch import BackendSelection, CandidateReport, Dispatcher
from .errors import InvalidArgument, NthSieveError

__version__ = "0.1.0"

_default = Dispatcher()


def count_primes(limit: int) -> int:
    """Number of primes <= limit."""
    return _default.count_primes(limit)


def nth_prime(n: int) -> int:
    """The nth prime (1-indexed). Raises InvalidArgument for n < 1."""
    return _default.nth_prime(n)


def resolve() -> BackendSelection:
    """The process-wide backend selection."""
    return _default.resolve()


def active_backend() -> BackendKind:
    return _default.resolve().kind


__all__ = [
    "count_primes",
    "nth_prime",
    "resolve",
    "active_backend",
    "Backend",
    "BackendKind",
    "BackendSelection",
    "CandidateReport",
    "Dispatcher",
    "EngineConfig",
    "InvalidArgument",
    "NthSieveError",
    "available_backends",
    "probe",
]
