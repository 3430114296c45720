"""
Exception hierarchy for nthsieve.

Only InvalidArgument is meant to reach callers. BackendUnavailable and
EstimationUndercount are raised and absorbed inside the package.
"""


class NthSieveError(Exception):
    """Base class for all nthsieve errors."""


class InvalidArgument(NthSieveError, ValueError):
    """Raised by nth_prime when the ordinal is < 1."""


class BackendUnavailable(NthSieveError):
    """A non-baseline backend could not be bound on this host."""


class EstimationUndercount(NthSieveError):
    """The sieve bound was exhausted before reaching the requested ordinal."""

    def __init__(self, bound: int, found: int, wanted: int):
        super().__init__(
            f"only {found} primes <= {bound}, needed {wanted}"
        )
        self.bound = bound
        self.found = found
        self.wanted = wanted
