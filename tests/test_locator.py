"""
Tests for nth-prime location: ordinals, the estimate and undercount recovery.
"""

import pytest

from nthsieve import locator, primes
from nthsieve.errors import EstimationUndercount, InvalidArgument


class TestNthPrime:
    """Known ordinals through the baseline scan."""

    def test_small_table(self):
        """nth_prime(1..5) come from the table."""
        got = [locator.nth_prime(n, primes.nth_within) for n in range(1, 6)]
        assert got == [2, 3, 5, 7, 11]

    def test_first_past_table(self):
        """n=6 is the first ordinal that goes through the sieve."""
        assert locator.nth_prime(6, primes.nth_within) == 13

    def test_known_values(self):
        assert locator.nth_prime(100, primes.nth_within) == 541
        assert locator.nth_prime(1000, primes.nth_within) == 7919
        assert locator.nth_prime(10000, primes.nth_within) == 104729

    @pytest.mark.parametrize("n", [0, -1, -100])
    def test_invalid_ordinal(self, n):
        """n < 1 raises InvalidArgument, which is also a ValueError."""
        with pytest.raises(InvalidArgument):
            locator.nth_prime(n, primes.nth_within)
        with pytest.raises(ValueError):
            locator.nth_prime(n, primes.nth_within)

    def test_strictly_increasing(self):
        """nth_prime is strictly increasing in n."""
        values = [locator.nth_prime(n, primes.nth_within) for n in range(1, 300)]
        assert all(a < b for a, b in zip(values, values[1:]))

    def test_consistent_with_count(self):
        """pi(p_n) == n and pi(p_n - 1) == n - 1."""
        for n in [6, 7, 50, 168, 169, 500]:
            p = locator.nth_prime(n, primes.nth_within)
            assert primes.count_primes(p) == n
            assert primes.count_primes(p - 1) == n - 1


class TestEstimate:
    """The upper-bound estimate."""

    def test_floor_at_two_n(self):
        for n in range(6, 200):
            assert locator.estimate_upper_bound(n) >= 2 * n

    def test_covers_nth_prime(self):
        """With the margin the estimate holds for a sample of n."""
        for n in [6, 10, 100, 1000, 10000]:
            p = locator.nth_prime(n, primes.nth_within)
            assert locator.estimate_upper_bound(n) >= p, f"estimate too small for n={n}"


class TestUndercountRecovery:
    """An undersized bound must be doubled, never surfaced."""

    def test_tiny_estimate_still_correct(self, monkeypatch):
        """Force the estimate to 10: several doublings reach 541."""
        monkeypatch.setattr(locator, "estimate_upper_bound", lambda n: 10)

        bounds = []

        def recording_scan(bound, n):
            bounds.append(bound)
            return primes.nth_within(bound, n)

        assert locator.nth_prime(100, recording_scan) == 541
        assert bounds == [10, 20, 40, 80, 160, 320, 640]

    def test_undercount_not_propagated(self, monkeypatch):
        monkeypatch.setattr(locator, "estimate_upper_bound", lambda n: 2)
        assert locator.nth_prime(1000, primes.nth_within) == 7919

    def test_other_errors_propagate(self):
        """Only EstimationUndercount triggers a retry."""
        def broken_scan(bound, n):
            raise RuntimeError("boom")

        with pytest.raises(RuntimeError):
            locator.nth_prime(100, broken_scan)

    def test_undercount_message(self):
        err = EstimationUndercount(100, 25, 30)
        assert "25" in str(err) and "100" in str(err)
