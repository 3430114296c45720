#!/usr/bin/env python3
"""
Benchmark every available nthsieve backend.

For each backend:
1. Cold start: first count_primes call (includes JIT compile / cache load)
2. Hot: same call after warmup
3. count_primes across a scale ladder
4. nth_prime across a scale ladder

Results from every backend are checked against the numpy baseline.

Usage:
    python benchmark.py                 # limit=10^6 (default)
    python benchmark.py --limit 1e7
    python benchmark.py --max-scale 1e8
"""

import argparse
import time

from nthsieve import locator
from nthsieve.backends import BackendKind, probe
from nthsieve.dispatch import Dispatcher, check_backends


def timed(fn, *args):
    t0 = time.perf_counter()
    result = fn(*args)
    return result, time.perf_counter() - t0


def benchmark_backend(backend, limit: int, scales: list, ordinals: list, warmup: int):
    """Time one backend. Returns {label: result} for cross-checking."""
    print("=" * 60)
    print(f"Backend: {backend.kind.value}")
    print("=" * 60)

    results = {}

    result, cold = timed(backend.count_primes, limit)
    print(f"COLD  count_primes({limit:,}): {cold * 1000:10.2f}ms  -> {result:,}")

    print(f"Warming up ({warmup} iterations)...")
    for _ in range(warmup):
        backend.count_primes(min(limit, 100_000))

    result, hot = timed(backend.count_primes, limit)
    print(f"HOT   count_primes({limit:,}): {hot * 1000:10.2f}ms  -> {result:,}")
    if hot > 0:
        print(f"Speedup vs cold: {cold / hot:.2f}x")
    print()

    print("-" * 60)
    for s in scales:
        result, t = timed(backend.count_primes, s)
        results[f"count({s})"] = result
        print(f"count_primes({s:>12,}): {t * 1000:10.2f}ms  -> {result:,}")

    print("-" * 60)
    for n in ordinals:
        result, t = timed(locator.nth_prime, n, backend.nth_within)
        results[f"nth({n})"] = result
        print(f"nth_prime({n:>9,}): {t * 1000:10.2f}ms  -> {result:,}")
    print()

    return results


def main():
    parser = argparse.ArgumentParser(description="Benchmark nthsieve backends")
    parser.add_argument("--limit", type=float, default=1e6, help="Cold/hot limit (default: 1e6)")
    parser.add_argument("--max-scale", type=float, default=1e7, help="Largest count_primes limit (default: 1e7)")
    parser.add_argument("--warmup", type=int, default=20, help="Warmup iterations (default: 20)")
    args = parser.parse_args()

    limit = int(args.limit)
    scales = [s for s in (10**4, 10**5, 10**6, 10**7, 10**8) if s <= int(args.max_scale)]
    ordinals = [100, 1_000, 10_000, 100_000]

    check_backends(Dispatcher())
    print()

    baseline_results = None
    mismatches = 0
    # Baseline is last in probe order; run it first so others compare to it
    probed = [b for b, ok in probe() if ok]
    probed.sort(key=lambda b: b.kind is not BackendKind.BASELINE)

    for backend in probed:
        results = benchmark_backend(backend, limit, scales, ordinals, args.warmup)
        if baseline_results is None:
            baseline_results = results
            continue
        for label, value in results.items():
            if value != baseline_results[label]:
                mismatches += 1
                print(f"MISMATCH {backend.kind.value} {label}: {value} != {baseline_results[label]}")

    print("=" * 60)
    if mismatches:
        print(f"✗ {mismatches} results differ from baseline!")
    else:
        print(f"✓ All {len(probed)} backends agree")


if __name__ == "__main__":
    main()
