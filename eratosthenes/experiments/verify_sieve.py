#!/usr/bin/env python3
"""
Verify the sieve produces the same primes as trial division.

Compares:
1. The full prime list against an independent trial-division reference
2. Structural properties of the output (ordering, primality, flag table)
3. Prime counts against known values of pi(x)

Usage:
    python -m eratosthenes.experiments.verify_sieve
    python -m eratosthenes.experiments.verify_sieve --limit 1e6
"""

import math
import sys
import time

import numpy as np

from ..primes import generate_primes, prime_count, prime_flags_upto
from ..trial_division import is_prime, primes_by_trial_division

# pi(x) for powers of ten
KNOWN_PRIME_COUNTS = {
    10: 4,
    100: 25,
    1000: 168,
    10_000: 1229,
    100_000: 9592,
}


def verify_against_reference(limit: int, verbose: bool = True) -> bool:
    """Verify sieve output matches trial division up to limit."""
    if verbose:
        print(f"\n=== Verifying primes against trial division for limit={limit:,} ===")

    t0 = time.time()
    sieved = generate_primes(limit)
    t_sieve = time.time() - t0

    t0 = time.time()
    reference = primes_by_trial_division(limit)
    t_ref = time.time() - t0

    if verbose:
        print(f"  Sieve: {t_sieve:.2f}s, {len(sieved):,} primes")
        print(f"  Trial division: {t_ref:.2f}s, {len(reference):,} primes")

    missing = sorted(set(reference) - set(sieved))
    extra = sorted(set(sieved) - set(reference))
    errors = len(missing) + len(extra)

    for n in missing[:10]:
        print(f"  MISSING prime {n}")
    for n in extra[:10]:
        print(f"  EXTRA value {n}")

    if verbose:
        if errors == 0 and sieved == reference:
            print(f"  ✓ All {len(sieved):,} primes match!")
        else:
            print(f"  ✗ {errors:,} mismatches found")

    return errors == 0 and sieved == reference


def verify_properties(limit: int, verbose: bool = True) -> bool:
    """Verify ordering, primality and table consistency of sieve output."""
    if verbose:
        print(f"\n=== Verifying output properties for limit={limit:,} ===")

    primes = generate_primes(limit)
    flags = prime_flags_upto(limit)
    ok = True

    if any(b <= a for a, b in zip(primes, primes[1:])):
        print("  ✗ Output is not strictly ascending")
        ok = False

    # Trial division is slow, so only check a bounded sample
    sample = primes[:2000] + primes[-2000:]
    composites = [n for n in sample if not is_prime(n)]
    if composites:
        print(f"  ✗ Composite values returned: {composites[:10]}")
        ok = False

    if len(flags) != limit + 1:
        print(f"  ✗ Flag table has length {len(flags)}, expected {limit + 1}")
        ok = False
    elif not np.array_equal(np.flatnonzero(flags), np.array(primes, dtype=np.intp)):
        print("  ✗ Flag table disagrees with prime list")
        ok = False

    if verbose:
        if ok:
            print(f"  ✓ {len(primes):,} primes ascending, sampled values prime, table consistent")
        else:
            print("  ✗ Property checks failed")

    return ok


def verify_known_counts(verbose: bool = True) -> bool:
    """Verify prime counts against known values of pi(x)."""
    if verbose:
        print("\n=== Verifying known prime counts ===")

    ok = True
    for x, expected in KNOWN_PRIME_COUNTS.items():
        got = prime_count(x)
        status = "✓" if got == expected else f"✗ (expected {expected})"
        if got != expected:
            ok = False
        if verbose:
            print(f"  pi({x:,}) = {got:,} {status}")

    return ok


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description='Verify sieve correctness')
    parser.add_argument('--limit', type=float, default=1e5,
                        help='Upper bound to verify (default: 1e5)')
    args = parser.parse_args(argv)

    if not math.isfinite(args.limit) or not args.limit.is_integer():
        parser.error(f"--limit must be a whole number, got {args.limit}")
    limit = int(args.limit)
    if limit < 0:
        parser.error(f"--limit must be non-negative, got {limit}")

    print("Sieve Verification")
    print(f"limit = {limit:,}")
    print("=" * 50)

    reference_ok = verify_against_reference(limit)
    properties_ok = verify_properties(limit)
    counts_ok = verify_known_counts()

    print("\n" + "=" * 50)
    if reference_ok and properties_ok and counts_ok:
        print("✓ All verifications passed!")
        return 0

    print("✗ Some verifications failed!")
    return 1


if __name__ == '__main__':
    sys.exit(main())
