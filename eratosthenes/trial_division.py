"""
Primality by trial division.

Responsibility: an independent reference for checking sieve output.
Shares no code with the sieve.
"""

import math
import operator
from typing import List


def is_prime(n: int) -> bool:
    """Return True iff no integer in [2, isqrt(n)] divides n."""
    n = operator.index(n)
    if n < 2:
        return False
    for d in range(2, math.isqrt(n) + 1):
        if n % d == 0:
            return False
    return True


def primes_by_trial_division(limit: int) -> List[int]:
    """
    Return all primes <= limit, testing each odd candidate against the
    primes found so far.

    Parameters
    ----------
    limit : int
        Upper bound (inclusive), non-negative.

    Returns
    -------
    list
        Ascending list of primes.
    """
    limit = operator.index(limit)
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    if limit < 2:
        return []

    primes = [2]
    for candidate in range(3, limit + 1, 2):
        s = math.isqrt(candidate)
        ok = True
        for q in primes:
            if q > s:
                break
            if candidate % q == 0:
                ok = False
                break
        if ok:
            primes.append(candidate)
    return primes
