"""
Prime generation via the Sieve of Eratosthenes.

Responsibility: prime generation only. The marking table is built once per
call, mutated in place while sieving, and read-only while the primes are
collected from it.
"""

import operator
from typing import List, Optional

import numpy as np

FIRST_PRIME = 2


def _check_limit(limit) -> int:
    """Validate an upper bound and return it as a plain int."""
    if isinstance(limit, bool):
        raise TypeError(f"limit must be an integer, got {limit!r}")
    limit = operator.index(limit)
    if limit < 0:
        raise ValueError(f"limit must be non-negative, got {limit}")
    return limit


def multiples_of(p: int, limit: int) -> np.ndarray:
    """
    Return the proper multiples 2p, 3p, 4p, ... that are <= limit.

    p itself is never included.
    """
    return np.arange(2 * p, limit + 1, p)


def _next_unmarked(flags: np.ndarray, start: int) -> Optional[int]:
    """Smallest index >= start still marked as a candidate, or None."""
    for i in range(start, len(flags)):
        if flags[i]:
            return i
    return None


def sieve_flags(limit: int) -> np.ndarray:
    """
    Run the marking phase of the sieve.

    Parameters
    ----------
    limit : int
        Upper bound (inclusive), non-negative.

    Returns
    -------
    np.ndarray
        Boolean marking table of length limit+1. For i >= 2, flags[i] is
        True iff i is prime. Entries 0 and 1 are never touched.
    """
    limit = _check_limit(limit)
    flags = np.ones(limit + 1, dtype=bool)

    candidate = FIRST_PRIME if limit >= FIRST_PRIME else None
    # Past sqrt(limit) every proper multiple is already marked.
    while candidate is not None and candidate * candidate <= limit:
        flags[2 * candidate::candidate] = False
        candidate = _next_unmarked(flags, candidate + 1)
    return flags


def prime_flags_upto(limit: int) -> np.ndarray:
    """
    Return boolean array where flags[i] is True iff i is prime.

    Parameters
    ----------
    limit : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Boolean array of length limit+1.
    """
    flags = sieve_flags(limit)
    flags[:FIRST_PRIME] = False
    return flags


def primes_upto(limit: int) -> np.ndarray:
    """
    Return array of all primes <= limit, ascending.

    Parameters
    ----------
    limit : int
        Upper bound (inclusive).

    Returns
    -------
    np.ndarray
        Integer array of primes (empty for limit < 2).
    """
    flags = sieve_flags(limit)
    return FIRST_PRIME + np.flatnonzero(flags[FIRST_PRIME:])


def generate_primes(limit: int) -> List[int]:
    """
    Return all primes <= limit as an ascending list of ints.

    >>> generate_primes(10)
    [2, 3, 5, 7]
    """
    return primes_upto(limit).tolist()


def prime_count(limit: int) -> int:
    """Number of primes <= limit."""
    return len(primes_upto(limit))
