"""Sieve of Eratosthenes prime generation."""

from .primes import (
    FIRST_PRIME,
    generate_primes,
    prime_count,
    prime_flags_upto,
    primes_upto,
)

__all__ = [
    'FIRST_PRIME',
    'generate_primes',
    'prime_count',
    'prime_flags_upto',
    'primes_upto',
]
