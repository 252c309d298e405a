#!/usr/bin/env python3
"""
Print every prime up to a limit, followed by the total count.

Usage:
    python run_sieve.py
    python run_sieve.py --limit 1000
    python run_sieve.py --config config/custom.yaml --count-only
"""

import argparse
import sys
from pathlib import Path

import yaml

from eratosthenes.primes import generate_primes

DEFAULT_CONFIG = Path(__file__).parent / 'config' / 'default.yaml'
DEFAULT_LIMIT = 100


def non_negative_int(value: str) -> int:
    """argparse type for a non-negative integer limit."""
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}")
    if n < 0:
        raise argparse.ArgumentTypeError(f"limit must be non-negative, got {n}")
    return n


def load_config(path) -> dict:
    """Load a YAML run configuration."""
    with open(path) as f:
        config = yaml.safe_load(f)
    if not isinstance(config, dict):
        raise ValueError(f"{path}: expected a mapping at top level")
    return config


def limit_from_config(config: dict) -> int:
    """Extract and validate the 'limit' key of a run configuration."""
    if 'limit' not in config:
        raise ValueError("config has no 'limit' key")
    limit = config['limit']
    if isinstance(limit, bool) or not isinstance(limit, int):
        raise ValueError(f"config 'limit' must be an integer, got {limit!r}")
    if limit < 0:
        raise ValueError(f"config 'limit' must be non-negative, got {limit}")
    return limit


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description='Print all primes up to a limit')
    parser.add_argument('--limit', type=non_negative_int, default=None,
                        help='Upper bound, inclusive (overrides the config file)')
    parser.add_argument('--config', type=str, default=None,
                        help=f'Path to config file (default: {DEFAULT_CONFIG})')
    parser.add_argument('--count-only', action='store_true',
                        help='Print only the total count')
    args = parser.parse_args(argv)

    limit = args.limit
    # The shipped config only exists in a source checkout
    if limit is None and args.config is None and not DEFAULT_CONFIG.exists():
        limit = DEFAULT_LIMIT
    if limit is None:
        config_path = args.config or str(DEFAULT_CONFIG)
        try:
            limit = limit_from_config(load_config(config_path))
        except FileNotFoundError:
            parser.error(f"config file not found: {config_path}")
        except (yaml.YAMLError, ValueError) as e:
            parser.error(f"invalid config {config_path}: {e}")

    primes = generate_primes(limit)
    if not args.count_only:
        for p in primes:
            print(f"prime: {p}")
    print(f"total number of primes till {limit}: {len(primes)}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
