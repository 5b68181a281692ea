# prime_sum/driver.py
# Purpose: sum every prime below LIMIT with the chosen strategy and print
#          the total as a single line. No arguments needed.

import argparse
from typing import Callable, List, Optional

from prime_sum.primality import STRATEGIES, make_oracle

# --------------------------- Config ---------------------------
LIMIT = 2_000_000
DEFAULT_STRATEGY = "sieve"


def sum_primes(oracle: Callable[[int], bool], limit: int = LIMIT, start: int = 1) -> int:
    """Sum of n in [start, limit) for which oracle(n) holds."""
    return sum(filter(oracle, range(start, limit)))


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="prime-sum", description="Sum all primes below a limit.")
    ap.add_argument("--strategy", choices=sorted(STRATEGIES), default=DEFAULT_STRATEGY,
                    help=f"Primality strategy (default {DEFAULT_STRATEGY})")
    ap.add_argument("--limit", type=int, default=LIMIT,
                    help=f"Exclusive upper bound (default {LIMIT})")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    oracle = make_oracle(args.strategy, args.limit)
    print(sum_primes(oracle, args.limit))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
