# ======================================================================
# prime_sum — Benchmark (one row per strategy)
# Sums the primes below LIMIT with each strategy and reports candidates
# tested and wall-clock time. Slow strategies are cut off at TIMEOUT_SEC.
# Prints as it goes; no file I/O.
# ======================================================================

import argparse
from time import perf_counter
from typing import Dict, List, Optional

from prime_sum.primality import STRATEGIES, make_oracle

# --------------------------- Config ---------------------------
LIMIT = 100_000
TIMEOUT_SEC = 5.0
CHECK_EVERY = 1024       # candidates between clock reads


def time_strategy(name: str, limit: int = LIMIT, timeout: float = TIMEOUT_SEC) -> Dict:
    t0 = perf_counter()
    oracle = make_oracle(name, limit)
    tested = 0
    total = 0
    for n in range(1, limit):
        if tested % CHECK_EVERY == 0 and perf_counter() - t0 > timeout:
            return {"method": name, "sum": None, "tested": tested,
                    "time": perf_counter() - t0, "timeout": True}
        tested += 1
        try:
            hit = oracle(n)
        except NotImplementedError:
            return {"method": name, "sum": None, "tested": tested - 1,
                    "time": perf_counter() - t0, "note": "not implemented"}
        if hit:
            total += n
    return {"method": name, "sum": total, "tested": tested, "time": perf_counter() - t0}


# --------------------------- Runner ---------------------------
def print_header(limit: int):
    print(f"Benchmark: sum of primes below {limit:,}")
    print("\n| method            | sum                  | candidates | wall-clock (s) | notes")
    print("|-------------------|----------------------|------------|----------------|------")


def print_row(m: Dict):
    note = "timeout" if m.get("timeout") else m.get("note", "")
    print(f"| {m['method']:<17} | {str(m['sum']):>20} | {m['tested']:>10} | {m['time']:.6f}       | {note}",
          flush=True)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Time every primality strategy on the same sum.")
    ap.add_argument("--limit", type=int, default=LIMIT, help=f"Exclusive upper bound (default {LIMIT})")
    ap.add_argument("--timeout", type=float, default=TIMEOUT_SEC,
                    help=f"Per-strategy timeout in seconds (default {TIMEOUT_SEC})")
    ap.add_argument("--strategy", action="append", choices=sorted(STRATEGIES),
                    help="Strategy to time; repeat for several (default: all)")
    args, unknown = ap.parse_known_args(argv)

    print_header(args.limit)
    for name in args.strategy or list(STRATEGIES):
        print_row(time_strategy(name, args.limit, args.timeout))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
