# prime_sum/audit.py
# Purpose: Oracle-agreement audit. Every strategy must answer exactly like
#          the sieve for each n in [lo, hi].
# Outputs: audit-style summary per strategy + a few mismatch lines.

import argparse
from typing import Callable, Dict, Iterable, List, Optional

from prime_sum.primality import STRATEGIES, SievePrimality, make_oracle

# --------------------------- Config ---------------------------
AUDIT_LO = 1
AUDIT_HI = 1000
SHOW = 12


def compare(oracle: Callable[[int], bool], reference: Callable[[int], bool],
            lo: int = AUDIT_LO, hi: int = AUDIT_HI) -> Dict:
    """Tally agreement of oracle with reference over [lo, hi] inclusive."""
    counts = {
        "checked": 0,
        "primes_oracle": 0,
        "primes_reference": 0,
        "mismatches": [],
    }
    for n in range(lo, hi + 1):
        got = oracle(n)
        expected = reference(n)
        counts["checked"] += 1
        if got:
            counts["primes_oracle"] += 1
        if expected:
            counts["primes_reference"] += 1
        if got != expected:
            counts["mismatches"].append((n, got, expected))
    return counts


def run(names: Iterable[str], lo: int = AUDIT_LO, hi: int = AUDIT_HI, show: int = SHOW) -> int:
    """Print one summary block per strategy; return how many disagreed."""
    names = list(names)
    size = max(hi + 1, 2)
    reference = SievePrimality(size)
    failed = 0
    print("Primality Agreement Audit (reference: sieve)")
    print(f"range=[{lo}, {hi}]; strategies={len(names)}")
    print(f"reference_primes_upto_hi={reference.count()}")
    for name in names:
        oracle = make_oracle(name, size)
        print(f"\n[{name}]")
        try:
            counts = compare(oracle, reference, lo, hi)
        except NotImplementedError:
            print("status=not implemented")
            continue
        bad = counts["mismatches"]
        print(f"checked={counts['checked']}")
        print(f"primes={counts['primes_oracle']}   (expected = {counts['primes_reference']})")
        print(f"mismatches={len(bad)}   (expected = 0)")
        for (n, got, expected) in bad[:show]:
            print(f"n={n}, got={got}, expected={expected}")
        print("Result:", "PASS" if not bad else "FAIL")
        if bad:
            failed += 1
    return failed


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Check every primality strategy against the sieve.")
    ap.add_argument("--hi", type=int, default=AUDIT_HI, help=f"Inclusive upper bound (default {AUDIT_HI})")
    ap.add_argument("--show", type=int, default=SHOW, help=f"Mismatch rows to print (default {SHOW})")
    ap.add_argument("--strategy", action="append", choices=sorted(STRATEGIES),
                    help="Strategy to audit; repeat for several (default: all)")
    args, unknown = ap.parse_known_args(argv)
    names = args.strategy or list(STRATEGIES)
    return 1 if run(names, AUDIT_LO, args.hi, args.show) else 0


if __name__ == "__main__":
    raise SystemExit(main())
