# ======================================================================
# prime_sum — Primality strategies
# ----------------------------------------------------------------------
# Every strategy answers the same question, is_prime(n), and must agree
# with the sieve-backed reference over any range the sieve covers.
#   - naive / range-limit      : O(n) trial division
#   - linear                   : odd-step trial division up to n/3
#   - non-linear / fast        : trial division up to isqrt(n)
#   - sieve                    : Eratosthenes table, O(1) lookups
#   - miller-rabin             : deterministic for n < 2^64 (bases 2..37)
#   - pending                  : not built yet, raises on use
# ======================================================================

from math import isqrt
from typing import Dict, Iterator, Optional, Type

from bitarray.util import ones

# Deterministic Miller–Rabin bases. The first twelve primes are exact for
# n < 2^64; the first composite they all pass is 318665857834031151167461.
MR_BASES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


class OddCandidates:
    """Odd trial divisors start, start+2, ... up to and including stop.

    Restartable: every iter() walks the sequence from the beginning.
    """

    def __init__(self, stop: int, start: int = 3):
        self.start = start if start % 2 else start + 1
        self.stop = stop

    def __iter__(self) -> Iterator[int]:
        n = self.start
        while n <= self.stop:
            yield n
            n += 2

    def __repr__(self) -> str:
        return f"OddCandidates(stop={self.stop}, start={self.start})"


class Primality:
    """Capability: answer "is n prime?" for n >= 0."""

    name = "abstract"

    def is_prime(self, n: int) -> bool:
        raise NotImplementedError

    def __call__(self, n: int) -> bool:
        return self.is_prime(n)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


# ------------------------- O(n) strategies -------------------------

class NaivePrimality(Primality):
    name = "naive"

    def is_prime(self, n: int) -> bool:
        if n < 2:
            return False
        for i in range(2, n):
            if n % i == 0:
                return False
        return True


class NaivePrimalityWithRangeLimit(Primality):
    """No proper factor of n exceeds n // 2."""

    name = "range-limit"

    def is_prime(self, n: int) -> bool:
        if n < 2:
            return False
        for i in range(2, n // 2 + 1):
            if n % i == 0:
                return False
        return True


def _small_case(n: int) -> Optional[bool]:
    """True/False when n is decided without trial division, else None."""
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False
    return None


class LinearPrimality(Primality):
    # smallest odd factor of an odd composite n is at most n/3
    name = "linear"

    def is_prime(self, n: int) -> bool:
        quick = _small_case(n)
        if quick is not None:
            return quick
        return not any(n % i == 0 for i in OddCandidates(n // 3))


# ------------------------ O(sqrt n) strategies ------------------------

class NonLinearPrimality(Primality):
    name = "non-linear"

    def is_prime(self, n: int) -> bool:
        if n < 2:
            return False
        for i in range(2, isqrt(n) + 1):
            if n % i == 0:
                return False
        return True


class FastNonLinearPrimality(Primality):
    name = "fast-non-linear"

    def is_prime(self, n: int) -> bool:
        quick = _small_case(n)
        if quick is not None:
            return quick
        return not any(n % i == 0 for i in OddCandidates(isqrt(n)))


class MillerRabinPrimality(Primality):
    """Deterministic Miller–Rabin after a small-prime quick path."""

    name = "miller-rabin"

    def __init__(self, bases=MR_BASES):
        self.bases = tuple(bases)

    def is_prime(self, n: int) -> bool:
        if n < 2:
            return False
        for p in self.bases:
            if n % p == 0:
                return n == p
        # n-1 = d*2^s with d odd
        d = n - 1
        s = 0
        while d % 2 == 0:
            d //= 2
            s += 1

        def passes(a: int) -> bool:
            x = pow(a, d, n)
            if x == 1 or x == n - 1:
                return True
            for _ in range(s - 1):
                x = (x * x) % n
                if x == n - 1:
                    return True
            return False

        return all(passes(a) for a in self.bases)


# ------------------------------ sieve ------------------------------

class SievePrimality(Primality):
    """Eratosthenes table over [0, limit), built once at construction.

    Queries outside [0, limit) raise ValueError; size the sieve to the
    largest value you will ever ask about.
    """

    name = "sieve"

    def __init__(self, limit: int):
        if limit < 2:
            raise ValueError(f"sieve limit must be >= 2, got {limit}")
        self.limit = limit
        table = ones(limit)
        table[:2] = False
        for i in range(2, isqrt(limit - 1) + 1):
            if table[i]:
                table[i * i::i] = False
        self._table = table

    def is_prime(self, n: int) -> bool:
        if not 0 <= n < self.limit:
            raise ValueError(f"{n} is outside the sieve range [0, {self.limit})")
        return bool(self._table[n])

    def count(self) -> int:
        """Number of primes below limit."""
        return self._table.count()

    def __repr__(self) -> str:
        return f"SievePrimality(limit={self.limit})"


# ------------------------------ pending ------------------------------

class PendingPrimality(Primality):
    """Placeholder for a strategy that has not been written yet."""

    name = "pending"

    def is_prime(self, n: int) -> bool:
        raise NotImplementedError(f"{self.name} primality strategy is not implemented")


# ----------------------------- registry -----------------------------

STRATEGIES: Dict[str, Type[Primality]] = {
    cls.name: cls
    for cls in (
        NaivePrimality,
        NaivePrimalityWithRangeLimit,
        LinearPrimality,
        NonLinearPrimality,
        FastNonLinearPrimality,
        SievePrimality,
        MillerRabinPrimality,
        PendingPrimality,
    )
}


def make_oracle(name: str, limit: int) -> Primality:
    """Build the named strategy; the sieve is sized to cover [0, limit)."""
    try:
        cls = STRATEGIES[name]
    except KeyError:
        raise ValueError(f"unknown strategy {name!r}; choose from {sorted(STRATEGIES)}") from None
    if cls is SievePrimality:
        return SievePrimality(max(limit, 2))
    return cls()
