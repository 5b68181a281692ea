"""Sum of primes below two million, with interchangeable primality strategies."""

from prime_sum.driver import LIMIT, sum_primes
from prime_sum.primality import (
    STRATEGIES,
    FastNonLinearPrimality,
    LinearPrimality,
    MillerRabinPrimality,
    NaivePrimality,
    NaivePrimalityWithRangeLimit,
    NonLinearPrimality,
    OddCandidates,
    PendingPrimality,
    Primality,
    SievePrimality,
    make_oracle,
)

__version__ = "0.1.0"
