# loanquote/domain/lender.py
import math
from dataclasses import dataclass
from functools import cmp_to_key
from typing import Iterable, List


@dataclass(frozen=True)
class Lender:
    name: str
    rate: float       # annual, fraction (0.069 = 6.9%)
    available: int

    def __post_init__(self):
        check_rate(self.rate)
        check_available(self.available)

    def borrow(self, balance: int) -> int:
        """
        How much this lender can put towards `balance`: the full balance
        if it has enough funds, otherwise everything it has available.
        """
        if balance > self.available:
            return self.available
        return balance


def check_rate(rate: float) -> float:
    if not math.isfinite(rate) or rate < 0:
        raise ValueError(f"rate must be a finite, non-negative fraction, got {rate!r}")
    return rate


def check_available(available: int) -> int:
    if available < 0:
        raise ValueError(f"available must be non-negative, got {available!r}")
    return available


def compare_lenders(a: Lender, b: Lender) -> int:
    """
    Ordering verdict for two lenders (negative: a first, positive: b first).
      1) cheaper rate first
      2) on equal rate, more funds available first (fewer lenders needed)
    """
    if a.rate != b.rate:
        return -1 if a.rate < b.rate else 1
    if a.available != b.available:
        return -1 if a.available > b.available else 1
    return 0


def rank_lenders(lenders: Iterable[Lender]) -> List[Lender]:
    """
    Return a new list of lenders in order of preference.
    sorted() is stable, so full ties keep their original order.
    """
    return sorted(lenders, key=cmp_to_key(compare_lenders))


def total_available(lenders: Iterable[Lender]) -> int:
    return sum(l.available for l in lenders)
