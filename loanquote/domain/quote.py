# loanquote/domain/quote.py
from dataclasses import dataclass, field
from typing import Dict, List, Tuple

from .lender import Lender
from ..utils.amortization import COMPOUND_FREQUENCY, fmt


@dataclass(frozen=True)
class Allocation:
    """What one lender contributes to a quote."""
    lender: Lender
    drawn: int
    monthly_repayment: float


@dataclass(frozen=True)
class Quote:
    """
    Result of a successful engine run. Values are kept unrounded;
    rounding to currency precision happens only in format_quote().
    """
    requested_amount: int
    term_months: int
    rate: float                 # blended annual rate (fraction)
    monthly_repayment: float
    total_repayment: float
    allocations: Tuple[Allocation, ...] = field(default=(), repr=False)
    compound_frequency: float = COMPOUND_FREQUENCY   # periods per year used for pricing

    def __str__(self) -> str:
        return format_quote(self)

    def to_dict(self) -> Dict:
        return {
            "requested_amount": self.requested_amount,
            "term_months": self.term_months,
            "rate": self.rate,
            "monthly_repayment": self.monthly_repayment,
            "total_repayment": self.total_repayment,
            "allocations": [
                {
                    "lender": a.lender.name,
                    "rate": a.lender.rate,
                    "drawn": a.drawn,
                    "monthly_repayment": a.monthly_repayment,
                }
                for a in self.allocations
            ],
        }


def format_quote(quote: Quote) -> str:
    lines = [
        f"Requested amount: £{quote.requested_amount}",
        f"Rate: {fmt(quote.rate * 100.0, '0.1'):.1f}%",
        f"Monthly repayment: £{fmt(quote.monthly_repayment):.2f}",
        f"Total repayment: £{fmt(quote.total_repayment):.2f}",
    ]
    return "\n".join(lines)


def format_schedule(rows: List[Dict]) -> str:
    """Plain-text table of a repayment schedule (one line per month)."""
    header = f"{'Month':>5}  {'Opening':>10}  {'Payment':>9}  {'Interest':>9}  {'Principal':>9}  {'Closing':>10}"
    out = [header]
    for r in rows:
        out.append(
            f"{r['month']:>5}  {r['opening_balance']:>10.2f}  {r['payment']:>9.2f}  "
            f"{r['interest']:>9.2f}  {r['principal']:>9.2f}  {r['ending_balance']:>10.2f}"
        )
    return "\n".join(out)
