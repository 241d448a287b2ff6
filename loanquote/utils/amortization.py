# loanquote/utils/amortization.py

from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, Iterable, List

Money = float

# interest is compounded monthly
COMPOUND_FREQUENCY = 12.0


def fmt(x: float, places: str = "0.01") -> float:
    """
    Round to given decimal places (as string pattern) using HALF_UP.
    Use str(x) to avoid binary float artifacts.
    """
    return float(Decimal(str(x)).quantize(Decimal(places), rounding=ROUND_HALF_UP))


def _q2(x: float) -> float:
    """Round to cents using HALF_UP."""
    return fmt(x, "0.01")


def monthly_payment(
    principal: Money,
    annual_rate_frac: float,
    months: int,
    compound_frequency: float = COMPOUND_FREQUENCY,
) -> float:
    """
    Level monthly payment for `principal` over `months` periods (Excel PMT):

      payment = P * (r * (1+r)^n) / ((1+r)^n - 1),   r = annual_rate / 12

    evaluated as P * r / (1 - (1+r)^-n), which is the same value but stays
    finite for very long terms: (1+r)^-n underflows to 0 and the payment
    tends to the interest-only P * r.

    Unrounded. A zero rate has no interest to compound, so the principal
    is simply spread evenly: P / n.
    """
    P = float(principal)
    n = int(months)
    r_m = float(annual_rate_frac) / compound_frequency

    if r_m == 0.0:
        return P / n

    return P * r_m / (1.0 - (1.0 + r_m) ** (-n))


def amortization_schedule(
    principal: Money,
    annual_rate_frac: float,
    months: int,
    compound_frequency: float = COMPOUND_FREQUENCY,
) -> Dict:
    """
    Build a standard level-payment amortization schedule.

    Returns:
      {
        "payment": <float>,                     # monthly level payment (cents-rounded)
        "schedule": [                           # one row per month
          { "month": 1, "opening_balance": ..,
            "payment": .., "interest": ..,
            "principal": .., "ending_balance": .. },
          ...
        ]
      }
    """
    P = float(principal or 0.0)
    n = int(months or 0)
    r_m = float(annual_rate_frac or 0.0) / compound_frequency

    if n <= 0 or P <= 0:
        return {"payment": 0.0, "schedule": []}

    # round the level payment to cents once and stick to it
    payment = _q2(monthly_payment(P, annual_rate_frac, n, compound_frequency))

    rows: List[Dict] = []
    bal = P
    for m in range(1, n + 1):
        opening = bal
        interest = _q2(opening * r_m)
        principal_part = _q2(payment - interest)

        # final row fix so balance hits exactly zero
        if m == n:
            principal_part = _q2(opening)
            pay_this = _q2(principal_part + interest)
        else:
            pay_this = payment

        bal = _q2(opening - principal_part)
        rows.append(
            {
                "month": m,
                "opening_balance": _q2(opening),
                "payment": _q2(pay_this),
                "interest": _q2(interest),
                "principal": _q2(principal_part),
                "ending_balance": _q2(bal),
            }
        )

    return {"payment": payment, "schedule": rows}


def sum_schedules(schedules: Iterable[List[Dict]]) -> List[Dict]:
    """
    Pointwise-sum multiple schedules (assumes equal length).
    """
    schedules = list(schedules)
    if not schedules:
        return []

    # length check (take the first schedule as reference)
    ref = schedules[0]
    n = len(ref)

    agg: List[Dict] = []
    for i in range(n):
        opening = interest = principal = payment = ending = 0.0
        month = ref[i]["month"]
        for sch in schedules:
            row = sch[i]
            opening += float(row["opening_balance"])
            interest += float(row["interest"])
            principal += float(row["principal"])
            payment += float(row["payment"])
            ending += float(row["ending_balance"])

        agg.append(
            {
                "month": month,
                "opening_balance": _q2(opening),
                "payment": _q2(payment),
                "interest": _q2(interest),
                "principal": _q2(principal),
                "ending_balance": _q2(ending),
            }
        )
    return agg
