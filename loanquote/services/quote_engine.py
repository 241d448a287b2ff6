# loanquote/services/quote_engine.py

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence

from ..domain.errors import (
    AmountNotMultipleError,
    AmountTooHighError,
    AmountTooLowError,
    InsufficientFundsError,
    InvalidTermError,
)
from ..domain.lender import Lender, rank_lenders, total_available
from ..domain.quote import Allocation, Quote
from ..utils.amortization import (
    COMPOUND_FREQUENCY,
    amortization_schedule,
    monthly_payment,
    sum_schedules,
)
from ..utils.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class QuotePolicy:
    """
    Business rules a quote request is checked against. Passed into the
    engine explicitly so several policies can be used side by side.
    """
    min_amount: int = 1000
    max_amount: int = 15000
    amount_multiple: int = 100
    default_term_months: int = 36
    compound_frequency: float = COMPOUND_FREQUENCY

    @classmethod
    def from_settings(cls, settings) -> "QuotePolicy":
        return cls(
            min_amount=settings.MIN_AMOUNT,
            max_amount=settings.MAX_AMOUNT,
            amount_multiple=settings.AMOUNT_MULTIPLE,
            default_term_months=settings.DEFAULT_TERM_MONTHS,
        )


DEFAULT_POLICY = QuotePolicy()


def validate_amount(amount: int, policy: QuotePolicy = DEFAULT_POLICY) -> None:
    if amount < policy.min_amount:
        raise AmountTooLowError(amount, policy.min_amount)
    if amount > policy.max_amount:
        raise AmountTooHighError(amount, policy.max_amount)
    if amount % policy.amount_multiple != 0:
        raise AmountNotMultipleError(amount, policy.amount_multiple)


def validate_term(term_months: int) -> None:
    if isinstance(term_months, bool) or not isinstance(term_months, int) or term_months < 1:
        raise InvalidTermError(term_months)


def allocate(
    amount: int,
    term_months: int,
    ranked: Iterable[Lender],
    compound_frequency: float = COMPOUND_FREQUENCY,
) -> Iterator[Allocation]:
    """
    Greedy waterfall over an already-ranked pool: draw as much as possible
    from each lender in turn, skipping lenders with nothing to give, and
    stop once the balance is covered. Lenders that would draw 0 never
    yield an Allocation.
    """
    balance = amount
    for lender in ranked:
        if balance == 0:
            return
        drawn = lender.borrow(balance)
        if drawn == 0:
            continue
        payment = monthly_payment(drawn, lender.rate, term_months, compound_frequency)
        log.debug(f"draw lender={lender.name!r} rate={lender.rate} drawn={drawn} payment={payment}")
        balance -= drawn
        yield Allocation(lender=lender, drawn=drawn, monthly_repayment=payment)


def compute_quote(
    requested_amount: int,
    term_months: int,
    lenders: Sequence[Lender],
    policy: Optional[QuotePolicy] = None,
) -> Quote:
    """
    Validate the request, rank the pool and price the loan.

    Raises AmountTooLowError / AmountTooHighError / AmountNotMultipleError /
    InvalidTermError before any allocation work, and InsufficientFundsError
    when the whole pool cannot cover the amount.
    """
    policy = policy or DEFAULT_POLICY
    validate_amount(requested_amount, policy)
    validate_term(term_months)

    ranked = rank_lenders(lenders)
    log.debug(f"ranked {len(ranked)} lenders for amount={requested_amount}")

    allocations: List[Allocation] = list(
        allocate(requested_amount, term_months, ranked, policy.compound_frequency)
    )

    if sum(a.drawn for a in allocations) < requested_amount:
        available = total_available(ranked)
        log.info(f"insufficient funds requested={requested_amount} available={available}")
        raise InsufficientFundsError(requested_amount, available)

    monthly = 0.0
    weighted_rate = 0.0
    for a in allocations:
        monthly += a.monthly_repayment
        weighted_rate += a.drawn * a.lender.rate

    quote = Quote(
        requested_amount=requested_amount,
        term_months=term_months,
        rate=weighted_rate / requested_amount,
        monthly_repayment=monthly,
        total_repayment=term_months * monthly,
        allocations=tuple(allocations),
        compound_frequency=policy.compound_frequency,
    )
    log.info(
        f"quote amount={requested_amount} months={term_months} "
        f"lenders={len(allocations)} rate={quote.rate:.4f}"
    )
    return quote


# -------------------- Repayment schedule --------------------

def repayment_schedule(quote: Quote) -> List[dict]:
    """
    Month-by-month schedule for the whole loan: one level-payment schedule
    per lender contribution, summed pointwise. Rows are cents-rounded.
    """
    per_lender = [
        amortization_schedule(
            a.drawn, a.lender.rate, quote.term_months, quote.compound_frequency
        )["schedule"]
        for a in quote.allocations
    ]
    return sum_schedules(per_lender)
