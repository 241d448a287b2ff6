# loanquote/cli.py
"""
Command-line quote:

    loanquote market.csv 1000
    loanquote https://example.org/market.csv 1500 --months 24 --schedule
"""
import argparse
import sys
from typing import List, Optional

from .domain.errors import AppError
from .domain.quote import format_schedule
from .services.lender_source import load_lenders
from .services.quote_engine import QuotePolicy, compute_quote, repayment_schedule
from .utils.config import settings
from .utils.logging import get_logger

log = get_logger(__name__)


def build_parser(policy: QuotePolicy) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="loanquote",
        description="Quote a loan against a pool of lenders.",
    )
    parser.add_argument("source", help="Lender CSV file (or http(s) URL).")
    parser.add_argument("amount", help="Amount to borrow, whole pounds.")
    parser.add_argument(
        "--months",
        type=int,
        default=policy.default_term_months,
        help=f"Loan term in months (default {policy.default_term_months}).",
    )
    parser.add_argument(
        "--schedule",
        action="store_true",
        help="Also print the month-by-month repayment schedule.",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    policy = QuotePolicy.from_settings(settings)
    args = build_parser(policy).parse_args(argv)

    try:
        amount = int(args.amount)
    except ValueError:
        print(f"The amount {args.amount} is not a valid integer")
        return 1

    try:
        lenders = load_lenders(args.source)
        quote = compute_quote(amount, args.months, lenders, policy)
    except AppError as e:
        log.debug(f"quote failed: {type(e).__name__}")
        print(e.message)
        return 1

    print(quote)
    if args.schedule:
        print()
        print(format_schedule(repayment_schedule(quote)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
