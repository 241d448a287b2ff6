from dataclasses import dataclass
from typing import Dict, List, Optional

from ..domain.errors import BadRequest
from ..domain.lender import Lender


@dataclass
class QuoteRequest:
    amount: int
    months: Optional[int] = None
    lenders: Optional[List[Lender]] = None   # None -> use the configured source
    schedule: bool = False

    @classmethod
    def from_json(cls, body: Dict) -> "QuoteRequest":
        amount = body.get("amount")
        if isinstance(amount, bool) or not isinstance(amount, int):
            raise BadRequest("amount is required and must be an integer")

        months = body.get("months")
        if months is not None and (isinstance(months, bool) or not isinstance(months, int)):
            raise BadRequest("months must be an integer")

        lenders = None
        if body.get("lenders") is not None:
            lenders = [_lender_from_json(i, raw) for i, raw in enumerate(body["lenders"])]

        return cls(amount=amount, months=months, lenders=lenders,
                   schedule=bool(body.get("schedule", False)))


def _lender_from_json(index: int, raw: Dict) -> Lender:
    if not isinstance(raw, dict):
        raise BadRequest(f"lenders[{index}] must be an object")
    try:
        return Lender(
            name=str(raw.get("name", "")),
            rate=float(raw["rate"]),
            available=int(raw["available"]),
        )
    except (KeyError, TypeError, ValueError) as e:
        raise BadRequest(f"lenders[{index}] is invalid: {e}") from e
