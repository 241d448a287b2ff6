# loanquote/api/routes.py
from flask import Blueprint, jsonify, request
from ..utils.config import settings
from ..utils.logging import get_logger
from ..services.lender_source import load_lenders
from ..services.quote_engine import QuotePolicy, compute_quote, repayment_schedule
from ..domain.errors import BadRequest
from .schemas import QuoteRequest

bp = Blueprint('api', __name__)
log = get_logger(__name__)


@bp.get('/health')
def health():
    return jsonify({"status": "ok"})


@bp.post('/quote')
def quote():
    body = request.get_json(force=True, silent=True)
    if not isinstance(body, dict):
        raise BadRequest("expected a JSON object body")
    req = QuoteRequest.from_json(body)

    policy = QuotePolicy.from_settings(settings)
    months = req.months if req.months is not None else policy.default_term_months

    lenders = req.lenders
    if lenders is None:
        if not settings.LENDERS_SOURCE:
            raise BadRequest("lenders is required (no LENDERS_SOURCE configured)")
        lenders = load_lenders(settings.LENDERS_SOURCE)

    log.info(f"quote request amount={req.amount} months={months} lenders={len(lenders)}")
    q = compute_quote(req.amount, months, lenders, policy)

    out = q.to_dict()
    if req.schedule:
        out["schedule"] = repayment_schedule(q)
    return jsonify(out)
