# loanquote/services/lender_source.py

import csv
import io
from typing import List

import requests

from ..domain.errors import FieldParseError, LenderSourceError, UpstreamError
from ..domain.lender import Lender, check_available, check_rate
from ..utils.http import get_text
from ..utils.logging import get_logger

log = get_logger(__name__)

# Column layout of a lender file:  Lender,Rate,Available
FIELDS_PER_ROW = 3
NAME_INDEX = 0
RATE_INDEX = 1
AVAILABLE_INDEX = 2


def _strict(raw: str, convert):
    """
    float()/int() with the looser Python extras turned off: no digit
    separators ("1_000") and no padding whitespace.
    """
    value = convert(raw)
    if "_" in raw or raw != raw.strip():
        raise ValueError(f"invalid syntax: {raw!r}")
    return value


def parse_csv(text: str) -> List[Lender]:
    """
    Parse lender rows out of CSV text. The first record holds the column
    headers and is skipped.

    Blank lines are ignored and do not count: line numbers in errors are
    1-based positions among the non-empty records, header included.
    `rate` must be a finite, non-negative float and `available` a
    non-negative integer; either field written with "_" separators or
    surrounding spaces is rejected.
    """
    lenders: List[Lender] = []
    reader = csv.reader(io.StringIO(text))
    line_no = 0

    for record in reader:
        if not record:
            continue
        line_no += 1
        if len(record) != FIELDS_PER_ROW:
            raise LenderSourceError(
                f"Line {line_no}: expected {FIELDS_PER_ROW} fields, got {len(record)}"
            )
        if line_no == 1:
            continue

        name = record[NAME_INDEX]

        try:
            rate = check_rate(_strict(record[RATE_INDEX], float))
        except ValueError as e:
            raise FieldParseError(line_no, "rate", e) from e

        try:
            available = check_available(_strict(record[AVAILABLE_INDEX], int))
        except ValueError as e:
            raise FieldParseError(line_no, "available", e) from e

        lenders.append(Lender(name=name, rate=rate, available=available))

    return lenders


def import_csv(path: str) -> List[Lender]:
    try:
        with open(path, newline="", encoding="utf-8") as fh:
            text = fh.read()
    except OSError as e:
        raise LenderSourceError(f"Unable to read lender file {path}: {e}") from e

    lenders = parse_csv(text)
    log.info(f"loaded {len(lenders)} lenders from {path}")
    return lenders


def fetch_csv(url: str) -> List[Lender]:
    try:
        text = get_text(url)
    except requests.RequestException as e:
        raise UpstreamError(f"Unable to fetch lenders from {url}: {e}") from e

    lenders = parse_csv(text)
    log.info(f"loaded {len(lenders)} lenders from {url}")
    return lenders


def load_lenders(source: str) -> List[Lender]:
    """
    Load a lender pool from a local CSV path or an http(s) URL serving
    the same CSV layout.
    """
    if not source:
        raise LenderSourceError("No lender source configured")
    if source.lower().startswith(("http://", "https://")):
        return fetch_csv(source)
    return import_csv(source)
