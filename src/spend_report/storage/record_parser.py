from __future__ import annotations

import math
import re
from typing import Sequence

from ..analytics.models import Transaction
from ..core.time_ranges import parse_instant
from ..errors import MalformedRecord

# id, institution, payment type, amount, currency, vendor, tags, date
FIELD_COUNT = 8

# plain decimal or exponent notation; no "_" separators, no nan/inf words
_DECIMAL_RE = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?\s*")


def parse_amount_cents(raw: str) -> int:
    """
    Decimal text -> cents, truncated toward zero after float multiplication.
    "1.005" gives 100, not 101: the float product is 100.49999999999999.
    """
    if _DECIMAL_RE.fullmatch(raw) is None:
        raise ValueError(f"not a decimal number: {raw!r}")
    value = float(raw)
    if not math.isfinite(value):
        raise ValueError(f"amount is not finite: {raw!r}")
    return int(value * 100)


def parse_tags(raw: str) -> tuple[str, ...]:
    return tuple(raw.split(" "))


def parse_record(fields: Sequence[str], row_index: int) -> Transaction:
    if len(fields) != FIELD_COUNT:
        raise MalformedRecord(row_index, fields, f"expected {FIELD_COUNT} fields, got {len(fields)}")

    tx_id, institution, payment_type, amount, currency, vendor, tags, date = fields

    try:
        amount_cents = parse_amount_cents(amount)
    except ValueError as e:
        raise MalformedRecord(row_index, fields, f"bad amount {amount!r}") from e

    try:
        timestamp = parse_instant(date)
    except ValueError as e:
        raise MalformedRecord(row_index, fields, f"bad date {date!r}") from e

    return Transaction(
        id=tx_id,
        institution=institution,
        payment_type=payment_type,
        amount_cents=amount_cents,
        currency=currency,
        vendor=vendor,
        tags=parse_tags(tags),
        timestamp=timestamp,
    )
