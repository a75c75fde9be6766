from __future__ import annotations

from datetime import datetime
from typing import Iterable

from ..core.time_ranges import UtcWindow, utc
from .models import Transaction

WELLS_FARGO = "Wells Fargo"
DEBIT_CARD = "Debit Card"

PERK_TAGS = ("food", "personal")

# London weekend, Jan 23-25 2012 (local time equals UTC then)
LONDON_PARTY = UtcWindow(start=utc(2012, 1, 23), end=utc(2012, 1, 26))


def total_for_account(
    rows: Iterable[Transaction],
    institution: str = WELLS_FARGO,
    payment_type: str = DEBIT_CARD,
) -> int:
    return sum(
        r.amount_cents for r in rows if r.institution == institution and r.payment_type == payment_type
    )


def tagged_spend(rows: Iterable[Transaction], tags: Iterable[str] = PERK_TAGS) -> int:
    wanted = tuple(tags)
    return sum(r.amount_cents for r in rows if any(t in r.tags for t in wanted))


def spend_between(rows: Iterable[Transaction], start: datetime, end: datetime) -> int:
    window = UtcWindow(start=start, end=end)
    return sum(r.amount_cents for r in rows if window.contains(r.timestamp))
