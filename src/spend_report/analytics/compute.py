from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .anomalies import SuspiciousVendor, suspicious_spends
from .bars import bar_nights
from .models import Transaction
from .totals import LONDON_PARTY, spend_between, tagged_spend, total_for_account
from .vendors import distinct_vendors


@dataclass(frozen=True)
class ReportFacts:
    wells_fargo_debit_cents: int
    vendors: list[str]
    perks_cents: int
    london_party_cents: int
    bar_nights: int
    suspicious: list[SuspiciousVendor]

    @property
    def unique_vendors(self) -> int:
        return len(self.vendors)


def compute_facts(rows: Iterable[Transaction]) -> ReportFacts:
    rows = list(rows)
    return ReportFacts(
        wells_fargo_debit_cents=total_for_account(rows),
        vendors=distinct_vendors(rows),
        perks_cents=tagged_spend(rows),
        london_party_cents=spend_between(rows, LONDON_PARTY.start, LONDON_PARTY.end),
        bar_nights=bar_nights(rows),
        suspicious=suspicious_spends(rows),
    )
