from __future__ import annotations

from typing import Iterable

from ..analytics.anomalies import SuspiciousVendor
from ..analytics.compute import ReportFacts


def labeled(label: str, value: object, *, sep: str = " = ") -> str:
    return f"{label}{sep}{value}"


def suspicious_lines(items: Iterable[SuspiciousVendor], *, with_ids: bool = False) -> list[str]:
    out: list[str] = []
    for x in items:
        out.append(f"{x.vendor} had {x.count} suspicious transactions")
        if with_ids:
            out.append(f"{x.vendor} suspicious transaction ids: {', '.join(x.transaction_ids)}")
    return out


def render_report(facts: ReportFacts, *, with_ids: bool = False) -> list[str]:
    lines = [
        labeled("Spent on Wells Fargo Debit Card", facts.wells_fargo_debit_cents),
        labeled("Unique vendors", facts.unique_vendors),
        labeled("Unique vendors", facts.vendors),
        labeled("Amount on food or personal", facts.perks_cents, sep=": "),
        labeled("London party", facts.london_party_cents),
        labeled("Days at two distinct bars", facts.bar_nights, sep=" "),
    ]
    lines.extend(suspicious_lines(facts.suspicious, with_ids=with_ids))
    return lines
