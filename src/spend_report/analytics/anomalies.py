from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

from .models import Transaction

SUSPICIOUS_STDEV_FACTOR = 1.75


@dataclass
class VendorStats:
    count: int = 0
    total: int = 0
    amounts: list[int] = field(default_factory=list)

    def add(self, amount_cents: int) -> None:
        self.count += 1
        self.total += amount_cents
        self.amounts.append(amount_cents)


@dataclass(frozen=True)
class SuspiciousVendor:
    vendor: str
    limit_cents: int
    transaction_ids: tuple[str, ...]

    @property
    def count(self) -> int:
        return len(self.transaction_ids)


def _div_trunc(a: int, b: int) -> int:
    # integer division rounding toward zero, not toward -inf
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def vendor_stats(rows: Iterable[Transaction]) -> dict[str, VendorStats]:
    stats: dict[str, VendorStats] = {}
    for r in rows:
        s = stats.get(r.vendor)
        if s is None:
            s = VendorStats()
            stats[r.vendor] = s
        s.add(r.amount_cents)
    return stats


def spend_limit(stats: VendorStats, factor: float = SUSPICIOUS_STDEV_FACTOR) -> int | None:
    """
    mean + factor * sample stdev, all in integer cents:

      mean     = trunc(total / count)
      variance = sum((a - mean)^2) // (count - 1)
      limit    = trunc(mean + factor * sqrt(variance))

    None for fewer than two transactions (sample stdev is undefined).
    """
    if stats.count < 2:
        return None
    mean = _div_trunc(stats.total, stats.count)
    sq_devs = sum((a - mean) * (a - mean) for a in stats.amounts)
    stdev = math.sqrt(sq_devs // (stats.count - 1))
    return int(mean + factor * stdev)


def vendor_limits(
    rows: Iterable[Transaction], factor: float = SUSPICIOUS_STDEV_FACTOR
) -> dict[str, int | None]:
    return {vendor: spend_limit(s, factor) for vendor, s in vendor_stats(rows).items()}


def suspicious_spends(
    rows: Iterable[Transaction], factor: float = SUSPICIOUS_STDEV_FACTOR
) -> list[SuspiciousVendor]:
    rows = list(rows)
    limits = vendor_limits(rows, factor)

    flagged: dict[str, list[str]] = {}
    for r in rows:
        limit = limits[r.vendor]
        if limit is None or r.amount_cents <= limit:
            continue
        flagged.setdefault(r.vendor, []).append(r.id)

    # limits keeps vendors in first-seen order
    return [
        SuspiciousVendor(vendor=vendor, limit_cents=limit, transaction_ids=tuple(flagged[vendor]))
        for vendor, limit in limits.items()
        if limit is not None and vendor in flagged
    ]
