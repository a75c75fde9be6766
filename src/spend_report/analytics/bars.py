from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Iterable
from zoneinfo import ZoneInfo

from ..core.time_ranges import LA_TZ, to_local
from .models import Transaction

BARS = frozenset({"RICKHOUSE", "P.C.H.", "BLOODHOUND", "IRISH BANK"})

DECEMBER = 12
EVENING_FROM_HOUR = 18


def bar_visits(
    rows: Iterable[Transaction],
    bars: Iterable[str] = BARS,
    tz: ZoneInfo = LA_TZ,
    month: int = DECEMBER,
    from_hour: int = EVENING_FROM_HOUR,
) -> dict[date, set[str]]:
    """
    Local date -> bars visited that evening.

    "Evening" is local hour >= from_hour on the same local day; purchases after
    midnight fall on the next date with hour < from_hour and are dropped.
    """
    bar_set = frozenset(bars)
    by_day: dict[date, set[str]] = defaultdict(set)

    for r in rows:
        if r.vendor not in bar_set:
            continue
        local = to_local(r.timestamp, tz)
        if local.month != month or local.hour < from_hour:
            continue
        by_day[local.date()].add(r.vendor)

    return dict(by_day)


def bar_nights(
    rows: Iterable[Transaction],
    bars: Iterable[str] = BARS,
    tz: ZoneInfo = LA_TZ,
    month: int = DECEMBER,
    from_hour: int = EVENING_FROM_HOUR,
    min_bars: int = 2,
) -> int:
    visits = bar_visits(rows, bars=bars, tz=tz, month=month, from_hour=from_hour)
    return sum(1 for vendors in visits.values() if len(vendors) >= min_bars)
