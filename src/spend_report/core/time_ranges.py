from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from zoneinfo import ZoneInfo

UTC = timezone.utc
LA_TZ = ZoneInfo("America/Los_Angeles")

_INSTANT_RE = re.compile(
    r"(?P<y>\d{4})-(?P<mo>\d{2})-(?P<d>\d{2})"
    r"T(?P<h>\d{2}):(?P<mi>\d{2})(?::(?P<s>\d{2})(?:\.(?P<frac>\d{1,9}))?)?"
    r"(?P<tz>Z|[+-]\d{2}:\d{2})"
)


@dataclass(frozen=True)
class UtcWindow:
    """Open interval (start, end): both boundary instants are excluded."""

    start: datetime
    end: datetime

    def contains(self, ts: datetime) -> bool:
        return self.start < ts < self.end


def utc(y: int, m: int, d: int, hh: int = 0, mm: int = 0, ss: int = 0) -> datetime:
    return datetime(y, m, d, hh, mm, ss, tzinfo=UTC)


def _offset(tz: str) -> timezone:
    if tz == "Z":
        return UTC
    sign = -1 if tz[0] == "-" else 1
    hours, minutes = int(tz[1:3]), int(tz[4:6])
    if hours > 18 or minutes > 59:
        raise ValueError(f"invalid UTC offset: {tz}")
    return timezone(sign * timedelta(hours=hours, minutes=minutes))


def parse_instant(value: str) -> datetime:
    """
    Strict ISO-8601 instant, e.g. 2008-09-15T15:53:00Z or 2012-12-05T19:00:00-08:00.
    Returns an aware datetime in UTC. Raises ValueError on anything else.
    """
    m = _INSTANT_RE.fullmatch(value)
    if m is None:
        raise ValueError(f"not an ISO-8601 instant: {value!r}")

    frac = (m.group("frac") or "").ljust(6, "0")[:6]
    dt = datetime(
        int(m.group("y")),
        int(m.group("mo")),
        int(m.group("d")),
        int(m.group("h")),
        int(m.group("mi")),
        int(m.group("s") or 0),
        int(frac),
        tzinfo=_offset(m.group("tz")),
    )
    return dt.astimezone(UTC)


def to_local(ts: datetime, tz: ZoneInfo = LA_TZ) -> datetime:
    return ts.astimezone(tz)
