from __future__ import annotations

from typing import Iterable

from .models import Transaction


def distinct_vendors(rows: Iterable[Transaction]) -> list[str]:
    """Distinct vendor names in order of first appearance."""
    return list(dict.fromkeys(r.vendor for r in rows))


def unique_vendor_count(rows: Iterable[Transaction]) -> int:
    return len(distinct_vendors(rows))
