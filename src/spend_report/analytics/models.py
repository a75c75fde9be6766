from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Transaction:
    id: str
    institution: str
    payment_type: str
    amount_cents: int  # minor units; negative for refunds
    currency: str
    vendor: str
    tags: tuple[str, ...]
    timestamp: datetime  # aware, UTC
