from __future__ import annotations

import csv
import logging
from dataclasses import dataclass
from os import PathLike
from pathlib import Path
from typing import Iterable, Iterator

from ..analytics.models import Transaction
from ..errors import InputFileNotFound, UnreadableInput
from .record_parser import parse_record

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TransactionStore:
    """
    Every transaction of one run, in file order. Built once, never mutated.
    """

    rows: tuple[Transaction, ...] = ()

    @classmethod
    def from_rows(cls, rows: Iterable[Transaction]) -> "TransactionStore":
        return cls(rows=tuple(rows))

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Transaction]:
        return iter(self.rows)

    def __getitem__(self, idx: int) -> Transaction:
        return self.rows[idx]


def parse_rows(records: Iterable[list[str]]) -> TransactionStore:
    """
    First record is the header and is discarded; the rest must all parse.
    Blank lines (empty records) are skipped but still count toward row_index.
    """
    it = iter(records)
    next(it, None)
    return TransactionStore.from_rows(
        parse_record(fields, row_index)
        for row_index, fields in enumerate(it, start=1)
        if fields
    )


def load_transactions(path: str | PathLike[str]) -> TransactionStore:
    p = Path(path)
    try:
        f = p.open(encoding="utf-8", newline="")
    except OSError as e:
        raise InputFileNotFound(p) from e

    with f:
        try:
            store = parse_rows(csv.reader(f))
        except UnicodeDecodeError as e:
            raise UnreadableInput(p, f"not UTF-8 ({e.reason})") from e
        except csv.Error as e:
            raise UnreadableInput(p, f"CSV error: {e}") from e

    logger.debug("Loaded %d transactions from %s", len(store), p)
    return store
