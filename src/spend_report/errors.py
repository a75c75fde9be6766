from __future__ import annotations

from os import PathLike
from pathlib import Path
from typing import Sequence


class SpendReportError(Exception):
    """Base class for failures that abort the whole report run."""


class InputFileNotFound(SpendReportError):
    def __init__(self, path: str | PathLike[str]):
        self.path = Path(path)
        super().__init__(f"input file not found or unreadable: {self.path}")


class MalformedRecord(SpendReportError):
    """A CSV data row that could not be turned into a Transaction.

    row_index is the 1-based data row number (the header row is row 0).
    """

    def __init__(self, row_index: int, raw_fields: Sequence[str], reason: str):
        self.row_index = row_index
        self.raw_fields = list(raw_fields)
        self.reason = reason
        super().__init__(f"malformed record at row {row_index}: {reason}; fields={self.raw_fields!r}")


class UnreadableInput(SpendReportError):
    """The input file opened but is not valid UTF-8 CSV."""

    def __init__(self, path: str | PathLike[str], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"cannot read {self.path}: {reason}")
