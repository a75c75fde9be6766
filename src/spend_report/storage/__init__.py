from .record_parser import FIELD_COUNT, parse_record
from .tx_store import TransactionStore, load_transactions

__all__ = [
    "FIELD_COUNT",
    "parse_record",
    "TransactionStore",
    "load_transactions",
]
