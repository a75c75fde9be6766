import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .analytics.compute import compute_facts
from .config import load_settings
from .errors import SpendReportError
from .logging_setup import setup_logging
from .report.templates import render_report
from .storage.tx_store import load_transactions


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="spend-report")
    parser.add_argument("--version", action="store_true", help="Print version and exit")
    parser.add_argument(
        "--csv",
        type=Path,
        default=None,
        help="Transactions CSV to analyse. Default: SPEND_REPORT_CSV or ./csv_challenge.csv",
    )
    parser.add_argument(
        "--with-ids",
        action="store_true",
        help="Also list the ids of suspicious transactions per vendor",
    )
    parser.add_argument("--log-level", type=str, default=None, help="Overrides LOG_LEVEL")

    args = parser.parse_args(argv)

    if args.version:
        print(__version__)
        return 0

    settings = load_settings()
    setup_logging(args.log_level or settings.log_level)

    logger = logging.getLogger(__name__)

    csv_path = args.csv or settings.csv_path

    # parse everything before printing anything
    try:
        store = load_transactions(csv_path)
    except SpendReportError as e:
        logger.debug("Report aborted", exc_info=True)
        print(f"error: {e}", file=sys.stderr)
        return 1

    logger.info("Running report over %d transactions from %s", len(store), csv_path)

    facts = compute_facts(store)
    for line in render_report(facts, with_ids=args.with_ids):
        print(line)
    return 0
