from spend_report.analytics.anomalies import SuspiciousVendor
from spend_report.analytics.compute import ReportFacts
from spend_report.report.templates import render_report


def _facts(**kwargs) -> ReportFacts:
    return ReportFacts(
        wells_fargo_debit_cents=kwargs.get("wf", 607),
        vendors=kwargs.get("vendors", ["STARBUCKS, INC.", "RICKHOUSE"]),
        perks_cents=kwargs.get("perks", 1234),
        london_party_cents=kwargs.get("london", -50),
        bar_nights=kwargs.get("bars", 3),
        suspicious=kwargs.get("suspicious", []),
    )


def test_fixed_lines_in_order():
    assert render_report(_facts()) == [
        "Spent on Wells Fargo Debit Card = 607",
        "Unique vendors = 2",
        "Unique vendors = ['STARBUCKS, INC.', 'RICKHOUSE']",
        "Amount on food or personal: 1234",
        "London party = -50",
        "Days at two distinct bars 3",
    ]


def test_one_line_per_suspicious_vendor():
    suspicious = [
        SuspiciousVendor(vendor="A", limit_cents=10, transaction_ids=("1", "2")),
        SuspiciousVendor(vendor="B", limit_cents=20, transaction_ids=("9",)),
    ]
    lines = render_report(_facts(suspicious=suspicious))

    assert lines[6:] == [
        "A had 2 suspicious transactions",
        "B had 1 suspicious transactions",
    ]


def test_with_ids_adds_id_lines():
    suspicious = [SuspiciousVendor(vendor="A", limit_cents=10, transaction_ids=("1", "2"))]
    lines = render_report(_facts(suspicious=suspicious), with_ids=True)

    assert lines[6:] == [
        "A had 2 suspicious transactions",
        "A suspicious transaction ids: 1, 2",
    ]
