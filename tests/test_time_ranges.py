from datetime import date, datetime, timezone

import pytest

from spend_report.core.time_ranges import LA_TZ, UtcWindow, parse_instant, to_local, utc


def test_parse_zulu_instant():
    assert parse_instant("2008-09-15T15:53:00Z") == datetime(2008, 9, 15, 15, 53, tzinfo=timezone.utc)


def test_seconds_and_fraction_are_optional():
    assert parse_instant("2008-09-15T15:53Z") == utc(2008, 9, 15, 15, 53)
    dt = parse_instant("2008-09-15T15:53:00.123456789Z")
    assert dt.microsecond == 123456


def test_parse_result_is_utc():
    dt = parse_instant("2012-12-05T19:00:00-08:00")
    assert dt.utcoffset().total_seconds() == 0
    assert dt == utc(2012, 12, 6, 3)


@pytest.mark.parametrize(
    "value",
    [
        "2008-09-15T15:53:00+25:00",
        "2008-02-30T00:00:00Z",
        " 2008-09-15T15:53:00Z",
        "2008-09-15T15:53:00Z\n",
    ],
)
def test_rejects_invalid(value):
    with pytest.raises(ValueError):
        parse_instant(value)


def test_window_excludes_both_bounds():
    w = UtcWindow(start=utc(2012, 1, 23), end=utc(2012, 1, 26))
    assert not w.contains(utc(2012, 1, 23))
    assert w.contains(utc(2012, 1, 23, 0, 0, 1))
    assert w.contains(utc(2012, 1, 25, 23, 59, 59))
    assert not w.contains(utc(2012, 1, 26))


def test_local_time_follows_dst():
    # PDT (UTC-7) in July, PST (UTC-8) in December
    assert to_local(utc(2012, 7, 1, 1, 0)).hour == 18
    assert to_local(utc(2012, 12, 1, 2, 0)).hour == 18
    assert to_local(utc(2012, 12, 6, 3, 0)).date() == date(2012, 12, 5)


def test_dst_transition_day():
    # 2012-11-04 09:30 UTC is 01:30 PST, after clocks went back at 09:00 UTC
    assert to_local(utc(2012, 11, 4, 8, 30), LA_TZ).hour == 1
    assert to_local(utc(2012, 11, 4, 9, 30), LA_TZ).hour == 1
    assert to_local(utc(2012, 11, 4, 8, 30), LA_TZ).utcoffset() != to_local(
        utc(2012, 11, 4, 9, 30), LA_TZ
    ).utcoffset()
