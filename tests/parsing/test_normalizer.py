from datetime import date, time, timedelta

import pytest

from src.attendance_import.attendance_import.core.enums import StatusTag
from src.attendance_import.attendance_import.parsing.normalizer import (
    looks_like_status,
    normalize_date,
    normalize_status,
    normalize_time,
)


@pytest.mark.parametrize(
    "serial, text",
    [
        (46023, "01-Jan-2026"),
        (45351, "29-Feb-2024"),
        (44196, "31-Dec-2020"),
        (46081, "28-Feb-2026"),
    ],
)
def test_serial_date_matches_text_date(serial, text):
    assert normalize_date(serial) == normalize_date(text)
    assert normalize_date(str(serial)) == normalize_date(text)


def test_serial_date_origin():
    assert normalize_date("46023") == date(2026, 1, 1)
    # Fractional part is time of day and never moves the date.
    assert normalize_date(46023.75) == date(2026, 1, 1)


def test_serial_range_is_consecutive_days():
    first = normalize_date(45000)
    assert normalize_date(45001) == first + timedelta(days=1)


@pytest.mark.parametrize(
    "cell",
    ["", None, "7", "2026", "39999", "60000", "Present", "Total Duration", "abc-def", "20261399", "0.375"],
)
def test_normalize_date_rejects_non_dates(cell):
    assert normalize_date(cell) is None


@pytest.mark.parametrize(
    "cell, expected",
    [
        ("01-Jan-2026", date(2026, 1, 1)),
        ("2026-01-02", date(2026, 1, 2)),
        ("2026-01-03 00:00:00", date(2026, 1, 3)),
        ("04/01/2026", date(2026, 1, 4)),
        ("05 Jan 2026", date(2026, 1, 5)),
        ("Jan 6, 2026", date(2026, 1, 6)),
        ("20260107", date(2026, 1, 7)),
        (20260108, date(2026, 1, 8)),
        (20260109.0, date(2026, 1, 9)),
    ],
)
def test_normalize_date_text_formats(cell, expected):
    assert normalize_date(cell) == expected


def test_normalize_time_hhmm():
    assert normalize_time("09:05") == time(9, 5)
    assert normalize_time("9:05") == time(9, 5)
    assert normalize_time("18:10:59") == time(18, 10)


def test_normalize_time_no_punch():
    assert normalize_time("00:00") is None
    assert normalize_time("") is None
    assert normalize_time(None) is None
    assert normalize_time(0) is None


def test_normalize_time_fraction_of_day():
    assert normalize_time(0.5) == time(12, 0)
    assert normalize_time("0.375") == time(9, 0)
    # 09:05 is 545 minutes; a tiny float error must round to the same minute.
    assert normalize_time(545 / 1440 - 1e-9) == time(9, 5)


def test_normalize_time_rejects_garbage():
    assert normalize_time("25:00") is None
    assert normalize_time("1.5") is None
    assert normalize_time("late") is None


def test_normalize_time_fraction_near_midnight_is_clamped():
    assert normalize_time(0.99999) == time(23, 59)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Present", StatusTag.PRESENT),
        ("Present (No OutPunch)", StatusTag.PRESENT),
        ("½Present", StatusTag.HALF_DAY),
        ("1/2Present", StatusTag.HALF_DAY),
        ("HalfPresent", StatusTag.HALF_DAY),
        ("Half Present", StatusTag.HALF_DAY),
        ("WeeklyOff", StatusTag.WEEKLY_OFF),
        ("Weekly Off", StatusTag.WEEKLY_OFF),
        ("WeeklyOff Present", StatusTag.PRESENT),
        ("WeeklyOff HalfPresent", StatusTag.HALF_DAY),
        ("WeeklyOff ½Present", StatusTag.HALF_DAY),
        ("Absent", StatusTag.ABSENT),
        ("  LATE ", StatusTag.LATE),
        ("Holiday", StatusTag.ABSENT),
        ("", StatusTag.ABSENT),
    ],
)
def test_normalize_status(raw, expected):
    assert normalize_status(raw) == expected


def test_looks_like_status():
    assert looks_like_status("WeeklyOff")
    assert looks_like_status("½Present")
    assert not looks_like_status("General")
    assert not looks_like_status("09:05")
    assert not looks_like_status("")
