from datetime import datetime, timedelta, timezone

import pytest

from regokit.gotime import GoTimeParseError, format, parse

ANSIC = "Mon Jan _2 15:04:05 2006"
UNIX_DATE = "Mon Jan _2 15:04:05 MST 2006"
RUBY_DATE = "Mon Jan 02 15:04:05 -0700 2006"
RFC822 = "02 Jan 06 15:04 MST"
RFC850 = "Monday, 02-Jan-06 15:04:05 MST"
RFC1123 = "Mon, 02 Jan 2006 15:04:05 MST"
RFC1123Z = "Mon, 02 Jan 2006 15:04:05 -0700"
RFC3339 = "2006-01-02T15:04:05Z07:00"
KITCHEN = "3:04PM"
STAMP = "Jan _2 15:04:05"
STAMP_MILLI = "Jan _2 15:04:05.000"
STAMP_MICRO = "Jan _2 15:04:05.000000"
STAMP_NANO = "Jan _2 15:04:05.000000000"
DATE_TIME = "2006-01-02 15:04:05"
DATE_ONLY = "2006-01-02"
TIME_ONLY = "15:04:05"

# (layout, value, has_tz, has_wd, year_sign, frac_digits)
PARSE_CASES = [
    (ANSIC, "Thu Feb  4 21:00:57 2010", False, True, 1, 0),
    (UNIX_DATE, "Thu Feb  4 21:00:57 PST 2010", True, True, 1, 0),
    (RUBY_DATE, "Thu Feb 04 21:00:57 -0800 2010", True, True, 1, 0),
    (RFC850, "Thursday, 04-Feb-10 21:00:57 PST", True, True, 1, 0),
    (RFC1123, "Thu, 04 Feb 2010 21:00:57 PST", True, True, 1, 0),
    (RFC1123Z, "Thu, 04 Feb 2010 21:00:57 -0800", True, True, 1, 0),
    (RFC3339, "2010-02-04T21:00:57-08:00", True, False, 1, 0),
    (ANSIC, "Thu Feb  4 21:00:57.0 2010", False, True, 1, 1),
    (UNIX_DATE, "Thu Feb  4 21:00:57.01 PST 2010", True, True, 1, 2),
    (RUBY_DATE, "Thu Feb 04 21:00:57.012 -0800 2010", True, True, 1, 3),
    (RFC850, "Thursday, 04-Feb-10 21:00:57.0123 PST", True, True, 1, 4),
    (RFC1123, "Thu, 04 Feb 2010 21:00:57.01234 PST", True, True, 1, 5),
    (RFC1123Z, "Thu, 04 Feb 2010 21:00:57.01234 -0800", True, True, 1, 5),
    (RFC3339, "2010-02-04T21:00:57.012345678-08:00", True, False, 1, 9),
    ("2006-01-02 15:04:05", "2010-02-04 21:00:57.0", False, False, 1, 0),
    (ANSIC, "Thu Feb 4 21:00:57 2010", False, True, 1, 0),
    (ANSIC, "Thu      Feb     4     21:00:57     2010", False, True, 1, 0),
    (ANSIC, "THU FEB 4 21:00:57 2010", False, True, 1, 0),
    (ANSIC, "thu feb 4 21:00:57 2010", False, True, 1, 0),
    ("Mon Jan _2 15:04:05.000 2006", "Thu Feb  4 21:00:57.012 2010", False, True, 1, 3),
    ("Mon Jan _2 15:04:05.000000 2006", "Thu Feb  4 21:00:57.012345 2010", False, True, 1, 6),
    ("Mon Jan _2 15:04:05.000000000 2006", "Thu Feb  4 21:00:57.012345678 2010", False, True, 1, 9),
    ("Mon Jan _2 15:04:05,000 2006", "Thu Feb  4 21:00:57.012 2010", False, True, 1, 3),
    ("Mon Jan _2 15:04:05,000000 2006", "Thu Feb  4 21:00:57.012345 2010", False, True, 1, 6),
    ("Mon Jan _2 15:04:05,000000000 2006", "Thu Feb  4 21:00:57.012345678 2010", False, True, 1, 9),
    ("2006.01.02.15.04.05.0", "2010.02.04.21.00.57.0", False, False, 1, 1),
    ("2006.01.02.15.04.05.00", "2010.02.04.21.00.57.01", False, False, 1, 2),
    ("2006-01-02 15:04:05.9999 -0700 MST", "2010-02-04 21:00:57 -0800 PST", True, False, 1, 0),
    ("2006-01-02 15:04:05.999999999 -0700 MST", "2010-02-04 21:00:57 -0800 PST", True, False, 1, 0),
    ("2006-01-02 15:04:05.9999 -0700 MST", "2010-02-04 21:00:57.0123 -0800 PST", True, False, 1, 4),
    ("2006-01-02 15:04:05.999999999 -0700 MST", "2010-02-04 21:00:57.0123 -0800 PST", True, False, 1, 4),
    ("2006-01-02 15:04:05.9999 -0700 MST", "2010-02-04 21:00:57.012345678 -0800 PST", True, False, 1, 9),
    ("2006-01-02 15:04:05.999999999 -0700 MST", "2010-02-04 21:00:57.012345678 -0800 PST", True, False, 1, 9),
    ("2006-01-02 15:04:05,9999 -0700 MST", "2010-02-04 21:00:57 -0800 PST", True, False, 1, 0),
    ("2006-01-02 15:04:05,999999999 -0700 MST", "2010-02-04 21:00:57 -0800 PST", True, False, 1, 0),
    ("2006-01-02 15:04:05,9999 -0700 MST", "2010-02-04 21:00:57.0123 -0800 PST", True, False, 1, 4),
    ("2006-01-02 15:04:05,999999999 -0700 MST", "2010-02-04 21:00:57.0123 -0800 PST", True, False, 1, 4),
    ("2006-01-02 15:04:05,9999 -0700 MST", "2010-02-04 21:00:57.012345678 -0800 PST", True, False, 1, 9),
    ("2006-01-02 15:04:05,999999999 -0700 MST", "2010-02-04 21:00:57.012345678 -0800 PST", True, False, 1, 9),
    (STAMP_NANO, "Feb  4 21:00:57.012345678", False, False, -1, 9),
    ("Jan _2 15:04:05.999", "Feb  4 21:00:57.012300000", False, False, -1, 4),
    ("Jan _2 15:04:05.999", "Feb  4 21:00:57.012345678", False, False, -1, 9),
    ("Jan _2 15:04:05.999999999", "Feb  4 21:00:57.0123", False, False, -1, 4),
    ("Jan _2 15:04:05.999999999", "Feb  4 21:00:57.012345678", False, False, -1, 9),
    ("2006-01-02 002 15:04:05", "2010-02-04 035 21:00:57", False, False, 1, 0),
    ("2006-01 002 15:04:05", "2010-02 035 21:00:57", False, False, 1, 0),
    ("2006-002 15:04:05", "2010-035 21:00:57", False, False, 1, 0),
    ("200600201 15:04:05", "201003502 21:00:57", False, False, 1, 0),
]


@pytest.mark.parametrize("layout,value,has_tz,has_wd,year_sign,frac", PARSE_CASES)
def test_parses_datetimes(layout, value, has_tz, has_wd, year_sign, frac):
    moment, nanos = parse(layout, value)
    if year_sign >= 0:
        assert year_sign * moment.year == 2010
    assert moment.month == 2
    assert moment.day == 4
    assert moment.hour == 21
    assert moment.minute == 0
    assert moment.second == 57
    expected = int("012345678"[:frac] + "000000000"[: 9 - frac])
    assert nanos == expected
    assert moment.microsecond == expected // 1000
    if has_tz:
        assert moment.utcoffset().total_seconds() == -28800
    if has_wd:
        assert moment.weekday() == 3


def test_parses_date_only():
    moment, nanos = parse("2006-01-02", "2020-02-02")
    assert (moment.year, moment.month, moment.day) == (2020, 2, 2)
    assert (moment.hour, moment.minute, moment.second) == (0, 0, 0)
    assert nanos == 0
    assert moment.utcoffset() == timedelta(0)


def test_parse_kitchen_pm():
    moment, _ = parse("2006-01-02 3:04PM", "2020-02-02 9:15PM")
    assert (moment.hour, moment.minute) == (21, 15)


@pytest.mark.parametrize(
    "layout,value",
    [
        ("2006-01-02", "2020-13-02"),
        ("2006-01-02", "2020/01/02"),
        ("2006-01-02", "2020-01-02 extra"),
        (ANSIC, "Fri Feb  4 21:00:57 2010"),
        ("2006-01-02 002", "2010-02-04 036"),
    ],
)
def test_parse_errors(layout, value):
    with pytest.raises(GoTimeParseError):
        parse(layout, value)


PST = timezone(timedelta(hours=-8), "PST")
TIME = (datetime(2009, 2, 4, 21, 0, 57, 12345, tzinfo=PST), 12345600)

FORMAT_CASES = [
    (ANSIC, "Wed Feb  4 21:00:57 2009"),
    (UNIX_DATE, "Wed Feb  4 21:00:57 PST 2009"),
    (RUBY_DATE, "Wed Feb 04 21:00:57 -0800 2009"),
    (RFC822, "04 Feb 09 21:00 PST"),
    (RFC850, "Wednesday, 04-Feb-09 21:00:57 PST"),
    (RFC1123, "Wed, 04 Feb 2009 21:00:57 PST"),
    (RFC1123Z, "Wed, 04 Feb 2009 21:00:57 -0800"),
    (RFC3339, "2009-02-04T21:00:57-08:00"),
    (KITCHEN, "9:00PM"),
    ("3pm", "9pm"),
    ("3PM", "9PM"),
    ("06 01 02", "09 02 04"),
    (STAMP, "Feb  4 21:00:57"),
    (STAMP_MILLI, "Feb  4 21:00:57.012"),
    (STAMP_MICRO, "Feb  4 21:00:57.012345"),
    (STAMP_NANO, "Feb  4 21:00:57.012345600"),
    (DATE_TIME, "2009-02-04 21:00:57"),
    (DATE_ONLY, "2009-02-04"),
    (TIME_ONLY, "21:00:57"),
    ("Jan  2 002 __2 2", "Feb  4 035  35 4"),
    ("2 02 _2 __2", "4 04  4  35"),
    ("Mon Monday", "Wed Wednesday"),
]


@pytest.mark.parametrize("layout,expected", FORMAT_CASES)
def test_formats_datetimes(layout, expected):
    assert format(TIME, layout) == expected


def test_format_plain_datetime_uses_microseconds():
    moment = datetime(2009, 2, 4, 21, 0, 57, 12345, tzinfo=PST)
    assert format(moment, STAMP_NANO) == "Feb  4 21:00:57.012345000"


def test_format_utc_z_offset():
    moment = datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    assert format(moment, RFC3339) == "2020-01-02T03:04:05Z"


def test_round_trip_rfc3339():
    text = "2010-02-04T21:00:57-08:00"
    assert format(parse(RFC3339, text), RFC3339) == text