"""Calendar difference between two points in time."""

from __future__ import annotations

import calendar
from datetime import datetime


def _days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def diff_between_datetimes(
    datetime1: datetime, datetime2: datetime
) -> tuple[int, int, int, int, int, int]:
    """Return (years, months, days, hours, minutes, seconds) between two datetimes.

    Both datetimes must carry a UTC offset. The second is moved into the
    time zone of the first before the fields are compared, and the result
    does not depend on which of the two is the earlier one.
    """
    if datetime1.utcoffset() is None or datetime2.utcoffset() is None:
        raise ValueError("datetimes must carry a UTC offset")

    datetime2 = datetime2.astimezone(datetime1.tzinfo)
    if datetime1 > datetime2:
        datetime1, datetime2 = datetime2, datetime1

    year = datetime2.year - datetime1.year
    month = datetime2.month - datetime1.month
    day = datetime2.day - datetime1.day
    hour = datetime2.hour - datetime1.hour
    minute = datetime2.minute - datetime1.minute
    second = datetime2.second - datetime1.second

    if second < 0:
        second += 60
        minute -= 1
    if minute < 0:
        minute += 60
        hour -= 1
    if hour < 0:
        hour += 24
        day -= 1
    if day < 0:
        day += _days_in_month(datetime1.year, datetime1.month)
        month -= 1
    if month < 0:
        month += 12
        year -= 1

    return year, month, day, hour, minute, second