"""Parsing and formatting of times with reference-time layouts.

Layouts are written in terms of the reference time
``Mon Jan 2 15:04:05 MST 2006`` (see :mod:`regokit.gotime_layout`).

Python datetimes only hold microseconds, so :func:`parse` returns the
datetime together with the full nanosecond-of-second, and :func:`format`
accepts either a plain datetime or such a ``(datetime, nanosecond)`` pair.
"""

from __future__ import annotations

import re
from datetime import date as _date
from datetime import datetime, time, timedelta, timezone

from regokit.gotime_layout import LayoutMode, tokenize

_MONTHS = [
    "January", "February", "March", "April", "May", "June", "July",
    "August", "September", "October", "November", "December",
]
_WEEKDAYS = [
    "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday",
]

# Parse widths and format widths of numeric fields.
_WIDTHS = {
    "year": 4,
    "year_mod_100": 2,
    "month": 2,
    "day": 2,
    "ordinal": 3,
    "hour": 2,
    "hour12": 2,
    "minute": 2,
    "second": 2,
}

_LEGACY_ZONES = {
    "gmt": 0,
    "ut": 0,
    "edt": -4 * 3600,
    "est": -5 * 3600,
    "cdt": -5 * 3600,
    "cst": -6 * 3600,
    "mdt": -6 * 3600,
    "mst": -7 * 3600,
    "pdt": -7 * 3600,
    "pst": -8 * 3600,
}

_OFFSET = re.compile(r"([+-])(\d\d)(?::?(\d\d))?(?::?(\d\d))?")
_ALPHA = re.compile(r"[A-Za-z]*")
_NON_SPACE = re.compile(r"\S*")

# Years are absent from some layouts; Python has no year 0, so the
# earliest representable year stands in for it.
_MISSING_YEAR = 1


class GoTimeParseError(ValueError):
    """Raised when a value does not match its layout."""


class _Fields:
    def __init__(self) -> None:
        self.values: dict[str, int] = {}

    def set(self, name: str, value: int) -> None:
        old = self.values.get(name)
        if old is not None and old != value:
            raise GoTimeParseError(f"conflicting values for {name}")
        self.values[name] = value

    def get(self, name: str, default: int | None = None) -> int | None:
        return self.values.get(name, default)

    def __contains__(self, name: str) -> bool:
        return name in self.values


def _parse_name(text: str, names: list[str]) -> tuple[int, str]:
    lowered = text.lower()
    for idx, name in enumerate(names):
        if lowered.startswith(name[:3].lower()):
            tail = name[3:].lower()
            if tail and lowered[3:].startswith(tail):
                return idx, text[len(name):]
            return idx, text[3:]
    raise GoTimeParseError(f"invalid name at {text!r}")


def _parse_number(text: str, width: int) -> tuple[int, str]:
    text = text.lstrip()
    match = re.match(rf"\d{{1,{width}}}", text)
    if match is None:
        raise GoTimeParseError(f"expected a number at {text!r}")
    return int(match.group()), text[match.end():]


def _parse_fraction(text: str) -> tuple[int | None, str]:
    if not text.startswith("."):
        return None, text
    match = re.match(r"\d+", text[1:])
    if match is None:
        raise GoTimeParseError(f"invalid fractional seconds at {text!r}")
    digits = match.group()
    return int(digits[:9].ljust(9, "0")), text[1 + len(digits):]


def _parse_offset(text: str, allow_z: bool) -> tuple[int, str]:
    text = text.lstrip()
    if allow_z and text[:1] in ("Z", "z"):
        return 0, text[1:]
    match = _OFFSET.match(text)
    if match is None:
        raise GoTimeParseError(f"invalid offset at {text!r}")
    sign, hours, minutes, seconds = match.groups()
    total = int(hours) * 3600 + int(minutes or 0) * 60 + int(seconds or 0)
    return (-total if sign == "-" else total), text[match.end():]


def _build(fields: _Fields, nanos: int) -> datetime:
    year = fields.get("year", _MISSING_YEAR)

    if "hour12" in fields:
        if "pm" not in fields:
            raise GoTimeParseError("12-hour clock without AM/PM")
        hour12 = fields.get("hour12")
        if not 1 <= hour12 <= 12:
            raise GoTimeParseError("hour out of range")
        fields.set("hour", hour12 % 12 + (12 if fields.get("pm") else 0))

    if not any(name in fields for name in ("hour", "minute", "second")):
        hour, minute, second = 0, 0, 0
    else:
        if "hour" not in fields or "minute" not in fields:
            raise GoTimeParseError("incomplete time of day")
        hour, minute = fields.get("hour"), fields.get("minute")
        second = fields.get("second", 0)

    try:
        if "month" in fields and "day" in fields:
            day = _date(year, fields.get("month"), fields.get("day"))
            if "ordinal" in fields and day.timetuple().tm_yday != fields.get("ordinal"):
                raise GoTimeParseError("day of year does not match the date")
        elif "ordinal" in fields:
            day = _date(year, 1, 1) + timedelta(days=fields.get("ordinal") - 1)
            if day.year != year:
                raise GoTimeParseError("day of year out of range")
        else:
            raise GoTimeParseError("missing month and day")
        if "weekday" in fields and day.weekday() != fields.get("weekday"):
            raise GoTimeParseError("weekday does not match the date")
        offset = fields.get("offset")
        tz = timezone.utc if offset is None else timezone(timedelta(seconds=offset))
        return datetime.combine(day, time(hour, minute, second, nanos // 1000), tzinfo=tz)
    except (ValueError, OverflowError) as exc:
        if isinstance(exc, GoTimeParseError):
            raise
        raise GoTimeParseError(str(exc)) from exc


def parse(layout: str, value: str) -> tuple[datetime, int]:
    """Parse ``value`` with ``layout``.

    Returns the datetime and its nanosecond-of-second. Without an offset in
    the value the time is taken as UTC; missing times of day are midnight.
    """
    fields = _Fields()
    nanos = 0
    rest = value
    for token in tokenize(layout, LayoutMode.PARSE):
        kind = token.kind
        if kind == "space":
            rest = rest.lstrip()
        elif kind == "literal":
            if not rest.startswith(token.source):
                raise GoTimeParseError(f"expected {token.source!r} at {rest!r}")
            rest = rest[len(token.source):]
        elif kind in _WIDTHS:
            number, rest = _parse_number(rest, _WIDTHS[kind])
            if kind == "year_mod_100":
                fields.set("year", number + (1900 if number >= 69 else 2000))
            else:
                fields.set(kind, number)
        elif kind in ("long_month_name", "short_month_name"):
            month, rest = _parse_name(rest, _MONTHS)
            fields.set("month", month + 1)
        elif kind in ("long_weekday_name", "short_weekday_name"):
            weekday, rest = _parse_name(rest, _WEEKDAYS)
            fields.set("weekday", weekday)
        elif kind in ("upper_ampm", "lower_ampm"):
            marker = rest[:2].lower()
            if marker not in ("am", "pm"):
                raise GoTimeParseError(f"expected AM or PM at {rest!r}")
            fields.set("pm", int(marker == "pm"))
            rest = rest[2:]
        elif kind.startswith("nanosecond"):
            parsed, rest = _parse_fraction(rest)
            if parsed is not None:
                nanos = parsed
        elif kind.startswith("offset"):
            offset, rest = _parse_offset(rest, kind.endswith("_z"))
            fields.set("offset", offset)
        elif kind == "timezone_name":
            name = _ALPHA.match(rest).group().lower()
            if name in _LEGACY_ZONES:
                fields.set("offset", _LEGACY_ZONES[name])
            rest = rest[_NON_SPACE.match(rest).end():]
        else:
            raise GoTimeParseError(f"unsupported layout element {token.source!r}")
    if rest:
        raise GoTimeParseError(f"unexpected trailing input {rest!r}")
    return _build(fields, nanos), nanos


def _pad(number: int, kind: str, pad: str | None) -> str:
    width = _WIDTHS[kind]
    if pad == "zero":
        return f"{number:0{width}d}"
    if pad == "space":
        return f"{number:>{width}d}"
    return str(number)


def _format_offset(seconds: int, kind: str) -> str:
    if kind.endswith("_z") and seconds == 0:
        return "Z"
    sign = "-" if seconds < 0 else "+"
    hours, remainder = divmod(abs(seconds), 3600)
    minutes, secs = divmod(remainder, 60)
    if kind == "offset_triple_colon":
        return f"{sign}{hours:02d}"
    if kind in ("offset_colon", "offset_colon_z"):
        return f"{sign}{hours:02d}:{minutes:02d}"
    if kind == "offset_double_colon":
        return f"{sign}{hours:02d}:{minutes:02d}:{secs:02d}"
    return f"{sign}{hours:02d}{minutes:02d}"


def _format_fraction(nanos: int, kind: str) -> str:
    if kind == "nanosecond3":
        return f".{nanos // 1_000_000:03d}"
    if kind == "nanosecond6":
        return f".{nanos // 1000:06d}"
    if kind == "nanosecond9":
        return f".{nanos:09d}"
    if nanos == 0:
        return ""
    if nanos % 1_000_000 == 0:
        return f".{nanos // 1_000_000:03d}"
    if nanos % 1000 == 0:
        return f".{nanos // 1000:06d}"
    return f".{nanos:09d}"


def format(date: datetime | tuple[datetime, int], layout: str) -> str:
    """Format a datetime, or a ``(datetime, nanosecond)`` pair, with ``layout``."""
    if isinstance(date, tuple):
        moment, nanos = date
    else:
        moment, nanos = date, date.microsecond * 1000
    offset = moment.utcoffset()
    offset_seconds = int(offset.total_seconds()) if offset is not None else 0
    numbers = {
        "year": moment.year,
        "year_mod_100": moment.year % 100,
        "month": moment.month,
        "day": moment.day,
        "ordinal": moment.timetuple().tm_yday,
        "hour": moment.hour,
        "hour12": moment.hour % 12 or 12,
        "minute": moment.minute,
        "second": moment.second,
    }
    out = []
    for token in tokenize(layout, LayoutMode.FORMAT):
        kind = token.kind
        if token.is_literal:
            out.append(token.source)
        elif kind in numbers:
            out.append(_pad(numbers[kind], kind, token.pad))
        elif kind == "long_month_name":
            out.append(_MONTHS[moment.month - 1])
        elif kind == "short_month_name":
            out.append(_MONTHS[moment.month - 1][:3])
        elif kind == "long_weekday_name":
            out.append(_WEEKDAYS[moment.weekday()])
        elif kind == "short_weekday_name":
            out.append(_WEEKDAYS[moment.weekday()][:3])
        elif kind == "upper_ampm":
            out.append("PM" if moment.hour >= 12 else "AM")
        elif kind == "lower_ampm":
            out.append("pm" if moment.hour >= 12 else "am")
        elif kind.startswith("nanosecond"):
            out.append(_format_fraction(nanos, kind))
        elif kind.startswith("offset"):
            out.append(_format_offset(offset_seconds, kind))
        elif kind == "timezone_name":
            out.append(moment.tzname() or "")
    return "".join(out)