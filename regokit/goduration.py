"""Parsing of duration strings such as ``10h12m45s`` into nanoseconds."""

from __future__ import annotations

import re

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

_UNITS = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "\u00b5s": MICROSECOND,  # micro sign
    "\u03bcs": MICROSECOND,  # Greek letter mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

_LIMIT = 1 << 63
_I64_MAX = _LIMIT - 1

_DIGITS = re.compile(r"[0-9]*")
_UNIT = re.compile(r"[^.0-9]*")


class ParseDurationError(ValueError):
    """Raised when a duration string cannot be parsed."""

    @classmethod
    def invalid(cls, text: str) -> "ParseDurationError":
        return cls(f"invalid duration: {text}")

    @classmethod
    def unknown_unit(cls, unit: str) -> "ParseDurationError":
        return cls(f"unknown unit: {unit}")

    @classmethod
    def overflow(cls) -> "ParseDurationError":
        return cls("overflow")


def _leading_int(s: str) -> tuple[int, str]:
    digits = _DIGITS.match(s).group()
    num = 0
    for digit in digits:
        if num > _LIMIT // 10:
            raise ParseDurationError.overflow()
        num = num * 10 + int(digit)
        if num > _LIMIT:
            raise ParseDurationError.overflow()
    return num, s[len(digits):]


def _leading_fraction(s: str) -> tuple[int, float, str]:
    digits = _DIGITS.match(s).group()
    num = 0
    scale = 1.0
    overflow = False
    for digit in digits:
        if overflow:
            continue
        if num > _I64_MAX // 10:
            overflow = True
            continue
        candidate = num * 10 + int(digit)
        if candidate > _LIMIT:
            overflow = True
            continue
        num = candidate
        scale *= 10.0
    return num, scale, s[len(digits):]


def parse_duration(s: str) -> int:
    """Parse a duration like ``1h15m30.5s`` and return it in nanoseconds.

    The accepted form is ``[-+]?([0-9]*(\\.[0-9]*)?[a-z]+)+`` with units
    ``ns``, ``us`` (or ``µs``/``μs``), ``ms``, ``s``, ``m`` and ``h``.
    The result fits a signed 64-bit integer.
    """
    orig = s
    neg = False
    if s.startswith("-"):
        neg = True
        s = s[1:]
    elif s.startswith("+"):
        s = s[1:]

    if s == "0":
        return 0
    if not s:
        raise ParseDurationError.invalid(orig)

    dur = 0
    while s:
        if not (s[0] == "." or "0" <= s[0] <= "9"):
            raise ParseDurationError.invalid(orig)

        before = len(s)
        value, s = _leading_int(s)
        pre = before != len(s)

        post = False
        fraction = 0
        scale = 1.0
        if s.startswith("."):
            s = s[1:]
            before = len(s)
            fraction, scale, s = _leading_fraction(s)
            post = before != len(s)
        if not pre and not post:
            raise ParseDurationError.invalid(orig)

        unit_text = _UNIT.match(s).group()
        if not unit_text:
            raise ParseDurationError.invalid(orig)
        unit = _UNITS.get(unit_text)
        if unit is None:
            raise ParseDurationError.unknown_unit(unit_text)
        s = s[len(unit_text):]

        if value > _LIMIT // unit:
            raise ParseDurationError.invalid(orig)
        value *= unit
        if fraction > 0:
            # Float precision is enough to be nanosecond accurate for hours.
            value += int(fraction * (unit / scale))
            if value > _LIMIT:
                raise ParseDurationError.invalid(orig)

        dur += value
        if dur > _LIMIT:
            raise ParseDurationError.invalid(orig)

    if neg:
        return -dur
    if dur > _I64_MAX:
        raise ParseDurationError.invalid(orig)
    return dur