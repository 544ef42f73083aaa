"""Splitting of reference-time layouts such as ``Mon Jan _2 15:04:05 2006``.

A layout is written in terms of the reference time
``Mon Jan 2 15:04:05 MST 2006``. :func:`tokenize` turns it into a stream of
:class:`LayoutToken` items that a parser or a formatter can walk through.

Token kinds:

* names: ``long_month_name``, ``short_month_name``, ``long_weekday_name``,
  ``short_weekday_name``, ``timezone_name``, ``upper_ampm``, ``lower_ampm``
* numbers, with ``pad`` set to ``"zero"``, ``"space"`` or ``"none"``:
  ``year``, ``year_mod_100``, ``month``, ``day``, ``ordinal``, ``hour``,
  ``hour12``, ``minute``, ``second``
* fractional seconds: ``nanosecond`` (a dot and as many digits as needed),
  ``nanosecond3``, ``nanosecond6``, ``nanosecond9``
* offsets: ``offset`` (``-0700``), ``offset_colon`` (``-07:00``),
  ``offset_double_colon`` (``-07:00:00``), ``offset_triple_colon`` (``-07``),
  ``offset_z`` (``Z0700``), ``offset_colon_z`` (``Z07:00``)
* text: ``literal`` and ``space`` (a run of white space)
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class LayoutMode(Enum):
    """Whether a layout is read for parsing or for formatting."""

    PARSE = "parse"
    FORMAT = "format"


@dataclass(frozen=True)
class LayoutToken:
    """One element of a layout.

    ``source`` is the part of the layout the token stands for; tokens that
    are implied by a preceding element (such as optional fractional seconds
    after a seconds field) have an empty ``source``.
    """

    kind: str
    source: str = ""
    pad: str | None = None

    @property
    def is_literal(self) -> bool:
        """True for text that is copied or matched as it stands."""
        return self.kind in ("literal", "space")


_Part = tuple[str, "str | None", str]  # kind, pad, source


def _one(kind: str, prefix: str, pad: str | None = None) -> tuple[str, list[_Part]]:
    return prefix, [(kind, pad, prefix)]


_RULES: dict[str, list[tuple[str, list[_Part]]]] = {
    "J": [
        _one("long_month_name", "January"),
        _one("short_month_name", "Jan"),
    ],
    "M": [
        _one("long_weekday_name", "Monday"),
        _one("short_weekday_name", "Mon"),
        _one("timezone_name", "MST"),
    ],
    "0": [
        _one("ordinal", "002", "zero"),
        _one("month", "01", "zero"),
        _one("day", "02", "zero"),
        _one("hour12", "03", "zero"),
        _one("minute", "04", "zero"),
        # "05" is handled separately since it depends on the mode.
        _one("year_mod_100", "06", "zero"),
    ],
    "1": [
        _one("hour", "15", "zero"),
        _one("month", "1", "none"),
    ],
    "2": [
        _one("year", "2006", "zero"),
        _one("day", "2", "none"),
    ],
    "_": [
        ("_2006", [("literal", None, "_"), ("year", "none", "2006")]),
        _one("ordinal", "__2", "space"),
        _one("day", "_2", "space"),
    ],
    "3": [_one("hour12", "3", "none")],
    "4": [_one("minute", "4", "none")],
    "5": [("5", [("second", "none", "5"), ("nanosecond", None, "")])],
    "P": [_one("upper_ampm", "PM")],
    "p": [_one("lower_ampm", "pm")],
    "-": [
        _one("offset_double_colon", "-070000"),
        _one("offset_double_colon", "-07:00:00"),
        _one("offset", "-0700"),
        _one("offset_colon", "-07:00"),
        _one("offset_triple_colon", "-07"),
        _one("literal", "-"),
    ],
    "Z": [
        _one("offset_z", "Z0700"),
        _one("offset_colon_z", "Z07:00"),
    ],
}


def _fraction_rules(sep: str, kinds: dict[str, str]) -> list[tuple[str, list[_Part]]]:
    rules = []
    for digit in "09":
        for width in range(9, 0, -1):
            prefix = sep + digit * width
            rules.append(_one(kinds.get(prefix, "nanosecond"), prefix))
    rules.append(_one("literal", sep))
    return rules


_FRACTION_RULES = {
    ".": _fraction_rules(
        ".",
        {
            ".000000000": "nanosecond9",
            ".000000": "nanosecond6",
            ".000": "nanosecond3",
        },
    ),
    ",": _fraction_rules(
        ",",
        {
            ",000000000": "nanosecond9",
            ",000000": "nanosecond6",
            ",000": "nanosecond3",
            ",999999999": "nanosecond9",
            ",999999": "nanosecond6",
            ",999": "nanosecond3",
        },
    ),
}


def _is_fractional_seconds(text: str) -> bool:
    if len(text) < 2 or text[1] not in "09":
        return False
    repeating = text[1]
    following = next((c for c in text[2:] if c != repeating), None)
    return following is None or not ("0" <= following <= "9")


def _match(rules: list[tuple[str, list[_Part]]], rest: str) -> list[_Part] | None:
    for prefix, parts in rules:
        if rest.startswith(prefix):
            return parts
    return None


def _next_parts(rest: str, mode: LayoutMode) -> list[_Part] | None:
    first = rest[0]
    if first in _FRACTION_RULES and _is_fractional_seconds(rest):
        return _match(_FRACTION_RULES[first], rest)
    if first in _RULES:
        if rest.startswith("05"):
            parts: list[_Part] = [("second", "zero", "05")]
            if mode is LayoutMode.PARSE and not rest[2:].startswith("."):
                parts.append(("nanosecond", None, ""))
            return parts
        # An unrecognised element ends the layout.
        return _match(_RULES[first], rest)
    if first.isspace():
        end = next((i for i, c in enumerate(rest) if not c.isspace()), len(rest))
        return [("space", None, rest[:end])]
    return [("literal", None, first)]


def tokenize(layout: str, mode: LayoutMode = LayoutMode.PARSE) -> Iterator[LayoutToken]:
    """Yield the tokens of ``layout``.

    In parse mode a zero-padded seconds field not followed by a dot also
    accepts optional fractional seconds. Tokenizing stops at an element that
    starts like a reference-time field but is not one (for example ``Jx``).
    """
    rest = layout
    while rest:
        parts = _next_parts(rest, mode)
        if parts is None:
            return
        for kind, pad, source in parts:
            rest = rest[len(source):]
            yield LayoutToken(kind, source, pad)