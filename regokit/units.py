"""Builtins that parse quantities with SI and binary unit suffixes."""

from __future__ import annotations

import json
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Any, Callable

from regokit.utils import BuiltinError, Undefined, ensure_args_count, ensure_string

_TEN_EXP = {
    "E": 18, "e": 18,
    "P": 15, "p": 15,
    "T": 12, "t": 12,
    "G": 9, "g": 9,
    "M": 6,
    "K": 3, "k": 3,
    "m": -3,
    "Q": 30,
    "R": 27,
    "Y": 24,
    "Z": 21,
    "h": 2,
    "da": 1,
    "d": -1,
    "c": -2,
    "\u03bc": -6,
    "n": -9,
    "f": -15,
    "a": -18,
    "z": -21,
    "y": -24,
    "r": -27,
    "q": -30,
    "": 0,
}

_TWO_EXP = {
    "ki": 10, "mi": 20, "gi": 30, "ti": 40,
    "pi": 50, "ei": 60, "zi": 70, "yi": 80,
}

_TWOB_EXP = {
    **_TWO_EXP,
    **{f"{suffix}b": exp for suffix, exp in _TWO_EXP.items()},
    "": 0,
}

_TENB_BASE = {
    "q": 30, "r": 27, "y": 24, "z": 21, "e": 18,
    "p": 15, "t": 12, "g": 9, "m": 6, "k": 3,
}
_TENB_EXP = {**_TENB_BASE, **{f"{s}b": exp for s, exp in _TENB_BASE.items()}}


def _ascii_lower(text: str) -> str:
    return "".join(c.lower() if c.isascii() else c for c in text)


def _split(fcn: str, args: list) -> tuple[str, str]:
    ensure_args_count(fcn, args, 1)
    text = ensure_string(fcn, args[0])
    if len(text) >= 2 and text.startswith('"') and text.endswith('"'):
        text = text[1:-1]
    if any(c.isspace() for c in text):
        raise BuiltinError("spaces not allowed in resource strings")
    pos = next((i for i, c in enumerate(text) if c.isalpha()), len(text))
    return text[:pos], text[pos:]


def _load(number_part: str) -> Any:
    source = "0" + number_part if number_part.startswith(".") else number_part
    return json.loads(source, parse_float=Decimal, parse_int=Decimal)


def _as_decimal(decoded: Any) -> Decimal:
    if not isinstance(decoded, Decimal):
        raise BuiltinError("could not parse number")
    return decoded


def _scale(n: Decimal, base: int, exp: int, rounded: bool) -> int | float:
    with localcontext() as ctx:
        ctx.prec = len(n.as_tuple().digits) + 64
        result = n * Decimal(base) ** exp
        if rounded:
            return int(result.quantize(Decimal(1), rounding=ROUND_HALF_UP))
        if result == result.to_integral_value():
            return int(result)
        return float(result)


def parse(args: list) -> int | float | Undefined:
    """Parse a quantity like ``10K``, ``5Gi`` or ``250m``."""
    number_part, suffix = _split("units.parse", args)
    try:
        decoded = _load(number_part)
    except ValueError as exc:
        raise BuiltinError("could not parse number") from exc
    n = _as_decimal(decoded)

    exp = _TEN_EXP.get(suffix)
    if exp is not None:
        return _scale(n, 10, exp, rounded=False)
    exp = _TWO_EXP.get(_ascii_lower(suffix))
    if exp is not None:
        return _scale(n, 2, exp, rounded=False)
    return Undefined()


def parse_bytes(args: list, strict: bool = False) -> int | Undefined:
    """Parse a byte count like ``10KB`` or ``5GiB``, rounded to an integer."""
    number_part, suffix = _split("units.parse_bytes", args)
    try:
        decoded = _load(number_part)
    except ValueError as exc:
        if strict:
            raise BuiltinError("could not parse number") from exc
        return Undefined()
    n = _as_decimal(decoded)

    lowered = _ascii_lower(suffix)
    exp = _TWOB_EXP.get(lowered)
    if exp is not None:
        return _scale(n, 2, exp, rounded=True)
    exp = _TENB_EXP.get(lowered)
    if exp is not None:
        return _scale(n, 10, exp, rounded=True)
    return Undefined()


def register(table: dict[str, tuple[Callable, int]]) -> None:
    """Add these builtins, with their argument counts, to ``table``."""
    table["units.parse"] = (parse, 1)
    table["units.parse_bytes"] = (parse_bytes, 1)