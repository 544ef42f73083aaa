"""Argument checks shared by builtin functions, and the undefined value."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any


class BuiltinError(Exception):
    """Raised when a builtin is called with arguments it cannot accept."""


class Undefined:
    """The undefined value. Every instance is the same object."""

    __slots__ = ()
    _instance: "Undefined | None" = None

    def __new__(cls) -> "Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "<undefined>"

    def __bool__(self) -> bool:
        return False


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _sort_key(value: Any) -> tuple:
    """Key giving values a total, type-first ordering."""
    if value is None:
        return (0,)
    if isinstance(value, bool):
        return (1, value)
    if _is_number(value):
        return (2, value)
    if isinstance(value, str):
        return (3, value)
    if isinstance(value, (list, tuple)):
        return (4, tuple(_sort_key(item) for item in value))
    if isinstance(value, (set, frozenset)):
        return (5, tuple(sorted(_sort_key(item) for item in value)))
    if isinstance(value, Mapping):
        return (
            6,
            tuple(sorted((_sort_key(k), _sort_key(v)) for k, v in value.items())),
        )
    if isinstance(value, Undefined):
        return (7,)
    raise TypeError(f"not a policy value: {value!r}")


def _to_json(value: Any) -> Any:
    if isinstance(value, Undefined):
        return "<undefined>"
    if isinstance(value, (list, tuple)):
        return [_to_json(item) for item in value]
    if isinstance(value, (set, frozenset)):
        return [_to_json(item) for item in sorted(value, key=_sort_key)]
    if isinstance(value, Mapping):
        return {
            key if isinstance(key, str) else _display(key): _to_json(item)
            for key, item in sorted(value.items(), key=lambda kv: _sort_key(kv[0]))
        }
    return value


def _display(value: Any) -> str:
    return json.dumps(_to_json(value), separators=(",", ":"), ensure_ascii=False)


def ensure_args_count(fcn: str, args: list, expected: int) -> None:
    """Raise unless exactly ``expected`` arguments were given."""
    if len(args) != expected:
        if expected == 1:
            raise BuiltinError(f"`{fcn}` expects 1 argument")
        raise BuiltinError(f"`{fcn}` expects {expected} arguments")


def ensure_numeric(fcn: str, value: Any) -> int | float:
    """Return ``value`` if it is a number."""
    if not _is_number(value):
        raise BuiltinError(
            f"`{fcn}` expects numeric argument. Got `{_display(value)}` instead"
        )
    return value


def ensure_string(fcn: str, value: Any) -> str:
    """Return ``value`` if it is a string."""
    if not isinstance(value, str):
        raise BuiltinError(
            f"`{fcn}` expects string argument. Got `{_display(value)}` instead"
        )
    return value


def ensure_string_collection(fcn: str, value: Any) -> list[str]:
    """Return the strings of an array or set; sets come out in sorted order."""
    if isinstance(value, (list, tuple)):
        items = list(value)
    elif isinstance(value, (set, frozenset)):
        items = sorted(value, key=_sort_key)
    else:
        raise BuiltinError(f"`{fcn}` expects array/set of strings.")
    for idx, item in enumerate(items):
        if not isinstance(item, str):
            raise BuiltinError(
                f"`{fcn}` expects string collection. Element {idx} is not a string."
            )
    return items


def ensure_array(fcn: str, value: Any) -> list | tuple:
    """Return ``value`` if it is an array."""
    if not isinstance(value, (list, tuple)):
        raise BuiltinError(
            f"`{fcn}` expects array argument. Got `{_display(value)}` instead"
        )
    return value


def ensure_set(fcn: str, value: Any) -> set | frozenset:
    """Return ``value`` if it is a set."""
    if not isinstance(value, (set, frozenset)):
        raise BuiltinError(
            f"`{fcn}` expects set argument. Got `{_display(value)}` instead"
        )
    return value


def ensure_object(fcn: str, value: Any) -> Mapping:
    """Return ``value`` if it is an object."""
    if not isinstance(value, Mapping):
        raise BuiltinError(
            f"`{fcn}` expects object argument. Got `{_display(value)}` instead"
        )
    return value