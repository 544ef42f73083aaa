"""Type inspection builtins and the trace builtin."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

from regokit.utils import Undefined, ensure_args_count, ensure_string


def get_type(value: Any) -> str:
    """Return the policy type name of a value."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, (set, frozenset)):
        return "set"
    if isinstance(value, Undefined):
        return "undefined"
    raise TypeError(f"not a policy value: {value!r}")


def _check(name: str, args: list, type_name_: str) -> bool:
    ensure_args_count(name, args, 1)
    return get_type(args[0]) == type_name_


def is_array(args: list) -> bool:
    return _check("is_array", args, "array")


def is_boolean(args: list) -> bool:
    return _check("is_boolean", args, "boolean")


def is_null(args: list) -> bool:
    return _check("is_null", args, "null")


def is_number(args: list) -> bool:
    return _check("is_number", args, "number")


def is_object(args: list) -> bool:
    return _check("is_object", args, "object")


def is_set(args: list) -> bool:
    return _check("is_set", args, "set")


def is_string(args: list) -> bool:
    return _check("is_string", args, "string")


def type_name(args: list) -> str:
    ensure_args_count("type_name", args, 1)
    return get_type(args[0])


def trace(args: list) -> str:
    """Return the trace message; the caller collects the traces."""
    name = "trace"
    ensure_args_count(name, args, 1)
    return ensure_string(name, args[0])


def register(table: dict[str, tuple[Callable, int]]) -> None:
    """Add these builtins, with their argument counts, to ``table``."""
    table.update(
        {
            "is_array": (is_array, 1),
            "is_boolean": (is_boolean, 1),
            "is_null": (is_null, 1),
            "is_number": (is_number, 1),
            "is_object": (is_object, 1),
            "is_set": (is_set, 1),
            "is_string": (is_string, 1),
            "type_name": (type_name, 1),
            "trace": (trace, 1),
        }
    )