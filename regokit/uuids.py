"""UUID builtins: parsing UUIDs into their fields and generating v4 UUIDs."""

from __future__ import annotations

import re
import uuid
from typing import Any, Callable

from regokit.utils import Undefined, ensure_args_count, ensure_string

_HYPHENATED = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)
_SIMPLE = re.compile(r"[0-9a-fA-F]{32}")

_U64 = (1 << 64) - 1
_TICKS_BETWEEN_EPOCHS = 0x01B2_1DD2_1381_4000


def _decode(text: str) -> bytes | None:
    if len(text) == 45 and text.startswith("urn:uuid:"):
        body = text[9:]
    elif len(text) == 38 and text.startswith("{") and text.endswith("}"):
        body = text[1:-1]
    else:
        body = text
        if _SIMPLE.fullmatch(body):
            return bytes.fromhex(body)
    if _HYPHENATED.fullmatch(body):
        return bytes.fromhex(body.replace("-", ""))
    return None


def _variant(byte: int) -> str:
    if byte & 0x80 == 0:
        return "NCS"
    if byte & 0x40 == 0:
        return "RFC4122"
    if byte & 0x20 == 0:
        return "Microsoft"
    return "Future"


def _rfc4122_to_unix(ticks: int) -> tuple[int, int]:
    since_epoch = (ticks - _TICKS_BETWEEN_EPOCHS) & _U64
    return since_epoch // 10_000_000, (since_epoch % 10_000_000) * 100


def _timestamp(raw: bytes, version: int) -> tuple[int, int] | None:
    if version in (1, 2):
        ticks = (
            (raw[6] & 0x0F) << 56
            | raw[7] << 48
            | raw[4] << 40
            | raw[5] << 32
            | int.from_bytes(raw[0:4], "big")
        )
        return _rfc4122_to_unix(ticks)
    if version == 6:
        ticks = int.from_bytes(raw[0:6], "big") << 12 | (raw[6] & 0x0F) << 8 | raw[7]
        return _rfc4122_to_unix(ticks)
    if version == 7:
        millis = int.from_bytes(raw[0:6], "big")
        return millis // 1000, (millis % 1000) * 1_000_000
    return None


def _mac_vars(byte: int) -> str:
    if byte & 0b11 == 0b11:
        return "local:multicast"
    if byte & 0b01:
        return "global:multicast"
    if byte & 0b10:
        return "local:unicast"
    return "global:unicast"


def _domain(byte: int) -> str:
    return {0: "Person", 1: "Group", 2: "Org"}.get(byte, f"Domain{byte}")


def parse(args: list) -> dict[str, Any] | Undefined:
    """Describe the fields of a UUID string, or Undefined if it is not one."""
    name = "uuid.parse"
    ensure_args_count(name, args, 1)
    raw = _decode(ensure_string(name, args[0]))
    if raw is None:
        return Undefined()

    version = raw[6] >> 4
    result: dict[str, Any] = {"version": version, "variant": _variant(raw[8])}

    stamp = _timestamp(raw, version)
    if stamp is not None:
        seconds, nanos = stamp
        result["time"] = (seconds * 1_000_000_000 + nanos) & _U64

    if version in (1, 2):
        result["nodeid"] = "-".join(f"{b:02x}" for b in raw[10:16])
        result["macvariables"] = _mac_vars(raw[10])
        result["clocksequence"] = int.from_bytes(raw[8:10], "big") & 0x3FFF
        if version == 2:
            result["id"] = int.from_bytes(raw[0:4], "big")
            result["domain"] = _domain(raw[9])

    return result


def rfc4122(args: list) -> str:
    """Return a new random (version 4) UUID string."""
    name = "uuid.rfc4122"
    ensure_args_count(name, args, 1)
    ensure_string(name, args[0])
    return str(uuid.uuid4())


def register(table: dict[str, tuple[Callable, int]]) -> None:
    """Add these builtins, with their argument counts, to ``table``."""
    table["uuid.parse"] = (parse, 1)
    table["uuid.rfc4122"] = (rfc4122, 1)