"""Builtin helpers for policy evaluation: argument checks, type tests, unit parsing, UUIDs, durations and reference-layout time handling."""

__version__ = "0.1.0"
__all__ = [
    "goduration",
    "gotime",
    "gotime_layout",
    "timediff",
    "typeops",
    "units",
    "utils",
    "uuids",
]