# regokit

Building blocks for the builtin functions of a policy-language evaluator.
Values are plain Python data: `None`, `bool`, `int`/`float`, `str`, `list`
(or `tuple`), `dict` (any mapping) and `set`/`frozenset`. A missing result
is the `regokit.utils.Undefined` marker. Every `Undefined()` is the same
object, and it is falsy.

The package has no dependencies beyond the standard library.

## Modules

### `regokit.utils`

This module holds the argument checks that builtins share. Each check
raises `BuiltinError` when it fails and otherwise returns the value:

- `ensure_args_count(fcn, args, expected)`
- `ensure_numeric(fcn, value)`
- `ensure_string(fcn, value)`
- `ensure_array(fcn, value)`
- `ensure_set(fcn, value)`
- `ensure_object(fcn, value)`
- `ensure_string_collection(fcn, value)` returns the strings of an array or
  set. Set elements come back in sorted order.

### `regokit.typeops`

- `get_type(value)` returns `"null"`, `"boolean"`, `"number"`, `"string"`,
  `"array"`, `"object"`, `"set"` or `"undefined"`.
- `type_name(args)` returns the same name for a one-element argument list.
- `is_array`, `is_boolean`, `is_null`, `is_number`, `is_object`, `is_set` and
  `is_string` each test the type of a one-element argument list.
- `trace(args)` returns its string argument. Collecting traces is up to the
  caller.

### `regokit.units`

- `parse(args)` reads quantities with SI suffixes such as `"10K"`, `"250m"`
  or `"3da"`. It also takes binary suffixes such as `"5Gi"`. SI suffixes
  are case-sensitive and binary suffixes are not.
- `parse_bytes(args, strict=False)` reads byte counts such as `"10KB"` or
  `"5GiB"` and rounds the result to an integer. Both SI and binary suffixes
  are read without regard to case.

Surrounding double quotes are removed before parsing. White space raises
`BuiltinError`. An unknown suffix gives `Undefined()`. If the number part
does not parse, `parse` raises. `parse_bytes` raises only when `strict` is
true and otherwise returns `Undefined()`.

### `regokit.uuids`

- `parse(args)` reads a UUID in simple, hyphenated, braced or `urn:uuid:`
  form. It returns a dict with `version` and `variant`. For versions 1, 2,
  6 and 7 the dict also has `time`, in nanoseconds since the Unix epoch.
  For versions 1 and 2 it also has `nodeid`, `macvariables` and
  `clocksequence`, and version 2 adds `id` and `domain`. A string that is
  not a UUID gives `Undefined()`.
- `rfc4122(args)` returns a new random version 4 UUID string. Its single
  argument must be a string.

### `regokit.goduration`

`parse_duration(s)` reads duration strings such as `"1h2m3.5s"` or
`"-1.5us"` and returns an `int` count of nanoseconds that fits a signed
64-bit integer. The units are `ns`, `us` (`µs`, `μs`), `ms`, `s`, `m` and
`h`. Bad input raises `ParseDurationError`, which is a subclass of
`ValueError`.

### `regokit.gotime_layout` and `regokit.gotime`

Layouts are written in terms of the reference time
`Mon Jan 2 15:04:05 MST 2006`.

- `gotime_layout.tokenize(layout, mode=LayoutMode.PARSE)` yields
  `LayoutToken` items, each with `kind`, `source` and `pad`.
- `gotime.parse(layout, value)` returns a `(datetime, nanosecond)` pair.
  The datetime is aware. When the value has no offset, the time is taken
  as UTC. Legacy zone names such as `PST` or `EDT` set the offset. A
  missing time of day means midnight, and a missing year becomes year 1.
  Parse failures raise `GoTimeParseError`, which is a subclass of
  `ValueError`.
- `gotime.format(date, layout)` takes a datetime or a
  `(datetime, nanosecond)` pair and returns a string. Zone names come from
  the datetime's `tzname()`.

### `regokit.timediff`

`diff_between_datetimes(datetime1, datetime2)` returns
`(years, months, days, hours, minutes, seconds)` between two aware
datetimes. The order of the arguments does not matter.

### Registering builtins

`typeops`, `units` and `uuids` each have a `register(table)` function. It
adds the module's builtins to a mapping of name → `(function, arity)`.

## Example

```python
from regokit import goduration, gotime, units

assert goduration.parse_duration("1h30m") == 90 * 60 * 10**9
assert units.parse_bytes(["1KiB"]) == 1024

when = gotime.parse("2006-01-02", "2020-02-02")
assert gotime.format(when, "Jan _2 2006") == "Feb  2 2020"
```

## What this package does not do

regokit only supplies helper functions. It has no policy parser, no
interpreter and no query engine. The builtins are plain functions for a
host evaluator to call. The package has no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```