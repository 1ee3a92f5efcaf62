"""Readers for values stored as ``Key=value;`` records in config lines.

A value starts right after the key and the character that follows it
(normally ``=``) and runs up to the record separator ``;``. Arrays hold
values separated by ``,``. In strings a backslash escapes the next
character: ``\\n`` becomes a newline, ``\\t`` a tab, and any other
character, ``;`` and ``,`` included, is taken literally.
"""

from __future__ import annotations

import math
import re
from typing import Callable, TypeVar

from gamesys.hashed_string import HashedString

RECORD_SEPARATOR = ";"
VALUES_SEPARATOR = ","
ESCAPE = "\\"

_ESCAPES = {"n": "\n", "t": "\t"}

_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1

_INT_RE = re.compile(r"\s*([+-]?[0-9]+)")
_FLOAT_RE = re.compile(
    r"\s*([+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan))",
    re.IGNORECASE,
)

_T = TypeVar("_T")


class ConfigError(ValueError):
    """A config value is missing or cannot be read."""


def _value_start(source: str, key: str) -> int:
    position = source.find(key)
    if position < 0:
        raise ConfigError(f"could not find {key!r} inside the source string")
    return position + len(key) + 1


def _record(source: str, key: str) -> str:
    start = _value_start(source, key)
    return source[start:].split(RECORD_SEPARATOR, 1)[0]


def _parse_int(text: str) -> int:
    match = _INT_RE.match(text)
    if match is None:
        raise ConfigError(f"invalid integer value {text!r}")
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ConfigError(f"integer value {text!r} is out of range")
    return value


def _parse_float(text: str) -> float:
    match = _FLOAT_RE.match(text)
    if match is None:
        raise ConfigError(f"invalid floating-point value {text!r}")
    token = match.group(1)
    value = float(token)
    if math.isinf(value) and "inf" not in token.lower():
        raise ConfigError(f"floating-point value {text!r} is out of range")
    return value


def _read_array(source: str, key: str, parse: Callable[[str], _T]) -> list[_T]:
    start = _value_start(source, key)
    if start >= len(source):
        return []
    record = source[start:].split(RECORD_SEPARATOR, 1)[0]
    return [parse(item) for item in record.split(VALUES_SEPARATOR)]


def _scan_strings(source: str, key: str, split_values: bool) -> list[str]:
    start = _value_start(source, key)
    values: list[str] = []
    current: list[str] = []
    chars = iter(source[start:])
    for char in chars:
        if char == ESCAPE:
            escaped = next(chars, None)
            if escaped is None:
                break
            current.append(_ESCAPES.get(escaped, escaped))
            continue
        if char == RECORD_SEPARATOR:
            break
        if split_values and char == VALUES_SEPARATOR:
            values.append("".join(current))
            current = []
            continue
        current.append(char)
    values.append("".join(current))
    return values


def read_int(source: str, key: str) -> int:
    """Read a 32-bit integer stored under key."""
    return _parse_int(_record(source, key))


def read_int_array(source: str, key: str) -> list[int]:
    """Read a comma separated list of 32-bit integers stored under key."""
    return _read_array(source, key, _parse_int)


def read_double(source: str, key: str) -> float:
    """Read a floating-point number stored under key."""
    return _parse_float(_record(source, key))


def read_double_array(source: str, key: str) -> list[float]:
    """Read a comma separated list of floating-point numbers stored under key."""
    return _read_array(source, key, _parse_float)


def read_string(source: str, key: str) -> str:
    """Read an escaped string stored under key."""
    return _scan_strings(source, key, split_values=False)[0]


def read_string_array(source: str, key: str) -> list[str]:
    """Read a comma separated list of escaped strings stored under key."""
    return _scan_strings(source, key, split_values=True)


def read_string_hashed(source: str, key: str) -> HashedString:
    """Read a string stored under key together with its hash."""
    return HashedString(read_string(source, key))


def read_string_array_hashed(source: str, key: str) -> list[HashedString]:
    """Read a list of strings stored under key, each with its hash."""
    return [HashedString(text) for text in read_string_array(source, key)]