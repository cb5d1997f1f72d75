"""Conversion of option argument text into typed values."""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_INT_PREFIX = re.compile(r"-?[0-9]+")


class TypeParseError(ValueError):
    """Raised when text cannot be converted into the requested type."""


def parse_int(data: str) -> int:
    """Parse a leading decimal integer from ``data``.

    Like a strict C-style conversion: an optional minus sign, then digits,
    with no leading whitespace or plus sign. Trailing text after the digits
    is ignored. The value must fit in a signed 32-bit integer.
    """
    match = _INT_PREFIX.match(data)
    if match is None:
        raise TypeParseError(f"not an integer: {data!r}")
    value = int(match.group())
    if not _INT_MIN <= value <= _INT_MAX:
        raise TypeParseError(f"integer out of range: {data!r}")
    return value


_PARSERS: dict[type, Callable[[str], Any]] = {
    int: parse_int,
}


def parse_type(value_type: type, data: str) -> Any:
    """Convert ``data`` into a value of ``value_type``.

    Raises TypeError when no parser exists for the type and
    TypeParseError when the text is not a valid value.
    """
    try:
        parser = _PARSERS[value_type]
    except (KeyError, TypeError):
        raise TypeError(f"no parser for type {value_type!r}") from None
    return parser(data)