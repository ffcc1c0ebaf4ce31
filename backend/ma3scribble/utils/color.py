"""RGBA color helpers for hex notation used in query options and output records."""

from __future__ import annotations

import string
from typing import NamedTuple

from ma3scribble.errors import InvalidOptionError

_CHANNELS = ("red", "green", "blue", "alpha")


class RGBA(NamedTuple):
    r: int
    g: int
    b: int
    a: int = 255


WHITE = RGBA(255, 255, 255, 255)


def parse_hex_rgba(value: str) -> RGBA:
    """Parse ``RRGGBBAA`` (optionally prefixed with ``#``) into an RGBA tuple."""
    hex_str = value.removeprefix("#")
    if len(hex_str) != 8:
        raise InvalidOptionError("invalid hex length: must be 8 characters", {"was": value})

    channels: list[int] = []
    for i, channel in enumerate(_CHANNELS):
        part = hex_str[2 * i : 2 * i + 2]
        if any(c not in string.hexdigits for c in part):
            raise InvalidOptionError(f"invalid {channel} value", {"was": value})
        channels.append(int(part, 16))
    return RGBA(*channels)


def rgba_to_hex(color: RGBA) -> str:
    """Format as ``#RRGGBBAA`` in upper case."""
    return "#{:02X}{:02X}{:02X}{:02X}".format(*color)
