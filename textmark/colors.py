"""Hex and r,g,b color parsing."""

import string
from typing import Tuple

from PIL import ImageColor

from .errors import ConfigurationError

RGBA = Tuple[int, int, int, int]


def parse_hex_color(value: str) -> RGBA:
    """Parse ``#rgb``, ``#rrggbb`` or ``#rrggbbaa`` (the ``#`` is optional)."""
    raw = (value or "").strip()
    if not raw:
        raise ConfigurationError("color must not be empty")
    digits = raw[1:] if raw.startswith("#") else raw
    if len(digits) not in (3, 6, 8) or any(c not in string.hexdigits for c in digits):
        raise ConfigurationError(f"invalid color format: {value!r}")
    rgb = ImageColor.getrgb("#" + digits)
    if len(rgb) == 3:
        return (rgb[0], rgb[1], rgb[2], 255)
    return tuple(rgb)


def parse_rgb(value: str) -> RGBA:
    parts = (value or "").split(",")
    if len(parts) != 3:
        raise ConfigurationError("expected format r,g,b")
    channels = []
    for part in parts:
        p = part.strip()
        try:
            v = int(p)
        except ValueError:
            raise ConfigurationError(f"invalid channel: {p!r}") from None
        if not 0 <= v <= 255:
            raise ConfigurationError(f"invalid channel: {p!r}")
        channels.append(v)
    return (channels[0], channels[1], channels[2], 255)
