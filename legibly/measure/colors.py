# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""
Color string parsing.

Turns CSS color text into one of the tagged ColorValue variants:
hex, rgb()/rgba(), hsl()/hsla() or a named keyword. Anything else raises
ColorParseError; nothing is coerced to a default.
"""

from __future__ import annotations

import math
import re
from typing import Union

from legibly.errors import ColorParseError
from legibly.schema.color import ColorValue, HexColor, HslColor, NamedColor, RgbColor


_FUNC_RE = re.compile(r"^(rgba?|hsla?)\(\s*(.*?)\s*\)$", re.IGNORECASE | re.DOTALL)
_NUMBER_RE = re.compile(r"^([+-]?(?:\d+\.?\d*|\.\d+)(?:e[+-]?\d+)?)([a-z%]*)$", re.IGNORECASE)

_HUE_UNITS = {
    "": 1.0,
    "deg": 1.0,
    "grad": 360.0 / 400.0,
    "rad": 180.0 / math.pi,
    "turn": 360.0,
}


def _split_args(body: str) -> tuple[list[str], str | None]:
    """Split function arguments into channels and an optional alpha."""
    if "," in body:
        parts = [p.strip() for p in body.split(",")]
        if len(parts) == 4:
            return parts[:3], parts[3]
        return parts, None
    alpha = None
    if "/" in body:
        body, alpha = body.split("/", 1)
        alpha = alpha.strip()
    return body.split(), alpha


def _number(token: str, text: str) -> tuple[float, str]:
    m = _NUMBER_RE.match(token)
    if not m:
        raise ColorParseError(f"Invalid number {token!r} in color {text!r}")
    return float(m.group(1)), m.group(2).lower()


def _parse_alpha(token: str | None, text: str) -> float:
    if token is None:
        return 1.0
    value, unit = _number(token, text)
    if unit == "%":
        value /= 100.0
    elif unit:
        raise ColorParseError(f"Invalid alpha {token!r} in color {text!r}")
    return min(1.0, max(0.0, value))


def _parse_rgb(args: list[str], alpha: str | None, text: str) -> RgbColor:
    if len(args) != 3:
        raise ColorParseError(f"rgb() needs 3 channels: {text!r}")
    channels = []
    for token in args:
        value, unit = _number(token, text)
        if unit == "%":
            value = value * 2.55
        elif unit:
            raise ColorParseError(f"Invalid channel {token!r} in color {text!r}")
        channels.append(min(255.0, max(0.0, value)))
    return RgbColor(*channels, alpha=_parse_alpha(alpha, text))


def _parse_hsl(args: list[str], alpha: str | None, text: str) -> HslColor:
    if len(args) != 3:
        raise ColorParseError(f"hsl() needs 3 components: {text!r}")
    hue, unit = _number(args[0], text)
    if unit not in _HUE_UNITS:
        raise ColorParseError(f"Invalid hue unit {unit!r} in color {text!r}")
    hue *= _HUE_UNITS[unit]

    percents = []
    for token in args[1:]:
        value, unit = _number(token, text)
        if unit not in ("%", ""):
            raise ColorParseError(f"Invalid percentage {token!r} in color {text!r}")
        percents.append(min(100.0, max(0.0, value)) / 100.0)
    return HslColor(hue, percents[0], percents[1], alpha=_parse_alpha(alpha, text))


def parse_color(text: str) -> ColorValue:
    """
    Parse a CSS color string.

    Accepts hex (#rgb, #rgba, #rrggbb, #rrggbbaa), rgb()/rgba() with comma
    or space syntax, hsl()/hsla() with deg/rad/grad/turn hues, and the CSS
    named colors.

    Raises:
        ColorParseError: if the string is not one of those forms
    """
    if not isinstance(text, str):
        raise ColorParseError(f"Expected color string, got {type(text).__name__}")
    s = text.strip()
    if not s:
        raise ColorParseError("Empty color string")

    try:
        if s.startswith("#"):
            return HexColor(s)

        m = _FUNC_RE.match(s)
        if m:
            name = m.group(1).lower()
            args, alpha = _split_args(m.group(2))
            if name.startswith("rgb"):
                return _parse_rgb(args, alpha, text)
            return _parse_hsl(args, alpha, text)

        if s.isalpha():
            return NamedColor(s)
    except ColorParseError:
        raise
    except ValueError as e:
        raise ColorParseError(f"Invalid color {text!r}: {e}") from e

    raise ColorParseError(f"Unrecognized color {text!r}")


def resolve_rgb(color: Union[str, ColorValue]) -> tuple[float, float, float]:
    """Resolve a color string or ColorValue to an opaque sRGB triple (0-255)."""
    if isinstance(color, str):
        color = parse_color(color)
    return color.to_rgb()
