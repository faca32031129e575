# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""
Tagged color values.

A color as written in a gradient or as a text color is one of four forms:
hex, rgb(), hsl() or a CSS keyword. Each form is its own frozen dataclass
carrying a validated payload, so conversions never sniff strings.

All forms resolve to an opaque sRGB triple in the 0-255 range. Alpha is
kept for serialization only; contrast math treats every color as opaque.
"""

from __future__ import annotations

import colorsys
import math
import re
from dataclasses import dataclass
from typing import Union


_HEX_RE = re.compile(r"^#(?:[0-9a-f]{3}|[0-9a-f]{4}|[0-9a-f]{6}|[0-9a-f]{8})$")


def format_number(value: float, digits: int = 4) -> str:
    """Format a number without trailing zeros ("50", "12.5", "0.3333")."""
    text = f"{round(float(value), digits):.{digits}f}".rstrip("0").rstrip(".")
    if text in ("", "-0"):
        return "0"
    return text


def _check_alpha(alpha: float) -> None:
    if not 0.0 <= alpha <= 1.0:
        raise ValueError(f"Alpha must be 0-1, got {alpha}")


@dataclass(frozen=True, slots=True)
class HexColor:
    """
    Hex notation: #rgb, #rgba, #rrggbb or #rrggbbaa.

    The value is normalized to lowercase with a leading '#'.
    """
    value: str

    def __post_init__(self) -> None:
        value = self.value.strip().lower()
        if not value.startswith("#"):
            value = "#" + value
        if not _HEX_RE.match(value):
            raise ValueError(f"Invalid hex color: {self.value!r}")
        object.__setattr__(self, "value", value)

    @property
    def _digits(self) -> str:
        digits = self.value[1:]
        if len(digits) in (3, 4):
            digits = "".join(ch * 2 for ch in digits)
        return digits

    @property
    def alpha(self) -> float:
        digits = self._digits
        if len(digits) == 8:
            return int(digits[6:8], 16) / 255.0
        return 1.0

    def to_rgb(self) -> tuple[float, float, float]:
        digits = self._digits
        return (
            float(int(digits[0:2], 16)),
            float(int(digits[2:4], 16)),
            float(int(digits[4:6], 16)),
        )

    def to_css(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class RgbColor:
    """
    rgb()/rgba() notation.

    Attributes:
        r, g, b: Channels in 0-255 (fractional values allowed)
        alpha: Opacity 0-1
    """
    r: float
    g: float
    b: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        for name in ("r", "g", "b"):
            v = getattr(self, name)
            if math.isnan(v) or not 0.0 <= v <= 255.0:
                raise ValueError(f"Channel {name} must be 0-255, got {v}")
        _check_alpha(self.alpha)

    def to_rgb(self) -> tuple[float, float, float]:
        return (float(self.r), float(self.g), float(self.b))

    def to_css(self) -> str:
        channels = ", ".join(format_number(v) for v in (self.r, self.g, self.b))
        if self.alpha < 1.0:
            return f"rgba({channels}, {format_number(self.alpha)})"
        return f"rgb({channels})"


@dataclass(frozen=True, slots=True)
class HslColor:
    """
    hsl()/hsla() notation.

    Attributes:
        h: Hue in degrees [0, 360)
        s: Saturation 0-1
        l: Lightness 0-1
        alpha: Opacity 0-1
    """
    h: float
    s: float
    l: float
    alpha: float = 1.0

    def __post_init__(self) -> None:
        if math.isnan(self.h):
            raise ValueError("Hue must be a number")
        object.__setattr__(self, "h", self.h % 360.0)
        if not 0.0 <= self.s <= 1.0:
            raise ValueError(f"Saturation must be 0-1, got {self.s}")
        if not 0.0 <= self.l <= 1.0:
            raise ValueError(f"Lightness must be 0-1, got {self.l}")
        _check_alpha(self.alpha)

    def to_rgb(self) -> tuple[float, float, float]:
        r, g, b = colorsys.hls_to_rgb(self.h / 360.0, self.l, self.s)
        return (r * 255.0, g * 255.0, b * 255.0)

    def to_css(self) -> str:
        body = (
            f"{format_number(self.h)}, "
            f"{format_number(self.s * 100)}%, "
            f"{format_number(self.l * 100)}%"
        )
        if self.alpha < 1.0:
            return f"hsla({body}, {format_number(self.alpha)})"
        return f"hsl({body})"


@dataclass(frozen=True, slots=True)
class NamedColor:
    """A CSS color keyword such as 'rebeccapurple'."""
    name: str

    def __post_init__(self) -> None:
        from legibly.measure.named import CSS_NAMED_COLORS

        name = self.name.strip().lower()
        if name not in CSS_NAMED_COLORS:
            raise ValueError(f"Unknown color name: {self.name!r}")
        object.__setattr__(self, "name", name)

    @property
    def alpha(self) -> float:
        return 1.0

    def to_rgb(self) -> tuple[float, float, float]:
        from legibly.measure.named import CSS_NAMED_COLORS

        r, g, b = CSS_NAMED_COLORS[self.name]
        return (float(r), float(g), float(b))

    def to_css(self) -> str:
        return self.name


ColorValue = Union[HexColor, RgbColor, HslColor, NamedColor]


def rgb_to_hex(rgb: tuple[float, float, float]) -> str:
    """Round an sRGB triple (0-255) half-up to a lowercase #rrggbb string."""
    r, g, b = (int(math.floor(min(255.0, max(0.0, float(v))) + 0.5)) for v in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"
