# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""
Gradient string parsing and serialization.

Grammar (CSS subset):

    linear-gradient([<angle> | to <side-or-corner>,] <stop>, <stop>[, ...])
    radial-gradient([<shape>,] <stop>, <stop>[, ...])

    <stop> = <color> [<number>%]

The parser never recovers: malformed input raises ParseError and callers
that want a fallback gradient must substitute it themselves.
"""

from __future__ import annotations

import re
from typing import Optional

from legibly.errors import ColorParseError, ParseError
from legibly.measure.colors import parse_color
from legibly.schema import (
    DEFAULT_ANGLE,
    ColorStop,
    GradientKind,
    GradientSpec,
    format_number,
)


_GRADIENT_RE = re.compile(r"^([a-z-]+)\((.*)\)$", re.IGNORECASE | re.DOTALL)
_ANGLE_RE = re.compile(
    r"^([+-]?(?:\d+\.?\d*|\.\d+))(deg|grad|rad|turn)$", re.IGNORECASE
)
_STOP_RE = re.compile(
    r"^(?P<color>.+?)(?:\s+(?P<pos>[+-]?(?:\d+\.?\d*|\.\d+))%)?$", re.DOTALL
)

_KINDS = {kind.value: kind for kind in GradientKind}

_ANGLE_UNITS = {
    "deg": 1.0,
    "grad": 360.0 / 400.0,
    "rad": 57.29577951308232,
    "turn": 360.0,
}

_SIDES = {
    frozenset({"top"}): 0.0,
    frozenset({"top", "right"}): 45.0,
    frozenset({"right"}): 90.0,
    frozenset({"bottom", "right"}): 135.0,
    frozenset({"bottom"}): 180.0,
    frozenset({"bottom", "left"}): 225.0,
    frozenset({"left"}): 270.0,
    frozenset({"top", "left"}): 315.0,
}

_RADIAL_SHAPE_WORDS = {
    "circle", "ellipse", "at",
    "closest-side", "closest-corner", "farthest-side", "farthest-corner",
}


def _split_top_level(body: str) -> list[str]:
    """Split on commas that are not inside parentheses."""
    parts: list[str] = []
    depth = 0
    current: list[str] = []
    for ch in body:
        if ch == "(":
            depth += 1
        elif ch == ")":
            depth -= 1
            if depth < 0:
                raise ParseError("Unbalanced parentheses in gradient")
        if ch == "," and depth == 0:
            parts.append("".join(current).strip())
            current = []
        else:
            current.append(ch)
    if depth != 0:
        raise ParseError("Unbalanced parentheses in gradient")
    parts.append("".join(current).strip())
    return parts


def _parse_orientation(part: str) -> Optional[float]:
    """Return the angle in degrees if part is an orientation, else None."""
    m = _ANGLE_RE.match(part)
    if m:
        return float(m.group(1)) * _ANGLE_UNITS[m.group(2).lower()]
    words = part.lower().split()
    if words and words[0] == "to":
        key = frozenset(words[1:])
        if len(words) > 3 or key not in _SIDES:
            raise ParseError(f"Invalid gradient direction {part!r}")
        return _SIDES[key]
    return None


def _is_radial_shape(part: str) -> bool:
    words = part.lower().split()
    return bool(words) and words[0] in _RADIAL_SHAPE_WORDS


def _parse_stop(part: str) -> tuple[object, Optional[float]]:
    m = _STOP_RE.match(part)
    if not m:
        raise ParseError(f"Invalid color stop {part!r}")
    color = parse_color(m.group("color"))
    pos = m.group("pos")
    return color, (float(pos) if pos is not None else None)


def _fill_positions(positions: list[Optional[float]]) -> list[float]:
    """
    Place unpositioned stops: first at 0, last at 100, interior ones
    spread evenly between their nearest positioned neighbours.
    """
    filled = list(positions)
    if filled[0] is None:
        filled[0] = 0.0
    if filled[-1] is None:
        filled[-1] = 100.0
    i = 0
    while i < len(filled):
        if filled[i] is None:
            start = i - 1
            end = i
            while filled[end] is None:
                end += 1
            lo, hi = filled[start], filled[end]
            step = (hi - lo) / (end - start)
            for j in range(i, end):
                filled[j] = lo + step * (j - start)
            i = end
        i += 1
    return filled


def parse_gradient(text: str) -> GradientSpec:
    """
    Parse a CSS gradient string into a GradientSpec.

    Args:
        text: e.g. "linear-gradient(135deg, #ff9a9e 0%, #fad0c4 100%)"

    Returns:
        GradientSpec with stops clamped to [0, 100] and sorted by position.
        Linear gradients without an orientation get 135 degrees.

    Raises:
        ParseError: unknown function (e.g. conic-gradient), fewer than two
            stops, or a stop that cannot be tokenized. Bad colors raise
            ColorParseError, a ParseError subclass.
    """
    if not isinstance(text, str):
        raise ParseError(f"Expected gradient string, got {type(text).__name__}")
    s = text.strip().rstrip(";").strip()
    m = _GRADIENT_RE.match(s)
    if not m:
        raise ParseError(f"Not a gradient function: {text!r}")

    name = m.group(1).lower()
    kind = _KINDS.get(name)
    if kind is None:
        raise ParseError(f"Unsupported gradient type {name!r}")

    parts = _split_top_level(m.group(2))
    if any(not p for p in parts):
        raise ParseError(f"Empty argument in {text!r}")

    angle = DEFAULT_ANGLE
    shape: Optional[str] = None
    if kind == GradientKind.LINEAR:
        orientation = _parse_orientation(parts[0])
        if orientation is not None:
            angle = orientation
            parts = parts[1:]
    elif _is_radial_shape(parts[0]):
        shape = " ".join(parts[0].split())
        parts = parts[1:]

    if len(parts) < 2:
        raise ParseError(
            f"Gradient needs at least 2 color stops, got {len(parts)}: {text!r}"
        )

    colors = []
    positions: list[Optional[float]] = []
    for part in parts:
        try:
            color, pos = _parse_stop(part)
        except ColorParseError as e:
            raise ColorParseError(f"Invalid color stop {part!r}: {e}") from e
        colors.append(color)
        positions.append(pos)

    stops = tuple(
        ColorStop(color=c, position=p)
        for c, p in zip(colors, _fill_positions(positions))
    )
    return GradientSpec(kind=kind, stops=stops, angle=angle, shape=shape)


def serialize_gradient(spec: GradientSpec) -> str:
    """
    Serialize a GradientSpec back to CSS.

    parse_gradient(serialize_gradient(spec)) reproduces the spec up to
    numeric rounding.
    """
    stops = ", ".join(stop.to_css() for stop in spec.stops)
    if spec.kind == GradientKind.LINEAR:
        return f"linear-gradient({format_number(spec.angle)}deg, {stops})"
    if spec.kind == GradientKind.RADIAL:
        prefix = f"{spec.shape}, " if spec.shape else ""
        return f"radial-gradient({prefix}{stops})"
    raise ParseError(f"Cannot serialize gradient kind {spec.kind!r}")
