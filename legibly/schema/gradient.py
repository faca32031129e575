# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""
Gradient value types.

A GradientSpec is what the parser produces and what the rasterizer and
suggestion engine consume. It is immutable: every edit (a shifted stop,
a new angle) produces a new spec.

Invariants:
- Stops are ordered by ascending position (stable for equal positions)
- Positions are clamped to [0, 100]
- A spec has at least two stops
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable, Optional

from legibly.errors import InvalidConfigError
from legibly.schema.color import ColorValue, format_number


DEFAULT_ANGLE = 135.0


class GradientKind(Enum):
    """Gradient functions the engines understand."""
    LINEAR = "linear-gradient"
    RADIAL = "radial-gradient"


@dataclass(frozen=True, slots=True)
class ColorStop:
    """
    A single color stop.

    Attributes:
        color: Tagged color value
        position: Percentage along the gradient axis, clamped to [0, 100]
    """
    color: ColorValue
    position: float

    def __post_init__(self) -> None:
        position = float(self.position)
        if math.isnan(position):
            raise ValueError("Stop position must be a number")
        object.__setattr__(self, "position", min(100.0, max(0.0, position)))

    def to_css(self) -> str:
        return f"{self.color.to_css()} {format_number(self.position)}%"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"color": self.color.to_css(), "position": self.position}

    @classmethod
    def from_dict(cls, data: dict) -> ColorStop:
        """Deserialize from dictionary."""
        from legibly.measure.colors import parse_color
        return cls(color=parse_color(data["color"]), position=data["position"])


@dataclass(frozen=True, slots=True)
class GradientSpec:
    """
    Parsed gradient description.

    Attributes:
        kind: Linear or radial
        stops: Ordered color stops (at least 2)
        angle: Linear angle in degrees. Only affects rendering; contrast
            sampling uses a fixed diagonal axis.
        shape: Radial shape/position descriptor, kept verbatim for
            serialization (e.g. "circle at center"). None for linear.
    """
    kind: GradientKind
    stops: tuple[ColorStop, ...]
    angle: float = DEFAULT_ANGLE
    shape: Optional[str] = None

    def __post_init__(self) -> None:
        stops = tuple(self.stops)
        if len(stops) < 2:
            raise InvalidConfigError(
                f"Gradient needs at least 2 stops, got {len(stops)}"
            )
        # sorted() is stable, so stops sharing a position keep their order
        object.__setattr__(
            self, "stops", tuple(sorted(stops, key=lambda s: s.position))
        )
        if math.isnan(float(self.angle)):
            raise ValueError("Angle must be a number")

    @property
    def is_linear(self) -> bool:
        return self.kind == GradientKind.LINEAR

    def with_stops(self, stops: Iterable[ColorStop]) -> GradientSpec:
        """Return a copy with new stops (re-sorted)."""
        return replace(self, stops=tuple(stops))

    def to_css(self) -> str:
        """Serialize back to a CSS gradient string."""
        from legibly.measure.parser import serialize_gradient
        return serialize_gradient(self)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        result = {
            "kind": getattr(self.kind, "value", self.kind),
            "stops": [s.to_dict() for s in self.stops],
        }
        if self.is_linear:
            result["angle"] = self.angle
        if self.shape is not None:
            result["shape"] = self.shape
        return result

    @classmethod
    def from_dict(cls, data: dict) -> GradientSpec:
        """Deserialize from dictionary."""
        return cls(
            kind=GradientKind(data["kind"]),
            stops=tuple(ColorStop.from_dict(s) for s in data["stops"]),
            angle=data.get("angle", DEFAULT_ANGLE),
            shape=data.get("shape"),
        )
