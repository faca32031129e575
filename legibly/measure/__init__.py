# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""
Measurement core for Legibly.

Parses CSS gradients, rasterizes them onto a square sample grid and
measures WCAG contrast against a text color. All operations are pure and
deterministic: the same inputs always produce the same results.
"""

from legibly.measure.colors import parse_color, resolve_rgb
from legibly.measure.contrast import (
    analyze,
    check_gradient,
    classify,
    contrast_from_colors,
    resolve_text_color,
)
from legibly.measure.parser import parse_gradient, serialize_gradient
from legibly.measure.raster import (
    DEFAULT_GRID,
    GRID_MAX,
    GRID_MIN,
    interpolate_stops,
    rasterize,
    validate_grid,
)
from legibly.measure.suggest import (
    DEFAULT_CONFIG,
    SuggestionConfig,
    suggest_gradient_fixes,
    suggest_text_colors,
)

__all__ = [
    # Parsing
    "parse_color",
    "resolve_rgb",
    "parse_gradient",
    "serialize_gradient",
    # Rasterization
    "DEFAULT_GRID",
    "GRID_MIN",
    "GRID_MAX",
    "validate_grid",
    "interpolate_stops",
    "rasterize",
    # Contrast
    "analyze",
    "check_gradient",
    "classify",
    "contrast_from_colors",
    "resolve_text_color",
    # Suggestions
    "SuggestionConfig",
    "DEFAULT_CONFIG",
    "suggest_text_colors",
    "suggest_gradient_fixes",
]
