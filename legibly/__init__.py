# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""
Legibly -- WCAG text contrast over CSS gradients.

Samples a gradient on a square grid, measures the contrast of a text color
against every sample, and suggests text colors or gradient adjustments
that read better.

Quick start::

    from legibly import check_gradient, suggest_gradient_fixes

    r = check_gradient("linear-gradient(135deg, #1e3a8a 0%, #f59e0b 100%)", "#fff")
    r.min, r.pass_rate, r.rating
    r.category_at(0, 0)

    fixes = suggest_gradient_fixes("linear-gradient(#ccc 0%, #eee 100%)", "#fff")
    fixes[0].css
"""

from __future__ import annotations

__version__ = "1.0.0"

from legibly.errors import (
    ColorParseError,
    InvalidConfigError,
    LegiblyError,
    ParseError,
    UnsupportedGradientError,
)
from legibly.measure import (
    analyze,
    check_gradient,
    parse_gradient,
    rasterize,
    suggest_gradient_fixes,
    suggest_text_colors,
)
from legibly.schema import (
    ColorStop,
    ComplianceCategory,
    ContrastResult,
    GradientKind,
    GradientSpec,
    GradientSuggestion,
    SuggestedColor,
)

__all__ = [
    # Core API
    "parse_gradient",
    "rasterize",
    "analyze",
    "check_gradient",
    "suggest_text_colors",
    "suggest_gradient_fixes",
    # Types (commonly needed)
    "GradientKind",
    "ColorStop",
    "GradientSpec",
    "ComplianceCategory",
    "ContrastResult",
    "SuggestedColor",
    "GradientSuggestion",
    # Errors
    "LegiblyError",
    "ParseError",
    "ColorParseError",
    "InvalidConfigError",
    "UnsupportedGradientError",
    # Version
    "__version__",
]
