# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""
Schema definitions for gradients, colors and analysis results.

All types in this module are immutable (frozen dataclasses).
Results are recomputed from inputs, never edited.
"""

from legibly.schema.analysis import (
    AA_THRESHOLD,
    AAA_THRESHOLD,
    ComplianceCategory,
    ContrastResult,
    GradientSuggestion,
    SuggestedColor,
    rating_label,
)
from legibly.schema.color import (
    ColorValue,
    HexColor,
    HslColor,
    NamedColor,
    RgbColor,
    format_number,
    rgb_to_hex,
)
from legibly.schema.gradient import (
    DEFAULT_ANGLE,
    ColorStop,
    GradientKind,
    GradientSpec,
)
from legibly.schema.session import HistoryEntry, SavedGradient

__all__ = [
    # Thresholds
    "AA_THRESHOLD",
    "AAA_THRESHOLD",
    # Colors
    "ColorValue",
    "HexColor",
    "RgbColor",
    "HslColor",
    "NamedColor",
    "format_number",
    "rgb_to_hex",
    # Gradients
    "DEFAULT_ANGLE",
    "GradientKind",
    "ColorStop",
    "GradientSpec",
    # Results
    "ComplianceCategory",
    "ContrastResult",
    "SuggestedColor",
    "GradientSuggestion",
    "rating_label",
    # Session
    "HistoryEntry",
    "SavedGradient",
]
