# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""
Contrast analysis of a raster grid against a text color.

Every sample is compared with the text color using the WCAG contrast
ratio and classified as Fail / AA / AAA. Statistics are computed over the
uniform sample grid (no area weighting beyond the sampling itself).
"""

from __future__ import annotations

from typing import Sequence, Union

import numpy as np
from numpy.typing import NDArray

from legibly.errors import ColorParseError, InvalidConfigError
from legibly.measure.colors import resolve_rgb
from legibly.measure.colorspace import contrast_ratio, relative_luminance
from legibly.measure.parser import parse_gradient
from legibly.measure.raster import DEFAULT_GRID, rasterize
from legibly.schema import (
    AA_THRESHOLD,
    AAA_THRESHOLD,
    ColorValue,
    ComplianceCategory,
    ContrastResult,
    GradientSpec,
)


TextColor = Union[str, ColorValue, Sequence[float]]


def resolve_text_color(text_color: TextColor) -> tuple[float, float, float]:
    """
    Resolve a text color to sRGB (0-255).

    Accepts a CSS color string, a ColorValue or an (r, g, b) triple.

    Raises:
        InvalidConfigError: the color cannot be resolved
    """
    if isinstance(text_color, str) or hasattr(text_color, "to_rgb"):
        try:
            return resolve_rgb(text_color)
        except ColorParseError as e:
            raise InvalidConfigError(f"Cannot resolve text color: {e}") from e

    try:
        rgb = tuple(float(v) for v in text_color)
    except (TypeError, ValueError) as e:
        raise InvalidConfigError(f"Cannot resolve text color {text_color!r}") from e
    if len(rgb) != 3 or not all(0.0 <= v <= 255.0 for v in rgb):
        raise InvalidConfigError(f"Text color must be an sRGB triple, got {text_color!r}")
    return rgb


def classify(ratios: NDArray[np.float64]) -> NDArray[np.uint8]:
    """Vectorized ComplianceCategory.from_ratio."""
    return np.where(
        ratios >= AAA_THRESHOLD,
        int(ComplianceCategory.AAA),
        np.where(
            ratios >= AA_THRESHOLD,
            int(ComplianceCategory.AA),
            int(ComplianceCategory.FAIL),
        ),
    ).astype(np.uint8)


def analyze(raster: NDArray[np.uint8], text_color: TextColor) -> ContrastResult:
    """
    Compute the per-sample compliance map and aggregate statistics.

    Args:
        raster: Array of shape (N, N, 3) with sRGB samples (0-255)
        text_color: Text color as CSS string, ColorValue or (r, g, b)

    Returns:
        ContrastResult whose category map follows the raster's row-major order

    Raises:
        InvalidConfigError: empty or non-square grid, or unresolvable text color
    """
    raster = np.asarray(raster)
    if raster.ndim != 3 or raster.shape[2] != 3 or raster.shape[0] != raster.shape[1]:
        raise InvalidConfigError(f"Expected (N, N, 3) raster, got shape {raster.shape}")
    grid = raster.shape[0]
    if grid <= 0:
        raise InvalidConfigError(f"Grid size must be positive, got {grid}")

    text_lum = relative_luminance(resolve_text_color(text_color))

    ratios = contrast_ratio(relative_luminance(raster), text_lum).reshape(-1)
    categories = classify(ratios)
    counts = np.bincount(categories, minlength=3)

    return ContrastResult(
        min=float(ratios.min()),
        max=float(ratios.max()),
        avg=float(ratios.sum() / (grid * grid)),
        grid=grid,
        aaa_count=int(counts[ComplianceCategory.AAA]),
        aa_count=int(counts[ComplianceCategory.AA]),
        fail_count=int(counts[ComplianceCategory.FAIL]),
        category_map=categories,
    )


def check_gradient(
    gradient: Union[str, GradientSpec],
    text_color: TextColor,
    grid: int = DEFAULT_GRID,
) -> ContrastResult:
    """
    Full pipeline: parse (if needed) → rasterize → analyze.

    Raises:
        ParseError: the gradient string is malformed
        InvalidConfigError: bad grid or text color
    """
    spec = parse_gradient(gradient) if isinstance(gradient, str) else gradient
    return analyze(rasterize(spec, grid), text_color)


def contrast_from_colors(color1: TextColor, color2: TextColor) -> float:
    """WCAG contrast ratio between two colors."""
    return contrast_ratio(
        relative_luminance(resolve_text_color(color1)),
        relative_luminance(resolve_text_color(color2)),
    )
