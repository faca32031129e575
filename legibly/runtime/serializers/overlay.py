# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""
Compliance overlay image export.

Paints each cell of a ContrastResult's category map: Fail red, AA yellow,
AAA green, each semi-transparent so the overlay can sit on the gradient.
"""

from __future__ import annotations

import numpy as np

from legibly.schema import ContrastResult

# RGBA indexed by ComplianceCategory value
OVERLAY_COLORS = np.array([
    [239, 68, 68, 230],   # FAIL
    [234, 179, 8, 204],   # AA
    [34, 197, 94, 153],   # AAA
], dtype=np.uint8)


def overlay_array(result: ContrastResult) -> np.ndarray:
    """Category map as an (N, N, 4) uint8 RGBA array."""
    return OVERLAY_COLORS[result.category_map].reshape(result.grid, result.grid, 4)


def render_overlay(result: ContrastResult, scale: int = 1):
    """Render the category map as a Pillow RGBA image.

    Args:
        result: Analysis result to visualize.
        scale: Integer upscaling factor (nearest neighbour, cells stay sharp).

    Returns:
        PIL.Image.Image of size (grid * scale, grid * scale).
    """
    if scale < 1:
        raise ValueError(f"scale must be >= 1, got {scale}")
    try:
        from PIL import Image
    except ImportError as e:
        raise ImportError(
            "Pillow is required for overlay export. "
            "Install with: pip install Pillow"
        ) from e

    img = Image.fromarray(overlay_array(result))
    if scale > 1:
        size = result.grid * scale
        img = img.resize((size, size), resample=Image.Resampling.NEAREST)
    return img
