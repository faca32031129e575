# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""
Software gradient rasterizer.

Produces an N×N grid of sRGB samples (uint8) from a GradientSpec by
interpolating stop colors directly. No graphics surface is involved, so
the result is identical on every platform.

Sampling geometry:
- Linear: a fixed diagonal axis from the top-left to the bottom-right
  corner. The spec's angle is NOT applied; contrast statistics are the
  same for every angle.
- Radial: Euclidean distance from the grid center, normalized against
  half the grid side and clamped to 1.

Samples are taken at pixel centers. Colors are blended component-wise in
sRGB (not in a perceptual space) and rounded half-up to integers.
"""

from __future__ import annotations

from typing import Callable

import numpy as np
from numpy.typing import NDArray

from legibly.errors import InvalidConfigError, UnsupportedGradientError
from legibly.schema import GradientKind, GradientSpec


DEFAULT_GRID = 100
GRID_MIN = 50
GRID_MAX = 200


def validate_grid(grid: int, strict: bool = False) -> int:
    """
    Check a grid resolution.

    Args:
        grid: Samples per side
        strict: Also require GRID_MIN <= grid <= GRID_MAX

    Raises:
        InvalidConfigError: non-integer or non-positive grid, or out of
            range when strict
    """
    if isinstance(grid, bool) or not isinstance(grid, (int, np.integer)):
        raise InvalidConfigError(f"Grid size must be an integer, got {grid!r}")
    if grid <= 0:
        raise InvalidConfigError(f"Grid size must be positive, got {grid}")
    if strict and not GRID_MIN <= grid <= GRID_MAX:
        raise InvalidConfigError(
            f"Grid size must be {GRID_MIN}-{GRID_MAX}, got {grid}"
        )
    return int(grid)


def _pixel_centers(grid: int) -> NDArray[np.float64]:
    return (np.arange(grid, dtype=np.float64) + 0.5) / grid


def _linear_positions(grid: int) -> NDArray[np.float64]:
    """Projection of each pixel center onto the top-left → bottom-right diagonal."""
    c = _pixel_centers(grid)
    return (c[:, np.newaxis] + c[np.newaxis, :]) / 2.0


def _radial_positions(grid: int) -> NDArray[np.float64]:
    """Distance of each pixel center from the grid center, over half the side."""
    c = _pixel_centers(grid) - 0.5
    dist = np.sqrt(c[:, np.newaxis] ** 2 + c[np.newaxis, :] ** 2) / 0.5
    return np.minimum(dist, 1.0)


_SAMPLERS: dict[GradientKind, Callable[[int], NDArray[np.float64]]] = {
    GradientKind.LINEAR: _linear_positions,
    GradientKind.RADIAL: _radial_positions,
}


def interpolate_stops(
    spec: GradientSpec,
    t: NDArray[np.float64],
) -> NDArray[np.float64]:
    """
    Evaluate the gradient at normalized positions.

    Args:
        spec: Gradient with stops sorted by position
        t: Array of positions in [0, 1]

    Returns:
        Array of shape t.shape + (3,) with float sRGB values (0-255).
        Positions before the first stop take its color, positions after the
        last stop take the last color. At a hard stop (two stops sharing a
        position) the later stop wins.
    """
    positions = np.array([s.position for s in spec.stops], dtype=np.float64) / 100.0
    colors = np.array([s.color.to_rgb() for s in spec.stops], dtype=np.float64)
    n = len(positions)

    idx = np.searchsorted(positions, t, side="right") - 1
    idx = np.clip(idx, 0, n - 2)

    p0 = positions[idx]
    p1 = positions[idx + 1]
    span = p1 - p0
    with np.errstate(divide="ignore", invalid="ignore"):
        frac = np.where(
            span > 0,
            (t - p0) / np.where(span > 0, span, 1.0),
            np.where(t >= p1, 1.0, 0.0),
        )
    frac = np.clip(frac, 0.0, 1.0)

    c0 = colors[idx]
    c1 = colors[idx + 1]
    return c0 + (c1 - c0) * frac[..., np.newaxis]


def rasterize(spec: GradientSpec, grid: int = DEFAULT_GRID) -> NDArray[np.uint8]:
    """
    Rasterize a gradient into an N×N grid of sRGB samples.

    Args:
        spec: Parsed gradient
        grid: Samples per side (N)

    Returns:
        uint8 array of shape (N, N, 3), row-major (row = y, col = x)

    Raises:
        InvalidConfigError: grid <= 0 or fewer than two stops
        UnsupportedGradientError: the spec's kind has no sampling model
    """
    grid = validate_grid(grid)
    if len(spec.stops) < 2:
        raise InvalidConfigError(
            f"Gradient needs at least 2 stops, got {len(spec.stops)}"
        )

    sampler = _SAMPLERS.get(spec.kind)
    if sampler is None:
        raise UnsupportedGradientError(f"No rasterizer for gradient kind {spec.kind!r}")

    rgb = interpolate_stops(spec, sampler(grid))
    return np.clip(np.floor(rgb + 0.5), 0, 255).astype(np.uint8)
