# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""
Color space conversions and contrast math.

Conversion chains:
- sRGB → Linear RGB → relative luminance (WCAG)
- sRGB → Linear RGB → OKLab → OKLCH (lightness shifts)
- sRGB → Linear RGB → XYZ (D65) → CIELAB (perceptual distance)

References:
- WCAG 2.x relative luminance and contrast ratio
- OKLab: https://bottosson.github.io/posts/oklab/
- CIELAB / CIE76 ΔE

sRGB inputs to the public helpers are in the 0-255 range, matching raster
samples. All conversions are pure NumPy and accept arrays of shape (..., 3).
"""

from __future__ import annotations

from typing import Union

import numpy as np
from numpy.typing import ArrayLike, NDArray


# =============================================================================
# WCAG luminance and contrast
# =============================================================================


def srgb_channel_to_linear(v: ArrayLike) -> NDArray[np.float64]:
    """
    Linearize sRGB channel values normalized to [0, 1] (WCAG formula).

    - v <= 0.03928: v / 12.92
    - otherwise:    ((v + 0.055) / 1.055) ^ 2.4
    """
    v = np.asarray(v, dtype=np.float64)
    return np.where(
        v <= 0.03928,
        v / 12.92,
        np.power((np.maximum(v, 0.0) + 0.055) / 1.055, 2.4),
    )


_LUMA_WEIGHTS = np.array([0.2126, 0.7152, 0.0722], dtype=np.float64)


def relative_luminance(rgb: ArrayLike) -> Union[float, NDArray[np.float64]]:
    """
    WCAG relative luminance of sRGB color(s) in 0-255.

    Args:
        rgb: Array of shape (..., 3)

    Returns:
        Luminance in [0, 1]; a float for a single color, else shape (...)
    """
    rgb = np.asarray(rgb, dtype=np.float64) / 255.0
    lum = srgb_channel_to_linear(rgb) @ _LUMA_WEIGHTS
    if np.ndim(lum) == 0:
        return float(lum)
    return lum


def contrast_ratio(l1: ArrayLike, l2: ArrayLike) -> Union[float, NDArray[np.float64]]:
    """
    WCAG contrast ratio between two relative luminances.

    Symmetric, in [1, 21], equal to 1 iff l1 == l2. Broadcasts over arrays.
    """
    l1 = np.asarray(l1, dtype=np.float64)
    l2 = np.asarray(l2, dtype=np.float64)
    ratio = (np.maximum(l1, l2) + 0.05) / (np.minimum(l1, l2) + 0.05)
    if np.ndim(ratio) == 0:
        return float(ratio)
    return ratio


def contrast_between(rgb1: ArrayLike, rgb2: ArrayLike) -> float:
    """Contrast ratio between two sRGB colors (0-255)."""
    return contrast_ratio(relative_luminance(rgb1), relative_luminance(rgb2))


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB (IEC 61966-2-1 threshold).

    Used by the OKLab and CIELAB chains. Luminance uses
    srgb_channel_to_linear, which keeps the WCAG threshold.
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((np.maximum(srgb, 0.0) + 0.055) / 1.055, 2.4),
    )


def linear_to_srgb(linear: ArrayLike) -> NDArray[np.float64]:
    """Convert linear RGB to sRGB values [0,1]. Inverse of srgb_to_linear."""
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    srgb = np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055,
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# Linear RGB ↔ OKLab ↔ OKLCH
# =============================================================================

# Linear sRGB to LMS (cone responses)
_M1 = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
], dtype=np.float64)

# LMS to OKLab
_M2 = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
], dtype=np.float64)

_M1_INV = np.linalg.inv(_M1)
_M2_INV = np.linalg.inv(_M2)


def linear_rgb_to_oklab(rgb: ArrayLike) -> NDArray[np.float64]:
    """Convert linear RGB (..., 3) to OKLab (L, a, b)."""
    rgb = np.asarray(rgb, dtype=np.float64)
    lms = np.einsum('...j,ij->...i', rgb, _M1)
    lms_cbrt = np.cbrt(lms)
    return np.einsum('...j,ij->...i', lms_cbrt, _M2)


def oklab_to_linear_rgb(lab: ArrayLike) -> NDArray[np.float64]:
    """Convert OKLab (..., 3) to linear RGB (may be out of gamut)."""
    lab = np.asarray(lab, dtype=np.float64)
    lms = np.einsum('...j,ij->...i', lab, _M2_INV) ** 3
    return np.einsum('...j,ij->...i', lms, _M1_INV)


def oklab_to_oklch(lab: ArrayLike) -> NDArray[np.float64]:
    """Convert OKLab to OKLCH. Hue in degrees [0, 360)."""
    lab = np.asarray(lab, dtype=np.float64)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]
    C = np.sqrt(a**2 + b**2)
    H = np.degrees(np.arctan2(b, a)) % 360.0
    return np.stack([L, C, H], axis=-1)


def oklch_to_oklab(lch: ArrayLike) -> NDArray[np.float64]:
    """Convert OKLCH (hue in degrees) to OKLab."""
    lch = np.asarray(lch, dtype=np.float64)
    L, C = lch[..., 0], lch[..., 1]
    H_rad = np.radians(lch[..., 2])
    return np.stack([L, C * np.cos(H_rad), C * np.sin(H_rad)], axis=-1)


def srgb_to_oklab(rgb: ArrayLike) -> NDArray[np.float64]:
    """Convert sRGB (0-255) to OKLab."""
    rgb = np.asarray(rgb, dtype=np.float64) / 255.0
    return linear_rgb_to_oklab(srgb_to_linear(rgb))


def srgb_to_oklch(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB (0-255) to OKLCH.

    Returns:
        Array of shape (..., 3): L in [0, 1], C >= 0, H in degrees [0, 360)
    """
    return oklab_to_oklch(srgb_to_oklab(rgb))


def oklch_to_srgb(lch: ArrayLike) -> NDArray[np.float64]:
    """
    Convert OKLCH to sRGB (0-255).

    Out-of-gamut results are clipped per channel.
    """
    linear = oklab_to_linear_rgb(oklch_to_oklab(lch))
    return linear_to_srgb(linear) * 255.0


def oklch_to_hex(L: float, C: float, H: float) -> str:
    """Convert OKLCH to a lowercase #rrggbb string (gamut clipped)."""
    srgb = oklch_to_srgb(np.array([L, C, H], dtype=np.float64))
    if not np.all(np.isfinite(srgb)):
        raise ValueError(f"OKLCH ({L}, {C}, {H}) has no sRGB value")
    r, g, b = np.clip(np.floor(srgb + 0.5), 0, 255).astype(int)
    return f"#{r:02x}{g:02x}{b:02x}"


def shift_lightness(rgb: ArrayLike, delta: float) -> str:
    """
    Shift the OKLCH lightness of an sRGB color, keeping chroma and hue.

    Args:
        rgb: sRGB triple (0-255)
        delta: Lightness offset on the 0-1 scale; the result is clamped to [0, 1]

    Returns:
        Hex string of the shifted color
    """
    L, C, H = (float(v) for v in srgb_to_oklch(rgb))
    if not np.isfinite(L):
        raise ValueError(f"Cannot derive lightness from {rgb!r}")
    new_L = min(1.0, max(0.0, L + delta))
    return oklch_to_hex(new_L, C, H)


# =============================================================================
# Linear RGB ↔ XYZ ↔ CIELAB (D65)
# =============================================================================

_RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

_XYZ_TO_RGB = np.linalg.inv(_RGB_TO_XYZ)

_WHITE_D65 = np.array([0.95047, 1.0, 1.08883], dtype=np.float64)

_LAB_EPSILON = 216.0 / 24389.0
_LAB_KAPPA = 24389.0 / 27.0


def srgb_to_lab(rgb: ArrayLike) -> NDArray[np.float64]:
    """
    Convert sRGB (0-255) to CIELAB (D65).

    Returns:
        Array of shape (..., 3): L in [0, 100], a, b roughly in [-128, 127]
    """
    rgb = np.asarray(rgb, dtype=np.float64) / 255.0
    xyz = np.einsum('...j,ij->...i', srgb_to_linear(rgb), _RGB_TO_XYZ) / _WHITE_D65
    f = np.where(
        xyz > _LAB_EPSILON,
        np.cbrt(xyz),
        (_LAB_KAPPA * xyz + 16.0) / 116.0,
    )
    L = 116.0 * f[..., 1] - 16.0
    a = 500.0 * (f[..., 0] - f[..., 1])
    b = 200.0 * (f[..., 1] - f[..., 2])
    return np.stack([L, a, b], axis=-1)


def lab_to_srgb(lab: ArrayLike) -> NDArray[np.float64]:
    """Convert CIELAB (D65) to sRGB (0-255), clipped to gamut."""
    lab = np.asarray(lab, dtype=np.float64)
    fy = (lab[..., 0] + 16.0) / 116.0
    fx = fy + lab[..., 1] / 500.0
    fz = fy - lab[..., 2] / 200.0
    f = np.stack([fx, fy, fz], axis=-1)
    xyz = np.where(
        f ** 3 > _LAB_EPSILON,
        f ** 3,
        (116.0 * f - 16.0) / _LAB_KAPPA,
    ) * _WHITE_D65
    linear = np.einsum('...j,ij->...i', xyz, _XYZ_TO_RGB)
    return linear_to_srgb(linear) * 255.0


# =============================================================================
# ΔE Distance (CIE76)
# =============================================================================


def perceptual_distance(rgb1: ArrayLike, rgb2: ArrayLike) -> float:
    """
    CIE76 ΔE between two sRGB colors (0-255).

    Euclidean distance in CIELAB: sqrt(ΔL² + Δa² + Δb²).

    Reference thresholds:
    - ΔE ≈ 2.3: just noticeable difference
    - ΔE ≈ 10: clearly distinct swatches
    - ΔE ≈ 20+: different colors at a glance
    """
    delta = srgb_to_lab(rgb1) - srgb_to_lab(rgb2)
    return float(np.sqrt(np.sum(delta ** 2)))


def perceptual_distance_batch(
    colors1: ArrayLike,
    colors2: ArrayLike,
) -> NDArray[np.float64]:
    """Vectorized CIE76 ΔE for arrays of sRGB colors of shape (N, 3)."""
    delta = srgb_to_lab(colors1) - srgb_to_lab(colors2)
    return np.sqrt(np.sum(delta ** 2, axis=-1))
