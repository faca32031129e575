# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""
Analysis and suggestion results.

Results are derived values: they are recomputed wholesale whenever the
gradient or the text color changes and are never patched in place.

WCAG thresholds (normal text):
- AA:  contrast ratio >= 4.5
- AAA: contrast ratio >= 7.0
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

import numpy as np
from numpy.typing import NDArray

from legibly.schema.gradient import GradientSpec


AA_THRESHOLD = 4.5
AAA_THRESHOLD = 7.0


class ComplianceCategory(IntEnum):
    """WCAG compliance tier of a single sample."""
    FAIL = 0
    AA = 1
    AAA = 2

    @classmethod
    def from_ratio(cls, ratio: float) -> ComplianceCategory:
        """Classify a contrast ratio. Monotonic in ratio."""
        if ratio >= AAA_THRESHOLD:
            return cls.AAA
        if ratio >= AA_THRESHOLD:
            return cls.AA
        return cls.FAIL


def rating_label(pass_pct: float) -> str:
    """Coarse verdict from the share of AA-or-better samples (0-100)."""
    if pass_pct >= 80:
        return "Good"
    if pass_pct >= 40:
        return "Fair"
    return "Poor"


@dataclass(frozen=True, slots=True)
class ContrastResult:
    """
    Per-sample compliance map plus aggregate statistics.

    Attributes:
        min, max, avg: Contrast ratio statistics over all grid² samples
        grid: Grid resolution N (the map has N*N entries)
        aaa_count, aa_count, fail_count: Samples per category (sum to N*N).
            aa_count counts AA-only samples, not AA-or-better.
        category_map: Read-only uint8 array of ComplianceCategory values,
            row-major, same order as the raster grid
    """
    min: float
    max: float
    avg: float
    grid: int
    aaa_count: int
    aa_count: int
    fail_count: int
    category_map: NDArray[np.uint8] = field(compare=False, repr=False)

    def __post_init__(self) -> None:
        total = self.grid * self.grid
        if self.aaa_count + self.aa_count + self.fail_count != total:
            raise ValueError(
                f"Category counts must sum to {total}, got "
                f"{self.aaa_count + self.aa_count + self.fail_count}"
            )
        cmap = np.array(self.category_map, dtype=np.uint8).reshape(-1)
        if cmap.size != total:
            raise ValueError(
                f"Category map must have {total} entries, got {cmap.size}"
            )
        cmap.flags.writeable = False
        object.__setattr__(self, "category_map", cmap)

    @property
    def total(self) -> int:
        return self.grid * self.grid

    @property
    def pass_rate(self) -> float:
        """Share of samples at AA or better."""
        return (self.aaa_count + self.aa_count) / self.total

    @property
    def rating(self) -> str:
        return rating_label(self.pass_rate * 100)

    def category_at(self, row: int, col: int) -> ComplianceCategory:
        """Category of the sample at (row, col)."""
        if not (0 <= row < self.grid and 0 <= col < self.grid):
            raise IndexError(f"Cell ({row}, {col}) outside {self.grid}x{self.grid} grid")
        return ComplianceCategory(int(self.category_map[row * self.grid + col]))

    def percentages(self) -> dict[str, float]:
        """Share of samples per category, in percent."""
        total = self.total
        return {
            "aaa": self.aaa_count / total * 100,
            "aa": self.aa_count / total * 100,
            "fail": self.fail_count / total * 100,
        }

    def to_dict(self, include_map: bool = True) -> dict:
        """Serialize to dictionary."""
        result = {
            "min": self.min,
            "max": self.max,
            "avg": self.avg,
            "grid": self.grid,
            "aaa_count": self.aaa_count,
            "aa_count": self.aa_count,
            "fail_count": self.fail_count,
            "pass_rate": self.pass_rate,
        }
        if include_map:
            result["category_map"] = self.category_map.tolist()
        return result

    @classmethod
    def from_dict(cls, data: dict) -> ContrastResult:
        """Deserialize from dictionary (requires the category map)."""
        return cls(
            min=data["min"],
            max=data["max"],
            avg=data["avg"],
            grid=data["grid"],
            aaa_count=data["aaa_count"],
            aa_count=data["aa_count"],
            fail_count=data["fail_count"],
            category_map=np.asarray(data["category_map"], dtype=np.uint8),
        )

    def to_json(self, indent: Optional[int] = 2, include_map: bool = True) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(include_map=include_map), indent=indent)


@dataclass(frozen=True, slots=True)
class SuggestedColor:
    """
    Candidate replacement text color.

    Attributes:
        hex: Lowercase #rrggbb
        ratio: Contrast against the stop background it was derived from
        perceptual_distance: Lab ΔE from the current text color (0 if none given)
    """
    hex: str
    ratio: float
    perceptual_distance: float = 0.0

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "hex": self.hex,
            "ratio": self.ratio,
            "perceptual_distance": self.perceptual_distance,
        }

    @classmethod
    def from_dict(cls, data: dict) -> SuggestedColor:
        """Deserialize from dictionary."""
        return cls(
            hex=data["hex"],
            ratio=data["ratio"],
            perceptual_distance=data.get("perceptual_distance", 0.0),
        )


@dataclass(frozen=True, slots=True)
class GradientSuggestion:
    """
    Candidate replacement gradient.

    Attributes:
        spec: The proposed gradient
        min_ratio: Worst-sample contrast against the text color
        perceptual_distance: Average Lab ΔE of the stops vs. the original
        guaranteed: True when synthesized specifically to reach AA rather
            than found by the general search
    """
    spec: GradientSpec
    min_ratio: float
    perceptual_distance: float
    guaranteed: bool = False

    @property
    def css(self) -> str:
        return self.spec.to_css()

    @property
    def passes_aa(self) -> bool:
        return self.min_ratio >= AA_THRESHOLD

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "css": self.css,
            "min_ratio": self.min_ratio,
            "perceptual_distance": self.perceptual_distance,
            "guaranteed": self.guaranteed,
        }

    @classmethod
    def from_dict(cls, data: dict) -> GradientSuggestion:
        """Deserialize from dictionary."""
        from legibly.measure.parser import parse_gradient
        return cls(
            spec=parse_gradient(data["css"]),
            min_ratio=data["min_ratio"],
            perceptual_distance=data["perceptual_distance"],
            guaranteed=data.get("guaranteed", False),
        )
