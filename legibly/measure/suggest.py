# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""
Suggestion engine: alternative text colors and alternative gradients.

Two searches share the rasterize + analyze pipeline as their scoring
oracle:

1. Text colors: an HSL lightness ladder per stop, ranked by contrast and
   thinned so no two suggestions are within ΔE 10 of each other.
2. Gradient fixes: single-stop OKLCH lightness shifts, kept when they
   raise the worst-sample contrast. Large candidate pools are reduced with
   k-means over mean OKLab coordinates so the returned set is diverse. If
   nothing reaches AA, a uniform shift (or, failing that, a solid
   black/white gradient) is synthesized and flagged as guaranteed.

Candidate evaluation never raises: a candidate that cannot be built or
scored is logged and skipped. Only an unusable input (bad gradient string,
bad text color, bad grid) is reported to the caller.
"""

from __future__ import annotations

import colorsys
import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Union

import numpy as np

from legibly.errors import InvalidConfigError, LegiblyError, ParseError
from legibly.measure.clustering import kmeans
from legibly.measure.colorspace import (
    contrast_between,
    perceptual_distance,
    shift_lightness,
    srgb_to_oklab,
    srgb_to_oklch,
)
from legibly.measure.contrast import TextColor, analyze, resolve_text_color
from legibly.measure.parser import parse_gradient
from legibly.measure.raster import DEFAULT_GRID, rasterize, validate_grid
from legibly.schema import (
    AA_THRESHOLD,
    DEFAULT_ANGLE,
    ColorStop,
    GradientKind,
    GradientSpec,
    GradientSuggestion,
    HexColor,
    SuggestedColor,
    rgb_to_hex,
)

logger = logging.getLogger(__name__)

RGB = tuple[float, float, float]


@dataclass(frozen=True, slots=True)
class SuggestionConfig:
    """
    Tuning for both searches.

    Attributes:
        lightness_targets: HSL lightness ladder for text color candidates
        text_diversity_floor: Minimum Lab ΔE between suggested text colors
        stop_deltas: OKLCH lightness shifts (percent) tried per stop
        guarantee_deltas: Uniform shifts (percent) tried when nothing passes AA
        improvement_epsilon: Required gain in minimum ratio over the baseline
        distinct_floor: Minimum Lab ΔE between first stops of chosen gradients
        kmeans_iterations: Refinement rounds for diversity clustering
        aa_threshold: Ratio the guarantee step must reach
        light_text_threshold: OKLCH lightness above which text counts as light
    """
    lightness_targets: tuple[float, ...] = (
        0.05, 0.15, 0.25, 0.35, 0.45, 0.55, 0.65, 0.75, 0.85, 0.95,
    )
    text_diversity_floor: float = 10.0
    stop_deltas: tuple[float, ...] = (2, 4, 6, 8, 10, 12, 14, 16)
    guarantee_deltas: tuple[float, ...] = (
        2, 4, 6, 8, 10, 12, 15, 20, 25, 30, 35, 40, 50, 60, 70, 80, 90, 100,
    )
    improvement_epsilon: float = 0.05
    distinct_floor: float = 20.0
    kmeans_iterations: int = 10
    aa_threshold: float = AA_THRESHOLD
    light_text_threshold: float = 0.5

    def __post_init__(self) -> None:
        if not self.lightness_targets:
            raise ValueError("lightness_targets cannot be empty")
        if any(not 0.0 <= l <= 1.0 for l in self.lightness_targets):
            raise ValueError("lightness_targets must be within 0-1")
        if not self.stop_deltas or not self.guarantee_deltas:
            raise ValueError("Delta ladders cannot be empty")
        if any(d <= 0 for d in self.stop_deltas + self.guarantee_deltas):
            raise ValueError("Lightness deltas must be positive")
        if self.kmeans_iterations < 1:
            raise ValueError(f"kmeans_iterations must be >= 1, got {self.kmeans_iterations}")


DEFAULT_CONFIG = SuggestionConfig()


# =============================================================================
# Text color suggestions
# =============================================================================


def suggest_text_colors(
    gradient: Union[str, GradientSpec],
    count: int = 6,
    *,
    text_color: Optional[TextColor] = None,
    config: SuggestionConfig = DEFAULT_CONFIG,
) -> list[SuggestedColor]:
    """
    Suggest up to `count` visually distinct text colors for a gradient.

    For each stop, candidates keep the stop's HSL hue and saturation and
    walk a fixed lightness ladder. Candidates are ranked by contrast against
    that stop and accepted greedily while staying at least
    `text_diversity_floor` ΔE away from everything already accepted.

    Args:
        gradient: Gradient string or parsed spec
        count: Maximum number of suggestions
        text_color: Current text color; when given, each suggestion reports
            its ΔE from it
        config: Search tuning

    Returns:
        Suggestions ordered by descending ratio. An unparsable gradient
        string yields an empty list rather than an error.
    """
    if isinstance(gradient, str):
        try:
            spec = parse_gradient(gradient)
        except ParseError as e:
            logger.debug("No text color suggestions for unparsable gradient: %s", e)
            return []
    else:
        spec = gradient
    if count <= 0:
        return []

    current = resolve_text_color(text_color) if text_color is not None else None

    candidates: dict[str, tuple[SuggestedColor, RGB]] = {}
    for stop in spec.stops:
        try:
            background = stop.color.to_rgb()
            h, _, s = colorsys.rgb_to_hls(*(v / 255.0 for v in background))
        except ValueError as e:
            logger.debug("Skipping stop %r: %s", stop, e)
            continue

        for lightness in config.lightness_targets:
            r, g, b = colorsys.hls_to_rgb(h, lightness, s)
            hex_value = rgb_to_hex((r * 255.0, g * 255.0, b * 255.0))
            if hex_value in candidates:
                continue
            rgb = HexColor(hex_value).to_rgb()
            distance = perceptual_distance(rgb, current) if current is not None else 0.0
            candidates[hex_value] = (
                SuggestedColor(
                    hex=hex_value,
                    ratio=contrast_between(rgb, background),
                    perceptual_distance=distance,
                ),
                rgb,
            )

    ranked = sorted(candidates.values(), key=lambda item: item[0].ratio, reverse=True)

    accepted: list[SuggestedColor] = []
    accepted_rgb: list[RGB] = []
    for suggestion, rgb in ranked:
        if any(
            perceptual_distance(rgb, other) < config.text_diversity_floor
            for other in accepted_rgb
        ):
            continue
        accepted.append(suggestion)
        accepted_rgb.append(rgb)
        if len(accepted) >= count:
            break

    return accepted


# =============================================================================
# Gradient fix suggestions
# =============================================================================


def _shift_stops(
    spec: GradientSpec,
    indices: Iterable[int],
    delta: float,
) -> GradientSpec:
    """Shift the OKLCH lightness of the given stops by delta (0-1 scale)."""
    targets = set(indices)
    stops = tuple(
        ColorStop(
            color=HexColor(shift_lightness(stop.color.to_rgb(), delta)),
            position=stop.position,
        )
        if i in targets else stop
        for i, stop in enumerate(spec.stops)
    )
    return spec.with_stops(stops)


def _min_ratio(spec: GradientSpec, text_rgb: RGB, grid: int) -> float:
    return analyze(rasterize(spec, grid), text_rgb).min


def _average_distance(spec: GradientSpec, original: Sequence[RGB]) -> float:
    """Mean Lab ΔE between corresponding stops."""
    distances = [
        perceptual_distance(stop.color.to_rgb(), rgb)
        for stop, rgb in zip(spec.stops, original)
    ]
    return float(np.mean(distances))


def _mean_oklab(spec: GradientSpec) -> np.ndarray:
    rgb = np.array([stop.color.to_rgb() for stop in spec.stops], dtype=np.float64)
    return srgb_to_oklab(rgb).mean(axis=0)


def _first_stop_rgb(suggestion: GradientSuggestion) -> RGB:
    return suggestion.spec.stops[0].color.to_rgb()


class _CandidateJob:
    """Builds and scores one shifted variant; failures return None."""

    def __init__(self, spec: GradientSpec, text_rgb: RGB, grid: int) -> None:
        self.spec = spec
        self.text_rgb = text_rgb
        self.grid = grid

    def __call__(
        self, variant: tuple[tuple[int, ...], float]
    ) -> Optional[tuple[GradientSpec, float]]:
        indices, delta = variant
        try:
            candidate = _shift_stops(self.spec, indices, delta)
            return candidate, _min_ratio(candidate, self.text_rgb, self.grid)
        except (LegiblyError, ValueError) as e:
            logger.debug("Excluding candidate (stops=%s, delta=%+.2f): %s", indices, delta, e)
            return None


def _evaluate(
    job: _CandidateJob,
    variants: list[tuple[tuple[int, ...], float]],
    workers: int,
) -> list[Optional[tuple[GradientSpec, float]]]:
    """Score variants, optionally on a thread pool. Output order matches input."""
    if workers > 1 and len(variants) > 1:
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(job, variants))
    return [job(v) for v in variants]


def _unique_by_css(suggestions: Iterable[GradientSuggestion]) -> list[GradientSuggestion]:
    seen: set[str] = set()
    unique = []
    for s in suggestions:
        css = s.css
        if css not in seen:
            seen.add(css)
            unique.append(s)
    return unique


def _select_diverse(
    candidates: list[GradientSuggestion],
    k: int,
    config: SuggestionConfig,
) -> list[GradientSuggestion]:
    """
    Reduce a large candidate pool to at most k diverse suggestions.

    Candidates are clustered by the mean OKLab coordinate of their stops,
    with centroids seeded from the k best candidates. The best member of
    each cluster is kept if its first stop is at least `distinct_floor` ΔE
    from every suggestion already kept; remaining slots are backfilled from
    the whole pool under the same rule.
    """
    ranked = sorted(range(len(candidates)), key=lambda i: candidates[i].min_ratio, reverse=True)
    points = np.array([_mean_oklab(c.spec) for c in candidates])
    _, labels = kmeans(points, points[ranked[:k]], max_iter=config.kmeans_iterations)

    chosen = []
    for j in range(k):
        members = [i for i in ranked if labels[i] == j]
        if members:
            chosen.append(candidates[members[0]])
    logger.debug("Clustered %d candidates into %d non-empty clusters", len(candidates), len(chosen))

    selected: list[GradientSuggestion] = []

    def is_distinct(candidate: GradientSuggestion) -> bool:
        rgb = _first_stop_rgb(candidate)
        return all(
            perceptual_distance(rgb, _first_stop_rgb(s)) >= config.distinct_floor
            for s in selected
        )

    for candidate in sorted(chosen, key=lambda c: c.min_ratio, reverse=True):
        if len(selected) < k and is_distinct(candidate):
            selected.append(candidate)

    if len(selected) < k:
        taken = {s.css for s in selected}
        for i in ranked:
            if len(selected) >= k:
                break
            candidate = candidates[i]
            if candidate.css not in taken and is_distinct(candidate):
                selected.append(candidate)
                taken.add(candidate.css)

    return selected


def _solid(hex_value: str) -> GradientSpec:
    color = HexColor(hex_value)
    return GradientSpec(
        kind=GradientKind.LINEAR,
        stops=(ColorStop(color, 0.0), ColorStop(color, 100.0)),
        angle=DEFAULT_ANGLE,
    )


def _guarantee(
    spec: GradientSpec,
    text_rgb: RGB,
    grid: int,
    direction: int,
    original: Sequence[RGB],
    config: SuggestionConfig,
) -> GradientSuggestion:
    """
    Synthesize a suggestion that reaches AA.

    Tries uniform lightness shifts of every stop, primary direction first,
    then the opposite one. Falls back to a solid black (darkening) or white
    (lightening) gradient, switching to the other solid if the first one
    still misses AA.
    """
    all_stops = tuple(range(len(spec.stops)))
    job = _CandidateJob(spec, text_rgb, grid)

    for d in (direction, -direction):
        for delta in config.guarantee_deltas:
            result = job((all_stops, d * delta / 100.0))
            if result is None:
                continue
            candidate, ratio = result
            if ratio >= config.aa_threshold:
                logger.debug("Guaranteed fix from uniform shift %+g%%", d * delta)
                return GradientSuggestion(
                    spec=candidate,
                    min_ratio=ratio,
                    perceptual_distance=_average_distance(candidate, original),
                    guaranteed=True,
                )

    solids = ("#000000", "#ffffff") if direction < 0 else ("#ffffff", "#000000")
    fallback = None
    for hex_value in solids:
        solid = _solid(hex_value)
        ratio = _min_ratio(solid, text_rgb, grid)
        solid_rgb = solid.stops[0].color.to_rgb()
        distance = float(np.mean([perceptual_distance(solid_rgb, rgb) for rgb in original]))
        suggestion = GradientSuggestion(
            spec=solid, min_ratio=ratio, perceptual_distance=distance, guaranteed=True,
        )
        if fallback is None:
            fallback = suggestion
        if ratio >= config.aa_threshold:
            fallback = suggestion
            break
    logger.debug("Guaranteed fix from solid fallback %s", fallback.css)
    return fallback


def suggest_gradient_fixes(
    gradient: Union[str, GradientSpec],
    text_color: TextColor,
    grid: int = DEFAULT_GRID,
    max_suggestions: int = 6,
    *,
    config: SuggestionConfig = DEFAULT_CONFIG,
    workers: int = 1,
) -> list[GradientSuggestion]:
    """
    Suggest up to `max_suggestions` gradients with better text contrast.

    Light text (OKLCH L > 0.5) darkens stops, dark text lightens them. Each
    stop is shifted alone by every delta in the ladder; variants whose
    minimum ratio beats the baseline by more than `improvement_epsilon` are
    candidates. When the baseline already passes AA both directions are
    searched. Large pools are thinned for diversity, and if no result
    reaches AA a guaranteed suggestion is prepended.

    Args:
        gradient: Gradient string or parsed spec
        text_color: Text color as CSS string, ColorValue or (r, g, b)
        grid: Raster resolution used for scoring
        max_suggestions: Maximum number of results
        config: Search tuning
        workers: Threads used to score candidates (1 = serial). Results do
            not depend on this value.

    Returns:
        Suggestions, best first. Always contains at least one entry with
        min_ratio >= AA.

    Raises:
        ParseError: the gradient string is malformed
        InvalidConfigError: bad grid, text color or max_suggestions
    """
    spec = parse_gradient(gradient) if isinstance(gradient, str) else gradient
    grid = validate_grid(grid)
    if max_suggestions < 1:
        raise InvalidConfigError(f"max_suggestions must be >= 1, got {max_suggestions}")

    text_rgb = resolve_text_color(text_color)
    text_lightness = float(srgb_to_oklch(text_rgb)[0])
    direction = -1 if text_lightness > config.light_text_threshold else 1

    baseline = _min_ratio(spec, text_rgb, grid)
    logger.debug("Baseline min ratio %.3f, direction %+d", baseline, direction)

    original = [stop.color.to_rgb() for stop in spec.stops]
    directions = (direction, -direction) if baseline >= config.aa_threshold else (direction,)

    variants = [
        ((idx,), d * delta / 100.0)
        for d in directions
        for delta in config.stop_deltas
        for idx in range(len(spec.stops))
    ]
    job = _CandidateJob(spec, text_rgb, grid)

    candidates: list[GradientSuggestion] = []
    for result in _evaluate(job, variants, workers):
        if result is None:
            continue
        candidate, ratio = result
        if ratio - baseline > config.improvement_epsilon:
            candidates.append(GradientSuggestion(
                spec=candidate,
                min_ratio=ratio,
                perceptual_distance=_average_distance(candidate, original),
            ))
    logger.debug("%d improving candidates from %d variants", len(candidates), len(variants))

    if len(candidates) <= max_suggestions:
        ranked = sorted(candidates, key=lambda c: c.min_ratio, reverse=True)
        selected = _unique_by_css(ranked)[:max_suggestions]
    else:
        selected = _select_diverse(candidates, max_suggestions, config)

    if not any(s.min_ratio >= config.aa_threshold for s in selected):
        guaranteed = _guarantee(spec, text_rgb, grid, direction, original, config)
        selected = [guaranteed] + [s for s in selected if s.css != guaranteed.css]

    return selected[:max_suggestions]
