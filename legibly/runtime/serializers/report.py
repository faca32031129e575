# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""
JSON and plain-text output for analysis and suggestion results.

Serializers only format; they never recompute or round the stored values
(text reports round for display only).
"""

from __future__ import annotations

import json
from typing import Sequence, Union

from legibly.runtime.serializers.base import SerializerFormat
from legibly.schema import ContrastResult, GradientSuggestion, SuggestedColor

Suggestions = Sequence[Union[SuggestedColor, GradientSuggestion]]


def to_json(
    data: Union[ContrastResult, Suggestions],
    *,
    format: SerializerFormat = SerializerFormat.JSON_PRETTY,
    include_map: bool = True,
) -> str:
    """Serialize a ContrastResult or a list of suggestions as JSON.

    Args:
        data: A ContrastResult, or a list of SuggestedColor / GradientSuggestion.
        format: JSON (compact) or JSON_PRETTY.
        include_map: Include the per-sample category map (results only).

    Returns:
        JSON string.
    """
    if isinstance(data, ContrastResult):
        payload = data.to_dict(include_map=include_map)
    else:
        payload = [item.to_dict() for item in data]

    if format == SerializerFormat.JSON:
        return json.dumps(payload, separators=(",", ":"))
    return json.dumps(payload, indent=2)


def to_report(result: ContrastResult) -> str:
    """Plain-text summary of a ContrastResult.

    Example::

        Rating: Fair (62% of samples pass AA)
        Contrast: min 2.31  avg 5.02  max 8.90
        AAA 20.0%  AA 42.0%  Fail 38.0%
    """
    pct = result.percentages()
    return "\n".join([
        f"Rating: {result.rating} ({round(result.pass_rate * 100)}% of samples pass AA)",
        f"Contrast: min {result.min:.2f}  avg {result.avg:.2f}  max {result.max:.2f}",
        f"AAA {pct['aaa']:.1f}%  AA {pct['aa']:.1f}%  Fail {pct['fail']:.1f}%",
    ])


def suggestions_report(suggestions: Suggestions) -> str:
    """One line per suggestion, in the given order."""
    if not suggestions:
        return "No suggestions."

    lines = []
    for i, s in enumerate(suggestions, start=1):
        if isinstance(s, GradientSuggestion):
            flag = "  [guaranteed]" if s.guaranteed else ""
            lines.append(
                f"{i}. {s.css}  min {s.min_ratio:.2f}  ΔE {s.perceptual_distance:.1f}{flag}"
            )
        else:
            lines.append(
                f"{i}. {s.hex}  ratio {s.ratio:.2f}  ΔE {s.perceptual_distance:.1f}"
            )
    return "\n".join(lines)
