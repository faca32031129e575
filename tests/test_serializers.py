# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""Tests for the runtime serializers (JSON, text report, overlay)."""

import json

import numpy as np
import pytest

from legibly.measure import check_gradient, suggest_gradient_fixes, suggest_text_colors
from legibly.runtime import (
    SerializerFormat,
    overlay_array,
    render_overlay,
    suggestions_report,
    to_json,
    to_report,
)
from legibly.runtime.serializers.overlay import OVERLAY_COLORS
from legibly.schema import ComplianceCategory


def _mixed_result(grid=10):
    return check_gradient("linear-gradient(#000000 0%, #ffffff 100%)", "#777777", grid=grid)


class TestToJson:

    def test_result_pretty(self):
        result = _mixed_result()
        output = to_json(result)
        data = json.loads(output)
        assert "\n" in output
        assert data["grid"] == 10
        assert len(data["category_map"]) == 100
        assert data["pass_rate"] == result.pass_rate

    def test_result_compact(self):
        output = to_json(_mixed_result(), format=SerializerFormat.JSON)
        assert "\n" not in output
        assert ", " not in output

    def test_without_map(self):
        data = json.loads(to_json(_mixed_result(), include_map=False))
        assert "category_map" not in data

    def test_suggestion_list(self):
        suggestions = suggest_text_colors("linear-gradient(#ff9a9e 0%, #fad0c4 100%)", count=3)
        data = json.loads(to_json(suggestions))
        assert [d["hex"] for d in data] == [s.hex for s in suggestions]

    def test_gradient_suggestions(self):
        fixes = suggest_gradient_fixes("linear-gradient(#ffffff 0%, #ffffff 100%)", "#ffffff", grid=50)
        data = json.loads(to_json(fixes))
        assert data[0]["guaranteed"] is True
        assert data[0]["css"] == fixes[0].css

    def test_formats_are_json_only(self):
        assert {f.value for f in SerializerFormat} == {"json", "json_pretty"}


class TestReports:

    def test_report_lines(self):
        report = to_report(check_gradient("linear-gradient(#000 0%, #000 100%)", "#fff", grid=10))
        lines = report.splitlines()
        assert lines[0] == "Rating: Good (100% of samples pass AA)"
        assert lines[1] == "Contrast: min 21.00  avg 21.00  max 21.00"
        assert lines[2] == "AAA 100.0%  AA 0.0%  Fail 0.0%"

    def test_suggestions_report_empty(self):
        assert suggestions_report([]) == "No suggestions."

    def test_suggestions_report_flags_guaranteed(self):
        fixes = suggest_gradient_fixes("linear-gradient(#ffffff 0%, #ffffff 100%)", "#ffffff", grid=50)
        first = suggestions_report(fixes).splitlines()[0]
        assert first.startswith("1. ")
        assert first.endswith("[guaranteed]")


class TestOverlay:

    def test_overlay_array_colors(self):
        result = _mixed_result()
        rgba = overlay_array(result)
        assert rgba.shape == (10, 10, 4)
        for row, col in [(0, 0), (5, 5), (9, 9)]:
            expected = OVERLAY_COLORS[result.category_at(row, col)]
            np.testing.assert_array_equal(rgba[row, col], expected)

    def test_fail_is_red(self):
        assert tuple(OVERLAY_COLORS[ComplianceCategory.FAIL][:3]) == (239, 68, 68)

    def test_render_overlay(self):
        pytest.importorskip("PIL")
        result = _mixed_result()
        img = render_overlay(result, scale=3)
        assert img.mode == "RGBA"
        assert img.size == (30, 30)
        assert img.getpixel((0, 0)) == tuple(OVERLAY_COLORS[result.category_at(0, 0)])

    def test_render_overlay_bad_scale(self):
        with pytest.raises(ValueError):
            render_overlay(_mixed_result(), scale=0)
