# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""Tests for schema value types."""

import json
from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from legibly.errors import InvalidConfigError
from legibly.schema import (
    ColorStop,
    ComplianceCategory,
    ContrastResult,
    GradientKind,
    GradientSpec,
    GradientSuggestion,
    HexColor,
    HslColor,
    NamedColor,
    RgbColor,
    SavedGradient,
    SuggestedColor,
    format_number,
    rating_label,
    rgb_to_hex,
)


def _spec(*stops, kind=GradientKind.LINEAR, **kwargs):
    return GradientSpec(
        kind=kind,
        stops=tuple(ColorStop(HexColor(c), p) for c, p in stops),
        **kwargs,
    )


class TestColorValues:

    def test_hex_normalized(self):
        assert HexColor("#ABC").value == "#abc"
        assert HexColor("abc").value == "#abc"

    def test_hex_invalid(self):
        with pytest.raises(ValueError):
            HexColor("#abcde")

    def test_rgb_range(self):
        with pytest.raises(ValueError):
            RgbColor(256, 0, 0)

    def test_rgb_css(self):
        assert RgbColor(255, 0, 0).to_css() == "rgb(255, 0, 0)"
        assert RgbColor(0, 0, 0, alpha=0.5).to_css() == "rgba(0, 0, 0, 0.5)"

    def test_hsl_hue_wraps(self):
        assert HslColor(370, 0.5, 0.5).h == pytest.approx(10.0)

    def test_hsl_css(self):
        assert HslColor(200, 0.5, 0.25).to_css() == "hsl(200, 50%, 25%)"

    def test_hsl_invalid_saturation(self):
        with pytest.raises(ValueError):
            HslColor(0, 1.5, 0.5)

    def test_named_unknown(self):
        with pytest.raises(ValueError):
            NamedColor("blurple")

    def test_frozen(self):
        color = HexColor("#fff")
        with pytest.raises(FrozenInstanceError):
            color.value = "#000"

    def test_rgb_to_hex(self):
        assert rgb_to_hex((255, 128.4, 0)) == "#ff8000"
        assert rgb_to_hex((300, -1, 15)) == "#ff000f"

    def test_rgb_to_hex_rounds_half_up(self):
        assert rgb_to_hex((255, 178.5, 178.5)) == "#ffb3b3"
        assert rgb_to_hex((0.5, 2.5, 254.5)) == "#0103ff"


class TestFormatNumber:

    @pytest.mark.parametrize("value,expected", [
        (50.0, "50"),
        (12.5, "12.5"),
        (-0.0, "0"),
        (1 / 3, "0.3333"),
        (100, "100"),
    ])
    def test_format(self, value, expected):
        assert format_number(value) == expected


class TestGradientSpec:

    def test_needs_two_stops(self):
        with pytest.raises(InvalidConfigError):
            _spec(("#fff", 0))

    def test_stops_sorted(self):
        spec = _spec(("#fff", 80), ("#000", 10))
        assert [s.position for s in spec.stops] == [10.0, 80.0]

    def test_positions_clamped(self):
        assert ColorStop(HexColor("#fff"), 150).position == 100.0
        assert ColorStop(HexColor("#fff"), -3).position == 0.0

    def test_nan_position(self):
        with pytest.raises(ValueError):
            ColorStop(HexColor("#fff"), float("nan"))

    def test_with_stops_resorts(self):
        spec = _spec(("#fff", 0), ("#000", 100))
        swapped = spec.with_stops([ColorStop(HexColor("#111"), 90), ColorStop(HexColor("#222"), 5)])
        assert swapped.stops[0].color == HexColor("#222")
        assert swapped.angle == spec.angle

    def test_to_css(self):
        spec = _spec(("#fff", 0), ("#000", 100), angle=90)
        assert spec.to_css() == "linear-gradient(90deg, #fff 0%, #000 100%)"

    def test_dict_roundtrip(self):
        spec = _spec(("#fff", 0), ("#000", 50), ("#f00", 100), kind=GradientKind.RADIAL, shape="circle")
        assert GradientSpec.from_dict(spec.to_dict()) == spec

    def test_dict_json_serializable(self):
        spec = _spec(("#fff", 0), ("#000", 100))
        data = json.loads(json.dumps(spec.to_dict()))
        assert data["kind"] == "linear-gradient"
        assert data["angle"] == 135.0


class TestComplianceCategory:

    @pytest.mark.parametrize("ratio,expected", [
        (1.0, ComplianceCategory.FAIL),
        (4.49, ComplianceCategory.FAIL),
        (4.5, ComplianceCategory.AA),
        (6.99, ComplianceCategory.AA),
        (7.0, ComplianceCategory.AAA),
        (21.0, ComplianceCategory.AAA),
    ])
    def test_from_ratio(self, ratio, expected):
        assert ComplianceCategory.from_ratio(ratio) == expected

    def test_monotonic(self):
        cats = [ComplianceCategory.from_ratio(r) for r in np.linspace(1, 21, 200)]
        assert cats == sorted(cats)

    @pytest.mark.parametrize("pct,label", [(100, "Good"), (80, "Good"), (79.9, "Fair"), (40, "Fair"), (39, "Poor"), (0, "Poor")])
    def test_rating_label(self, pct, label):
        assert rating_label(pct) == label


class TestContrastResult:

    def _result(self, **overrides):
        fields = dict(
            min=2.0, max=9.0, avg=5.0, grid=2,
            aaa_count=1, aa_count=1, fail_count=2,
            category_map=np.array([2, 1, 0, 0], dtype=np.uint8),
        )
        fields.update(overrides)
        return ContrastResult(**fields)

    def test_pass_rate(self):
        result = self._result()
        assert result.pass_rate == 0.5
        assert result.rating == "Fair"

    def test_percentages(self):
        assert self._result().percentages() == {"aaa": 25.0, "aa": 25.0, "fail": 50.0}

    def test_counts_must_sum(self):
        with pytest.raises(ValueError):
            self._result(fail_count=1)

    def test_map_size_checked(self):
        with pytest.raises(ValueError):
            self._result(category_map=np.zeros(3, dtype=np.uint8))

    def test_map_read_only(self):
        result = self._result()
        with pytest.raises(ValueError):
            result.category_map[0] = 0

    def test_category_at(self):
        result = self._result()
        assert result.category_at(0, 0) == ComplianceCategory.AAA
        assert result.category_at(1, 1) == ComplianceCategory.FAIL
        with pytest.raises(IndexError):
            result.category_at(2, 0)

    def test_dict_roundtrip(self):
        result = self._result()
        restored = ContrastResult.from_dict(result.to_dict())
        assert restored == result
        np.testing.assert_array_equal(restored.category_map, result.category_map)

    def test_json_without_map(self):
        data = json.loads(self._result().to_json(include_map=False))
        assert "category_map" not in data
        assert data["pass_rate"] == 0.5


class TestSuggestions:

    def test_suggested_color_roundtrip(self):
        s = SuggestedColor(hex="#ffffff", ratio=12.5, perceptual_distance=3.0)
        assert SuggestedColor.from_dict(s.to_dict()) == s

    def test_gradient_suggestion(self):
        spec = _spec(("#000000", 0), ("#111111", 100))
        s = GradientSuggestion(spec=spec, min_ratio=18.0, perceptual_distance=4.0, guaranteed=True)
        assert s.css == "linear-gradient(135deg, #000000 0%, #111111 100%)"
        assert s.passes_aa
        assert GradientSuggestion.from_dict(s.to_dict()) == s


class TestSavedGradient:

    def test_generates_id(self):
        a = SavedGradient(gradient="linear-gradient(red, blue)", text_color="#fff", pass_pct=50)
        b = SavedGradient(gradient="linear-gradient(red, blue)", text_color="#fff", pass_pct=50)
        assert a.id != b.id

    def test_pass_pct_range(self):
        with pytest.raises(ValueError):
            SavedGradient(gradient="x", text_color="#fff", pass_pct=101)

    def test_dict_roundtrip(self):
        saved = SavedGradient(gradient="linear-gradient(red, blue)", text_color="#fff", pass_pct=73)
        assert SavedGradient.from_dict(saved.to_dict()) == saved
