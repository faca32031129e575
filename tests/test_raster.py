# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""Tests for the software rasterizer."""

import numpy as np
import pytest

from legibly.errors import InvalidConfigError, UnsupportedGradientError
from legibly.measure.parser import parse_gradient
from legibly.measure.raster import (
    DEFAULT_GRID,
    GRID_MAX,
    GRID_MIN,
    interpolate_stops,
    rasterize,
    validate_grid,
)


class TestValidateGrid:

    def test_accepts_positive(self):
        assert validate_grid(10) == 10

    @pytest.mark.parametrize("grid", [0, -1, 2.5, "10", True])
    def test_rejects_invalid(self, grid):
        with pytest.raises(InvalidConfigError):
            validate_grid(grid)

    def test_strict_range(self):
        assert validate_grid(GRID_MIN, strict=True) == GRID_MIN
        assert validate_grid(GRID_MAX, strict=True) == GRID_MAX
        with pytest.raises(InvalidConfigError):
            validate_grid(GRID_MIN - 1, strict=True)
        with pytest.raises(InvalidConfigError):
            validate_grid(GRID_MAX + 1, strict=True)

    def test_non_strict_allows_small(self):
        assert validate_grid(2) == 2


class TestRasterize:

    def test_default_shape(self):
        raster = rasterize(parse_gradient("linear-gradient(red, blue)"))
        assert raster.shape == (DEFAULT_GRID, DEFAULT_GRID, 3)
        assert raster.dtype == np.uint8

    def test_solid(self):
        raster = rasterize(parse_gradient("linear-gradient(#336699 0%, #336699 100%)"), 8)
        assert np.all(raster == np.array([0x33, 0x66, 0x99], dtype=np.uint8))

    def test_linear_diagonal(self):
        raster = rasterize(parse_gradient("linear-gradient(#000 0%, #fff 100%)"), 2)
        # pixel centers project to t = 0.25, 0.5, 0.75
        assert raster[0, 0, 0] == 64
        assert raster[0, 1, 0] == 128
        assert raster[1, 0, 0] == 128
        assert raster[1, 1, 0] == 191

    def test_rounds_half_up(self):
        raster = rasterize(parse_gradient("linear-gradient(#000000 0%, #020202 100%)"), 2)
        assert raster[0, 0, 0] == 1
        assert raster[0, 1, 0] == 1
        assert raster[1, 1, 0] == 2

    def test_angle_ignored(self):
        a = rasterize(parse_gradient("linear-gradient(0deg, red, blue)"), 20)
        b = rasterize(parse_gradient("linear-gradient(270deg, red, blue)"), 20)
        np.testing.assert_array_equal(a, b)

    def test_radial_center_takes_first_stop(self):
        raster = rasterize(parse_gradient("radial-gradient(#000 0%, #fff 100%)"), 3)
        assert tuple(raster[1, 1]) == (0, 0, 0)
        corners = [raster[0, 0, 0], raster[0, 2, 0], raster[2, 0, 0], raster[2, 2, 0]]
        assert len(set(corners)) == 1
        assert raster[0, 0, 0] > raster[0, 1, 0] > 0

    def test_radial_symmetric(self):
        raster = rasterize(parse_gradient("radial-gradient(red, yellow, blue)"), 11)
        values = raster.astype(int)
        np.testing.assert_allclose(values, values[::-1, :], atol=1)
        np.testing.assert_allclose(values, values[:, ::-1], atol=1)

    def test_hard_stop_later_wins(self):
        raster = rasterize(parse_gradient("linear-gradient(#ff0000 50%, #0000ff 50%)"), 2)
        assert tuple(raster[0, 0]) == (255, 0, 0)
        assert tuple(raster[0, 1]) == (0, 0, 255)
        assert tuple(raster[1, 1]) == (0, 0, 255)

    def test_invalid_grid(self):
        spec = parse_gradient("linear-gradient(red, blue)")
        with pytest.raises(InvalidConfigError):
            rasterize(spec, 0)

    def test_unsupported_kind(self):
        spec = parse_gradient("linear-gradient(red, blue)")
        fake = type("FakeSpec", (), {"kind": "conic", "stops": spec.stops})()
        with pytest.raises(UnsupportedGradientError):
            rasterize(fake, 4)


class TestInterpolateStops:

    def test_before_and_after_stops(self):
        spec = parse_gradient("linear-gradient(#ff0000 40%, #0000ff 60%)")
        colors = interpolate_stops(spec, np.array([0.0, 0.5, 1.0]))
        np.testing.assert_allclose(colors[0], [255, 0, 0])
        np.testing.assert_allclose(colors[1], [127.5, 0, 127.5])
        np.testing.assert_allclose(colors[2], [0, 0, 255])

    def test_three_stops(self):
        spec = parse_gradient("linear-gradient(#000 0%, #fff 50%, #000 100%)")
        colors = interpolate_stops(spec, np.array([0.25, 0.5, 0.75]))
        np.testing.assert_allclose(colors[:, 0], [127.5, 255.0, 127.5])
