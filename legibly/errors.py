# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""
Error taxonomy.

All failures in the engines are local and synchronous. None of them is
retryable: the same input always fails the same way.
"""

from __future__ import annotations


class LegiblyError(Exception):
    """Base class for every error raised by legibly."""


class ParseError(LegiblyError, ValueError):
    """A gradient string is malformed or names an unsupported gradient kind."""


class ColorParseError(ParseError):
    """A color string (stop or text color) cannot be resolved to sRGB."""


class InvalidConfigError(LegiblyError, ValueError):
    """Bad engine input: non-positive grid, too few stops, unresolvable text color."""


class UnsupportedGradientError(LegiblyError, NotImplementedError):
    """The rasterizer has no sampling model for this gradient kind."""
