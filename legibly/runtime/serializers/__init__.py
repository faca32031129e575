# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""
Serializers for analysis and suggestion results.

All serializers preserve the results exactly -- no recomputation.
"""

from legibly.runtime.serializers.base import SerializerFormat
from legibly.runtime.serializers.overlay import overlay_array, render_overlay
from legibly.runtime.serializers.report import suggestions_report, to_json, to_report

__all__ = [
    "SerializerFormat",
    "to_json",
    "to_report",
    "suggestions_report",
    "overlay_array",
    "render_overlay",
]
