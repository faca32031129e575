# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""
Runtime layer for Legibly.

Session state and delivery around the measurement core:

1. History -- undo/redo over committed {gradient, text color} pairs
2. Storage -- saved gradients in memory or in a JSON file
3. Serializers -- JSON, text reports and overlay images

Nothing here changes measurement results.
"""

from legibly.runtime.history import History
from legibly.runtime.serializers import (
    SerializerFormat,
    overlay_array,
    render_overlay,
    suggestions_report,
    to_json,
    to_report,
)
from legibly.runtime.storage import (
    MAX_SAVED,
    GradientStore,
    JsonFileStore,
    MemoryStore,
    default_store_path,
    remove_entry,
    save_entry,
)

__all__ = [
    "History",
    "GradientStore",
    "JsonFileStore",
    "MemoryStore",
    "MAX_SAVED",
    "default_store_path",
    "save_entry",
    "remove_entry",
    "SerializerFormat",
    "to_json",
    "to_report",
    "suggestions_report",
    "overlay_array",
    "render_overlay",
]
