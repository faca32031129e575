# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""
Persistence for saved gradients.

A store only needs `load()` and `save(items)`. The JSON file store keeps
the most recent MAX_SAVED entries; a missing or unreadable file loads as
an empty list so a damaged store never blocks the caller.
"""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional, Protocol, Union

from legibly.schema import SavedGradient

logger = logging.getLogger(__name__)

MAX_SAVED = 50
STORE_ENV_VAR = "LEGIBLY_STORE"


def default_store_path() -> Path:
    """$LEGIBLY_STORE if set, else ~/.legibly/saved.json."""
    env = os.environ.get(STORE_ENV_VAR)
    if env:
        return Path(env).expanduser()
    return Path.home() / ".legibly" / "saved.json"


class GradientStore(Protocol):
    """Anything that can load and save the saved-gradient list."""

    def load(self) -> list[SavedGradient]:
        ...

    def save(self, items: list[SavedGradient]) -> None:
        ...


class MemoryStore:
    """In-process store, mainly for tests and embedding."""

    def __init__(self, items: Optional[list[SavedGradient]] = None) -> None:
        self._items = list(items or [])[:MAX_SAVED]

    def load(self) -> list[SavedGradient]:
        return list(self._items)

    def save(self, items: list[SavedGradient]) -> None:
        self._items = list(items)[:MAX_SAVED]


class JsonFileStore:
    """
    Store backed by a JSON array on disk.

    Args:
        path: File location; defaults to default_store_path()
    """

    def __init__(self, path: Union[str, Path, None] = None) -> None:
        self.path = Path(path) if path is not None else default_store_path()

    def load(self) -> list[SavedGradient]:
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return []
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable store %s: %s", self.path, e)
            return []
        if not isinstance(raw, list):
            logger.warning("Ignoring store %s: expected a JSON array", self.path)
            return []

        items = []
        for record in raw:
            try:
                items.append(SavedGradient.from_dict(record))
            except (KeyError, TypeError, ValueError) as e:
                logger.debug("Skipping malformed saved entry %r: %s", record, e)
        return items[:MAX_SAVED]

    def save(self, items: list[SavedGradient]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = [item.to_dict() for item in items[:MAX_SAVED]]
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")


def save_entry(store: GradientStore, entry: SavedGradient) -> list[SavedGradient]:
    """
    Put entry first, dropping any older entry for the same gradient and text
    color, and persist the capped list.

    Returns:
        The list as saved
    """
    items = [entry] + [
        item for item in store.load()
        if not (item.gradient == entry.gradient and item.text_color == entry.text_color)
    ]
    items = items[:MAX_SAVED]
    store.save(items)
    return items


def remove_entry(store: GradientStore, entry_id: str) -> bool:
    """Delete the entry with the given id. Returns False if none matched."""
    items = store.load()
    kept = [item for item in items if item.id != entry_id]
    if len(kept) == len(items):
        return False
    store.save(kept)
    return True
