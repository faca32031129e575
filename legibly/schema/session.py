# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""Editing-session values: history snapshots and saved gradients."""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class HistoryEntry:
    """A committed {gradient, text color} pair."""
    gradient: str
    text_color: str

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"gradient": self.gradient, "text_color": self.text_color}

    @classmethod
    def from_dict(cls, data: dict) -> HistoryEntry:
        """Deserialize from dictionary."""
        return cls(gradient=data["gradient"], text_color=data["text_color"])


@dataclass(frozen=True, slots=True)
class SavedGradient:
    """
    A gradient/text color pair the user chose to keep.

    Attributes:
        gradient: CSS gradient string
        text_color: CSS color string
        pass_pct: Percent of samples at AA or better when saved (0-100)
        id: Stable identifier
    """
    gradient: str
    text_color: str
    pass_pct: int
    id: str = field(default_factory=lambda: uuid.uuid4().hex)

    def __post_init__(self) -> None:
        if not 0 <= self.pass_pct <= 100:
            raise ValueError(f"pass_pct must be 0-100, got {self.pass_pct}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "id": self.id,
            "gradient": self.gradient,
            "text_color": self.text_color,
            "pass_pct": self.pass_pct,
        }

    @classmethod
    def from_dict(cls, data: dict) -> SavedGradient:
        """Deserialize from dictionary."""
        return cls(
            id=data["id"],
            gradient=data["gradient"],
            text_color=data["text_color"],
            pass_pct=int(data["pass_pct"]),
        )
