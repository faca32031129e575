# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""
Undo/redo history for an editing session.

History is a value: every operation returns a new History and leaves the
old one untouched. Recording a snapshot that equals the present is a no-op,
so repeated commits of the same state do not grow the undo stack.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from legibly.schema import HistoryEntry


@dataclass(frozen=True, slots=True)
class History:
    """
    Past, present and future snapshots.

    Attributes:
        present: The current {gradient, text color} pair
        past: Older snapshots, oldest first
        future: Undone snapshots, next redo first
    """
    present: HistoryEntry
    past: tuple[HistoryEntry, ...] = ()
    future: tuple[HistoryEntry, ...] = ()

    @classmethod
    def start(cls, gradient: str, text_color: str) -> History:
        return cls(present=HistoryEntry(gradient=gradient, text_color=text_color))

    @property
    def can_undo(self) -> bool:
        return bool(self.past)

    @property
    def can_redo(self) -> bool:
        return bool(self.future)

    def record(self, entry: HistoryEntry) -> History:
        """Commit a new present. Clears the redo stack when the state changes."""
        if entry == self.present:
            return self
        return History(present=entry, past=self.past + (self.present,), future=())

    def undo(self) -> History:
        if not self.past:
            return self
        return replace(
            self,
            present=self.past[-1],
            past=self.past[:-1],
            future=(self.present,) + self.future,
        )

    def redo(self) -> History:
        if not self.future:
            return self
        return replace(
            self,
            present=self.future[0],
            past=self.past + (self.present,),
            future=self.future[1:],
        )
