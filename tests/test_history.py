# Copyright (c) 2026 Legibly
# SPDX-License-Identifier: MIT

"""Tests for undo/redo history."""

from legibly.runtime.history import History
from legibly.schema import HistoryEntry

A = HistoryEntry(gradient="linear-gradient(red, blue)", text_color="#ffffff")
B = HistoryEntry(gradient="linear-gradient(red, green)", text_color="#ffffff")
C = HistoryEntry(gradient="linear-gradient(red, green)", text_color="#000000")


class TestHistory:

    def test_start(self):
        h = History.start(A.gradient, A.text_color)
        assert h.present == A
        assert not h.can_undo
        assert not h.can_redo

    def test_record_same_state_is_noop(self):
        h = History(present=A)
        assert h.record(HistoryEntry(A.gradient, A.text_color)) is h

    def test_record_pushes_past(self):
        h = History(present=A).record(B).record(C)
        assert h.present == C
        assert h.past == (A, B)

    def test_text_color_change_counts(self):
        h = History(present=B).record(C)
        assert h.past == (B,)

    def test_undo_redo(self):
        h = History(present=A).record(B).record(C)
        h = h.undo()
        assert h.present == B
        assert h.future == (C,)
        h = h.undo()
        assert h.present == A
        assert h.future == (B, C)
        h = h.redo()
        assert h.present == B
        assert h.past == (A,)
        assert h.future == (C,)

    def test_record_clears_future(self):
        h = History(present=A).record(B).undo().record(C)
        assert h.present == C
        assert h.past == (A,)
        assert h.future == ()

    def test_undo_redo_on_empty(self):
        h = History(present=A)
        assert h.undo() is h
        assert h.redo() is h

    def test_immutable(self):
        h = History(present=A)
        h.record(B)
        assert h.present == A
        assert h.past == ()
