# test_transcript.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from unixemu.transcript import MAX_LINES, Transcript, TranscriptEntry


def entry(n: int) -> TranscriptEntry:
    return TranscriptEntry(f"line {n}")


class TestTranscript:
    """Tests for the bounded transcript log."""

    def setup_method(self):
        self.transcript = Transcript()

    def test_default_capacity(self):
        assert MAX_LINES == 20
        assert self.transcript.max_lines == 20

    def test_rejects_non_positive_capacity(self):
        with pytest.raises(ValueError):
            Transcript(0)

    def test_append_keeps_order(self):
        for n in range(3):
            assert self.transcript.append(entry(n)) is None
        assert [e.text for e in self.transcript.entries()] == ["line 0", "line 1", "line 2"]

    def test_append_at_capacity_evicts_oldest(self):
        transcript = Transcript(3)
        for n in range(3):
            transcript.append(entry(n))
        evicted = transcript.append(entry(3))
        assert evicted == entry(0)
        assert [e.text for e in transcript] == ["line 1", "line 2", "line 3"]

    def test_length_never_exceeds_capacity(self):
        for n in range(100):
            self.transcript.append(entry(n))
            assert len(self.transcript) <= MAX_LINES
        texts = [e.text for e in self.transcript.entries()]
        assert texts == [f"line {n}" for n in range(80, 100)]

    def test_clear_empties_transcript(self):
        for n in range(5):
            self.transcript.append(entry(n))
        self.transcript.clear()
        assert len(self.transcript) == 0
        assert self.transcript.entries() == ()

    def test_clear_on_empty_transcript_is_equivalent(self):
        self.transcript.clear()
        assert self.transcript.entries() == ()

    def test_entries_is_a_snapshot(self):
        self.transcript.append(entry(1))
        snapshot = self.transcript.entries()
        self.transcript.append(entry(2))
        assert snapshot == (entry(1),)

    def test_entries_are_immutable(self):
        e = TranscriptEntry("hello", "GREEN")
        with pytest.raises(AttributeError):
            e.text = "changed"
