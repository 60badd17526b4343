# transcript.py

from collections import deque
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

MAX_LINES = 20

@dataclass(frozen=True)
class TranscriptEntry:
    """
    A single rendered line of history.

    `style` names a color from the style definitions; None keeps the
    terminal's default color.
    """
    text: str
    style: Optional[str] = None


class Transcript:
    """
    Ordered, size-bounded log of prompt echoes and command results.

    Oldest entries sit at the front and are evicted one at a time once
    the log is full.
    """

    def __init__(self, max_lines: int = MAX_LINES):
        if max_lines < 1:
            raise ValueError(f"max_lines must be at least 1, got {max_lines}")
        self._max_lines = max_lines
        self._entries: deque[TranscriptEntry] = deque()

    @property
    def max_lines(self) -> int:
        return self._max_lines

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[TranscriptEntry]:
        return iter(tuple(self._entries))

    def append(self, entry: TranscriptEntry) -> Optional[TranscriptEntry]:
        """Add an entry at the end, returning the evicted entry if any."""
        evicted = None
        if len(self._entries) == self._max_lines:
            evicted = self._entries.popleft()
        self._entries.append(entry)
        return evicted

    def clear(self) -> None:
        """Drop every entry."""
        self._entries.clear()

    def entries(self) -> Tuple[TranscriptEntry, ...]:
        """Return a read-only snapshot in display order."""
        return tuple(self._entries)
