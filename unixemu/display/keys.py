# display/keys.py

import codecs
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Deque

from prompt_toolkit.input.ansi_escape_sequences import ANSI_SEQUENCES
from prompt_toolkit.input.vt100_parser import Vt100Parser
from prompt_toolkit.key_binding.key_processor import KeyPress
from prompt_toolkit.keys import Keys


class KeyKind(Enum):
    CHARACTER = "character"
    BACKSPACE = "backspace"
    ENTER = "enter"
    ESCAPE = "escape"
    OTHER = "other"


@dataclass(frozen=True)
class KeyEvent:
    """A single keystroke as the session sees it."""
    kind: KeyKind
    char: str = ""

    @classmethod
    def character(cls, char: str) -> "KeyEvent":
        return cls(KeyKind.CHARACTER, char)


ENTER_KEYS = (Keys.Enter, Keys.ControlJ)

def is_sequence_prefix(text: str) -> bool:
    """Whether text is the start of a longer known escape sequence."""
    return bool(text) and any(
        sequence != text and sequence.startswith(text) for sequence in ANSI_SEQUENCES
    )


def classify(key_press: KeyPress) -> KeyEvent:
    """Map a prompt_toolkit key press to the shell's key event."""
    key = key_press.key
    if not isinstance(key, Keys):
        # Plain text arrives as the character itself
        return KeyEvent.character(key)
    if key in ENTER_KEYS:
        return KeyEvent(KeyKind.ENTER)
    if key == Keys.Backspace:
        return KeyEvent(KeyKind.BACKSPACE)
    if key == Keys.Escape:
        return KeyEvent(KeyKind.ESCAPE)
    return KeyEvent(KeyKind.OTHER, key_press.data)


class KeyDecoder:
    """
    Incrementally decodes raw terminal bytes into key events.

    Bytes go through an incremental UTF-8 decoder first, so a character
    split across reads is held back until it is complete. Input is flushed
    through the VT100 parser unless it ends partway into an escape
    sequence; in that case the caller waits briefly for the rest and calls
    flush() if nothing comes, which is what turns a lone ESC byte into the
    escape key.
    """

    def __init__(self):
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._pending: Deque[KeyEvent] = deque()
        self._parser = Vt100Parser(self._on_key_press)
        self._sequence = ""

    def _on_key_press(self, key_press: KeyPress) -> None:
        self._pending.append(classify(key_press))

    @property
    def awaiting_sequence(self) -> bool:
        """True when the input so far ends in an incomplete escape sequence."""
        return bool(self._sequence)

    def feed(self, data: bytes) -> None:
        text = self._decoder.decode(data)
        if not text:
            return
        self._parser.feed(text)

        tail = self._sequence + text
        start = tail.rfind("\x1b")
        tail = tail[start:] if start >= 0 else ""
        if is_sequence_prefix(tail):
            self._sequence = tail
        else:
            self.flush()

    def flush(self) -> None:
        """Emit whatever the parser is holding back."""
        self._sequence = ""
        self._parser.flush()

    def has_pending(self) -> bool:
        return bool(self._pending)

    def next_event(self) -> KeyEvent:
        """Pop the oldest decoded event. Raises IndexError when none is queued."""
        return self._pending.popleft()
