# display/renderer.py

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Tuple

from rich.cells import cell_len
from rich.text import Text

from ..transcript import TranscriptEntry
from .style import DisplayStyle

TITLE = "Welcome to the Unix Emulator"
SEPARATOR = "-" * 30
PROMPT_PREFIX = "> "
TRANSCRIPT_TOP = 2

# C0 controls and DEL in caret notation; tabs are expanded separately
CONTROL_CHARACTERS = {code: f"^{chr(code + 64)}" for code in range(32) if code != 9}
CONTROL_CHARACTERS[127] = "^?"

@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""

    columns: int
    lines: int


@dataclass(frozen=True)
class FrameRow:
    row: int
    text: Text

    @property
    def plain(self) -> str:
        return self.text.plain


@dataclass
class Frame:
    """A complete screen: positioned rows plus where the cursor ends up."""
    rows: List[FrameRow] = field(default_factory=list)
    cursor: Tuple[int, int] = (0, 0)

    def lines(self) -> List[str]:
        """Plain text of every row, top to bottom."""
        return [r.plain for r in self.rows]


def format_prompt(cwd: str, text: str = "") -> str:
    """Build a prompt line, used both live and when echoing a submission."""
    return f"{PROMPT_PREFIX}{cwd} {text}"

def flatten(text: str) -> str:
    """Fit multi-line output on one row: drop trailing newlines, join the rest with two spaces."""
    return "  ".join(text.rstrip("\n").splitlines())

def visible(text: str) -> str:
    """Replace control characters so nothing but printable text reaches the terminal."""
    return text.translate(CONTROL_CHARACTERS)


class Renderer:
    """
    Builds a full-screen frame from the current session state.

    The layout is fixed by row: title, separator, one row per transcript
    entry, then the live prompt directly beneath the last entry. When the
    terminal is too short for every entry, the oldest ones are left off so
    the prompt stays on the last line. Nothing is remembered between calls;
    every frame is drawn from scratch.
    """

    def __init__(self, style: DisplayStyle):
        self.style = style

    def _row(self, row: int, text: str, style_name: Optional[str], width: int) -> FrameRow:
        styled = self.style.stylize(visible(text), style_name)
        # Tabs must be expanded before cropping or the row grows past the width
        styled.expand_tabs()
        styled.truncate(max(width, 0), overflow="crop")
        return FrameRow(row, styled)

    def render(self, entries: Iterable[TranscriptEntry], input_text: str,
               cwd: str, size: TerminalSize) -> Frame:
        width = size.columns
        rows = [
            self._row(0, TITLE, 'GREEN', width),
            self._row(1, SEPARATOR, None, width),
        ]

        entries = list(entries)
        room = max(size.lines - TRANSCRIPT_TOP - 1, 0)
        if len(entries) > room:
            entries = entries[len(entries) - room:]

        row = TRANSCRIPT_TOP
        for entry in entries:
            rows.append(self._row(row, flatten(entry.text), entry.style, width))
            row += 1

        # The prompt row is recomputed from the entry count on every frame
        prompt = format_prompt(cwd, input_text)
        rows.append(self._row(row, prompt, 'CYAN', width))

        column = min(cell_len(visible(prompt).expandtabs()), max(width - 1, 0))
        return Frame(rows=rows, cursor=(row, column))
